import random
from collections import deque

import pytest

from gridsnake.config import COLS, ROWS, START_POS
from gridsnake.model import (
    ALL_DIRS, ATE_FOOD, ATE_ITSELF,
    Direction, Food, GridPosition, Segment, Snake,
)


def make_snake(head, body, direction=Direction.RIGHT):
    snake = Snake(head)
    snake.body = deque(Segment(pos) for pos in body)
    snake.dir = snake.last_update_dir = direction
    return snake


# ── GridPosition ─────────────────────────────────────────────────
def test_wrapped_move_left_from_zero_reenters_on_right():
    assert GridPosition.wrapped_move(GridPosition(0, 5), Direction.LEFT) == (COLS - 1, 5)


def test_wrapped_move_up_from_zero_reenters_at_bottom():
    assert GridPosition.wrapped_move(GridPosition(4, 0), Direction.UP) == (4, ROWS - 1)


def test_wrapped_move_respects_custom_grid():
    assert GridPosition.wrapped_move(GridPosition(2, 1), Direction.RIGHT, 3, 2) == (0, 1)


@pytest.mark.parametrize("direction", ALL_DIRS)
def test_full_traversal_wraps_exactly_once(direction):
    start = GridPosition(3, 4)
    steps = COLS if direction.x else ROWS
    pos = start
    for i in range(steps):
        pos = GridPosition.wrapped_move(pos, direction)
        if i < steps - 1:
            assert pos != start
    assert pos == start


def test_random_positions_stay_in_range():
    rng = random.Random(7)
    for _ in range(1000):
        pos = GridPosition.random(COLS, ROWS, rng)
        assert 0 <= pos.x < COLS
        assert 0 <= pos.y < ROWS


def test_random_is_reproducible_with_seed():
    first = [GridPosition.random(COLS, ROWS, random.Random(42)) for _ in range(3)]
    second = [GridPosition.random(COLS, ROWS, random.Random(42)) for _ in range(3)]
    assert first == second


# ── Direction ────────────────────────────────────────────────────
@pytest.mark.parametrize("direction", ALL_DIRS)
def test_inverse_is_an_involution(direction):
    assert direction.inverse().inverse() == direction
    assert direction.inverse() != direction


def test_inverse_pairs():
    assert Direction.UP.inverse() == Direction.DOWN
    assert Direction.LEFT.inverse() == Direction.RIGHT


def test_from_input_maps_arrow_names():
    assert Direction.from_input("up") == Direction.UP
    assert Direction.from_input("down") == Direction.DOWN
    assert Direction.from_input("left") == Direction.LEFT
    assert Direction.from_input("right") == Direction.RIGHT


@pytest.mark.parametrize("code", ["a", "space", "", None])
def test_from_input_ignores_other_codes(code):
    assert Direction.from_input(code) is None


# ── Snake ────────────────────────────────────────────────────────
def test_new_snake_layout():
    snake = Snake(GridPosition(*START_POS))
    x, y = START_POS
    assert snake.head.pos == (x, y)
    assert [seg.pos for seg in snake.body] == [(x - 1, y)]
    assert snake.dir == Direction.RIGHT
    assert snake.next_dir is None
    assert snake.ate is None
    assert len(snake) == 2


def test_tick_without_food_translates():
    x, y = START_POS
    snake = Snake(GridPosition(x, y))
    snake.update(Food((0, 0)))

    assert snake.head.pos == (x + 1, y)
    assert [seg.pos for seg in snake.body] == [(x, y)]
    assert len(snake) == 2
    assert snake.ate is None


def test_eating_food_grows_without_trimming_tail():
    x, y = START_POS
    snake = Snake(GridPosition(x, y))
    snake.update(Food((x + 1, y)))

    assert snake.ate == ATE_FOOD
    assert len(snake) == 3
    assert [seg.pos for seg in snake.body] == [(x, y), (x - 1, y)]


def test_self_collision_beats_food():
    snake = make_snake((5, 5), [(5, 6), (6, 6), (6, 5), (6, 4)])
    snake.update(Food((6, 5)))

    assert snake.head.pos == (6, 5)
    assert snake.ate == ATE_ITSELF
    # old head pushed, tail kept
    assert len(snake.body) == 5


def test_collision_with_former_head_position_counts():
    snake = make_snake((1, 1), [(2, 1)], direction=Direction.RIGHT)
    snake.update(Food((9, 9)))
    assert snake.ate == ATE_ITSELF


def test_snake_wraps_over_edge():
    snake = make_snake((COLS - 1, 3), [(COLS - 2, 3)])
    snake.update(Food((0, 0)))
    assert snake.head.pos == (0, 3)
    assert [seg.pos for seg in snake.body] == [(COLS - 1, 3)]


def test_outcome_is_overwritten_every_tick():
    x, y = START_POS
    snake = Snake(GridPosition(x, y))
    snake.update(Food((x + 1, y)))
    assert snake.ate == ATE_FOOD
    snake.update(Food((0, 0)))
    assert snake.ate is None


def test_buffered_turn_commits_after_pending_one():
    x, y = START_POS
    snake = Snake(GridPosition(x, y))
    snake.dir = Direction.UP
    snake.next_dir = Direction.LEFT
    food = Food((0, 0))

    snake.update(food)
    assert snake.head.pos == (x, y - 1)
    assert snake.dir == Direction.UP
    assert snake.next_dir == Direction.LEFT
    assert snake.last_update_dir == Direction.UP

    snake.update(food)
    assert snake.head.pos == (x - 1, y - 1)
    assert snake.dir == Direction.LEFT
    assert snake.next_dir is None
    assert snake.ate is None


def test_positions_head_first():
    snake = make_snake((3, 3), [(2, 3), (1, 3)])
    assert snake.positions() == [(3, 3), (2, 3), (1, 3)]
