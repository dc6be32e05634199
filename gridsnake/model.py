"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    GridPosition — immutable (x, y) cell on the wrapped grid
    Direction    — immutable (dx, dy) value object
    Segment      — one cell of the snake's body
    Food         — the single active piece of food
    Snake        — head, body, current/pending direction, last outcome
    GameState    — top-level model; owns the snake and food, runs the
                   fixed-timestep update and restarts after game over
"""

import logging
import random
import time
from collections import deque
from typing import NamedTuple, Optional

from .config import COLS, ROWS, START_POS, UPDATE_INTERVAL
from .interfaces import Snapshot

logger = logging.getLogger(__name__)

# What the snake ran into during its last update. ``None`` means nothing.
ATE_FOOD   = "food"
ATE_ITSELF = "itself"


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction. Y grows downwards."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def inverse(self) -> "Direction":
        return Direction(-self.x, -self.y)

    @classmethod
    def from_input(cls, code) -> Optional["Direction"]:
        """Map an input code ("up", "left", ...) to a Direction, or None."""
        return _INPUT_CODES.get(code)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]

_INPUT_CODES = {
    "up":    Direction.UP,
    "down":  Direction.DOWN,
    "left":  Direction.LEFT,
    "right": Direction.RIGHT,
}


# ───────────────────────── GridPosition ──────────────────────────
class GridPosition(NamedTuple):
    """A cell on the toroidal grid."""
    x: int
    y: int

    @classmethod
    def random(cls, max_x: int, max_y: int, rng=None) -> "GridPosition":
        """
        Uniform position in [0, max_x) x [0, max_y).

        ``rng`` is anything with ``randrange`` (e.g. a seeded
        ``random.Random``); defaults to the module-level generator.
        """
        rng = rng if rng is not None else random
        return cls(rng.randrange(max_x), rng.randrange(max_y))

    @staticmethod
    def wrapped_move(
        pos: "GridPosition",
        direction: Direction,
        width: int = COLS,
        height: int = ROWS,
    ) -> "GridPosition":
        """Step one cell in ``direction``, re-entering from the opposite edge."""
        return GridPosition((pos.x + direction.x) % width, (pos.y + direction.y) % height)


# ─────────────────────── Segment & Food ──────────────────────────
class Segment:
    """A single body cell of the snake."""

    def __init__(self, pos: GridPosition):
        self.pos = GridPosition(*pos)

    def __repr__(self):
        return f"Segment({self.pos.x}, {self.pos.y})"


class Food:
    """A piece of food. Relocated by GameState when eaten."""

    def __init__(self, pos: GridPosition):
        self.pos = GridPosition(*pos)

    def __repr__(self):
        return f"Food({self.pos.x}, {self.pos.y})"


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    The player's snake. Pure game data, no rendering, no input handling.

    The head is kept apart from ``body``; ``body[0]`` is the segment
    right behind the head and ``body[-1]`` is the tail.
    """

    def __init__(self, pos: GridPosition):
        pos = GridPosition(*pos)
        self.head: Segment = Segment(pos)
        self.body: deque[Segment] = deque([Segment((pos.x - 1, pos.y))])
        # Direction applied on the next update.
        self.dir: Direction = Direction.RIGHT
        # Direction actually applied by the previous update.
        self.last_update_dir: Direction = Direction.RIGHT
        # A second turn queued while ``dir`` is still pending.
        self.next_dir: Optional[Direction] = None
        self.ate: Optional[str] = None

    def __len__(self) -> int:
        return len(self.body) + 1

    # ── Queries ──────────────────────────────────────────────────
    def eats(self, food: Food) -> bool:
        return self.head.pos == food.pos

    def eats_self(self) -> bool:
        return any(self.head.pos == seg.pos for seg in self.body)

    def positions(self) -> list[GridPosition]:
        """Head first, then the body from neck to tail."""
        return [self.head.pos] + [seg.pos for seg in self.body]

    # ── Commands ─────────────────────────────────────────────────
    def update(self, food: Food) -> None:
        """Advance one cell and record what, if anything, was eaten."""
        if self.last_update_dir == self.dir and self.next_dir is not None:
            self.dir = self.next_dir
            self.next_dir = None

        new_head = Segment(GridPosition.wrapped_move(self.head.pos, self.dir))

        # Grow by pushing the old head to the front of the body.
        self.body.appendleft(self.head)
        self.head = new_head

        if self.eats_self():
            self.ate = ATE_ITSELF
        elif self.eats(food):
            self.ate = ATE_FOOD
        else:
            self.ate = None

        # Nothing eaten: drop the tail so the snake translates instead of growing.
        if self.ate is None:
            self.body.pop()

        self.last_update_dir = self.dir


# ─────────────────────────── GameState ───────────────────────────
class GameState:
    """
    Top-level model. Owns the snake, the food and the game-over flag.

    The controller calls update() every frame; the snake only moves
    once per UPDATE_INTERVAL. ``rng`` feeds every food placement, so a
    seeded ``random.Random`` makes a whole session reproducible.
    """

    def __init__(self, rng=None, now: Optional[float] = None):
        self.rng = rng
        self.snake: Snake = None
        self.food: Food = None
        self.gameover: bool = False
        self.last_update: float = time.monotonic() if now is None else now
        self._reset_entities()

    # ── Public API ───────────────────────────────────────────────
    def update(self, now: Optional[float] = None) -> bool:
        """
        Run one tick if a full interval has passed since the last one.

        Returns True when the interval gate passed, even if the game is
        over and the tick did nothing.
        """
        if now is None:
            now = time.monotonic()
        if now - self.last_update < UPDATE_INTERVAL:
            return False

        if not self.gameover:
            self.snake.update(self.food)

            if self.snake.ate == ATE_FOOD:
                self.food.pos = self._random_position()
                logger.debug("Food eaten, length %d, new food at %s",
                             len(self.snake), tuple(self.food.pos))
            elif self.snake.ate == ATE_ITSELF:
                self.gameover = True
                logger.info("Game over at length %d", len(self.snake))
                logger.debug("Final board:\n%s", self.snapshot().to_text())

        self.last_update = now
        return True

    def handle_direction_input(self, code) -> None:
        """Apply a key press. Any key restarts the game once it is over."""
        if self.gameover:
            self.restart()
            return

        direction = Direction.from_input(code)
        if direction is None:
            return

        snake = self.snake
        if snake.dir != snake.last_update_dir and direction.inverse() != snake.dir:
            snake.next_dir = direction
            logger.debug("Buffered turn %r after pending %r", direction, snake.dir)
        elif direction.inverse() != snake.last_update_dir:
            snake.dir = direction

    def restart(self) -> None:
        self._reset_entities()
        logger.info("Game restarted")

    def snapshot(self) -> Snapshot:
        """Read-only view of the board for a Renderer."""
        return Snapshot(
            head=self.snake.head.pos,
            body=tuple(seg.pos for seg in self.snake.body),
            food=self.food.pos,
            gameover=self.gameover,
            grid_w=COLS,
            grid_h=ROWS,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        self.snake = Snake(GridPosition(*START_POS))
        self.food = Food(self._random_position())
        self.gameover = False

    def _random_position(self) -> GridPosition:
        # Occupied cells are not excluded; food may land on the snake.
        return GridPosition.random(COLS, ROWS, self.rng)
