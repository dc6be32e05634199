"""
interfaces.py — Contracts between the model and its presentation.

    Snapshot    — frozen, read-only picture of one game state
    Renderer    — anything that can draw a Snapshot
    InputSource — anything that yields key codes for the model

No pygame here: the model depends on this module, the pygame view and
controller implement it.
"""

from dataclasses import dataclass
from typing import Iterator, Protocol, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Snapshot:
    head: Cell
    body: Tuple[Cell, ...]   # neck first, tail last
    food: Cell
    gameover: bool
    grid_w: int
    grid_h: int

    def to_text(self) -> str:
        """
        ASCII board, top row first:
        . = empty, * = food, H = head, o = body
        """
        board = [["." for _ in range(self.grid_w)] for _ in range(self.grid_h)]

        fx, fy = self.food
        board[fy][fx] = "*"
        for x, y in self.body:
            board[y][x] = "o"
        hx, hy = self.head
        board[hy][hx] = "H"

        return "\n".join("".join(row) for row in board)


class Renderer(Protocol):
    def render(self, snapshot: Snapshot) -> None: ...


class InputSource(Protocol):
    # True once the user asked to quit (window closed, Escape).
    closed: bool

    def events(self) -> Iterator[str]:
        """Key codes received since the previous call, oldest first."""
        ...
