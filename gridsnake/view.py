"""
view.py — View layer.

Draws a Snapshot onto a pygame surface:
  - black background
  - white filled cells for the body, a white outline for the head
  - a red cell for the food
  - "GAME OVER!" in the top-left corner once the snake has hit itself

Public API:
    PygameRenderer(screen)    — bind to a pygame surface
    renderer.render(snapshot) — draw the current frame
"""

import logging

import pygame

from .config import (
    CELL, BG, SNAKE_COL, FOOD_COL, GAMEOVER_COL,
    HEAD_STROKE, GAMEOVER_SIZE, GAMEOVER_TEXT,
)
from .interfaces import Cell, Snapshot

logger = logging.getLogger(__name__)


def cell_rect(pos: Cell) -> pygame.Rect:
    """Screen rectangle covered by a grid cell."""
    x, y = pos
    return pygame.Rect(x * CELL, y * CELL, CELL, CELL)


# ───────────────────────── PygameRenderer ────────────────────────
class PygameRenderer:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font_gameover = self._load_font(GAMEOVER_SIZE)

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snapshot: Snapshot) -> None:
        self.screen.fill(BG)
        self._draw_snake(snapshot)
        self._draw_food(snapshot.food)

        if snapshot.gameover:
            self._draw_game_over()

        pygame.display.flip()

    # ── Pieces ───────────────────────────────────────────────────
    def _draw_snake(self, snapshot: Snapshot) -> None:
        for pos in snapshot.body:
            pygame.draw.rect(self.screen, SNAKE_COL, cell_rect(pos))
        pygame.draw.rect(self.screen, SNAKE_COL, cell_rect(snapshot.head), HEAD_STROKE)

    def _draw_food(self, food: Cell) -> None:
        pygame.draw.rect(self.screen, FOOD_COL, cell_rect(food))

    def _draw_game_over(self) -> None:
        surf = self.font_gameover.render(GAMEOVER_TEXT, True, GAMEOVER_COL)
        self.screen.blit(surf, (0, 0))

    # ── Font init ─────────────────────────────────────────────────
    @staticmethod
    def _load_font(size: int) -> pygame.font.Font:
        # SysFont falls back on its own for a missing name; this covers a
        # font scan or font file that fails to load.
        try:
            return pygame.font.SysFont("courier", size, bold=True)
        except Exception as exc:
            logger.warning("System font unavailable (%s), using default font", exc)
            return pygame.font.Font(None, size)
