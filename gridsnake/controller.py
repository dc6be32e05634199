"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into key codes for the model.
  - Drive the game loop: poll the model every frame, ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The renderer, input source and clock can be injected; only the ones left
out are built from pygame, so the loop also runs without a display.
"""

import logging
import time
from typing import Iterator

import pygame

from .config import WIDTH, HEIGHT, FPS, WINDOW_TITLE, LOG_FORMAT, LOG_LEVEL
from .interfaces import InputSource, Renderer
from .model import GameState
from .view import PygameRenderer

logger = logging.getLogger(__name__)


# ────────────────────────── PygameInput ──────────────────────────
class PygameInput:
    """
    InputSource over the pygame event queue.

    Every key press is forwarded under its pygame name ("up", "space",
    ...), so any key can restart a finished game. Closing the window or
    pressing Escape sets ``closed``.
    """

    def __init__(self):
        self.closed = False

    def events(self) -> Iterator[str]:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.closed = True
                    continue
                yield pygame.key.name(event.key)


# ───────────────────────── GameController ────────────────────────
class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(
        self,
        renderer: Renderer = None,
        input_source: InputSource = None,
        model: GameState = None,
        clock=None,
        time_fn=time.monotonic,
    ):
        self._owns_pygame = renderer is None or input_source is None or clock is None
        if self._owns_pygame:
            pygame.init()
            pygame.display.set_caption(WINDOW_TITLE)

        if renderer is None:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            renderer = PygameRenderer(screen)

        self.renderer = renderer
        self.input = input_source if input_source is not None else PygameInput()
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.time_fn = time_fn
        self.model = model if model is not None else GameState(now=time_fn())

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info("Starting session")
        try:
            while not self.input.closed:
                self.step()
        finally:
            self._quit()

    def step(self) -> None:
        """One frame: dispatch input, maybe tick the model, draw."""
        for code in self.input.events():
            self.model.handle_direction_input(code)
        self.model.update(self.time_fn())
        self.renderer.render(self.model.snapshot())
        self.clock.tick(FPS)

    # ── Utilities ─────────────────────────────────────────────────
    def _quit(self) -> None:
        logger.info("Shutting down")
        if self._owns_pygame:
            pygame.quit()


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    try:
        GameController().run()
    except pygame.error:
        logger.exception("pygame failed")
        return 1
    return 0
