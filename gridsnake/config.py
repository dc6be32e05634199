"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

# ── Window & Grid ─────────────────────────────────────────────────
GRID_SIZE       = (30, 20)
COLS, ROWS      = GRID_SIZE
CELL            = 32
WIDTH, HEIGHT   = COLS * CELL, ROWS * CELL
FPS             = 60
WINDOW_TITLE    = "Snake"

# ── Timing ────────────────────────────────────────────────────────
UPDATES_PER_SECOND = 8
MILLIS_PER_UPDATE  = int(1 / UPDATES_PER_SECOND * 1000)
UPDATE_INTERVAL    = MILLIS_PER_UPDATE / 1000.0

# ── Gameplay ──────────────────────────────────────────────────────
START_POS = (COLS // 4, ROWS // 2)

# ── Colors ────────────────────────────────────────────────────────
BG            = (0,   0,   0)
SNAKE_COL     = (255, 255, 255)
FOOD_COL      = (255, 0,   0)
GAMEOVER_COL  = (255, 0,   0)
HEAD_STROKE   = 5
GAMEOVER_SIZE = 40
GAMEOVER_TEXT = "GAME OVER!"

# ── Logging ───────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL  = os.environ.get("GRIDSNAKE_LOG_LEVEL", "INFO").upper()
