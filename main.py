"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame
"""

import sys

from gridsnake.controller import main


if __name__ == "__main__":
    sys.exit(main())
