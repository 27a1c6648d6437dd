from __future__ import annotations

from pathlib import Path

# Board
ROWS, COLS = 20, 20
BLOCK = 30
HUD_HEIGHT = 40
# On-screen direction pad below the board
PAD_HEIGHT = 100
BUTTON = 30

# Timing (milliseconds)
TICK_MS = 250
TIMER_MS = 1000
FPS = 60

# Starting body, tail first. Heading is DOWN even though the body is horizontal.
START_CELLS = ((2, 2), (2, 3), (2, 4))

SCORE_FILE = Path.home() / ".gridsnake_high_score"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (40, 40, 40)
GREEN = (0, 255, 0)
DARK_GREEN = (0, 170, 0)
RED = (255, 0, 0)
