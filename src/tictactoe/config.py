# src/tictactoe/config.py

from __future__ import annotations

import os

SIZE = 3
EMPTY_GLYPH = "."

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6

# League defaults
LEAGUE_GAMES = 20
LEAGUE_SEED = 1234
OPENING_PLIES = 1  # random X opener; a random O reply could leave minimax a lost game
