from __future__ import annotations
from tictactoe import config
from tictactoe.types import Cell, Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PLAYER_COLORS = {Player.X: FG_RED, Player.O: FG_YELLOW}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def cell_color(cell: Cell) -> str:
    return FG_GRAY if cell is None else PLAYER_COLORS[cell]
