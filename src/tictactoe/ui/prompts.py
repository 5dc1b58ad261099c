from __future__ import annotations
import re
from typing import Optional, Tuple

from tictactoe.config import SIZE
from tictactoe.types import Player

NUMBER = re.compile(r"\+?[0-9]+")


def parse_coord(raw: str) -> Optional[Tuple[int, int]]:
    """Parse ``row:col`` (e.g. ``"1:2"``). Returns None for anything else."""
    parts = raw.strip().split(":")
    if len(parts) != 2:
        return None
    r, c = (p.strip() for p in parts)
    if not (NUMBER.fullmatch(r) and NUMBER.fullmatch(c)):
        return None
    row, col = int(r), int(c)
    if row >= SIZE or col >= SIZE:
        return None
    return row, col


def parse_side(raw: str) -> Optional[Player]:
    s = raw.strip().upper()
    if s == "X":
        return Player.X
    if s == "O":
        return Player.O
    return None
