# src/tictactoe/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Optional


class Player(Enum):
    X = "X"
    O = "O"

    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


Cell = Optional[Player]
Move = NewType("Move", int)   # cell index 0..8 (row * 3 + col)
