from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from tictactoe.core.board import Board
from tictactoe.types import Move, Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player = Player.X
    last_status: str = "Player X starts."
    history: List[Move] = field(default_factory=list)

    def play(self, move: Move) -> None:
        """Put the side to move on ``move`` and pass the turn."""
        if self.board.cells[move] is not None:
            raise ValueError(f"Cell {move} is already taken.")
        self.board.cells[move] = self.current
        self.history.append(move)
        self.current = self.current.other()
