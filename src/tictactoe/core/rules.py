from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple

from tictactoe.core.board import Board, coords
from tictactoe.types import Player

Coord = Tuple[int, int]  # (row, col)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @staticmethod
    def win(player: Player) -> "Outcome":
        return Outcome(Status.WIN, player)


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    res = board.winning_line()
    if res is None:
        return None
    player, line = res
    return player, [coords(i) for i in line]


def check_winner(board: Board) -> Optional[Player]:
    return board.winner()


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def outcome(board: Board) -> Outcome:
    w = check_winner(board)
    if w is not None:
        return Outcome.win(w)
    if is_draw(board):
        return DRAW
    return IN_PROGRESS
