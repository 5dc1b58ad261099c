# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tictactoe.config import SIZE
from tictactoe.types import Cell, Player, Move

Line = Tuple[int, int, int]

# Scanned in this order; the first fully owned line decides the winner.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


def index(row: int, col: int) -> Move:
    return Move(row * SIZE + col)


def coords(move: Move) -> Tuple[int, int]:
    return divmod(int(move), SIZE)


@dataclass(slots=True)
class Board:
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * (SIZE * SIZE)
        elif len(self.cells) != SIZE * SIZE:
            raise ValueError(f"Board needs {SIZE * SIZE} cells, got {len(self.cells)}.")
        else:
            self.cells = list(self.cells)

    def copy(self) -> "Board":
        return Board(self.cells[:])

    def place(self, row: int, col: int, player: Player) -> bool:
        """
        Put ``player`` on (row, col).

        Returns False and leaves the board untouched when the coordinate is
        off the grid or the cell is already taken.
        """
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return False
        i = index(row, col)
        if self.cells[i] is not None:
            return False
        self.cells[i] = player
        return True

    def available_moves(self) -> List[Move]:
        return [Move(i) for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def winning_line(self) -> Optional[Tuple[Player, Line]]:
        for line in WIN_LINES:
            a, b, c = line
            p = self.cells[a]
            if p is not None and p == self.cells[b] == self.cells[c]:
                return p, line
        return None

    def winner(self) -> Optional[Player]:
        res = self.winning_line()
        return res[0] if res else None
