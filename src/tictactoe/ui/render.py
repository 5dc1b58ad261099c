from __future__ import annotations
from typing import Optional, Iterable, Set

from tictactoe import config
from tictactoe.config import EMPTY_GLYPH, SIZE
from tictactoe.core.board import Board, index
from tictactoe.core.rules import Coord
from tictactoe.types import Cell
from tictactoe.ui.colors import c, cell_color, BOLD, DIM, FG_CYAN, REVERSE

ROW_SEPARATOR = "+".join(["---"] * SIZE)


def glyph(cell: Cell) -> str:
    return EMPTY_GLYPH if cell is None else cell.value


def _piece(cell: Cell) -> str:
    return c(glyph(cell), cell_color(cell))


def board_text(board: Board, colored: bool = False, highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Text grid for ``board``::

         X | . | O
        ---+---+---
         . | X | .
        ---+---+---
         . | . | O

    framed by a blank line above and below. ``highlight`` holds (row, col)
    cells to show in reverse video (only when ``colored``).
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    lines = [""]
    for r in range(SIZE):
        parts = []
        for col in range(SIZE):
            i = index(r, col)
            cell = board.cells[i]
            p = _piece(cell) if colored else glyph(cell)
            if colored and (r, col) in hl:
                p = c(glyph(cell), REVERSE)
            parts.append(f" {p} ")
        lines.append("|".join(parts).rstrip())
        if r < SIZE - 1:
            lines.append(ROW_SEPARATOR)
    lines.append("")
    return "\n".join(lines) + "\n"


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("TIC-TAC-TOE", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(board_text(board, colored=True, highlight=highlight), end="")
    print(c("Enter moves as row:col (0:0 ... 2:2).", DIM))
