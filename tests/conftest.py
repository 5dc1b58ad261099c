from __future__ import annotations

import pytest

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Player


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


def board_from(rows: str) -> Board:
    """Build a board from ``"XX./.O./..."`` style text."""
    marks = {"X": Player.X, "O": Player.O, ".": None}
    return Board([marks[ch] for ch in rows.replace("/", "")])


def feed(*lines: str):
    """input() replacement that raises EOFError once ``lines`` run out."""
    it = iter(lines)

    def _input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input
