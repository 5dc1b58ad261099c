from __future__ import annotations
from typing import Callable, Optional, Tuple

from tictactoe.types import Move
from tictactoe.game.state import GameState
from tictactoe.ui.prompts import parse_coord

MOVE_PROMPT = "Your move (row:col -> 0:0 ... 2:2): "


class HumanAgent:
    """Moves come from the keyboard through the controller, not from here."""

    name = "Human"

    def read_coord(self, input_fn: Callable[[str], str]) -> Optional[Tuple[int, int]]:
        """One prompt; None for unreadable text. EOFError propagates."""
        return parse_coord(input_fn(MOVE_PROMPT))

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")
