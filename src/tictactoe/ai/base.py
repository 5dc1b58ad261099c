from __future__ import annotations
from typing import Protocol, runtime_checkable

from tictactoe.game.state import GameState
from tictactoe.types import Move


@runtime_checkable
class Agent(Protocol):
    """
    Anything that can pick a cell for ``state.current``.

    Agents may expose a ``last_info`` dict with stats about their last
    decision; the league reads ``time_ms`` from it when present.
    """

    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
