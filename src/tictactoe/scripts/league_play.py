from __future__ import annotations

import random
from typing import Dict, Tuple

from tictactoe.config import OPENING_PLIES
from tictactoe.core.board import Board
from tictactoe.core.rules import Status, outcome
from tictactoe.game.state import GameState
from tictactoe.types import Player


SideStats = Dict[str, Dict[str, int]]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(agent_x, agent_o, opening_plies: int = OPENING_PLIES, seed: int = 0) -> Tuple[str, SideStats]:
    """
    Play one game without any terminal output.

    The first ``opening_plies`` moves are random (seeded) so repeated games
    between deterministic agents still differ. Returns ``"X"``, ``"O"`` or
    ``"D"`` plus per-side move/time stats.
    """
    state = GameState(board=Board(), current=Player.X, last_status="")
    stats: SideStats = {
        "X": {"moves": 0, "time_ms": 0},
        "O": {"moves": 0, "time_ms": 0},
    }

    seed_agent(agent_x, seed + 101)
    seed_agent(agent_o, seed + 202)

    rng = random.Random(seed)
    for _ in range(opening_plies):
        moves = state.board.available_moves()
        if not moves or outcome(state.board).is_over:
            break
        state.play(rng.choice(moves))

    while True:
        result = outcome(state.board)
        if result.status is Status.WIN and result.winner is not None:
            return result.winner.value, stats
        if result.is_over:
            return "D", stats

        agent = agent_x if state.current is Player.X else agent_o
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current.value]
        side_stats["moves"] += 1
        side_stats["time_ms"] += int(info.get("time_ms", 0))

        state.play(move)
