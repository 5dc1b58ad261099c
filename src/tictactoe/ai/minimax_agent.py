from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time
from typing import Optional, Tuple

from tictactoe.core.board import Board, coords
from tictactoe.game.state import GameState
from tictactoe.types import Move, Player

log = logging.getLogger(__name__)


def minimax(board: Board, to_move: Player, ai_player: Player) -> Tuple[int, Optional[Move]]:
    """
    Exhaustive minimax over the rest of the game.

    Scores are from ``ai_player``'s point of view: +1 win, 0 draw, -1 loss.
    Terminal positions carry no move. Children are tried in ascending cell
    order and a later child only replaces the kept one when strictly better,
    so the lowest index wins ties.
    """
    w = board.winner()
    if w is not None:
        return (1, None) if w == ai_player else (-1, None)
    if board.is_full():
        return 0, None

    maximizing = to_move == ai_player
    best_score = -inf if maximizing else inf
    best_move: Optional[Move] = None

    for m in board.available_moves():
        child = board.copy()
        child.cells[m] = to_move
        score, _ = minimax(child, to_move.other(), ai_player)

        if maximizing:
            if score > best_score:
                best_score, best_move = score, m
        elif score < best_score:
            best_score, best_move = score, m

    return int(best_score), best_move


def find_best_move(board: Board, ai_player: Player) -> Optional[Move]:
    """Best move for ``ai_player``, or None if the game is already over."""
    _score, move = minimax(board, ai_player, ai_player)
    return move


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        me: Player = state.current

        start = time.perf_counter()
        score, move = minimax(state.board, me, me)
        elapsed = time.perf_counter() - start

        if move is None:
            raise ValueError("No valid moves.")

        row, col = coords(move)
        self.last_info = {
            "move": f"{row}:{col}",
            "eval": score,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        log.debug("%s (%s) chose %d:%d eval=%+d in %.1fms", self.name, me.value, row, col, score, elapsed * 1000)
        return move
