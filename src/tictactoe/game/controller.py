from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe.ai.base import Agent
from tictactoe.core.board import Board, coords, index
from tictactoe.core.rules import Outcome, Status, check_winner_with_line, outcome
from tictactoe.game.state import GameState
from tictactoe.ui.effects import ai_thinking
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import parse_side
from tictactoe.ui.render import render
from tictactoe.types import Player

log = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _result_message(result: Outcome) -> str:
    if result.status is Status.WIN and result.winner is not None:
        return f"{result.winner.value} wins!"
    return "Draw."


def choose_side(input_fn: Optional[InputFn] = None) -> Optional[Player]:
    """
    Ask the human for X or O until a valid answer arrives.
    Returns None if input runs out.
    """
    input_fn = input_fn or input
    while True:
        try:
            raw = input_fn("Choose X or O: ")
        except EOFError:
            return None
        side = parse_side(raw)
        if side is not None:
            return side
        print("Invalid input. Type X or O.")


def _human_turn(state: GameState, human: HumanAgent, input_fn: InputFn) -> bool:
    """Read one move. Returns False when input runs out."""
    try:
        coord = human.read_coord(input_fn)
    except EOFError:
        return False

    if coord is None:
        state.last_status = "Invalid format. Use e.g. 1:2"
        return True

    row, col = coord
    if not state.board.place(row, col, state.current):
        state.last_status = "Cell occupied or invalid coordinate."
        return True

    state.history.append(index(row, col))
    state.current = state.current.other()
    state.last_status = f"You played {row}:{col}"
    return True


def _ai_turn(state: GameState, ai: Agent, side: Player, show_thinking: bool) -> None:
    # no extra pause before a search from the empty board, which takes seconds
    if show_thinking and state.history:
        ai_thinking(f"Computer ({side.value}) is thinking")

    move = ai.choose_move(state)
    state.play(move)
    row, col = coords(move)
    state.last_status = f"Computer plays {row}:{col}"


def run_game(
    human: HumanAgent,
    ai: Agent,
    input_fn: Optional[InputFn] = None,
    show_thinking: bool = True,
) -> Optional[Outcome]:
    """
    Play one game of human vs. computer on the terminal.

    X always moves first. Returns the final outcome, or None if input ends
    before the game does.
    """
    input_fn = input_fn or input
    human_side = choose_side(input_fn)
    if human_side is None:
        return None
    ai_side = human_side.other()

    state = GameState(
        board=Board(),
        current=Player.X,
        last_status=f"You play {human_side.value}. The computer is {ai_side.value}.",
    )
    log.info("New game: %s is %s, %s is %s", human.name, human_side.value, ai.name, ai_side.value)

    while True:
        result = outcome(state.board)
        if result.is_over:
            res = check_winner_with_line(state.board)
            highlight = res[1] if res else None
            render(state.board, f"{state.last_status}\n{_result_message(result)}", highlight=highlight)
            print("Game over.")
            log.info("Game finished after %d moves: %s", len(state.history), _result_message(result))
            return result

        render(state.board, state.last_status)

        if state.current == human_side:
            if not _human_turn(state, human, input_fn):
                log.info("Input closed, leaving game")
                return None
        else:
            _ai_turn(state, ai, ai_side, show_thinking)
