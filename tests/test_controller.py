from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from tictactoe import config
from tictactoe.ai.base import Agent
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.core.board import Board
from tictactoe.core.rules import DRAW, Outcome
from tictactoe.game.controller import choose_side, run_game
from tictactoe.game.state import GameState
from tictactoe.types import Move, Player
from tictactoe.ui.colors import RESET, REVERSE
from tictactoe.ui.human import HumanAgent

from conftest import feed


@dataclass
class ScriptedAgent:
    moves: List[int]
    name: str = "Scripted"
    seen: List[Player] = field(default_factory=list)

    def choose_move(self, state: GameState) -> Move:
        self.seen.append(state.current)
        return Move(self.moves.pop(0))


def test_choose_side_retries_until_valid(capsys):
    assert choose_side(feed("Z", "", "o")) is Player.O
    assert capsys.readouterr().out.count("Invalid input. Type X or O.") == 2


def test_choose_side_eof():
    assert choose_side(feed()) is None


def test_human_wins_top_row(capsys):
    ai = ScriptedAgent([3, 4])
    result = run_game(HumanAgent(), ai, feed("X", "0:0", "0:1", "0:2"), show_thinking=False)
    out = capsys.readouterr().out
    assert result == Outcome.win(Player.X)
    assert ai.seen == [Player.O, Player.O]
    assert "You play X. The computer is O." in out
    assert "Computer plays 1:0" in out
    assert "X wins!" in out
    assert "Game over." in out


def test_computer_moves_first_when_human_is_o(capsys):
    ai = ScriptedAgent([0, 1, 2])
    result = run_game(HumanAgent(), ai, feed("o", "1:1", "2:2"), show_thinking=False)
    out = capsys.readouterr().out
    assert result == Outcome.win(Player.X)
    assert ai.seen == [Player.X] * 3
    assert "Computer plays 0:0" in out
    assert "O wins!" not in out


def test_bad_input_reprompts(capsys):
    ai = ScriptedAgent([4])
    result = run_game(HumanAgent(), ai, feed("X", "0:0", "abc", "1:1", "5:5"), show_thinking=False)
    out = capsys.readouterr().out
    assert result is None
    assert "Invalid format. Use e.g. 1:2" in out
    assert "Cell occupied or invalid coordinate." in out


def test_draw_is_announced(capsys):
    # X: 0 2 3 7 8 (human) / O: 1 4 5 6 (computer) -> XOX/XOO/OXX
    ai = ScriptedAgent([1, 4, 5, 6])
    human = feed("X", "0:0", "0:2", "1:0", "2:1", "2:2")
    result = run_game(HumanAgent(), ai, human, show_thinking=False)
    out = capsys.readouterr().out
    assert result == DRAW
    assert "Draw." in out


def test_against_minimax_blocks_and_survives(capsys):
    result = run_game(HumanAgent(), MinimaxAgent(name="Computer"), feed("X", "0:0", "0:1"), show_thinking=False)
    out = capsys.readouterr().out
    assert result is None
    assert "Computer plays 1:1" in out
    assert "Computer plays 0:2" in out


def test_eof_before_side_choice():
    assert run_game(HumanAgent(), ScriptedAgent([]), feed(), show_thinking=False) is None


def test_human_agent_is_never_asked():
    with pytest.raises(RuntimeError):
        HumanAgent().choose_move(GameState(board=None))  # type: ignore[arg-type]


def test_read_coord_uses_move_prompt():
    prompts = []

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        return " 2:0 "

    assert HumanAgent().read_coord(_input) == (2, 0)
    assert prompts == ["Your move (row:col -> 0:0 ... 2:2): "]


def test_state_play_records_history_and_passes_turn():
    state = GameState(board=Board())
    state.play(Move(4))
    state.play(Move(0))
    assert state.history == [4, 0]
    assert state.current is Player.X
    assert state.board.cells[4] is Player.X
    assert state.board.cells[0] is Player.O
    with pytest.raises(ValueError):
        state.play(Move(4))


def test_agents_satisfy_protocol():
    assert isinstance(MinimaxAgent(), Agent)
    assert isinstance(ScriptedAgent([]), Agent)


def test_winning_line_is_highlighted(monkeypatch, capsys):
    monkeypatch.setattr(config, "USE_COLOR", True)
    ai = ScriptedAgent([3, 4])
    run_game(HumanAgent(), ai, feed("X", "0:0", "0:1", "0:2"), show_thinking=False)
    out = capsys.readouterr().out
    assert out.count(f"{REVERSE}X{RESET}") == 3


def test_no_thinking_pause_before_opening_search(monkeypatch):
    pauses = []
    monkeypatch.setattr("tictactoe.game.controller.ai_thinking", lambda label: pauses.append(label))
    ai = ScriptedAgent([0, 1, 2])
    run_game(HumanAgent(), ai, feed("O", "1:1", "2:2"), show_thinking=True)
    assert len(ai.seen) == 3
    assert pauses == ["Computer (X) is thinking"] * 2
