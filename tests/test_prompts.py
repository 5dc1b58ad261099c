from __future__ import annotations

import pytest

from tictactoe.types import Player
from tictactoe.ui.prompts import parse_coord, parse_side


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1:2", (1, 2)),
        (" 0:0 \n", (0, 0)),
        ("2 : 1", (2, 1)),
        ("\t2:2", (2, 2)),
        ("+1:+1", (1, 1)),
    ],
)
def test_parse_coord_accepts(raw, expected):
    assert parse_coord(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["3:0", "0:3", "a:b", "1", "", "1:2:0", "-1:0", "1,2", "1 2", ":", "1:", "²:1", "١:٢", "１:２", "++1:1", "1_0:0"],
)
def test_parse_coord_rejects(raw):
    assert parse_coord(raw) is None


@pytest.mark.parametrize("raw,expected", [("x", Player.X), (" O\n", Player.O), ("X", Player.X)])
def test_parse_side_accepts(raw, expected):
    assert parse_side(raw) is expected


@pytest.mark.parametrize("raw", ["", "Z", "xo", "0"])
def test_parse_side_rejects(raw):
    assert parse_side(raw) is None
