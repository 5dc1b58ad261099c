from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pandas as pd

from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.config import LEAGUE_GAMES, LEAGUE_SEED, OPENING_PLIES
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN

from .league_play import play_headless
from .league_scoring import POINTS, summarize

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], object]


DEFAULT_PAIRINGS: Sequence[tuple[Team, Team]] = (
    (Team("Minimax", MinimaxAgent), Team("Random", RandomAgent)),
    (Team("Minimax (mirror)", MinimaxAgent), Team("Minimax (mirror)", MinimaxAgent)),
)


def _result_for(side: str, outcome: str) -> str:
    if outcome == "D":
        return "D"
    return "W" if outcome == side else "L"


def run_league(
    games: int = LEAGUE_GAMES,
    opening_plies: int = OPENING_PLIES,
    seed: int = LEAGUE_SEED,
    pairings: Sequence[tuple[Team, Team]] = DEFAULT_PAIRINGS,
) -> pd.DataFrame:
    """
    Play ``games`` games for every pairing, swapping colours each game.

    Returns one row per (game, agent).
    """
    rng = random.Random(seed)
    rows: List[dict] = []

    for a, b in pairings:
        label = f"{a.name} vs {b.name}"
        for g in range(games):
            x, o = (a, b) if g % 2 == 0 else (b, a)
            outcome, stats = play_headless(x.make(), o.make(), opening_plies=opening_plies, seed=rng.randrange(1 << 30))
            log.debug("%s game %d: X=%s O=%s -> %s", label, g + 1, x.name, o.name, outcome)

            for team, side in ((x, "X"), (o, "O")):
                result = _result_for(side, outcome)
                rows.append({
                    "pairing": label,
                    "game": g + 1,
                    "name": team.name,
                    "side": side,
                    "result": result,
                    "points": POINTS[result],
                    "moves": stats[side]["moves"],
                    "time_ms": stats[side]["time_ms"],
                })
        log.info("%s: %d games played", label, games)

    return pd.DataFrame(rows)


def print_summary(summary: pd.DataFrame) -> None:
    print(c("LEAGUE RESULTS", BOLD))
    cols = ["name", "games", "wins", "draws", "losses", "ppg", "strength_wilson_lcb", "avg_ms_per_move"]
    keep = [col for col in cols if col in summary.columns]
    print(c(summary[keep].to_string(index=False, float_format=lambda v: f"{v:.3f}"), FG_CYAN))


def main(
    games: int = LEAGUE_GAMES,
    seed: int = LEAGUE_SEED,
    figures_dir: Optional[Path] = None,
    show: bool = False,
) -> pd.DataFrame:
    start = time.perf_counter()
    df = run_league(games=games, seed=seed)
    summary = summarize(df)
    print_summary(summary)
    print(c(f"\n{len(df) // 2} games in {time.perf_counter() - start:.1f}s", DIM))

    if figures_dir is not None or show:
        from .league_plot import plot_results

        plot_results(summary, figures_dir or Path("figures"), show=show)
        if not show:
            print(f"Saved figures to: {(figures_dir or Path('figures')).resolve()}")

    return summary
