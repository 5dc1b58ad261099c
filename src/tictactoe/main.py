from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tictactoe import config
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.game.controller import run_game
from tictactoe.ui.human import HumanAgent


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Tic-tac-toe against a perfect minimax opponent.")
    ap.add_argument("mode", nargs="?", choices=["play", "league"], help="Skip the menu and start this mode.")
    ap.add_argument("--games", type=int, default=config.LEAGUE_GAMES, help="Games per pairing in league mode")
    ap.add_argument("--seed", type=int, default=config.LEAGUE_SEED, help="Seed for league openings")
    ap.add_argument("--figures-dir", type=str, default=None, help="Save league charts to this directory")
    ap.add_argument("--show", action="store_true", help="Show league charts instead of saving")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def play() -> None:
    run_game(HumanAgent(), MinimaxAgent(name="Computer"))


def league(args: argparse.Namespace) -> None:
    from tictactoe.scripts.league import main as league_main

    figures_dir = Path(args.figures_dir) if args.figures_dir else None
    league_main(games=args.games, seed=args.seed, figures_dir=figures_dir, show=args.show)


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    mode = args.mode
    if mode is None:
        print("Select mode:")
        print("1) Play against the computer")
        print("2) Run self-play league")
        try:
            choice = input("Choice: ").strip()
        except EOFError:
            return 0
        mode = "league" if choice == "2" else "play"

    if mode == "league":
        league(args)
    else:
        play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
