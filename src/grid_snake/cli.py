"""Command-line tools for Grid Snake."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake simulation and high-score tools.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config file.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Play headless random games.")
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--grid-dimension", type=int, default=None)
    sim_p.add_argument(
        "--high-score-path", type=str, default=None,
        help="Persist the high score to this file.",
    )

    # --- high-score ---
    hs_p = sub.add_parser("high-score", help="Show or clear the high score.")
    hs_p.add_argument("action", choices=["show", "clear"])
    hs_p.add_argument("--high-score-path", type=str, default=None)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    overrides: dict = {}
    if getattr(args, "grid_dimension", None) is not None:
        overrides["board_size_px"] = args.grid_dimension * config.cell_size_px
    if getattr(args, "high_score_path", None) is not None:
        overrides["high_score_path"] = args.high_score_path
    return replace(config, **overrides) if overrides else config


def _run_simulate(args: argparse.Namespace, config: GameConfig) -> int:
    from grid_snake.simulate import simulate
    from grid_snake.storage import HighScoreStore

    if args.games < 1:
        logger.error("--games must be at least 1.")
        return 2
    # Persist only when a high-score location was given explicitly.
    store = (
        HighScoreStore(config.high_score_path)
        if args.high_score_path or args.config else None
    )
    result = simulate(
        config=config,
        games=args.games,
        max_ticks=args.max_ticks,
        seed=args.seed,
        store=store,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_high_score(args: argparse.Namespace, config: GameConfig) -> int:
    from grid_snake.storage import HighScoreStore

    store = HighScoreStore(config.high_score_path)
    if args.action == "clear":
        store.clear()
        print("High score cleared.")  # noqa: T201
    else:
        print(f"High score: {store.load()}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = _load_config(args)
    except (OSError, TypeError, ValueError) as exc:
        logger.error("Invalid config %s: %s", args.config, exc)
        return 2

    handlers = {
        "simulate": _run_simulate,
        "high-score": _run_high_score,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
