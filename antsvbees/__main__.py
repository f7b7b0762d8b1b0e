"""Entry point for ``python -m antsvbees``.

Loads the default YAML config, builds a game, and starts the text shell
so the colony can be defended from a terminal.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from antsvbees.simulation.config import GameConfig
from antsvbees.simulation.game import build_game
from antsvbees.ui.text_client import GameShell, boost_help

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the game, run the shell."""
    parser = argparse.ArgumentParser(
        prog="antsvbees",
        description="Ants vs. Bees - defend the queen from waves of bees",
        epilog=f"Boosts: {boost_help()}",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config RNG seed",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = GameConfig.from_yaml(args.config)
    if args.seed is not None:
        config.seed = args.seed

    GameShell(build_game(config)).cmdloop()


if __name__ == "__main__":
    main()
