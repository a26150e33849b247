"""
Command-line entry point for Starlanes.

    python -m starlanes                 # title screen
    python -m starlanes --dev           # straight into the dev galaxy
    python -m starlanes --seed 42 --systems 60 --neighbors 3 --repair
"""

from __future__ import annotations

import argparse
import logging

from .game import Game
from .models.galaxy import GalaxyConfig
from .screens.title import TitleAction


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="starlanes",
        description="Galaxy map for a multiplayer space-strategy game.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    defaults = GalaxyConfig()

    p.add_argument("--seed", type=int, default=None, help="Seed for new galaxies (random if omitted).")
    p.add_argument("--systems", type=int, default=defaults.system_count, metavar="N",
                   help="Number of star systems.")
    p.add_argument("--neighbors", type=int, default=defaults.neighbor_count, metavar="K",
                   help="Nearest neighbours each system links to.")
    p.add_argument("--width", type=float, default=defaults.width, help="Field width in world units.")
    p.add_argument("--height", type=float, default=defaults.height, help="Field height in world units.")
    p.add_argument("--repair", action="store_true",
                   help="Add bridging lanes so the galaxy is a single connected cluster.")

    start = p.add_mutually_exclusive_group()
    start.add_argument("--dev", action="store_true", help="Open the fixed dev galaxy (seed 1337).")
    start.add_argument("--new", action="store_true", help="Skip the title screen and open a new galaxy.")
    start.add_argument("--continue", dest="resume", action="store_true", help="Resume the saved galaxy.")

    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GalaxyConfig(
        system_count=args.systems,
        width=args.width,
        height=args.height,
        neighbor_count=args.neighbors,
        repair_connectivity=args.repair,
    )
    config.validate()

    start_action = None
    if args.dev:
        start_action = TitleAction.DEV_GALAXY
    elif args.new:
        start_action = TitleAction.NEW_GALAXY
    elif args.resume:
        start_action = TitleAction.CONTINUE

    Game(config, seed=args.seed, start_action=start_action).run()


if __name__ == "__main__":
    main()
