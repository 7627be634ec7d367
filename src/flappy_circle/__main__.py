"""
__main__.py: Command line entry point.
"""

import argparse

from .constants import ASSETS_DIR, WINDOW_TITLE
from .flappy_client import FlappyClient
from .variants import DEFAULT_VARIANT, VARIANTS, get_variant


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-circle", description=WINDOW_TITLE)
    parser.add_argument(
        "--variant", choices=sorted(VARIANTS), default=DEFAULT_VARIANT,
        help="which iteration of the game to play (default: %(default)s)")
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the pipe layout")
    parser.add_argument(
        "--assets", default=ASSETS_DIR, help="directory holding images and fonts")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    variant = get_variant(args.variant)

    print(f"Starting {WINDOW_TITLE} ({variant.name}): {variant.description}")
    print("Controls:")
    print("  SPACE - Jump")
    print("  R     - Restart (after game over)")
    print("  ESC   - Quit")

    FlappyClient(variant, seed=args.seed, assets_dir=args.assets).run()


if __name__ == "__main__":
    main()
