"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse

from .game import Game

DEFAULT_TITLE = "GhostEscape"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


def _positive(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="ghostescape", description="Escape the ghosts.")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    parser.add_argument("--width", type=_positive, default=DEFAULT_WIDTH, help="logical width")
    parser.add_argument("--height", type=_positive, default=DEFAULT_HEIGHT, help="logical height")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Start the game and run it until the window closes."""
    args = _parse_args(argv)
    game = Game.get_instance()
    game.init(args.title, args.width, args.height)
    try:
        game.run()
    finally:
        game.clean()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())