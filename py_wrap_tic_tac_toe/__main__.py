import argparse
import logging
import sys
from pathlib import Path

import pygame

from py_wrap_tic_tac_toe.exception import GameError
from py_wrap_tic_tac_toe.game import Game
from py_wrap_tic_tac_toe.layout import ScreenLayout
from py_wrap_tic_tac_toe.ui_pygame import PygameUi

_LOG = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    game = Game(ScreenLayout())
    ui = PygameUi(game, fps=args.fps, resources=args.resources)

    try:
        ui.run()
    except (GameError, pygame.error):
        _LOG.exception("Error encountered")
        return 1

    _LOG.info("Game exited cleanly.")
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="py_wrap_tic_tac_toe", description="Two-player tic-tac-toe.")

    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument(
        "--resources",
        type=Path,
        default=Path("resources"),
        help="optional directory holding DejaVuSerif.ttf; a system font is used when it is missing",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
