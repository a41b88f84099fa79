"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from raychess.settings import LOG_LEVELS, AppSettings
from raychess.ui.i18n import LANGUAGES, set_language

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raychess", description="Play chess in the terminal or a Qt window."
    )
    parser.add_argument(
        "--gui", action="store_true", help="open the Qt board window (needs PyQt6)"
    )
    parser.add_argument("--language", choices=LANGUAGES, help="interface language")
    parser.add_argument(
        "--no-color", action="store_true", help="disable ANSI colours in the terminal"
    )
    parser.add_argument(
        "--no-clear", action="store_true", help="do not scroll the board between turns"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="logging threshold (default: WARNING)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> AppSettings:
    """Environment settings with command-line overrides applied."""
    settings = AppSettings.from_env()
    if args.language:
        settings.language = args.language
    if args.no_color:
        settings.use_color = False
    if args.no_clear:
        settings.clear_screen = False
    if args.log_level:
        settings.log_level = args.log_level
    return settings


def run_terminal(settings: AppSettings) -> int:
    from raychess.game.engine import GameEngine
    from raychess.ui.command_loop import CommandLoop

    engine = GameEngine()
    loop = CommandLoop(engine, lambda: engine.board.snapshot(), settings)
    return loop.run()


def main(argv: list[str] | None = None) -> int:
    """Launch raychess."""
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args)
    except ValueError as exc:
        print(f"raychess: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    set_language(settings.language)
    _LOGGER.debug("Starting with %s", settings)

    if args.gui:
        from raychess.ui.bootstrap import run_application

        return run_application(settings)
    return run_terminal(settings)


if __name__ == "__main__":
    sys.exit(main())
