"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from tilechess.core.enums import CaptureRule
from tilechess.settings import AppSettings
from tilechess.ui.styles.theme import THEME_NAMES


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Click-to-move chess board",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--opponent-only",
        action="store_true",
        help="Only allow capturing pieces of the other color",
    )
    parser.add_argument(
        "--theme",
        choices=THEME_NAMES,
        default="Classic",
        help="Board colour scheme",
    )
    parser.add_argument(
        "--hide-moves",
        action="store_true",
        help="Do not highlight the possible moves of a selected piece",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def settings_from_arguments(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        capture_rule=(
            CaptureRule.OPPONENT_ONLY if args.opponent_only else CaptureRule.ANY_OCCUPANT
        ),
        board_theme=args.theme,
        show_possible_moves=not args.hide_moves,
        log_level=args.log_level,
    )


def main() -> None:
    """Launch the tilechess application."""
    from tilechess.ui.bootstrap import run_application

    args = parse_arguments()
    settings = settings_from_arguments(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(run_application(sys.argv[:1], settings))


if __name__ == "__main__":
    main()
