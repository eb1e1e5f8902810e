"""User-configurable settings."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import CaptureRule


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Rules
    capture_rule: CaptureRule = CaptureRule.ANY_OCCUPANT

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_possible_moves: bool = True

    # Diagnostics
    log_level: str = "INFO"
