"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def forward(self) -> int:
        """Row step of a pawn of this color."""
        return 1 if self is Color.WHITE else -1

    @property
    def pawn_row(self) -> int:
        """Row the pawns of this color start on."""
        return 1 if self is Color.WHITE else 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveType(IntEnum):
    """Whether a destination is reached quietly or by taking its occupant."""

    MOVE = 0
    CAPTURE = 1


class CaptureRule(IntEnum):
    """Which occupants the move generator treats as capturable.

    ``ANY_OCCUPANT`` records a capture on any occupied cell, whatever its
    color. ``OPPONENT_ONLY`` stops rays at same-colored pieces without
    recording them and restricts pawns to quiet pushes and opposing
    diagonal captures.
    """

    ANY_OCCUPANT = 0
    OPPONENT_ONLY = 1


class TileStyle(IntEnum):
    """Highlight requested from the renderer for a single tile."""

    NORMAL = 0  # checkerboard parity
    SELECTED = 1
    POSSIBLE_MOVE = 2
