"""Piece-placement notation (the first field of a FEN record)."""

from __future__ import annotations

from tilechess.core.board import Board
from tilechess.core.piece import Piece
from tilechess.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rbnqknbr/pppppppp/8/8/8/8/PPPPPPPP/RBNQKNBR"


def board_from_placement(placement: str) -> Board:
    """Parse a placement string such as ``"8/8/8/8/3R4/8/8/8"``.

    Ranks are listed from row 7 down to row 0; digits count empty cells.
    """
    ranks = placement.strip().split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board.spawn(Piece.from_char(ch, row, col))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* back into placement notation."""
    ranks: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        parts: list[str] = []
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board.piece_at(row, col)
            if piece is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(str(piece))
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))
    return "/".join(ranks)
