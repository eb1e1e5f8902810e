"""Commits a selected destination to the board."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tilechess.core.arena import BoardInvariantError, PieceHandle
from tilechess.core.board import Board
from tilechess.core.move import Move
from tilechess.core.piece import Piece
from tilechess.core.types import Coord, cell_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What a successful :func:`apply_move` changed."""

    move: Move
    origin: Coord
    handle: PieceHandle
    captured_handle: PieceHandle | None = None
    captured: Piece | None = None


def find_move(moves: Sequence[Move], destination: Coord) -> Move | None:
    """First entry of *moves* targeting *destination*."""
    for m in moves:
        if m.destination == destination:
            return m
    return None


def apply_move(
    moves: Sequence[Move],
    destination: Coord,
    board: Board,
    handle: PieceHandle,
) -> MoveOutcome | None:
    """Move the piece behind *handle* to *destination* if it is listed in *moves*.

    Returns ``None`` and leaves the board untouched when *destination* is not
    a listed move. A capture releases the occupant from the board's arena.

    Raises:
        BoardInvariantError: the capture target or the moving piece is
            missing from the board.
    """
    move = find_move(moves, destination)
    if move is None:
        _LOGGER.info("Invalid move to %s", cell_name(*destination))
        return None

    piece = board.pieces[handle]
    origin = piece.position
    if board.get(*origin) != handle:
        raise BoardInvariantError(
            f"Piece {handle} is not on its own cell {cell_name(*origin)}"
        )

    captured_handle: PieceHandle | None = None
    captured: Piece | None = None
    if move.is_capture:
        captured_handle = board.get(move.x, move.y)
        if captured_handle is None:
            raise BoardInvariantError(
                f"Capture target missing at {cell_name(move.x, move.y)}"
            )
        captured = board.pieces.remove(captured_handle)
    elif not board.is_empty(move.x, move.y):
        raise BoardInvariantError(
            f"Quiet move onto occupied cell {cell_name(move.x, move.y)}"
        )

    board.set(*origin, None)
    board.set(move.x, move.y, handle)
    piece.x, piece.y = move.x, move.y

    _LOGGER.info(
        "%s %s -> %s%s",
        piece.symbol,
        cell_name(*origin),
        cell_name(move.x, move.y),
        f" captures {captured.symbol}" if captured is not None else "",
    )
    return MoveOutcome(move, origin, handle, captured_handle, captured)
