"""Pseudo-legal move generation, one algorithm per piece type."""

from __future__ import annotations

from collections.abc import Callable

from tilechess.core.board import Board
from tilechess.core.enums import CaptureRule, MoveType, PieceType
from tilechess.core.move import Move
from tilechess.core.piece import Piece
from tilechess.core.types import is_on_board

# (row, col) steps. Order fixes the order moves are emitted in.
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)


class MoveGenerator:
    """Computes reachable cells for a piece on a given :class:`Board`.

    The generator never mutates the board. Every probe is bounds-checked
    before the board is indexed.
    """

    __slots__ = ("_board", "_rule")

    def __init__(
        self, board: Board, capture_rule: CaptureRule = CaptureRule.ANY_OCCUPANT
    ) -> None:
        self._board = board
        self._rule = capture_rule

    @property
    def capture_rule(self) -> CaptureRule:
        return self._rule

    # -- Public API ---------------------------------------------------------

    def possible_moves(self, piece: Piece) -> list[Move]:
        """All pseudo-legal destinations of *piece*."""
        moves: list[Move] = []
        self._GENERATORS[piece.piece_type](self, piece, moves)
        return moves

    # -- Probe-and-record ---------------------------------------------------

    def add_move(self, piece: Piece, row: int, col: int, moves: list[Move]) -> bool:
        """Record the cell ``(row, col)`` for *piece*.

        Returns ``True`` when the cell was empty and a ray may continue past
        it, ``False`` when the cell is occupied.
        """
        occupant = self._board.piece_at(row, col)
        if occupant is None:
            moves.append(Move(row, col, MoveType.MOVE))
            return True
        if self._rule == CaptureRule.ANY_OCCUPANT or occupant.color != piece.color:
            moves.append(Move(row, col, MoveType.CAPTURE))
        return False

    def _can_capture(self, piece: Piece, row: int, col: int) -> bool:
        occupant = self._board.piece_at(row, col)
        if occupant is None:
            return False
        return self._rule == CaptureRule.ANY_OCCUPANT or occupant.color != piece.color

    def _push(self, piece: Piece, row: int, col: int, moves: list[Move]) -> bool:
        """Straight pawn step; ``True`` if the cell was empty."""
        if self._rule == CaptureRule.ANY_OCCUPANT:
            return self.add_move(piece, row, col, moves)
        if not self._board.is_empty(row, col):
            return False
        moves.append(Move(row, col, MoveType.MOVE))
        return True

    # -- Per-type algorithms ------------------------------------------------

    def _gen_pawn(self, piece: Piece, moves: list[Move]) -> None:
        step = piece.color.forward
        row = piece.x + step
        if not is_on_board(row, piece.y):
            return

        if self._push(piece, row, piece.y, moves) and piece.x == piece.color.pawn_row:
            self._push(piece, row + step, piece.y, moves)

        for col in (piece.y + 1, piece.y - 1):
            if is_on_board(row, col) and self._can_capture(piece, row, col):
                moves.append(Move(row, col, MoveType.CAPTURE))

    def _gen_sliding(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        for dr, dc in directions:
            row, col = piece.x + dr, piece.y + dc
            while is_on_board(row, col):
                if not self.add_move(piece, row, col, moves):
                    break
                row += dr
                col += dc

    def _gen_steps(
        self,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        for dr, dc in offsets:
            row, col = piece.x + dr, piece.y + dc
            if is_on_board(row, col):
                self.add_move(piece, row, col, moves)

    def _gen_rook(self, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(piece, ROOK_DIRS, moves)

    def _gen_bishop(self, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(piece, BISHOP_DIRS, moves)

    def _gen_queen(self, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(piece, ROOK_DIRS, moves)
        self._gen_sliding(piece, BISHOP_DIRS, moves)

    def _gen_knight(self, piece: Piece, moves: list[Move]) -> None:
        self._gen_steps(piece, KNIGHT_OFFSETS, moves)

    def _gen_king(self, piece: Piece, moves: list[Move]) -> None:
        self._gen_steps(piece, KING_OFFSETS, moves)

    _GENERATORS: dict[PieceType, Callable[[MoveGenerator, Piece, list[Move]], None]] = {
        PieceType.PAWN: _gen_pawn,
        PieceType.ROOK: _gen_rook,
        PieceType.KNIGHT: _gen_knight,
        PieceType.BISHOP: _gen_bishop,
        PieceType.QUEEN: _gen_queen,
        PieceType.KING: _gen_king,
    }


def possible_moves(
    piece: Piece,
    board: Board,
    capture_rule: CaptureRule = CaptureRule.ANY_OCCUPANT,
) -> list[Move]:
    """Shortcut for ``MoveGenerator(board, capture_rule).possible_moves(piece)``."""
    return MoveGenerator(board, capture_rule).possible_moves(piece)
