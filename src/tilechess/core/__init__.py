"""Core domain layer — board, pieces, move generation and application.

Quick start::

    from tilechess.core import Board, possible_moves

    board = Board.initial()
    knight = board.piece_at(0, 2)
    for move in possible_moves(knight, board):
        print(move)
"""

from tilechess.core.arena import BoardInvariantError, PieceArena, PieceHandle
from tilechess.core.board import INITIAL_LAYOUT, Board
from tilechess.core.enums import CaptureRule, Color, MoveType, PieceType, TileStyle
from tilechess.core.move import Move
from tilechess.core.move_applier import MoveOutcome, apply_move, find_move
from tilechess.core.move_generator import MoveGenerator, possible_moves
from tilechess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from tilechess.core.piece import Piece
from tilechess.core.types import (
    BOARD_SIZE,
    Coord,
    cell_name,
    is_light,
    is_on_board,
    parse_cell,
)

__all__ = [
    # Enums
    "CaptureRule",
    "Color",
    "MoveType",
    "PieceType",
    "TileStyle",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "cell_name",
    "is_light",
    "is_on_board",
    "parse_cell",
    # Domain objects
    "Board",
    "BoardInvariantError",
    "INITIAL_LAYOUT",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "PieceArena",
    "PieceHandle",
    # Operations
    "apply_move",
    "find_move",
    "possible_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
