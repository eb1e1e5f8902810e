"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from tilechess.core.arena import PieceArena, PieceHandle
from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.types import BOARD_SIZE, cell_index

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
)


def _side_layout(color: Color) -> list[tuple[PieceType, Color, int, int]]:
    row = 0 if color == Color.WHITE else BOARD_SIZE - 1
    layout = [(pt, color, row, col) for col, pt in enumerate(BACK_RANK)]
    layout.extend(
        (PieceType.PAWN, color, color.pawn_row, col) for col in range(BOARD_SIZE)
    )
    return layout


# (type, color, row, col) for each of the 32 starting pieces.
INITIAL_LAYOUT: tuple[tuple[PieceType, Color, int, int], ...] = tuple(
    _side_layout(Color.WHITE) + _side_layout(Color.BLACK)
)


class Board:
    """Mutable 64-cell grid of piece handles plus the arena owning the pieces.

    The grid itself does no rules checking. Coordinates outside the board
    raise ``IndexError``.
    """

    __slots__ = ("_cells", "pieces")

    def __init__(self) -> None:
        self._cells: list[PieceHandle | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self.pieces = PieceArena()

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> PieceHandle | None:
        return self._cells[cell_index(row, col)]

    def set(self, row: int, col: int, handle: PieceHandle | None) -> None:
        self._cells[cell_index(row, col)] = handle

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Piece standing on ``(row, col)``, if any."""
        handle = self.get(row, col)
        if handle is None:
            return None
        return self.pieces[handle]

    def occupied(self) -> Iterator[tuple[int, int, PieceHandle]]:
        """Yield ``(row, col, handle)`` for every non-empty cell."""
        for idx, handle in enumerate(self._cells):
            if handle is not None:
                yield idx // BOARD_SIZE, idx % BOARD_SIZE, handle

    # -- Setup --------------------------------------------------------------

    def spawn(self, piece: Piece) -> PieceHandle:
        """Register *piece* and place it on its own cell."""
        if not self.is_empty(piece.x, piece.y):
            raise ValueError(f"Cell ({piece.x}, {piece.y}) is already occupied")
        handle = self.pieces.insert(piece)
        self.set(piece.x, piece.y, handle)
        return handle

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b.pieces = self.pieces.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * (BOARD_SIZE * BOARD_SIZE)
        self.pieces = PieceArena()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        b = cls()
        for piece_type, color, row, col in INITIAL_LAYOUT:
            b.spawn(Piece(piece_type, color, row, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return all(
            self.piece_at(r, c) == other.piece_at(r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.piece_at(row, col)
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
