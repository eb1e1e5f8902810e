"""Coordinate alias and helpers.

Cells are addressed as ``(row, col)`` with ``row`` 0 the White back rank.
Storage is row-major::

    (0, 0)=0, (0, 1)=1, ..., (0, 7)=7
    (1, 0)=8, ...
    ...
    (7, 0)=56, ..., (7, 7)=63
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 8

Coord: TypeAlias = tuple[int, int]  # (row, col)


def is_on_board(row: int, col: int) -> bool:
    """Check whether ``(row, col)`` lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def cell_index(row: int, col: int) -> int:
    """Row-major flat index of a cell. Raises IndexError off the board."""
    if not is_on_board(row, col):
        raise IndexError(f"Cell out of range: ({row}, {col})")
    return row * BOARD_SIZE + col


def is_light(row: int, col: int) -> bool:
    """Checkerboard parity: ``(0, 0)`` is a light tile."""
    return (row + col) % 2 == 0


def cell_name(row: int, col: int) -> str:
    """Human-readable name, e.g. ``(1, 4)`` -> ``'e2'``."""
    return chr(ord("a") + col) + str(row + 1)


def parse_cell(name: str) -> Coord:
    """Parse a cell name, e.g. ``'e2'`` -> ``(1, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid cell name: {name!r}")
    return int(name[1]) - 1, ord(name[0]) - ord("a")
