"""PieceArena - slot map of live pieces addressed by generational handles."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tilechess.core.piece import Piece


class BoardInvariantError(RuntimeError):
    """Board and piece bookkeeping disagree (missing occupant, stale handle)."""


@dataclass(frozen=True, slots=True)
class PieceHandle:
    """Stable reference to a piece slot.

    A handle goes stale once its piece is removed; the slot may then be
    reused under a higher generation.
    """

    index: int
    generation: int

    def __str__(self) -> str:
        return f"#{self.index}v{self.generation}"


class PieceArena:
    """Owns every live :class:`Piece` record."""

    __slots__ = ("_slots", "_generations", "_free")

    def __init__(self) -> None:
        self._slots: list[Piece | None] = []
        self._generations: list[int] = []
        # Freed indexes, reused last-in first-out.
        self._free: list[int] = []

    def insert(self, piece: Piece) -> PieceHandle:
        if self._free:
            index = self._free.pop()
            self._slots[index] = piece
        else:
            index = len(self._slots)
            self._slots.append(piece)
            self._generations.append(0)
        return PieceHandle(index, self._generations[index])

    def remove(self, handle: PieceHandle) -> Piece:
        """Drop the piece behind *handle* and free its slot."""
        piece = self[handle]
        self._slots[handle.index] = None
        self._generations[handle.index] += 1
        self._free.append(handle.index)
        return piece

    def get(self, handle: PieceHandle) -> Piece | None:
        """Resolve *handle*, or ``None`` when it is stale."""
        if not 0 <= handle.index < len(self._slots):
            return None
        if self._generations[handle.index] != handle.generation:
            return None
        return self._slots[handle.index]

    def __getitem__(self, handle: PieceHandle) -> Piece:
        piece = self.get(handle)
        if piece is None:
            raise BoardInvariantError(f"Piece not found: {handle}")
        return piece

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, PieceHandle) and self.get(handle) is not None

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def __iter__(self) -> Iterator[tuple[PieceHandle, Piece]]:
        for index, piece in enumerate(self._slots):
            if piece is not None:
                yield PieceHandle(index, self._generations[index]), piece

    def copy(self) -> PieceArena:
        arena = PieceArena()
        arena._slots = [
            None if p is None else Piece(p.piece_type, p.color, p.x, p.y)
            for p in self._slots
        ]
        arena._generations = self._generations.copy()
        arena._free = self._free.copy()
        return arena
