"""Abstract interfaces for the game layer.

The selection controller depends on these ABCs, not on a concrete
renderer, so tests and headless runs can plug in their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from tilechess.core.enums import TileStyle

if TYPE_CHECKING:
    from tilechess.core.arena import PieceHandle
    from tilechess.core.move_applier import MoveOutcome


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the click protocol."""

    IDLE = auto()
    TILE_HIGHLIGHTED = auto()
    PIECE_SELECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IBoardRenderer(ABC):
    """What the selection controller asks of whatever draws the board."""

    @abstractmethod
    def set_tile_highlight(self, row: int, col: int, style: TileStyle) -> None:
        """Paint tile ``(row, col)``; ``NORMAL`` means checkerboard colour."""

    @abstractmethod
    def set_piece_position(self, handle: PieceHandle, row: int, col: int) -> None:
        """Place the visual of *handle* on tile ``(row, col)``."""

    @abstractmethod
    def remove_piece_visual(self, handle: PieceHandle) -> None:
        """Drop the visual of a captured piece."""


class NullRenderer(IBoardRenderer):
    """Renderer that draws nothing (headless use)."""

    def set_tile_highlight(self, row: int, col: int, style: TileStyle) -> None:
        pass

    def set_piece_position(self, handle: PieceHandle, row: int, col: int) -> None:
        pass

    def remove_piece_visual(self, handle: PieceHandle) -> None:
        pass


class ISelectionController(ABC):
    """Interface for the click-driven controller."""

    @abstractmethod
    def click_tile(self, row: int, col: int) -> MoveOutcome | None:
        """Handle a click on tile ``(row, col)``.

        Returns the applied move, if the click committed one.
        """

    @abstractmethod
    def clear_selection(self) -> None:
        """Drop any selection and its highlights."""
