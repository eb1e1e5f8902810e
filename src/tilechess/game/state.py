"""Transient click-to-click selection state."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.arena import PieceHandle
from tilechess.core.move import Move
from tilechess.core.types import Coord
from tilechess.game.interfaces import SelectionPhase


@dataclass(frozen=True, slots=True)
class SelectedPiece:
    """A selected piece and the moves computed when it was selected."""

    moves: tuple[Move, ...]
    handle: PieceHandle


@dataclass
class SelectionState:
    """Currently highlighted tile and selected piece."""

    phase: SelectionPhase = SelectionPhase.IDLE
    selected_tile: Coord | None = None
    selected_piece: SelectedPiece | None = None

    def reset(self) -> None:
        self.phase = SelectionPhase.IDLE
        self.selected_tile = None
        self.selected_piece = None
