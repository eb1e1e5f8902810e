"""Game layer — the click-driven selection controller and its interfaces.

Quick start::

    from tilechess.game import SelectionController

    ctrl = SelectionController()
    ctrl.click_tile(1, 4)  # select the e2 pawn
    ctrl.click_tile(3, 4)  # push it two rows
"""

from tilechess.game.controller import ControllerEvents, SelectionController
from tilechess.game.interfaces import (
    IBoardRenderer,
    ISelectionController,
    NullRenderer,
    SelectionPhase,
)
from tilechess.game.state import SelectedPiece, SelectionState

__all__ = [
    # Interfaces
    "IBoardRenderer",
    "ISelectionController",
    "NullRenderer",
    "SelectionPhase",
    # Concrete
    "ControllerEvents",
    "SelectedPiece",
    "SelectionController",
    "SelectionState",
]
