"""SelectionController — turns tile clicks into highlights and board moves.

Owns the board and the selection state; reports every visual change through
an :class:`IBoardRenderer` and emits events via simple callbacks so the UI /
tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tilechess.core.board import Board
from tilechess.core.enums import CaptureRule, TileStyle
from tilechess.core.move_applier import MoveOutcome, apply_move
from tilechess.core.move_generator import MoveGenerator
from tilechess.core.types import Coord, cell_name, is_on_board
from tilechess.game.interfaces import (
    IBoardRenderer,
    ISelectionController,
    NullRenderer,
    SelectionPhase,
)
from tilechess.game.state import SelectedPiece, SelectionState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome], None]
SelectionCallback = Callable[[SelectionState], None]
PhaseCallback = Callable[[SelectionPhase], None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move_applied: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController(ISelectionController):
    """Click-driven selection state machine.

    A click on an occupied tile (re)selects that piece and highlights its
    moves; it never commits a move. A click on an empty tile while a piece
    is selected tries to move the piece there.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Each click is processed to completion before the
    next one.
    """

    __slots__ = (
        "_board",
        "_renderer",
        "_generator",
        "_state",
        "_show_possible_moves",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        renderer: IBoardRenderer | None = None,
        *,
        capture_rule: CaptureRule = CaptureRule.ANY_OCCUPANT,
        show_possible_moves: bool = True,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._renderer: IBoardRenderer = renderer or NullRenderer()
        self._generator = MoveGenerator(self._board, capture_rule)
        self._state = SelectionState()
        self._show_possible_moves = show_possible_moves
        self.events = ControllerEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    @property
    def selected_tile(self) -> Coord | None:
        return self._state.selected_tile

    @property
    def selected_piece(self) -> SelectedPiece | None:
        return self._state.selected_piece

    @property
    def capture_rule(self) -> CaptureRule:
        return self._generator.capture_rule

    def set_renderer(self, renderer: IBoardRenderer | None) -> None:
        self._renderer = renderer or NullRenderer()

    def set_capture_rule(self, rule: CaptureRule) -> None:
        """Switch capture rule and recompute the moves of the selected piece."""
        self._generator = MoveGenerator(self._board, rule)
        selected = self._state.selected_piece
        if selected is None:
            return
        piece = self._board.pieces[selected.handle]
        moves = tuple(self._generator.possible_moves(piece))
        if self._show_possible_moves:
            for m in selected.moves:
                self._renderer.set_tile_highlight(m.x, m.y, TileStyle.NORMAL)
            for m in moves:
                self._renderer.set_tile_highlight(m.x, m.y, TileStyle.POSSIBLE_MOVE)
        self._state.selected_piece = SelectedPiece(moves, selected.handle)
        self._emit_selection()

    def set_show_possible_moves(self, visible: bool) -> None:
        selected = self._state.selected_piece
        if selected is not None and visible != self._show_possible_moves:
            style = TileStyle.POSSIBLE_MOVE if visible else TileStyle.NORMAL
            for m in selected.moves:
                self._renderer.set_tile_highlight(m.x, m.y, style)
        self._show_possible_moves = visible

    # ── ISelectionController impl ────────────────────────────────────────

    def click_tile(self, row: int, col: int) -> MoveOutcome | None:
        if not is_on_board(row, col):
            _LOGGER.debug("Ignoring click outside the board: (%d, %d)", row, col)
            return None

        self._clear_highlights()

        self._state.selected_tile = (row, col)
        self._renderer.set_tile_highlight(row, col, TileStyle.SELECTED)

        # A piece on the tile is (re)selected; no move is attempted.
        handle = self._board.get(row, col)
        if handle is not None:
            piece = self._board.pieces[handle]
            moves = tuple(self._generator.possible_moves(piece))
            _LOGGER.debug(
                "Selected %s on %s: %s",
                piece.symbol,
                cell_name(row, col),
                ", ".join(str(m) for m in moves) or "no moves",
            )
            if self._show_possible_moves:
                for m in moves:
                    self._renderer.set_tile_highlight(m.x, m.y, TileStyle.POSSIBLE_MOVE)
            self._state.selected_piece = SelectedPiece(moves, handle)
            self._set_phase(SelectionPhase.PIECE_SELECTED)
            self._emit_selection()
            return None

        outcome: MoveOutcome | None = None
        selected = self._state.selected_piece
        if selected is not None:
            self._state.selected_piece = None
            outcome = apply_move(selected.moves, (row, col), self._board, selected.handle)
            if outcome is not None:
                self._render_outcome(outcome)

        self._set_phase(SelectionPhase.TILE_HIGHLIGHTED)
        self._emit_selection()
        if outcome is not None:
            self._emit_move(outcome)
        return outcome

    def clear_selection(self) -> None:
        self._clear_highlights()
        previous = self._state.phase
        self._state.reset()
        if previous != SelectionPhase.IDLE:
            self._emit_phase()
        self._emit_selection()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear_highlights(self) -> None:
        """Reset the previous tile and move overlay to the checkerboard."""
        tile = self._state.selected_tile
        if tile is not None:
            self._renderer.set_tile_highlight(*tile, TileStyle.NORMAL)
        selected = self._state.selected_piece
        if selected is not None and self._show_possible_moves:
            for m in selected.moves:
                self._renderer.set_tile_highlight(m.x, m.y, TileStyle.NORMAL)

    def _render_outcome(self, outcome: MoveOutcome) -> None:
        if outcome.captured_handle is not None:
            self._renderer.remove_piece_visual(outcome.captured_handle)
        self._renderer.set_piece_position(outcome.handle, outcome.move.x, outcome.move.y)

    def _set_phase(self, phase: SelectionPhase) -> None:
        if phase == self._state.phase:
            return
        self._state.phase = phase
        self._emit_phase()

    def _emit_phase(self) -> None:
        for cb in self.events.on_phase_changed:
            cb(self._state.phase)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state)

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move_applied:
            cb(outcome)
