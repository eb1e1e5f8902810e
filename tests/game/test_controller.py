"""Tests for SelectionController — the click state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tilechess.core.board import Board
from tilechess.core.enums import CaptureRule, Color, MoveType, PieceType, TileStyle
from tilechess.core.move import Move
from tilechess.core.move_applier import MoveOutcome
from tilechess.core.piece import Piece
from tilechess.game.controller import SelectionController
from tilechess.game.interfaces import SelectionPhase

if TYPE_CHECKING:
    from tests.conftest import RecordingRenderer


def _lone_king_controller(renderer: RecordingRenderer) -> SelectionController:
    board = Board()
    board.spawn(Piece(PieceType.KING, Color.WHITE, 0, 4))
    return SelectionController(board, renderer)


class TestInitialState:
    def test_idle_without_selection(self) -> None:
        ctrl = SelectionController()
        assert ctrl.phase == SelectionPhase.IDLE
        assert ctrl.selected_tile is None
        assert ctrl.selected_piece is None

    def test_default_board_is_initial_layout(self) -> None:
        assert SelectionController().board == Board.initial()


class TestSelectPiece:
    def test_highlights_tile_and_moves(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        outcome = ctrl.click_tile(1, 4)

        assert outcome is None
        assert ctrl.phase == SelectionPhase.PIECE_SELECTED
        assert ctrl.selected_tile == (1, 4)
        assert renderer.tiles_with(TileStyle.SELECTED) == {(1, 4)}
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == {(2, 4), (3, 4)}
        selected = ctrl.selected_piece
        assert selected is not None
        assert selected.handle == ctrl.board.get(1, 4)
        assert selected.moves == (Move(2, 4), Move(3, 4))

    def test_reselecting_same_tile_is_idempotent(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.click_tile(0, 2)
        first_moves = ctrl.selected_piece
        first_tiles = renderer.tiles_with(TileStyle.POSSIBLE_MOVE)

        ctrl.click_tile(0, 2)

        assert ctrl.selected_piece == first_moves
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == first_tiles
        assert renderer.tiles_with(TileStyle.SELECTED) == {(0, 2)}

    def test_piece_click_reselects_instead_of_capturing(
        self, renderer: RecordingRenderer
    ) -> None:
        board = Board()
        rook = board.spawn(Piece(PieceType.ROOK, Color.WHITE, 3, 3))
        pawn = board.spawn(Piece(PieceType.PAWN, Color.BLACK, 3, 6))
        ctrl = SelectionController(board, renderer)

        ctrl.click_tile(3, 3)
        assert ctrl.selected_piece is not None
        assert Move(3, 6, MoveType.CAPTURE) in ctrl.selected_piece.moves

        outcome = ctrl.click_tile(3, 6)

        assert outcome is None
        assert ctrl.selected_piece is not None
        assert ctrl.selected_piece.handle == pawn
        assert board.get(3, 3) == rook
        assert board.get(3, 6) == pawn
        assert renderer.removed == []

    def test_switching_selection_clears_old_overlay(
        self, renderer: RecordingRenderer
    ) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.click_tile(1, 0)
        ctrl.click_tile(1, 7)
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == {(2, 7), (3, 7)}
        assert renderer.styles[(1, 0)] == TileStyle.NORMAL
        assert renderer.styles[(3, 0)] == TileStyle.NORMAL

    def test_opponent_only_rule(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(
            Board.initial(), renderer, capture_rule=CaptureRule.OPPONENT_ONLY
        )
        ctrl.click_tile(0, 3)
        assert ctrl.capture_rule == CaptureRule.OPPONENT_ONLY
        assert ctrl.selected_piece is not None
        assert ctrl.selected_piece.moves == ()
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == set()

    def test_rule_switch_recomputes_selected_moves(
        self, renderer: RecordingRenderer
    ) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.click_tile(0, 3)
        own_pieces = {(0, 2), (0, 4), (1, 2), (1, 3), (1, 4)}
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == own_pieces

        ctrl.set_capture_rule(CaptureRule.OPPONENT_ONLY)
        assert ctrl.selected_piece is not None
        assert ctrl.selected_piece.moves == ()
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == set()
        assert renderer.styles[(0, 3)] == TileStyle.SELECTED
        assert ctrl.phase == SelectionPhase.PIECE_SELECTED

        ctrl.set_capture_rule(CaptureRule.ANY_OCCUPANT)
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == own_pieces

    def test_rule_switch_without_selection(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.set_capture_rule(CaptureRule.OPPONENT_ONLY)
        assert ctrl.capture_rule == CaptureRule.OPPONENT_ONLY
        assert renderer.calls == []

    def test_hidden_possible_moves(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer, show_possible_moves=False)
        ctrl.click_tile(1, 4)
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == set()
        ctrl.set_show_possible_moves(True)
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == {(2, 4), (3, 4)}
        ctrl.set_show_possible_moves(False)
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == set()


class TestMovePiece:
    def test_king_moves_to_empty_neighbour(self, renderer: RecordingRenderer) -> None:
        ctrl = _lone_king_controller(renderer)
        handle = ctrl.board.get(0, 4)

        ctrl.click_tile(0, 4)
        outcome = ctrl.click_tile(1, 5)

        assert outcome is not None
        assert outcome.move == Move(1, 5, MoveType.MOVE)
        assert ctrl.board.get(0, 4) is None
        assert ctrl.board.get(1, 5) == handle
        assert ctrl.board.pieces[handle].position == (1, 5)
        assert renderer.positions[handle] == (1, 5)
        assert ctrl.phase == SelectionPhase.TILE_HIGHLIGHTED
        assert ctrl.selected_piece is None

    def test_overlay_cleared_after_move(self, renderer: RecordingRenderer) -> None:
        ctrl = _lone_king_controller(renderer)
        ctrl.click_tile(0, 4)
        ctrl.click_tile(1, 5)
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == set()
        assert renderer.tiles_with(TileStyle.SELECTED) == {(1, 5)}
        assert renderer.styles[(0, 4)] == TileStyle.NORMAL

    def test_pawn_double_step_by_clicks(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.click_tile(1, 4)
        outcome = ctrl.click_tile(3, 4)
        assert outcome is not None
        piece = ctrl.board.piece_at(3, 4)
        assert piece == Piece(PieceType.PAWN, Color.WHITE, 3, 4)
        assert ctrl.board.is_empty(1, 4)

    def test_invalid_target_leaves_board_alone(self, renderer: RecordingRenderer) -> None:
        ctrl = _lone_king_controller(renderer)
        handle = ctrl.board.get(0, 4)
        ctrl.click_tile(0, 4)

        outcome = ctrl.click_tile(5, 5)

        assert outcome is None
        assert ctrl.board.get(0, 4) == handle
        assert ctrl.board.pieces[handle].position == (0, 4)
        assert renderer.positions == {}
        assert ctrl.selected_piece is None
        assert ctrl.phase == SelectionPhase.TILE_HIGHLIGHTED

    def test_no_second_move_with_stale_selection(self, renderer: RecordingRenderer) -> None:
        ctrl = _lone_king_controller(renderer)
        ctrl.click_tile(0, 4)
        ctrl.click_tile(1, 5)
        # (0, 5) was a king move from the old square; the selection is gone.
        assert ctrl.click_tile(0, 5) is None
        assert ctrl.board.piece_at(1, 5) is not None


class TestEmptyTile:
    def test_click_without_selection_only_highlights(
        self, renderer: RecordingRenderer
    ) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        before = ctrl.board.copy()

        outcome = ctrl.click_tile(4, 4)

        assert outcome is None
        assert ctrl.phase == SelectionPhase.TILE_HIGHLIGHTED
        assert renderer.tiles_with(TileStyle.SELECTED) == {(4, 4)}
        assert renderer.positions == {} and renderer.removed == []
        assert ctrl.board == before

    def test_moving_highlight_resets_previous_tile(
        self, renderer: RecordingRenderer
    ) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.click_tile(4, 4)
        ctrl.click_tile(4, 5)
        assert renderer.styles[(4, 4)] == TileStyle.NORMAL
        assert renderer.tiles_with(TileStyle.SELECTED) == {(4, 5)}

    def test_click_off_board_is_ignored(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        assert ctrl.click_tile(8, 0) is None
        assert ctrl.click_tile(-1, 3) is None
        assert renderer.calls == []
        assert ctrl.phase == SelectionPhase.IDLE


class TestClearSelection:
    def test_returns_to_idle(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        ctrl.click_tile(1, 1)
        ctrl.clear_selection()
        assert ctrl.phase == SelectionPhase.IDLE
        assert ctrl.selected_tile is None
        assert ctrl.selected_piece is None
        assert renderer.tiles_with(TileStyle.SELECTED) == set()
        assert renderer.tiles_with(TileStyle.POSSIBLE_MOVE) == set()

    def test_phase_callback_only_on_change(self, renderer: RecordingRenderer) -> None:
        ctrl = SelectionController(Board.initial(), renderer)
        phases: list[SelectionPhase] = []
        ctrl.events.on_phase_changed.append(phases.append)

        ctrl.clear_selection()
        assert phases == []

        ctrl.click_tile(1, 1)
        ctrl.clear_selection()
        ctrl.clear_selection()
        assert phases == [SelectionPhase.PIECE_SELECTED, SelectionPhase.IDLE]


class TestEvents:
    def test_phase_and_move_callbacks(self, renderer: RecordingRenderer) -> None:
        ctrl = _lone_king_controller(renderer)
        phases: list[SelectionPhase] = []
        outcomes: list[MoveOutcome] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.events.on_move_applied.append(outcomes.append)

        ctrl.click_tile(0, 4)
        ctrl.click_tile(1, 4)
        ctrl.clear_selection()

        assert phases == [
            SelectionPhase.PIECE_SELECTED,
            SelectionPhase.TILE_HIGHLIGHTED,
            SelectionPhase.IDLE,
        ]
        assert len(outcomes) == 1
        assert outcomes[0].move.destination == (1, 4)

    def test_selection_callback_fires_per_click(self) -> None:
        ctrl = SelectionController()
        seen: list[SelectionPhase] = []
        ctrl.events.on_selection_changed.append(lambda state: seen.append(state.phase))
        ctrl.click_tile(0, 0)
        ctrl.click_tile(4, 4)
        assert seen == [SelectionPhase.PIECE_SELECTED, SelectionPhase.TILE_HIGHLIGHTED]
