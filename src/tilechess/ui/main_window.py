"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QMainWindow, QStatusBar

from tilechess.core.enums import CaptureRule
from tilechess.core.move_applier import MoveOutcome
from tilechess.core.types import cell_name
from tilechess.game.controller import SelectionController
from tilechess.game.interfaces import SelectionPhase
from tilechess.game.state import SelectionState
from tilechess.settings import AppSettings
from tilechess.ui.board.board_view import BoardView
from tilechess.ui.styles.theme import THEME_NAMES, BoardTheme


class MainWindow(QMainWindow):
    """Main application window for tilechess."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: SelectionController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("tilechess")
        self.setMinimumSize(480, 520)
        self.resize(640, 680)

        self._settings = settings or AppSettings()
        self._controller = controller or SelectionController(
            capture_rule=self._settings.capture_rule
        )

        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)
        self._status = QStatusBar()
        self.setStatusBar(self._status)

        self._setup_menu()
        self._connect_events()
        self.apply_settings()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        self._controller.set_show_possible_moves(s.show_possible_moves)
        self._controller.set_capture_rule(s.capture_rule)

        self._act_coords.setChecked(s.show_coordinates)
        self._act_moves.setChecked(s.show_possible_moves)
        self._act_opponent_only.setChecked(s.capture_rule == CaptureRule.OPPONENT_ONLY)
        for action in self._theme_group.actions():
            action.setChecked(action.text() == s.board_theme)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        view_menu = menu_bar.addMenu("&View")
        assert view_menu is not None
        self._act_coords = QAction("Show coordinates", self, checkable=True)
        self._act_coords.toggled.connect(self._on_show_coordinates)
        view_menu.addAction(self._act_coords)
        self._act_moves = QAction("Show possible moves", self, checkable=True)
        self._act_moves.toggled.connect(self._on_show_possible_moves)
        view_menu.addAction(self._act_moves)

        theme_menu = view_menu.addMenu("Board theme")
        assert theme_menu is not None
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        for name in THEME_NAMES:
            act = QAction(name, self, checkable=True)
            self._theme_group.addAction(act)
            theme_menu.addAction(act)
        self._theme_group.triggered.connect(self._on_theme)

        rules_menu = menu_bar.addMenu("&Rules")
        assert rules_menu is not None
        self._act_opponent_only = QAction("Capture opponents only", self, checkable=True)
        self._act_opponent_only.toggled.connect(self._on_opponent_only)
        rules_menu.addAction(self._act_opponent_only)

    def _connect_events(self) -> None:
        events = self._controller.events
        events.on_move_applied.append(self._on_move_applied)
        events.on_selection_changed.append(self._on_selection_changed)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_show_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._board_view.board_scene.set_show_coordinates(checked)

    def _on_show_possible_moves(self, checked: bool) -> None:
        self._settings.show_possible_moves = checked
        self._controller.set_show_possible_moves(checked)

    def _on_theme(self, action: QAction) -> None:
        self._settings.board_theme = action.text()
        self._board_view.board_scene.set_theme(BoardTheme.by_name(action.text()))

    def _on_opponent_only(self, checked: bool) -> None:
        rule = CaptureRule.OPPONENT_ONLY if checked else CaptureRule.ANY_OCCUPANT
        self._settings.capture_rule = rule
        self._controller.set_capture_rule(rule)

    def _on_move_applied(self, outcome: MoveOutcome) -> None:
        text = f"{cell_name(*outcome.origin)} → {cell_name(*outcome.move.destination)}"
        if outcome.captured is not None:
            text += f" ({outcome.captured.symbol} captured)"
        self._status.showMessage(text)

    def _on_selection_changed(self, state: SelectionState) -> None:
        if state.phase != SelectionPhase.PIECE_SELECTED or state.selected_piece is None:
            return
        count = len(state.selected_piece.moves)
        self._status.showMessage(f"{count} possible move{'s' if count != 1 else ''}")
