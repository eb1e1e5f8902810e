"""BoardScene — QGraphicsScene that draws the tiles and piece glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tilechess.core.arena import PieceHandle
from tilechess.core.enums import TileStyle
from tilechess.core.types import BOARD_SIZE, Coord, is_light
from tilechess.game.interfaces import IBoardRenderer
from tilechess.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from tilechess.game.controller import SelectionController


class BoardScene(QGraphicsScene):
    """Renders the tiles, coordinates and piece glyphs of a controller's board.

    Clicks are forwarded to the controller; the controller answers through
    :class:`SceneRenderer`.
    """

    TILE = 80  # px per tile

    def __init__(
        self, controller: SelectionController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._show_coordinates = True

        self._tile_items: dict[Coord, QGraphicsRectItem] = {}
        self._tile_styles: dict[Coord, TileStyle] = {}
        self._piece_items: dict[PieceHandle, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        self._sync_pieces()
        controller.set_renderer(SceneRenderer(self))

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> SelectionController:
        return self._controller

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide row/column coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def tile_style(self, row: int, col: int) -> TileStyle:
        return self._tile_styles.get((row, col), TileStyle.NORMAL)

    # ── Renderer callbacks ───────────────────────────────────────────────

    def set_tile_highlight(self, row: int, col: int, style: TileStyle) -> None:
        self._tile_styles[(row, col)] = style
        color = self._theme.tile_color(style, is_light(row, col))
        self._tile_items[(row, col)].setBrush(QBrush(color))

    def set_piece_position(self, handle: PieceHandle, row: int, col: int) -> None:
        item = self._piece_items.get(handle)
        if item is None:
            return
        self._place_item(item, row, col)

    def remove_piece_visual(self, handle: PieceHandle) -> None:
        item = self._piece_items.pop(handle, None)
        if item is not None:
            self.removeItem(item)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles and coordinates."""
        for tile_item in self._tile_items.values():
            self.removeItem(tile_item)
        self._tile_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                vc, vr = self._visual_coords(row, col)
                light = is_light(row, col)
                style = self._tile_styles.get((row, col), TileStyle.NORMAL)
                rect = QGraphicsRectItem(vc * t, vr * t, t, t)
                rect.setBrush(QBrush(self._theme.tile_color(style, light)))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._tile_items[(row, col)] = rect

                # Row numbers (left edge)
                if col == 0:
                    self._add_coord(str(row + 1), light, vc * t + 2, vr * t + 1, font)
                # Column letters (bottom edge)
                if row == 0:
                    self._add_coord(
                        chr(ord("a") + col), light, vc * t + t - 12, vr * t + t - 16, font
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, light: bool, x: float, y: float, font: QFont
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(self._theme.coord_dark if light else self._theme.coord_light))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the controller's board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        board = self._controller.board
        font = QFont("Sans Serif", int(self.TILE * 0.6))
        for row, col, handle in board.occupied():
            item = QGraphicsSimpleTextItem(board.pieces[handle].symbol)
            item.setFont(font)
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[handle] = item
            self._place_item(item, row, col)

    def _place_item(self, item: QGraphicsSimpleTextItem, row: int, col: int) -> None:
        t = self.TILE
        vc, vr = self._visual_coords(row, col)
        bounds = item.boundingRect()
        item.setPos(
            vc * t + (t - bounds.width()) / 2, vr * t + (t - bounds.height()) / 2
        )

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        cell = self._pos_to_cell(event.scenePos())
        if cell is None:
            self._controller.clear_selection()
        else:
            self._controller.click_tile(*cell)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Board cell to visual (column, row); row 0 is drawn at the bottom."""
        return col, BOARD_SIZE - 1 - row

    def _pos_to_cell(self, pos: QPointF) -> Coord | None:
        """Scene position → board cell."""
        t = self.TILE
        vc = int(pos.x() // t)
        vr = int(pos.y() // t)
        if not (0 <= vc < BOARD_SIZE and 0 <= vr < BOARD_SIZE):
            return None
        return BOARD_SIZE - 1 - vr, vc


class SceneRenderer(IBoardRenderer):
    """Adapts a :class:`BoardScene` to the controller's renderer interface."""

    def __init__(self, scene: BoardScene) -> None:
        self._scene = scene

    def set_tile_highlight(self, row: int, col: int, style: TileStyle) -> None:
        self._scene.set_tile_highlight(row, col, style)

    def set_piece_position(self, handle: PieceHandle, row: int, col: int) -> None:
        self._scene.set_piece_position(handle, row, col)

    def remove_piece_visual(self, handle: PieceHandle) -> None:
        self._scene.remove_piece_visual(handle)
