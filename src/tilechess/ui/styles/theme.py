"""Visual theme constants and QSS styles for tilechess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from tilechess.core.enums import TileStyle


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board tiles."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # clicked tile
    possible_move: QColor  # destinations of the selected piece
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def tile_color(self, style: TileStyle, light: bool) -> QColor:
        """Brush colour for a tile in *style*."""
        if style == TileStyle.SELECTED:
            return self.selected
        if style == TileStyle.POSSIBLE_MOVE:
            return self.possible_move
        return self.light_square if light else self.dark_square

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(230, 230, 230),
            dark_square=QColor(26, 26, 26),
            selected=QColor(128, 128, 128),
            possible_move=QColor(230, 0, 0),
            coord_light=QColor(230, 230, 230),
            coord_dark=QColor(26, 26, 26),
        )

    @classmethod
    def brown(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(205, 210, 106),
            possible_move=QColor(214, 95, 80),
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selected=QColor(246, 246, 130),
            possible_move=QColor(214, 95, 80),
            coord_light=QColor(222, 227, 230),
            coord_dark=QColor(140, 162, 173),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names fall back to Classic."""
        theme_map = {
            "Classic": cls.default,
            "Brown": cls.brown,
            "Blue": cls.blue,
        }
        return theme_map.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Brown", "Blue")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QStatusBar {
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
