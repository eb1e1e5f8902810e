"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from tilechess.core.arena import PieceHandle
from tilechess.core.enums import TileStyle
from tilechess.game.interfaces import IBoardRenderer

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


class RecordingRenderer(IBoardRenderer):
    """Renderer double that keeps the latest style per tile and every call."""

    def __init__(self) -> None:
        self.styles: dict[tuple[int, int], TileStyle] = {}
        self.positions: dict[PieceHandle, tuple[int, int]] = {}
        self.removed: list[PieceHandle] = []
        self.calls: list[tuple[object, ...]] = []

    def set_tile_highlight(self, row: int, col: int, style: TileStyle) -> None:
        self.styles[(row, col)] = style
        self.calls.append(("highlight", row, col, style))

    def set_piece_position(self, handle: PieceHandle, row: int, col: int) -> None:
        self.positions[handle] = (row, col)
        self.calls.append(("position", handle, row, col))

    def remove_piece_visual(self, handle: PieceHandle) -> None:
        self.removed.append(handle)
        self.calls.append(("remove", handle))

    def tiles_with(self, style: TileStyle) -> set[tuple[int, int]]:
        return {cell for cell, s in self.styles.items() if s == style}


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
