from __future__ import annotations

import os

# Headless Qt and matplotlib for the whole test session
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from curvesketch.model.state import AppState
from curvesketch.view.surface import DrawingSurface


class RecordingSurface(DrawingSurface):
    """Surface that records every primitive together with the active state."""

    def __init__(self, width: int = 800, height: int = 400) -> None:
        super().__init__()
        self._size = (width, height)
        self.ops: list[tuple] = []

    def size(self) -> tuple[int, int]:
        return self._size

    def clear(self) -> None:
        self.ops.append(("clear",))

    def draw_line(self, x0, y0, x1, y1) -> None:
        self.ops.append(("line", self.stroke_color, x0, y0, x1, y1))

    def draw_polyline(self, points) -> None:
        pts = np.asarray(points, dtype=np.float64)
        self.ops.append(("polyline", self.stroke_color, tuple(map(tuple, pts))))

    def draw_circle(self, cx, cy, radius, *, fill=True, stroke=True) -> None:
        self.ops.append(("circle", self.stroke_color, self.fill_color, cx, cy, radius))

    def draw_text(self, x, y, text) -> None:
        self.ops.append(("text", self.fill_color, self.font, x, y, text))

    def kinds(self) -> list[str]:
        return [op[0] for op in self.ops]


class RedrawCounter:
    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> None:
        self.count += 1


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def redraw() -> RedrawCounter:
    return RedrawCounter()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
