"""
Drawing Surfaces
================
The renderer draws through the small `DrawingSurface` interface, so the
curve and node drawing logic does not depend on Qt.

Classes:
    DrawingSurface: Abstract 2D surface (stroke / fill colors, font, primitives).
    QPainterSurface: Implementation on top of an active QPainter.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QPolygonF

from curvesketch import config

if TYPE_CHECKING:
    import numpy.typing as npt


class DrawingSurface(ABC):
    """
    Abstract drawing surface with canvas-like state.

    The current stroke color, fill color, font and line width are stored here
    and read back by the primitives of the concrete surface. Text is drawn in
    the fill color.
    """
    def __init__(self) -> None:
        self._stroke_color: str = "#000000"
        self._fill_color: str = "#000000"
        self._font: tuple[str, int] = (config.FONT_FAMILY, config.FONT_SIZE)
        self._line_width: float = 1.0

    # ---- state ----

    @property
    def stroke_color(self) -> str:
        return self._stroke_color

    @property
    def fill_color(self) -> str:
        return self._fill_color

    @property
    def font(self) -> tuple[str, int]:
        return self._font

    @property
    def line_width(self) -> float:
        return self._line_width

    def set_stroke_color(self, color: str) -> None:
        self._stroke_color = color

    def set_fill_color(self, color: str) -> None:
        self._fill_color = color

    def set_font(self, family: str, size: int) -> None:
        self._font = (family, size)

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    # ---- primitives ----

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Width and height in pixels."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Erase the whole surface."""
        pass

    @abstractmethod
    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Stroke a straight segment in the stroke color."""
        pass

    @abstractmethod
    def draw_polyline(self, points: npt.NDArray[np.float64]) -> None:
        """Stroke straight segments between consecutive rows of an (M, 2) array."""
        pass

    @abstractmethod
    def draw_circle(self, cx: float, cy: float, radius: float, *, fill: bool = True, stroke: bool = True) -> None:
        """Fill and/or stroke a full circle."""
        pass

    @abstractmethod
    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw text with its baseline starting at (x, y), in the fill color."""
        pass


class QPainterSurface(DrawingSurface):
    """DrawingSurface backed by an active QPainter (widget, QImage, ...)."""

    def __init__(
        self,
        painter: QPainter,
        width: int,
        height: int,
        background: str = config.CANVAS_BACKGROUND
    ) -> None:
        super().__init__()
        self.painter = painter
        self._width = width
        self._height = height
        self._background = background
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def clear(self) -> None:
        self.painter.fillRect(0, 0, self._width, self._height, QColor(self._background))

    def _pen(self) -> QPen:
        pen = QPen(QColor(self.stroke_color))
        pen.setWidthF(self.line_width)
        return pen

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.painter.setPen(self._pen())
        self.painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))

    def draw_polyline(self, points: npt.NDArray[np.float64]) -> None:
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if len(pts) < 2:
            return
        polygon = QPolygonF([QPointF(float(x), float(y)) for x, y in pts])
        self.painter.setPen(self._pen())
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPolyline(polygon)

    def draw_circle(self, cx: float, cy: float, radius: float, *, fill: bool = True, stroke: bool = True) -> None:
        self.painter.setPen(self._pen() if stroke else Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(QColor(self.fill_color)) if fill else Qt.BrushStyle.NoBrush)
        self.painter.drawEllipse(QPointF(cx, cy), radius, radius)

    def draw_text(self, x: float, y: float, text: str) -> None:
        family, size = self.font
        font = QFont(family)
        font.setPixelSize(size)
        self.painter.setFont(font)
        self.painter.setPen(QColor(self.fill_color))
        self.painter.drawText(QPointF(x, y), text)
