"""
Curve Canvas
============
The widget the user clicks on. It owns no state: mouse events go to the
SelectionController, painting goes through the RenderCoordinator.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from curvesketch import config
from curvesketch.controller.render import RenderCoordinator
from curvesketch.controller.selection import SelectionController
from curvesketch.model.state import AppState
from curvesketch.view.surface import QPainterSurface


class CurveCanvas(QWidget):
    """Interactive canvas for placing and dragging control points."""

    # Emitted after every repaint request, e.g. for status bar updates
    redrawn = Signal()

    def __init__(self, state: AppState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self.renderer = RenderCoordinator(state)
        self.selection = SelectionController(state, request_redraw=self.request_redraw)

        self.setMinimumSize(config.CANVAS_MIN_WIDTH, config.CANVAS_MIN_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.CrossCursor)

    # ---- redraw ----

    def request_redraw(self) -> None:
        """Repaint synchronously so the view never lags behind the model."""
        self.repaint()
        self.redrawn.emit()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            surface = QPainterSurface(painter, self.width(), self.height())
            self.renderer.redraw(surface)
        finally:
            painter.end()

    # ---- input ----

    @staticmethod
    def _canvas_position(event: QMouseEvent) -> tuple[float, float]:
        """Event position relative to the canvas' top-left corner."""
        pos = event.position()
        return float(pos.x()), float(pos.y())

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self.selection.press(*self._canvas_position(event))

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self.selection.move(*self._canvas_position(event))

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self.selection.release(*self._canvas_position(event))
