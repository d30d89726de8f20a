"""
Render Coordinator
==================
Draws the current application state onto a drawing surface.

Order of a redraw:
1. clear the surface,
2. control polygon (if "show lines"),
3. sampled curve (if there are enough points for the active curve type),
4. nodes with their labels (if "show nodes").

Redrawing is a pure function of the state, so repeated calls without a
mutation in between produce the same picture.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from curvesketch import config
from curvesketch.curves.base import CurveEvaluator
from curvesketch.curves.registry import create_evaluator
from curvesketch.curves.sampler import CurveSampler
from curvesketch.model.state import AppState

if TYPE_CHECKING:
    from curvesketch.view.surface import DrawingSurface

logger = logging.getLogger(__name__)


class RenderCoordinator:
    def __init__(self, state: AppState) -> None:
        self.state = state

    def evaluator(self) -> CurveEvaluator:
        """Evaluator for the currently selected curve kind."""
        return create_evaluator(self.state.curve_kind)

    def redraw(self, surface: DrawingSurface) -> None:
        surface.clear()
        self._draw_lines(surface)
        self._draw_curve(surface)
        self._draw_nodes(surface)

    def _draw_lines(self, surface: DrawingSurface) -> None:
        style = self.state.style
        if not style.show_lines or len(self.state.points) < 2:
            return

        surface.set_stroke_color(style.line_color)
        surface.set_line_width(1.0)
        points = list(self.state.points)
        for a, b in zip(points[:-1], points[1:]):
            surface.draw_line(a.x, a.y, b.x, b.y)

    def _draw_curve(self, surface: DrawingSurface) -> None:
        evaluator = self.evaluator()
        count = len(self.state.points)
        if not evaluator.is_drawable(count):
            return

        samples = CurveSampler(evaluator).sample(self.state.points.as_array(), self.state.style.step)
        logger.debug(f"{evaluator.LABEL}: {len(samples)} samples from {count} points.")

        surface.set_stroke_color(self.state.style.curve_color)
        surface.set_line_width(config.CURVE_LINE_WIDTH)
        surface.draw_polyline(samples)

    def _draw_nodes(self, surface: DrawingSurface) -> None:
        style = self.state.style
        if not style.show_nodes:
            return

        surface.set_font(style.font_family, style.font_size)
        surface.set_line_width(1.0)
        for point in self.state.points:
            surface.set_stroke_color(style.node_stroke_color)
            surface.set_fill_color(style.selected_node_fill_color if point.selected else style.node_fill_color)
            surface.draw_circle(point.x, point.y, style.node_radius)

            surface.set_fill_color(style.font_color)
            surface.draw_text(point.x + style.font_size / 2, point.y + style.font_size, point.label)
