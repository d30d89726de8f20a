"""
Commands
========
The single mutation surface for discrete user commands (toggles, colors,
clearing, curve type and sampling step). Every command ends with a redraw
request.
"""
from __future__ import annotations

import logging
from typing import Callable

from curvesketch import config
from curvesketch.controller.selection import SelectionController
from curvesketch.curves.registry import create_evaluator
from curvesketch.curves.sampler import parameters
from curvesketch.model.state import AppState, CurveKind
from curvesketch.model.style import blend_colors, normalize_color

logger = logging.getLogger(__name__)


class Commands:
    def __init__(
        self,
        state: AppState,
        selection: SelectionController,
        request_redraw: Callable[[], None]
    ) -> None:
        self.state = state
        self.selection = selection
        self._request_redraw = request_redraw

    # ---- visibility ----

    def toggle_lines(self) -> None:
        self.state.style.show_lines = not self.state.style.show_lines
        logger.info(f"Control polygon {'shown' if self.state.style.show_lines else 'hidden'}.")
        self._request_redraw()

    def toggle_nodes(self) -> None:
        self.state.style.show_nodes = not self.state.style.show_nodes
        logger.info(f"Nodes {'shown' if self.state.style.show_nodes else 'hidden'}.")
        self._request_redraw()

    # ---- points ----

    def clear_points(self) -> None:
        self.selection.reset()
        self.state.points.clear()
        logger.info("All control points removed.")
        self._request_redraw()

    # ---- colors ----

    def set_line_color(self, color: str) -> None:
        self.state.style.line_color = normalize_color(color)
        logger.info(f"Line color set to {self.state.style.line_color}.")
        self._request_redraw()

    def set_curve_color(self, color: str) -> None:
        self.state.style.curve_color = normalize_color(color)
        logger.info(f"Curve color set to {self.state.style.curve_color}.")
        self._request_redraw()

    def set_node_color(self, color: str) -> None:
        """Set the node fill and derive the selected-node fill from it."""
        style = self.state.style
        style.node_fill_color = normalize_color(color)
        style.selected_node_fill_color = blend_colors(
            style.node_fill_color, config.HIGHLIGHT_BLEND_TARGET, config.HIGHLIGHT_BLEND_RATIO
        )
        logger.info(
            f"Node color set to {style.node_fill_color} "
            f"(selected: {style.selected_node_fill_color})."
        )
        self._request_redraw()

    # ---- curve ----

    def set_curve_kind(self, kind: str | CurveKind) -> None:
        """
        Raises:
            ValueError: If `kind` is not a known curve kind.
        """
        kind = CurveKind(kind)
        create_evaluator(kind)  # fail before mutating if nothing is registered
        self.state.curve_kind = kind
        logger.info(f"Curve type set to '{kind}'.")
        self._request_redraw()

    def set_step(self, step: float) -> None:
        """
        Raises:
            ValueError: If `step` is not within [MIN_STEP, 1].
        """
        parameters(step)
        self.state.style.step = float(step)
        logger.info(f"Sample step set to {step:g}.")
        self._request_redraw()

    # ---- reset ----

    def reset(self) -> None:
        """Clear the points, restore the default style and curve type."""
        self.selection.reset()
        self.state.reset()
        self._request_redraw()
