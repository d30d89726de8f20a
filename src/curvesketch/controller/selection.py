"""
Selection Controller
====================
Maps pointer input to point creation, selection and dragging.

States
------
IDLE      no point grabbed
DRAGGING  one point grabbed; the controller holds the point itself, not a copy

Events (canvas-local coordinates)
---------------------------------
press    release any grabbed point's flag, then grab the point under the cursor
move     move the grabbed point to the cursor
release  create a point if nothing is grabbed; drop the grabbed point otherwise

A plain click on empty canvas therefore creates a point, while
press-drag-release on an existing point only moves it. The two release branches
are evaluated independently and the release always ends with a redraw.
"""
from __future__ import annotations

from enum import IntEnum
import logging
from typing import Callable, Optional

from curvesketch.model.points import ControlPoint
from curvesketch.model.state import AppState

logger = logging.getLogger(__name__)


class DragState(IntEnum):
    IDLE = 0
    DRAGGING = 1


class SelectionController:
    """Press / move / release state machine over the control point store."""

    def __init__(self, state: AppState, request_redraw: Callable[[], None]) -> None:
        self.state = state
        self._request_redraw = request_redraw
        self._current: Optional[ControlPoint] = None

    @property
    def drag_state(self) -> DragState:
        return DragState.DRAGGING if self._current is not None else DragState.IDLE

    @property
    def current(self) -> Optional[ControlPoint]:
        """The grabbed point, if any."""
        return self._current

    def press(self, x: float, y: float) -> None:
        cleared = self._current is not None and self._current.selected
        if cleared:
            self._current.selected = False

        hit = self.state.points.find_at(x, y, self.state.style.node_radius)
        if hit is None:
            # the highlight is gone but the grab stays
            if cleared:
                self._request_redraw()
            return

        self._current = hit
        hit.selected = True
        logger.debug(f"Grabbed {hit.label}.")
        self._request_redraw()

    def move(self, x: float, y: float) -> None:
        if self._current is None:
            return
        self._current.move_to(x, y)
        self._request_redraw()

    def release(self, x: float, y: float) -> None:
        if self._current is None:
            point = self.state.points.add(x, y)
            logger.info(f"Created {point.label} at ({x:g}, {y:g}).")
            self._request_redraw()

        if self._current is not None:
            logger.debug(f"Released {self._current.label}.")
            self._current.selected = False
            self._current = None

        self._request_redraw()

    def reset(self) -> None:
        """Forget the grabbed point without touching the store."""
        if self._current is not None:
            self._current.selected = False
        self._current = None
