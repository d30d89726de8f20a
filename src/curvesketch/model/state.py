"""
Application State (Data Model)
==============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the control points, the display style and the
   active curve type in one place instead of module-level globals.
2. Decoupling: Views read from this object; Controllers write to this object.

Classes:
    CurveKind: The selectable curve shapes.
    AppState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging

from curvesketch.model.points import ControlPointStore
from curvesketch.model.style import StyleConfig

logger = logging.getLogger(__name__)


class CurveKind(StrEnum):
    BEZIER = "bezier"
    BSPLINE = "bspline"  # boundary-blended, endpoints interpolated
    BSPLINE_UNIFORM = "bspline-uniform"


@dataclass
class AppState:
    """
    Singleton-like class that holds the entire state of the editor.
    Pass this instance to your Controllers and Views.
    """
    points: ControlPointStore = field(default_factory=ControlPointStore)
    style: StyleConfig = field(default_factory=StyleConfig)
    curve_kind: CurveKind = CurveKind.BSPLINE

    def reset(self) -> None:
        """Clear all points and restore the default style."""
        self.points.clear()
        self.style.reset()
        self.curve_kind = CurveKind.BSPLINE
        logger.info("Application state has been reset.")
