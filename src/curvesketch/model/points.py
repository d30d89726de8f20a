"""
Control Points (Data Model)
===========================
Ordered storage for the user-placed control points.

Insertion order is the drawing order, the basis order and the curve
parameterization order, so points are only ever appended or cleared
all at once.

Classes:
    ControlPoint: A labeled 2D point with a selection flag.
    ControlPointStore: The ordered collection of control points.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ControlPoint:
    """
    A single control point.

    Compared by identity: two points at the same position are still
    different points.
    """
    index: int  # 1-based, fixed at insertion
    x: float
    y: float
    selected: bool = False

    @property
    def label(self) -> str:
        return f"a{self.index}"

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def contains(self, x: float, y: float, radius: float) -> bool:
        """Strict hit-test against the square of half-width `radius` around the point."""
        return (
            self.x - radius < x < self.x + radius
            and self.y - radius < y < self.y + radius
        )


class ControlPointStore:
    """
    Ordered collection of control points.

    The store never requests a redraw; callers decide when to repaint.
    """
    def __init__(self) -> None:
        self._points: list[ControlPoint] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ControlPoint]:
        return iter(self._points)

    def __getitem__(self, item: int) -> ControlPoint:
        return self._points[item]

    def add(self, x: float, y: float) -> ControlPoint:
        """Append a new unselected point labeled with the next index."""
        point = ControlPoint(index=len(self._points) + 1, x=x, y=y)
        self._points.append(point)
        logger.debug(f"Added control point {point.label} at ({x:g}, {y:g}).")
        return point

    def clear(self) -> None:
        self._points.clear()
        logger.debug("Control points cleared.")

    def find_at(self, x: float, y: float, radius: float) -> Optional[ControlPoint]:
        """
        Return the first point (in insertion order) whose hit-box contains (x, y).

        Args:
            x: Canvas-local x coordinate.
            y: Canvas-local y coordinate.
            radius: Half-width of the square hit-box.

        Returns:
            The earliest inserted matching point, or None.
        """
        for point in self._points:
            if point.contains(x, y, radius):
                return point
        return None

    def selected(self) -> Optional[ControlPoint]:
        for point in self._points:
            if point.selected:
                return point
        return None

    def as_array(self) -> npt.NDArray[np.float64]:
        """Coordinates as an (N, 2) array in store order."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([(p.x, p.y) for p in self._points], dtype=np.float64)
