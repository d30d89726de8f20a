from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from curvesketch.curves.base import CurveEvaluator
from curvesketch.curves.basis import bernstein
from curvesketch.curves.registry import register_evaluator

if TYPE_CHECKING:
    import numpy.typing as npt


def bernstein_weights(count: int, t: float) -> npt.NDArray[np.float64]:
    """All Bernstein weights of degree count - 1 at t."""
    n = count - 1
    return np.array([bernstein(n, i, t) for i in range(count)], dtype=np.float64)


@register_evaluator
class BezierEvaluator(CurveEvaluator):
    """
    Global Bezier curve in Bernstein form.

    Every control point influences the whole curve. The curve passes
    through the first point at t = 0 and the last point at t = 1.
    Cost per sample grows quadratically with the point count, and past a
    few hundred points the exact binomials no longer fit a float.
    """
    KEY = "bezier"
    LABEL = "Bezier"
    MIN_POINTS = 2

    def weights(self, count: int, t: float) -> npt.NDArray[np.float64]:
        return bernstein_weights(count, t)
