from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from curvesketch.curves.base import CurveEvaluator
from curvesketch.curves.basis import cox_de_boor, cubic_bspline, open_uniform_knots, support
from curvesketch.curves.registry import register_evaluator

if TYPE_CHECKING:
    import numpy.typing as npt


@register_evaluator
class ClampedBSplineEvaluator(CurveEvaluator):
    """
    Piecewise cubic uniform B-spline with boundary support blends.

    With N control points the curve has n = N - 3 spans. The first and last
    three points are weighted by the support blends, the interior ones by the
    shifted cubic kernel. The curve starts on the first control point and ends
    on the last one.

    Below BLEND_MIN_POINTS the blends of both ends would overlap. The curve is
    then evaluated with Cox-de Boor over open uniform knots of degree
    min(3, N - 1): a quadratic Bezier for 3 points, a cubic Bezier for 4 and
    two cubic spans for 5.
    """
    KEY = "bspline"
    LABEL = "B-spline"
    MIN_POINTS = 3
    BLEND_MIN_POINTS = 6

    def weights(self, count: int, t: float) -> npt.NDArray[np.float64]:
        if count < self.BLEND_MIN_POINTS:
            return self._short_weights(count, t)

        n = count - 3
        nt = n * t
        rt = n - nt

        w = np.empty(count, dtype=np.float64)
        w[0] = support(3, nt)
        w[1] = support(2, nt)
        w[2] = support(1, nt)
        for j in range(3, count - 3):
            w[j] = cubic_bspline(3, nt - j + 3)
        w[count - 3] = support(1, rt)
        w[count - 2] = support(2, rt)
        w[count - 1] = support(3, rt)
        return w

    @staticmethod
    def _short_weights(count: int, t: float) -> npt.NDArray[np.float64]:
        degree = min(3, count - 1)
        knots = open_uniform_knots(count, degree)
        x = (count - degree) * t
        return np.array([cox_de_boor(knots, i, degree, x) for i in range(count)], dtype=np.float64)


@register_evaluator
class UniformBSplineEvaluator(CurveEvaluator):
    """
    Cubic B-spline evaluating every control point with the same kernel.

    Point i (1-based) is weighted by N(3, N * t - i + 2). There is no
    boundary blend and no normalization: near t = 0 and t = 1 the weights do
    not sum to one and the curve does not reach the end points.
    """
    KEY = "bspline-uniform"
    LABEL = "B-spline (uniform)"
    MIN_POINTS = 3

    def weights(self, count: int, t: float) -> npt.NDArray[np.float64]:
        x = count * t
        return np.array(
            [cubic_bspline(3, x - i + 2) for i in range(1, count + 1)],
            dtype=np.float64,
        )
