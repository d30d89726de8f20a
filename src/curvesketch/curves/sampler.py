from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from curvesketch import config
from curvesketch.curves.base import CurveEvaluator

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Tolerance for the t = 1 end of the parameter walk
_END_EPS = 1e-9


def parameters(step: float) -> npt.NDArray[np.float64]:
    """
    Parameter values 0, step, 2 * step, ... up to and including the last one <= 1.

    Values are computed as k * step rather than accumulated, and a last value
    within 1e-9 of 1 is snapped to exactly 1.

    Raises:
        ValueError: If step is not within [MIN_STEP, 1]. The bound is checked
            before anything is allocated.
    """
    if not config.MIN_STEP <= step <= 1.0:
        raise ValueError(f"Sample step must be within [{config.MIN_STEP:g}, 1], got {step}.")
    count = int(math.floor(1.0 / step + _END_EPS))
    ts = np.arange(count + 1, dtype=np.float64) * step
    if abs(ts[-1] - 1.0) <= _END_EPS:
        ts[-1] = 1.0
    return ts


class CurveSampler:
    """
    Walks the curve parameter over [0, 1] and collects curve points.

    Nothing is cached: every call evaluates the current control points again.
    """
    def __init__(self, evaluator: CurveEvaluator) -> None:
        self.evaluator = evaluator

    def sample(self, points: npt.NDArray[np.float64], step: float) -> npt.NDArray[np.float64]:
        """
        Sample the curve.

        Args:
            points: (N, 2) array of control point coordinates.
            step: Parameter step in [MIN_STEP, 1].

        Returns:
            (M, 2) array of curve points in parameter order, or an empty (0, 2)
            array when there are too few control points.
        """
        ts = parameters(step)
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if not self.evaluator.is_drawable(len(points)):
            return np.empty((0, 2), dtype=np.float64)

        samples = np.empty((len(ts), 2), dtype=np.float64)
        for k, t in enumerate(ts):
            samples[k] = self.evaluator.evaluate(points, float(t))
        return samples
