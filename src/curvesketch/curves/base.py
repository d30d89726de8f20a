from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    import numpy.typing as npt


class CurveEvaluator(ABC):
    """
    Abstract base class for curve evaluators.

    An evaluator turns the control points and a parameter t in [0, 1] into a
    point on the curve. Subclasses only provide the basis weights; the curve
    point is the weighted sum of the control points.
    """
    KEY: str = "base"  # Override in subclass
    LABEL: str = "Curve"
    MIN_POINTS: int = 2

    @abstractmethod
    def weights(self, count: int, t: float) -> npt.NDArray[np.float64]:
        """
        Basis weight of every control point at parameter t.

        Args:
            count: Number of control points.
            t: Curve parameter in [0, 1].

        Returns:
            Array of shape (count,).
        """
        pass

    def is_drawable(self, count: int) -> bool:
        return count >= self.MIN_POINTS

    def evaluate(self, points: npt.NDArray[np.float64], t: float) -> npt.NDArray[np.float64]:
        """
        Evaluate the curve at parameter t.

        Args:
            points: (N, 2) array of control point coordinates.
            t: Curve parameter in [0, 1].

        Returns:
            The (x, y) curve point as an array of shape (2,).

        Raises:
            ValueError: If there are fewer than MIN_POINTS control points.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if not self.is_drawable(len(points)):
            raise ValueError(
                f"{self.LABEL} needs at least {self.MIN_POINTS} control points, got {len(points)}."
            )
        return self.weights(len(points), t) @ points

    def basis_matrix(self, count: int, ts: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Weights for every t in `ts`, shape (len(ts), count)."""
        return np.vstack([self.weights(count, float(t)) for t in ts])

    def plot_basis(self, count: int, samples: int = 400) -> None:
        """
        Plot the basis functions for `count` control points.
        """
        ts = np.linspace(0.0, 1.0, samples)
        matrix = self.basis_matrix(count, ts)

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))

        for i in range(count):
            plt.plot(ts, matrix[:, i], lw=1.5, label=f"a{i + 1}")
        plt.plot(ts, matrix.sum(axis=1), 'k--', lw=1, label="sum")

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(f"{self.LABEL} basis, {count} control points")
        plt.xlabel("t")
        plt.ylabel("weight")
        if count <= 12:
            plt.legend()

        plt.xlim(0.0, 1.0)
        plt.show()
