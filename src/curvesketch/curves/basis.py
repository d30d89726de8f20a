"""
Basis Functions
===============
Pure scalar math behind the curve evaluators.

Bernstein polynomials
    b(n, i, t) = C(n, i) * (1 - t)^(n - i) * t^i

Uniform cubic B-spline kernel (knots at the integers)
    N(0, x) = 1 for 0 <= x < 1, else 0
    N(k, x) = x / k * N(k-1, x) + (k + 1 - x) / k * N(k-1, x - 1)

Support blends
    S(3, x), S(2, x), S(1, x) are the first three cubic basis functions over
    the knot vector 0, 0, 0, 0, 1, 2, 3, ... (first knot repeated four times).
    They replace the kernel for the first (and, mirrored, the last) three
    control points so the curve starts and ends on a control point.

Open uniform knots (Cox-de Boor)
    General recursion over a knot vector whose end knots repeat degree + 1
    times. Used for polygons too short for the two boundary blends.
"""
from __future__ import annotations

import math


def binomial(n: int, i: int) -> int:
    """
    Exact binomial coefficient from integer factorials.

    Python integers never overflow, but the float conversion done by the
    caller loses precision past a few hundred points and the cost grows with n.
    """
    if i < 0 or i > n:
        return 0
    return math.factorial(n) // (math.factorial(i) * math.factorial(n - i))


def bernstein(n: int, i: int, t: float) -> float:
    """Weight of control point `i` (0-based) in a Bezier curve of degree `n`."""
    # (1 - t) ** 0 == 1.0 and 0.0 ** 0 == 1.0, so i == n needs no special case
    return binomial(n, i) * (1.0 - t) ** (n - i) * t ** i


def cubic_bspline(degree: int, x: float) -> float:
    """
    Uniform B-spline kernel N(degree, x) with support [0, degree + 1).

    Args:
        degree: 0, 1, 2 or 3.
        x: Evaluation point.
    """
    if degree == 0:
        return 1.0 if 0.0 <= x < 1.0 else 0.0
    if degree not in (1, 2, 3):
        raise ValueError(f"Unsupported B-spline degree: {degree}")
    if x < 0.0 or x >= degree + 1:
        return 0.0
    return (
        x * cubic_bspline(degree - 1, x)
        + (degree + 1 - x) * cubic_bspline(degree - 1, x - 1.0)
    ) / degree


def _clamped_quadratic(x: float) -> float:
    """Quadratic basis over the knots 0, 0, 1, 2."""
    return x * (1.0 - x) * cubic_bspline(0, x) + (2.0 - x) / 2.0 * cubic_bspline(1, x)


def support(order: int, x: float) -> float:
    """
    Boundary blend S(order, x).

    S(3, .) weights the outermost control point, S(1, .) the third one.
    All three vanish for x >= 3.
    """
    if order == 3:
        return (1.0 - x) ** 3 * cubic_bspline(0, x)
    if order == 2:
        return x * (1.0 - x) ** 2 * cubic_bspline(0, x) + (2.0 - x) / 2.0 * _clamped_quadratic(x)
    if order == 1:
        return x / 2.0 * _clamped_quadratic(x) + (3.0 - x) / 3.0 * cubic_bspline(2, x)
    raise ValueError(f"Unsupported support order: {order}")


def open_uniform_knots(count: int, degree: int) -> list[float]:
    """
    Knots 0 (degree + 1 times), 1, 2, ..., n (degree + 1 times) for `count`
    control points, where n = count - degree is the number of spans.
    """
    if count <= degree:
        raise ValueError(f"{count} control points are too few for degree {degree}")
    spans = count - degree
    return [0.0] * degree + [float(k) for k in range(spans + 1)] + [float(spans)] * degree


def cox_de_boor(knots: list[float], i: int, degree: int, x: float) -> float:
    """
    Basis function i of the given degree over `knots`, evaluated at `x`.

    Spans are half-open except the last non-empty one, which also contains the
    final knot so the last basis function reaches 1 at the end of the curve.
    """
    if degree == 0:
        lo, hi = knots[i], knots[i + 1]
        if lo <= x < hi:
            return 1.0
        return 1.0 if lo < hi == knots[-1] == x else 0.0

    left = 0.0
    span = knots[i + degree] - knots[i]
    if span > 0.0:
        left = (x - knots[i]) / span * cox_de_boor(knots, i, degree - 1, x)

    right = 0.0
    span = knots[i + degree + 1] - knots[i + 1]
    if span > 0.0:
        right = (knots[i + degree + 1] - x) / span * cox_de_boor(knots, i + 1, degree - 1, x)
    return left + right
