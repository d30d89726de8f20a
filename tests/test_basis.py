import numpy as np
import pytest

from curvesketch.curves.basis import (
    bernstein, binomial, cox_de_boor, cubic_bspline, open_uniform_knots, support,
)


def test_binomial():
    assert binomial(0, 0) == 1
    assert binomial(5, 2) == 10
    assert binomial(10, 10) == 1
    assert binomial(4, 5) == 0
    assert binomial(30, 15) == 155117520


@pytest.mark.parametrize("n", [1, 2, 5, 9])
@pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 0.77, 1.0])
def test_bernstein_partition_of_unity(n, t):
    assert sum(bernstein(n, i, t) for i in range(n + 1)) == pytest.approx(1.0)


def test_bernstein_endpoints_are_exact():
    assert bernstein(4, 0, 0.0) == 1.0
    assert bernstein(4, 4, 1.0) == 1.0
    assert bernstein(4, 3, 1.0) == 0.0
    assert bernstein(4, 1, 0.0) == 0.0


def test_kernel_degree_zero_is_half_open():
    assert cubic_bspline(0, 0.0) == 1.0
    assert cubic_bspline(0, 0.999) == 1.0
    assert cubic_bspline(0, 1.0) == 0.0
    assert cubic_bspline(0, -0.001) == 0.0


def test_cubic_kernel_known_values():
    assert cubic_bspline(3, 0.0) == 0.0
    assert cubic_bspline(3, 1.0) == pytest.approx(1 / 6)
    assert cubic_bspline(3, 2.0) == pytest.approx(2 / 3)
    assert cubic_bspline(3, 3.0) == pytest.approx(1 / 6)
    assert cubic_bspline(3, 4.0) == 0.0
    assert cubic_bspline(3, 0.5) == pytest.approx(0.5 ** 3 / 6)


def test_cubic_kernel_is_symmetric():
    for x in np.linspace(0.0, 2.0, 9):
        assert cubic_bspline(3, x) == pytest.approx(cubic_bspline(3, 4.0 - x))


@pytest.mark.parametrize("x", [0.0, 0.25, 1.5, 2.9])
def test_shifted_kernels_sum_to_one(x):
    total = sum(cubic_bspline(3, x + k) for k in range(-4, 5))
    assert total == pytest.approx(1.0)


def test_unsupported_degree():
    with pytest.raises(ValueError):
        cubic_bspline(4, 0.5)
    with pytest.raises(ValueError):
        support(4, 0.5)


def test_support_at_start():
    assert support(3, 0.0) == 1.0
    assert support(2, 0.0) == 0.0
    assert support(1, 0.0) == 0.0


def test_support_vanishes_past_three():
    for order in (1, 2, 3):
        assert support(order, 3.0) == 0.0
        assert support(order, 5.5) == 0.0


def test_support_matches_clamped_basis_at_first_knot():
    # Clamped cubic basis over 0, 0, 0, 0, 1, 2, 3, ... evaluated at x = 1
    assert support(3, 1.0) == 0.0
    assert support(2, 1.0) == pytest.approx(1 / 4)
    assert support(1, 1.0) == pytest.approx(7 / 12)
    assert cubic_bspline(3, 1.0) == pytest.approx(1 / 6)


def test_open_uniform_knots():
    assert open_uniform_knots(5, 3) == [0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 2.0, 2.0, 2.0]
    assert open_uniform_knots(3, 2) == [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]
    with pytest.raises(ValueError):
        open_uniform_knots(3, 3)


@pytest.mark.parametrize("x", [0.0, 0.4, 1.0, 1.6, 2.0])
def test_cox_de_boor_partition_of_unity(x):
    knots = open_uniform_knots(5, 3)
    values = [cox_de_boor(knots, i, 3, x) for i in range(5)]
    assert sum(values) == pytest.approx(1.0)
    assert min(values) >= 0.0


def test_cox_de_boor_reaches_end_knot():
    knots = open_uniform_knots(5, 3)
    assert cox_de_boor(knots, 4, 3, 2.0) == 1.0
    assert cox_de_boor(knots, 0, 3, 0.0) == 1.0
