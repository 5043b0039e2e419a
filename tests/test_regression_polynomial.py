"""Unit tests for regkit.regression.polynomial."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from regkit.exceptions import ConfigurationError, DimensionError
from regkit.regression.polynomial import Line, evaluate, fit_line, line_through


def test_evaluate_scalar_matches_direct_sum():
    """Tests Horner evaluation at a scalar point."""
    coeffs = [1.0, -2.0, 0.5, 3.0]
    x = 1.7
    expected = sum(c * x**k for k, c in enumerate(coeffs))

    out = evaluate(coeffs, x)

    assert isinstance(out, float)
    assert out == pytest.approx(expected)


def test_evaluate_array_matches_polyval():
    """Tests that evaluation on arrays matches np.polynomial.polynomial.polyval."""
    coeffs = np.array([0.3, -1.1, 0.0, 2.5])
    x = np.linspace(-2.0, 2.0, 11).reshape(11, 1)

    out = evaluate(coeffs, x)

    assert out.shape == (11, 1)
    assert_allclose(out, np.polynomial.polynomial.polyval(x, coeffs))


def test_evaluate_multi_component_coefficients():
    """Tests evaluation of several polynomials sharing the same points."""
    coeffs = np.array([[1.0, 0.0], [2.0, 1.0]])  # 1 + 2x and x
    out = evaluate(coeffs, np.array([0.0, 1.0, 2.0]))

    assert out.shape == (3, 2)
    assert_allclose(out, [[1.0, 0.0], [3.0, 1.0], [5.0, 2.0]])


def test_evaluate_rejects_empty_coefficients():
    """Tests that empty or 3D coefficients are rejected."""
    with pytest.raises(DimensionError):
        evaluate([], 1.0)
    with pytest.raises(DimensionError):
        evaluate(np.ones((2, 2, 2)), 1.0)


def test_line_through_two_points():
    """Tests the line through (1, 2) and (5, 4)."""
    line = line_through((1.0, 2.0), (5.0, 4.0))
    assert line == Line(slope=0.5, intercept=1.5)
    assert line(3.0) == pytest.approx(3.0)


def test_line_through_order_of_points_does_not_matter():
    """Tests that swapping the points gives the same line."""
    assert line_through((5.0, 4.0), (1.0, 2.0)) == line_through((1.0, 2.0), (5.0, 4.0))


def test_line_through_vertical_is_rejected():
    """Tests that two points with equal x raise DimensionError."""
    with pytest.raises(DimensionError, match="vertical"):
        line_through((2.0, 1.0), (2.0, 5.0))


def test_line_through_non_finite_is_rejected():
    """Tests that non-finite coordinates raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        line_through((0.0, np.nan), (1.0, 1.0))


def test_fit_line_agrees_with_line_through_for_two_points():
    """Tests that the least-squares line through two points is exact."""
    line = fit_line([1.0, 5.0], [2.0, 4.0])
    assert line.slope == pytest.approx(0.5)
    assert line.intercept == pytest.approx(1.5)


def test_fit_line_noisy_samples():
    """Tests fit_line on noisy data against np.polyfit."""
    rng = np.random.default_rng(11)
    x = np.linspace(0.0, 5.0, 40)
    y = 1.0 - 0.75 * x + rng.normal(0.0, 0.05, size=x.size)

    line = fit_line(x, y)
    slope, intercept = np.polyfit(x, y, 1)

    assert line.slope == pytest.approx(slope, rel=1e-9)
    assert line.intercept == pytest.approx(intercept, rel=1e-9)
