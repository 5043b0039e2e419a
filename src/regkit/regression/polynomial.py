"""Evaluation of fitted polynomials and straight-line helpers."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from regkit.exceptions import ConfigurationError, DimensionError

__all__ = ["Line", "evaluate", "line_through", "fit_line"]


class Line(NamedTuple):
    """Straight line ``y = slope * x + intercept``."""

    slope: float
    intercept: float

    def __call__(self, x):
        return self.slope * np.asarray(x, dtype=float) + self.intercept


def evaluate(coeffs, x):
    """Evaluates a power-basis polynomial with Horner's method.

    Args:
        coeffs: Coefficients in increasing power order, shape ``(n,)`` or
            ``(n, n_comp)`` for several polynomials at once.
        x: Scalar or array of evaluation points.

    Returns:
        ``sum_j coeffs[j] * x**j``. A float for scalar ``x`` and 1D
        ``coeffs``; otherwise an array of shape ``x.shape`` (1D ``coeffs``)
        or ``x.shape + (n_comp,)`` (2D ``coeffs``).

    Raises:
        DimensionError: If ``coeffs`` is empty or more than 2D.
    """
    c = np.asarray(coeffs, dtype=float)
    if c.ndim not in (1, 2) or c.shape[0] == 0:
        raise DimensionError(f"coeffs must be a non-empty 1D or 2D array; got shape {c.shape}.")
    x_arr = np.asarray(x, dtype=float)
    xb = x_arr[..., None] if c.ndim == 2 else x_arr

    result = np.zeros(np.broadcast_shapes(xb.shape, c.shape[1:]))
    for coeff in c[::-1]:
        result = result * xb + coeff
    if result.ndim == 0:
        return float(result)
    return result


def line_through(p1: tuple[float, float], p2: tuple[float, float]) -> Line:
    """Returns the line through two points.

    Args:
        p1: First point ``(x, y)``.
        p2: Second point ``(x, y)``.

    Returns:
        :class:`Line` through both points.

    Raises:
        DimensionError: If the points share an x-value (vertical line).
        ConfigurationError: If a coordinate is not finite.

    Examples:
        >>> line_through((1.0, 2.0), (5.0, 4.0))
        Line(slope=0.5, intercept=1.5)
    """
    x1, y1 = map(float, p1)
    x2, y2 = map(float, p2)
    if not np.all(np.isfinite([x1, y1, x2, y2])):
        raise ConfigurationError("points must have finite coordinates.")
    if x1 == x2:
        raise DimensionError(f"points share x={x1}; a vertical line has no slope.")
    slope = (y1 - y2) / (x1 - x2)
    return Line(slope=slope, intercept=y1 - slope * x1)


def fit_line(xs, ys, *, config=None) -> Line:
    """Least-squares straight line through the samples.

    Args:
        xs: Sample x-values (at least two).
        ys: Sample y-values.
        config: Optional :class:`~regkit.regression.config.RegressionConfig`;
            its ``order`` is ignored.

    Returns:
        :class:`Line` with the fitted slope and intercept.
    """
    from regkit.regression.solver import solve

    beta = solve(xs, ys, 1, config=config)
    if beta.ndim != 1:
        raise DimensionError("fit_line expects a single response column.")
    return Line(slope=float(beta[1]), intercept=float(beta[0]))
