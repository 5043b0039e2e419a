"""Validation utilities for the regression core."""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regkit.exceptions import ConfigurationError, DimensionError

__all__ = [
    "MAX_ORDER",
    "validate_order",
    "validate_samples",
    "validate_xy",
    "validate_matrix",
]

MAX_ORDER = 64
"""Default cap on the polynomial order."""


def validate_order(order, *, max_order: int = MAX_ORDER) -> int:
    """Checks that ``order`` is a usable polynomial order and returns it as ``int``.

    Args:
        order: Requested polynomial order.
        max_order: Largest order accepted.

    Returns:
        The order as a plain Python ``int``.

    Raises:
        ConfigurationError: If ``order`` is not an integer, is negative or
            exceeds ``max_order``.
    """
    if isinstance(order, (bool, np.bool_)) or not isinstance(order, numbers.Integral):
        raise ConfigurationError(
            f"order must be a non-negative integer; got {order!r}."
        )
    order = int(order)
    if order < 0:
        raise ConfigurationError(f"order must be >= 0; got {order}.")
    if order > max_order:
        raise ConfigurationError(
            f"order {order} exceeds the maximum supported order {max_order}."
        )
    return order


def validate_samples(values: ArrayLike, *, name: str = "xs") -> NDArray[np.float64]:
    """Converts a sample sequence to a finite, non-empty 1D float array.

    Args:
        values: Sequence of sample values.
        name: Name used in error messages.

    Returns:
        A new 1D float64 array.

    Raises:
        DimensionError: If ``values`` is not one-dimensional.
        ConfigurationError: If ``values`` is empty or contains NaN/Inf.
    """
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must contain real numbers.") from e

    if arr.ndim != 1:
        raise DimensionError(f"{name} must be 1D; got shape {arr.shape}.")
    if arr.size == 0:
        raise ConfigurationError(f"{name} must not be empty.")
    if not np.all(np.isfinite(arr)):
        raise ConfigurationError(f"{name} contains non-finite values.")
    return arr


def validate_xy(
    xs: ArrayLike,
    ys: ArrayLike,
    order: int,
    *,
    max_order: int = MAX_ORDER,
) -> tuple[NDArray[np.float64], NDArray[np.float64], int]:
    """Validates a sample set and order before any numerical work is done.

    ``ys`` may be 1D (one response) or 2D with shape ``(n_samples, n_comp)``
    when several responses share the same ``xs``.

    Args:
        xs: Sample x-values.
        ys: Sample y-values, one row per x-value.
        order: Polynomial order.
        max_order: Largest order accepted.

    Returns:
        Tuple ``(xs, ys, order)`` as validated arrays and a plain ``int``.

    Raises:
        ConfigurationError: If the order is invalid or the samples are empty
            or non-finite.
        DimensionError: If the lengths differ or there are fewer samples than
            coefficients.
    """
    order = validate_order(order, max_order=max_order)
    x_arr = validate_samples(xs, name="xs")

    try:
        y_arr = np.array(ys, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("ys must contain real numbers.") from e
    if y_arr.ndim not in (1, 2):
        raise DimensionError(f"ys must be 1D or 2D; got shape {y_arr.shape}.")
    if y_arr.shape[0] != x_arr.shape[0]:
        raise DimensionError(
            f"xs and ys must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )
    if y_arr.size == 0:
        raise ConfigurationError("ys must not be empty.")
    if not np.all(np.isfinite(y_arr)):
        raise ConfigurationError("ys contains non-finite values.")

    n_coeffs = order + 1
    if x_arr.shape[0] < n_coeffs:
        raise DimensionError(
            f"order {order} needs at least {n_coeffs} samples; got {x_arr.shape[0]}."
        )
    return x_arr, y_arr, order


def validate_matrix(a: ArrayLike, *, name: str = "a") -> NDArray[np.float64]:
    """Validates a matrix for decomposition: 2D, finite and not wider than tall.

    Args:
        a: Matrix-like input.
        name: Name used in error messages.

    Returns:
        A new 2D float64 array.

    Raises:
        DimensionError: If ``a`` is not 2D, is empty, or has more columns than rows.
        ConfigurationError: If ``a`` contains NaN/Inf.
    """
    arr = np.array(a, dtype=np.float64)
    if arr.ndim != 2:
        raise DimensionError(f"{name} must be 2D; got ndim={arr.ndim}.")
    rows, cols = arr.shape
    if rows == 0 or cols == 0:
        raise DimensionError(f"{name} must not be empty; got shape {arr.shape}.")
    if rows < cols:
        raise DimensionError(
            f"{name} must have at least as many rows as columns; got shape {arr.shape}."
        )
    if not np.all(np.isfinite(arr)):
        raise ConfigurationError(f"{name} contains non-finite values.")
    return arr
