"""Polynomial design matrix construction."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from regkit.utils.types import ArrayLike1D
from regkit.utils.numerics import readonly
from regkit.utils.validate import MAX_ORDER, validate_order, validate_samples

__all__ = ["build_design_matrix"]


def build_design_matrix(
    xs: ArrayLike1D,
    order: int,
    *,
    max_order: int = MAX_ORDER,
) -> NDArray[np.float64]:
    """Builds the Vandermonde design matrix in the increasing power basis.

    Row ``i`` is ``[x_i**0, x_i**1, ..., x_i**order]``. Column 0 is set to 1
    for every row, including rows where ``x_i == 0``.

    Args:
        xs: 1D sequence of sample x-values (non-empty, finite).
        order: Polynomial order (``>= 0``).
        max_order: Largest order accepted.

    Returns:
        Read-only array of shape ``(len(xs), order + 1)``.

    Raises:
        ConfigurationError: If ``order`` is invalid or ``xs`` is empty or
            contains non-finite values.
        DimensionError: If ``xs`` is not 1D.
    """
    order = validate_order(order, max_order=max_order)
    x = validate_samples(xs, name="xs")

    mat = np.empty((x.size, order + 1), dtype=np.float64)
    mat[:, 0] = 1.0
    # successive products keep x**j exact for integer-valued x
    for j in range(1, order + 1):
        mat[:, j] = mat[:, j - 1] * x
    return readonly(mat)
