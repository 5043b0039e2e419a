"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "as_1d_float_array",
    "readonly",
    "default_rcond",
    "relative_error",
]


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Convert input to a 1D float array.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If the converted array is not 1D.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr.astype(np.float64, copy=False)


def readonly(arr: ArrayLike) -> NDArray[np.float64]:
    """Returns a fresh float64 copy of ``arr`` that cannot be written to.

    Every matrix handed back by the regression core goes through this helper,
    so callers own an independent array and cannot mutate it in place.
    """
    out = np.array(arr, dtype=np.float64, copy=True)
    out.flags.writeable = False
    return out


def default_rcond(rows: int, cols: int) -> float:
    """Returns the default relative singular-value cutoff ``max(rows, cols) * eps``.

    This is the same cutoff ``numpy.linalg.lstsq`` and ``matrix_rank`` use.
    """
    return max(int(rows), int(cols)) * float(np.finfo(np.float64).eps)


def relative_error(a: np.ndarray, b: np.ndarray) -> float:
    """Computes ``‖a - b‖_F / ‖b‖_F``, or the absolute error when ``b`` is zero.

    Args:
        a: Approximation.
        b: Reference.

    Returns:
        The relative Frobenius error as a float.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    scale = float(np.max(np.abs(b))) if b.size else 0.0
    if scale == 0.0:
        return float(np.linalg.norm(a - b))
    # norms of the rescaled arrays cannot overflow or underflow
    err = float(np.linalg.norm((a - b) / scale))
    ref = float(np.linalg.norm(b / scale))
    return err / ref
