"""Reading sample sets from delimited text files."""

from __future__ import annotations

import os
import warnings

import numpy as np
from numpy.typing import NDArray

from regkit.exceptions import ConfigurationError
from regkit.logger import regkit_logger

__all__ = ["read_samples"]


def read_samples(
    path: str | os.PathLike,
    *,
    delimiter: str = ",",
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Reads ``(x, y)`` pairs from a headerless two-column file.

    Lines starting with ``#`` are skipped. Row order is preserved.

    Args:
        path: Path to the file.
        delimiter: Column separator.

    Returns:
        Tuple ``(xs, ys)`` of 1D float arrays.

    Raises:
        OSError: If the file cannot be opened.
        ValueError: If a field is not a number.
        ConfigurationError: If the file holds no samples or does not have
            exactly two columns.
    """
    with warnings.catch_warnings():
        # an empty file is reported below as a ConfigurationError
        warnings.filterwarnings("ignore", message=".*input contained no data.*")
        data = np.loadtxt(path, delimiter=delimiter, dtype=np.float64, ndmin=2)

    if data.size == 0:
        raise ConfigurationError(f"{os.fspath(path)!r} contains no samples.")
    if data.shape[1] != 2:
        raise ConfigurationError(
            f"{os.fspath(path)!r} must have exactly two columns; got {data.shape[1]}."
        )
    regkit_logger.debug("Read %d samples from %s.", data.shape[0], os.fspath(path))
    return data[:, 0].copy(), data[:, 1].copy()
