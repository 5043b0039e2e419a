"""Errors and warnings raised by RegKit."""

from __future__ import annotations

__all__ = [
    "RegressionError",
    "ConfigurationError",
    "DimensionError",
    "NumericInstabilityWarning",
]


class RegressionError(Exception):
    """Base class for all errors raised by the regression core."""


class ConfigurationError(RegressionError, ValueError):
    """Raises when the polynomial order, the samples or a setting is invalid.

    Detected before any numerical work: negative, non-integer or oversized
    orders, empty or non-finite samples, and unknown options.
    """


class DimensionError(RegressionError, ValueError):
    """Raises when array shapes do not fit together.

    Covers mismatched ``xs``/``ys`` lengths, wide matrices passed to the SVD
    engine and underdetermined fits (fewer samples than coefficients).
    """


class NumericInstabilityWarning(RuntimeWarning):
    """Warns that a fit truncated singular values and may be unreliable."""
