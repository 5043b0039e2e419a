"""Provides all regkit methods."""

from importlib.metadata import PackageNotFoundError, version

from regkit.exceptions import (
    ConfigurationError,
    DimensionError,
    NumericInstabilityWarning,
    RegressionError,
)
from regkit.io.samples import read_samples
from regkit.regression.config import RegressionConfig
from regkit.regression.design import build_design_matrix
from regkit.regression.polynomial import Line, evaluate, fit_line, line_through
from regkit.regression.solver import PolyFit, fit, fit_many, solve
from regkit.regression.svd import SVDResult, decompose
from regkit.regression_kit import RegressionKit

try:
    __version__ = version("regkit")
except PackageNotFoundError:
    pass

__all__ = [
    "RegressionKit",
    "RegressionConfig",
    "build_design_matrix",
    "decompose",
    "SVDResult",
    "solve",
    "fit",
    "fit_many",
    "PolyFit",
    "Line",
    "evaluate",
    "fit_line",
    "line_through",
    "read_samples",
    "RegressionError",
    "ConfigurationError",
    "DimensionError",
    "NumericInstabilityWarning",
]
