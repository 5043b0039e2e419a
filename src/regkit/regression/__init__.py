"""Least-squares polynomial regression core."""

from regkit.regression.config import RegressionConfig
from regkit.regression.design import build_design_matrix
from regkit.regression.polynomial import Line, evaluate, fit_line, line_through
from regkit.regression.solver import PolyFit, fit, fit_many, solve
from regkit.regression.svd import SVDResult, decompose

__all__ = [
    "RegressionConfig",
    "build_design_matrix",
    "SVDResult",
    "decompose",
    "PolyFit",
    "fit",
    "solve",
    "fit_many",
    "Line",
    "evaluate",
    "fit_line",
    "line_through",
]
