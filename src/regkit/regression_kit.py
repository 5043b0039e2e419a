"""Provides the RegressionKit API.

This class is a lightweight front end over RegKit's regression core.
You provide the samples once, then ask for design matrices, decompositions,
coefficients or full fits at any polynomial order.

Examples:
    Basic usage:

        >>> from regkit.regression_kit import RegressionKit
        >>> rk = RegressionKit(xs=[1.0, 2.0, 3.0], ys=[5.0, 8.0, 11.0])
        >>> rk.solve(order=1).round(6).tolist()
        [2.0, 3.0]
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from regkit.exceptions import ConfigurationError
from regkit.regression.config import RegressionConfig
from regkit.regression.design import build_design_matrix
from regkit.regression.solver import PolyFit, fit, solve
from regkit.regression.svd import SVDResult, decompose
from regkit.utils.numerics import readonly
from regkit.utils.types import ArrayLike1D, ArrayLike2D
from regkit.utils.validate import validate_samples


class RegressionKit:
    """Unified interface for least-squares polynomial regression.

    Attributes:
        xs: Sample x-values (read-only copy).
        ys: Sample y-values (read-only copy).
        config: Settings used for every call.
    """

    def __init__(
        self,
        xs: ArrayLike1D,
        ys: ArrayLike1D | ArrayLike2D,
        config: RegressionConfig | None = None,
    ):
        """Initializes the RegressionKit with a sample set.

        Args:
            xs: Sample x-values, 1D and non-empty.
            ys: Sample y-values, one row per x-value.
            config: Regression settings. Defaults to :class:`RegressionConfig`.

        Raises:
            ConfigurationError: If ``xs`` is empty or non-finite, or ``ys``
                is not a rectangular array of real numbers.
            DimensionError: If ``xs`` is not 1D.
        """
        self.xs = readonly(validate_samples(xs, name="xs"))
        try:
            self.ys = readonly(np.array(ys, dtype=np.float64))
        except (TypeError, ValueError) as e:
            raise ConfigurationError("ys must contain real numbers.") from e
        self.config = config or RegressionConfig()

    def _order(self, order: int | None) -> int:
        return self.config.order if order is None else order

    def design_matrix(self, order: int | None = None) -> NDArray[np.float64]:
        """Design matrix of the stored ``xs`` for ``order``."""
        return build_design_matrix(
            self.xs, self._order(order), max_order=self.config.max_order
        )

    def decompose(self, order: int | None = None) -> SVDResult:
        """SVD of the design matrix for ``order``."""
        return decompose(
            self.design_matrix(order),
            method=self.config.method,
            max_sweeps=self.config.max_sweeps,
        )

    def solve(self, order: int | None = None) -> NDArray[np.float64]:
        """Least-squares coefficients for ``order``; see :func:`regkit.regression.solver.solve`."""
        return solve(self.xs, self.ys, self._order(order), config=self.config)

    def fit(self, order: int | None = None) -> PolyFit:
        """Full fit with diagnostics; see :func:`regkit.regression.solver.fit`."""
        return fit(self.xs, self.ys, self._order(order), config=self.config)

    def predict(self, x, order: int | None = None):
        """Evaluates the fitted polynomial of ``order`` at ``x``."""
        return self.fit(order).predict(x)
