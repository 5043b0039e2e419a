"""Configuration for the least-squares polynomial regression.

This config controls the default polynomial order, how the SVD is computed,
where near-zero singular values are cut off, and when a fit is reported as
numerically unstable.
"""

from __future__ import annotations

import math

from regkit.exceptions import ConfigurationError
from regkit.regression.svd import resolve_method
from regkit.utils.validate import MAX_ORDER, validate_order

__all__ = ["RegressionConfig"]


class RegressionConfig:
    """Configuration for the least-squares polynomial regression."""

    def __init__(
        self,
        order: int = 1,
        max_order: int = MAX_ORDER,
        rcond: float | None = None,
        instability_threshold: float = 1e-6,
        method: str = "jacobi",
        max_sweeps: int = 60,
    ):
        """Initialize configuration.

        Args:
            order:
                Default polynomial order used when a call does not pass one.

            max_order:
                Largest polynomial order accepted. Orders above this are
                rejected with :class:`ConfigurationError` before any matrix
                is allocated.

            rcond:
                Relative cutoff for small singular values. A singular value
                ``sigma_j`` contributes to the solution only if
                ``sigma_j > rcond * sigma_0``. ``None`` selects
                ``max(n_samples, order + 1) * eps``.

            instability_threshold:
                Share of the total singular-value mass that may be truncated
                before the fit is flagged as unstable. Any truncation of a
                singular value also flags the fit, since the design matrix is
                then rank-deficient.

            method:
                SVD back end, ``"jacobi"`` (one-sided Jacobi rotations) or
                ``"lapack"`` (``numpy.linalg.svd``). Aliases such as
                ``"numpy"`` are accepted and stored by canonical name.

            max_sweeps:
                Upper bound on the number of Jacobi sweeps.

        Raises:
            ConfigurationError: If any value is out of range.
        """
        if isinstance(max_order, bool) or not isinstance(max_order, int) or max_order < 0:
            raise ConfigurationError(f"max_order must be a non-negative integer; got {max_order!r}.")
        self.max_order = max_order
        self.order = validate_order(order, max_order=max_order)

        if rcond is not None:
            rcond = float(rcond)
            if not math.isfinite(rcond) or rcond < 0.0:
                raise ConfigurationError(f"rcond must be finite and >= 0; got {rcond}.")
        self.rcond = rcond

        instability_threshold = float(instability_threshold)
        if not 0.0 <= instability_threshold <= 1.0:
            raise ConfigurationError(
                f"instability_threshold must lie in [0, 1]; got {instability_threshold}."
            )
        self.instability_threshold = instability_threshold

        self.method = resolve_method(method)

        if isinstance(max_sweeps, bool) or not isinstance(max_sweeps, int) or max_sweeps < 1:
            raise ConfigurationError(f"max_sweeps must be a positive integer; got {max_sweeps!r}.")
        self.max_sweeps = max_sweeps

    def __repr__(self) -> str:
        return (
            f"RegressionConfig(order={self.order}, max_order={self.max_order}, "
            f"rcond={self.rcond}, instability_threshold={self.instability_threshold}, "
            f"method={self.method!r}, max_sweeps={self.max_sweeps})"
        )
