"""Least-squares polynomial regression through a truncated SVD pseudo-inverse."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from regkit.exceptions import NumericInstabilityWarning
from regkit.logger import regkit_logger
from regkit.regression.config import RegressionConfig
from regkit.regression.design import build_design_matrix
from regkit.regression.polynomial import evaluate
from regkit.regression.svd import SVDResult, decompose
from regkit.utils.concurrency import parallel_execute, resolve_workers
from regkit.utils.numerics import default_rcond, readonly
from regkit.utils.types import ArrayLike1D, ArrayLike2D
from regkit.utils.validate import validate_xy

__all__ = ["PolyFit", "pinv_solve", "fit", "solve", "fit_many"]


@dataclass(frozen=True)
class PolyFit:
    """Result of a least-squares polynomial fit.

    Attributes:
        coeffs: Power-basis coefficients, ``coeffs[j]`` multiplies ``x**j``.
            Shape ``(order + 1,)`` for 1D ``ys`` or ``(order + 1, n_comp)``
            for 2D ``ys``.
        order: Polynomial order of the fit.
        singular_values: Singular values of the design matrix, descending.
        rank: Number of singular values kept by the truncation.
        tolerance: Absolute cutoff; singular values ``<= tolerance`` were dropped.
        truncated_fraction: Share of the singular-value sum that was dropped.
        unstable: True if any singular value was dropped or the dropped share
            exceeds the configured threshold.
        residuals: ``ys - A @ coeffs``, same shape as ``ys``.
        rss: Residual sum of squares (per component for 2D ``ys``).
        r2: Coefficient of determination, NaN when ``ys`` is constant.
    """

    coeffs: NDArray[np.float64]
    order: int
    singular_values: NDArray[np.float64]
    rank: int
    tolerance: float
    truncated_fraction: float
    unstable: bool
    residuals: NDArray[np.float64]
    rss: float | NDArray[np.float64]
    r2: float | NDArray[np.float64]

    @property
    def n_coeffs(self) -> int:
        """Number of coefficients, ``order + 1``."""
        return self.order + 1

    def predict(self, x):
        """Evaluates the fitted polynomial at ``x`` (scalar or array)."""
        return evaluate(self.coeffs, x)


def pinv_solve(
    svd: SVDResult,
    y: np.ndarray,
    rcond: float,
) -> tuple[np.ndarray, int, float, float]:
    """Applies the truncated pseudo-inverse ``V @ diag(1/sigma) @ U.T`` to ``y``.

    Singular values ``sigma_j <= rcond * sigma_0`` contribute zero instead of
    ``alpha_j / sigma_j``, so rank-deficient systems give the minimum-norm
    solution rather than huge or non-finite coefficients.

    Args:
        svd: Decomposition of the design matrix.
        y: Right-hand side, shape ``(rows,)`` or ``(rows, n_comp)``.
        rcond: Relative cutoff for small singular values.

    Returns:
        Tuple ``(beta, rank, tolerance, truncated_fraction)``.
    """
    sigma = svd.singular_values
    tolerance = float(rcond * sigma[0]) if sigma.size else 0.0
    keep = (sigma > tolerance) & (sigma > np.finfo(np.float64).tiny)

    alpha = svd.u.T @ y
    inv_sigma = np.zeros_like(sigma)
    inv_sigma[keep] = 1.0 / sigma[keep]
    scaled = inv_sigma * alpha if alpha.ndim == 1 else inv_sigma[:, None] * alpha
    beta = svd.v @ scaled

    total = float(np.sum(sigma))
    dropped = float(np.sum(sigma[~keep]))
    if total > 0.0:
        truncated_fraction = dropped / total
    else:
        truncated_fraction = 1.0 if sigma.size else 0.0
    return beta, int(np.count_nonzero(keep)), tolerance, truncated_fraction


def fit(
    xs: ArrayLike1D,
    ys: ArrayLike1D | ArrayLike2D,
    order: int | None = None,
    *,
    config: RegressionConfig | None = None,
) -> PolyFit:
    """Fits a polynomial of the given order by least squares.

    Builds the design matrix ``A``, decomposes it as ``U S V^T``, forms
    ``alpha = U^T y``, scales by the inverse of the retained singular values
    and maps back with ``V``.

    Args:
        xs: Sample x-values, 1D.
        ys: Sample y-values, shape ``(n,)`` or ``(n, n_comp)``.
        order: Polynomial order. Defaults to ``config.order``.
        config: Regression settings. Defaults to :class:`RegressionConfig`.

    Returns:
        :class:`PolyFit` with the coefficients and fit diagnostics.

    Raises:
        ConfigurationError: If the order is invalid or the samples are empty
            or non-finite.
        DimensionError: If ``xs`` and ``ys`` differ in length, or there are
            fewer samples than ``order + 1``.

    Warns:
        NumericInstabilityWarning: If singular values had to be truncated.
    """
    config = config or RegressionConfig()
    if order is None:
        order = config.order
    x, y, order = validate_xy(xs, ys, order, max_order=config.max_order)

    design = build_design_matrix(x, order, max_order=config.max_order)
    svd = decompose(design, method=config.method, max_sweeps=config.max_sweeps)
    rcond = config.rcond if config.rcond is not None else default_rcond(*design.shape)

    beta, rank, tolerance, truncated_fraction = pinv_solve(svd, y, rcond)

    n_coeffs = order + 1
    unstable = rank < n_coeffs or truncated_fraction > config.instability_threshold
    regkit_logger.debug(
        "Order-%d fit on %d samples: rank %d/%d, cutoff %.3e, truncated %.3e of sigma mass.",
        order,
        x.size,
        rank,
        n_coeffs,
        tolerance,
        truncated_fraction,
    )
    if unstable:
        warnings.warn(
            f"Order-{order} fit is rank-deficient (rank {rank} < {n_coeffs}) or "
            f"truncated {truncated_fraction:.2e} of the singular-value mass; "
            "coefficients are the minimum-norm solution and may be unreliable.",
            NumericInstabilityWarning,
            stacklevel=2,
        )

    residuals = y - design @ beta
    rss = np.sum(residuals**2, axis=0)
    ss_tot = np.sum((y - np.mean(y, axis=0)) ** 2, axis=0)
    with np.errstate(divide="ignore", invalid="ignore"):
        r2 = np.where(ss_tot > 0.0, 1.0 - rss / np.where(ss_tot > 0.0, ss_tot, 1.0), np.nan)

    if y.ndim == 1:
        rss_out, r2_out = float(rss), float(r2)
    else:
        rss_out, r2_out = readonly(rss), readonly(r2)

    return PolyFit(
        coeffs=readonly(beta),
        order=order,
        singular_values=svd.singular_values,
        rank=rank,
        tolerance=tolerance,
        truncated_fraction=truncated_fraction,
        unstable=bool(unstable),
        residuals=readonly(residuals),
        rss=rss_out,
        r2=r2_out,
    )


def solve(
    xs: ArrayLike1D,
    ys: ArrayLike1D | ArrayLike2D,
    order: int | None = None,
    *,
    config: RegressionConfig | None = None,
) -> NDArray[np.float64]:
    """Returns the least-squares polynomial coefficients ``beta``.

    Same as ``fit(xs, ys, order, config=config).coeffs``; see :func:`fit`.

    Examples:
        >>> from regkit.regression.solver import solve
        >>> solve([1.0, 5.0], [2.0, 4.0], order=1).round(6).tolist()
        [1.5, 0.5]
    """
    return fit(xs, ys, order, config=config).coeffs


def fit_many(
    datasets: Iterable[tuple[ArrayLike1D, ArrayLike1D]],
    order: int | None = None,
    *,
    config: RegressionConfig | None = None,
    n_workers: int = 1,
) -> list[PolyFit]:
    """Fits every ``(xs, ys)`` pair independently.

    Each fit is its own task with no shared state, so the work can be spread
    over a thread pool. Results come back in input order.

    Args:
        datasets: Iterable of ``(xs, ys)`` pairs.
        order: Polynomial order for every fit. Defaults to ``config.order``.
        config: Regression settings shared by all fits.
        n_workers: Number of threads (``1`` runs serially).

    Returns:
        List of :class:`PolyFit`, one per dataset.

    Raises:
        ConfigurationError: As :func:`fit`, for the first failing dataset.
        DimensionError: As :func:`fit`, for the first failing dataset.
    """
    config = config or RegressionConfig()
    arg_tuples: Sequence[tuple] = [(xs, ys, order, config) for xs, ys in datasets]
    workers = resolve_workers(n_workers, len(arg_tuples))
    return parallel_execute(_fit_task, arg_tuples, n_workers=workers)


def _fit_task(xs, ys, order, config) -> PolyFit:
    return fit(xs, ys, order, config=config)
