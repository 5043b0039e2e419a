"""Thin singular value decomposition of tall or square matrices.

The default back end is the one-sided (Hestenes) Jacobi method: plane
rotations are applied to pairs of columns of a working copy of ``A`` until
every pair is orthogonal to machine precision. The accumulated rotations form
``V``, the column norms of the rotated matrix are the singular values, and the
normalized columns are the left singular vectors ``U``.

The rotations act on ``A / max|A|`` and the singular values are scaled back at
the end, so entries near the limits of the float64 range neither overflow nor
underflow when columns are multiplied together.

Columns whose norm collapses to rounding level (``cols * rows * eps * ‖A‖_F``) carry
no direction. Their singular values are reported as exactly zero and their
left singular vectors are filled in with unit vectors orthogonal to all the
others, so ``U`` always has orthonormal columns, even for rank-deficient input.
Deciding which singular values are too small to trust is left to the solver.

Examples:
    >>> import numpy as np
    >>> from regkit.regression.svd import decompose
    >>> res = decompose(np.array([[3.0, 0.0], [0.0, 4.0], [0.0, 0.0]]))
    >>> res.singular_values.tolist()
    [4.0, 3.0]
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from regkit.exceptions import ConfigurationError
from regkit.logger import regkit_logger
from regkit.utils.numerics import readonly, relative_error
from regkit.utils.types import ArrayLike2D
from regkit.utils.validate import validate_matrix

__all__ = ["SVDResult", "decompose", "resolve_method", "available_methods"]

_EPS = float(np.finfo(np.float64).eps)

# canonical name -> accepted aliases
_METHOD_SPECS: dict[str, tuple[str, ...]] = {
    "jacobi": ("one-sided-jacobi", "hestenes"),
    "lapack": ("numpy", "gesdd"),
}


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


def resolve_method(method: str) -> str:
    """Resolve an SVD method name or alias to its canonical name.

    Args:
        method: User-provided method name or alias.

    Returns:
        Canonical method name.

    Raises:
        ConfigurationError: If ``method`` is not recognized.
    """
    if isinstance(method, str):
        key = _norm(method)
        for name, aliases in _METHOD_SPECS.items():
            if key == _norm(name) or key in {_norm(a) for a in aliases}:
                return name
    opts = ", ".join(available_methods())
    raise ConfigurationError(f"Unknown SVD method {method!r}. Choose one of {{{opts}}}.")


def available_methods() -> list[str]:
    """List canonical SVD method names.

    Returns:
        List of method names.
    """
    return sorted(_METHOD_SPECS)


class SVDResult(NamedTuple):
    """Factors of ``A = U @ S @ V.T``.

    Attributes:
        u: Left singular vectors, shape ``(rows, cols)``, orthonormal columns.
        s: Diagonal matrix of singular values, shape ``(cols, cols)``,
            non-negative and sorted in descending order.
        v: Right singular vectors, shape ``(cols, cols)``, orthogonal.
    """

    u: NDArray[np.float64]
    s: NDArray[np.float64]
    v: NDArray[np.float64]

    @property
    def singular_values(self) -> NDArray[np.float64]:
        """Diagonal of ``s`` as a 1D array."""
        return readonly(np.diag(self.s))

    def reconstruct(self) -> NDArray[np.float64]:
        """Returns ``U @ S @ V.T``."""
        return self.u @ self.s @ self.v.T


def decompose(
    a: ArrayLike2D,
    *,
    method: str = "jacobi",
    max_sweeps: int = 60,
) -> SVDResult:
    """Computes the thin SVD of a matrix with at least as many rows as columns.

    Args:
        a: Matrix of shape ``(rows, cols)`` with ``rows >= cols``.
        method: ``"jacobi"`` for one-sided Jacobi rotations, or ``"lapack"``
            to delegate to ``numpy.linalg.svd``.
        max_sweeps: Maximum number of Jacobi sweeps over all column pairs.
            Ignored by the ``"lapack"`` method.

    Returns:
        :class:`SVDResult` with read-only ``u``, ``s`` and ``v``.

    Raises:
        DimensionError: If ``a`` is not 2D, is empty or is wider than tall.
        ConfigurationError: If ``a`` contains non-finite values or ``method``
            is unknown.
    """
    method = resolve_method(method)
    arr = validate_matrix(a)

    if method == "jacobi":
        u, sigma, v = _jacobi_svd(arr, max_sweeps=max_sweeps)
    else:
        u, sigma, v = _lapack_svd(arr)

    result = SVDResult(u=readonly(u), s=readonly(np.diag(sigma)), v=readonly(v))

    if regkit_logger.isEnabledFor(logging.DEBUG):
        regkit_logger.debug(
            "SVD (%s) of %dx%d matrix: sigma=%s, relative reconstruction error %.2e.",
            method,
            arr.shape[0],
            arr.shape[1],
            np.array2string(sigma, precision=4),
            relative_error(result.reconstruct(), arr),
        )
    return result


def _jacobi_svd(
    a: np.ndarray, *, max_sweeps: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """One-sided Jacobi SVD. Returns ``(u, sigma, v)`` with ``sigma`` sorted descending."""
    rows, cols = a.shape
    # rotate a copy scaled to max |entry| == 1 so column dot products stay in range
    scale = float(np.max(np.abs(a)))
    work = a / scale if scale > 0.0 else a.copy()
    v = np.eye(cols)
    tol = rows * _EPS
    # columns at or below this norm are rounding noise and carry no direction
    negligible = cols * tol * float(np.linalg.norm(work))
    negligible_sq = negligible * negligible

    sweeps = 0
    converged = cols < 2
    while not converged and sweeps < max_sweeps:
        sweeps += 1
        converged = True
        for p in range(cols - 1):
            for q in range(p + 1, cols):
                alpha = float(work[:, p] @ work[:, p])
                beta = float(work[:, q] @ work[:, q])
                if alpha <= negligible_sq or beta <= negligible_sq:
                    continue
                gamma = float(work[:, p] @ work[:, q])
                if gamma == 0.0 or abs(gamma) <= tol * math.sqrt(alpha * beta):
                    continue
                converged = False

                # rotation angle that zeroes the (p, q) entry of work.T @ work
                zeta = (beta - alpha) / (2.0 * gamma)
                t = math.copysign(1.0, zeta) / (abs(zeta) + math.hypot(1.0, zeta))
                c = 1.0 / math.sqrt(1.0 + t * t)
                s = c * t
                rot = np.array([[c, s], [-s, c]])

                work[:, [p, q]] = work[:, [p, q]] @ rot
                v[:, [p, q]] = v[:, [p, q]] @ rot

    if not converged:
        regkit_logger.warning(
            "Jacobi SVD did not converge within %d sweeps; "
            "returning the current decomposition.",
            max_sweeps,
        )
    else:
        regkit_logger.debug("Jacobi SVD converged after %d sweeps.", sweeps)

    sigma = np.linalg.norm(work, axis=0)
    has_direction = sigma > negligible
    sigma[~has_direction] = 0.0

    perm = np.argsort(-sigma, kind="stable")
    sigma = sigma[perm]
    work = work[:, perm]
    v = v[:, perm]
    has_direction = has_direction[perm]

    u = np.zeros((rows, cols))
    u[:, has_direction] = work[:, has_direction] / sigma[has_direction]
    if not np.all(has_direction):
        _complete_orthonormal_columns(u, has_direction)
    if scale > 0.0:
        sigma = sigma * scale
    return u, sigma, v


def _lapack_svd(a: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Thin SVD through ``numpy.linalg.svd``. Returns ``(u, sigma, v)``."""
    u, sigma, vt = np.linalg.svd(a, full_matrices=False)
    return u, sigma, vt.T


def _complete_orthonormal_columns(u: np.ndarray, filled: np.ndarray) -> None:
    """Fills the columns of ``u`` not marked in ``filled`` in place.

    Each missing column is built from the standard basis vector with the
    largest component outside the span of the columns already present,
    orthogonalized twice (classical Gram-Schmidt with re-orthogonalization)
    and normalized. The projector onto the complement has trace
    ``rows - filled.sum() > 0``, so the chosen basis vector always has a
    residual of squared norm at least ``(rows - filled.sum()) / rows``.
    """
    rows = u.shape[0]
    filled = filled.copy()
    for j in np.flatnonzero(~filled):
        q = u[:, filled]
        residual_sq = 1.0 - np.einsum("ki,ki->k", q, q)
        k = int(np.argmax(residual_sq))

        vec = np.zeros(rows)
        vec[k] = 1.0
        for _ in range(2):
            vec -= q @ (q.T @ vec)
        u[:, j] = vec / np.linalg.norm(vec)
        filled[j] = True
