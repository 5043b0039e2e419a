"""Human-readable summaries of polynomial fits."""

from __future__ import annotations

import numpy as np

from regkit.regression.solver import PolyFit
from regkit.utils.numerics import as_1d_float_array

__all__ = ["format_polynomial", "format_fit", "print_fit"]


def format_polynomial(coeffs, *, decimals: int = 6, var: str = "x") -> str:
    """Formats 1D power-basis coefficients as ``c0 + c1*x + c2*x^2 ...``."""
    c = as_1d_float_array(coeffs, name="coeffs")
    terms = []
    for j, cj in enumerate(c):
        mag = f"{abs(cj):.{decimals}g}"
        if j == 0:
            body = mag
        elif j == 1:
            body = f"{mag}*{var}"
        else:
            body = f"{mag}*{var}^{j}"
        if not terms:
            terms.append(f"-{body}" if cj < 0 else body)
        else:
            terms.append(f"- {body}" if cj < 0 else f"+ {body}")
    return " ".join(terms)


def format_fit(fit: PolyFit, *, decimals: int = 6) -> str:
    """Format a :class:`PolyFit` into a human-readable string.

    Args:
      fit: Result of :func:`regkit.regression.solver.fit`.
      decimals: Significant digits for coefficients and metrics.

    Returns:
      A multi-line summary of coefficients, singular values and fit quality.
    """
    with np.printoptions(precision=decimals, suppress=True):
        lines = ["=== Polynomial Fit ==="]
        lines.append(f"order={fit.order}  n_samples={fit.residuals.shape[0]}")
        if fit.coeffs.ndim == 1:
            lines.append(f"y = {format_polynomial(fit.coeffs, decimals=decimals)}")
        else:
            for k in range(fit.coeffs.shape[1]):
                lines.append(
                    f"y[{k}] = {format_polynomial(fit.coeffs[:, k], decimals=decimals)}"
                )
        lines.append(f"coeffs={np.asarray(fit.coeffs)}")
        lines.append(f"singular_values={np.asarray(fit.singular_values)}")
        lines.append(f"rank={fit.rank}/{fit.n_coeffs}  cutoff={fit.tolerance:.3e}")
        lines.append(f"rss={np.asarray(fit.rss)}  r2={np.asarray(fit.r2)}")
        if fit.unstable:
            lines.append(
                "WARNING: singular values were truncated "
                f"({fit.truncated_fraction:.2e} of total); the fit may be unreliable."
            )
    return "\n".join(lines)


def print_fit(fit: PolyFit, *, decimals: int = 6) -> None:
    """Print the output of :func:`format_fit`."""
    print(format_fit(fit, decimals=decimals))
