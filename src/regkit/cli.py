"""Command-line entry point: fit a polynomial to samples read from a CSV file."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from regkit.exceptions import RegressionError
from regkit.io.samples import read_samples
from regkit.logger import regkit_logger
from regkit.regression.config import RegressionConfig
from regkit.regression.diagnostics import format_fit
from regkit.regression.solver import fit
from regkit.regression.svd import available_methods

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    """Returns the argument parser of the ``regkit`` command."""
    parser = argparse.ArgumentParser(
        prog="regkit",
        description="Least-squares polynomial fit of (x, y) samples from a headerless CSV file.",
    )
    parser.add_argument("path", help="CSV file with one 'x,y' pair per line.")
    parser.add_argument("-k", "--order", type=int, default=1, help="Polynomial order (default: 1).")
    parser.add_argument(
        "--rcond",
        type=float,
        default=None,
        help="Relative cutoff for small singular values (default: max(N, order+1) * eps).",
    )
    parser.add_argument(
        "--method",
        default="jacobi",
        choices=available_methods(),
        help="SVD back end (default: jacobi).",
    )
    parser.add_argument("--delimiter", default=",", help="Column separator (default: ',').")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Runs the ``regkit`` command.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns:
        Exit status: 0 on success, 2 if the file cannot be read or the fit
        is rejected.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        )
        regkit_logger.setLevel(logging.DEBUG)

    try:
        config = RegressionConfig(order=args.order, rcond=args.rcond, method=args.method)
        xs, ys = read_samples(args.path, delimiter=args.delimiter)
        result = fit(xs, ys, config=config)
    except (OSError, ValueError, RegressionError) as e:
        print(f"regkit: error: {e}", file=sys.stderr)
        return 2

    print(format_fit(result))
    if result.order == 1:
        print(f"The line has m = {result.coeffs[1]} and c = {result.coeffs[0]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
