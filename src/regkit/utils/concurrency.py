"""Concurrency helpers for batch regression."""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence, Tuple

__all__ = [
    "parallel_execute",
    "normalize_workers",
    "resolve_workers",
]


def _detect_hw_threads() -> int:
    """Detects the number of hardware threads.

    Returns:
        Number of hardware threads (at least 1).
    """
    return max(1, os.cpu_count() or 1)


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples, in order.

    With ``n_workers > 1`` the calls run on a thread pool; each task gets its
    own copy of the current context. The first exception raised by a task is
    re-raised.
    """
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]


def normalize_workers(n_workers: Any) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def resolve_workers(n_workers: Any, n_tasks: int) -> int:
    """Caps the requested worker count by the task count and hardware threads.

    Args:
        n_workers: Requested number of workers.
        n_tasks: Number of independent tasks.

    Returns:
        Number of threads to use (at least 1).
    """
    n = normalize_workers(n_workers)
    return max(1, min(n, n_tasks, _detect_hw_threads()))
