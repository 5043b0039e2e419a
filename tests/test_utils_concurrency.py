"""Tests for regkit.utils.concurrency."""

from __future__ import annotations

import contextvars

import pytest

from regkit.utils import concurrency as conc

_marker: contextvars.ContextVar[str] = contextvars.ContextVar("marker", default="unset")


def test_normalize_workers_coerces_invalid_values():
    """normalize_workers should map bad input to 1."""
    assert conc.normalize_workers(None) == 1
    assert conc.normalize_workers("x") == 1
    assert conc.normalize_workers(-3) == 1
    assert conc.normalize_workers(2.7) == 2


def test_resolve_workers_caps_by_tasks_and_hardware(monkeypatch):
    """resolve_workers should not exceed the task or thread count."""
    monkeypatch.setattr(conc, "_detect_hw_threads", lambda: 4)
    assert conc.resolve_workers(8, n_tasks=10) == 4
    assert conc.resolve_workers(8, n_tasks=2) == 2
    assert conc.resolve_workers(3, n_tasks=0) == 1


def test_parallel_execute_serial_preserves_order():
    """parallel_execute should return results in input order."""
    out = conc.parallel_execute(lambda a, b: a * b, [(1, 2), (3, 4), (5, 6)])
    assert out == [2, 12, 30]


@pytest.mark.parallel
def test_parallel_execute_threads_copy_context(extra_threads_ok):
    """Threaded tasks should see the caller's context variables."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads")
    token = _marker.set("outer")
    try:
        out = conc.parallel_execute(lambda i: (i, _marker.get()), [(i,) for i in range(6)], n_workers=3)
    finally:
        _marker.reset(token)
    assert out == [(i, "outer") for i in range(6)]


def test_parallel_execute_propagates_exceptions():
    """The first failing task's exception should be re-raised."""
    def boom(i):
        if i == 1:
            raise RuntimeError("boom")
        return i

    with pytest.raises(RuntimeError, match="boom"):
        conc.parallel_execute(boom, [(0,), (1,), (2,)], n_workers=2)
