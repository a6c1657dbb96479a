"""Pytest configuration file with a fixture to check thread spawning capability."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError
import os

import pytest

import numerikit.utils.concurrency as conc

__all__ = ["extra_threads_ok"]


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)


# --- default to serial inside NumeriKit unless test opts in via @pytest.mark.parallel ---
@pytest.fixture(autouse=True)
def _serial_by_default(request, monkeypatch):
    """Force n_workers=1 in the harness unless test is marked @pytest.mark.parallel."""
    monkeypatch.delenv(conc.WORKERS_ENV, raising=False)
    monkeypatch.setattr(conc, "_DEFAULT_WORKERS", None)

    if request.node.get_closest_marker("parallel"):
        return  # allow the test to exercise true parallel behavior

    orig = conc.parallel_execute

    def _serial(worker, arg_tuples, *, n_workers=1):
        return orig(worker, arg_tuples, n_workers=1)

    monkeypatch.setattr(conc, "parallel_execute", _serial)
