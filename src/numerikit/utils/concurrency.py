"""Concurrency management for harness sweeps."""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence, Tuple

__all__ = [
    "set_default_workers",
    "use_workers",
    "resolve_workers",
    "normalize_workers",
    "parallel_execute",
    "_workers_var",
]


# Context-var and default
_workers_var: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "numerikit_workers", default=None
)
_DEFAULT_WORKERS: int | None = None

WORKERS_ENV = "NUMERIKIT_WORKERS"


def set_default_workers(n: int | None) -> None:
    """Sets the module-wide default number of sweep workers.

    Args:
        n: Number of workers, or None to fall back to the environment.

    Returns:
        None
    """
    global _DEFAULT_WORKERS
    _DEFAULT_WORKERS = None if n is None else int(n)


@contextmanager
def use_workers(n: int | None) -> Iterator[int | None]:
    """Temporarily sets the number of sweep workers.

    Args:
        n: Number of workers, or ``None`` to defer to the defaults.

    Yields:
        int | None: The previous worker setting (restored on exit).
    """
    prev = _workers_var.get()
    token = _workers_var.set(None if n is None else int(n))
    try:
        yield prev
    finally:
        _workers_var.reset(token)


def _int_env(name: str) -> int | None:
    """Reads a positive integer from an environment variable, or None if unset/invalid.

    Args:
        name: Environment variable name.

    Returns:
        Positive integer value, or None.
    """
    v = os.getenv(name)
    if not v:
        return None
    try:
        i = int(v)
        return i if i > 0 else None
    except ValueError:
        return None


def normalize_workers(
    n_workers: Any
) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).

    Raises:
        None: Invalid inputs are coerced to 1.
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def resolve_workers(n_workers: int | None, n_tasks: int) -> int:
    """Decides how many threads a sweep of ``n_tasks`` calls should use.

    Precedence is: an explicit ``n_workers`` argument, then the value set by
    ``use_workers``, then ``set_default_workers``, then the
    ``NUMERIKIT_WORKERS`` environment variable, then 1. The result is capped
    by the number of tasks.

    Args:
        n_workers: Explicit worker count, or None to use the defaults.
        n_tasks: Number of independent calls in the sweep.

    Returns:
        Number of threads to use (at least 1).
    """
    if n_workers is None:
        n_workers = _workers_var.get()
    if n_workers is None:
        n_workers = _DEFAULT_WORKERS
    if n_workers is None:
        n_workers = _int_env(WORKERS_ENV)
    n = normalize_workers(n_workers)
    if n_tasks <= 0:
        return 1
    return max(1, min(n, int(n_tasks)))


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples, in input order.

    With ``n_workers > 1`` the calls are spread over a thread pool; each
    task runs in a copy of the caller's context.
    """
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]
