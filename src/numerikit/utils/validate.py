"""Validation utilities for the evaluation harness.

The estimators in :mod:`numerikit.differentiation` and
:mod:`numerikit.integration` never validate their inputs. These checks only
guard the harness parameters that describe a study.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

__all__ = [
    "validate_num_points",
    "validate_n_values",
    "validate_intervals",
]


def validate_num_points(num_points: int) -> int:
    """Checks that a sample count is a positive integer.

    Args:
        num_points: Number of sample points.

    Returns:
        ``num_points`` as a Python int.

    Raises:
        ValueError: If ``num_points`` is not an integer of at least 1.
    """
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise ValueError(f"num_points must be an integer; got {num_points!r}.")
    if num_points < 1:
        raise ValueError(f"num_points must be >= 1; got {num_points}.")
    return int(num_points)


def validate_n_values(n_values: Iterable[int], *, min_len: int = 1) -> tuple[int, ...]:
    """Checks a sweep of subinterval counts.

    Args:
        n_values: Subinterval counts, each a positive integer.
        min_len: Minimum number of entries required.

    Returns:
        The counts as a tuple of Python ints, in the given order.

    Raises:
        ValueError: If the sweep is too short or has non-positive or
            non-integer entries.
    """
    values = tuple(n_values)
    if len(values) < min_len:
        raise ValueError(
            f"n_values must contain at least {min_len} entries; got {len(values)}."
        )
    for n in values:
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
            raise ValueError(f"n_values entries must be positive integers; got {n!r}.")
    return tuple(int(n) for n in values)


def validate_intervals(
    intervals: Iterable[Sequence[float]],
) -> list[tuple[float, float]]:
    """Checks that every interval is a pair of real bounds.

    Reversed or empty intervals are allowed; they integrate with the usual
    orientation convention.

    Args:
        intervals: Iterable of ``(a, b)`` pairs.

    Returns:
        The intervals as a list of float tuples.

    Raises:
        ValueError: If an entry does not have exactly two elements.
    """
    out = []
    for interval in intervals:
        arr = np.asarray(interval, dtype=float)
        if arr.shape != (2,):
            raise ValueError(f"each interval must be a pair (a, b); got {interval!r}.")
        out.append((float(arr[0]), float(arr[1])))
    return out
