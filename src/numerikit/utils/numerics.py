"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "ieee_divide",
    "absolute_error",
    "relative_error_percent",
]


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divides two scalars following IEEE-754 semantics.

    Python raises ``ZeroDivisionError`` for ``x / 0.0``. The estimators in
    this package must instead degrade to ``inf``, ``-inf`` or ``nan``, so the
    division is routed through NumPy with floating-point warnings silenced.

    Args:
        numerator: Dividend.
        denominator: Divisor. May be zero.

    Returns:
        The quotient as a Python float, possibly non-finite.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def absolute_error(estimate: ArrayLike, exact: ArrayLike) -> NDArray[np.floating] | float:
    """Returns ``|estimate - exact|`` elementwise.

    Args:
        estimate: Estimated value(s).
        exact: Reference value(s), broadcastable against ``estimate``.

    Returns:
        A float for scalar inputs, otherwise a NumPy array.
    """
    err = np.abs(np.asarray(estimate, dtype=float) - np.asarray(exact, dtype=float))
    if err.ndim == 0:
        return float(err)
    return err


def relative_error_percent(estimate: ArrayLike, exact: ArrayLike) -> NDArray[np.floating] | float:
    """Returns ``100 * |(estimate - exact) / exact|`` elementwise.

    A zero reference value gives ``inf`` (or ``nan`` when the estimate is
    also exactly zero) instead of raising.

    Args:
        estimate: Estimated value(s).
        exact: Reference value(s), broadcastable against ``estimate``.

    Returns:
        A float for scalar inputs, otherwise a NumPy array.
    """
    est = np.asarray(estimate, dtype=float)
    ref = np.asarray(exact, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        rel = np.abs((est - ref) / ref) * 100.0
    if rel.ndim == 0:
        return float(rel)
    return rel
