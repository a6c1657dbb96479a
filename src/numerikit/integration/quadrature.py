"""Composite Newton–Cotes rules for definite integrals.

Both rules partition ``[a, b]`` into ``n`` equal subintervals of width
``h = (b - a) / n`` and return a weighted sum of function samples at the
nodes ``a + i * h``.

* Trapezoidal rule: endpoint weights 1/2, interior weights 1, scaled by
  ``h``. Second order, O(h^2).
* Simpson's rule: endpoint weights 1, odd interior nodes 4, even interior
  nodes 2, scaled by ``h / 3``. Fourth order, O(h^4), and exact for cubics.
  The weighting only makes sense for an even ``n``; an odd count is bumped
  to ``n + 1`` before any sampling.

Examples:
--------
>>> import math
>>> from numerikit.integration import simpsons_rule, trapezoidal_rule
>>> round(trapezoidal_rule(math.sin, 0.0, math.pi, 1000), 5)
2.0
>>> round(simpsons_rule(lambda x: x**3, 0.0, 1.0), 12)
0.25

Reversed bounds give the negated integral and ``a == b`` gives zero. As
with the finite-difference estimators, nothing is validated: ``n == 0``
produces a non-finite result instead of an exception.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike

from numerikit.defaults import DEFAULT_SUBINTERVALS
from numerikit.logger import numerikit_logger
from numerikit.utils.numerics import ieee_divide

__all__ = [
    "trapezoidal_rule",
    "simpsons_rule",
    "trapezoidal_from_samples",
]


def trapezoidal_rule(
    function: Callable[[float], float],
    a: float,
    b: float,
    n: int = DEFAULT_SUBINTERVALS,
) -> float:
    """Estimates the integral of ``function`` over ``[a, b]`` with the trapezoidal rule.

    Args:
        function: Scalar function of one real variable.
        a: Lower bound.
        b: Upper bound. May be smaller than ``a``.
        n: Number of subintervals. Default is 100.

    Returns:
        The integral estimate.
    """
    h = ieee_divide(b - a, n)
    total = function(a) / 2 + function(b) / 2

    for i in range(1, n):
        total += function(a + i * h)

    return h * float(total)


def simpsons_rule(
    function: Callable[[float], float],
    a: float,
    b: float,
    n: int = DEFAULT_SUBINTERVALS,
) -> float:
    """Estimates the integral of ``function`` over ``[a, b]`` with composite Simpson's rule.

    Args:
        function: Scalar function of one real variable.
        a: Lower bound.
        b: Upper bound. May be smaller than ``a``.
        n: Number of subintervals. Odd values are replaced by ``n + 1``.
            Default is 100.

    Returns:
        The integral estimate.
    """
    if n % 2 != 0:
        numerikit_logger.debug("simpsons_rule: odd n=%d, using n=%d.", n, n + 1)
        n += 1

    h = ieee_divide(b - a, n)
    total = function(a) + function(b)

    for i in range(1, n):
        coefficient = 2 if i % 2 == 0 else 4
        total += coefficient * function(a + i * h)

    return h / 3 * float(total)


def trapezoidal_from_samples(values: ArrayLike, dx: float) -> float:
    """Applies the trapezoidal rule to equally spaced samples.

    This is the sampled counterpart of :func:`trapezoidal_rule`: for
    ``x = numpy.linspace(a, b, m)`` and ``dx = (b - a) / (m - 1)``,
    ``trapezoidal_from_samples(f(x), dx)`` equals
    ``trapezoidal_rule(f, a, b, m - 1)`` up to rounding.

    Args:
        values: 1D samples ``y_0, ..., y_{m-1}``.
        dx: Spacing between consecutive samples.

    Returns:
        The integral estimate.

    Raises:
        ValueError: If ``values`` is not a non-empty 1D array.
    """
    y = np.asarray(values, dtype=float)
    if y.ndim != 1 or y.size == 0:
        raise ValueError("values must be a non-empty 1D array.")

    total = y[0] / 2 + y[-1] / 2 + np.sum(y[1:-1])
    return float(dx * total)
