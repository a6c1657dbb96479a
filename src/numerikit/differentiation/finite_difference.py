"""Provides one-sided finite-difference derivative estimators.

Both estimators are first-order accurate: the truncation error is O(h).
They are exact (up to rounding) for polynomials of degree at most one.

Examples:
--------
>>> from numerikit.differentiation import forward_difference, backward_difference
>>> forward_difference(lambda x: 3.0 * x, 2.0, h=0.25)
3.0
>>> backward_difference(lambda x: x**2, 1.0, h=0.5)
1.5

No argument is validated. A zero step size yields ``inf`` or ``nan``
rather than an exception, and a negative step turns the forward estimator
into a backward one (and vice versa).
"""

from __future__ import annotations

from collections.abc import Callable

from numerikit.defaults import DEFAULT_STEPSIZE
from numerikit.utils.numerics import ieee_divide

__all__ = [
    "forward_difference",
    "backward_difference",
]


def forward_difference(
    function: Callable[[float], float],
    x: float,
    h: float = DEFAULT_STEPSIZE,
) -> float:
    """Estimates ``f'(x)`` as ``(f(x + h) - f(x)) / h``.

    Args:
        function: Scalar function of one real variable.
        x: Point at which the derivative is estimated.
        h: Step size. Default is 0.001.

    Returns:
        The derivative estimate, possibly non-finite for ``h == 0``.
    """
    return ieee_divide(function(x + h) - function(x), h)


def backward_difference(
    function: Callable[[float], float],
    x: float,
    h: float = DEFAULT_STEPSIZE,
) -> float:
    """Estimates ``f'(x)`` as ``(f(x) - f(x - h)) / h``.

    Args:
        function: Scalar function of one real variable.
        x: Point at which the derivative is estimated.
        h: Step size. Default is 0.001.

    Returns:
        The derivative estimate, possibly non-finite for ``h == 0``.
    """
    return ieee_divide(function(x) - function(x - h), h)
