"""Provides the NumericKit class.

A light wrapper that binds a scalar function once and exposes the
finite-difference and quadrature estimators as methods.

Typical usage examples:

>>> import math
>>> from numerikit.numeric_kit import NumericKit
>>>
>>> kit = NumericKit(math.sin)
>>> slope = kit.forward_difference(0.5)
>>> area = kit.simpsons(0.0, math.pi)
>>> round(area, 6)
2.0
"""

from collections.abc import Callable

from numerikit.defaults import DEFAULT_STEPSIZE, DEFAULT_SUBINTERVALS
from numerikit.differentiation import backward_difference, forward_difference
from numerikit.integration import simpsons_rule, trapezoidal_rule


class NumericKit:
    """Provides derivative and integral estimates of a single function."""

    def __init__(self, function: Callable[[float], float]):
        """Initialise with the function to analyse.

        Args:
            function: Scalar function of one real variable.
        """
        self.function = function

    def forward_difference(self, x: float, h: float = DEFAULT_STEPSIZE) -> float:
        """Returns the forward-difference estimate of ``f'(x)``."""
        return forward_difference(self.function, x, h)

    def backward_difference(self, x: float, h: float = DEFAULT_STEPSIZE) -> float:
        """Returns the backward-difference estimate of ``f'(x)``."""
        return backward_difference(self.function, x, h)

    def trapezoidal(self, a: float, b: float, n: int = DEFAULT_SUBINTERVALS) -> float:
        """Returns the trapezoidal-rule estimate of the integral over ``[a, b]``."""
        return trapezoidal_rule(self.function, a, b, n)

    def simpsons(self, a: float, b: float, n: int = DEFAULT_SUBINTERVALS) -> float:
        """Returns the Simpson's-rule estimate of the integral over ``[a, b]``."""
        return simpsons_rule(self.function, a, b, n)
