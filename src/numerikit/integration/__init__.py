"""Quadrature rules for definite integrals."""

from .quadrature import simpsons_rule, trapezoidal_from_samples, trapezoidal_rule

__all__ = [
    "trapezoidal_rule",
    "simpsons_rule",
    "trapezoidal_from_samples",
]
