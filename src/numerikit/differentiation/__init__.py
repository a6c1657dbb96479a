"""Finite-difference derivative estimators."""

from .finite_difference import backward_difference, forward_difference

__all__ = [
    "forward_difference",
    "backward_difference",
]
