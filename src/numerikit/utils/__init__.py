"""Utility functions for NumeriKit package."""

from .numerics import (
    absolute_error,
    ieee_divide,
    relative_error_percent,
)

__all__ = [
    "ieee_divide",
    "absolute_error",
    "relative_error_percent",
]
