"""Provides all numerikit estimators."""

from importlib.metadata import PackageNotFoundError, version

from numerikit.differentiation import backward_difference, forward_difference
from numerikit.integration import (
    simpsons_rule,
    trapezoidal_from_samples,
    trapezoidal_rule,
)
from numerikit.numeric_kit import NumericKit

try:
    __version__ = version("numerikit")
except PackageNotFoundError:
    pass

__all__ = [
    "NumericKit",
    "forward_difference",
    "backward_difference",
    "trapezoidal_rule",
    "simpsons_rule",
    "trapezoidal_from_samples",
]
