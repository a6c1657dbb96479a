"""Test functions with known derivatives and integrals.

Each :class:`BenchmarkFunction` carries the function itself, its analytic
derivative and a closed-form definite integral, so the estimators can be
scored against exact values.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

__all__ = [
    "BenchmarkFunction",
    "BENCHMARKS",
    "get_benchmark",
    "available_benchmarks",
]


@dataclass(frozen=True)
class BenchmarkFunction:
    """A scalar function bundled with its exact derivative and integral.

    Attributes:
        name: Short lookup key, e.g. ``"polynomial"``.
        label: Human-readable formula used in reports.
        function: ``f(x)``.
        derivative: ``f'(x)``.
        integral: ``integral(a, b)`` returning the exact integral of ``f``
            over ``[a, b]``.
    """

    name: str
    label: str
    function: Callable[[float], float]
    derivative: Callable[[float], float]
    integral: Callable[[float, float], float]


def _cubic(x):
    return x * x * x - 2 * x * x + 3 * x - 5


def _cubic_derivative(x):
    return 3 * x * x - 4 * x + 3


def _cubic_antiderivative(x):
    return x**4 / 4 - 2 * x**3 / 3 + 3 * x**2 / 2 - 5 * x


POLYNOMIAL = BenchmarkFunction(
    name="polynomial",
    label="f(x) = x³ - 2x² + 3x - 5",
    function=_cubic,
    derivative=_cubic_derivative,
    integral=lambda a, b: _cubic_antiderivative(b) - _cubic_antiderivative(a),
)

TRIGONOMETRIC = BenchmarkFunction(
    name="trigonometric",
    label="f(x) = sin(x)",
    function=np.sin,
    derivative=np.cos,
    integral=lambda a, b: np.cos(a) - np.cos(b),
)

# Insertion order is the order used by the showcase report.
BENCHMARKS: dict[str, BenchmarkFunction] = {
    POLYNOMIAL.name: POLYNOMIAL,
    TRIGONOMETRIC.name: TRIGONOMETRIC,
}


def available_benchmarks() -> list[str]:
    """Returns the names of the registered benchmark functions."""
    return list(BENCHMARKS)


def get_benchmark(name: str) -> BenchmarkFunction:
    """Looks up a benchmark by name, ignoring case and surrounding whitespace.

    Raises:
        KeyError: If no benchmark has that name.
    """
    key = name.strip().lower()
    try:
        return BENCHMARKS[key]
    except KeyError:
        raise KeyError(
            f"Unknown benchmark {name!r}. Available: {', '.join(BENCHMARKS)}."
        ) from None
