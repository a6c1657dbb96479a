"""Descriptive statistics of a function sampled on a grid."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from numerikit.defaults import DEFAULT_NUM_POINTS
from numerikit.utils.validate import validate_num_points

__all__ = [
    "SampleStatistics",
    "describe_samples",
    "sample_function",
]


@dataclass(frozen=True)
class SampleStatistics:
    """Summary of a 1D sample.

    ``std`` is the population standard deviation (divisor ``count``) and
    ``mean_difference`` is the mean of ``values[i + 1] - values[i]``, which
    is ``nan`` for a single sample.
    """

    count: int
    total: float
    mean: float
    std: float
    minimum: float
    maximum: float
    mean_difference: float


def sample_function(
    function: Callable[[float], float],
    a: float,
    b: float,
    num: int = DEFAULT_NUM_POINTS,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Evaluates ``function`` on ``numpy.linspace(a, b, num)``.

    Returns:
        The grid and the function values, both of shape ``(num,)``.
    """
    num = validate_num_points(num)
    x = np.linspace(a, b, num)
    y = np.asarray([function(float(xi)) for xi in x], dtype=float)
    return x, y


def describe_samples(values: ArrayLike) -> SampleStatistics:
    """Computes count, sum, mean, spread and range of ``values``.

    Raises:
        ValueError: If ``values`` is not a non-empty 1D array.
    """
    y = np.asarray(values, dtype=float)
    if y.ndim != 1 or y.size == 0:
        raise ValueError("values must be a non-empty 1D array.")

    diffs = np.diff(y)
    mean_diff = float(np.mean(diffs)) if diffs.size else float("nan")

    return SampleStatistics(
        count=int(y.size),
        total=float(np.sum(y)),
        mean=float(np.mean(y)),
        std=float(np.std(y)),
        minimum=float(np.min(y)),
        maximum=float(np.max(y)),
        mean_difference=mean_diff,
    )
