"""Tests for numerikit.analysis.statistics."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from numerikit.analysis.statistics import describe_samples, sample_function


def test_sample_function_grid():
    """Tests that the function is evaluated on numpy.linspace."""
    x, y = sample_function(np.sin, -5.0, 5.0)
    assert x.shape == y.shape == (100,)
    assert_allclose(x, np.linspace(-5.0, 5.0, 100))
    assert_allclose(y, np.sin(x))


def test_describe_matches_numpy_reductions():
    """Tests that the summary agrees with NumPy's own reductions."""
    _, y = sample_function(np.sin, -5.0, 5.0)
    stats = describe_samples(y)
    assert stats.count == 100
    assert_allclose(stats.total, y.sum())
    assert_allclose(stats.mean, y.mean())
    assert_allclose(stats.std, y.std(ddof=0))
    assert stats.minimum == y.min()
    assert stats.maximum == y.max()
    assert_allclose(stats.mean_difference, np.diff(y).mean())


def test_mean_difference_telescopes():
    """Tests that the mean difference equals (last - first) / (count - 1)."""
    y = np.array([1.0, 4.0, 2.0, 7.0])
    assert_allclose(describe_samples(y).mean_difference, (7.0 - 1.0) / 3)


def test_single_sample():
    """Tests that a single value gives zero spread and a nan mean difference."""
    stats = describe_samples([3.5])
    assert stats.count == 1
    assert stats.std == 0.0
    assert math.isnan(stats.mean_difference)


@pytest.mark.parametrize("bad", [[], [[1.0, 2.0], [3.0, 4.0]]])
def test_describe_rejects_empty_or_2d(bad):
    """Tests that empty or multi-dimensional input raises ValueError."""
    with pytest.raises(ValueError):
        describe_samples(bad)
