"""Tests for the trapezoidal and Simpson quadrature rules."""

import logging
import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import integrate

from numerikit.integration import simpsons_rule, trapezoidal_from_samples, trapezoidal_rule


def cubic(x):
    """Cubic polynomial with antiderivative x**4/4 - x**3/3 + x**2 - 7x."""
    return x**3 - x**2 + 2 * x - 7


def cubic_integral(a, b):
    """Exact integral of ``cubic`` over [a, b]."""
    F = lambda x: x**4 / 4 - x**3 / 3 + x**2 - 7 * x  # noqa: E731
    return F(b) - F(a)


def test_trapezoidal_sin_over_half_period():
    """Tests that the trapezoidal rule integrates sin on [0, pi] to 2 within 1e-5."""
    assert abs(trapezoidal_rule(math.sin, 0.0, math.pi, 1000) - 2.0) < 1e-5


def test_simpsons_cubic_is_exact():
    """Tests that Simpson's rule reproduces the integral of x**3 on [0, 1] to 10 digits."""
    assert simpsons_rule(lambda x: x**3, 0, 1) == pytest.approx(0.25, rel=1e-10)


@pytest.mark.parametrize("a, b", [(0.0, 1.0), (-2.0, 3.0), (1.5, -0.5), (-4.0, -1.0)])
@pytest.mark.parametrize("n", [2, 4, 10, 100])
def test_simpsons_exact_for_cubics(a, b, n):
    """Tests that Simpson's rule is exact for a general cubic on any interval."""
    assert_allclose(simpsons_rule(cubic, a, b, n), cubic_integral(a, b), rtol=1e-12, atol=1e-12)


def test_trapezoidal_exact_for_linear():
    """Tests that the trapezoidal rule is exact for affine integrands."""
    assert_allclose(trapezoidal_rule(lambda x: 3 * x + 1, -1.0, 2.0, 7), 7.5, rtol=1e-13)


def test_simpsons_beats_trapezoidal_by_order_of_magnitude():
    """Tests that at n = 10 Simpson's error is at least ten times smaller on sin [0, pi]."""
    trap_err = abs(trapezoidal_rule(math.sin, 0.0, math.pi, 10) - 2.0)
    simp_err = abs(simpsons_rule(math.sin, 0.0, math.pi, 10) - 2.0)
    assert simp_err * 10 <= trap_err


@pytest.mark.parametrize("n", [10, 20, 40, 80])
def test_simpsons_error_below_trapezoidal_as_n_grows(n):
    """Tests that Simpson's rule stays ahead of the trapezoidal rule across a sweep."""
    trap_err = abs(trapezoidal_rule(np.exp, 0.0, 1.0, n) - (math.e - 1))
    simp_err = abs(simpsons_rule(np.exp, 0.0, 1.0, n) - (math.e - 1))
    assert simp_err < trap_err


@pytest.mark.parametrize("n", [1, 3, 5, 7, 99])
def test_simpsons_odd_n_uses_next_even(n):
    """Tests that an odd n gives the same result as n + 1, bit for bit."""
    assert simpsons_rule(np.cos, -0.3, 1.7, n) == simpsons_rule(np.cos, -0.3, 1.7, n + 1)


def test_simpsons_odd_n_logs_debug(caplog):
    """Tests that the odd-to-even adjustment is reported only at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="numerikit"):
        simpsons_rule(np.sin, 0.0, 1.0, 5)
    assert any("n=6" in rec.getMessage() for rec in caplog.records)
    assert all(rec.levelno == logging.DEBUG for rec in caplog.records)


def test_default_subintervals_is_one_hundred():
    """Tests that both rules default to n = 100."""
    assert trapezoidal_rule(np.exp, 0.0, 2.0) == trapezoidal_rule(np.exp, 0.0, 2.0, 100)
    assert simpsons_rule(np.exp, 0.0, 2.0) == simpsons_rule(np.exp, 0.0, 2.0, 100)


@pytest.mark.parametrize("n", [1, 5, 100])
def test_trapezoidal_empty_interval_is_zero(n):
    """Tests that a == b gives zero regardless of the integrand."""
    assert trapezoidal_rule(np.exp, 1.25, 1.25, n) == 0
    assert simpsons_rule(np.exp, 1.25, 1.25, n) == 0


@pytest.mark.parametrize("rule", [trapezoidal_rule, simpsons_rule])
def test_reversed_bounds_flip_sign(rule):
    """Tests that swapping the bounds negates the estimate."""
    forward = rule(np.exp, 0.0, 1.5, 12)
    backward = rule(np.exp, 1.5, 0.0, 12)
    assert_allclose(backward, -forward, rtol=1e-13)


def test_trapezoidal_matches_scipy():
    """Tests agreement with scipy.integrate.trapezoid on the same nodes."""
    a, b, n = -1.0, 2.0, 37
    x = np.linspace(a, b, n + 1)
    ref = integrate.trapezoid(np.exp(x), x)
    assert_allclose(trapezoidal_rule(np.exp, a, b, n), ref, rtol=1e-12)


def test_simpsons_matches_scipy():
    """Tests agreement with scipy.integrate.simpson for an even number of subintervals."""
    a, b, n = 0.2, 3.1, 40
    x = np.linspace(a, b, n + 1)
    ref = integrate.simpson(np.sin(x) * x, x=x)
    assert_allclose(simpsons_rule(lambda t: np.sin(t) * t, a, b, n), ref, rtol=1e-12)


def test_trapezoidal_error_is_second_order():
    """Tests that doubling n reduces the trapezoidal error about fourfold."""
    exact = math.e - 1
    e1 = abs(trapezoidal_rule(np.exp, 0.0, 1.0, 20) - exact)
    e2 = abs(trapezoidal_rule(np.exp, 0.0, 1.0, 40) - exact)
    assert_allclose(e1 / e2, 4.0, rtol=1e-2)


def test_zero_subintervals_degenerates_without_raising():
    """Tests that n = 0 returns a non-finite value instead of raising."""
    assert not math.isfinite(trapezoidal_rule(np.exp, 0.0, 1.0, 0))
    assert not math.isfinite(simpsons_rule(np.exp, 0.0, 1.0, 0))


def test_trapezoidal_from_samples_matches_function_rule():
    """Tests that the sampled rule equals the function rule on the same grid."""
    a, b, m = 0.0, math.pi, 1000
    x = np.linspace(a, b, m)
    dx = (b - a) / (m - 1)
    assert_allclose(
        trapezoidal_from_samples(np.sin(x), dx),
        trapezoidal_rule(math.sin, a, b, m - 1),
        rtol=1e-12,
    )


def test_trapezoidal_from_samples_rejects_empty():
    """Tests that an empty sample raises ValueError."""
    with pytest.raises(ValueError):
        trapezoidal_from_samples([], 0.1)
