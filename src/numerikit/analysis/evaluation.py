"""Scores the estimators against exact derivatives and integrals.

The harness applies the finite-difference and quadrature estimators to a
:class:`~numerikit.analysis.benchmarks.BenchmarkFunction` and records the
absolute error ``|estimate - exact|`` and, for integrals, the relative error
in percent ``100 * |(estimate - exact) / exact|``. A convergence study
sweeps the subinterval count and derives the empirical order of each rule.

Examples:
--------
>>> import numpy as np
>>> from numerikit.analysis.benchmarks import get_benchmark
>>> from numerikit.analysis.evaluation import convergence_study
>>> study = convergence_study(get_benchmark("trigonometric"))
>>> np.allclose(study.trapezoidal_order(), 2.0, atol=0.05)
True

Every estimator call is independent, so ``n_workers > 1`` spreads the calls
of each estimator over a thread pool. Results are always returned in input
order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from numerikit.analysis.benchmarks import BenchmarkFunction
from numerikit.defaults import (
    DEFAULT_N_SWEEP,
    DEFAULT_NUM_POINTS,
    DEFAULT_STEPSIZE,
    DEFAULT_SUBINTERVALS,
)
from numerikit.differentiation import backward_difference, forward_difference
from numerikit.integration import simpsons_rule, trapezoidal_rule
from numerikit.logger import numerikit_logger
from numerikit.utils import concurrency
from numerikit.utils.numerics import absolute_error, relative_error_percent
from numerikit.utils.validate import (
    validate_intervals,
    validate_n_values,
    validate_num_points,
)

__all__ = [
    "DerivativeEvaluation",
    "QuadratureResult",
    "IntegrationEvaluation",
    "ConvergenceStudy",
    "evaluate_derivatives_at",
    "evaluate_derivative_methods",
    "evaluate_integration_methods",
    "convergence_study",
    "empirical_order",
]


@dataclass(frozen=True, eq=False)
class DerivativeEvaluation:
    """Derivative estimates and their errors on a grid of points.

    All arrays have shape ``(num_points,)``.
    """

    x: NDArray[np.floating]
    exact: NDArray[np.floating]
    forward: NDArray[np.floating]
    backward: NDArray[np.floating]
    forward_error: NDArray[np.floating]
    backward_error: NDArray[np.floating]

    @property
    def mean_forward_error(self) -> float:
        """Mean absolute error of the forward estimator."""
        return float(np.mean(self.forward_error))

    @property
    def mean_backward_error(self) -> float:
        """Mean absolute error of the backward estimator."""
        return float(np.mean(self.backward_error))


@dataclass(frozen=True)
class QuadratureResult:
    """One integral estimate with its absolute and relative (percent) error."""

    value: float
    error: float
    relative_error: float


@dataclass(frozen=True)
class IntegrationEvaluation:
    """Both quadrature rules applied to one interval."""

    a: float
    b: float
    exact: float
    trapezoidal: QuadratureResult
    simpsons: QuadratureResult

    @property
    def interval(self) -> tuple[float, float]:
        """The ``(a, b)`` bounds."""
        return self.a, self.b


@dataclass(frozen=True, eq=False)
class ConvergenceStudy:
    """Absolute errors of both rules over a sweep of subinterval counts."""

    a: float
    b: float
    exact: float
    n_values: tuple[int, ...]
    trapezoidal_errors: NDArray[np.floating]
    simpsons_errors: NDArray[np.floating]

    def trapezoidal_order(self) -> NDArray[np.floating]:
        """Empirical convergence order of the trapezoidal rule between sweep steps."""
        return empirical_order(self.n_values, self.trapezoidal_errors)

    def simpsons_order(self) -> NDArray[np.floating]:
        """Empirical convergence order of Simpson's rule between sweep steps."""
        return empirical_order(self.n_values, self.simpsons_errors)


def _run(
    worker: Callable[..., float],
    arg_tuples: list[tuple],
    n_workers: int | None,
) -> list[float]:
    """Runs one estimator over its argument tuples, in input order."""
    workers = concurrency.resolve_workers(n_workers, len(arg_tuples))
    return concurrency.parallel_execute(worker, arg_tuples, n_workers=workers)


def _score(estimate: float, exact: float) -> QuadratureResult:
    return QuadratureResult(
        value=float(estimate),
        error=absolute_error(estimate, exact),
        relative_error=relative_error_percent(estimate, exact),
    )


def evaluate_derivatives_at(
    benchmark: BenchmarkFunction,
    points: ArrayLike,
    h: float = DEFAULT_STEPSIZE,
    n_workers: int | None = None,
) -> DerivativeEvaluation:
    """Applies both difference estimators at the given points.

    Args:
        benchmark: Function with a known derivative.
        points: 1D sequence of evaluation points, in any order.
        h: Step size passed to both estimators. Default is 0.001.
        n_workers: Number of threads. ``None`` resolves the count from
            ``use_workers``, ``set_default_workers`` or ``NUMERIKIT_WORKERS``.

    Returns:
        The estimates, exact values and absolute errors at ``points``.

    Raises:
        ValueError: If ``points`` is not a non-empty 1D sequence.
    """
    x = np.asarray(points, dtype=float)
    if x.ndim != 1 or x.size == 0:
        raise ValueError("points must be a non-empty 1D sequence.")

    f = benchmark.function
    arg_tuples = [(f, float(xi), h) for xi in x]
    forward = np.asarray(_run(forward_difference, arg_tuples, n_workers), dtype=float)
    backward = np.asarray(_run(backward_difference, arg_tuples, n_workers), dtype=float)

    exact = np.asarray([benchmark.derivative(float(xi)) for xi in x], dtype=float)

    return DerivativeEvaluation(
        x=x,
        exact=exact,
        forward=forward,
        backward=backward,
        forward_error=np.abs(forward - exact),
        backward_error=np.abs(backward - exact),
    )


def evaluate_derivative_methods(
    benchmark: BenchmarkFunction,
    x_start: float,
    x_end: float,
    num_points: int = DEFAULT_NUM_POINTS,
    h: float = DEFAULT_STEPSIZE,
    n_workers: int | None = None,
) -> DerivativeEvaluation:
    """Applies both difference estimators on an evenly spaced grid.

    Args:
        benchmark: Function with a known derivative.
        x_start: First grid point.
        x_end: Last grid point.
        num_points: Number of grid points. Default is 100.
        h: Step size passed to both estimators. Default is 0.001.
        n_workers: Number of threads. ``None`` uses the configured default.

    Returns:
        The estimates, exact values and absolute errors on the grid.

    Raises:
        ValueError: If ``num_points`` is not a positive integer.
    """
    num_points = validate_num_points(num_points)
    numerikit_logger.debug(
        "Evaluating derivatives of %s at %d points on [%g, %g] with h=%g.",
        benchmark.name, num_points, x_start, x_end, h,
    )
    return evaluate_derivatives_at(
        benchmark, np.linspace(x_start, x_end, num_points), h=h, n_workers=n_workers
    )


def evaluate_integration_methods(
    benchmark: BenchmarkFunction,
    intervals: Iterable[Sequence[float]],
    n: int = DEFAULT_SUBINTERVALS,
    n_workers: int | None = None,
) -> list[IntegrationEvaluation]:
    """Applies both quadrature rules to each interval.

    The relative error is not finite when the exact integral is zero; this
    is expected for odd integrands on symmetric intervals and is logged at
    INFO level.

    Args:
        benchmark: Function with a known integral.
        intervals: Iterable of ``(a, b)`` bounds.
        n: Number of subintervals for both rules. Default is 100.
        n_workers: Number of threads. ``None`` uses the configured default.

    Returns:
        One :class:`IntegrationEvaluation` per interval, in input order.

    Raises:
        ValueError: If an interval is not a pair of bounds.
    """
    bounds = validate_intervals(intervals)
    f = benchmark.function

    arg_tuples = [(f, a, b, n) for a, b in bounds]
    trap = _run(trapezoidal_rule, arg_tuples, n_workers)
    simp = _run(simpsons_rule, arg_tuples, n_workers)

    results = []
    for k, (a, b) in enumerate(bounds):
        exact = float(benchmark.integral(a, b))
        if exact == 0.0:
            numerikit_logger.info(
                "Exact integral of %s over [%g, %g] is zero; relative error is undefined.",
                benchmark.name, a, b,
            )
        results.append(
            IntegrationEvaluation(
                a=a,
                b=b,
                exact=exact,
                trapezoidal=_score(trap[k], exact),
                simpsons=_score(simp[k], exact),
            )
        )
    return results


def convergence_study(
    benchmark: BenchmarkFunction,
    a: float = 0.0,
    b: float = 1.0,
    n_values: Iterable[int] = DEFAULT_N_SWEEP,
    n_workers: int | None = None,
) -> ConvergenceStudy:
    """Records the error of both rules as the subinterval count grows.

    Args:
        benchmark: Function with a known integral.
        a: Lower bound. Default is 0.
        b: Upper bound. Default is 1.
        n_values: Subinterval counts to sweep. Default is (10, 20, 40, 80, 160).
        n_workers: Number of threads. ``None`` uses the configured default.

    Returns:
        The absolute errors of both rules for each ``n``.

    Raises:
        ValueError: If ``n_values`` is empty or contains non-positive counts.
    """
    ns = validate_n_values(n_values)
    exact = float(benchmark.integral(a, b))
    f = benchmark.function

    arg_tuples = [(f, a, b, n) for n in ns]
    trap = np.asarray(_run(trapezoidal_rule, arg_tuples, n_workers), dtype=float)
    simp = np.asarray(_run(simpsons_rule, arg_tuples, n_workers), dtype=float)

    return ConvergenceStudy(
        a=float(a),
        b=float(b),
        exact=exact,
        n_values=ns,
        trapezoidal_errors=np.abs(trap - exact),
        simpsons_errors=np.abs(simp - exact),
    )


def empirical_order(n_values: Iterable[int], errors: ArrayLike) -> NDArray[np.floating]:
    """Estimates the convergence order between consecutive sweep steps.

    For errors ``e_i`` at counts ``n_i`` the order is
    ``log(e_i / e_{i+1}) / log(n_{i+1} / n_i)``. Steps where an error is
    zero produce non-finite entries.

    Args:
        n_values: Subinterval counts, at least two.
        errors: Absolute errors, one per count.

    Returns:
        Array of ``len(n_values) - 1`` orders.

    Raises:
        ValueError: If fewer than two counts are given or the lengths differ.
    """
    n = np.asarray(validate_n_values(n_values, min_len=2), dtype=float)
    e = np.asarray(errors, dtype=float)
    if e.shape != n.shape:
        raise ValueError(
            f"errors must have one entry per n value; got {e.shape} vs {n.shape}."
        )
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(e[:-1] / e[1:]) / np.log(n[1:] / n[:-1])
