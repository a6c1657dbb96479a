"""Plain-text tables for the evaluation harness results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from numerikit.analysis.benchmarks import BenchmarkFunction
from numerikit.analysis.evaluation import (
    ConvergenceStudy,
    DerivativeEvaluation,
    IntegrationEvaluation,
)
from numerikit.analysis.statistics import SampleStatistics
from numerikit.defaults import DEFAULT_SAMPLE_INDICES

__all__ = [
    "format_derivative_table",
    "format_integration_results",
    "format_convergence_table",
    "format_statistics",
    "format_point_derivatives",
    "format_special_functions",
]


def format_derivative_table(
    benchmark: BenchmarkFunction,
    evaluation: DerivativeEvaluation,
    sample_indices: Sequence[int] = DEFAULT_SAMPLE_INDICES,
) -> str:
    """Tabulates selected rows of a derivative evaluation and the mean errors.

    Indices past the end of the grid are skipped.
    """
    lines = [
        f"Results for {benchmark.label}:",
        "x\tExact\tForward\tBackward\tForward Err\tBackward Err",
    ]
    size = len(evaluation.x)
    for idx in sample_indices:
        if not -size <= idx < size:
            continue
        lines.append(
            f"{evaluation.x[idx]:.2f}\t{evaluation.exact[idx]:.4f}\t"
            f"{evaluation.forward[idx]:.4f}\t{evaluation.backward[idx]:.4f}\t"
            f"{evaluation.forward_error[idx]:.2e}\t{evaluation.backward_error[idx]:.2e}"
        )

    lines += [
        "",
        "Average Errors:",
        f"Forward Difference: {evaluation.mean_forward_error:.4e}",
        f"Backward Difference: {evaluation.mean_backward_error:.4e}",
    ]
    return "\n".join(lines)


def format_integration_results(
    benchmark: BenchmarkFunction,
    results: Iterable[IntegrationEvaluation],
) -> str:
    """Lists both quadrature estimates per interval with their errors."""
    lines = [f"Integration results for {benchmark.label}:"]
    for res in results:
        lines += [
            "",
            f"Interval: [{res.a:g}, {res.b:g}]",
            f"Exact value: {res.exact:.8f}",
        ]
        for label, q in (("Trapezoidal", res.trapezoidal), ("Simpson's", res.simpsons)):
            lines.append(
                f"{label} method: {q.value:.8f} "
                f"(error: {q.error:.4e}, rel. error: {q.relative_error:.4f}%)"
            )
    return "\n".join(lines)


def format_convergence_table(study: ConvergenceStudy) -> str:
    """Tabulates the absolute error of both rules for each subinterval count."""
    lines = [
        f"Convergence analysis for interval [{study.a:g}, {study.b:g}], "
        f"exact value: {study.exact:.8f}",
        "n\tTrapezoidal\tSimpson",
    ]
    for n, trap, simp in zip(study.n_values, study.trapezoidal_errors, study.simpsons_errors):
        lines.append(f"{n}\t{trap:.4e}\t{simp:.4e}")
    return "\n".join(lines)


def format_statistics(name: str, stats: SampleStatistics) -> str:
    """Formats a :class:`SampleStatistics` summary."""
    return "\n".join(
        [
            f"Sum of {name} values: {stats.total}",
            f"Mean difference: {stats.mean_difference}",
            f"Mean of {name}: {stats.mean}",
            f"Standard deviation of {name}: {stats.std}",
            f"Min of {name}: {stats.minimum}",
            f"Max of {name}: {stats.maximum}",
        ]
    )


def format_point_derivatives(evaluation: DerivativeEvaluation) -> str:
    """Tabulates the forward-difference estimate at each evaluation point."""
    lines = ["x\tApprox\tExact\tError"]
    for x, fwd, exact, err in zip(
        evaluation.x, evaluation.forward, evaluation.exact, evaluation.forward_error
    ):
        lines.append(f"{x:g}\t{fwd:.6f}\t{exact:.6f}\t{err:.4e}")
    return "\n".join(lines)


def format_special_functions(values: Mapping[str, float]) -> str:
    """Lists special-function values as ``name = value`` lines."""
    return "\n".join(f"{name} = {value}" for name, value in values.items())
