"""Evaluation harness, benchmark catalog and reporting helpers."""

from .benchmarks import BENCHMARKS, BenchmarkFunction, get_benchmark
from .evaluation import (
    convergence_study,
    empirical_order,
    evaluate_derivative_methods,
    evaluate_derivatives_at,
    evaluate_integration_methods,
)
from .statistics import describe_samples, sample_function

__all__ = [
    "BENCHMARKS",
    "BenchmarkFunction",
    "get_benchmark",
    "evaluate_derivative_methods",
    "evaluate_derivatives_at",
    "evaluate_integration_methods",
    "convergence_study",
    "empirical_order",
    "describe_samples",
    "sample_function",
]
