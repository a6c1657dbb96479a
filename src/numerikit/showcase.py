"""Prints a differentiation and integration analysis of the benchmark functions.

Run with:
    python -m numerikit.showcase

or, once installed:
    numerikit-showcase --function trigonometric --workers 4

The integration section includes ``sin`` on ``[-1, 1]``, whose exact
integral is zero, so its relative errors print as ``inf`` or ``nan``. The
harness notes this at INFO level, visible with ``--verbose``.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import numpy as np

from numerikit.analysis.benchmarks import BENCHMARKS, get_benchmark
from numerikit.analysis.evaluation import (
    convergence_study,
    evaluate_derivative_methods,
    evaluate_derivatives_at,
    evaluate_integration_methods,
)
from numerikit.analysis.report import (
    format_convergence_table,
    format_derivative_table,
    format_integration_results,
    format_point_derivatives,
    format_special_functions,
    format_statistics,
)
from numerikit.analysis.special_functions import special_function_values
from numerikit.analysis.statistics import describe_samples, sample_function
from numerikit.integration import trapezoidal_from_samples
from numerikit.logger import numerikit_logger

DERIVATIVE_RANGE = (-2.0, 2.0)
INTEGRATION_INTERVALS = ((-1.0, 1.0), (0.0, 2.0))
CONVERGENCE_INTERVAL = (0.0, 1.0)
STATISTICS_RANGE = (-5.0, 5.0)
POINT_DERIVATIVE_XS = (-2.0, -1.0, 0.0, 1.0, 2.0)
POINT_DERIVATIVE_STEPSIZE = 1e-4
SAMPLED_INTERVAL = (0.0, float(np.pi))
SAMPLED_POINTS = 1000


def run_analysis(names: Sequence[str] | None = None, n_workers: int | None = None) -> str:
    """Builds the full text report for the selected benchmarks.

    Args:
        names: Benchmark names; all registered benchmarks when None.
        n_workers: Threads used by the harness sweeps.

    Returns:
        The report as a single string.

    Raises:
        KeyError: If a name is not a registered benchmark.
    """
    selected = [get_benchmark(n) for n in names] if names else list(BENCHMARKS.values())
    out = ["=== NUMERICAL DIFFERENTIATION AND INTEGRATION SHOWCASE ==="]

    out += ["", "* SPECIAL FUNCTIONS *"]
    out.append(format_special_functions(special_function_values()))

    for bench in selected:
        numerikit_logger.info("Analyzing %s.", bench.name)
        out += ["", f"----- Analyzing {bench.label} -----", ""]

        out.append("* DIFFERENTIATION ANALYSIS *")
        diff = evaluate_derivative_methods(bench, *DERIVATIVE_RANGE, n_workers=n_workers)
        out.append(format_derivative_table(bench, diff))

        out += ["", f"Forward difference at selected points (h = {POINT_DERIVATIVE_STEPSIZE:g}):"]
        points = evaluate_derivatives_at(
            bench, POINT_DERIVATIVE_XS, h=POINT_DERIVATIVE_STEPSIZE, n_workers=n_workers
        )
        out.append(format_point_derivatives(points))

        out += ["", "* INTEGRATION ANALYSIS *"]
        integ = evaluate_integration_methods(bench, INTEGRATION_INTERVALS, n_workers=n_workers)
        out.append(format_integration_results(bench, integ))

        out += ["", "* CONVERGENCE ANALYSIS *", ""]
        study = convergence_study(bench, *CONVERGENCE_INTERVAL, n_workers=n_workers)
        out.append(format_convergence_table(study))
        orders = ", ".join(
            f"{t:.2f}/{s:.2f}" for t, s in zip(study.trapezoidal_order(), study.simpsons_order())
        )
        out.append(f"Empirical order (trapezoidal/Simpson): {orders}")

        out += ["", "* SAMPLE STATISTICS *"]
        _, y = sample_function(bench.function, *STATISTICS_RANGE)
        out.append(format_statistics(bench.name, describe_samples(y)))

        x, y = sample_function(bench.function, *SAMPLED_INTERVAL, num=SAMPLED_POINTS)
        sampled = trapezoidal_from_samples(y, float(x[1] - x[0]))
        exact = float(bench.integral(*SAMPLED_INTERVAL))
        out.append(
            f"Sampled trapezoidal integral on [0, π] ({SAMPLED_POINTS} points): "
            f"{sampled:.8f} (exact: {exact:.8f}, error: {abs(sampled - exact):.4e})"
        )

    out += ["", "=== ANALYSIS COMPLETE ==="]
    return "\n".join(out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numerikit-showcase",
        description="Compare finite-difference and quadrature estimators on test functions.",
    )
    parser.add_argument(
        "-f",
        "--function",
        action="append",
        type=str.lower,
        choices=list(BENCHMARKS),
        help="Benchmark to analyse (repeatable). Defaults to all.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used for the evaluation sweeps.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show INFO log messages.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main showcase routine."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        )
    print(run_analysis(args.function, n_workers=args.workers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
