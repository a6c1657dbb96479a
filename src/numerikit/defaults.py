"""Default parameters shared by the estimators and the evaluation harness."""

DEFAULT_STEPSIZE: float = 0.001
"""Step size ``h`` used by the finite-difference estimators."""

DEFAULT_SUBINTERVALS: int = 100
"""Number of subintervals ``n`` used by the quadrature rules."""

DEFAULT_NUM_POINTS: int = 100
"""Number of sample points used when evaluating derivatives over a range."""

DEFAULT_N_SWEEP: tuple[int, ...] = (10, 20, 40, 80, 160)
"""Subinterval counts used in convergence studies."""

DEFAULT_SAMPLE_INDICES: tuple[int, ...] = (0, 10, 20, 30, 40)
"""Rows of a derivative evaluation shown in text reports."""
