"""Reference values of special functions shown alongside the estimators."""

from __future__ import annotations

from scipy import special

__all__ = [
    "special_function_values",
]


def special_function_values() -> dict[str, float]:
    """Evaluates a few special functions at fixed arguments.

    Returns:
        Mapping from the call as written (e.g. ``"gamma(5)"``) to its value,
        in display order.
    """
    return {
        "gamma(5)": float(special.gamma(5)),
        "beta(2, 3)": float(special.beta(2, 3)),
        "bessel J0(1)": float(special.j0(1)),
        "erf(1)": float(special.erf(1)),
    }
