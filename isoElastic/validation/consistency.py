"""
Cross-consistency of over-specified parameter sets.

When three or more constants are supplied, some of them are implied by
the others. Each check below recomputes one supplied field from two other
supplied fields and compares:

    λ, μ, E given  ->  E from (λ, μ)    relative error
    λ, μ, ν given  ->  ν from (λ, μ)    absolute error
    E, ν, μ given  ->  μ from (E, ν)    relative error
    K, μ, ν given  ->  K from (μ, ν)    relative error

A mismatch names the field with expected vs. actual values. The checker
does not try to decide which supplied value is wrong.
Numeric input never raises; a mapping with an unknown key or a
non-numeric value raises ValueError.
"""

from typing import Callable, List, Tuple

from ..material.parameters import SYMBOLS, coerce_parameters
from ..formulas.errors import ElasticityError
from ..formulas.pairs import E_from_lam_mu, nu_from_lam_mu, mu_from_E_nu, K_from_mu_nu


DEFAULT_TOLERANCE = 1e-6

# (checked field, source a, source b, recompute function, use relative error)
CONSISTENCY_CHECKS: Tuple[Tuple[str, str, str, Callable[[float, float], float], bool], ...] = (
    ("E", "lam", "mu", E_from_lam_mu, True),
    ("nu", "lam", "mu", nu_from_lam_mu, False),
    ("mu", "E", "nu", mu_from_E_nu, True),
    ("K", "mu", "nu", K_from_mu_nu, True),
)


def _error(expected: float, actual: float, relative: bool) -> float:
    diff = abs(expected - actual)
    if relative and actual != 0:
        return diff / abs(actual)
    return diff


def _format_value(name: str, value: float) -> str:
    # ν is dimensionless and O(1); moduli are shown in scientific notation
    if name == "nu":
        return f"{value:.6f}"
    return f"{value:.4e}"


def check_consistency(params, tolerance: float = DEFAULT_TOLERANCE) -> List[str]:
    """
    Compare supplied values against values implied by other supplied pairs.

    Parameters:
        params: MaterialParameters or mapping
        tolerance: Allowed error (relative for moduli, absolute for ν)

    Returns:
        List of human-readable findings, empty when consistent

    Raises:
        ValueError: If a mapping has an unknown key or a non-numeric value
    """
    params = coerce_parameters(params)
    inconsistencies = []

    for target, a, b, func, relative in CONSISTENCY_CHECKS:
        if not (params.has(target) and params.has(a) and params.has(b)):
            continue

        t_sym, a_sym, b_sym = SYMBOLS[target], SYMBOLS[a], SYMBOLS[b]
        try:
            expected = func(params.get(a), params.get(b))
        except ElasticityError as exc:
            inconsistencies.append(f"Cannot check {t_sym} against {a_sym} and {b_sym}: {exc}")
            continue

        actual = params.get(target)
        # nan compares False, so test the negation to flag it
        if not _error(expected, actual, relative) <= tolerance:
            inconsistencies.append(
                f"{t_sym} inconsistent with {a_sym} and {b_sym}: "
                f"expected {_format_value(target, expected)}, "
                f"got {_format_value(target, actual)}"
            )

    return inconsistencies


def is_consistent(params, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if check_consistency finds nothing."""
    return not check_consistency(params, tolerance)
