"""
Closed-form conversions between isotropic elastic constants.

For an isotropic linear-elastic solid any two of {λ, μ, E, K, ν} determine
the other three. This module holds one function per (source pair -> target)
combination, 10 pairs x 3 targets = 30 conversions.

Naming convention:
    <target>_from_<a>_<b>(a, b)     e.g. E_from_lam_mu(lam, mu)

with `lam` standing for λ (a Python keyword).

Core relationships:
    E = μ(3λ + 2μ) / (λ + μ)        K = λ + (2/3)μ
    ν = λ / (2(λ + μ))              μ = E / (2(1 + ν))
    λ = Eν / ((1 + ν)(1 - 2ν))      K = E / (3(1 - 2ν))

Numeric policy:
    Every denominator expression is compared against EPSILON before the
    division. A near-zero denominator raises DivisionByZeroError naming the
    expression, never a silent inf/nan.

The (λ, E) pair has no rational inverse: μ is the positive root of
    2μ² + μ(3λ - E) - Eλ = 0
whose discriminant is R² = E² + 2Eλ + 9λ². The closed forms for that
pair below use R, computed in units of max(|λ|, |E|), and switch to the
rationalized form of each expression where E ± 3λ + R would cancel.
See quadratic.py for the explicit root solve used by the resolver.
"""

from typing import Callable, Dict, List, Tuple

from .errors import DivisionByZeroError
from .quadratic import normalize_lam_E, solve_mu_from_lam_E


EPSILON = 1e-12

Conversion = Callable[[float, float], float]


def _check_denominator(value: float, expression: str) -> None:
    """Raise DivisionByZeroError if |value| < EPSILON."""
    if abs(value) < EPSILON:
        raise DivisionByZeroError(f"Division by zero: {expression} ≈ 0")


# ---------------------------------------------------------------------------
# λ, μ
# ---------------------------------------------------------------------------

def E_from_lam_mu(lam: float, mu: float) -> float:
    """E = μ(3λ + 2μ) / (λ + μ)"""
    _check_denominator(lam + mu, "λ + μ")
    return mu * (3 * lam + 2 * mu) / (lam + mu)


def nu_from_lam_mu(lam: float, mu: float) -> float:
    """ν = λ / (2(λ + μ))"""
    _check_denominator(2 * (lam + mu), "2(λ + μ)")
    return lam / (2 * (lam + mu))


def K_from_lam_mu(lam: float, mu: float) -> float:
    """K = λ + (2/3)μ"""
    return lam + (2 / 3) * mu


# ---------------------------------------------------------------------------
# E, ν
# ---------------------------------------------------------------------------

def mu_from_E_nu(E: float, nu: float) -> float:
    """μ = E / (2(1 + ν))"""
    _check_denominator(2 * (1 + nu), "2(1 + ν)")
    return E / (2 * (1 + nu))


def lam_from_E_nu(E: float, nu: float) -> float:
    """λ = Eν / ((1 + ν)(1 - 2ν))"""
    denom = (1 + nu) * (1 - 2 * nu)
    _check_denominator(denom, "(1 + ν)(1 - 2ν)")
    return E * nu / denom


def K_from_E_nu(E: float, nu: float) -> float:
    """K = E / (3(1 - 2ν))"""
    _check_denominator(3 * (1 - 2 * nu), "3(1 - 2ν)")
    return E / (3 * (1 - 2 * nu))


# ---------------------------------------------------------------------------
# μ, ν
# ---------------------------------------------------------------------------

def E_from_mu_nu(mu: float, nu: float) -> float:
    """E = 2μ(1 + ν)"""
    return 2 * mu * (1 + nu)


def lam_from_mu_nu(mu: float, nu: float) -> float:
    """λ = 2μν / (1 - 2ν)"""
    _check_denominator(1 - 2 * nu, "1 - 2ν")
    return 2 * mu * nu / (1 - 2 * nu)


def K_from_mu_nu(mu: float, nu: float) -> float:
    """K = 2μ(1 + ν) / (3(1 - 2ν))"""
    _check_denominator(3 * (1 - 2 * nu), "3(1 - 2ν)")
    return 2 * mu * (1 + nu) / (3 * (1 - 2 * nu))


# ---------------------------------------------------------------------------
# K, ν
# ---------------------------------------------------------------------------

def E_from_K_nu(K: float, nu: float) -> float:
    """E = 3K(1 - 2ν)"""
    return 3 * K * (1 - 2 * nu)


def mu_from_K_nu(K: float, nu: float) -> float:
    """μ = 3K(1 - 2ν) / (2(1 + ν))"""
    _check_denominator(2 * (1 + nu), "2(1 + ν)")
    return 3 * K * (1 - 2 * nu) / (2 * (1 + nu))


def lam_from_K_nu(K: float, nu: float) -> float:
    """λ = 3Kν / (1 + ν)"""
    _check_denominator(1 + nu, "1 + ν")
    return 3 * K * nu / (1 + nu)


# ---------------------------------------------------------------------------
# K, μ
# ---------------------------------------------------------------------------

def E_from_K_mu(K: float, mu: float) -> float:
    """E = 9Kμ / (3K + μ)"""
    _check_denominator(3 * K + mu, "3K + μ")
    return 9 * K * mu / (3 * K + mu)


def nu_from_K_mu(K: float, mu: float) -> float:
    """ν = (3K - 2μ) / (6K + 2μ)"""
    _check_denominator(6 * K + 2 * mu, "6K + 2μ")
    return (3 * K - 2 * mu) / (6 * K + 2 * mu)


def lam_from_K_mu(K: float, mu: float) -> float:
    """λ = K - (2/3)μ"""
    return K - (2 / 3) * mu


# ---------------------------------------------------------------------------
# E, μ
# ---------------------------------------------------------------------------

def nu_from_E_mu(E: float, mu: float) -> float:
    """ν = E/(2μ) - 1"""
    _check_denominator(2 * mu, "2μ")
    return E / (2 * mu) - 1


def K_from_E_mu(E: float, mu: float) -> float:
    """K = Eμ / (3(3μ - E))"""
    _check_denominator(3 * (3 * mu - E), "3(3μ - E)")
    return E * mu / (3 * (3 * mu - E))


def lam_from_E_mu(E: float, mu: float) -> float:
    """λ = μ(E - 2μ) / (3μ - E)"""
    _check_denominator(3 * mu - E, "3μ - E")
    return mu * (E - 2 * mu) / (3 * mu - E)


# ---------------------------------------------------------------------------
# E, K
# ---------------------------------------------------------------------------

def mu_from_E_K(E: float, K: float) -> float:
    """μ = 3KE / (9K - E)"""
    _check_denominator(9 * K - E, "9K - E")
    return 3 * K * E / (9 * K - E)


def nu_from_E_K(E: float, K: float) -> float:
    """ν = (3K - E) / (6K)"""
    _check_denominator(6 * K, "6K")
    return (3 * K - E) / (6 * K)


def lam_from_E_K(E: float, K: float) -> float:
    """λ = 3K(3K - E) / (9K - E)"""
    _check_denominator(9 * K - E, "9K - E")
    return 3 * K * (3 * K - E) / (9 * K - E)


# ---------------------------------------------------------------------------
# λ, ν
# ---------------------------------------------------------------------------

def E_from_lam_nu(lam: float, nu: float) -> float:
    """E = λ(1 + ν)(1 - 2ν) / ν"""
    _check_denominator(nu, "ν")
    return lam * (1 + nu) * (1 - 2 * nu) / nu


def mu_from_lam_nu(lam: float, nu: float) -> float:
    """μ = λ(1 - 2ν) / (2ν)"""
    _check_denominator(2 * nu, "2ν")
    return lam * (1 - 2 * nu) / (2 * nu)


def K_from_lam_nu(lam: float, nu: float) -> float:
    """K = λ(1 + ν) / (3ν)"""
    _check_denominator(3 * nu, "3ν")
    return lam * (1 + nu) / (3 * nu)


# ---------------------------------------------------------------------------
# λ, K
# ---------------------------------------------------------------------------

def E_from_lam_K(lam: float, K: float) -> float:
    """E = 9K(K - λ) / (3K - λ)"""
    _check_denominator(3 * K - lam, "3K - λ")
    return 9 * K * (K - lam) / (3 * K - lam)


def mu_from_lam_K(lam: float, K: float) -> float:
    """μ = (3/2)(K - λ)"""
    return (3 / 2) * (K - lam)


def nu_from_lam_K(lam: float, K: float) -> float:
    """ν = λ / (3K - λ)"""
    _check_denominator(3 * K - lam, "3K - λ")
    return lam / (3 * K - lam)


# ---------------------------------------------------------------------------
# λ, E  (positive root of the μ quadratic)
# ---------------------------------------------------------------------------

def mu_from_lam_E(lam: float, E: float) -> float:
    """μ = (E - 3λ + R) / 4, the "+" root of the μ quadratic"""
    return solve_mu_from_lam_E(lam, E).mu_plus


def nu_from_lam_E(lam: float, E: float) -> float:
    """ν = 2λ / (E + λ + R) = (R - E - λ) / (4λ)"""
    _, lam_s, E_s, root = normalize_lam_E(lam, E)
    if E_s + lam_s >= 0:
        denom = E_s + lam_s + root
        _check_denominator(denom, "E + λ + R")
        return 2 * lam_s / denom
    # E + λ < 0: the first form cancels, the second does not
    _check_denominator(4 * lam_s, "4λ")
    return (root - E_s - lam_s) / (4 * lam_s)


def K_from_lam_E(lam: float, E: float) -> float:
    """K = (E + 3λ + R) / 6 = -2Eλ / (3(R - E - 3λ))"""
    scale, lam_s, E_s, root = normalize_lam_E(lam, E)
    if E_s + 3 * lam_s >= 0:
        return scale * (E_s + 3 * lam_s + root) / 6
    return scale * (-2 * E_s * lam_s) / (3 * (root - E_s - 3 * lam_s))


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

# Source pair -> [(target, function, formula)], function arguments in pair order.
# Formula strings are what the resolver records in the derivation trace.
CONVERSIONS: Dict[Tuple[str, str], List[Tuple[str, Conversion, str]]] = {
    ("lam", "mu"): [
        ("E", E_from_lam_mu, "E = μ(3λ + 2μ) / (λ + μ)"),
        ("nu", nu_from_lam_mu, "ν = λ / (2(λ + μ))"),
        ("K", K_from_lam_mu, "K = λ + (2/3)μ"),
    ],
    ("E", "nu"): [
        ("mu", mu_from_E_nu, "μ = E / (2(1 + ν))"),
        ("lam", lam_from_E_nu, "λ = Eν / ((1 + ν)(1 - 2ν))"),
        ("K", K_from_E_nu, "K = E / (3(1 - 2ν))"),
    ],
    ("mu", "nu"): [
        ("E", E_from_mu_nu, "E = 2μ(1 + ν)"),
        ("lam", lam_from_mu_nu, "λ = 2μν / (1 - 2ν)"),
        ("K", K_from_mu_nu, "K = 2μ(1 + ν) / (3(1 - 2ν))"),
    ],
    ("K", "nu"): [
        ("E", E_from_K_nu, "E = 3K(1 - 2ν)"),
        ("mu", mu_from_K_nu, "μ = 3K(1 - 2ν) / (2(1 + ν))"),
        ("lam", lam_from_K_nu, "λ = 3Kν / (1 + ν)"),
    ],
    ("K", "mu"): [
        ("E", E_from_K_mu, "E = 9Kμ / (3K + μ)"),
        ("nu", nu_from_K_mu, "ν = (3K - 2μ) / (6K + 2μ)"),
        ("lam", lam_from_K_mu, "λ = K - (2/3)μ"),
    ],
    ("E", "mu"): [
        ("nu", nu_from_E_mu, "ν = E/(2μ) - 1"),
        ("K", K_from_E_mu, "K = Eμ / (3(3μ - E))"),
        ("lam", lam_from_E_mu, "λ = μ(E - 2μ) / (3μ - E)"),
    ],
    ("E", "K"): [
        ("mu", mu_from_E_K, "μ = 3KE / (9K - E)"),
        ("nu", nu_from_E_K, "ν = (3K - E) / (6K)"),
        ("lam", lam_from_E_K, "λ = 3K(3K - E) / (9K - E)"),
    ],
    ("lam", "nu"): [
        ("E", E_from_lam_nu, "E = λ(1 + ν)(1 - 2ν) / ν"),
        ("mu", mu_from_lam_nu, "μ = λ(1 - 2ν) / (2ν)"),
        ("K", K_from_lam_nu, "K = λ(1 + ν) / (3ν)"),
    ],
    ("lam", "K"): [
        ("E", E_from_lam_K, "E = 9K(K - λ) / (3K - λ)"),
        ("mu", mu_from_lam_K, "μ = (3/2)(K - λ)"),
        ("nu", nu_from_lam_K, "ν = λ / (3K - λ)"),
    ],
    ("lam", "E"): [
        ("mu", mu_from_lam_E, "μ = (E - 3λ + R) / 4"),
        ("nu", nu_from_lam_E, "ν = 2λ / (E + λ + R)"),
        ("K", K_from_lam_E, "K = (E + 3λ + R) / 6"),
    ],
}


def convert(target: str, sources: Dict[str, float]) -> float:
    """
    Compute one elastic constant from exactly two others.

    Parameters:
        target: Attribute name of the wanted constant ("lam", "mu", "E", "K", "nu")
        sources: Mapping with exactly two known constants

    Returns:
        The target value

    Raises:
        ValueError: If the pair/target combination is not in the catalogue
        DivisionByZeroError: If the formula is singular for these inputs

    Example:
        >>> convert("E", {"lam": 1e9, "mu": 1e9})
        2500000000.0
    """
    if len(sources) != 2:
        raise ValueError(f"Need exactly 2 source constants, got {len(sources)}")

    names = set(sources)
    for pair, entries in CONVERSIONS.items():
        if set(pair) != names:
            continue
        for entry_target, func, _ in entries:
            if entry_target == target:
                return func(sources[pair[0]], sources[pair[1]])
        raise ValueError(f"Cannot compute {target!r} from its own source pair {pair}")

    raise ValueError(f"Unknown source pair: {tuple(sorted(names))}")
