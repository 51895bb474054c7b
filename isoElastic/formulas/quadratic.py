"""
Shear modulus from Lamé's first parameter and Young's modulus.

E = μ(3λ + 2μ) / (λ + μ) has no rational inverse for μ. Clearing the
denominator gives

    Eλ + Eμ = 3λμ + 2μ²   =>   2μ² + μ(3λ - E) - Eλ = 0

so with a = 2, b = 3λ - E, c = -Eλ:

    μ = (-b ± sqrt(b² - 4ac)) / (2a)

Root selection:
    The product of the roots is -Eλ/2.
    - λ > 0, E > 0: exactly one positive root, the "+" root.
    - λ < 0, E > 0: both roots are positive, but μ = -λ lies strictly
      between them (the quadratic evaluates to -λ² there), so only the
      "+" root keeps λ + μ > 0 and hence ν inside (-1, 0.5).
    The "+" (larger) root is therefore taken whenever it is strictly
    positive; otherwise the "-" root is returned and the caller decides
    what to do with a non-positive μ.

The roots are computed in units of max(|λ|, |E|) so that no square
overflows for moduli anywhere in the float range.
"""

import numpy as np
from dataclasses import dataclass

from .errors import NoRealSolutionError


QUADRATIC_FORMULA = "μ from quadratic: 2μ² + μ(3λ - E) - Eλ = 0"


@dataclass(frozen=True)
class QuadraticRoots:
    """
    Result of the μ quadratic.

    Attributes:
        mu_plus: Root with +sqrt (the larger one)
        mu_minus: Root with -sqrt
        discriminant: b² - 4ac of the quadratic in units of scale²
        scale: max(|λ|, |E|), the unit the quadratic was solved in
    """
    mu_plus: float
    mu_minus: float
    discriminant: float
    scale: float = 1.0

    @property
    def selected(self) -> float:
        """The larger root if strictly positive, else the smaller one."""
        return self.mu_plus if self.mu_plus > 0 else self.mu_minus

    @property
    def has_positive_root(self) -> bool:
        return self.selected > 0


def quadratic_coefficients(lam: float, E: float):
    """Coefficients (a, b, c) of 2μ² + μ(3λ - E) - Eλ = 0."""
    return 2.0, 3 * lam - E, -E * lam


def normalize_lam_E(lam: float, E: float):
    """
    Express λ and E in units of s = max(|λ|, |E|).

    The quadratic is homogeneous of degree 2 in (λ, E, μ), so its roots
    scale linearly with s. Working with λ/s and E/s keeps b² and Eλ far
    from overflow; b² - 4ac equals E² + 2Eλ + 9λ² in these units.

    Returns:
        (s, λ/s, E/s, R) with R = sqrt(b² - 4ac) of the normalized quadratic

    Raises:
        NoRealSolutionError: If λ or E is not finite, or the discriminant
            is negative
    """
    if not (np.isfinite(lam) and np.isfinite(E)):
        raise NoRealSolutionError(
            "No real solution for μ from λ and E (non-finite input)"
        )

    scale = max(abs(lam), abs(E))
    if scale == 0:
        scale = 1.0
    lam_s, E_s = lam / scale, E / scale

    r_squared = E_s * E_s + 2 * E_s * lam_s + 9 * lam_s * lam_s
    if r_squared < 0:
        raise NoRealSolutionError(
            "No real solution for μ from λ and E (negative discriminant)"
        )

    return scale, lam_s, E_s, float(np.sqrt(r_squared))


def solve_mu_from_lam_E(lam: float, E: float) -> QuadraticRoots:
    """
    Solve the μ quadratic for given λ and E.

    -b ± sqrt(b² - 4ac) cancels when b² ≫ |4ac| (λ ≫ E, ν close to 0.5).
    The root on the side of that cancellation is taken from the product
    of the roots, c/a, instead.

    Parameters:
        lam: Lamé's first parameter λ (Pa)
        E: Young's modulus (Pa)

    Returns:
        QuadraticRoots with both roots and the discriminant

    Raises:
        NoRealSolutionError: If the discriminant is negative or an input
            is not finite
        OverflowError: If a root does not fit in a float
    """
    scale, lam_s, E_s, root = normalize_lam_E(lam, E)
    a, b, c = quadratic_coefficients(lam_s, E_s)

    if b > 0:
        mu_minus = -(b + root) / (2 * a)
        mu_plus = c / (a * mu_minus)
    else:
        q = root - b
        mu_plus = q / (2 * a)
        mu_minus = 2 * c / q if q > 0 else 0.0

    mu_plus, mu_minus = mu_plus * scale, mu_minus * scale
    if not (np.isfinite(mu_plus) and np.isfinite(mu_minus)):
        raise OverflowError("μ from λ and E exceeds the floating-point range")

    return QuadraticRoots(mu_plus=mu_plus, mu_minus=mu_minus,
                          discriminant=root * root, scale=scale)
