"""
Formula library for isotropic elastic constants.

Provides:
- 30 closed-form conversions <target>_from_<a>_<b>
- CONVERSIONS: catalogue of (source pair -> targets, functions, formulas)
- solve_mu_from_lam_E: explicit quadratic solve for the (λ, E) pair
- DivisionByZeroError / NoRealSolutionError
"""

from .errors import ElasticityError, DivisionByZeroError, NoRealSolutionError
from .pairs import (
    EPSILON,
    CONVERSIONS,
    convert,
    E_from_lam_mu, nu_from_lam_mu, K_from_lam_mu,
    mu_from_E_nu, lam_from_E_nu, K_from_E_nu,
    E_from_mu_nu, lam_from_mu_nu, K_from_mu_nu,
    E_from_K_nu, mu_from_K_nu, lam_from_K_nu,
    E_from_K_mu, nu_from_K_mu, lam_from_K_mu,
    nu_from_E_mu, K_from_E_mu, lam_from_E_mu,
    mu_from_E_K, nu_from_E_K, lam_from_E_K,
    E_from_lam_nu, mu_from_lam_nu, K_from_lam_nu,
    E_from_lam_K, mu_from_lam_K, nu_from_lam_K,
    mu_from_lam_E, nu_from_lam_E, K_from_lam_E,
)
from .quadratic import QuadraticRoots, solve_mu_from_lam_E, QUADRATIC_FORMULA
