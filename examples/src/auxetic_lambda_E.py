#!/usr/bin/env python3
"""
Example: auxetic material from λ and E (the quadratic branch).

For λ < 0 the μ quadratic

    2μ² + μ(3λ - E) - Eλ = 0

has two positive roots. Only the larger one keeps λ + μ > 0 and gives a
Poisson's ratio inside (-1, 0.5). This script prints both roots and the
constants resolved from the selected one.

Material:
    μ = 1 GPa, ν = -0.2  =>  λ = -2/7 GPa, E = 1.6 GPa

Usage:
    ./examples/src/auxetic_lambda_E.py
"""

import sys
from pathlib import Path

# Add project root to path (two levels up from examples/src/)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from isoElastic.formulas.quadratic import solve_mu_from_lam_E
from isoElastic.formulas.pairs import nu_from_lam_mu
from isoElastic.solver.resolver import resolve
from isoElastic.validation.bounds import validate, format_validation_errors


def main():
    lam = -2e9 / 7
    E = 1.6e9

    roots = solve_mu_from_lam_E(lam, E)
    print(f"Discriminant: {roots.discriminant:.6f} x ({roots.scale:.3e} Pa)²")
    for label, mu in (("+", roots.mu_plus), ("-", roots.mu_minus)):
        nu = nu_from_lam_mu(lam, mu)
        print(f"  root ({label}): μ = {mu / 1e9:.6f} GPa  ->  ν = {nu:.6f}")
    print(f"Selected: μ = {roots.selected / 1e9:.6f} GPa")

    result = resolve({"lambda": lam, "E": E})
    print("\nResolved:")
    for key, value in result.parameters.to_dict().items():
        print(f"  {key:>6} = {value:.6e}")

    print("\nTrace:")
    for formula in result.derivations:
        print(f"  {formula}")

    print("\nAdvisories:")
    print(format_validation_errors(validate(result.parameters)))


if __name__ == "__main__":
    main()
