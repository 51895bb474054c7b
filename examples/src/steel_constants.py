#!/usr/bin/env python3
"""
Example: elastic constants of structural steel from E and ν.

This example demonstrates the complete pipeline:
1. Supply two measured constants (E, ν) and a density
2. Validate them against their physical bounds
3. Resolve λ, μ and K with a derivation trace
4. Cross-check the resolved set and export it

Steel:
    E = 210 GPa, ν = 0.3, ρ = 7850 kg/m³
    => μ ≈ 80.77 GPa, λ ≈ 121.15 GPa, K = 175 GPa

Usage:
    ./examples/src/steel_constants.py
    ./examples/src/steel_constants.py --export
"""

import sys
from pathlib import Path

# Add project root to path (two levels up from examples/src/)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from isoElastic.solver.calculator import MaterialCalculator
from isoElastic.validation.consistency import check_consistency
from isoElastic.postprocess.export import export_json, export_csv


def run(E: float = 210e9, nu: float = 0.3, rho: float = 7850.0,
        export: bool = False):
    """
    Resolve and report the constants for given E and ν.

    Parameters:
        E: Young's modulus (Pa)
        nu: Poisson's ratio
        rho: Density (kg/m³)
        export: Write steel.json / steel.csv to the current directory

    Returns:
        CalculatorReport
    """
    print("=" * 60)
    print("Isotropic elastic constants")
    print("=" * 60)
    print(f"Inputs: E = {E / 1e9:.1f} GPa, ν = {nu}, ρ = {rho} kg/m³")

    calculator = MaterialCalculator()
    report = calculator.run({"E": E, "nu": nu, "rho": rho})

    print(f"\nStatus: {report.status}")
    p = report.parameters
    print(f"  λ = {p.lam / 1e9:10.3f} GPa")
    print(f"  μ = {p.mu / 1e9:10.3f} GPa")
    print(f"  K = {p.K / 1e9:10.3f} GPa")

    print("\nDerivation trace:")
    for i, formula in enumerate(report.derivations, start=1):
        print(f"  {i}. {formula}")

    findings = check_consistency(p)
    print(f"\nConsistency findings on resolved set: {len(findings)}")

    if export:
        export_json("steel.json", report)
        export_csv("steel.csv", report)

    return report


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Steel elastic constants example")
    parser.add_argument("--E", type=float, default=210e9,
                        help="Young's modulus in Pa (default: 210e9)")
    parser.add_argument("--nu", type=float, default=0.3,
                        help="Poisson's ratio (default: 0.3)")
    parser.add_argument("--export", action="store_true",
                        help="Export steel.json and steel.csv")

    args = parser.parse_args()
    run(E=args.E, nu=args.nu, export=args.export)
