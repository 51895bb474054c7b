#!/usr/bin/env python3
"""
Command line front end.

Resolve isotropic elastic constants from any two of them:

    isoelastic --E 210e9 --nu 0.3
    isoelastic --lambda 1e9 --G 1e9 --json steel.json --csv steel.csv
    isoelastic --config material.json

All moduli are in Pa, density in kg/m³.

Exit codes:
    0 - resolved (fully or partially)
    1 - fewer than 2 elastic constants supplied
    2 - invalid input, inconsistent input, or unreadable config
"""

import argparse
import sys
from typing import List, Optional

from .material.parameters import MaterialParameters, ALL_FIELDS, SYMBOLS
from .solver.calculator import (
    CalculatorReport,
    STATUS_INSUFFICIENT, STATUS_INVALID, STATUS_INCONSISTENT,
)
from .validation.consistency import DEFAULT_TOLERANCE
from .io.config import load_config, setup_calculator_from_config
from .postprocess.export import export_json, export_csv, UNITS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isoelastic",
        description="Resolve isotropic linear-elastic constants from any two of them"
    )
    parser.add_argument("--lambda", dest="lam", type=float,
                        help="Lamé's first parameter λ (Pa)")
    shear = parser.add_mutually_exclusive_group()
    shear.add_argument("--mu", type=float, help="Shear modulus μ (Pa)")
    shear.add_argument("--G", dest="G", type=float, help="Shear modulus, alias of --mu (Pa)")
    parser.add_argument("--E", type=float, help="Young's modulus (Pa)")
    parser.add_argument("--K", type=float, help="Bulk modulus (Pa)")
    parser.add_argument("--nu", type=float, help="Poisson's ratio")
    parser.add_argument("--rho", type=float, help="Density (kg/m³), passed through")
    parser.add_argument("--config", "-c",
                        help="JSON configuration file (command line values override it)")
    parser.add_argument("--tolerance", type=float, default=None,
                        help=f"Consistency tolerance (default: {DEFAULT_TOLERANCE})")
    parser.add_argument("--check-density", action="store_true",
                        help="Also bounds-check the density")
    parser.add_argument("--json", help="Export result to a JSON file")
    parser.add_argument("--csv", help="Export result to a CSV file")
    return parser


def format_report(report: CalculatorReport) -> str:
    """Human-readable summary of a calculator run."""
    lines = [f"Status: {report.status}", ""]

    lines.append("Parameters:")
    for name in ALL_FIELDS:
        value = report.parameters.get(name)
        if value is None:
            continue
        source = "given" if report.inputs.has(name) else "derived"
        unit = "" if UNITS[name] == "-" else f" {UNITS[name]}"
        lines.append(f"  {SYMBOLS[name]:<2} = {value:.6g}{unit}  ({source})")

    if report.derivations:
        lines.append("")
        lines.append("Derivations:")
        for i, formula in enumerate(report.derivations, start=1):
            lines.append(f"  {i}. {formula}")

    if report.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  - {w}" for w in report.warnings)

    if report.errors:
        lines.append("")
        lines.append("Errors:")
        lines.extend(f"  - {e}" for e in report.errors)

    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
    else:
        config = {
            "parameters": MaterialParameters(),
            "tolerance": DEFAULT_TOLERANCE,
            "check_density": False,
        }

    # Command line values override the configuration file
    overrides = {}
    for name in ALL_FIELDS:
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.G is not None:
        overrides["mu"] = args.G
    config["parameters"] = config["parameters"].with_values(**overrides)

    if args.tolerance is not None:
        config["tolerance"] = args.tolerance
    config["check_density"] = config["check_density"] or args.check_density

    try:
        calculator, params = setup_calculator_from_config(config)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    report = calculator.run(params)
    print(format_report(report))

    if args.json:
        export_json(args.json, report)
    if args.csv:
        export_csv(args.csv, report)

    if report.status in (STATUS_INVALID, STATUS_INCONSISTENT):
        return 2
    if report.status == STATUS_INSUFFICIENT:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
