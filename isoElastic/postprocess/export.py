"""
Export resolved material parameters.

Supported formats:
- JSON (.json) - parameters, derivation trace and warnings
- CSV (.csv)   - one row per known parameter: Parameter,Value,Unit

Values are written in base SI units (Pa, kg/m³); ν is dimensionless.

Accepted inputs: ResolutionResult, CalculatorReport or a bare
MaterialParameters (no trace).
"""

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..material.parameters import MaterialParameters, ALL_FIELDS


LABELS: Dict[str, str] = {
    "lam": "Lambda (λ)",
    "mu": "Shear Modulus (μ)",
    "E": "Young's Modulus (E)",
    "K": "Bulk Modulus (K)",
    "nu": "Poisson's Ratio (ν)",
    "rho": "Density (ρ)",
}

UNITS: Dict[str, str] = {
    "lam": "Pa",
    "mu": "Pa",
    "E": "Pa",
    "K": "Pa",
    "nu": "-",
    "rho": "kg/m^3",
}


def _unpack(result) -> Tuple[MaterialParameters, List[str], List[str]]:
    """(parameters, derivations, warnings) from any supported result type."""
    if isinstance(result, MaterialParameters):
        return result, [], []
    if hasattr(result, "parameters") and hasattr(result, "derivations"):
        return result.parameters, list(result.derivations), list(result.warnings)
    raise TypeError(f"Cannot export object of type {type(result).__name__}")


def to_json_dict(result) -> Dict[str, Any]:
    """JSON-serializable dictionary of a result."""
    params, derivations, warnings = _unpack(result)
    return {
        "parameters": params.to_dict(),
        "derivations": derivations,
        "warnings": warnings,
    }


def to_json_string(result, indent: int = 2) -> str:
    """Result as a JSON document."""
    return json.dumps(to_json_dict(result), indent=indent, ensure_ascii=False)


def to_csv_string(result) -> str:
    """Result as CSV with header Parameter,Value,Unit."""
    params, _, _ = _unpack(result)
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Parameter", "Value", "Unit"])
    for name in ALL_FIELDS:
        value = params.get(name)
        if value is not None:
            writer.writerow([LABELS[name], repr(value), UNITS[name]])
    return buffer.getvalue()


def _with_suffix(filename, suffix: str) -> Path:
    path = Path(filename)
    if path.suffix != suffix:
        path = path.with_suffix(suffix)
    return path


def export_json(filename, result) -> Path:
    """
    Write a result to a JSON file.

    Parameters:
        filename: Output filename (will add .json extension if missing)
        result: ResolutionResult, CalculatorReport or MaterialParameters

    Returns:
        Path of the written file
    """
    path = _with_suffix(filename, '.json')
    with open(path, 'w', encoding='utf-8') as f:
        f.write(to_json_string(result))
        f.write("\n")

    print(f"Exported JSON file: {path}")
    return path


def export_csv(filename, result) -> Path:
    """
    Write a result to a CSV file.

    Parameters:
        filename: Output filename (will add .csv extension if missing)
        result: ResolutionResult, CalculatorReport or MaterialParameters

    Returns:
        Path of the written file
    """
    path = _with_suffix(filename, '.csv')
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(to_csv_string(result))

    print(f"Exported CSV file: {path}")
    return path


def load_json(filename) -> MaterialParameters:
    """Read the parameters back from a file written by export_json."""
    with open(filename, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return MaterialParameters.from_dict(data["parameters"])
