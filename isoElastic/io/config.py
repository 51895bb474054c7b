"""
Configuration and problem setup.

Utilities for loading a material calculation from a JSON file:
- Supplied elastic constants (base SI units)
- Consistency tolerance
- Whether density is bounds-checked

Example JSON format:
    {
      "parameters": {"E": 210e9, "nu": 0.3, "rho": 7850},
      "tolerance": 1e-6,
      "check_density": false
    }

Parameter keys follow MaterialParameters.from_dict: "lambda", "mu"
(or "G"), "E", "K", "nu", "rho". Values must be numbers or null.
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple

from ..material.parameters import MaterialParameters
from ..validation.consistency import DEFAULT_TOLERANCE
from ..solver.calculator import MaterialCalculator


_TOP_LEVEL_KEYS = {"parameters", "tolerance", "check_density"}


def load_config(filename) -> Dict[str, Any]:
    """
    Load a material calculation configuration from a JSON file.

    Parameters:
        filename: Path to the JSON file

    Returns:
        Normalized configuration dictionary with keys
        "parameters" (MaterialParameters), "tolerance" and "check_density"

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the content is malformed
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    return parse_config(raw)


def parse_config(raw: Any) -> Dict[str, Any]:
    """
    Validate and normalize an already-decoded configuration.

    Parameters:
        raw: Decoded JSON content

    Returns:
        Normalized configuration dictionary (see load_config)
    """
    if not isinstance(raw, dict):
        raise ValueError("Configuration root must be a JSON object")

    unknown = set(raw) - _TOP_LEVEL_KEYS
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

    if "parameters" not in raw:
        raise ValueError("Configuration must define 'parameters'")
    if not isinstance(raw["parameters"], dict):
        raise ValueError("'parameters' must be a JSON object")

    parameters = MaterialParameters.from_dict(raw["parameters"])

    tolerance = raw.get("tolerance", DEFAULT_TOLERANCE)
    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
        raise ValueError(f"'tolerance' must be a number, got {tolerance!r}")
    if not tolerance > 0:
        raise ValueError(f"'tolerance' must be positive, got {tolerance}")

    check_density = raw.get("check_density", False)
    if not isinstance(check_density, bool):
        raise ValueError(f"'check_density' must be true or false, got {check_density!r}")

    return {
        "parameters": parameters,
        "tolerance": float(tolerance),
        "check_density": check_density,
    }


def setup_calculator_from_config(config: Dict[str, Any]) -> Tuple[MaterialCalculator, MaterialParameters]:
    """
    Set up a calculator and its input record from a configuration.

    Parameters:
        config: Dictionary returned by load_config / parse_config

    Returns:
        (calculator, parameters)
    """
    calculator = MaterialCalculator(tolerance=config["tolerance"],
                                    check_density=config["check_density"])
    return calculator, config["parameters"]
