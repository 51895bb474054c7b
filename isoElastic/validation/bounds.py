"""
Physical bounds checks for isotropic elastic constants.

Admissible domains for a stable isotropic solid:
    μ > 0, K > 0, E > 0
    -1 < ν < 0.5
    λ unrestricted in sign (λ < 0 <=> ν < 0)

Each validator returns a ValidationError or None. Two severities:
    "error"   - value outside the admissible domain (blocks resolution)
    "warning" - admissible but unusual (auxetic ν < 0, negative λ)

Non-finite values (nan, ±inf) are always hard violations.
Mappings are converted with MaterialParameters.from_dict, so an unknown
key or a non-numeric value raises ValueError instead of a finding.
"""

import numpy as np
from typing import List, Optional

from ..material.parameters import ValidationError, coerce_parameters


def _not_finite(value: float) -> bool:
    return not np.isfinite(value)


def validate_poissons_ratio(nu: float) -> Optional[ValidationError]:
    """
    Validate Poisson's ratio.

    For stable isotropic materials -1 < ν < 0.5; most common materials
    have 0 < ν < 0.5.
    """
    if _not_finite(nu):
        return ValidationError("nu", "Poisson's ratio must be a finite number")

    if nu <= -1 or nu >= 0.5:
        return ValidationError(
            "nu",
            "Poisson's ratio must be between -1 and 0.5 for stable isotropic materials",
            "Common materials have 0 < ν < 0.5. Steel ≈ 0.3, Rubber ≈ 0.48",
        )

    if nu < 0:
        return ValidationError(
            "nu",
            "Warning: Negative Poisson's ratio (auxetic material)",
            "Rare but valid for certain engineered materials",
            severity="warning",
        )

    return None


def validate_shear_modulus(mu: float) -> Optional[ValidationError]:
    """Validate shear modulus (μ or G). Must be positive."""
    if _not_finite(mu):
        return ValidationError("mu", "Shear modulus must be a finite number")

    if mu <= 0:
        return ValidationError(
            "mu",
            "Shear modulus must be positive",
            "Typical range: 1 GPa (polymers) to 100 GPa (metals)",
        )

    return None


def validate_bulk_modulus(K: float) -> Optional[ValidationError]:
    """Validate bulk modulus. Must be positive."""
    if _not_finite(K):
        return ValidationError("K", "Bulk modulus must be a finite number")

    if K <= 0:
        return ValidationError(
            "K",
            "Bulk modulus must be positive",
            "Typical range: 1 GPa to 400 GPa",
        )

    return None


def validate_youngs_modulus(E: float) -> Optional[ValidationError]:
    """Validate Young's modulus. Must be positive."""
    if _not_finite(E):
        return ValidationError("E", "Young's modulus must be a finite number")

    if E <= 0:
        return ValidationError(
            "E",
            "Young's modulus must be positive",
            "Typical range: 0.01 GPa (rubber) to 1000 GPa (diamond)",
        )

    return None


def validate_lame_parameter(lam: float) -> Optional[ValidationError]:
    """
    Validate Lamé's first parameter.

    Negative λ is admissible (it implies ν < 0) and only yields an advisory.
    """
    if _not_finite(lam):
        return ValidationError("lambda", "Lamé parameter λ must be a finite number")

    if lam < 0:
        return ValidationError(
            "lambda",
            "Warning: Negative λ corresponds to negative Poisson's ratio",
            "Valid but uncommon (auxetic materials)",
            severity="warning",
        )

    return None


def validate_density(rho: float) -> Optional[ValidationError]:
    """Validate density. Must be positive."""
    if _not_finite(rho):
        return ValidationError("rho", "Density must be a finite number")

    if rho <= 0:
        return ValidationError(
            "rho",
            "Density must be positive",
            "Typical range: 100 kg/m³ (foam) to 20000 kg/m³ (heavy metals)",
        )

    return None


# Attribute name -> validator, in reporting order
_VALIDATORS = (
    ("lam", validate_lame_parameter),
    ("mu", validate_shear_modulus),
    ("E", validate_youngs_modulus),
    ("K", validate_bulk_modulus),
    ("nu", validate_poissons_ratio),
)


def validate(params, check_density: bool = False) -> List[ValidationError]:
    """
    Validate every supplied field against its physical domain.

    Parameters:
        params: MaterialParameters or mapping
        check_density: Also validate ρ (otherwise it passes through unexamined)

    Returns:
        List of findings, hard violations and advisories mixed, in field order

    Raises:
        ValueError: If a mapping has an unknown key or a non-numeric value
    """
    params = coerce_parameters(params)
    errors = []

    for name, validator in _VALIDATORS:
        if params.has(name):
            error = validator(params.get(name))
            if error is not None:
                errors.append(error)

    if check_density and params.has("rho"):
        error = validate_density(params.rho)
        if error is not None:
            errors.append(error)

    return errors


def blocking_errors(errors: List[ValidationError]) -> List[ValidationError]:
    """Hard violations only."""
    return [e for e in errors if e.is_blocking]


def advisories(errors: List[ValidationError]) -> List[ValidationError]:
    """Soft advisories only."""
    return [e for e in errors if not e.is_blocking]


def parse_numeric_input(value: Optional[str]) -> Optional[float]:
    """
    Parse a user-entered number.

    Returns None for blank, non-numeric or non-finite text.
    """
    if value is None or value.strip() == "":
        return None

    try:
        parsed = float(value)
    except ValueError:
        return None

    if _not_finite(parsed):
        return None

    return parsed


def approximately_equal(a: float, b: float,
                        relative_tolerance: float = 1e-6,
                        absolute_tolerance: float = 1e-12) -> bool:
    """
    Check if two values agree within a relative or absolute tolerance.

    The relative error is taken against the mean magnitude of a and b.
    """
    if a == b:
        return True

    diff = abs(a - b)
    if diff < absolute_tolerance:
        return True

    avg = (abs(a) + abs(b)) / 2
    return diff / avg < relative_tolerance


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format findings for display.

    Each finding becomes "field: message", followed by "  → suggestion"
    on its own line when present. Findings are separated by a blank line.
    """
    if not errors:
        return ""

    blocks = []
    for err in errors:
        msg = f"{err.field}: {err.message}"
        if err.suggestion:
            msg += f"\n  → {err.suggestion}"
        blocks.append(msg)

    return "\n\n".join(blocks)
