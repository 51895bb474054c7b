"""
Validation of material parameter sets.

Provides:
- validate: per-field physical bounds (hard violations and advisories)
- check_consistency: cross-checks of over-specified inputs
- Input helpers: parse_numeric_input, approximately_equal, format_validation_errors
"""

from .bounds import (
    validate,
    validate_poissons_ratio,
    validate_shear_modulus,
    validate_bulk_modulus,
    validate_youngs_modulus,
    validate_lame_parameter,
    validate_density,
    blocking_errors,
    advisories,
    parse_numeric_input,
    approximately_equal,
    format_validation_errors,
)
from .consistency import check_consistency, is_consistent, DEFAULT_TOLERANCE
