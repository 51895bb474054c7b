"""
Tests for physical bounds validation and cross-consistency checks.
"""

import pytest
import numpy as np

from isoElastic.material.parameters import MaterialParameters, ValidationError
from isoElastic.validation.bounds import (
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
from isoElastic.validation.consistency import check_consistency, is_consistent


class TestPoissonsRatio:
    """Bounds for ν."""

    @pytest.mark.parametrize("nu", [0.5, -1.0, 0.7, -1.5])
    def test_hard_violations(self, nu):
        error = validate_poissons_ratio(nu)
        assert error is not None
        assert error.is_blocking
        assert error.field == "nu"
        assert "between -1 and 0.5" in error.message

    def test_admissible(self):
        assert validate_poissons_ratio(0.3) is None
        assert validate_poissons_ratio(0.0) is None

    def test_auxetic_advisory(self):
        error = validate_poissons_ratio(-0.2)
        assert error is not None
        assert not error.is_blocking
        assert "auxetic" in error.message

    @pytest.mark.parametrize("nu", [np.nan, np.inf, -np.inf])
    def test_not_finite(self, nu):
        error = validate_poissons_ratio(nu)
        assert error.is_blocking
        assert "finite" in error.message


class TestModuli:
    """Bounds for μ, K, E and λ."""

    @pytest.mark.parametrize("validator", [
        validate_shear_modulus, validate_bulk_modulus, validate_youngs_modulus,
    ])
    def test_must_be_positive(self, validator):
        assert validator(80e9) is None
        for value in (0.0, -1e9, np.nan, np.inf):
            error = validator(value)
            assert error is not None and error.is_blocking

    def test_field_names(self):
        assert validate_shear_modulus(0.0).field == "mu"
        assert validate_bulk_modulus(0.0).field == "K"
        assert validate_youngs_modulus(0.0).field == "E"

    def test_negative_lambda_is_advisory(self):
        assert validate_lame_parameter(120e9) is None
        assert validate_lame_parameter(0.0) is None
        error = validate_lame_parameter(-1e9)
        assert error.field == "lambda"
        assert not error.is_blocking

    def test_lambda_not_finite(self):
        assert validate_lame_parameter(np.nan).is_blocking

    def test_density(self):
        assert validate_density(7850.0) is None
        assert validate_density(0.0).is_blocking
        assert validate_density(np.inf).is_blocking


class TestValidate:
    """validate() over a whole record."""

    def test_valid_record(self):
        assert validate({"E": 210e9, "nu": 0.3}) == []

    def test_mixed_findings(self):
        errors = validate({"lambda": -1e9, "mu": -1.0, "nu": 0.5})
        assert [e.field for e in errors] == ["lambda", "mu", "nu"]
        assert [e.field for e in blocking_errors(errors)] == ["mu", "nu"]
        assert [e.field for e in advisories(errors)] == ["lambda"]

    def test_density_unexamined_by_default(self):
        assert validate({"E": 210e9, "rho": -5.0}) == []
        errors = validate({"E": 210e9, "rho": -5.0}, check_density=True)
        assert [e.field for e in errors] == ["rho"]

    def test_accepts_record(self):
        errors = validate(MaterialParameters(K=0.0))
        assert errors[0].field == "K"


class TestHelpers:
    """Input parsing and formatting helpers."""

    def test_parse_numeric_input(self):
        assert parse_numeric_input("210e9") == 210e9
        assert parse_numeric_input(" 0.3 ") == 0.3
        assert parse_numeric_input("") is None
        assert parse_numeric_input("   ") is None
        assert parse_numeric_input(None) is None
        assert parse_numeric_input("steel") is None
        assert parse_numeric_input("inf") is None
        assert parse_numeric_input("nan") is None

    def test_approximately_equal(self):
        assert approximately_equal(1.0, 1.0)
        assert approximately_equal(1.0, 1.0 + 1e-9)
        assert approximately_equal(0.0, 1e-13)
        assert not approximately_equal(1.0, 1.1)
        assert approximately_equal(1.0, 1.05, relative_tolerance=0.1)

    def test_format_validation_errors(self):
        errors = [
            ValidationError("mu", "Shear modulus must be positive", "Use a positive value"),
            ValidationError("E", "Young's modulus must be a finite number"),
        ]
        assert format_validation_errors(errors) == (
            "mu: Shear modulus must be positive\n  → Use a positive value"
            "\n\n"
            "E: Young's modulus must be a finite number"
        )
        assert format_validation_errors([]) == ""


class TestConsistency:
    """Cross-checks of over-specified inputs."""

    def test_inconsistent_E(self):
        findings = check_consistency({"lambda": 1e9, "mu": 1e9, "E": 10e9})
        assert findings == [
            "E inconsistent with λ and μ: expected 2.5000e+09, got 1.0000e+10"
        ]

    def test_consistent_steel(self):
        params = {"lambda": 121.154e9, "mu": 80.769e9, "E": 210e9, "nu": 0.3, "K": 175e9}
        assert check_consistency(params, 1e-3) == []
        assert is_consistent(params, 1e-3)

    def test_inconsistent_nu(self):
        findings = check_consistency({"lambda": 1e9, "mu": 1e9, "nu": 0.3})
        assert findings == [
            "ν inconsistent with λ and μ: expected 0.250000, got 0.300000"
        ]

    def test_inconsistent_mu(self):
        findings = check_consistency({"E": 210e9, "nu": 0.3, "mu": 70e9})
        assert len(findings) == 1
        assert findings[0].startswith("μ inconsistent with E and ν")

    def test_inconsistent_K(self):
        findings = check_consistency({"mu": 80e9, "nu": 0.3, "K": 100e9})
        assert len(findings) == 1
        assert findings[0].startswith("K inconsistent with μ and ν")
        assert "got 1.0000e+11" in findings[0]

    def test_two_inputs_never_inconsistent(self):
        assert check_consistency({"E": 210e9, "nu": 0.3}) == []

    def test_tolerance_override(self):
        params = {"lambda": 1e9, "mu": 1e9, "E": 2.6e9}
        assert len(check_consistency(params)) == 1
        assert check_consistency(params, tolerance=0.1) == []

    def test_division_by_zero_reported(self):
        """A singular recomputation is a finding, not an exception."""
        findings = check_consistency({"lambda": -1e9, "mu": 1e9, "E": 1e9})
        assert findings == [
            "Cannot check E against λ and μ: Division by zero: λ + μ ≈ 0"
        ]

    def test_nan_flagged(self):
        findings = check_consistency({"lambda": 1e9, "mu": 1e9, "E": float("nan")})
        assert len(findings) == 1
