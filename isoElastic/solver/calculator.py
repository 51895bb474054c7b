"""
Calculator pipeline: validate -> check consistency -> resolve.

The resolver and the checkers are independent pure functions. This module
chains them the way an interactive calculator uses them:

    1. Validate supplied values against their physical bounds.
       Any hard violation stops the pipeline (status "invalid").
    2. If more than two elastic constants were supplied, cross-check them.
       Any inconsistency stops the pipeline (status "inconsistent").
    3. Resolve the missing constants from the first matching pair.

The result is a CalculatorReport. Like the functions it calls, run()
never raises for numeric input.

Usage:
    calc = MaterialCalculator()
    report = calc.run({"E": 210e9, "nu": 0.3, "rho": 7850})
    report.status             # "resolved"
    report.parameters.K       # 175e9
"""

from dataclasses import dataclass, field
from typing import List

from ..material.parameters import MaterialParameters, ValidationError, coerce_parameters
from ..validation.bounds import validate, blocking_errors, advisories
from ..validation.consistency import check_consistency, DEFAULT_TOLERANCE
from .resolver import resolve


CONSISTENCY_WARNING = "More than 2 parameters provided. Checking consistency..."

STATUS_RESOLVED = "resolved"
STATUS_PARTIAL = "partial"
STATUS_INSUFFICIENT = "insufficient"
STATUS_INVALID = "invalid"
STATUS_INCONSISTENT = "inconsistent"


@dataclass
class CalculatorReport:
    """
    Outcome of one calculator run.

    Attributes:
        inputs: Record as supplied (after key normalization)
        parameters: Resolved record (equal to inputs when stopped early)
        derivations: Formulas applied by the resolver
        warnings: Resolver warnings and advisory suggestions
        errors: Blocking messages (bounds violations or inconsistencies)
        validation: All bounds findings, blocking and advisory
        status: "resolved", "partial", "insufficient", "invalid" or "inconsistent"
    """
    inputs: MaterialParameters
    parameters: MaterialParameters
    derivations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    validation: List[ValidationError] = field(default_factory=list)
    status: str = STATUS_INSUFFICIENT

    @property
    def ok(self) -> bool:
        """True unless the run was stopped by bounds or consistency errors."""
        return self.status in (STATUS_RESOLVED, STATUS_PARTIAL, STATUS_INSUFFICIENT)


class MaterialCalculator:
    """
    Runs the validate / check / resolve sequence on a parameter record.

    Attributes:
        tolerance: Tolerance for the consistency check
        check_density: Whether ρ is bounds-checked
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE, check_density: bool = False):
        if not tolerance > 0:
            raise ValueError(f"Tolerance must be positive, got {tolerance}")
        self.tolerance = tolerance
        self.check_density = check_density

    def validate_inputs(self, params: MaterialParameters) -> List[ValidationError]:
        """Bounds findings for the supplied values."""
        return validate(params, check_density=self.check_density)

    def check_inputs(self, params: MaterialParameters) -> List[str]:
        """Consistency findings; only meaningful for more than two constants."""
        if params.n_elastic <= 2:
            return []
        return check_consistency(params, self.tolerance)

    def run(self, params) -> CalculatorReport:
        """
        Validate, check and resolve.

        Parameters:
            params: MaterialParameters or mapping

        Returns:
            CalculatorReport
        """
        params = coerce_parameters(params)
        report = CalculatorReport(inputs=params, parameters=params)

        # 1. Bounds
        report.validation = self.validate_inputs(params)
        blocking = blocking_errors(report.validation)
        advisory = advisories(report.validation)
        if blocking:
            report.errors = [e.message for e in blocking]
            report.warnings = [e.suggestion for e in advisory if e.suggestion]
            report.status = STATUS_INVALID
            return report

        # 2. Consistency
        inconsistencies = self.check_inputs(params)
        if inconsistencies:
            report.errors = inconsistencies
            report.warnings = [CONSISTENCY_WARNING]
            report.status = STATUS_INCONSISTENT
            return report

        # 3. Resolve
        result = resolve(params)
        report.parameters = result.parameters
        report.derivations = result.derivations
        report.warnings = result.warnings + [e.message for e in advisory]

        if params.n_elastic < 2:
            report.status = STATUS_INSUFFICIENT
        elif result.is_complete:
            report.status = STATUS_RESOLVED
        else:
            report.status = STATUS_PARTIAL

        return report
