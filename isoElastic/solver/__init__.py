"""
Resolution of elastic constants.

Provides:
- resolve: fill in missing constants from the first matching source pair
- MaterialCalculator: validate -> check consistency -> resolve pipeline
"""

from .resolver import (
    resolve,
    select_branch,
    ResolutionResult,
    DerivationStep,
    PairBranch,
    BRANCHES,
)
from .calculator import MaterialCalculator, CalculatorReport
