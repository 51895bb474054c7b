"""
isoElastic - Isotropic Linear-Elastic Constant Resolver

Resolves the full set of isotropic elastic constants (λ, μ, E, K, ν)
from any two independent inputs using the closed-form identities of
linear elasticity, with a derivation trace, bounds validation and a
consistency check for over-specified inputs.

Key modules:
- material: MaterialParameters record, ValidationError
- formulas: 30 pairwise conversions and the (λ, E) quadratic
- solver: resolve() and the MaterialCalculator pipeline
- validation: physical bounds and cross-consistency checks
- io: JSON configuration loading
- postprocess: JSON / CSV export

Quick start:
    from isoElastic import resolve, check_consistency, validate

    # Steel from E and ν
    result = resolve({"E": 210e9, "nu": 0.3})
    result.parameters.mu      # ~80.77e9 Pa
    result.parameters.K       # ~175e9 Pa
    result.derivations        # ['μ = E / (2(1 + ν))', 'λ = ...', 'K = ...']

    # Over-specified input
    check_consistency({"lambda": 1e9, "mu": 1e9, "E": 10e9})
    # ['E inconsistent with λ and μ: expected 2.5000e+09, got 1.0000e+10']

    # Physical bounds
    validate({"nu": 0.5})     # [ValidationError(field='nu', ...)]

Full pipeline (validate -> check -> resolve):
    from isoElastic import MaterialCalculator
    report = MaterialCalculator().run({"K": 175e9, "G": 80e9})
"""

__version__ = "0.1.0"
__author__ = "isoElastic developers"

# Core imports for convenience
from .material.parameters import MaterialParameters, ValidationError
from .formulas.errors import ElasticityError, DivisionByZeroError, NoRealSolutionError
from .solver.resolver import resolve, ResolutionResult
from .solver.calculator import MaterialCalculator, CalculatorReport
from .validation.bounds import validate
from .validation.consistency import check_consistency
