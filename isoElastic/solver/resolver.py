"""
Resolve a full set of elastic constants from any two of them.

Given a partial MaterialParameters record, the resolver picks ONE source
pair and fills every unset field among {λ, μ, E, K, ν} from it, recording
the formula applied at each step.

Pair precedence (first match wins):
    (λ, μ), (E, ν), (μ, ν), (K, ν), (K, μ),
    (E, μ), (E, K), (λ, ν), (λ, K), (λ, E)

The order is observable when more than two constants are supplied: the
earliest matching pair drives the derivation and the remaining supplied
values are left as given (use check_consistency to compare them).

Failure handling:
    - fewer than 2 constants: input returned with a warning
    - DivisionByZeroError: converted to a warning, steps already taken kept
    - negative discriminant or non-finite input in the (λ, E) branch:
      warning, μ left unset
Nothing raises out of resolve() for numeric input. A mapping with an
unknown key or a non-numeric value is rejected with ValueError before
resolution starts.

Usage:
    result = resolve({"E": 210e9, "nu": 0.3})
    result.parameters.mu      # 80.77e9
    result.derivations        # ['μ = E / (2(1 + ν))', ...]
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from ..material.parameters import MaterialParameters, coerce_parameters
from ..formulas.errors import ElasticityError, NoRealSolutionError
from ..formulas.pairs import CONVERSIONS, nu_from_lam_mu, K_from_lam_mu
from ..formulas.quadratic import solve_mu_from_lam_E, QUADRATIC_FORMULA


INSUFFICIENT_WARNING = "Need at least 2 independent elastic parameters"
NO_POSITIVE_ROOT_WARNING = "No positive root for μ from λ and E; ν and K not derived"


@dataclass(frozen=True)
class DerivationStep:
    """One computed field and the formula that produced it."""
    field: str
    value: float
    formula: str


@dataclass
class ResolutionResult:
    """
    Output of resolve().

    Attributes:
        parameters: New record with every derivable field filled in
        derivations: Formulas applied, in computation order
        warnings: Non-fatal problems encountered
    """
    parameters: MaterialParameters
    derivations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True if all five elastic constants are known."""
        return self.parameters.is_complete


Handler = Callable[[MaterialParameters, List[str]], Iterator[DerivationStep]]


@dataclass(frozen=True)
class PairBranch:
    """
    A source pair and the handler that derives the other constants from it.

    Attributes:
        sources: Attribute names of the two source constants
        handler: Generator of DerivationStep for each unset target
    """
    sources: Tuple[str, str]
    handler: Handler

    def matches(self, params: MaterialParameters) -> bool:
        return all(params.has(name) for name in self.sources)

    @property
    def label(self) -> str:
        return "(" + ", ".join(self.sources) + ")"


def _closed_form_handler(sources: Tuple[str, str]) -> Handler:
    """Handler that applies the catalogue conversions for a source pair."""
    entries = CONVERSIONS[sources]

    def handler(params: MaterialParameters, warnings: List[str]) -> Iterator[DerivationStep]:
        a = params.get(sources[0])
        b = params.get(sources[1])
        for target, func, formula in entries:
            if not params.has(target):
                yield DerivationStep(target, func(a, b), formula)

    return handler


def _lam_E_handler(params: MaterialParameters, warnings: List[str]) -> Iterator[DerivationStep]:
    """Solve the μ quadratic, then derive ν and K from (λ, μ)."""
    lam = params.lam
    roots = solve_mu_from_lam_E(lam, params.E)
    mu = roots.selected
    yield DerivationStep("mu", mu, QUADRATIC_FORMULA)

    if mu <= 0:
        warnings.append(NO_POSITIVE_ROOT_WARNING)
        return

    if not params.has("nu"):
        yield DerivationStep("nu", nu_from_lam_mu(lam, mu), "ν = λ / (2(λ + μ))")
    if not params.has("K"):
        yield DerivationStep("K", K_from_lam_mu(lam, mu), "K = λ + (2/3)μ")


# Fixed precedence, evaluated top to bottom
BRANCHES: Tuple[PairBranch, ...] = (
    PairBranch(("lam", "mu"), _closed_form_handler(("lam", "mu"))),
    PairBranch(("E", "nu"), _closed_form_handler(("E", "nu"))),
    PairBranch(("mu", "nu"), _closed_form_handler(("mu", "nu"))),
    PairBranch(("K", "nu"), _closed_form_handler(("K", "nu"))),
    PairBranch(("K", "mu"), _closed_form_handler(("K", "mu"))),
    PairBranch(("E", "mu"), _closed_form_handler(("E", "mu"))),
    PairBranch(("E", "K"), _closed_form_handler(("E", "K"))),
    PairBranch(("lam", "nu"), _closed_form_handler(("lam", "nu"))),
    PairBranch(("lam", "K"), _closed_form_handler(("lam", "K"))),
    PairBranch(("lam", "E"), _lam_E_handler),
)


def select_branch(params: MaterialParameters) -> Optional[PairBranch]:
    """First branch in precedence order whose source pair is fully set."""
    for branch in BRANCHES:
        if branch.matches(params):
            return branch
    return None


def resolve(params) -> ResolutionResult:
    """
    Fill in the missing elastic constants of a partial record.

    Parameters:
        params: MaterialParameters or mapping ("G" accepted for μ)

    Returns:
        ResolutionResult with the new record, derivation trace and warnings.
        The input record is never modified; ρ is passed through.

    Raises:
        ValueError: If a mapping has an unknown key or a non-numeric value
    """
    params = coerce_parameters(params)
    derivations: List[str] = []
    warnings: List[str] = []

    if params.n_elastic < 2:
        warnings.append(INSUFFICIENT_WARNING)
        return ResolutionResult(params, derivations, warnings)

    branch = select_branch(params)
    current = params
    try:
        for step in branch.handler(params, warnings):
            current = current.with_values(**{step.field: step.value})
            derivations.append(step.formula)
    except NoRealSolutionError as exc:
        warnings.append(str(exc))
    except (ElasticityError, ArithmeticError) as exc:
        warnings.append(f"Calculation error: {exc}")

    return ResolutionResult(current, derivations, warnings)
