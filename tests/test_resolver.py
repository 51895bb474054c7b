"""
Tests for resolving a full set of elastic constants from two inputs.
"""

import pytest
from itertools import combinations
from numpy.testing import assert_allclose

from isoElastic.material.parameters import MaterialParameters, ELASTIC_FIELDS
from isoElastic.formulas.errors import NoRealSolutionError
from isoElastic.formulas.quadratic import QUADRATIC_FORMULA, solve_mu_from_lam_E
from isoElastic.solver import resolver
from isoElastic.solver.resolver import (
    resolve, select_branch, BRANCHES,
    INSUFFICIENT_WARNING, NO_POSITIVE_ROOT_WARNING,
)
from isoElastic.validation.bounds import validate
from isoElastic.validation.consistency import check_consistency


PRECEDENCE = [
    ("lam", "mu"), ("E", "nu"), ("mu", "nu"), ("K", "nu"), ("K", "mu"),
    ("E", "mu"), ("E", "K"), ("lam", "nu"), ("lam", "K"), ("lam", "E"),
]

STEEL = MaterialParameters(lam=120e9, mu=80e9, E=208e9, K=520e9 / 3, nu=0.3)
AUXETIC = MaterialParameters(lam=-2e9 / 7, mu=1e9, E=1.6e9, K=8e9 / 21, nu=-0.2)


def _subset(reference: MaterialParameters, names) -> MaterialParameters:
    return MaterialParameters(**{name: reference.get(name) for name in names})


def _assert_matches(actual: MaterialParameters, reference: MaterialParameters, rtol):
    for name in ELASTIC_FIELDS:
        assert actual.has(name), f"{name} not resolved"
        assert_allclose(actual.get(name), reference.get(name), rtol=rtol,
                        err_msg=f"field {name}")


class TestScenarios:
    """Worked examples."""

    def test_lambda_mu(self):
        """λ = μ = 1 GPa."""
        result = resolve({"lambda": 1e9, "mu": 1e9})
        p = result.parameters
        assert_allclose(p.E, 2.5e9, rtol=1e-12)
        assert_allclose(p.nu, 0.25, rtol=1e-12)
        assert_allclose(p.K, 1.6667e9, rtol=1e-4)
        assert len(result.derivations) == 3
        assert result.warnings == []

    def test_steel_E_nu(self):
        result = resolve({"E": 210e9, "nu": 0.3})
        p = result.parameters
        assert_allclose(p.mu, 80.769e9, rtol=1e-4)
        assert_allclose(p.lam, 121.154e9, rtol=1e-4)
        assert_allclose(p.K, 175e9, rtol=1e-12)
        assert result.warnings == []
        assert result.derivations == [
            "μ = E / (2(1 + ν))",
            "λ = Eν / ((1 + ν)(1 - 2ν))",
            "K = E / (3(1 - 2ν))",
        ]

    def test_single_input(self):
        """One constant: unchanged record and one warning."""
        result = resolve({"E": 1.0})
        assert result.parameters == MaterialParameters(E=1.0)
        assert result.derivations == []
        assert result.warnings == [INSUFFICIENT_WARNING]

    def test_empty_input(self):
        result = resolve(MaterialParameters())
        assert result.warnings == [INSUFFICIENT_WARNING]
        assert not result.is_complete

    def test_density_passthrough(self):
        """ρ is neither derived nor counted."""
        result = resolve({"E": 210e9, "nu": 0.3, "rho": 7850})
        assert result.parameters.rho == 7850

        result = resolve({"E": 210e9, "rho": 7850})
        assert result.warnings == [INSUFFICIENT_WARNING]

    def test_shear_alias(self):
        """G is used as μ."""
        result = resolve({"lambda": 1e9, "G": 1e9})
        assert result.parameters.mu == 1e9
        assert_allclose(result.parameters.E, 2.5e9)

    def test_input_not_modified(self):
        params = MaterialParameters(E=210e9, nu=0.3)
        result = resolve(params)
        assert params.mu is None
        assert result.parameters is not params


class TestBranches:
    """Every source pair resolves the other three constants."""

    @pytest.mark.parametrize("pair", PRECEDENCE)
    def test_resolves_steel(self, pair):
        result = resolve(_subset(STEEL, pair))
        assert result.warnings == []
        assert len(result.derivations) == 3
        _assert_matches(result.parameters, STEEL, rtol=1e-9)

    @pytest.mark.parametrize("pair", PRECEDENCE)
    def test_resolves_auxetic(self, pair):
        result = resolve(_subset(AUXETIC, pair))
        assert result.warnings == []
        _assert_matches(result.parameters, AUXETIC, rtol=1e-9)

    @pytest.mark.parametrize("pair", PRECEDENCE)
    def test_round_trip(self, pair):
        """Any two derived constants give back the original inputs."""
        first = resolve(_subset(STEEL, pair)).parameters
        derived = [name for name in ELASTIC_FIELDS if name not in pair]
        for names in combinations(derived, 2):
            second = resolve(_subset(first, names)).parameters
            for name in pair:
                assert_allclose(second.get(name), STEEL.get(name), rtol=1e-6)

    @pytest.mark.parametrize("pair", PRECEDENCE)
    def test_self_consistent(self, pair):
        """Resolver output passes the consistency check."""
        result = resolve(_subset(STEEL, pair))
        assert check_consistency(result.parameters) == []


class TestPrecedence:
    """Fixed ordering of the source pairs."""

    def test_branch_order(self):
        assert [branch.sources for branch in BRANCHES] == PRECEDENCE

    def test_first_match_wins(self):
        """Over-specified input: (λ, μ) is used, the given E is kept."""
        result = resolve({"lambda": 1e9, "mu": 1e9, "E": 10e9})
        p = result.parameters
        assert p.E == 10e9
        assert_allclose(p.nu, 0.25)
        assert_allclose(p.K, 1e9 + 2e9 / 3)
        assert result.derivations == ["ν = λ / (2(λ + μ))", "K = λ + (2/3)μ"]

    def test_E_nu_before_mu_nu(self):
        """μ supplied alongside (E, ν) is never re-derived."""
        result = resolve({"E": 210e9, "nu": 0.3, "mu": 70e9})
        assert result.parameters.mu == 70e9
        assert result.derivations == [
            "λ = Eν / ((1 + ν)(1 - 2ν))",
            "K = E / (3(1 - 2ν))",
        ]

    def test_select_branch(self):
        assert select_branch(MaterialParameters(K=1.0, E=2.0, nu=0.1)).sources == ("E", "nu")
        assert select_branch(MaterialParameters(lam=1.0, E=2.0)).sources == ("lam", "E")
        assert select_branch(MaterialParameters(E=2.0)) is None

    def test_fully_specified(self):
        """Nothing left to derive."""
        result = resolve(STEEL)
        assert result.derivations == []
        assert result.warnings == []
        assert result.parameters == STEEL


class TestLambdaEBranch:
    """The quadratic branch."""

    def test_trace(self):
        result = resolve({"lambda": 120e9, "E": 208e9})
        assert result.derivations == [
            QUADRATIC_FORMULA,
            "ν = λ / (2(λ + μ))",
            "K = λ + (2/3)μ",
        ]
        assert_allclose(result.parameters.mu, 80e9, rtol=1e-12)

    def test_two_positive_roots(self):
        """Negative λ: the larger root is the physical one."""
        roots = solve_mu_from_lam_E(AUXETIC.lam, AUXETIC.E)
        assert roots.mu_plus > 0 and roots.mu_minus > 0
        assert_allclose(roots.selected, 1e9, rtol=1e-10)

        result = resolve({"lambda": AUXETIC.lam, "E": AUXETIC.E})
        assert_allclose(result.parameters.nu, -0.2, rtol=1e-9)

    def test_no_positive_root(self):
        """Negative E: μ is set to a negative root, ν and K stay unset."""
        result = resolve({"lambda": 1e9, "E": -1e9})
        p = result.parameters
        assert p.mu < 0
        assert p.nu is None and p.K is None
        assert result.derivations == [QUADRATIC_FORMULA]
        assert result.warnings == [NO_POSITIVE_ROOT_WARNING]

    def test_near_incompressible_round_trip(self):
        """(μ, ν) with ν just below 0.5, then back through (λ, E)."""
        first = resolve({"mu": 1e9, "nu": 0.5 - 1e-12}).parameters
        second = resolve({"lambda": first.lam, "E": first.E})
        assert second.warnings == []
        assert_allclose(second.parameters.mu, 1e9, rtol=1e-9)
        assert_allclose(second.parameters.nu, first.nu, rtol=1e-12)
        assert_allclose(second.parameters.K, first.K, rtol=1e-9)

    def test_large_magnitudes(self):
        result = resolve({"lambda": 120e200, "E": 208e200})
        assert result.warnings == []
        assert_allclose(result.parameters.mu, 80e200, rtol=1e-12)
        assert_allclose(result.parameters.nu, 0.3, rtol=1e-12)

    def test_non_finite_input(self):
        """An infinite λ never becomes an infinite μ."""
        result = resolve({"lambda": float("inf"), "E": 1e9})
        assert result.parameters.mu is None
        assert result.derivations == []
        assert result.warnings == [
            "No real solution for μ from λ and E (non-finite input)"
        ]

    def test_no_real_solution(self, monkeypatch):
        """A negative discriminant becomes a warning with μ unset."""
        def no_solution(lam, E):
            raise NoRealSolutionError(
                "No real solution for μ from λ and E (negative discriminant)"
            )

        monkeypatch.setattr(resolver, "solve_mu_from_lam_E", no_solution)
        result = resolve({"lambda": 1e9, "E": 1e9})
        assert result.parameters.mu is None
        assert result.derivations == []
        assert result.warnings == [
            "No real solution for μ from λ and E (negative discriminant)"
        ]


class TestFailures:
    """Computation failures become warnings."""

    def test_division_by_zero(self):
        """λ + μ = 0."""
        result = resolve({"lambda": -1e9, "mu": 1e9})
        assert result.derivations == []
        assert result.parameters.E is None
        assert result.warnings == ["Calculation error: Division by zero: λ + μ ≈ 0"]

    def test_partial_resolution_kept(self):
        """E = 3μ: ν is derived, then K fails and λ is never attempted."""
        result = resolve({"E": 3e9, "mu": 1e9})
        p = result.parameters
        assert_allclose(p.nu, 0.5)
        assert p.K is None
        assert p.lam is None
        assert result.derivations == ["ν = E/(2μ) - 1"]
        assert result.warnings == ["Calculation error: Division by zero: 3(3μ - E) ≈ 0"]

    @pytest.mark.parametrize("raw", [
        {"young": 210e9, "nu": 0.3},
        {"E": "stiff", "nu": 0.3},
        {"E": True, "nu": 0.3},
    ])
    def test_malformed_mapping(self, raw):
        """Only non-numeric input raises; it is rejected before any check runs."""
        for func in (resolve, validate, check_consistency):
            with pytest.raises(ValueError):
                func(raw)
