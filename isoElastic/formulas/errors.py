"""
Failure types raised by the formula library.

Both are ValueError subclasses: they signal inputs for which a closed-form
identity has no finite answer. The resolver and the consistency checker
catch them and turn them into warnings.
"""


class ElasticityError(ValueError):
    """Base class for elastic-constant conversion failures."""


class DivisionByZeroError(ElasticityError):
    """A formula denominator is within EPSILON of zero."""


class NoRealSolutionError(ElasticityError):
    """The (λ, E) -> μ quadratic has a negative discriminant."""
