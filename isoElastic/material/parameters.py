"""
Material parameter records for isotropic linear elasticity.

An isotropic linear-elastic material is fully described by any two
independent elastic constants. The record below carries the five
constants used throughout the package plus the density:

    lam  - Lamé's first parameter λ (Pa)
    mu   - shear modulus μ, also written G (Pa)
    E    - Young's modulus (Pa)
    K    - bulk modulus (Pa)
    nu   - Poisson's ratio ν (dimensionless)
    rho  - density ρ (kg/m³), carried along but never derived

All moduli are in pascals. Unit conversion happens outside the package.

Design notes:
    - The record is immutable. Resolution builds new records with
      with_values() instead of mutating the input.
    - `lambda` is a Python keyword, so the attribute is called `lam`.
      Mappings may use "lambda", "lam" or "λ".
    - "G" is accepted as an alias of the shear modulus when "mu" is absent.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Mapping, Optional, Tuple


# Elastic fields in canonical order (rho is not an elastic constant)
ELASTIC_FIELDS: Tuple[str, ...] = ("lam", "mu", "E", "K", "nu")
ALL_FIELDS: Tuple[str, ...] = ELASTIC_FIELDS + ("rho",)

# Attribute name -> external key
FIELD_KEYS: Dict[str, str] = {
    "lam": "lambda",
    "mu": "mu",
    "E": "E",
    "K": "K",
    "nu": "nu",
    "rho": "rho",
}

# Accepted input keys -> attribute name
KEY_ALIASES: Dict[str, str] = {
    "lambda": "lam",
    "lam": "lam",
    "λ": "lam",
    "mu": "mu",
    "μ": "mu",
    "E": "E",
    "K": "K",
    "nu": "nu",
    "ν": "nu",
    "rho": "rho",
    "ρ": "rho",
}

SHEAR_ALIAS = "G"

SYMBOLS: Dict[str, str] = {
    "lam": "λ",
    "mu": "μ",
    "E": "E",
    "K": "K",
    "nu": "ν",
    "rho": "ρ",
}


@dataclass(frozen=True)
class MaterialParameters:
    """
    Partial or complete set of isotropic elastic constants.

    Attributes:
        lam: Lamé's first parameter λ (Pa), may be negative
        mu: Shear modulus μ = G (Pa)
        E: Young's modulus (Pa)
        K: Bulk modulus (Pa)
        nu: Poisson's ratio (dimensionless)
        rho: Density (kg/m³), passed through untouched

    Unset fields are None.
    """
    lam: Optional[float] = None
    mu: Optional[float] = None
    E: Optional[float] = None
    K: Optional[float] = None
    nu: Optional[float] = None
    rho: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Optional[float]]) -> "MaterialParameters":
        """
        Build a record from a mapping of parameter values.

        Keys may be canonical ("lambda", "mu", ...), attribute names
        ("lam") or Greek symbols. A "G" entry is used as the shear
        modulus when no "mu" is given. None values are treated as unset.

        Parameters:
            data: Mapping of parameter name -> value

        Returns:
            New MaterialParameters

        Raises:
            ValueError: For unknown keys or non-numeric values
        """
        values = {}
        shear_alias = None
        for key, value in data.items():
            if key == SHEAR_ALIAS:
                shear_alias = value
                continue
            if key not in KEY_ALIASES:
                raise ValueError(f"Unknown material parameter: {key!r}")
            attr = KEY_ALIASES[key]
            if value is not None:
                values[attr] = _as_float(key, value)

        if "mu" not in values and shear_alias is not None:
            values["mu"] = _as_float(SHEAR_ALIAS, shear_alias)

        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        """Set fields only, keyed by canonical name ("lambda", "mu", ...)."""
        return {FIELD_KEYS[f.name]: getattr(self, f.name)
                for f in fields(self) if getattr(self, f.name) is not None}

    def with_values(self, **values: float) -> "MaterialParameters":
        """Return a copy with the given fields set."""
        return replace(self, **values)

    def get(self, name: str) -> Optional[float]:
        """Value of a field by attribute name."""
        return getattr(self, name)

    def has(self, name: str) -> bool:
        """True if the field is set."""
        return getattr(self, name) is not None

    @property
    def provided_elastic(self) -> Tuple[str, ...]:
        """Names of the elastic fields that are set, in canonical order."""
        return tuple(name for name in ELASTIC_FIELDS if self.has(name))

    @property
    def n_elastic(self) -> int:
        """Number of elastic fields that are set."""
        return len(self.provided_elastic)

    @property
    def is_complete(self) -> bool:
        """True if all five elastic constants are known."""
        return self.n_elastic == len(ELASTIC_FIELDS)


@dataclass(frozen=True)
class ValidationError:
    """
    A single bounds-validation finding.

    Attributes:
        field: Canonical parameter name ("lambda", "mu", "E", "K", "nu", "rho")
        message: Human-readable description
        suggestion: Optional remediation hint
        severity: "error" for a hard violation, "warning" for an advisory
    """
    field: str
    message: str
    suggestion: Optional[str] = None
    severity: str = "error"

    @property
    def is_blocking(self) -> bool:
        """Hard violations block resolution."""
        return self.severity == "error"


def coerce_parameters(params) -> MaterialParameters:
    """Accept a MaterialParameters or a plain mapping."""
    if isinstance(params, MaterialParameters):
        return params
    return MaterialParameters.from_dict(params)


def _as_float(key: str, value) -> float:
    # bool is an int subclass but never a meaningful modulus
    if isinstance(value, bool):
        raise ValueError(f"Parameter {key!r} must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Parameter {key!r} must be numeric, got {value!r}") from None
