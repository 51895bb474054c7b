"""
Material records: elastic constants and validation findings.
"""

from .parameters import (
    MaterialParameters,
    ValidationError,
    ELASTIC_FIELDS,
    ALL_FIELDS,
    FIELD_KEYS,
    SYMBOLS,
)
