"""
Contract Validation Module

JSON Schema контракт вывода matrix-echelon.
"""

from .validators import (
    ELIMINATION_RESULT_SCHEMA,
    load_validator,
    validate_elimination_result,
)

__all__ = [
    "ELIMINATION_RESULT_SCHEMA",
    "load_validator",
    "validate_elimination_result",
]
