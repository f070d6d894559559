"""
Domain models and value objects.

Contains the matrix grid type, its validated dimensions, the pipeline result
model and the classified input errors.
"""

from src.core.domain.errors import (
    EmptyGridError,
    MatrixInputError,
    ParseError,
    RaggedGridError,
)
from src.core.domain.grid import Dimensions, Grid, validate_grid
from src.core.domain.result import EliminationResult

__all__ = [
    # Errors
    "MatrixInputError",
    "ParseError",
    "EmptyGridError",
    "RaggedGridError",
    # Grid
    "Grid",
    "Dimensions",
    "validate_grid",
    # Result
    "EliminationResult",
]
