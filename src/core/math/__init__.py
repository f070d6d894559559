"""
Core math modules для matrix-echelon

Численные алгоритмы над матрицей float и проверки float.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_valid_float,
    is_zero,
)

# Elimination Engine
from src.core.math.elimination import (
    count_non_finite,
    eliminate,
    is_row_echelon,
    pivot_index,
    subdiagonal_residual,
    swap_rows,
)

__all__ = [
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "is_valid_float",
    "is_zero",
    # Elimination — Row operations
    "pivot_index",
    "swap_rows",
    # Elimination — Algorithm
    "eliminate",
    # Elimination — Diagnostics
    "count_non_finite",
    "is_row_echelon",
    "subdiagonal_residual",
]
