"""
Numerical Safeguards — Float Primitives

Модуль содержит epsilon-параметр и проверки float, используемые при
верификации результата элиминации:
- NaN/Inf детекция
- Epsilon-проверка нуля

ВАЖНО: Elimination Engine НЕ санитизирует NaN/Inf, они пропагируют в
результат. Функции этого модуля только диагностируют, но не подменяют значения.
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для проверки "элемент ниже диагонали равен нулю"
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    NaN никогда не считается нулём.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol

    Raises:
        ValueError: если tol < 0
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    return abs(value) <= tol
