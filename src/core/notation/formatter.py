"""
Formatter — Grid → текст

Обратная операция к parse_grid: ячейки через один пробел, строки через
output_row_separator (",\\n"), в конце терминатор (";").

По умолчанию ячейки выводятся через repr(float), поэтому повторный парсинг
восстанавливает матрицу точно. precision включает округление для вывода.
"""

from typing import Optional

from src.core.domain.grid import Grid
from src.core.notation.config import NotationConfig


def format_cell(value: float, precision: Optional[int] = None) -> str:
    """
    Текстовое представление одной ячейки.

    Examples:
        >>> format_cell(0.1 + 0.2)
        '0.30000000000000004'
        >>> format_cell(0.1 + 0.2, precision=3)
        '0.3'
        >>> format_cell(-1e-17, precision=3)
        '0.0'
    """
    if precision is None:
        return repr(float(value))

    rounded = round(float(value), precision)
    # -0.0 после округления выводим как 0.0
    if rounded == 0:
        rounded = 0.0
    return repr(rounded)


def format_grid(
    grid: Grid,
    config: NotationConfig = NotationConfig(),
    precision: Optional[int] = None,
) -> str:
    """
    Форматирование матрицы в текстовую нотацию ввода.

    Args:
        grid: Матрица
        config: Разделители нотации
        precision: Количество знаков после запятой (None: точный repr)

    Returns:
        Текст вида "1.0 0.0,\\n0.0 1.0;"
    """
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    rows = [" ".join(format_cell(value, precision) for value in row) for row in grid]
    return config.output_row_separator.join(rows) + config.terminator
