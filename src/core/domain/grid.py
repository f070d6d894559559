"""
Grid — прямоугольная матрица float и её размеры

Grid — это list[list[float]] (row-major). Парсер может вернуть строки
разной длины; validate_grid подтверждает прямоугольность и возвращает
immutable Dimensions.

ИНВАРИАНТЫ ПОСЛЕ ВАЛИДАЦИИ:
1. height >= 1 и width >= 1
2. len(row) == width для каждой строки
"""

from typing import List

from pydantic import BaseModel, Field

from src.core.domain.errors import EmptyGridError, RaggedGridError

Grid = List[List[float]]


class Dimensions(BaseModel):
    """Размеры валидированной матрицы (width × height)."""

    width: int = Field(..., ge=1, description="Количество столбцов")
    height: int = Field(..., ge=1, description="Количество строк")

    model_config = {"frozen": True}


def validate_grid(grid: Grid) -> Dimensions:
    """
    Проверка, что матрица непустая и прямоугольная.

    Чистая функция: grid не изменяется.

    Args:
        grid: Результат парсинга (строки могут быть разной длины)

    Returns:
        Dimensions(width, height)

    Raises:
        EmptyGridError: если нет строк или первая строка пустая
        RaggedGridError: если длина какой-либо строки отличается от первой

    Examples:
        >>> validate_grid([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        Dimensions(width=2, height=3)
    """
    if len(grid) == 0:
        raise EmptyGridError("Grid must have at least 1 row")

    width = len(grid[0])
    if width == 0:
        raise EmptyGridError("Grid must have at least 1 column")

    for y in range(1, len(grid)):
        if len(grid[y]) != width:
            raise RaggedGridError(row=y, expected_width=width, actual_width=len(grid[y]))

    return Dimensions(width=width, height=len(grid))
