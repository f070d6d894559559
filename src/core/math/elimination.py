"""
Elimination Engine — Gaussian Elimination с частичным выбором ведущего элемента

Модуль приводит прямоугольную матрицу float к ступенчатому виду (row-echelon
form) на месте (in place).

АЛГОРИТМ (для каждого диагонального индекса i от 0 до min(H, W) - 1):
    1. pivot = pivot_index(grid, column=i, start_row=i)
    2. swap_rows(grid, i, pivot)   (обмен строк целиком)
    3. если grid[i][i] == 0 → шаг пропускается
    4. для y > i: factor = grid[y][i] / grid[i][i]
                  grid[y][x] -= grid[i][x] * factor  для всех x

ПРАВИЛО ВЫБОРА PIVOT:
    Выбирается строка с НАИМЕНЬШИМ НЕНУЛЕВЫМ модулем в столбце i (а не
    наибольшим, как в классическом partial pivoting). Это правило фиксировано
    и влияет на численный результат: заменять его на largest-magnitude нельзя.
    Нулевой диагональный элемент уступает первой ненулевой строке ниже.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размеры матрицы не меняются
2. Деление только на ненулевой pivot (шаг 3)
3. NaN/Inf не перехватываются и пропагируют в результат
4. Алгоритм тотальный: исключений не выбрасывает
"""

import math

from src.core.domain.grid import Grid
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_valid_float,
    is_zero,
)


# =============================================================================
# ROW OPERATIONS
# =============================================================================


def swap_rows(grid: Grid, y1: int, y2: int) -> None:
    """
    Обмен двух строк матрицы целиком (все W столбцов).

    Обмен выполняется по ссылке на строку; при y1 == y2 ничего не делает.
    """
    if y1 == y2:
        return
    grid[y1], grid[y2] = grid[y2], grid[y1]


def pivot_index(grid: Grid, column: int, start_row: int) -> int:
    """
    Поиск строки pivot: наименьший ненулевой модуль в столбце.

    Кандидат по умолчанию: start_row. Если его значение равно 0, он уступает
    первой строке ниже с ненулевым значением; дальше строка выбирается только
    при строго меньшем модуле (first-smaller-wins). Точные нули ниже start_row
    никогда не выбираются, поэтому start_row остаётся pivot только когда весь
    под-столбец нулевой или его модуль уже наименьший.

    Args:
        grid: Матрица
        column: Столбец поиска
        start_row: Первая строка поиска (диагональный индекс)

    Returns:
        Индекс строки pivot (>= start_row)

    Examples:
        >>> pivot_index([[0.0], [5.0], [2.0], [0.0], [3.0]], column=0, start_row=0)
        2
        >>> pivot_index([[4.0], [0.0], [4.0]], column=0, start_row=0)
        0
    """
    min_index = start_row
    min_value = abs(grid[start_row][column])

    for index in range(start_row + 1, len(grid)):
        value = abs(grid[index][column])
        # Дефолтный ноль в start_row обязан уступить любому ненулевому значению
        if value != 0 and (value < min_value or min_value == 0):
            min_index = index
            min_value = value

    return min_index


# =============================================================================
# ELIMINATION
# =============================================================================


def eliminate(grid: Grid) -> None:
    """
    Приведение матрицы к ступенчатому виду на месте.

    Матрица должна быть прямоугольной (см. validate_grid).

    Args:
        grid: Прямоугольная матрица float (изменяется на месте)
    """
    height = len(grid)
    width = len(grid[0]) if height else 0

    for i in range(min(height, width)):
        swap_rows(grid, i, pivot_index(grid, column=i, start_row=i))

        target = grid[i][i]
        if target == 0:
            # Столбец не может быть исключён доступными строками
            continue

        pivot_row = grid[i]
        for y in range(i + 1, height):
            row = grid[y]
            factor = row[i] / target
            for x in range(width):
                row[x] -= pivot_row[x] * factor


# =============================================================================
# ДИАГНОСТИКА РЕЗУЛЬТАТА
# =============================================================================


def subdiagonal_residual(grid: Grid) -> float:
    """
    Наибольший модуль элемента строго ниже главной диагонали.

    Returns:
        max |grid[y][x]| для x < y (0.0 если таких элементов нет);
        nan если среди них есть NaN
    """
    residual = 0.0
    for y, row in enumerate(grid):
        for x in range(min(y, len(row))):
            value = abs(row[x])
            if math.isnan(value):
                return math.nan
            residual = max(residual, value)
    return residual


def is_row_echelon(grid: Grid, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, что все элементы ниже главной диагонали равны нулю в пределах tol.

    Args:
        grid: Матрица
        tol: Абсолютная толерантность

    Returns:
        True если матрица в ступенчатом виде (по диагональному критерию)
    """
    for y, row in enumerate(grid):
        for x in range(min(y, len(row))):
            if not is_zero(row[x], tol):
                return False
    return True


def count_non_finite(grid: Grid) -> int:
    """Количество ячеек NaN/Inf."""
    return sum(1 for row in grid for value in row if not is_valid_float(value))
