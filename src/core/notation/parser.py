"""
Parser — текст → Grid

Нотация: строки разделены row_separator (","), ячейки разделены одним или
несколькими пробельными символами. Завершающий терминатор (";") допускается
и отбрасывается.

Прямоугольность НЕ проверяется (см. validate_grid).
"""

from src.core.domain.errors import ParseError
from src.core.domain.grid import Grid
from src.core.notation.config import NotationConfig


def parse_cell(text: str, row: int, column: int) -> float:
    """
    Преобразование текста одной ячейки в float.

    Raises:
        ParseError: если text не является числовым литералом
    """
    value = text.strip()
    # float() допускает "_" между цифрами ("1_000"), нотация нет
    if "_" in value:
        raise ParseError(value, row=row, column=column)
    try:
        return float(value)
    except ValueError:
        raise ParseError(value, row=row, column=column) from None


def parse_grid(text: str, config: NotationConfig = NotationConfig()) -> Grid:
    """
    Парсинг текстового блока в матрицу float.

    Args:
        text: Текстовый блок (терминатор опционален)
        config: Разделители нотации

    Returns:
        Список строк float; строки могут быть разной длины.
        Пустой текст → [] (отклоняется валидатором)

    Raises:
        ParseError: с текстом, строкой и столбцом первой невалидной ячейки

    Examples:
        >>> parse_grid("1 0,\\n0 1;")
        [[1.0, 0.0], [0.0, 1.0]]
    """
    body = text.strip()
    if config.terminator and body.endswith(config.terminator):
        body = body[: -len(config.terminator)]

    if not body.strip():
        return []

    return [
        [parse_cell(cell, row=y, column=x) for x, cell in enumerate(row_text.split())]
        for y, row_text in enumerate(body.split(config.row_separator))
    ]
