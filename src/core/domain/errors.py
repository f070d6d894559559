"""
Input Errors — классифицированные ошибки входной матрицы

Иерархия исключений, которые прерывают обработку одного блока ввода:
- ParseError: ячейка не является числом
- EmptyGridError: нет строк (или нет столбцов)
- RaggedGridError: строки разной длины

Все ошибки наследуются от MatrixInputError (подкласс ValueError), поэтому
shell может перехватить их одним except и продолжить цикл.
Elimination Engine и Formatter ошибок не выбрасывают.
"""


class MatrixInputError(ValueError):
    """Базовый класс ошибок входной матрицы (не фатальны для процесса)."""

    pass


class ParseError(MatrixInputError):
    """
    Ячейку не удалось преобразовать в float.

    Attributes:
        text: Исходный текст ячейки (после trim)
        row: Индекс строки (с нуля)
        column: Индекс столбца (с нуля)
    """

    def __init__(self, text: str, row: int, column: int):
        self.text = text
        self.row = row
        self.column = column
        super().__init__(
            f"Unable to convert value '{text}' of cell at row {row}, "
            f"column {column} to number"
        )


class EmptyGridError(MatrixInputError):
    """Матрица без строк или без столбцов."""

    pass


class RaggedGridError(MatrixInputError):
    """
    Матрица не прямоугольная.

    Attributes:
        row: Индекс первой строки, длина которой отличается от первой строки
        expected_width: Ширина первой строки
        actual_width: Ширина строки row
    """

    def __init__(self, row: int, expected_width: int, actual_width: int):
        self.row = row
        self.expected_width = expected_width
        self.actual_width = actual_width
        super().__init__(
            f"Grid must be rectangular: row {row} has {actual_width} cells, "
            f"expected {expected_width}"
        )
