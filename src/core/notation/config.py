"""Конфигурация текстовой нотации матрицы."""

from dataclasses import dataclass

# Символы, которые float() принимает внутри числового литерала
# (включая "nan", "inf", "infinity" в любом регистре)
NUMERIC_LITERAL_CHARS = frozenset("0123456789+-._eEnNaAiIfFtTyY")


def _is_cell_char(char: str) -> bool:
    return char.isspace() or char in NUMERIC_LITERAL_CHARS


@dataclass(frozen=True)
class NotationConfig:
    """Разделители текстовой нотации матрицы.

    Формат по умолчанию:
        1 0 4 2,
        1 2 6 2;

    - row_separator: разделитель строк при парсинге
    - output_row_separator: разделитель строк при форматировании
    - terminator: завершающий символ блока ("" означает без терминатора)

    Ячейки внутри строки всегда разделяются пробельными символами, поэтому
    разделители не могут быть пробельными или входить в числовой литерал.
    """
    row_separator: str = ","
    output_row_separator: str = ",\n"
    terminator: str = ";"

    def __post_init__(self) -> None:
        if not self.row_separator or self.row_separator.isspace():
            raise ValueError(
                f"row_separator must be a non-whitespace string, got {self.row_separator!r}"
            )
        if any(_is_cell_char(char) for char in self.row_separator):
            raise ValueError(
                f"row_separator must not contain whitespace or numeric literal "
                f"characters, got {self.row_separator!r}"
            )
        if self.row_separator not in self.output_row_separator:
            raise ValueError(
                f"output_row_separator {self.output_row_separator!r} must contain "
                f"row_separator {self.row_separator!r}"
            )
        if len(self.terminator) > 1:
            raise ValueError(f"terminator must be at most 1 character, got {self.terminator!r}")
        if self.terminator and _is_cell_char(self.terminator):
            raise ValueError(
                f"terminator must not be whitespace or part of a numeric literal, "
                f"got {self.terminator!r}"
            )
        if self.terminator and self.terminator in self.row_separator:
            raise ValueError("terminator must differ from row_separator")
