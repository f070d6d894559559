"""
Текстовая нотация матрицы: парсинг и форматирование.

    1 0 4 2,
    1 2 6 2,
    2 0 8 8;
"""

from .config import NotationConfig
from .formatter import format_cell, format_grid
from .parser import parse_cell, parse_grid

__all__ = [
    "NotationConfig",
    "parse_cell",
    "parse_grid",
    "format_cell",
    "format_grid",
]
