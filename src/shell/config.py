"""Конфигурация интерактивного shell."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.core.notation import NotationConfig


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class OutputFormat(str, Enum):
    """Формат вывода результата."""
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class ShellConfig:
    """Конфигурация shell.

    - notation: разделители; notation.terminator служит sentinel-символом блока
    - output_format: TEXT (нотация ввода) или JSON (контракт elimination_result)
    - precision: округление ячеек при выводе (None: точный repr)
    - show_banner: приветствие с примером при старте
    - log_level: уровень loguru sink (stderr)
    """
    notation: NotationConfig = field(default_factory=NotationConfig)
    output_format: OutputFormat = OutputFormat.TEXT
    precision: Optional[int] = None
    show_banner: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.notation.terminator:
            raise ValueError("shell requires a non-empty terminator to delimit input blocks")
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @property
    def sentinel(self) -> str:
        return self.notation.terminator
