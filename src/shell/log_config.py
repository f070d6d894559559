import sys
from typing import Any

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def configure_logging(level: str = "WARNING", sink: Any = None) -> None:
    """
    Настройка глобального loguru logger.

    Удаляет все sink'и (включая дефолтный) и добавляет один, по умолчанию
    stderr, чтобы лог не смешивался с результатом в stdout.
    """
    logger.remove()
    logger.add(
        sink=sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        backtrace=True,
        diagnose=False,
    )
    logger.debug("Logger configured at level {}", level.upper())
