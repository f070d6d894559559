"""
MatrixShell — интерактивный цикл read-eval-print

Цикл:
1. Чтение блока до sentinel (";")
2. run_pipeline
3. Вывод результата (cyan) или ошибки (red)
4. Ожидание следующего блока; EOF завершает цикл

Классифицированные ошибки ввода (MatrixInputError) не фатальны:
сообщение выводится, цикл продолжается. Любое другое исключение считается багом:
логируется с traceback и пробрасывается.
"""

import sys
from typing import Optional, TextIO

from loguru import logger
from rich.console import Console
from rich.text import Text

from src.core.domain import EliminationResult, MatrixInputError
from src.shell.config import OutputFormat, ShellConfig
from src.shell.pipeline import result_to_json, run_pipeline
from src.shell.reader import iter_blocks

COLOR_HIGHLIGHT = "cyan"
COLOR_ALERT = "red"

EXAMPLE_MATRIX = "1 0 4 2,\n1 2 6 2,\n2 0 8 8,\n2 1 9 4;"


class MatrixShell:
    """REPL над run_pipeline."""

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        console: Optional[Console] = None,
    ):
        self.config = config or ShellConfig()
        self.console = console or Console(highlight=False)

    def banner(self) -> None:
        self.console.print(
            "Hi, user!\n"
            "Enter matrix like this to invoke the algorithm:\n"
            f"{EXAMPLE_MATRIX}\n",
            style=COLOR_HIGHLIGHT,
            markup=False,
        )

    def render(self, result: EliminationResult) -> str:
        if self.config.output_format == OutputFormat.JSON:
            return result_to_json(result)
        return result.text

    def submit(self, block: str) -> bool:
        """
        Обработка одного блока.

        Returns:
            True если матрица обработана, False если ввод отклонён
        """
        try:
            result = run_pipeline(block, self.config.notation, self.config.precision)
        except MatrixInputError as e:
            logger.info("Input rejected: {}", e)
            self.console.print(
                Text.assemble(
                    ("\nAttempt eliminated with reason:", COLOR_HIGHLIGHT),
                    (f" {e}\n", COLOR_ALERT),
                ),
                soft_wrap=True,
            )
            return False
        except Exception:
            logger.exception("Unexpected failure while processing block")
            raise

        self.console.print(
            f"\nResult is:\n{self.render(result)}\n",
            style=COLOR_HIGHLIGHT,
            markup=False,
            soft_wrap=True,
        )
        return True

    def run(self, stream: Optional[TextIO] = None) -> int:
        """
        Запуск цикла до EOF.

        Returns:
            Количество успешно обработанных блоков
        """
        stream = stream if stream is not None else sys.stdin
        if self.config.show_banner:
            self.banner()

        processed = 0
        for block in iter_blocks(stream, self.config.sentinel):
            if self.submit(block):
                processed += 1

        logger.debug("Input exhausted after {} successful block(s)", processed)
        return processed
