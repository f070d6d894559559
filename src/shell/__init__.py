"""Shell — интерактивная оболочка над pipeline элиминации.

- reader: чтение блоков до sentinel-символа
- pipeline: Parser → Validator → Engine → Formatter
- repl: цикл read-eval-print с цветным выводом (rich)
- cli: командная строка (typer)
"""

from .config import OutputFormat, ShellConfig
from .pipeline import result_to_json, run_pipeline
from .reader import iter_blocks, read_block
from .repl import MatrixShell

__all__ = [
    "OutputFormat",
    "ShellConfig",
    "run_pipeline",
    "result_to_json",
    "read_block",
    "iter_blocks",
    "MatrixShell",
]
