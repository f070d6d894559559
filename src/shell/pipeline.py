"""
Pipeline — Parser → Validator → Engine → Formatter

Один вызов обрабатывает один текстовый блок от начала до конца. Матрица
создаётся заново на каждый вызов и не переживает его.

Ошибки Parser/Validator (MatrixInputError) пробрасываются вызывающему без
частичного результата.
"""

import json
from typing import Optional

from loguru import logger

from src.core.contracts import validate_elimination_result
from src.core.domain import EliminationResult, validate_grid
from src.core.math import count_non_finite, eliminate, subdiagonal_residual
from src.core.notation import NotationConfig, format_grid, parse_grid


def run_pipeline(
    text: str,
    config: NotationConfig = NotationConfig(),
    precision: Optional[int] = None,
) -> EliminationResult:
    """
    Приведение матрицы из текстового блока к ступенчатому виду.

    Args:
        text: Текстовый блок в нотации ввода
        config: Разделители нотации
        precision: Округление ячеек в text результата (None: точный repr)

    Returns:
        EliminationResult

    Raises:
        ParseError, EmptyGridError, RaggedGridError
    """
    grid = parse_grid(text, config)
    dimensions = validate_grid(grid)
    logger.debug("Parsed {}x{} grid", dimensions.height, dimensions.width)

    eliminate(grid)
    logger.debug("Eliminated, subdiagonal residual={}", subdiagonal_residual(grid))

    non_finite = count_non_finite(grid)
    if non_finite:
        logger.warning("Result contains {} non-finite cell(s)", non_finite)

    return EliminationResult(
        dimensions=dimensions,
        matrix=grid,
        text=format_grid(grid, config, precision),
        non_finite_cells=non_finite,
    )


def result_to_json(result: EliminationResult) -> str:
    """
    Сериализация результата в JSON с проверкой контракта elimination_result.

    NaN/Inf выводятся как NaN/Infinity (расширение json модуля).

    Raises:
        ValidationError: если результат не соответствует схеме
    """
    data = result.model_dump()
    validate_elimination_result(data)
    return json.dumps(data, indent=2)
