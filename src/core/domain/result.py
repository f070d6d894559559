"""
EliminationResult — результат обработки одного блока ввода

Immutable Pydantic модель. Совместима с JSON Schema
(src/core/contracts/schema/elimination_result.json).
"""

from typing import List

from pydantic import BaseModel, Field

from src.core.domain.grid import Dimensions


class EliminationResult(BaseModel):
    """
    Снапшот матрицы после элиминации.

    matrix содержит ступенчатую форму; text содержит ту же матрицу в нотации ввода.
    NaN/Inf допустимы в matrix и учитываются в non_finite_cells.
    """

    dimensions: Dimensions = Field(..., description="Размеры матрицы")
    matrix: List[List[float]] = Field(
        ..., min_length=1, description="Матрица в ступенчатом виде (row-major)"
    )
    text: str = Field(..., description="Матрица в текстовой нотации")
    non_finite_cells: int = Field(
        default=0, ge=0, description="Количество ячеек NaN/Inf"
    )

    model_config = {"frozen": True}

    @property
    def is_finite(self) -> bool:
        return self.non_finite_cells == 0
