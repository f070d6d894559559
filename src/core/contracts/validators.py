"""
JSON Schema Contract для результата элиминации

Схема src/core/contracts/schema/elimination_result.json описывает JSON,
который shell выводит в режиме --json. Проверка выполняется перед
сериализацией, чтобы вывод всегда соответствовал контракту.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

ELIMINATION_RESULT_SCHEMA = "elimination_result"


@lru_cache(maxsize=None)
def load_validator(schema_name: str) -> Draft202012Validator:
    """
    Загрузка схемы из SCHEMA_DIR и построение validator (с кэшированием).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не соответствует Draft 2020-12
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return Draft202012Validator(schema)


def validate_elimination_result(data: Dict[str, Any]) -> None:
    """
    Проверка EliminationResult.model_dump() против elimination_result.json.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    load_validator(ELIMINATION_RESULT_SCHEMA).validate(data)
