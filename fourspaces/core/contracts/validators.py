"""
JSON Schema Contract Validators

Модуль для валидации JSON данных на границе движка согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (fourspaces/core/contracts/schema/):
- compute_request.json    — вход: {"matrix": [[cell, ...], ...]}
- computation_result.json — выход: rank, RREF, dimension check, подпространства
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета, в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'computation_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ComputeRequestValidator(ContractValidator):
    """Валидатор входного запроса {"matrix": [[...], ...]}."""

    def __init__(self):
        super().__init__("compute_request")


class ComputationResultValidator(ContractValidator):
    """Валидатор выходного payload ComputationResult."""

    def __init__(self):
        super().__init__("computation_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_compute_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если запрос не соответствует схеме
    """
    ComputeRequestValidator().validate(data)


def validate_computation_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если результат не соответствует схеме
    """
    ComputationResultValidator().validate(data)


__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "ComputeRequestValidator",
    "ComputationResultValidator",
    "validate_compute_request",
    "validate_computation_result",
]
