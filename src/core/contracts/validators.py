"""
JSON Schema Contract Validators

Модуль для валидации JSON представления checked-значений согласно
формальному JSON Schema контракту (схемы лежат в contracts/schema/ пакета).
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- checked_int.json: {kind, value, error} с диапазоном value по kind
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.checked_int import CheckedInt
from src.core.domain.snapshot import CheckedIntSnapshot, restore

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'checked_int')

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
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class CheckedIntValidator(ContractValidator):
    """Валидатор для checked_int контракта."""

    def __init__(self):
        super().__init__("checked_int")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_checked_int(data: Dict[str, Any]) -> None:
    """
    Валидация checked_int данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CheckedIntValidator().validate(data)


def parse_checked_int(data: Dict[str, Any]) -> CheckedInt:
    """
    Контракт → checked-значение: JSON Schema, затем Pydantic, затем restore.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    validate_checked_int(data)
    return restore(CheckedIntSnapshot.model_validate(data))
