"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- occurrence.json (пара min/max, которой обмениваются парсер грамматики и компилятор)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, validators

from src.core.domain.multiplicity import Multiplicity, create

logger = logging.getLogger(__name__)

# Каталог схем относительно корня проекта (4 уровня вверх от этого файла)
SCHEMA_DIR: Final[Path] = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


# =============================================================================
# STRICT INTEGER VALIDATOR
# =============================================================================


def _is_strict_integer(checker, instance: Any) -> bool:
    """
    "integer" только для int.

    Draft 2020-12 считает 2.0 и 1e20 целыми; границы появлений хранятся
    только как int.
    """
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'occurrence')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
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
    Тип "integer" проверяется строго: float с нулевой дробной частью
    отклоняется.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = StrictIntegerValidator(self.schema)

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
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class OccurrenceValidator(ContractValidator):
    """Валидатор для occurrence контракта."""

    def __init__(self):
        super().__init__("occurrence")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_occurrence(data: Dict[str, Any]) -> None:
    """
    Валидация occurrence данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OccurrenceValidator().validate(data)


def multiplicity_from_contract(data: Dict[str, Any]) -> Multiplicity:
    """
    Построение Multiplicity из occurrence контракта.

    Схема не проверяет min ≤ max: как и алгебра, контракт пропускает
    инвертированные пары.

    Args:
        data: {"min": int, "max": int | "unbounded"}

    Returns:
        Multiplicity (interned для канонических пар)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_occurrence(data)
    return create(data["min"], data["max"])
