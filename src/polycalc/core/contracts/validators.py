"""
JSON Schema контракты значений polycalc

Каждое значение (Monomial, Polynomial, Interval) имеет JSON-представление,
совпадающее с model_dump(mode="json") модели. Схема проверяет форму данных
(типы, обязательные поля, exponent >= 0, отсутствие лишних полей), модель —
инварианты, которые схема не выражает (a < b, слияние подобных членов).

Схемы лежат в schema/ рядом с модулем и поставляются как package data.
"""

import json
import logging
from functools import partial
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

from polycalc.core.domain.interval import Interval
from polycalc.core.domain.monomial import Monomial
from polycalc.core.domain.polynomial import Polynomial

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"

# Имя контракта → модель, которую он описывает
CONTRACT_MODELS = {
    "monomial": Monomial,
    "polynomial": Polynomial,
    "interval": Interval,
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем: чтение, meta-валидация и один Draft202012Validator
    на схему (кэшируется по имени).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._validators: Dict[str, Draft202012Validator] = {}

    def validator(self, schema_name: str) -> Draft202012Validator:
        """
        Валидатор для схемы schema_name.json.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name not in self._validators:
            path = self.schema_dir / f"{schema_name}.json"
            if not path.is_file():
                raise FileNotFoundError(f"Schema not found: {path}")

            schema = json.loads(path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

            logger.debug("Loaded schema %s from %s", schema_name, path)
            self._validators[schema_name] = Draft202012Validator(schema)
        return self._validators[schema_name]

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        return self.validator(schema_name).schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATION
# =============================================================================


def validate_contract(schema_name: str, data: Any) -> None:
    """
    Проверка data по контракту schema_name.

    Raises:
        jsonschema.ValidationError: первое найденное нарушение
    """
    _SCHEMA_LOADER.validator(schema_name).validate(data)


def contract_errors(schema_name: str, data: Any) -> List[str]:
    """Все нарушения контракта как 'json_path: message'; пустой список — данные валидны."""
    errors = _SCHEMA_LOADER.validator(schema_name).iter_errors(data)
    return sorted(f"{e.json_path}: {e.message}" for e in errors)


validate_monomial = partial(validate_contract, "monomial")
validate_polynomial = partial(validate_contract, "polynomial")
validate_interval = partial(validate_contract, "interval")


# =============================================================================
# LOAD / DUMP
# =============================================================================


def load_contract(schema_name: str, data: Any):
    """
    Проверка по схеме и конструирование модели контракта.

    Raises:
        jsonschema.ValidationError: форма данных не соответствует схеме
        InvalidInterval: для interval с a >= b
    """
    validate_contract(schema_name, data)
    return CONTRACT_MODELS[schema_name].model_validate(data)


def load_monomial(data: Dict[str, Any]) -> Monomial:
    return load_contract("monomial", data)


def load_polynomial(data: Dict[str, Any]) -> Polynomial:
    """Подобные члены во входных данных сливаются при конструировании."""
    return load_contract("polynomial", data)


def load_interval(data: Dict[str, Any]) -> Interval:
    return load_contract("interval", data)


def dump_polynomial(polynomial: Polynomial) -> Dict[str, Any]:
    """Каноническое JSON-представление многочлена (по убыванию степени)."""
    data = polynomial.model_dump(mode="json")
    validate_polynomial(data)
    return data
