"""
Contract Validation Module

Модуль для валидации JSON-представлений Monomial, Polynomial и Interval.
"""

from .validators import (
    CONTRACT_MODELS,
    SchemaLoader,
    contract_errors,
    dump_polynomial,
    load_contract,
    load_interval,
    load_monomial,
    load_polynomial,
    validate_contract,
    validate_interval,
    validate_monomial,
    validate_polynomial,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "CONTRACT_MODELS",
    # Validation
    "validate_contract",
    "contract_errors",
    "validate_monomial",
    "validate_polynomial",
    "validate_interval",
    # Load / dump
    "load_contract",
    "load_monomial",
    "load_polynomial",
    "load_interval",
    "dump_polynomial",
]
