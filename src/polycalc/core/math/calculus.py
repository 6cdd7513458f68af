"""
Calculus Engine — единый интерфейс вычислений над Monomial и Polynomial

Не отдельная структура данных, а набор операций {evaluate, derivative,
nth_derivative}, который одинаково реализуют Monomial и Polynomial.
Интерфейс задан через typing.Protocol (структурная типизация), а не через
наследование: классификатор интервалов пишется один раз против протокола.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции чистые: возвращают новые значения, ничего не мутируют
2. Порядок производной n — целое >= 0, иначе InvalidDegree
3. Производная порядка n = 0 возвращает значение без изменений
"""

import numbers
from typing import Protocol, TypeVar, runtime_checkable

from polycalc.core.errors import InvalidDegree


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class Differentiable(Protocol):
    """Значение, поддерживающее вычисление и дифференцирование."""

    def evaluate(self, x: float) -> float:
        ...

    def derivative(self) -> "Differentiable":
        ...

    def nth_derivative(self, n: int) -> "Differentiable":
        ...

    def is_zero(self) -> bool:
        ...


F = TypeVar("F", bound=Differentiable)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_derivative_order(n: int) -> int:
    """
    Проверка порядка производной.

    Args:
        n: Порядок производной

    Returns:
        n как int

    Raises:
        InvalidDegree: если n не целое (bool тоже не принимается) или n < 0
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidDegree(f"Derivative order must be an integer, got {n!r}")

    if n < 0:
        raise InvalidDegree(f"Derivative order must be non-negative, got {n}")

    return int(n)


def _require_differentiable(f: object) -> None:
    if not isinstance(f, Differentiable):
        raise TypeError(
            f"Expected a Monomial or Polynomial, got {type(f).__name__}"
        )


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def evaluate(f: Differentiable, x: float) -> float:
    """Значение f(x)."""
    _require_differentiable(f)
    return f.evaluate(x)


def derivative(f: F) -> F:
    """Первая производная f'."""
    _require_differentiable(f)
    return f.derivative()


def nth_derivative(f: F, n: int) -> F:
    """
    Производная порядка n.

    Args:
        f: Monomial или Polynomial
        n: Порядок производной (>= 0)

    Returns:
        f^(n); для n = 0 — само f

    Raises:
        InvalidDegree: если n < 0 или не целое
        TypeError: если f не поддерживает протокол Differentiable
    """
    _require_differentiable(f)
    return f.nth_derivative(validate_derivative_order(n))
