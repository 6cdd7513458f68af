"""
Polynomial — сумма одночленов в канонической форме

Immutable Pydantic модель многочлена от одной переменной.

КАНОНИЧЕСКАЯ ФОРМА (постусловие любого конструирования):
1. Не более одного члена на каждую степень (подобные члены слиты суммой)
2. Нет членов с нулевым коэффициентом
3. Члены упорядочены по убыванию степени
4. Нулевой многочлен — пустой кортеж terms

Равенство: два многочлена равны тогда и только тогда, когда совпадают их
нормализованные наборы членов. Порядок членов на входе не важен.
"""

import math
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from polycalc.core.domain.monomial import Monomial, Scalar
from polycalc.core.math.calculus import validate_derivative_order


TermLike = Union[Monomial, Tuple[Scalar, int], Dict[str, Any]]


def _coerce_term(term: TermLike) -> Any:
    # (coefficient, exponent) пары превращаются в Monomial,
    # dict-ы оставляем pydantic
    if isinstance(term, (tuple, list)):
        coefficient, exponent = term
        return Monomial(coefficient, exponent)
    return term


def normalize_terms(terms: Iterable[Monomial]) -> Tuple[Monomial, ...]:
    """
    Приведение набора одночленов к канонической форме.

    Сливает подобные члены, отбрасывает нулевые коэффициенты,
    упорядочивает по убыванию степени.
    """
    acc: Dict[int, float] = {}
    for m in terms:
        acc[m.exponent] = acc.get(m.exponent, 0.0) + m.coefficient

    return tuple(
        Monomial(coefficient, exponent)
        for exponent, coefficient in sorted(acc.items(), reverse=True)
        if coefficient != 0
    )


class Polynomial(BaseModel):
    """
    Многочлен как каноническая сумма Monomial.

    Поддерживает позиционное конструирование:
        Polynomial([Monomial(1, 2), Monomial(5, 0)])
        Polynomial([(1, 2), (5, 0)])
    """

    terms: Tuple[Monomial, ...] = Field(
        default=(), description="Члены в канонической форме (по убыванию степени)"
    )

    model_config = {"frozen": True}

    def __init__(self, terms: Iterable[TermLike] = (), **data) -> None:
        super().__init__(terms=tuple(terms), **data)

    @field_validator("terms", mode="before")
    @classmethod
    def coerce_terms(cls, v: Any) -> Any:
        """Пары (coefficient, exponent) → Monomial."""
        if isinstance(v, (list, tuple)):
            return tuple(_coerce_term(t) for t in v)
        return v

    @field_validator("terms")
    @classmethod
    def normalize(cls, v: Tuple[Monomial, ...]) -> Tuple[Monomial, ...]:
        """Слияние подобных членов и отбрасывание нулей."""
        return normalize_terms(v)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_terms(cls, terms: Iterable[TermLike]) -> "Polynomial":
        """
        Построение многочлена из набора одночленов.

        Args:
            terms: Monomial или пары (coefficient, exponent), в любом порядке

        Returns:
            Нормализованный Polynomial

        Raises:
            InvalidExponent: если какой-либо член имеет отрицательную степень
        """
        return cls(terms)

    @classmethod
    def from_monomial(cls, monomial: Monomial) -> "Polynomial":
        return cls([monomial])

    @classmethod
    def zero(cls) -> "Polynomial":
        """Нулевой многочлен (пустой набор членов)."""
        return cls()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not self.terms

    def is_constant(self) -> bool:
        return self.degree is None or self.degree == 0

    @property
    def degree(self) -> Optional[int]:
        """Старшая степень; None для нулевого многочлена."""
        if not self.terms:
            return None
        return self.terms[0].exponent

    @property
    def leading_coefficient(self) -> float:
        if not self.terms:
            return 0.0
        return self.terms[0].coefficient

    def coefficient(self, exponent: int) -> float:
        """Коэффициент при x^exponent (0.0 если члена нет)."""
        for m in self.terms:
            if m.exponent == exponent:
                return m.coefficient
        return 0.0

    # -------------------------------------------------------------------------
    # Calculus
    # -------------------------------------------------------------------------

    def evaluate(self, x: float) -> float:
        """
        Сумма значений всех членов в точке x.

        Если несколько членов переполнились до inf разных знаков,
        значение определяет старший член.
        """
        total = sum((m.evaluate(x) for m in self.terms), 0.0)
        if math.isnan(total):
            return self.terms[0].evaluate(x)
        return total

    def derivative(self) -> "Polynomial":
        """
        Почленная производная с повторной нормализацией.

        Степени сдвигаются равномерно и остаются различными, поэтому
        слияние ничего не меняет, но свободный член пропадает.
        """
        return Polynomial(m.derivative() for m in self.terms)

    def nth_derivative(self, n: int) -> "Polynomial":
        """
        Производная порядка n: почленно Monomial.nth_derivative + нормализация.

        Для многочлена степени d производная порядка d+1 и выше — нулевой
        многочлен.

        Raises:
            InvalidDegree: если n < 0 или не целое
        """
        n = validate_derivative_order(n)
        if n == 0:
            return self
        return Polynomial(m.nth_derivative(n) for m in self.terms)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def _as_terms(other: Any) -> Optional[List[Monomial]]:
        if isinstance(other, Polynomial):
            return list(other.terms)
        if isinstance(other, Monomial):
            return [other]
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return [Monomial(other, 0)]
        return None

    def __add__(self, other):
        other_terms = self._as_terms(other)
        if other_terms is None:
            return NotImplemented
        return Polynomial(list(self.terms) + other_terms)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other_terms = self._as_terms(other)
        if other_terms is None:
            return NotImplemented
        return Polynomial(list(self.terms) + [-m for m in other_terms])

    def __rsub__(self, other):
        other_terms = self._as_terms(other)
        if other_terms is None:
            return NotImplemented
        return Polynomial(other_terms + [-m for m in self.terms])

    def __neg__(self) -> "Polynomial":
        return Polynomial(-m for m in self.terms)

    def __mul__(self, other):
        other_terms = self._as_terms(other)
        if other_terms is None:
            return NotImplemented
        return Polynomial(a.multiply(b) for a in self.terms for b in other_terms)

    def __rmul__(self, other):
        return self.__mul__(other)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def to_string(self, var: str = "x") -> str:
        """
        Каноническая запись по убыванию степени: 3x^2 - x + 5.

        Нулевой многочлен печатается как '0'.
        """
        if not self.terms:
            return "0"
        parts: List[str] = []
        for idx, m in enumerate(self.terms):
            s = m.to_string(var)
            if s.startswith("-"):
                body = s[1:]
                parts.append(f"-{body}" if idx == 0 else f" - {body}")
            else:
                parts.append(s if idx == 0 else f" + {s}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({list(self.terms)!r})"
