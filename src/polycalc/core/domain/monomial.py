"""
Monomial — атомарный член c·x^n

Immutable Pydantic модель одночлена от одной переменной.

Инварианты:
- exponent >= 0 (иначе InvalidExponent, без clamp)
- coefficient — конечное вещественное число
- coefficient == 0 — нулевой член, degree не определён (None)

Все операции чистые: производные и арифметика возвращают новые значения.
"""

import math
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from polycalc.core.errors import IncompatibleTerms, InvalidExponent
from polycalc.core.math.calculus import validate_derivative_order


Scalar = Union[int, float]


def format_number(value: float) -> str:
    """Число без хвоста '.0' для целых значений: 3.0 → '3', 0.5 → '0.5'."""
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


class Monomial(BaseModel):
    """
    Одночлен coefficient * x^exponent.

    Поддерживает позиционное конструирование: Monomial(3, 2) == 3x^2.
    """

    coefficient: float = Field(
        ..., allow_inf_nan=False, description="Коэффициент (конечное вещественное)"
    )
    exponent: int = Field(..., description="Степень x (целое >= 0)")

    model_config = {"frozen": True}

    def __init__(self, coefficient: Scalar = 0.0, exponent: int = 0, **data) -> None:
        super().__init__(coefficient=coefficient, exponent=exponent, **data)

    @field_validator("exponent", mode="before")
    @classmethod
    def reject_bool_exponent(cls, v):
        """bool — подкласс int, но степенью не является."""
        if isinstance(v, bool):
            raise InvalidExponent(f"Monomial exponent must be an integer, got {v!r}")
        return v

    @field_validator("exponent")
    @classmethod
    def validate_exponent(cls, v: int) -> int:
        """Отрицательная степень запрещена."""
        if v < 0:
            raise InvalidExponent(f"Monomial exponent must be >= 0, got {v}")
        return v

    @classmethod
    def zero(cls) -> "Monomial":
        """Нулевой одночлен 0·x^0."""
        return cls(0.0, 0)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def is_constant(self) -> bool:
        return self.exponent == 0 or self.is_zero()

    @property
    def degree(self) -> Optional[int]:
        """Степень одночлена; None для нулевого члена."""
        if self.is_zero():
            return None
        return self.exponent

    # -------------------------------------------------------------------------
    # Calculus
    # -------------------------------------------------------------------------

    def evaluate(self, x: float) -> float:
        """
        Значение coefficient * x^exponent.

        Соглашение 0^0 = 1: при exponent = 0 результат равен coefficient
        для любого x, включая x = 0.

        Если |x|^exponent выходит за диапазон float, результат насыщается
        до ±inf со знаком c·x^n (как при переполнении умножения).
        """
        if self.exponent == 0:
            return self.coefficient
        try:
            return self.coefficient * x**self.exponent
        except OverflowError:
            if self.is_zero():
                return 0.0
            negative = (self.coefficient < 0) != (x < 0 and self.exponent % 2 == 1)
            return -math.inf if negative else math.inf

    def derivative(self) -> "Monomial":
        """
        Первая производная: (c·n) x^(n-1).

        Для exponent = 0 — нулевой одночлен Monomial(0, 0).
        """
        if self.exponent == 0:
            return Monomial.zero()
        return Monomial(self.coefficient * self.exponent, self.exponent - 1)

    def nth_derivative(self, n: int) -> "Monomial":
        """
        Производная порядка n.

        Закрытая форма: c · n!/(n-k)! · x^(n-k). Когда степень исчерпана
        раньше, чем порядок, результат — нулевой одночлен.

        Raises:
            InvalidDegree: если n < 0 или не целое
        """
        n = validate_derivative_order(n)
        if n == 0:
            return self
        if n > self.exponent:
            return Monomial.zero()
        return Monomial(
            self.coefficient * math.perm(self.exponent, n),
            self.exponent - n,
        )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add_like_term(self, other: "Monomial") -> "Monomial":
        """
        Сложение подобных членов (одинаковая степень x).

        Raises:
            IncompatibleTerms: если степени различаются
        """
        if self.exponent != other.exponent:
            raise IncompatibleTerms(
                f"Cannot add monomials with different powers of x: "
                f"{self.exponent} != {other.exponent}"
            )
        return Monomial(self.coefficient + other.coefficient, self.exponent)

    def multiply(self, other: "Monomial") -> "Monomial":
        """Произведение: (c1·c2) x^(n1+n2)."""
        return Monomial(
            self.coefficient * other.coefficient, self.exponent + other.exponent
        )

    def scale(self, factor: Scalar) -> "Monomial":
        return Monomial(self.coefficient * factor, self.exponent)

    def __mul__(self, other):
        if isinstance(other, Monomial):
            return self.multiply(other)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> "Monomial":
        return Monomial(-self.coefficient, self.exponent)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def to_string(self, var: str = "x") -> str:
        """
        Текстовое представление: 3x^2, -x, 5, 0.

        Args:
            var: Имя переменной (default: 'x')
        """
        if self.is_zero():
            return "0"
        if self.exponent == 0:
            return format_number(self.coefficient)

        sign = "-" if self.coefficient < 0 else ""
        abs_coeff = abs(self.coefficient)
        coeff_part = "" if abs_coeff == 1 else format_number(abs_coeff)
        var_part = var if self.exponent == 1 else f"{var}^{self.exponent}"
        return f"{sign}{coeff_part}{var_part}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Monomial({self.coefficient!r}, {self.exponent!r})"
