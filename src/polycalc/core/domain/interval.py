"""
Interval — замкнутый числовой интервал [a, b]

Immutable Pydantic модель. Используется только как объект-параметр
для классификатора, не как хранимая сущность.

Инварианты:
- a < b (вырожденный a == b и перевёрнутый a > b интервалы невалидны)
- обе границы конечны
"""

from typing import Tuple, Union

from pydantic import BaseModel, Field, model_validator

from polycalc.core.errors import InvalidInterval
from polycalc.core.math.numerical_safeguards import is_valid_float


class Interval(BaseModel):
    """Интервал [a, b] с a < b."""

    a: float = Field(..., description="Нижняя граница")
    b: float = Field(..., description="Верхняя граница")

    model_config = {"frozen": True}

    def __init__(self, a: float, b: float, **data) -> None:
        super().__init__(a=a, b=b, **data)

    @model_validator(mode="after")
    def validate_bounds(self) -> "Interval":
        """Проверка a < b и конечности границ."""
        if not (is_valid_float(self.a) and is_valid_float(self.b)):
            raise InvalidInterval(
                f"Interval bounds must be finite, got [{self.a}, {self.b}]"
            )
        if self.a >= self.b:
            raise InvalidInterval(
                f"Interval requires a < b, got [{self.a}, {self.b}]"
            )
        return self

    @property
    def width(self) -> float:
        return self.b - self.a

    @property
    def midpoint(self) -> float:
        return self.a + (self.b - self.a) / 2

    def contains(self, x: float) -> bool:
        return self.a <= x <= self.b

    def __str__(self) -> str:
        return f"[{self.a:g}, {self.b:g}]"


IntervalLike = Union[Interval, Tuple[float, float]]


def as_interval(interval: IntervalLike) -> Interval:
    """
    Приведение (a, b) к Interval.

    Raises:
        InvalidInterval: если a >= b или границы не конечны
        TypeError: если значение не Interval и не пара чисел
    """
    if isinstance(interval, Interval):
        return interval
    if isinstance(interval, (tuple, list)) and len(interval) == 2:
        return Interval(interval[0], interval[1])
    raise TypeError(
        f"Expected an Interval or an (a, b) pair, got {type(interval).__name__}"
    )
