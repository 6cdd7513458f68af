"""Конфигурация классификатора интервалов.

Параметры:
- zero_tol — абсолютная толерантность знаковых тестов (0.0 = точное сравнение)
- endpoint_zero_policy — как трактовать нулевое значение производной на границе
"""

from dataclasses import dataclass
from enum import Enum

from polycalc.core.math.numerical_safeguards import (
    EPS_SIGN_DEFAULT,
    validate_non_negative,
)


class EndpointZeroPolicy(str, Enum):
    """Трактовка нуля производной в граничной точке интервала.

    ONE_SIDED:
        Знак на границе заменяется знаком производной сразу внутри
        интервала (через первую ненулевую старшую производную в этой
        точке). x^2 на [0, 5] → INCREASING.
    NON_MONOTONIC:
        Ноль на границе — "нет знака": тренд NON_MONOTONIC,
        выпуклость UNDEFINED.
    """

    ONE_SIDED = "ONE_SIDED"
    NON_MONOTONIC = "NON_MONOTONIC"


@dataclass(frozen=True)
class ClassifierConfig:
    """Конфигурация классификатора тренда и выпуклости."""

    # Абсолютная толерантность: |v| <= zero_tol считается нулём
    zero_tol: float = EPS_SIGN_DEFAULT

    endpoint_zero_policy: EndpointZeroPolicy = EndpointZeroPolicy.ONE_SIDED

    def __post_init__(self) -> None:
        validate_non_negative(self.zero_tol, "zero_tol")
        if not isinstance(self.endpoint_zero_policy, EndpointZeroPolicy):
            raise ValueError(
                f"endpoint_zero_policy must be an EndpointZeroPolicy, "
                f"got {self.endpoint_zero_policy!r}"
            )
