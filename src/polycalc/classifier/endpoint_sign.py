"""Знак функции на границах интервала.

Основа классификаторов тренда и выпуклости: оба сводятся к знаку
производной (f' или f'') в точках a и b.

Нулевое значение на границе при политике ONE_SIDED разрешается точно,
без сэмплирования: для многочлена g с g(p) = 0 знак g сразу справа от p
равен знаку первой ненулевой производной g^(k)(p), а сразу слева —
знаку g^(k)(p) · (-1)^k (разложение Тейлора в точке p).
"""

import logging
from dataclasses import dataclass
from enum import Enum

from polycalc.classifier.config import ClassifierConfig, EndpointZeroPolicy
from polycalc.core.domain.interval import Interval
from polycalc.core.math.calculus import Differentiable
from polycalc.core.math.numerical_safeguards import sign_with_tolerance

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """С какой стороны от точки смотрим на знак."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class EndpointSigns:
    """Значения и эффективные знаки функции на границах интервала."""

    left_value: float
    right_value: float

    # Эффективные знаки (-1, 0, +1) после разрешения нулей на границах
    left_sign: int
    right_sign: int

    # Был ли ноль на границе разрешён односторонним знаком
    left_resolved: bool = False
    right_resolved: bool = False


def one_sided_sign(g: Differentiable, point: float, side: Side, tol: float = 0.0) -> int:
    """
    Знак g сразу с указанной стороны от точки, где g(point) = 0.

    Args:
        g: Функция (Monomial или Polynomial)
        point: Точка, в которой g обращается в ноль
        side: Side.RIGHT — справа от точки, Side.LEFT — слева
        tol: Абсолютная толерантность знаковых тестов

    Returns:
        -1, +1, либо 0 если все производные в точке нулевые
        (g тождественно ноль)
    """
    h = g
    order = 0
    while True:
        h = h.derivative()
        order += 1
        if h.is_zero():
            return 0
        s = sign_with_tolerance(h.evaluate(point), tol)
        if s != 0:
            if side == Side.LEFT and order % 2 == 1:
                return -s
            return s


def endpoint_signs(
    g: Differentiable,
    interval: Interval,
    config: ClassifierConfig,
) -> EndpointSigns:
    """
    Знаки g на границах интервала с учётом политики нулевых границ.

    Args:
        g: Производная исследуемой функции (f' или f'')
        interval: Интервал [a, b]
        config: Конфигурация классификатора

    Returns:
        EndpointSigns
    """
    left_value = g.evaluate(interval.a)
    right_value = g.evaluate(interval.b)

    left_sign = sign_with_tolerance(left_value, config.zero_tol)
    right_sign = sign_with_tolerance(right_value, config.zero_tol)
    left_resolved = right_resolved = False

    if config.endpoint_zero_policy == EndpointZeroPolicy.ONE_SIDED:
        # Внутренность интервала справа от a и слева от b
        if left_sign == 0:
            left_sign = one_sided_sign(g, interval.a, Side.RIGHT, config.zero_tol)
            left_resolved = True
        if right_sign == 0:
            right_sign = one_sided_sign(g, interval.b, Side.LEFT, config.zero_tol)
            right_resolved = True

    if left_resolved or right_resolved:
        logger.debug(
            "Zero at endpoint of %s resolved one-sided: left=%d right=%d",
            interval,
            left_sign,
            right_sign,
        )

    return EndpointSigns(
        left_value=left_value,
        right_value=right_value,
        left_sign=left_sign,
        right_sign=right_sign,
        left_resolved=left_resolved,
        right_resolved=right_resolved,
    )
