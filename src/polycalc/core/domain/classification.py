"""Classification — результаты классификации поведения функции на интервале

- Trend: монотонность (INCREASING, DECREASING, CONSTANT, NON_MONOTONIC)
- Concavity: выпуклость (CONCAVE_UP, CONCAVE_DOWN, UNDEFINED)
"""

from enum import Enum


class Trend(str, Enum):
    """Монотонность функции на интервале (по знаку f')."""

    INCREASING = "INCREASING"
    DECREASING = "DECREASING"
    CONSTANT = "CONSTANT"
    NON_MONOTONIC = "NON_MONOTONIC"


class Concavity(str, Enum):
    """Выпуклость функции на интервале (по знаку f'').

    UNDEFINED:
    - f'' тождественно ноль (степень <= 1)
    - f'' меняет знак внутри интервала (есть точка перегиба)
    """

    CONCAVE_UP = "CONCAVE_UP"
    CONCAVE_DOWN = "CONCAVE_DOWN"
    UNDEFINED = "UNDEFINED"
