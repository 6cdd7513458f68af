"""Concavity Classifier — выпуклость функции на интервале

Алгоритм:
1. g = f''
2. g тождественно ноль → UNDEFINED (у многочленов степени <= 1 выпуклости нет)
3. Знаки g на границах [a, b]:
   - оба положительны → CONCAVE_UP
   - оба отрицательны → CONCAVE_DOWN
   - различаются → UNDEFINED (внутри есть точка перегиба)
"""

import logging
from dataclasses import dataclass

from polycalc.classifier.config import ClassifierConfig
from polycalc.classifier.endpoint_sign import EndpointSigns, endpoint_signs
from polycalc.core.domain.classification import Concavity
from polycalc.core.domain.interval import IntervalLike, as_interval
from polycalc.core.math.calculus import Differentiable, nth_derivative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConcavityResult:
    """Результат классификации выпуклости."""

    concavity: Concavity
    second_derivative: Differentiable
    signs: EndpointSigns | None
    details: str


class ConcavityClassifier:
    """Классификатор выпуклости по знаку второй производной."""

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = config or ClassifierConfig()

    def evaluate(self, f: Differentiable, interval: IntervalLike) -> ConcavityResult:
        """Классификация выпуклости f на интервале.

        Raises:
            InvalidInterval: если a >= b
            TypeError: если f не поддерживает протокол Differentiable
        """
        interval = as_interval(interval)
        g = nth_derivative(f, 2)

        if g.is_zero():
            result = ConcavityResult(
                concavity=Concavity.UNDEFINED,
                second_derivative=g,
                signs=None,
                details=f"f'' is identically zero on {interval}",
            )
        else:
            signs = endpoint_signs(g, interval, self.config)
            if signs.left_sign > 0 and signs.right_sign > 0:
                concavity = Concavity.CONCAVE_UP
            elif signs.left_sign < 0 and signs.right_sign < 0:
                concavity = Concavity.CONCAVE_DOWN
            else:
                concavity = Concavity.UNDEFINED
            result = ConcavityResult(
                concavity=concavity,
                second_derivative=g,
                signs=signs,
                details=(
                    f"f''({interval.a:g})={signs.left_value:g} "
                    f"f''({interval.b:g})={signs.right_value:g} "
                    f"signs=({signs.left_sign:+d}, {signs.right_sign:+d})"
                ),
            )

        logger.debug(
            "concavity %s on %s: %s (%s)", f, interval, result.concavity.value, result.details
        )
        return result


def classify_concavity(
    f: Differentiable,
    interval: IntervalLike,
    config: ClassifierConfig | None = None,
) -> Concavity:
    """Выпуклость f на интервале."""
    return ConcavityClassifier(config).evaluate(f, interval).concavity
