"""Trend Classifier — монотонность функции на интервале

Алгоритм (точный для многочленов, производная в замкнутой форме):
1. g = f'
2. g тождественно ноль → CONSTANT
3. Знаки g на границах [a, b]:
   - оба положительны → INCREASING
   - оба отрицательны → DECREASING
   - различаются (или ноль без разрешения) → NON_MONOTONIC

Ограничение: если g имеет два корня внутри интервала и одинаковые знаки на
границах, функция будет классифицирована как монотонная.
"""

import logging
from dataclasses import dataclass

from polycalc.classifier.config import ClassifierConfig
from polycalc.classifier.endpoint_sign import EndpointSigns, endpoint_signs
from polycalc.core.domain.classification import Trend
from polycalc.core.domain.interval import IntervalLike, as_interval
from polycalc.core.math.calculus import Differentiable, derivative

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TrendResult:
    """Результат классификации тренда."""

    trend: Trend

    # Производная, по знаку которой принято решение
    derivative: Differentiable

    # Знаки на границах (None если производная тождественно ноль)
    signs: EndpointSigns | None

    details: str


# =============================================================================
# CLASSIFIER
# =============================================================================


class TrendClassifier:
    """Классификатор монотонности по знаку первой производной."""

    def __init__(self, config: ClassifierConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ClassifierConfig()

    def evaluate(self, f: Differentiable, interval: IntervalLike) -> TrendResult:
        """Классификация тренда f на интервале.

        Args:
            f: Monomial или Polynomial
            interval: Interval или пара (a, b)

        Returns:
            TrendResult

        Raises:
            InvalidInterval: если a >= b
            TypeError: если f не поддерживает протокол Differentiable
        """
        interval = as_interval(interval)
        g = derivative(f)

        if g.is_zero():
            result = TrendResult(
                trend=Trend.CONSTANT,
                derivative=g,
                signs=None,
                details=f"f' is identically zero on {interval}",
            )
        else:
            signs = endpoint_signs(g, interval, self.config)
            trend = self._trend_from_signs(signs)
            result = TrendResult(
                trend=trend,
                derivative=g,
                signs=signs,
                details=(
                    f"f'({interval.a:g})={signs.left_value:g} "
                    f"f'({interval.b:g})={signs.right_value:g} "
                    f"signs=({signs.left_sign:+d}, {signs.right_sign:+d})"
                ),
            )

        logger.debug("trend %s on %s: %s (%s)", f, interval, result.trend.value, result.details)
        return result

    @staticmethod
    def _trend_from_signs(signs: EndpointSigns) -> Trend:
        if signs.left_sign > 0 and signs.right_sign > 0:
            return Trend.INCREASING
        if signs.left_sign < 0 and signs.right_sign < 0:
            return Trend.DECREASING
        return Trend.NON_MONOTONIC


def classify_trend(
    f: Differentiable,
    interval: IntervalLike,
    config: ClassifierConfig | None = None,
) -> Trend:
    """
    Тренд f на интервале.

    Examples:
        >>> classify_trend(Polynomial([(1, 2)]), Interval(0, 5))
        <Trend.INCREASING: 'INCREASING'>
    """
    return TrendClassifier(config).evaluate(f, interval).trend
