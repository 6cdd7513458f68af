"""Behavior Report — тренд и выпуклость функции на интервале одним вызовом."""

from dataclasses import dataclass

from polycalc.classifier.concavity import ConcavityClassifier, ConcavityResult
from polycalc.classifier.config import ClassifierConfig
from polycalc.classifier.trend import TrendClassifier, TrendResult
from polycalc.core.domain.classification import Concavity, Trend
from polycalc.core.domain.interval import Interval, IntervalLike, as_interval
from polycalc.core.math.calculus import Differentiable


@dataclass(frozen=True)
class BehaviorReport:
    """Сводка поведения функции на интервале."""

    interval: Interval
    trend_result: TrendResult
    concavity_result: ConcavityResult

    @property
    def trend(self) -> Trend:
        return self.trend_result.trend

    @property
    def concavity(self) -> Concavity:
        return self.concavity_result.concavity

    def summary(self) -> str:
        return f"{self.interval}: {self.trend.value}, {self.concavity.value}"


def describe_behavior(
    f: Differentiable,
    interval: IntervalLike,
    config: ClassifierConfig | None = None,
) -> BehaviorReport:
    """
    Тренд и выпуклость f на интервале.

    Raises:
        InvalidInterval: если a >= b
    """
    interval = as_interval(interval)
    config = config or ClassifierConfig()
    return BehaviorReport(
        interval=interval,
        trend_result=TrendClassifier(config).evaluate(f, interval),
        concavity_result=ConcavityClassifier(config).evaluate(f, interval),
    )
