"""Interval Classifier — тренд и выпуклость функции на интервале.

Классификаторы написаны один раз против протокола Differentiable и
одинаково работают для Monomial и Polynomial.
"""

from .concavity import ConcavityClassifier, ConcavityResult, classify_concavity
from .config import ClassifierConfig, EndpointZeroPolicy
from .endpoint_sign import EndpointSigns, Side, endpoint_signs, one_sided_sign
from .report import BehaviorReport, describe_behavior
from .trend import TrendClassifier, TrendResult, classify_trend

__all__ = [
    # Config
    "ClassifierConfig",
    "EndpointZeroPolicy",
    # Endpoint signs
    "EndpointSigns",
    "Side",
    "endpoint_signs",
    "one_sided_sign",
    # Trend
    "TrendClassifier",
    "TrendResult",
    "classify_trend",
    # Concavity
    "ConcavityClassifier",
    "ConcavityResult",
    "classify_concavity",
    # Report
    "BehaviorReport",
    "describe_behavior",
]
