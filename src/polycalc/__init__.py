"""
polycalc — symbolic calculus primitives for single-variable polynomials.

Monomials and polynomials as exact immutable values, evaluation, (nth-order)
derivatives, and trend/concavity classification over an interval.
"""

from polycalc.classifier import (
    BehaviorReport,
    ClassifierConfig,
    EndpointZeroPolicy,
    classify_concavity,
    classify_trend,
    describe_behavior,
)
from polycalc.core.domain import Concavity, Interval, Monomial, Polynomial, Trend
from polycalc.core.errors import (
    IncompatibleTerms,
    InvalidDegree,
    InvalidExponent,
    InvalidInterval,
    PolycalcError,
)
from polycalc.core.math.calculus import (
    Differentiable,
    derivative,
    evaluate,
    nth_derivative,
)

__version__ = "0.1.0"

__all__ = [
    # Values
    "Monomial",
    "Polynomial",
    "Interval",
    # Classification
    "Trend",
    "Concavity",
    "ClassifierConfig",
    "EndpointZeroPolicy",
    "BehaviorReport",
    "classify_trend",
    "classify_concavity",
    "describe_behavior",
    # Calculus Engine
    "Differentiable",
    "evaluate",
    "derivative",
    "nth_derivative",
    # Errors
    "PolycalcError",
    "InvalidExponent",
    "InvalidDegree",
    "InvalidInterval",
    "IncompatibleTerms",
]
