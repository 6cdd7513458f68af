"""
Domain models and value objects.

Contains the immutable value types: Monomial, Polynomial, Interval and the
classification enums.
"""

from polycalc.core.domain.classification import Concavity, Trend
from polycalc.core.domain.interval import Interval, IntervalLike, as_interval
from polycalc.core.domain.monomial import Monomial, format_number
from polycalc.core.domain.polynomial import Polynomial, normalize_terms

__all__ = [
    # Monomial
    "Monomial",
    "format_number",
    # Polynomial
    "Polynomial",
    "normalize_terms",
    # Interval
    "Interval",
    "IntervalLike",
    "as_interval",
    # Classification
    "Trend",
    "Concavity",
]
