"""
Core math modules для polycalc

Численные примитивы и единый интерфейс дифференцирования.
"""

# Numerical Safeguards
from polycalc.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_SIGN_DEFAULT,
    # NaN/Inf
    is_valid_float,
    # Sign tests
    is_positive,
    is_zero,
    sign_with_tolerance,
    # Validation
    validate_non_negative,
)

# Calculus Engine
from polycalc.core.math.calculus import (
    Differentiable,
    derivative,
    evaluate,
    nth_derivative,
    validate_derivative_order,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_SIGN_DEFAULT",
    # Numerical Safeguards — NaN/Inf
    "is_valid_float",
    # Numerical Safeguards — Sign tests
    "is_positive",
    "is_zero",
    "sign_with_tolerance",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    # Calculus Engine — Protocol
    "Differentiable",
    # Calculus Engine — Functions
    "derivative",
    "evaluate",
    "nth_derivative",
    "validate_derivative_order",
]
