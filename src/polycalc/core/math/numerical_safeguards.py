"""
Numerical Safeguards — Safe Math Primitives

Модуль содержит численные примитивы, на которых строится классификация
поведения функций на интервале:
- Проверка валидности float (NaN/Inf)
- Знаковые тесты с абсолютной толерантностью (is_zero / is_positive)
- Знак числа с учётом толерантности (sign_with_tolerance)
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. По умолчанию толерантность нулевая: знак определяется точно
2. Отрицательная толерантность — ошибка вызывающего кода (ValueError)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для знаковых тестов по умолчанию.
# 0.0 означает точное сравнение с нулём: библиотека не моделирует
# погрешность float, вызывающий код может задать свою толерантность.
EPS_SIGN_DEFAULT: Final[float] = 0.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ЗНАКОВЫЕ ТЕСТЫ
# =============================================================================


def _check_tol(tol: float) -> None:
    if tol < 0 or not is_valid_float(tol):
        raise ValueError(f"tol must be a finite non-negative float, got {tol}")


def is_zero(value: float, tol: float = EPS_SIGN_DEFAULT) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: 0.0, точное сравнение)

    Returns:
        True если abs(value) <= tol
    """
    _check_tol(tol)
    return abs(value) <= tol


def is_positive(value: float, tol: float = EPS_SIGN_DEFAULT) -> bool:
    """
    Проверка, является ли значение положительным с учётом толерантности.

    Returns:
        True если value > tol
    """
    _check_tol(tol)
    return value > tol


def sign_with_tolerance(value: float, tol: float = EPS_SIGN_DEFAULT) -> int:
    """
    Знак значения с учётом толерантности.

    Args:
        value: Исходное значение
        tol: Абсолютная толерантность (default: 0.0)

    Returns:
        -1 если value < -tol
         0 если abs(value) <= tol
        +1 если value > tol

    Raises:
        ValueError: Если value содержит NaN (знак не определён)

    Examples:
        >>> sign_with_tolerance(2.0)
        1
        >>> sign_with_tolerance(-1e-13, tol=1e-12)
        0
        >>> sign_with_tolerance(-3.0)
        -1
    """
    if math.isnan(value):
        raise ValueError("Cannot take the sign of NaN")

    if is_zero(value, tol):
        return 0
    elif is_positive(value, tol):
        return 1
    else:
        return -1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
