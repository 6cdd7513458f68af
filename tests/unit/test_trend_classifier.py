"""Тесты для Trend Classifier

Покрытие:
- Базовые сценарии (x^2 на [0, 5], -x^2 на [-3, 3])
- CONSTANT для нулевой производной
- Нули производной на границах (политики ONE_SIDED и NON_MONOTONIC)
- Толерантность знаковых тестов
- Monomial как вход
- Ошибки (InvalidInterval, TypeError)
"""

import logging

import pytest

from polycalc.classifier import (
    ClassifierConfig,
    EndpointZeroPolicy,
    TrendClassifier,
    classify_trend,
)
from polycalc.core.domain import Interval, Monomial, Polynomial, Trend
from polycalc.core.errors import InvalidInterval


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def square() -> Polynomial:
    """x^2"""
    return Polynomial([Monomial(1, 2)])


@pytest.fixture
def literal_config() -> ClassifierConfig:
    """Ноль на границе → NON_MONOTONIC."""
    return ClassifierConfig(endpoint_zero_policy=EndpointZeroPolicy.NON_MONOTONIC)


# =============================================================================
# БАЗОВЫЕ СЦЕНАРИИ
# =============================================================================


class TestTrendBasic:
    """Базовые сценарии классификации тренда"""

    def test_square_on_zero_to_five_increasing(self, square: Polynomial) -> None:
        """x^2 на [0, 5]: f'(0) = 0 разрешается справа → INCREASING"""
        assert classify_trend(square, Interval(0, 5)) == Trend.INCREASING

    def test_negative_square_symmetric_non_monotonic(self) -> None:
        """-x^2 на [-3, 3]: f' = -2x меняет знак в 0"""
        p = Polynomial([Monomial(-1, 2)])
        assert classify_trend(p, Interval(-3, 3)) == Trend.NON_MONOTONIC

    def test_decreasing(self) -> None:
        p = Polynomial([(-3, 1), (2, 0)])
        assert classify_trend(p, Interval(-10, 10)) == Trend.DECREASING

    def test_increasing_linear(self) -> None:
        p = Polynomial([(2, 1), (1, 0)])
        assert classify_trend(p, Interval(-1, 1)) == Trend.INCREASING

    def test_constant_polynomial(self) -> None:
        assert classify_trend(Polynomial([(5, 0)]), Interval(-1, 1)) == Trend.CONSTANT

    def test_zero_polynomial_constant(self) -> None:
        assert classify_trend(Polynomial.zero(), Interval(-1, 1)) == Trend.CONSTANT

    def test_cubic_increasing_through_flat_point(self) -> None:
        """x^3 на [-1, 1]: 3x^2 положительна на обеих границах"""
        assert classify_trend(Polynomial([(1, 3)]), Interval(-1, 1)) == Trend.INCREASING

    def test_pair_interval_accepted(self, square: Polynomial) -> None:
        assert classify_trend(square, (1, 2)) == Trend.INCREASING
        assert classify_trend(square, (-2, -1)) == Trend.DECREASING

    def test_endpoint_heuristic_limitation(self) -> None:
        """x^3 - 3x на [-2, 2]: f' = 3x^2 - 3 имеет два корня внутри,
        но знаки на границах совпадают → INCREASING (известное ограничение)"""
        p = Polynomial([(1, 3), (-3, 1)])
        assert classify_trend(p, Interval(-2, 2)) == Trend.INCREASING

    def test_huge_endpoint_overflow_saturates(self) -> None:
        """x^3 на [0, 1e200]: f'(1e200) вне диапазона float → +inf, знак сохраняется"""
        assert classify_trend(Polynomial([(1, 3)]), Interval(0, 1e200)) == Trend.INCREASING
        assert classify_trend(Monomial(-1, 3), Interval(-1e200, -1)) == Trend.DECREASING


# =============================================================================
# MONOMIAL
# =============================================================================


class TestTrendMonomial:
    """Классификатор одинаково работает для Monomial"""

    def test_monomial_increasing(self) -> None:
        assert classify_trend(Monomial(1, 2), Interval(0, 5)) == Trend.INCREASING

    def test_monomial_decreasing(self) -> None:
        assert classify_trend(Monomial(-1, 3), Interval(1, 2)) == Trend.DECREASING

    def test_monomial_constant(self) -> None:
        assert classify_trend(Monomial(7, 0), Interval(1, 2)) == Trend.CONSTANT

    def test_zero_monomial_constant(self) -> None:
        assert classify_trend(Monomial(0, 4), Interval(1, 2)) == Trend.CONSTANT


# =============================================================================
# НУЛИ НА ГРАНИЦАХ
# =============================================================================


class TestTrendEndpointZeros:
    """Разрешение нулей производной на границах"""

    def test_right_endpoint_zero(self) -> None:
        """-x^2 на [-5, 0]: f'(0) = 0, слева от 0 f' > 0 → INCREASING"""
        p = Polynomial([(-1, 2)])
        assert classify_trend(p, Interval(-5, 0)) == Trend.INCREASING

    def test_double_root_at_endpoint(self) -> None:
        """x^3 на [0, 2] и [-2, 0]: f' = 3x^2 с двойным корнем в 0"""
        p = Polynomial([(1, 3)])
        assert classify_trend(p, Interval(0, 2)) == Trend.INCREASING
        assert classify_trend(p, Interval(-2, 0)) == Trend.INCREASING

    def test_both_endpoints_zero(self) -> None:
        """2x^3 - 3x^2 на [0, 1]: f' = 6x(x - 1) < 0 внутри"""
        p = Polynomial([(2, 3), (-3, 2)])
        assert classify_trend(p, Interval(0, 1)) == Trend.DECREASING

    def test_literal_policy_square(self, square: Polynomial, literal_config: ClassifierConfig) -> None:
        """При политике NON_MONOTONIC ноль на границе → NON_MONOTONIC"""
        assert classify_trend(square, Interval(0, 5), literal_config) == Trend.NON_MONOTONIC

    def test_literal_policy_no_zero_unchanged(
        self, square: Polynomial, literal_config: ClassifierConfig
    ) -> None:
        assert classify_trend(square, Interval(1, 5), literal_config) == Trend.INCREASING

    def test_tolerance_treats_tiny_value_as_zero(
        self, square: Polynomial, literal_config: ClassifierConfig
    ) -> None:
        interval = Interval(1e-12, 1)
        assert classify_trend(square, interval, literal_config) == Trend.INCREASING

        tolerant = ClassifierConfig(
            zero_tol=1e-9, endpoint_zero_policy=EndpointZeroPolicy.NON_MONOTONIC
        )
        assert classify_trend(square, interval, tolerant) == Trend.NON_MONOTONIC

        tolerant_one_sided = ClassifierConfig(zero_tol=1e-9)
        assert classify_trend(square, interval, tolerant_one_sided) == Trend.INCREASING


# =============================================================================
# RESULT
# =============================================================================


class TestTrendResult:
    """Тесты TrendClassifier.evaluate"""

    def test_result_fields(self, square: Polynomial) -> None:
        result = TrendClassifier().evaluate(square, Interval(0, 5))
        assert result.trend == Trend.INCREASING
        assert result.derivative == Polynomial([(2, 1)])
        assert result.signs is not None
        assert result.signs.left_value == 0
        assert result.signs.right_value == 10
        assert result.signs.left_sign == 1
        assert result.signs.left_resolved is True
        assert result.signs.right_resolved is False
        assert "f'(5)=10" in result.details

    def test_constant_result_has_no_signs(self) -> None:
        result = TrendClassifier().evaluate(Polynomial([(3, 0)]), Interval(0, 1))
        assert result.trend == Trend.CONSTANT
        assert result.signs is None
        assert result.derivative.is_zero()

    def test_default_config(self) -> None:
        assert TrendClassifier().config == ClassifierConfig()

    def test_logs_decision(self, square: Polynomial, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="polycalc.classifier.trend")
        classify_trend(square, Interval(1, 2))
        assert any("INCREASING" in r.getMessage() for r in caplog.records)


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestTrendErrors:
    """Невалидные входы"""

    def test_degenerate_interval(self, square: Polynomial) -> None:
        with pytest.raises(InvalidInterval):
            classify_trend(square, Interval(5, 5))

    def test_inverted_interval_pair(self, square: Polynomial) -> None:
        with pytest.raises(InvalidInterval):
            classify_trend(square, (5, 2))

    def test_non_differentiable(self) -> None:
        with pytest.raises(TypeError):
            classify_trend(3.0, Interval(0, 1))  # type: ignore
