"""
Тесты для Interval — замкнутый интервал [a, b]

Проверяет:
1. a < b обязательно (вырожденный и перевёрнутый интервалы → InvalidInterval)
2. Конечность границ
3. Приведение пары (a, b) к Interval
"""

import pytest
from pydantic import ValidationError

from polycalc.core.domain import Interval, as_interval
from polycalc.core.errors import InvalidInterval, PolycalcError


class TestInterval:
    """Тесты модели Interval"""

    def test_valid_interval(self) -> None:
        i = Interval(-3, 3)
        assert i.a == -3.0
        assert i.b == 3.0
        assert i.width == 6.0
        assert i.midpoint == 0.0

    def test_keyword_construction(self) -> None:
        assert Interval(a=0, b=5) == Interval(0, 5)

    def test_degenerate_rejected(self) -> None:
        with pytest.raises(InvalidInterval, match="a < b"):
            Interval(5, 5)

    def test_inverted_rejected(self) -> None:
        with pytest.raises(InvalidInterval):
            Interval(5, 2)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(InvalidInterval, match="finite"):
            Interval(0, float("inf"))

        with pytest.raises(InvalidInterval):
            Interval(float("nan"), 1)

    def test_error_is_polycalc_error(self) -> None:
        with pytest.raises(PolycalcError):
            Interval(1, 0)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Interval("low", 1)

    def test_contains(self) -> None:
        i = Interval(0, 5)
        assert i.contains(0)
        assert i.contains(5)
        assert i.contains(2.5)
        assert not i.contains(-0.1)

    def test_immutable(self) -> None:
        i = Interval(0, 5)
        with pytest.raises(ValidationError):
            i.a = 1.0  # type: ignore

    def test_str(self) -> None:
        assert str(Interval(0, 5)) == "[0, 5]"
        assert str(Interval(-0.5, 2.25)) == "[-0.5, 2.25]"


class TestAsInterval:
    """Тесты as_interval"""

    def test_interval_passthrough(self) -> None:
        i = Interval(0, 1)
        assert as_interval(i) is i

    def test_pair_converted(self) -> None:
        assert as_interval((0, 5)) == Interval(0, 5)
        assert as_interval([-1, 1]) == Interval(-1, 1)

    def test_invalid_pair(self) -> None:
        with pytest.raises(InvalidInterval):
            as_interval((5, 2))

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError):
            as_interval(5)  # type: ignore

        with pytest.raises(TypeError):
            as_interval((1, 2, 3))  # type: ignore
