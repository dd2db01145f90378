"""
Тесты для генераторов цепных дробей констант

Проверяет:
1. √n: полные квадраты, период, обрезка по max_terms
2. e: закрытая формула коэффициентов
3. π: разложение float-литерала
"""

import math

import pytest

from cfrac.core.domain import (
    PI_LITERAL,
    e_continued_fraction,
    pi_continued_fraction,
    sqrt_continued_fraction,
)
from cfrac.core.errors import CoefficientOverflowError, InvalidArgumentError


class TestSqrt:
    """Тесты sqrt_continued_fraction"""

    @pytest.mark.parametrize("n, root", [(0, 0), (1, 1), (4, 2), (16, 4), (144, 12)])
    def test_perfect_square(self, n: int, root: int) -> None:
        """Полный квадрат → конечная дробь из одного коэффициента"""
        cf = sqrt_continued_fraction(n)
        assert cf.get_coefficients() == [root]
        assert cf.is_finite()

    def test_sqrt2(self) -> None:
        """√2 = [1; (2)]"""
        cf = sqrt_continued_fraction(2, 10)
        assert cf.to_string() == "[1; (2)]"
        assert cf.is_periodic()
        assert cf.to_double() * cf.to_double() == pytest.approx(2.0, abs=1e-10)

    def test_sqrt3(self) -> None:
        """√3 = [1; (1, 2)], маркер защищает ведущую единицу периода"""
        cf = sqrt_continued_fraction(3)
        assert cf.to_string() == "[1; (1, 2)]"
        assert cf.to_double() == pytest.approx(math.sqrt(3), abs=1e-12)

    def test_sqrt13_period_collapses(self) -> None:
        """√13: период (1, 1, 1, 1, 6) нормализуется до (8)"""
        cf = sqrt_continued_fraction(13, 15)
        assert cf.is_periodic()
        assert cf.to_string() == "[3; (8)]"

    def test_sqrt13_truncated(self) -> None:
        """Период длиннее max_terms обрезается"""
        cf = sqrt_continued_fraction(13, max_terms=2)
        assert cf.to_string() == "[3; (1, 1)]"
        assert cf.is_periodic()

    @pytest.mark.parametrize("n", [2, 3, 5, 6, 8, 10, 11, 12, 15])
    def test_square_close_to_radicand(self, n: int) -> None:
        """(√n)² ≈ n для периодов без внутренних единиц"""
        value = sqrt_continued_fraction(n).to_double()
        assert value * value == pytest.approx(n, rel=1e-6)

    def test_negative_radicand(self) -> None:
        """n < 0 → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="negative"):
            sqrt_continued_fraction(-1)

    def test_invalid_max_terms(self) -> None:
        """max_terms < 1 → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError):
            sqrt_continued_fraction(2, 0)

    def test_radicand_out_of_range(self) -> None:
        """n вне int64 → CoefficientOverflowError"""
        with pytest.raises(CoefficientOverflowError):
            sqrt_continued_fraction(2**64)


class TestE:
    """Тесты e_continued_fraction"""

    def test_pattern(self) -> None:
        """[2; 1, 2, 1, 1, 4, 1, 1, 6, ...]"""
        cf = e_continued_fraction(20)
        assert cf.get_coefficients()[:9] == [2, 1, 2, 1, 1, 4, 1, 1, 6]
        assert cf.size() == 20
        assert cf.is_finite()

    def test_value(self) -> None:
        """Значение близко к math.e"""
        assert e_continued_fraction(20).to_double() == pytest.approx(math.e, abs=1e-10)

    def test_single_term(self) -> None:
        """max_terms=1 → [2]"""
        assert e_continued_fraction(1).get_coefficients() == [2]

    def test_convergents(self) -> None:
        """Подходящие дроби e: 2, 3, 8/3, 11/4, 19/7"""
        cf = e_continued_fraction(10)
        expected = [(2, 1), (3, 1), (8, 3), (11, 4), (19, 7)]
        assert [cf.convergent(n) for n in range(5)] == expected

    def test_invalid_max_terms(self) -> None:
        with pytest.raises(InvalidArgumentError):
            e_continued_fraction(0)


class TestPi:
    """Тесты pi_continued_fraction"""

    def test_literal(self) -> None:
        assert PI_LITERAL == math.pi

    def test_prefix(self) -> None:
        """Первые коэффициенты [3; 7, 15, 1, 292]"""
        cf = pi_continued_fraction(5)
        assert cf.get_coefficients() == [3, 7, 15, 1, 292]

    def test_value(self) -> None:
        """Значение близко к math.pi"""
        assert pi_continued_fraction().to_double() == pytest.approx(math.pi, abs=1e-9)

    def test_classic_convergents(self) -> None:
        """22/7 и 355/113 среди подходящих дробей"""
        cf = pi_continued_fraction(5)
        assert cf.convergent(1) == (22, 7)
        assert cf.convergent(2) == (333, 106)
        assert cf.convergent(3) == (355, 113)
