"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-параметры и целочисленные границы
2. Валидацию float и лимита коэффициентов
3. Фиксированную ширину int64 и проверяемый шаг рекурренты
4. Деление с усечением к нулю
5. НОД
"""

import math

import pytest

from cfrac.core.errors import (
    CoefficientOverflowError,
    ContinuedFractionError,
    InvalidArgumentError,
)
from cfrac.core.math.numerical_safeguards import (
    DEFAULT_MAX_TERMS,
    EPS_APPROX_EQUAL,
    EPS_DIVISOR,
    EPS_FRACTIONAL,
    INT64_MAX,
    INT64_MIN,
    PERIODIC_EVALUATION_TERMS,
    checked_recurrence_step,
    floor_to_int64,
    gcd,
    is_negligible,
    is_valid_float,
    trunc_divmod,
    validate_finite,
    validate_int64,
    validate_term_limit,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Тесты epsilon-параметров и лимитов"""

    def test_epsilon_values(self) -> None:
        """Значения epsilon совпадают с документированными"""
        assert EPS_FRACTIONAL == 1e-12
        assert EPS_DIVISOR == 1e-15
        assert EPS_APPROX_EQUAL == 1e-12

    def test_int64_bounds(self) -> None:
        """Границы знакового 64-битного целого"""
        assert INT64_MAX == 9223372036854775807
        assert INT64_MIN == -9223372036854775808

    def test_term_limits_positive(self) -> None:
        """Лимиты коэффициентов положительны"""
        assert DEFAULT_MAX_TERMS == 20
        assert PERIODIC_EVALUATION_TERMS > DEFAULT_MAX_TERMS


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ FLOAT
# =============================================================================


class TestFloatValidation:
    """Тесты is_valid_float, is_negligible, validate_finite"""

    def test_valid_floats(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(math.pi)

    def test_invalid_floats(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_negligible_strict_boundary(self) -> None:
        """Граница eps не считается пренебрежимо малой (строгое <)"""
        assert is_negligible(0.0, EPS_DIVISOR)
        assert is_negligible(1e-16, EPS_DIVISOR)
        assert is_negligible(-1e-16, EPS_DIVISOR)
        assert not is_negligible(EPS_DIVISOR, EPS_DIVISOR)
        assert not is_negligible(-0.5, EPS_DIVISOR)

    def test_negligible_invalid_eps_raises(self) -> None:
        """Невалидный eps вызывает ошибку"""
        with pytest.raises(ValueError, match="eps must be positive"):
            is_negligible(1.0, 0.0)

    def test_validate_finite(self) -> None:
        """validate_finite пропускает конечные и отвергает NaN/Inf"""
        validate_finite(1.5, "value")

        with pytest.raises(InvalidArgumentError, match="finite"):
            validate_finite(float("nan"), "value")

        with pytest.raises(InvalidArgumentError, match="value"):
            validate_finite(float("inf"), "value")

    def test_validate_term_limit(self) -> None:
        """Лимит коэффициентов — положительное int"""
        validate_term_limit(1)
        validate_term_limit(DEFAULT_MAX_TERMS)

        with pytest.raises(InvalidArgumentError, match=">= 1"):
            validate_term_limit(0)

        with pytest.raises(InvalidArgumentError, match="must be an int"):
            validate_term_limit(2.5)  # type: ignore[arg-type]

        with pytest.raises(InvalidArgumentError, match="must be an int"):
            validate_term_limit(True)


# =============================================================================
# ТЕСТЫ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================


class TestFixedWidth:
    """Тесты validate_int64, checked_recurrence_step, floor_to_int64"""

    def test_bounds_accepted(self) -> None:
        """Границы диапазона допустимы"""
        assert validate_int64(INT64_MAX) == INT64_MAX
        assert validate_int64(INT64_MIN) == INT64_MIN
        assert validate_int64(0) == 0

    def test_out_of_range_raises(self) -> None:
        """Выход за границы → CoefficientOverflowError"""
        with pytest.raises(CoefficientOverflowError, match="64-bit"):
            validate_int64(INT64_MAX + 1)

        with pytest.raises(CoefficientOverflowError):
            validate_int64(INT64_MIN - 1)

    def test_overflow_error_is_builtin_overflow(self) -> None:
        """CoefficientOverflowError перехватывается как OverflowError"""
        with pytest.raises(OverflowError):
            validate_int64(2**64)

        with pytest.raises(ContinuedFractionError):
            validate_int64(2**64)

    def test_recurrence_step(self) -> None:
        """a * prev + prev2"""
        assert checked_recurrence_step(7, 3, 1) == 22
        assert checked_recurrence_step(16, 22, 3) == 355
        assert checked_recurrence_step(-3, -2, 1) == 7

    def test_recurrence_step_overflow(self) -> None:
        """Переполнение шага рекурренты не происходит молча"""
        with pytest.raises(CoefficientOverflowError, match="convergent term"):
            checked_recurrence_step(2**62, 4, 0)

    def test_floor_to_int64(self) -> None:
        """floor с проверкой диапазона"""
        assert floor_to_int64(2.7) == 2
        assert floor_to_int64(-0.5) == -1
        assert floor_to_int64(3.0) == 3

        with pytest.raises(CoefficientOverflowError):
            floor_to_int64(1e300)


# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННОГО ДЕЛЕНИЯ
# =============================================================================


class TestTruncDivmod:
    """Тесты trunc_divmod (усечение к нулю)"""

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [
            (7, 3, (2, 1)),
            (-7, 3, (-2, -1)),
            (7, -3, (-2, 1)),
            (-7, -3, (2, -1)),
            (6, 3, (2, 0)),
            (0, 5, (0, 0)),
            (2, 5, (0, 2)),
        ],
    )
    def test_truncation(self, numerator: int, denominator: int, expected: tuple) -> None:
        """Частное усекается к нулю, остаток имеет знак делимого"""
        assert trunc_divmod(numerator, denominator) == expected

    def test_identity_holds(self) -> None:
        """numerator == q * denominator + r, |r| < |denominator|"""
        for n in range(-20, 21):
            for d in (-7, -3, -1, 1, 2, 5):
                q, r = trunc_divmod(n, d)
                assert q * d + r == n
                assert abs(r) < abs(d)


# =============================================================================
# ТЕСТЫ НОД
# =============================================================================


class TestGcd:
    """Тесты gcd"""

    def test_basic(self) -> None:
        """Базовые значения"""
        assert gcd(12, 18) == 6
        assert gcd(355, 113) == 1
        assert gcd(7, 0) == 7
        assert gcd(0, 7) == 7

    def test_always_non_negative(self) -> None:
        """Результат неотрицательный при любых знаках"""
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(-12, -18) == 6

    def test_zero_zero(self) -> None:
        """gcd(0, 0) == 0"""
        assert gcd(0, 0) == 0

    def test_matches_math_gcd(self) -> None:
        """Совпадает с math.gcd"""
        for a in range(-30, 31, 7):
            for b in range(-25, 26, 5):
                assert gcd(a, b) == math.gcd(a, b)
