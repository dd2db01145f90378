"""
Numerical Safeguards — Safe Integer & Float Primitives

Модуль обеспечивает численную устойчивость операций над цепными дробями:
- Epsilon-параметры для разложения float, деления и приближённого сравнения
- Фиксированная ширина коэффициентов (знаковые 64-битные целые)
- Проверяемый шаг рекуррентного соотношения подходящих дробей
- Целочисленное деление с усечением к нулю (алгоритм Евклида)
- Валидация float и целочисленных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни один коэффициент не выходит за [INT64_MIN, INT64_MAX]
2. Переполнение никогда не происходит молча (CoefficientOverflowError)
3. NaN/Inf никогда не попадают в разложение (InvalidArgumentError)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from cfrac.core.errors import CoefficientOverflowError, InvalidArgumentError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог дробной части при разложении float (from_double)
# Если |fractional| < EPS_FRACTIONAL → разложение завершается
EPS_FRACTIONAL: Final[float] = 1e-12

# Порог модуля делителя для оператора деления
# Если |divisor| < EPS_DIVISOR → DivisionByZeroError
EPS_DIVISOR: Final[float] = 1e-15

# Epsilon по умолчанию для approximately_equal
EPS_APPROX_EQUAL: Final[float] = 1e-12


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ГРАНИЦЫ И ЛИМИТЫ
# =============================================================================

# Коэффициенты и члены подходящих дробей: знаковые 64-битные целые
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Лимит коэффициентов по умолчанию для from_double, арифметики и генераторов
DEFAULT_MAX_TERMS: Final[int] = 20

# Сколько коэффициентов разворачивается при вычислении периодической дроби
PERIODIC_EVALUATION_TERMS: Final[int] = 64


# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_negligible(value: float, eps: float) -> bool:
    """
    Проверка, что значение по модулю строго меньше eps.

    Args:
        value: Проверяемое значение
        eps: Порог (должен быть положительным)

    Returns:
        True если abs(value) < eps

    Examples:
        >>> is_negligible(1e-16, 1e-15)
        True
        >>> is_negligible(1e-15, 1e-15)
        False
        >>> is_negligible(-0.5, 1e-15)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(value) < eps


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что float конечен.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value равен NaN или Inf
    """
    if not is_valid_float(value):
        raise InvalidArgumentError(
            f"{name} must be a finite float (not NaN/Inf), got {value}"
        )


def validate_term_limit(max_terms: int, name: str = "max_terms") -> None:
    """
    Валидация лимита количества коэффициентов.

    Args:
        max_terms: Лимит коэффициентов
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если max_terms не целое положительное число
    """
    if isinstance(max_terms, bool) or not isinstance(max_terms, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(max_terms).__name__}")

    if max_terms < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {max_terms}")


# =============================================================================
# ФИКСИРОВАННАЯ ШИРИНА ЦЕЛЫХ
# =============================================================================


def validate_int64(value: int, name: str = "coefficient") -> int:
    """
    Проверка, что целое помещается в знаковые 64 бита.

    Args:
        value: Проверяемое значение
        name: Имя величины (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        CoefficientOverflowError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise CoefficientOverflowError(
            f"{name} {value} does not fit into a signed 64-bit integer"
        )
    return value


def checked_recurrence_step(a: int, prev: int, prev2: int) -> int:
    """
    Один шаг рекуррентного соотношения: a * prev + prev2.

    Используется для числителей и знаменателей подходящих дробей:
        p(i) = a(i) * p(i-1) + p(i-2)
        q(i) = a(i) * q(i-1) + q(i-2)

    Args:
        a: Текущий коэффициент
        prev: Член с индексом i-1
        prev2: Член с индексом i-2

    Returns:
        Новый член последовательности

    Raises:
        CoefficientOverflowError: Если результат вне int64

    Examples:
        >>> checked_recurrence_step(7, 3, 1)
        22
        >>> checked_recurrence_step(2**62, 4, 0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        CoefficientOverflowError: ...
    """
    return validate_int64(a * prev + prev2, name="convergent term")


def floor_to_int64(value: float) -> int:
    """
    Целая часть float (floor) с проверкой диапазона int64.

    Args:
        value: Конечное float значение

    Returns:
        floor(value) как int

    Raises:
        CoefficientOverflowError: Если floor(value) вне int64
    """
    return validate_int64(math.floor(value))


def trunc_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от встроенного divmod (округление к -inf), частное
    усекается к нулю, а остаток имеет знак делимого:
        numerator == quotient * denominator + remainder
        abs(remainder) < abs(denominator)

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой)

    Returns:
        (quotient, remainder)

    Examples:
        >>> trunc_divmod(7, 3)
        (2, 1)
        >>> trunc_divmod(-7, 3)
        (-2, -1)
        >>> trunc_divmod(7, -3)
        (-2, 1)
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    remainder = numerator - quotient * denominator
    return quotient, remainder


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Результат всегда неотрицательный; gcd(0, 0) == 0.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(7, 0)
        7
    """
    while b != 0:
        a, b = b, a % b
    return abs(a)
