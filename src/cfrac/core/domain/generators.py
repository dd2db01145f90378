"""
Generators — Цепные дроби классических констант

Свободные функции, строящие разложения √n, e и π:
- sqrt_continued_fraction: периодическое разложение квадратичной иррациональности
- e_continued_fraction: закрытая формула [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]
- pi_continued_fraction: разложение float-литерала π (приближение)

АЛГОРИТМ √n:
    m_0 = 0, d_0 = 1, a_0 = floor(√n)
    m_{k+1} = d_k * a_k - m_k
    d_{k+1} = (n - m_{k+1}²) / d_k
    a_{k+1} = (a_0 + m_{k+1}) / d_{k+1}
    Период завершается, когда a_{k+1} == 2 * a_0.
"""

import logging
import math
from typing import Final

from cfrac.core.domain.continued_fraction import ContinuedFraction
from cfrac.core.errors import InvalidArgumentError
from cfrac.core.math.numerical_safeguards import (
    DEFAULT_MAX_TERMS,
    validate_int64,
    validate_term_limit,
)

logger = logging.getLogger(__name__)

# Литерал π для pi_continued_fraction
PI_LITERAL: Final[float] = 3.14159265358979323846


def sqrt_continued_fraction(n: int, max_terms: int = DEFAULT_MAX_TERMS) -> ContinuedFraction:
    """
    Цепная дробь для √n.

    Для полного квадрата возвращается конечная дробь [√n]. Иначе —
    периодическая дробь [a0; (a1, ..., 2*a0)], построенная через
    create_periodic. Если период длиннее max_terms, сохраняются первые
    max_terms коэффициентов после a0.

    Args:
        n: Подкоренное выражение (n >= 0)
        max_terms: Максимальное число коэффициентов периода (default: 20)

    Returns:
        ContinuedFraction для √n

    Raises:
        InvalidArgumentError: Если n < 0 или max_terms < 1

    Examples:
        >>> sqrt_continued_fraction(2).to_string()
        '[1; (2)]'
        >>> sqrt_continued_fraction(16).to_string()
        '[4]'
    """
    if n < 0:
        raise InvalidArgumentError(f"Cannot take the square root of a negative number: {n}")
    validate_int64(n, "radicand")
    validate_term_limit(max_terms)

    a0 = math.isqrt(n)
    if a0 * a0 == n:
        return ContinuedFraction(a0)

    period = []
    m, d, a = 0, 1, a0
    for _ in range(max_terms):
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        period.append(a)

        # Критерий завершения периода для √n
        if a == 2 * a0:
            logger.debug("sqrt(%d): period of length %d detected", n, len(period))
            break
    else:
        logger.debug("sqrt(%d): term budget %d exhausted before period end", n, max_terms)

    return ContinuedFraction.create_periodic([a0], period)


def e_continued_fraction(max_terms: int = DEFAULT_MAX_TERMS) -> ContinuedFraction:
    """
    Конечное усечение цепной дроби числа e.

    Паттерн: [2; 1, 2, 1, 1, 4, 1, 1, 6, ...] — коэффициент с индексом
    i (i % 3 == 2) равен 2 * (i + 1) / 3, остальные равны 1.

    Args:
        max_terms: Число коэффициентов, включая a0 (default: 20)

    Returns:
        Конечная ContinuedFraction (точное разложение, без схлопывания единиц)
    """
    validate_term_limit(max_terms)

    terms = [2]
    for i in range(1, max_terms):
        if i % 3 == 2:
            terms.append(2 * ((i + 1) // 3))
        else:
            terms.append(1)

    return ContinuedFraction.from_expansion(terms)


def pi_continued_fraction(max_terms: int = DEFAULT_MAX_TERMS) -> ContinuedFraction:
    """
    Приближённая цепная дробь числа π.

    ВНИМАНИЕ: это разложение float-литерала PI_LITERAL через from_double,
    а не каноническое разложение π. Коэффициенты после ~12-го определяются
    погрешностью double, а не самим числом π.

    Args:
        max_terms: Максимальное число коэффициентов (default: 20)
    """
    return ContinuedFraction.from_double(PI_LITERAL, max_terms)
