"""
cfrac — цепные дроби

Конечные и периодические цепные дроби: построение, нормализация,
подходящие дроби, арифметика через float, сравнения, текстовый формат
и генераторы √n, e, π.
"""

from cfrac.core.domain import (
    PI_LITERAL,
    Coefficient,
    ContinuedFraction,
    Convergent,
    approximately_equal,
    e_continued_fraction,
    pi_continued_fraction,
    sqrt_continued_fraction,
)
from cfrac.core.errors import (
    CoefficientOverflowError,
    ContinuedFractionError,
    ConvergentIndexError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
)
from cfrac.core.math import gcd

__version__ = "0.1.0"

__all__ = [
    # Types
    "Coefficient",
    "ContinuedFraction",
    "Convergent",
    # Functions
    "approximately_equal",
    "gcd",
    "sqrt_continued_fraction",
    "e_continued_fraction",
    "pi_continued_fraction",
    "PI_LITERAL",
    # Exceptions
    "ContinuedFractionError",
    "InvalidFormatError",
    "ConvergentIndexError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "CoefficientOverflowError",
]
