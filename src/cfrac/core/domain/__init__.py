"""
Domain models and value objects.

Contains the continued fraction value type, its coefficient model and
the generators of classical constants.
"""

from cfrac.core.domain.coefficient import Coefficient
from cfrac.core.domain.continued_fraction import (
    ContinuedFraction,
    Convergent,
    approximately_equal,
)
from cfrac.core.domain.generators import (
    PI_LITERAL,
    e_continued_fraction,
    pi_continued_fraction,
    sqrt_continued_fraction,
)

__all__ = [
    # Coefficient model
    "Coefficient",
    # Continued fraction model
    "ContinuedFraction",
    "Convergent",
    "approximately_equal",
    # Generators
    "PI_LITERAL",
    "sqrt_continued_fraction",
    "e_continued_fraction",
    "pi_continued_fraction",
]
