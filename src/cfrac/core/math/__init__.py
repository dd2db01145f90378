"""
Core math modules для цепных дробей

Численные примитивы с гарантией фиксированной ширины и стабильности.
"""

# Numerical Safeguards
from cfrac.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_APPROX_EQUAL,
    EPS_DIVISOR,
    EPS_FRACTIONAL,
    # Limits
    DEFAULT_MAX_TERMS,
    INT64_MAX,
    INT64_MIN,
    PERIODIC_EVALUATION_TERMS,
    # Float validation
    is_negligible,
    is_valid_float,
    validate_finite,
    validate_term_limit,
    # Fixed-width integers
    checked_recurrence_step,
    floor_to_int64,
    gcd,
    trunc_divmod,
    validate_int64,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_APPROX_EQUAL",
    "EPS_DIVISOR",
    "EPS_FRACTIONAL",
    # Numerical Safeguards — Limits
    "DEFAULT_MAX_TERMS",
    "INT64_MAX",
    "INT64_MIN",
    "PERIODIC_EVALUATION_TERMS",
    # Numerical Safeguards — Float validation
    "is_negligible",
    "is_valid_float",
    "validate_finite",
    "validate_term_limit",
    # Numerical Safeguards — Fixed-width integers
    "checked_recurrence_step",
    "floor_to_int64",
    "gcd",
    "trunc_divmod",
    "validate_int64",
]
