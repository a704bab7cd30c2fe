"""
Core math modules для bignum

Нормализация пары mantissa/exponent и связанные численные примитивы.
"""

from bignum.core.math.normalization import (
    # Constants
    EXPONENT_MAX,
    EXPONENT_MIN,
    MANTISSA_LOWER,
    MANTISSA_UPPER,
    PRECISION_DIGITS,
    SCALE_CHUNK,
    # Exceptions
    ExponentOverflowError,
    # Functions
    align_mantissa,
    check_exponent,
    is_negligible,
    is_normalized,
    normalize,
    scale_by_power_of_ten,
    validate_mantissa,
)

__all__ = [
    # Normalization — Constants
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "MANTISSA_LOWER",
    "MANTISSA_UPPER",
    "PRECISION_DIGITS",
    "SCALE_CHUNK",
    # Normalization — Exceptions
    "ExponentOverflowError",
    # Normalization — Functions
    "align_mantissa",
    "check_exponent",
    "is_negligible",
    "is_normalized",
    "normalize",
    "scale_by_power_of_ten",
    "validate_mantissa",
]
