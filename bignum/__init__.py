"""
bignum — числа в научной нотации для величин за пределами float

    >>> from bignum import ScientificNumber
    >>> str(ScientificNumber.new(5.0, 3) * ScientificNumber.new(4.0, 2))
    '2.000e6'
"""

import logging

from bignum.core.domain import (
    DivisionByZeroError,
    ScientificNumber,
    add,
    compare,
    div,
    mul,
    one,
    sub,
    zero,
)
from bignum.core.formatting import (
    DISPLAY_DECIMALS_DEFAULT,
    SHORT_PRECISION_DEFAULT,
    FormatConfig,
    NumberFormatter,
    to_display_string,
    to_short_string,
)
from bignum.core.math import (
    EXPONENT_MAX,
    EXPONENT_MIN,
    PRECISION_DIGITS,
    ExponentOverflowError,
    normalize,
)

# Библиотека не настраивает логирование, это делает приложение
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Types
    "ScientificNumber",
    # Exceptions
    "DivisionByZeroError",
    "ExponentOverflowError",
    # Constructors
    "zero",
    "one",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "compare",
    "normalize",
    # Formatting
    "FormatConfig",
    "NumberFormatter",
    "to_display_string",
    "to_short_string",
    # Constants
    "DISPLAY_DECIMALS_DEFAULT",
    "SHORT_PRECISION_DEFAULT",
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "PRECISION_DIGITS",
]
