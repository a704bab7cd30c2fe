"""
Domain models and value objects.

Contains the ScientificNumber value type and its arithmetic.
"""

from bignum.core.domain.scientific_number import (
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

__all__ = [
    "ScientificNumber",
    "DivisionByZeroError",
    "zero",
    "one",
    "add",
    "sub",
    "mul",
    "div",
    "compare",
]
