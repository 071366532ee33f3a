"""
Core math modules для pixalg

Битовые и IEEE-754 примитивы, на которых строятся value types и transforms.
"""

# Numerical Safeguards
from pixalg.core.math.numerical_safeguards import (
    # Constants
    NOT_A_NUMBER,
    POSITIVE_INFINITY,
    # Checks
    is_valid_float,
    validate_finite,
    # IEEE arithmetic
    ieee_divide,
    ieee_exp,
    ieee_reciprocal,
)

# Unsigned 64-bit emulation
from pixalg.core.math.unsigned64 import (
    # Constants
    BITS,
    INT64_MAX,
    INT64_MIN,
    MASK64,
    MODULUS,
    UINT64_MAX,
    # Normalization
    is_native64,
    to_signed64,
    to_unsigned64,
    validate_big_integer,
    validate_native64,
    # Ordering
    compare_unsigned,
    flip_sign_bit,
    # Modular arithmetic
    add64,
    divide_unsigned,
    mul64,
    remainder_unsigned,
    sub64,
)

__all__ = [
    # Numerical Safeguards — Constants
    "NOT_A_NUMBER",
    "POSITIVE_INFINITY",
    # Numerical Safeguards — Checks
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — IEEE arithmetic
    "ieee_divide",
    "ieee_exp",
    "ieee_reciprocal",
    # Unsigned64 — Constants
    "BITS",
    "INT64_MAX",
    "INT64_MIN",
    "MASK64",
    "MODULUS",
    "UINT64_MAX",
    # Unsigned64 — Normalization
    "is_native64",
    "to_signed64",
    "to_unsigned64",
    "validate_big_integer",
    "validate_native64",
    # Unsigned64 — Ordering
    "compare_unsigned",
    "flip_sign_bit",
    # Unsigned64 — Modular arithmetic
    "add64",
    "divide_unsigned",
    "mul64",
    "remainder_unsigned",
    "sub64",
]
