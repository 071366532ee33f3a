"""
Domain models and value types.

Contains pixel value cells (UnsignedLongValue, DoubleValue) and RealPoint.
"""

from pixalg.core.domain.real_point import RealPoint
from pixalg.core.domain.real_value import DoubleValue
from pixalg.core.domain.unsigned_long import (
    WIRE_BYTE_ORDER,
    WIRE_SIZE_BYTES,
    UnsignedLongValue,
)

__all__ = [
    "DoubleValue",
    "RealPoint",
    "UnsignedLongValue",
    "WIRE_BYTE_ORDER",
    "WIRE_SIZE_BYTES",
]
