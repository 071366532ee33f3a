"""
pixalg — pixel-value and coordinate-transform algebra.

- UnsignedLongValue: unsigned 64-bit value over signed storage
- RealGammaConstant: per-element gamma operation (RealUnaryOperation contract)
- Scale: n-d diagonal affine transform with paired inverse and differential
"""

import logging

from pixalg.core.domain import DoubleValue, RealPoint, UnsignedLongValue
from pixalg.ops import RealGammaConstant, RealUnaryOperation
from pixalg.realtransform import (
    AffineGet,
    DimensionMismatchError,
    Scale,
    ScaleConfig,
    ZeroScaleFactorError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AffineGet",
    "DimensionMismatchError",
    "DoubleValue",
    "RealGammaConstant",
    "RealPoint",
    "RealUnaryOperation",
    "Scale",
    "ScaleConfig",
    "UnsignedLongValue",
    "ZeroScaleFactorError",
]
