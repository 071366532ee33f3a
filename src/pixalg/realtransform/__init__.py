"""
Координатные transforms.

Контракт AffineGet и диагональный Scale.
"""

from pixalg.realtransform.base import AffineGet, DimensionMismatchError, check_dimensions
from pixalg.realtransform.scale import (
    DEFAULT_SCALE_CONFIG,
    Scale,
    ScaleConfig,
    ZeroScaleFactorError,
)

__all__ = [
    "AffineGet",
    "DEFAULT_SCALE_CONFIG",
    "DimensionMismatchError",
    "Scale",
    "ScaleConfig",
    "ZeroScaleFactorError",
    "check_dimensions",
]
