"""
Per-element скалярные операции.

Контракт RealUnaryOperation и его реализации.
"""

from pixalg.ops.base import RealSink, RealSource, RealUnaryOperation
from pixalg.ops.real_gamma_constant import RealGammaConstant

__all__ = [
    "RealGammaConstant",
    "RealSink",
    "RealSource",
    "RealUnaryOperation",
]
