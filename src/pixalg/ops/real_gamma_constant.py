"""
RealGammaConstant — гамма-преобразование с постоянным показателем

Формула:
    output = 0                              если input <= 0
    output = exp(constant * ln(input))      иначе

Clamp к нулю для неположительного входа — намеренная семантика библиотеки,
а не математическое тождество (input^constant при input < 0 не вычисляется,
NaN не возвращается). Вычисление через exp/ln, а не через pow.

constant не проверяется: отрицательные, нулевые и дробные значения допустимы.
"""

import math

from pixalg.core.math.numerical_safeguards import ieee_exp
from pixalg.ops.base import RealUnaryOperation


class RealGammaConstant(RealUnaryOperation):
    """
    Гамма с постоянным показателем.

    Examples:
        >>> RealGammaConstant(2.0).compute(0.0)
        0.0
        >>> RealGammaConstant(2.0).compute(-5.0)
        0.0
        >>> RealGammaConstant(3.0).compute(1.0)
        1.0
    """

    __slots__ = ("_constant",)

    def __init__(self, constant: float):
        self._constant = float(constant)

    @property
    def constant(self) -> float:
        """Показатель (read-only)."""
        return self._constant

    def compute(self, value: float) -> float:
        if value <= 0:
            return 0.0
        # exp(c * ln(x)) может переполниться → inf
        return ieee_exp(self._constant * math.log(value))

    def copy(self) -> "RealGammaConstant":
        return RealGammaConstant(self._constant)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RealGammaConstant):
            return NotImplemented
        return self._constant == other._constant

    def __hash__(self) -> int:
        return hash((RealGammaConstant, self._constant))

    def __repr__(self) -> str:
        return f"RealGammaConstant({self._constant!r})"
