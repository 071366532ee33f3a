"""
DoubleValue — изменяемая real-ячейка (выход per-pixel операций)
"""


class DoubleValue:
    """Изменяемое значение float64."""

    __slots__ = ("_value",)

    def __init__(self, value: float = 0.0):
        self._value = float(value)

    def get_real_double(self) -> float:
        return self._value

    def set_real(self, value: float) -> None:
        self._value = float(value)

    def copy(self) -> "DoubleValue":
        return DoubleValue(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleValue):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"DoubleValue({self._value!r})"
