"""
UnsignedLongValue — беззнаковое 64-битное значение пикселя

Хранит bit pattern в знаковой 64-битной ячейке. get() возвращает сырой
знаковый pattern (может быть отрицательным — это документированное поведение),
get_big_integer() — беззнаковую интерпретацию в [0, 2^64 - 1].

Порядок, печать и извлечение величины используют беззнаковую интерпретацию.
Конструирование из arbitrary-precision int молча усекает до младших 64 бит.

Mutable value type: set*() нельзя вызывать на экземпляре, разделяемом между
параллельными контекстами. compare_to() и прочие read-only методы безопасны.
"""

import math
from typing import Final

from pixalg.core.math.numerical_safeguards import is_valid_float
from pixalg.core.math.unsigned64 import (
    BITS,
    UINT64_MAX,
    add64,
    compare_unsigned,
    divide_unsigned,
    mul64,
    remainder_unsigned,
    sub64,
    to_signed64,
    to_unsigned64,
    validate_big_integer,
    validate_native64,
)

# Размер wire-представления (байт)
WIRE_SIZE_BYTES: Final[int] = BITS // 8

# Порядок байт wire-представления
WIRE_BYTE_ORDER: Final[str] = "big"


class UnsignedLongValue:
    """
    Беззнаковое 64-битное целое поверх знакового хранения.

    Examples:
        >>> u = UnsignedLongValue(-1)
        >>> u.get()
        -1
        >>> u.get_big_integer()
        18446744073709551615
        >>> u > UnsignedLongValue(1)
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        """
        Args:
            value: Native 64-bit pattern (знаковый или беззнаковый)

        Raises:
            TypeError: Если value не int
            ValueError: Если value не помещается в 64 бита
        """
        self._value = 0
        self.set(value)

    @classmethod
    def from_big_integer(cls, value: int) -> "UnsignedLongValue":
        """
        Конструирование из arbitrary-precision int (value mod 2^64).

        Examples:
            >>> UnsignedLongValue.from_big_integer(1 << 64).get()
            0
        """
        result = cls()
        result.set_big_integer(value)
        return result

    @classmethod
    def from_bytes(cls, data: bytes) -> "UnsignedLongValue":
        """
        Декодирование из 8 байт (big-endian, беззнаковая интерпретация).

        Raises:
            ValueError: Если len(data) != 8
        """
        if len(data) != WIRE_SIZE_BYTES:
            raise ValueError(
                f"expected {WIRE_SIZE_BYTES} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, WIRE_BYTE_ORDER, signed=False))

    # =========================================================================
    # ДОСТУП К BIT PATTERN
    # =========================================================================

    def set(self, value: int) -> None:
        """
        Запись native 64-bit pattern без преобразования.

        Допускается как знаковая (-1), так и беззнаковая (2^64 - 1) запись
        одного и того же pattern.
        """
        self._value = to_signed64(validate_native64(value))

    def get(self) -> int:
        """Сырой знаковый bit pattern в [-2^63, 2^63 - 1]."""
        return self._value

    def set_big_integer(self, value: int) -> None:
        """Запись value mod 2^64 для любого int (в т.ч. отрицательного и > 64 бит)."""
        self._value = to_signed64(validate_big_integer(value))

    def get_big_integer(self) -> int:
        """Беззнаковая интерпретация в [0, 2^64 - 1]."""
        return to_unsigned64(self._value)

    def to_bytes(self) -> bytes:
        """8 байт big-endian."""
        return self.get_big_integer().to_bytes(WIRE_SIZE_BYTES, WIRE_BYTE_ORDER)

    # =========================================================================
    # REAL-ДОСТУП (для per-pixel операций)
    # =========================================================================

    def get_real_double(self) -> float:
        """Беззнаковое значение как float (с потерей точности выше 2^53)."""
        return float(self.get_big_integer())

    def set_real(self, value: float) -> None:
        """
        Запись округлённого real-значения (round half up, затем mod 2^64).

        Non-finite значения насыщаются: +inf → 2^64 - 1, -inf и NaN → 0.
        Метод тотален, поэтому переполнение per-pixel операции не прерывает
        обработку элемента.
        """
        if not is_valid_float(value):
            self.set_big_integer(UINT64_MAX if value > 0 else 0)
            return
        self.set_big_integer(math.floor(value + 0.5))

    def get_min_value(self) -> int:
        return 0

    def get_max_value(self) -> int:
        return UINT64_MAX

    def bits_per_pixel(self) -> int:
        return BITS

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare_to(self, other: "UnsignedLongValue") -> int:
        """
        Беззнаковое сравнение.

        Returns:
            -1, 0 или 1
        """
        return compare_unsigned(self._value, other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnsignedLongValue):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "UnsignedLongValue") -> bool:
        if not isinstance(other, UnsignedLongValue):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "UnsignedLongValue") -> bool:
        if not isinstance(other, UnsignedLongValue):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "UnsignedLongValue") -> bool:
        if not isinstance(other, UnsignedLongValue):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "UnsignedLongValue") -> bool:
        if not isinstance(other, UnsignedLongValue):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Mutable: не hashable
    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # АРИФМЕТИКА ПО МОДУЛЮ 2^64 (in place)
    # =========================================================================

    def add(self, other: "UnsignedLongValue") -> None:
        self._value = add64(self._value, other._value)

    def sub(self, other: "UnsignedLongValue") -> None:
        self._value = sub64(self._value, other._value)

    def mul(self, other: "UnsignedLongValue") -> None:
        self._value = mul64(self._value, other._value)

    def div(self, other: "UnsignedLongValue") -> None:
        """
        Беззнаковое целочисленное деление.

        Raises:
            ZeroDivisionError: Если other равен 0
        """
        self._value = divide_unsigned(self._value, other._value)

    def mod(self, other: "UnsignedLongValue") -> None:
        """
        Беззнаковый остаток от деления.

        Raises:
            ZeroDivisionError: Если other равен 0
        """
        self._value = remainder_unsigned(self._value, other._value)

    def inc(self) -> None:
        self._value = add64(self._value, 1)

    def dec(self) -> None:
        self._value = sub64(self._value, 1)

    def set_zero(self) -> None:
        self._value = 0

    def set_one(self) -> None:
        self._value = 1

    # =========================================================================
    # КОПИРОВАНИЕ
    # =========================================================================

    def copy(self) -> "UnsignedLongValue":
        """Независимый экземпляр с тем же bit pattern."""
        return UnsignedLongValue(self._value)

    def create_variable(self) -> "UnsignedLongValue":
        """Новый экземпляр со значением 0."""
        return UnsignedLongValue()

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __int__(self) -> int:
        return self.get_big_integer()

    def __index__(self) -> int:
        return self.get_big_integer()

    def __str__(self) -> str:
        return str(self.get_big_integer())

    def __repr__(self) -> str:
        return f"UnsignedLongValue({self.get_big_integer()})"
