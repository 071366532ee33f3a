"""
Unsigned64 — беззнаковая 64-битная арифметика поверх знакового хранения

Значение из диапазона [0, 2^64 - 1] хранится как знаковый 64-битный
bit pattern (two's complement). Python int не ограничен по ширине,
поэтому нормализация выполняется явно:
- to_signed64: любое int → знаковый pattern в [-2^63, 2^63 - 1]
- to_unsigned64: любое int → беззнаковое значение в [0, 2^64 - 1]

Беззнаковое сравнение через flip знакового бита:
    compare_unsigned(a, b) == compare_signed(a ^ INT64_MIN, b ^ INT64_MIN)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_signed64(to_unsigned64(x)) == to_signed64(x) (один и тот же bit pattern)
2. Усечение до младших 64 бит — молчаливое (не ошибка)
3. compare_unsigned согласован с порядком to_unsigned64
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BITS: Final[int] = 64

# Знаковый диапазон native 64-bit
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Беззнаковый диапазон
UINT64_MAX: Final[int] = (1 << 64) - 1

# Маска младших 64 бит
MASK64: Final[int] = UINT64_MAX

# Модуль усечения
MODULUS: Final[int] = 1 << 64


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def to_unsigned64(value: int) -> int:
    """
    Младшие 64 бита как беззнаковое значение (value mod 2^64).

    Examples:
        >>> to_unsigned64(-1)
        18446744073709551615
        >>> to_unsigned64(1 << 64)
        0
        >>> to_unsigned64(42)
        42
    """
    return value & MASK64


def to_signed64(value: int) -> int:
    """
    Младшие 64 бита как знаковый two's complement pattern.

    Examples:
        >>> to_signed64(18446744073709551615)
        -1
        >>> to_signed64(1 << 63)
        -9223372036854775808
        >>> to_signed64(-1)
        -1
    """
    value &= MASK64
    if value > INT64_MAX:
        value -= MODULUS
    return value


def is_native64(value: int) -> bool:
    """
    Проверка, что value — валидный native 64-bit pattern (знаковый или беззнаковый).

    Допустимый диапазон: [INT64_MIN, UINT64_MAX].
    """
    return INT64_MIN <= value <= UINT64_MAX


def validate_native64(value: int) -> int:
    """
    Валидация native 64-bit pattern.

    Raises:
        TypeError: Если value не int (bool не допускается)
        ValueError: Если value вне [INT64_MIN, UINT64_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int bit pattern, got {type(value).__name__}")
    if not is_native64(value):
        raise ValueError(
            f"value {value} does not fit in 64 bits "
            f"(expected range [{INT64_MIN}, {UINT64_MAX}])"
        )
    return value


def validate_big_integer(value: int) -> int:
    """
    Валидация arbitrary-precision integer (любой ширины).

    Raises:
        TypeError: Если value не int (bool не допускается)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


# =============================================================================
# БЕЗЗНАКОВОЕ СРАВНЕНИЕ
# =============================================================================


def flip_sign_bit(signed: int) -> int:
    """
    Инверсия знакового бита знакового pattern.

    Переводит беззнаковый порядок в знаковый порядок той же ширины.

    Examples:
        >>> flip_sign_bit(0)
        -9223372036854775808
        >>> flip_sign_bit(-1)
        9223372036854775807
    """
    return signed ^ INT64_MIN


def compare_unsigned(a: int, b: int) -> int:
    """
    Беззнаковое сравнение двух знаковых 64-bit patterns.

    Знаковое сравнение напрямую неприменимо: pattern с установленным старшим
    битом знаково отрицателен, но беззнаково больше любого pattern без него.

    Args:
        a: Знаковый pattern в [INT64_MIN, INT64_MAX]
        b: Знаковый pattern в [INT64_MIN, INT64_MAX]

    Returns:
        -1, 0 или 1

    Examples:
        >>> compare_unsigned(-1, 1)
        1
        >>> compare_unsigned(INT64_MAX, INT64_MIN)
        -1
        >>> compare_unsigned(-9000, -9000)
        0
    """
    x = flip_sign_bit(a)
    y = flip_sign_bit(b)
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


# =============================================================================
# МОДУЛЯРНАЯ АРИФМЕТИКА
# =============================================================================


def add64(a: int, b: int) -> int:
    """Сумма по модулю 2^64 как знаковый pattern."""
    return to_signed64(a + b)


def sub64(a: int, b: int) -> int:
    """Разность по модулю 2^64 как знаковый pattern."""
    return to_signed64(a - b)


def mul64(a: int, b: int) -> int:
    """Произведение по модулю 2^64 как знаковый pattern."""
    return to_signed64(a * b)


def divide_unsigned(dividend: int, divisor: int) -> int:
    """
    Беззнаковое целочисленное деление двух patterns (результат — знаковый pattern).

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> divide_unsigned(-1, 2)
        9223372036854775807
        >>> divide_unsigned(10, 3)
        3
    """
    return to_signed64(to_unsigned64(dividend) // to_unsigned64(divisor))


def remainder_unsigned(dividend: int, divisor: int) -> int:
    """
    Беззнаковый остаток от деления (результат — знаковый pattern).

    Raises:
        ZeroDivisionError: Если divisor == 0
    """
    return to_signed64(to_unsigned64(dividend) % to_unsigned64(divisor))
