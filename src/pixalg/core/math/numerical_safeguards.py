"""
Numerical Safeguards — IEEE-754 примитивы для per-element вычислений

Python float арифметика отличается от IEEE-754 в двух местах, важных для
per-pixel операций и координатных преобразований:
- деление на 0.0 вызывает ZeroDivisionError вместо ±inf / NaN
- math.exp() при переполнении вызывает OverflowError вместо inf

Модуль возвращает IEEE-результаты без исключений, чтобы операции
оставались тотальными для любого конечного входа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ieee_divide(a, b) == a / b для любого b != 0.0 (бит в бит)
2. Деление на ноль никогда не бросает исключение (±inf или NaN)
3. ieee_exp никогда не бросает исключение (inf при переполнении)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Положительная бесконечность (результат переполнения)
POSITIVE_INFINITY: Final[float] = math.inf

# Результат неопределённых операций (0/0, inf*0)
NOT_A_NUMBER: Final[float] = math.nan


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что значение конечное (не NaN и не ±Inf).

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float("nan"))
        False
        >>> is_valid_float(float("inf"))
        False
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str = "value") -> float:
    """
    Валидация конечности значения.

    Raises:
        ValueError: Если value равно NaN или ±Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


# =============================================================================
# IEEE-ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Для denominator != 0.0 совпадает с numerator / denominator.
    Для нулевого знаменателя:
    - 0/0 и NaN/0 → NaN
    - x/±0 → ±inf (знак = sign(x) * sign(denominator), учитывая -0.0)

    Examples:
        >>> ieee_divide(3.0, 2.0)
        1.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return NOT_A_NUMBER

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(POSITIVE_INFINITY, sign)


def ieee_reciprocal(value: float) -> float:
    """
    Обратное значение 1 / value с IEEE-семантикой (1/±0 → ±inf).

    Examples:
        >>> ieee_reciprocal(4.0)
        0.25
        >>> ieee_reciprocal(0.0)
        inf
    """
    return ieee_divide(1.0, value)


# =============================================================================
# IEEE-ЭКСПОНЕНТА
# =============================================================================


def ieee_exp(value: float) -> float:
    """
    exp(value) без OverflowError: при переполнении возвращает inf.

    Examples:
        >>> ieee_exp(0.0)
        1.0
        >>> ieee_exp(1000.0)
        inf
        >>> ieee_exp(-1000.0)
        0.0
    """
    try:
        return math.exp(value)
    except OverflowError:
        return POSITIVE_INFINITY
