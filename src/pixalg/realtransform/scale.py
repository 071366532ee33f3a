"""
Scale — n-мерное диагональное масштабирование

    target[d] = source[d] * s[d]
    source[d] = target[d] / s[d]

Прямой transform и его inverse создаются вместе в одном конструкторе и
ссылаются друг на друга: scale.inverse().inverse() is scale. Пара
неизменяема и живёт как единое целое (цикл ссылок собирается cyclic GC).

Нулевой коэффициент по умолчанию принимается: обратный коэффициент
становится ±inf, apply_inverse даёт ±inf / NaN. Это документированная
хрупкость, а не ошибка; строгий режим включается через ScaleConfig.
"""

import logging
from dataclasses import dataclass
from typing import MutableSequence, Sequence

from pixalg.core.domain.real_point import RealPoint
from pixalg.core.math.numerical_safeguards import ieee_divide, ieee_reciprocal
from pixalg.realtransform.base import AffineGet, check_dimensions

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroScaleFactorError(ValueError):
    """Нулевой коэффициент при ScaleConfig(reject_zero_factors=True)."""
    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ScaleConfig:
    """Конфигурация Scale.

    check_dimensions: проверять длину входных векторов (DimensionMismatchError)
    reject_zero_factors: отклонять нулевые коэффициенты (ZeroScaleFactorError)
    """

    check_dimensions: bool = True
    reject_zero_factors: bool = False


DEFAULT_SCALE_CONFIG = ScaleConfig()


# =============================================================================
# SCALE
# =============================================================================


class Scale(AffineGet):
    """
    Диагональный affine transform (чистое масштабирование по осям).

    Examples:
        >>> s = Scale(2.0, 3.0)
        >>> s.apply([1.0, 1.0])
        [2.0, 3.0]
        >>> s.apply_inverse([2.0, 3.0])
        [1.0, 1.0]
        >>> s.inverse().inverse() is s
        True
    """

    __slots__ = ("_s", "_inverse", "_ds", "_config")

    def __init__(self, *scales: float, config: ScaleConfig | None = None):
        """
        Args:
            *scales: Коэффициенты по осям (n = len(scales))
            config: Конфигурация (default: DEFAULT_SCALE_CONFIG)

        Raises:
            ZeroScaleFactorError: Если есть нулевой коэффициент и
                config.reject_zero_factors
        """
        config = config or DEFAULT_SCALE_CONFIG
        s = tuple(float(x) for x in scales)

        zero_dims = [d for d, x in enumerate(s) if x == 0.0]
        if zero_dims:
            if config.reject_zero_factors:
                raise ZeroScaleFactorError(
                    f"Scale factor is zero in dimensions {zero_dims}"
                )
            logger.warning(
                "Scale constructed with zero factor in dimensions %s; "
                "inverse factors are infinite",
                zero_dims,
            )

        si = tuple(ieee_reciprocal(x) for x in s)
        self._init_pair(s, config)
        inverse = Scale.__new__(Scale)
        inverse._init_pair(si, config)

        self._inverse = inverse
        inverse._inverse = self

    def _init_pair(self, s: tuple[float, ...], config: ScaleConfig) -> None:
        self._s = s
        self._config = config
        self._ds = tuple(_scaled_basis(s, d) for d in range(len(s)))

    # =========================================================================
    # РАЗМЕРНОСТИ
    # =========================================================================

    def num_source_dimensions(self) -> int:
        return len(self._s)

    def num_target_dimensions(self) -> int:
        return len(self._s)

    def get_scale(self, d: int) -> float:
        return self._s[d]

    def get_scales(self) -> tuple[float, ...]:
        return self._s

    @property
    def config(self) -> ScaleConfig:
        return self._config

    # =========================================================================
    # ПРИМЕНЕНИЕ
    # =========================================================================

    def apply(
        self,
        source: Sequence[float],
        target: MutableSequence[float] | None = None,
    ) -> MutableSequence[float]:
        n = len(self._s)
        if target is None:
            if self._config.check_dimensions:
                check_dimensions(n, source)
            return [source[d] * self._s[d] for d in range(n)]

        if self._config.check_dimensions:
            check_dimensions(n, source, target)
        for d in range(n):
            target[d] = source[d] * self._s[d]
        return target

    def apply_inverse(
        self,
        target: Sequence[float],
        source: MutableSequence[float] | None = None,
    ) -> MutableSequence[float]:
        n = len(self._s)
        if source is None:
            if self._config.check_dimensions:
                check_dimensions(n, target)
            return [ieee_divide(target[d], self._s[d]) for d in range(n)]

        if self._config.check_dimensions:
            check_dimensions(n, source, target)
        for d in range(n):
            source[d] = ieee_divide(target[d], self._s[d])
        return source

    def inverse(self) -> "Scale":
        return self._inverse

    # =========================================================================
    # МАТРИЧНОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def get(self, row: int, column: int) -> float:
        return self._s[row] if row == column else 0.0

    def row_packed_copy(self) -> list[float]:
        """
        n × (n+1) матрица; s[d] на диагонали строки d, столбец сдвига нулевой.

        Examples:
            >>> Scale(2.0, 3.0).row_packed_copy()
            [2.0, 0.0, 0.0, 0.0, 3.0, 0.0]
        """
        n = len(self._s)
        step = n + 2
        matrix = [0.0] * (n * n + n)
        for d in range(n):
            matrix[d * step] = self._s[d]
        return matrix

    def d(self, d: int) -> RealPoint:
        """
        Differential вдоль оси d: базисный вектор e_d, умноженный на s[d].

        Возвращается копия, одна и та же для любой точки.
        """
        return self._ds[d].copy()

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self._s == other._s

    def __hash__(self) -> int:
        return hash((Scale, self._s))

    def __repr__(self) -> str:
        return f"Scale({', '.join(repr(x) for x in self._s)})"


def _scaled_basis(s: tuple[float, ...], d: int) -> RealPoint:
    point = RealPoint(len(s))
    point.set_position(s[d], d)
    return point
