"""
RealPoint — изменяемая n-мерная real-позиция

Поддерживает sequence protocol (len, индексация, присваивание по индексу),
поэтому принимается везде, где transform ожидает вектор координат.
"""

from typing import Iterable, Iterator


class RealPoint:
    """
    Позиция в n-мерном непрерывном пространстве.

    Examples:
        >>> p = RealPoint(3)
        >>> p.set_position(2.5, 1)
        >>> list(p)
        [0.0, 2.5, 0.0]
    """

    __slots__ = ("_position",)

    def __init__(self, n_or_position: int | Iterable[float]):
        """
        Args:
            n_or_position: Размерность (нулевая позиция) или начальные координаты

        Raises:
            ValueError: Если размерность отрицательна
        """
        if isinstance(n_or_position, int):
            if n_or_position < 0:
                raise ValueError(f"dimensionality must be >= 0, got {n_or_position}")
            self._position = [0.0] * n_or_position
        else:
            self._position = [float(x) for x in n_or_position]

    def num_dimensions(self) -> int:
        return len(self._position)

    def get_double_position(self, d: int) -> float:
        return self._position[d]

    def set_position(self, value: float, d: int) -> None:
        self._position[d] = float(value)

    def localize(self) -> list[float]:
        """Копия координат."""
        return list(self._position)

    def copy(self) -> "RealPoint":
        return RealPoint(self._position)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._position)

    def __getitem__(self, d: int) -> float:
        return self._position[d]

    def __setitem__(self, d: int, value: float) -> None:
        self._position[d] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RealPoint):
            return NotImplemented
        return self._position == other._position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RealPoint({self._position!r})"
