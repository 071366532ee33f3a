"""
AffineGet — контракт affine-преобразований n-мерных координат

Общий контракт для семейства transforms (scale, translation, general affine):
apply / apply_inverse / inverse / размерности / матричное представление /
differential. Реализации взаимозаменяемы для слоя адресации координат.
"""

from abc import ABC, abstractmethod
from typing import MutableSequence, Sequence

from pixalg.core.domain.real_point import RealPoint


class DimensionMismatchError(ValueError):
    """
    Вектор короче размерности transform.

    Предусловие: len(source) >= n и len(target) >= n. Лишние компоненты
    игнорируются, недостающие — ошибка вызывающей стороны.
    """
    pass


def check_dimensions(n: int, *vectors: Sequence[float]) -> None:
    """
    Проверка, что каждый вектор содержит не меньше n компонент.

    Raises:
        DimensionMismatchError: Если хотя бы один вектор короче n
    """
    for v in vectors:
        if len(v) < n:
            raise DimensionMismatchError(
                f"Input dimensions too small: expected >= {n}, got {len(v)}"
            )


class AffineGet(ABC):
    """Read-only affine transform n_source → n_target."""

    __slots__ = ()

    @abstractmethod
    def num_source_dimensions(self) -> int: ...

    @abstractmethod
    def num_target_dimensions(self) -> int: ...

    @abstractmethod
    def apply(
        self,
        source: Sequence[float],
        target: MutableSequence[float] | None = None,
    ) -> MutableSequence[float]:
        """
        Прямое преобразование source → target.

        Если target передан, результат записывается в него (первые
        n_target компонент) и он же возвращается; иначе создаётся новый список.
        """

    @abstractmethod
    def apply_inverse(
        self,
        target: Sequence[float],
        source: MutableSequence[float] | None = None,
    ) -> MutableSequence[float]:
        """Обратное преобразование target → source (аналогично apply)."""

    @abstractmethod
    def inverse(self) -> "AffineGet": ...

    @abstractmethod
    def get(self, row: int, column: int) -> float:
        """Элемент affine-матрицы n_target × (n_source + 1)."""

    @abstractmethod
    def row_packed_copy(self) -> list[float]:
        """Affine-матрица n_target × (n_source + 1) в row-major порядке."""

    @abstractmethod
    def d(self, d: int) -> RealPoint:
        """Differential: частная производная вдоль оси d (константа для affine)."""

    def inverse_affine(self) -> "AffineGet":
        return self.inverse()
