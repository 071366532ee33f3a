"""
RealUnaryOperation — контракт скалярной унарной операции над real-значением

Операция — stateless-per-call функтор: параметры захватываются при
конструировании и не меняются. Конвейер (внешний) вызывает compute() для
каждого элемента данных и получает отдельный экземпляр на каждый параллельный
контекст через copy().

КОНТРАКТ:
1. compute() не изменяет захваченные параметры
2. copy() возвращает независимый экземпляр с теми же параметрами
3. compute() тотален для любого конечного входа (никаких исключений)
"""

from abc import ABC, abstractmethod
from typing import Iterable, Protocol, TypeVar


class RealSource(Protocol):
    """Элемент данных, из которого читается real-значение."""

    def get_real_double(self) -> float: ...


class RealSink(Protocol):
    """Элемент данных, в который записывается real-значение."""

    def set_real(self, value: float) -> None: ...


O = TypeVar("O", bound=RealSink)


class RealUnaryOperation(ABC):
    """Базовый класс унарных real-операций."""

    __slots__ = ()

    @abstractmethod
    def compute(self, value: float) -> float:
        """Результат операции для одного скалярного входа."""

    @abstractmethod
    def copy(self) -> "RealUnaryOperation":
        """Независимый экземпляр с теми же параметрами."""

    def compute_into(self, source: RealSource, output: O) -> O:
        """
        Per-element форма: читает source, пишет результат в output.

        Args:
            source: Входной элемент (get_real_double)
            output: Выходной элемент (set_real)

        Returns:
            output (для chaining)
        """
        output.set_real(self.compute(source.get_real_double()))
        return output

    def compute_all(self, values: Iterable[float]) -> list[float]:
        """Последовательное применение к каждому значению."""
        return [self.compute(v) for v in values]
