"""
Comparison Layer — отношения порядка с отравлением (poisoning)

Любой операнд с failure() == True делает ложными ==, <, <=, >, >=,
а != истинным. Это сохраняется даже при сравнении значения с самим собой:
failed значение не равно ничему, включая себя.

Рефлексивность для failed значений нарушена намеренно: ошибка отравляет
идентичность. Не «исправлять» в симметричное отношение эквивалентности.

Сравнение с сырым int выполняется точно (без wrap): литерал вне диапазона
типа просто не равен ни одному допустимому значению.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class PoisonedComparisons(ABC):
    """
    Mixin операторов сравнения для checked-значений.

    Опирается только на публичный контракт значения (get/failure)
    и на _comparison_operand(), который хост-класс обязан предоставить.
    """

    __slots__ = ()

    @abstractmethod
    def _comparison_operand(self, other: Any) -> Optional[tuple[int, bool]]:
        """(значение, failed) для допустимого операнда, иначе None"""

    def _compare(self, other: Any, op: Callable[[int, int], bool]) -> Any:
        operand = self._comparison_operand(other)
        if operand is None:
            return NotImplemented

        other_value, other_failed = operand
        if self.failure() or other_failed:  # type: ignore[attr-defined]
            return False

        return op(self.get(), other_value)  # type: ignore[attr-defined]

    def __eq__(self, other: Any) -> Any:
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> Any:
        result = self._compare(other, operator.eq)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)
