"""
CheckedInt — целое фиксированной ширины со sticky error битом

Значение представляет пару (payload, error), внутренне представленная tagged
sum типом: _Valid(value) | _FAILED. Переходы состояний:
- конструирование из литерала → Valid(literal) (единственный выход из Failed)
- конструирование с явным error=True → Failed
- iadd/isub/imul: Failed, если любой операнд failed или примитив переполнился
- idiv/imod: Failed, если операнд failed, делитель 0, или (signed) MIN / -1
- inc/dec: как iadd/isub литерала 1
- унарный минус (signed): zero() - x, Failed при x == MIN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get() возвращает 0, если failure() (stale payload никогда не виден)
2. Ошибка монотонна: ни одна операция не переводит Failed обратно в Valid
3. Конструктор по умолчанию → Valid(0)
4. Арифметические ошибки никогда не бросаются как исключения

Исключения бросаются только на границе API: литерал не int или вне
диапазона типа (LiteralOutOfRange), операнд чужого типа (TypeError).
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional, TypeVar

from src.core.domain.comparison import PoisonedComparisons
from src.core.domain.operators import (
    BitwiseOperators,
    CheckedArithmetic,
    NegationOperator,
)
from src.core.domain.rendering import render
from src.core.math.int_kinds import IntKind, is_supported_kind
from src.core.math.overflow import (
    OverflowResult,
    checked_add,
    checked_mul,
    checked_sub,
    truncated_divmod,
)

C = TypeVar("C", bound="CheckedInt")


# =============================================================================
# ВНУТРЕННЕЕ СОСТОЯНИЕ
# =============================================================================


@dataclass(frozen=True)
class _Valid:
    value: int


@dataclass(frozen=True)
class _Failed:
    pass


_FAILED = _Failed()

_MISSING: Any = object()


class _KindBound:
    """
    Гибридный аксессор max()/min().

    На классе (и на экземпляре без аргумента): граница типа как int.
    На экземпляре с аргументом: max/min двух значений с отравлением:
    если любая сторона failed, результат failed zero.
    """

    def __init__(self, upper: bool):
        self._upper = upper

    def __get__(self, instance: Any, owner: type) -> Callable[..., Any]:
        if instance is None:
            return functools.partial(self._bound, owner)
        return functools.partial(self._call, instance)

    def _bound(self, owner: type) -> int:
        kind: IntKind = owner.KIND  # type: ignore[attr-defined]
        return kind.max_value if self._upper else kind.min_value

    def _call(self, instance: "CheckedInt", other: Any = _MISSING) -> Any:
        if other is _MISSING:
            return self._bound(type(instance))
        return instance._select(other, self._upper)


# =============================================================================
# CHECKED INT
# =============================================================================


class CheckedInt(PoisonedComparisons, CheckedArithmetic):
    """
    Базовый класс checked-целого.

    Напрямую не инстанцируется: конкретный тип задаёт KIND
    (см. SafeInt32, SafeUInt8 и др. в safe_types).
    """

    __slots__ = ("_state",)
    __hash__ = None  # type: ignore[assignment]

    KIND: ClassVar[IntKind]

    max = _KindBound(upper=True)
    min = _KindBound(upper=False)

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if "KIND" not in cls.__dict__:
            return

        if not is_supported_kind(cls.KIND):
            raise TypeError(f"{cls.__name__}.KIND is not a supported integer kind: {cls.KIND!r}")
        cls.KIND = IntKind(cls.KIND)

    def __init__(self, value: int = 0, error: bool = False):
        kind = getattr(type(self), "KIND", None)
        if not is_supported_kind(kind):
            raise TypeError(
                f"{type(self).__name__} has no integer kind; use a concrete type like SafeInt32"
            )

        kind.require_literal(value)
        self._state: _Valid | _Failed = _FAILED if error else _Valid(value)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls: type[C], error: bool = False) -> C:
        return cls(0, error)

    @classmethod
    def one(cls: type[C], error: bool = False) -> C:
        return cls(1, error)

    @classmethod
    def narrow(cls: type[C], value: int) -> C:
        """
        Построение из произвольного Python int.

        В отличие от конструктора, значение вне диапазона типа не бросает
        исключение, а даёт failed zero (narrow overflow).

        Raises:
            TypeError: Если value не int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot narrow {type(value).__name__} to {cls.KIND.value}")

        if not cls.KIND.contains(value):
            return cls.zero(error=True)

        return cls(value)

    def convert(self, target: type[C]) -> C:
        """
        Перевод значения в другой checked-тип.

        Failed значение или значение вне диапазона target → failed target.
        """
        if not (isinstance(target, type) and issubclass(target, CheckedInt)):
            raise TypeError(f"conversion target must be a CheckedInt type, got {target!r}")

        if self.failure():
            return target.zero(error=True)

        return target.narrow(self.get())

    def copy(self: C) -> C:
        clone = type(self).__new__(type(self))
        clone._state = self._state
        return clone

    __copy__ = copy

    def __deepcopy__(self: C, memo: dict) -> C:
        return self.copy()

    # -------------------------------------------------------------------------
    # Аксессоры
    # -------------------------------------------------------------------------

    def get(self) -> int:
        """Значение; 0 при failure() (stale payload не раскрывается)."""
        if isinstance(self._state, _Valid):
            return self._state.value
        return 0

    def failure(self) -> bool:
        return isinstance(self._state, _Failed)

    def success(self) -> bool:
        return not self.failure()

    def __bool__(self) -> bool:
        # Булев контекст означает "нет ошибки", а не "не ноль"
        return self.success()

    def set_failure(self) -> None:
        """Безусловно пометить значение как failed."""
        self._state = _FAILED

    @classmethod
    def is_signed_type(cls) -> bool:
        return cls.KIND.signed

    @classmethod
    def is_unsigned_type(cls) -> bool:
        return not cls.KIND.signed

    def is_zero(self) -> bool:
        return self.get() == 0

    def is_pos(self) -> bool:
        return self.zero() < self

    def is_neg(self) -> bool:
        if self.is_unsigned_type():
            return False
        return self.zero() > self

    def is_max(self) -> bool:
        return type(self).max() == self

    def is_min(self) -> bool:
        return type(self).min() == self

    # -------------------------------------------------------------------------
    # Compound (in-place) операции
    # -------------------------------------------------------------------------

    def iadd(self: C, rhs: Any) -> C:
        return self._apply_primitive(checked_add, rhs)

    def isub(self: C, rhs: Any) -> C:
        return self._apply_primitive(checked_sub, rhs)

    def imul(self: C, rhs: Any) -> C:
        return self._apply_primitive(checked_mul, rhs)

    def idiv(self: C, rhs: Any) -> C:
        operand = self._require_operand(rhs)
        if self._division_fails(operand):
            self._state = _FAILED
            return self

        quotient, _ = truncated_divmod(self.get(), operand.get())
        self._state = _Valid(quotient)
        return self

    def imod(self: C, rhs: Any) -> C:
        operand = self._require_operand(rhs)
        if self._division_fails(operand):
            self._state = _FAILED
            return self

        _, remainder = truncated_divmod(self.get(), operand.get())
        self._state = _Valid(remainder)
        return self

    def inc(self: C) -> C:
        """Новое значение x + 1 (исходное не изменяется)."""
        return self.copy().iadd(self.one())

    def dec(self: C) -> C:
        """Новое значение x - 1 (исходное не изменяется)."""
        return self.copy().isub(self.one())

    # -------------------------------------------------------------------------
    # Внутреннее
    # -------------------------------------------------------------------------

    def _assign(self, value: int, failed: bool) -> None:
        self._state = _FAILED if failed else _Valid(value)

    def _apply_primitive(
        self: C, primitive: Callable[[int, int, IntKind], OverflowResult], rhs: Any
    ) -> C:
        operand = self._require_operand(rhs)
        result = primitive(self.get(), operand.get(), self.KIND)

        self._assign(
            result.result,
            self.failure() or operand.failure() or result.overflowed,
        )
        return self

    def _division_fails(self, operand: "CheckedInt") -> bool:
        if self.failure() or operand.failure():
            return True

        if operand.get() == 0:
            return True

        # Единственный случай переполнения при знаковом делении
        return self.KIND.signed and self.get() == self.KIND.min_value and operand.get() == -1

    def _coerce(self, other: Any) -> Any:
        """
        Приведение операнда к checked-значению того же типа.

        Returns:
            CheckedInt того же KIND (для int новый экземпляр) или
            NotImplemented для чужих типов

        Raises:
            LiteralOutOfRange: Если int-литерал вне диапазона типа
        """
        if isinstance(other, CheckedInt):
            if other.KIND is self.KIND:
                return other
            return NotImplemented

        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)

        return NotImplemented

    def _require_operand(self, rhs: Any) -> "CheckedInt":
        operand = self._coerce(rhs)
        if operand is NotImplemented:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {type(rhs).__name__}"
            )
        return operand

    def _comparison_operand(self, other: Any) -> Optional[tuple[int, bool]]:
        if isinstance(other, CheckedInt):
            if other.KIND is self.KIND:
                return other.get(), other.failure()
            return None

        if isinstance(other, int) and not isinstance(other, bool):
            return other, False

        return None

    def _select(self, other: Any, upper: bool) -> Any:
        operand = self._require_operand(other)
        if self.failure() or operand.failure():
            return self.zero(error=True)

        lhs, rhs = self.get(), operand.get()
        if upper:
            return type(self)(rhs if lhs < rhs else lhs)
        return type(self)(lhs if lhs < rhs else rhs)

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        if self.failure():
            return f"{type(self).__name__}(0, error=True)"
        return f"{type(self).__name__}({self.get()})"


class SignedCheckedInt(NegationOperator, CheckedInt):
    """Знаковое checked-целое: арифметика и унарный минус, без битовых операций"""

    __slots__ = ()


class UnsignedCheckedInt(BitwiseOperators, CheckedInt):
    """Беззнаковое checked-целое: арифметика, битовые операции и сдвиги"""

    __slots__ = ()
