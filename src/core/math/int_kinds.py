"""
Integer Kinds — закрытый набор целочисленных типов фиксированной ширины

Модуль описывает, какие машинные целые поддерживаются checked-арифметикой:
- 8/16/32/64 бит, знаковые и беззнаковые
- границы диапазона (min/max) и маска разрядности
- two's-complement wrap произвольного Python int в диапазон типа

Варианты pointer-width / least / fast / max не являются отдельными типами,
а отображаются на один из восьми базовых (см. INTPTR_KIND, UINTPTR_KIND).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. kind.wrap(v) всегда лежит в [kind.min_value, kind.max_value]
2. kind.wrap(v) == v для любого v из диапазона kind
3. Набор типов закрыт: is_supported_kind() является единственным предикатом допуска
"""

import struct
from enum import Enum
from typing import Any, Final

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНОВ
# =============================================================================

INT8_MIN: Final[int] = -(1 << 7)
INT8_MAX: Final[int] = (1 << 7) - 1
INT16_MIN: Final[int] = -(1 << 15)
INT16_MAX: Final[int] = (1 << 15) - 1
INT32_MIN: Final[int] = -(1 << 31)
INT32_MAX: Final[int] = (1 << 31) - 1
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

UINT8_MAX: Final[int] = (1 << 8) - 1
UINT16_MAX: Final[int] = (1 << 16) - 1
UINT32_MAX: Final[int] = (1 << 32) - 1
UINT64_MAX: Final[int] = (1 << 64) - 1

# Разрядность указателя текущего интерпретатора (intptr_t / uintptr_t)
POINTER_BITS: Final[int] = struct.calcsize("P") * 8


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LiteralOutOfRange(ValueError):
    """
    Литерал не помещается в диапазон целевого типа.

    Это ошибка программиста на границе API (аналог отказа компиляции),
    а не арифметическое переполнение: переполнения никогда не бросаются,
    они фиксируются в sticky error бите значения.
    """

    pass


# =============================================================================
# INT KIND
# =============================================================================


class IntKind(str, Enum):
    """Поддерживаемый целочисленный тип фиксированной ширины"""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def bits(self) -> int:
        return _KIND_BITS[self]

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что value представим в данном типе без wrap."""
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """
        Two's-complement wrap произвольного целого в диапазон типа.

        Эквивалентно результату машинной операции, которая отбрасывает
        старшие разряды.

        Examples:
            >>> IntKind.UINT8.wrap(256)
            0
            >>> IntKind.INT8.wrap(128)
            -128
            >>> IntKind.INT32.wrap(-1)
            -1
        """
        bits = value & self.mask
        if self.signed and bits > self.max_value:
            return bits - (1 << self.bits)
        return bits

    def require_literal(self, value: Any) -> int:
        """
        Валидация сырого литерала для данного типа.

        Args:
            value: Кандидат в литерал

        Returns:
            value без изменений

        Raises:
            TypeError: Если value не int (bool не считается целым литералом)
            LiteralOutOfRange: Если value вне [min_value, max_value]
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{self.value} literal must be an int, got {type(value).__name__}"
            )

        if not self.contains(value):
            raise LiteralOutOfRange(
                f"{value} does not fit in {self.value} "
                f"[{self.min_value}, {self.max_value}]"
            )

        return value


_KIND_BITS: Final[dict[IntKind, int]] = {
    IntKind.INT8: 8,
    IntKind.INT16: 16,
    IntKind.INT32: 32,
    IntKind.INT64: 64,
    IntKind.UINT8: 8,
    IntKind.UINT16: 16,
    IntKind.UINT32: 32,
    IntKind.UINT64: 64,
}


def signed_kind_for_bits(bits: int) -> IntKind:
    """Знаковый тип заданной ширины (для pointer-width и подобных алиасов)."""
    for kind in IntKind:
        if kind.signed and kind.bits == bits:
            return kind
    raise ValueError(f"no signed integer kind with {bits} bits")


def unsigned_kind_for_bits(bits: int) -> IntKind:
    """Беззнаковый тип заданной ширины."""
    for kind in IntKind:
        if not kind.signed and kind.bits == bits:
            return kind
    raise ValueError(f"no unsigned integer kind with {bits} bits")


INTPTR_KIND: Final[IntKind] = signed_kind_for_bits(POINTER_BITS)
UINTPTR_KIND: Final[IntKind] = unsigned_kind_for_bits(POINTER_BITS)


def is_supported_kind(kind: Any) -> bool:
    """
    Предикат допуска: является ли kind поддерживаемым целочисленным типом.

    Принимает IntKind или его строковое имя ("int32", "uint8", ...).
    """
    if isinstance(kind, IntKind):
        return True

    if isinstance(kind, str):
        return kind in {k.value for k in IntKind}

    return False
