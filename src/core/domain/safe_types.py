"""
Safe Types — именованные checked-типы для каждой ширины

Конкретные классы SafeInt8 ... SafeUInt64, алиасы least/fast/max/ptr
и реестр IntKind → класс (используется при восстановлении из snapshot).

Алиасы указывают на те же классы, что и базовые типы:
SafeIntLeast8 is SafeInt8, SafeUIntPtr is SafeUInt64 (на 64-битной платформе).
"""

from typing import Final

from src.core.domain.checked_int import (
    CheckedInt,
    SignedCheckedInt,
    UnsignedCheckedInt,
)
from src.core.math.int_kinds import (
    INTPTR_KIND,
    UINTPTR_KIND,
    IntKind,
    is_supported_kind,
)

# =============================================================================
# БАЗОВЫЕ ТИПЫ
# =============================================================================


class SafeInt8(SignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.INT8


class SafeInt16(SignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.INT16


class SafeInt32(SignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.INT32


class SafeInt64(SignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.INT64


class SafeUInt8(UnsignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.UINT8


class SafeUInt16(UnsignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.UINT16


class SafeUInt32(UnsignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.UINT32


class SafeUInt64(UnsignedCheckedInt):
    __slots__ = ()
    KIND = IntKind.UINT64


CHECKED_TYPES: Final[dict[IntKind, type[CheckedInt]]] = {
    IntKind.INT8: SafeInt8,
    IntKind.INT16: SafeInt16,
    IntKind.INT32: SafeInt32,
    IntKind.INT64: SafeInt64,
    IntKind.UINT8: SafeUInt8,
    IntKind.UINT16: SafeUInt16,
    IntKind.UINT32: SafeUInt32,
    IntKind.UINT64: SafeUInt64,
}


def checked_type_for(kind: IntKind | str) -> type[CheckedInt]:
    """
    Checked-класс для целочисленного типа.

    Raises:
        ValueError: Если kind не поддерживается
    """
    if not is_supported_kind(kind):
        raise ValueError(f"unsupported integer kind: {kind!r}")
    return CHECKED_TYPES[IntKind(kind)]


# =============================================================================
# АЛИАСЫ
# =============================================================================

# least: минимальный тип не уже N бит
SafeIntLeast8 = SafeInt8
SafeIntLeast16 = SafeInt16
SafeIntLeast32 = SafeInt32
SafeIntLeast64 = SafeInt64
SafeUIntLeast8 = SafeUInt8
SafeUIntLeast16 = SafeUInt16
SafeUIntLeast32 = SafeUInt32
SafeUIntLeast64 = SafeUInt64

SafeIntPtr = CHECKED_TYPES[INTPTR_KIND]
SafeUIntPtr = CHECKED_TYPES[UINTPTR_KIND]

# fast: раскладка glibc (8 бит остаётся 8, 16 и 32 расширяются до машинного слова)
SafeIntFast8 = SafeInt8
SafeIntFast16 = SafeIntPtr
SafeIntFast32 = SafeIntPtr
SafeIntFast64 = SafeInt64
SafeUIntFast8 = SafeUInt8
SafeUIntFast16 = SafeUIntPtr
SafeUIntFast32 = SafeUIntPtr
SafeUIntFast64 = SafeUInt64

SafeIntMax = SafeInt64
SafeUIntMax = SafeUInt64
