"""
Core math modules

Целочисленные типы фиксированной ширины и checked-примитивы переполнения.
"""

# Integer kinds
from src.core.math.int_kinds import (
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    INTPTR_KIND,
    POINTER_BITS,
    UINT8_MAX,
    UINT16_MAX,
    UINT32_MAX,
    UINT64_MAX,
    UINTPTR_KIND,
    IntKind,
    LiteralOutOfRange,
    is_supported_kind,
    signed_kind_for_bits,
    unsigned_kind_for_bits,
)

# Overflow primitives
from src.core.math.overflow import (
    OverflowResult,
    checked_add,
    checked_mul,
    checked_sub,
    truncated_divmod,
)

__all__ = [
    # Integer kinds — Bounds
    "INT8_MIN",
    "INT8_MAX",
    "INT16_MIN",
    "INT16_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "UINT8_MAX",
    "UINT16_MAX",
    "UINT32_MAX",
    "UINT64_MAX",
    "POINTER_BITS",
    "INTPTR_KIND",
    "UINTPTR_KIND",
    # Integer kinds — Types
    "IntKind",
    "LiteralOutOfRange",
    # Integer kinds — Functions
    "is_supported_kind",
    "signed_kind_for_bits",
    "unsigned_kind_for_bits",
    # Overflow primitives
    "OverflowResult",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "truncated_divmod",
]
