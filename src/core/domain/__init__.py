"""
Domain value objects.

Checked fixed-width integers, their named per-width types, snapshots,
text rendering, and the error codes used above the checked core.
"""

from src.core.domain.checked_int import (
    CheckedInt,
    SignedCheckedInt,
    UnsignedCheckedInt,
)
from src.core.domain.errc import (
    ERRC_ASSERTION,
    ERRC_BAD_FUNCTION,
    ERRC_DIVIDE_BY_ZERO,
    ERRC_FAILURE,
    ERRC_INDEX_OUT_OF_BOUNDS,
    ERRC_INVALID_ARGUMENT,
    ERRC_NARROW_OVERFLOW,
    ERRC_NULLPTR_DEREFERENCE,
    ERRC_POSTCONDITION,
    ERRC_PRECONDITION,
    ERRC_SIGNED_OVERFLOW,
    ERRC_SUCCESS,
    ERRC_UNSIGNED_WRAP,
    Errc,
    ErrorCode,
)
from src.core.domain.rendering import (
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
    log_checked,
    render,
    write_to,
)
from src.core.domain.safe_types import (
    CHECKED_TYPES,
    SafeInt8,
    SafeInt16,
    SafeInt32,
    SafeInt64,
    SafeIntFast8,
    SafeIntFast16,
    SafeIntFast32,
    SafeIntFast64,
    SafeIntLeast8,
    SafeIntLeast16,
    SafeIntLeast32,
    SafeIntLeast64,
    SafeIntMax,
    SafeIntPtr,
    SafeUInt8,
    SafeUInt16,
    SafeUInt32,
    SafeUInt64,
    SafeUIntFast8,
    SafeUIntFast16,
    SafeUIntFast32,
    SafeUIntFast64,
    SafeUIntLeast8,
    SafeUIntLeast16,
    SafeUIntLeast32,
    SafeUIntLeast64,
    SafeUIntMax,
    SafeUIntPtr,
    checked_type_for,
)
from src.core.domain.snapshot import CheckedIntSnapshot, restore, snapshot_of

__all__ = [
    # Checked integer core
    "CheckedInt",
    "SignedCheckedInt",
    "UnsignedCheckedInt",
    # Named types
    "SafeInt8",
    "SafeInt16",
    "SafeInt32",
    "SafeInt64",
    "SafeUInt8",
    "SafeUInt16",
    "SafeUInt32",
    "SafeUInt64",
    "SafeIntLeast8",
    "SafeIntLeast16",
    "SafeIntLeast32",
    "SafeIntLeast64",
    "SafeUIntLeast8",
    "SafeUIntLeast16",
    "SafeUIntLeast32",
    "SafeUIntLeast64",
    "SafeIntFast8",
    "SafeIntFast16",
    "SafeIntFast32",
    "SafeIntFast64",
    "SafeUIntFast8",
    "SafeUIntFast16",
    "SafeUIntFast32",
    "SafeUIntFast64",
    "SafeIntMax",
    "SafeUIntMax",
    "SafeIntPtr",
    "SafeUIntPtr",
    "CHECKED_TYPES",
    "checked_type_for",
    # Snapshots
    "CheckedIntSnapshot",
    "snapshot_of",
    "restore",
    # Rendering
    "RenderConfig",
    "DEFAULT_RENDER_CONFIG",
    "render",
    "write_to",
    "log_checked",
    # Error codes
    "Errc",
    "ErrorCode",
    "ERRC_SUCCESS",
    "ERRC_FAILURE",
    "ERRC_PRECONDITION",
    "ERRC_POSTCONDITION",
    "ERRC_ASSERTION",
    "ERRC_INVALID_ARGUMENT",
    "ERRC_INDEX_OUT_OF_BOUNDS",
    "ERRC_BAD_FUNCTION",
    "ERRC_UNSIGNED_WRAP",
    "ERRC_NARROW_OVERFLOW",
    "ERRC_SIGNED_OVERFLOW",
    "ERRC_DIVIDE_BY_ZERO",
    "ERRC_NULLPTR_DEREFERENCE",
]
