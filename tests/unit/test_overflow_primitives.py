"""
Тесты для checked-примитивов и целочисленных типов

Проверяет:
1. Границы и wrap для каждого IntKind
2. checked_add / checked_sub / checked_mul: wrapped результат и флаг
3. Деление с усечением к нулю
4. Валидацию литералов и предикат допуска типов
"""

import pytest

from src.core.math import (
    INT8_MAX,
    INT8_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MIN,
    INTPTR_KIND,
    POINTER_BITS,
    UINT8_MAX,
    UINT64_MAX,
    UINTPTR_KIND,
    IntKind,
    LiteralOutOfRange,
    OverflowResult,
    checked_add,
    checked_mul,
    checked_sub,
    is_supported_kind,
    signed_kind_for_bits,
    truncated_divmod,
    unsigned_kind_for_bits,
)

# =============================================================================
# INT KINDS
# =============================================================================


class TestIntKind:
    """Тесты для IntKind"""

    @pytest.mark.parametrize(
        "kind,bits,signed,lo,hi",
        [
            (IntKind.INT8, 8, True, -128, 127),
            (IntKind.INT16, 16, True, -32768, 32767),
            (IntKind.INT32, 32, True, INT32_MIN, INT32_MAX),
            (IntKind.INT64, 64, True, INT64_MIN, 2**63 - 1),
            (IntKind.UINT8, 8, False, 0, 255),
            (IntKind.UINT16, 16, False, 0, 65535),
            (IntKind.UINT32, 32, False, 0, 2**32 - 1),
            (IntKind.UINT64, 64, False, 0, UINT64_MAX),
        ],
    )
    def test_layout(self, kind: IntKind, bits: int, signed: bool, lo: int, hi: int) -> None:
        """Разрядность, знаковость и границы"""
        assert kind.bits == bits
        assert kind.signed is signed
        assert kind.min_value == lo
        assert kind.max_value == hi

    def test_wrap_identity_in_range(self) -> None:
        """wrap не меняет значения из диапазона"""
        for value in (INT8_MIN, -1, 0, 1, INT8_MAX):
            assert IntKind.INT8.wrap(value) == value

    def test_wrap_twos_complement(self) -> None:
        """wrap отбрасывает старшие разряды"""
        assert IntKind.UINT8.wrap(256) == 0
        assert IntKind.UINT8.wrap(-1) == UINT8_MAX
        assert IntKind.INT8.wrap(128) == -128
        assert IntKind.INT8.wrap(-129) == 127
        assert IntKind.INT32.wrap(2**32 + 5) == 5

    def test_require_literal_accepts_in_range(self) -> None:
        """Литерал из диапазона проходит без изменений"""
        assert IntKind.UINT8.require_literal(255) == 255
        assert IntKind.INT8.require_literal(-128) == -128

    def test_require_literal_out_of_range(self) -> None:
        """Литерал вне диапазона → LiteralOutOfRange (ValueError)"""
        with pytest.raises(LiteralOutOfRange, match="does not fit in uint8"):
            IntKind.UINT8.require_literal(256)

        with pytest.raises(ValueError):
            IntKind.UINT32.require_literal(-1)

    def test_require_literal_rejects_non_int(self) -> None:
        """bool, float и str не являются целыми литералами"""
        for bad in (True, 1.0, "1"):
            with pytest.raises(TypeError, match="literal must be an int"):
                IntKind.INT32.require_literal(bad)

    def test_is_supported_kind(self) -> None:
        """Предикат допуска типов"""
        assert is_supported_kind(IntKind.INT16)
        assert is_supported_kind("uint64")
        assert not is_supported_kind("int128")
        assert not is_supported_kind(32)
        assert not is_supported_kind(None)

    def test_kind_for_bits(self) -> None:
        """Поиск типа по разрядности"""
        assert signed_kind_for_bits(16) is IntKind.INT16
        assert unsigned_kind_for_bits(64) is IntKind.UINT64

        with pytest.raises(ValueError, match="no signed integer kind"):
            signed_kind_for_bits(128)

    def test_pointer_kinds_match_platform(self) -> None:
        """Pointer-width типы соответствуют разрядности интерпретатора"""
        assert INTPTR_KIND.bits == POINTER_BITS
        assert UINTPTR_KIND.bits == POINTER_BITS
        assert INTPTR_KIND.signed
        assert not UINTPTR_KIND.signed


# =============================================================================
# CHECKED ADD / SUB / MUL
# =============================================================================


class TestCheckedAdd:
    """Тесты для checked_add"""

    def test_no_overflow(self) -> None:
        """Обычное сложение"""
        assert checked_add(1, 2, IntKind.INT32) == OverflowResult(3, False)
        assert checked_add(254, 1, IntKind.UINT8) == OverflowResult(255, False)

    def test_unsigned_wrap(self) -> None:
        """255 + 1 в uint8 → 0 с флагом"""
        result = checked_add(255, 1, IntKind.UINT8)
        assert result.result == 0
        assert result.overflowed

    def test_signed_overflow(self) -> None:
        """MAX + 1 и MIN + (-1) в int32"""
        assert checked_add(INT32_MAX, 1, IntKind.INT32) == OverflowResult(INT32_MIN, True)
        assert checked_add(INT32_MIN, -1, IntKind.INT32) == OverflowResult(INT32_MAX, True)

    def test_mixed_signs_never_overflow(self) -> None:
        """Сложение разных знаков не переполняется"""
        assert not checked_add(INT32_MAX, INT32_MIN, IntKind.INT32).overflowed
        assert checked_add(INT32_MAX, INT32_MIN, IntKind.INT32).result == -1


class TestCheckedSub:
    """Тесты для checked_sub"""

    def test_no_overflow(self) -> None:
        assert checked_sub(10, 3, IntKind.UINT8) == OverflowResult(7, False)

    def test_unsigned_underflow(self) -> None:
        """0 - 1 в беззнаковом → max с флагом"""
        assert checked_sub(0, 1, IntKind.UINT64) == OverflowResult(UINT64_MAX, True)

    def test_signed_overflow(self) -> None:
        """MIN - 1 и 0 - MIN в int8"""
        assert checked_sub(INT8_MIN, 1, IntKind.INT8) == OverflowResult(INT8_MAX, True)
        assert checked_sub(0, INT8_MIN, IntKind.INT8) == OverflowResult(INT8_MIN, True)


class TestCheckedMul:
    """Тесты для checked_mul"""

    def test_no_overflow(self) -> None:
        assert checked_mul(15, 17, IntKind.UINT8) == OverflowResult(255, False)
        assert checked_mul(-128, 1, IntKind.INT8) == OverflowResult(-128, False)

    def test_unsigned_overflow(self) -> None:
        assert checked_mul(16, 16, IntKind.UINT8) == OverflowResult(0, True)

    def test_signed_overflow(self) -> None:
        """-1 * MIN: классический случай переполнения"""
        assert checked_mul(-1, INT32_MIN, IntKind.INT32) == OverflowResult(INT32_MIN, True)

    def test_zero_never_overflows(self) -> None:
        assert checked_mul(0, INT64_MIN, IntKind.INT64) == OverflowResult(0, False)


# =============================================================================
# TRUNCATED DIVISION
# =============================================================================


class TestTruncatedDivmod:
    """Тесты для truncated_divmod"""

    @pytest.mark.parametrize(
        "lhs,rhs,expected",
        [
            (7, 2, (3, 1)),
            (-7, 2, (-3, -1)),
            (7, -2, (-3, 1)),
            (-7, -2, (3, -1)),
            (6, 3, (2, 0)),
            (0, 5, (0, 0)),
        ],
    )
    def test_truncates_toward_zero(self, lhs: int, rhs: int, expected: tuple[int, int]) -> None:
        """Частное усекается к нулю, остаток имеет знак делимого"""
        assert truncated_divmod(lhs, rhs) == expected

    def test_identity(self) -> None:
        """lhs == q * rhs + r"""
        for lhs in (-17, -1, 0, 1, 17):
            for rhs in (-5, -1, 1, 5):
                q, r = truncated_divmod(lhs, rhs)
                assert q * rhs + r == lhs
                assert abs(r) < abs(rhs)

    def test_zero_divisor_raises(self) -> None:
        """Проверка делителя остаётся обязанностью вызывающего кода"""
        with pytest.raises(ZeroDivisionError):
            truncated_divmod(1, 0)
