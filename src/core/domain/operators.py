"""
Operator Layer — бинарные и унарные операторы поверх compound-операций

Каждый бинарный оператор строится одинаково: копия левого операнда,
применение compound-операции (iadd, isub, ...), возврат копии.
Исходные операнды никогда не изменяются.

Разделение по знаковости:
- CheckedArithmetic: + - * / // % (все типы)
- NegationOperator: унарный минус (только знаковые)
- BitwiseOperators: & | ^ << >> ~ (только беззнаковые)

Знаковый класс просто не имеет битовых операторов, поэтому попытка
x & y для знакового x отклоняется type checker'ом статически и
TypeError во время выполнения.
"""

from typing import Any, Optional


class CheckedArithmetic:
    """Mixin арифметических операторов: + - * / // % и унарный +"""

    __slots__ = ()

    def _binary(self, other: Any, compound: str, reflected: bool = False) -> Any:
        operand = self._coerce(other)  # type: ignore[attr-defined]
        if operand is NotImplemented:
            return NotImplemented

        lhs, rhs = (operand, self) if reflected else (self, operand)
        return getattr(lhs.copy(), compound)(rhs)

    def __add__(self, other: Any) -> Any:
        return self._binary(other, "iadd")

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, "iadd", reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, "isub")

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, "isub", reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, "imul")

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, "imul", reflected=True)

    # Машинное деление: усечение к нулю для / и для //
    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, "idiv")

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, "idiv", reflected=True)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: Any) -> Any:
        return self._binary(other, "imod")

    def __rmod__(self, other: Any) -> Any:
        return self._binary(other, "imod", reflected=True)

    def __pos__(self) -> Any:
        return self.copy()  # type: ignore[attr-defined]


class NegationOperator:
    """Mixin унарного минуса для знаковых типов: -x == zero() - x"""

    __slots__ = ()

    def __neg__(self) -> Any:
        return self.zero() - self  # type: ignore[attr-defined]


class BitwiseOperators:
    """
    Mixin битовых операций и сдвигов для беззнаковых типов.

    Новая ошибка здесь невозможна: флаг ошибки результата равен OR флагов
    операндов. Вычисление идёт над get(), т.е. failed операнд даёт 0.
    """

    __slots__ = ()

    def _shift_amount(self, bits: Any) -> Optional[tuple[int, bool]]:
        if isinstance(bits, BitwiseOperators):
            return bits.get(), bits.failure()  # type: ignore[attr-defined]

        if isinstance(bits, int) and not isinstance(bits, bool) and bits >= 0:
            return bits, False

        return None

    def _require_bitwise_operand(self, rhs: Any) -> Any:
        operand = self._coerce(rhs)  # type: ignore[attr-defined]
        if operand is NotImplemented:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {type(rhs).__name__}"
            )
        return operand

    # -------------------------------------------------------------------------
    # Compound (in-place) операции
    # -------------------------------------------------------------------------

    def iand(self, rhs: Any) -> Any:
        operand = self._require_bitwise_operand(rhs)
        self._assign(self.get() & operand.get(), self.failure() or operand.failure())  # type: ignore[attr-defined]
        return self

    def ior(self, rhs: Any) -> Any:
        operand = self._require_bitwise_operand(rhs)
        self._assign(self.get() | operand.get(), self.failure() or operand.failure())  # type: ignore[attr-defined]
        return self

    def ixor(self, rhs: Any) -> Any:
        operand = self._require_bitwise_operand(rhs)
        self._assign(self.get() ^ operand.get(), self.failure() or operand.failure())  # type: ignore[attr-defined]
        return self

    def ilshift(self, bits: Any) -> Any:
        amount = self._shift_amount(bits)
        if amount is None:
            raise TypeError(f"invalid shift amount: {bits!r}")

        count, count_failed = amount
        shifted = 0
        if count < self.KIND.bits:  # type: ignore[attr-defined]
            shifted = (self.get() << count) & self.KIND.mask  # type: ignore[attr-defined]
        self._assign(shifted, self.failure() or count_failed)  # type: ignore[attr-defined]
        return self

    def irshift(self, bits: Any) -> Any:
        amount = self._shift_amount(bits)
        if amount is None:
            raise TypeError(f"invalid shift amount: {bits!r}")

        count, count_failed = amount
        self._assign(self.get() >> count, self.failure() or count_failed)  # type: ignore[attr-defined]
        return self

    # -------------------------------------------------------------------------
    # Бинарные операторы
    # -------------------------------------------------------------------------

    def _bitwise(self, other: Any, compound: str, reflected: bool = False) -> Any:
        operand = self._coerce(other)  # type: ignore[attr-defined]
        if operand is NotImplemented:
            return NotImplemented

        lhs, rhs = (operand, self) if reflected else (self, operand)
        return getattr(lhs.copy(), compound)(rhs)

    def __and__(self, other: Any) -> Any:
        return self._bitwise(other, "iand")

    def __rand__(self, other: Any) -> Any:
        return self._bitwise(other, "iand", reflected=True)

    def __or__(self, other: Any) -> Any:
        return self._bitwise(other, "ior")

    def __ror__(self, other: Any) -> Any:
        return self._bitwise(other, "ior", reflected=True)

    def __xor__(self, other: Any) -> Any:
        return self._bitwise(other, "ixor")

    def __rxor__(self, other: Any) -> Any:
        return self._bitwise(other, "ixor", reflected=True)

    def __lshift__(self, bits: Any) -> Any:
        if self._shift_amount(bits) is None:
            return NotImplemented
        return self.copy().ilshift(bits)  # type: ignore[attr-defined]

    def __rshift__(self, bits: Any) -> Any:
        if self._shift_amount(bits) is None:
            return NotImplemented
        return self.copy().irshift(bits)  # type: ignore[attr-defined]

    def __invert__(self) -> Any:
        return self.max() ^ self  # type: ignore[attr-defined]
