"""
Overflow Primitives — checked add/sub/mul для целых фиксированной ширины

Каждая операция возвращает пару (wrapped result, overflowed):
- result: two's-complement результат, определён даже при переполнении
- overflowed: True тогда и только тогда, когда точный математический
  результат не помещается в тип

Python int не переполняется, поэтому точный результат вычисляется напрямую,
а затем сворачивается в разрядность типа. Никаких post-hoc проверок
диапазона над уже переполненным машинным значением не требуется.

Модуль также содержит деление с усечением к нулю (семантика машинного
деления), которое используется checked-делением и остатком.
"""

from typing import NamedTuple

from src.core.math.int_kinds import IntKind


class OverflowResult(NamedTuple):
    """Результат checked-примитива: wrapped значение и флаг переполнения"""

    result: int
    overflowed: bool


def _checked(exact: int, kind: IntKind) -> OverflowResult:
    wrapped = kind.wrap(exact)
    return OverflowResult(wrapped, wrapped != exact)


def checked_add(lhs: int, rhs: int, kind: IntKind) -> OverflowResult:
    """
    Сложение с детекцией переполнения.

    Args:
        lhs: Левый операнд (в диапазоне kind)
        rhs: Правый операнд (в диапазоне kind)
        kind: Целочисленный тип операции

    Returns:
        OverflowResult(wrapped, overflowed)

    Examples:
        >>> checked_add(255, 1, IntKind.UINT8)
        OverflowResult(result=0, overflowed=True)
        >>> checked_add(-128, -1, IntKind.INT8)
        OverflowResult(result=127, overflowed=True)
        >>> checked_add(1, 2, IntKind.INT32)
        OverflowResult(result=3, overflowed=False)
    """
    return _checked(lhs + rhs, kind)


def checked_sub(lhs: int, rhs: int, kind: IntKind) -> OverflowResult:
    """
    Вычитание с детекцией переполнения.

    Для беззнаковых типов уход ниже нуля считается underflow (wrap к max).

    Examples:
        >>> checked_sub(0, 1, IntKind.UINT32)
        OverflowResult(result=4294967295, overflowed=True)
        >>> checked_sub(-2147483648, 1, IntKind.INT32)
        OverflowResult(result=2147483647, overflowed=True)
    """
    return _checked(lhs - rhs, kind)


def checked_mul(lhs: int, rhs: int, kind: IntKind) -> OverflowResult:
    """
    Умножение с детекцией переполнения.

    Examples:
        >>> checked_mul(16, 16, IntKind.UINT8)
        OverflowResult(result=0, overflowed=True)
        >>> checked_mul(-1, -128, IntKind.INT8)
        OverflowResult(result=-128, overflowed=True)
    """
    return _checked(lhs * rhs, kind)


def truncated_divmod(lhs: int, rhs: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю и остаток со знаком делимого.

    Python // округляет к минус бесконечности; машинное деление усекает
    к нулю. Инвариант: lhs == q * rhs + r, abs(r) < abs(rhs).

    Args:
        lhs: Делимое
        rhs: Делитель (не ноль)

    Returns:
        (quotient, remainder)

    Raises:
        ZeroDivisionError: Если rhs == 0 (вызывающий код проверяет заранее)

    Examples:
        >>> truncated_divmod(7, 2)
        (3, 1)
        >>> truncated_divmod(-7, 2)
        (-3, -1)
        >>> truncated_divmod(7, -2)
        (-3, 1)
    """
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient

    return quotient, lhs - quotient * rhs
