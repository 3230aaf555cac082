"""
Error Codes — коды ошибок для кода вне checked-ядра

ErrorCode представляет код как значение: 0 означает успех, любое ненулевое значение
ошибку. Отрицательные коды считаются "checked" (ожидаемыми и
обрабатываемыми вызывающим кодом), положительные "unchecked".

Errc перечисляет именованные коды, включая категории арифметических отказов
(unsigned wrap, narrow overflow, signed overflow, divide by zero).

CheckedInt сам код не хранит: его ошибка остаётся одним битом.
Коды предназначены для слоёв выше, которым нужно сообщить причину
отказа (например, после проверки failure() на границе доверия).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class Errc(IntEnum):
    """Предопределённые коды ошибок"""

    SUCCESS = 0
    FAILURE = 1
    PRECONDITION = 2
    POSTCONDITION = 3
    ASSERTION = 4

    INVALID_ARGUMENT = 10
    INDEX_OUT_OF_BOUNDS = 11
    BAD_FUNCTION = 12

    UNSIGNED_WRAP = 30
    NARROW_OVERFLOW = 31
    SIGNED_OVERFLOW = 32
    DIVIDE_BY_ZERO = 33
    NULLPTR_DEREFERENCE = 34


_MESSAGES: Final[dict[int, str]] = {
    Errc.SUCCESS: "success",
    Errc.FAILURE: "general failure",
    Errc.PRECONDITION: "general precondition failure",
    Errc.POSTCONDITION: "general postcondition failure",
    Errc.ASSERTION: "general assertion failure",
    Errc.INVALID_ARGUMENT: "invalid argument (precondition) failure",
    Errc.INDEX_OUT_OF_BOUNDS: "index out of bounds (precondition) failure",
    Errc.BAD_FUNCTION: "function not callable (precondition) failure",
    Errc.UNSIGNED_WRAP: "unsigned wrap (assertion) failure",
    Errc.NARROW_OVERFLOW: "narrow overflow (assertion) failure",
    Errc.SIGNED_OVERFLOW: "signed overflow (assertion) failure",
    Errc.DIVIDE_BY_ZERO: "divide by zero (assertion) failure",
    Errc.NULLPTR_DEREFERENCE: "null dereference (assertion) failure",
}


@dataclass(frozen=True)
class ErrorCode:
    """
    Код ошибки как значение.

    Attributes:
        code: Целый код (0 = success)
    """

    code: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(f"error code must be an int, got {type(self.code).__name__}")

        # Errc хранится как обычный int, чтобы ErrorCode(Errc.X) == ErrorCode(x)
        object.__setattr__(self, "code", int(self.code))

    def get(self) -> int:
        return self.code

    def success(self) -> bool:
        return self.code == 0

    def failure(self) -> bool:
        return self.code != 0

    def is_checked(self) -> bool:
        """Отрицательный код: ошибка, которую вызывающий код обязан обработать"""
        return self.code < 0

    def is_unchecked(self) -> bool:
        return self.code > 0

    def message(self) -> str:
        """Человекочитаемое описание; пустая строка для неизвестного кода"""
        return _MESSAGES.get(self.code, "")

    def __bool__(self) -> bool:
        return self.success()

    def __str__(self) -> str:
        return self.message()


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ЗНАЧЕНИЯ
# =============================================================================

ERRC_SUCCESS: Final[ErrorCode] = ErrorCode(Errc.SUCCESS)
ERRC_FAILURE: Final[ErrorCode] = ErrorCode(Errc.FAILURE)
ERRC_PRECONDITION: Final[ErrorCode] = ErrorCode(Errc.PRECONDITION)
ERRC_POSTCONDITION: Final[ErrorCode] = ErrorCode(Errc.POSTCONDITION)
ERRC_ASSERTION: Final[ErrorCode] = ErrorCode(Errc.ASSERTION)
ERRC_INVALID_ARGUMENT: Final[ErrorCode] = ErrorCode(Errc.INVALID_ARGUMENT)
ERRC_INDEX_OUT_OF_BOUNDS: Final[ErrorCode] = ErrorCode(Errc.INDEX_OUT_OF_BOUNDS)
ERRC_BAD_FUNCTION: Final[ErrorCode] = ErrorCode(Errc.BAD_FUNCTION)
ERRC_UNSIGNED_WRAP: Final[ErrorCode] = ErrorCode(Errc.UNSIGNED_WRAP)
ERRC_NARROW_OVERFLOW: Final[ErrorCode] = ErrorCode(Errc.NARROW_OVERFLOW)
ERRC_SIGNED_OVERFLOW: Final[ErrorCode] = ErrorCode(Errc.SIGNED_OVERFLOW)
ERRC_DIVIDE_BY_ZERO: Final[ErrorCode] = ErrorCode(Errc.DIVIDE_BY_ZERO)
ERRC_NULLPTR_DEREFERENCE: Final[ErrorCode] = ErrorCode(Errc.NULLPTR_DEREFERENCE)
