"""
Rendering — текстовое представление checked-значений

Hook для внешних средств вывода и логирования:
- render() строит токен (никакого I/O)
- write_to() дописывает токен в любой sink с методом write(str)
- log_checked() отправляет токен в стандартный logging

Арифметическое ядро само ничего не пишет и не логирует.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Optional, Protocol

if TYPE_CHECKING:
    from src.core.domain.checked_int import CheckedInt

logger = logging.getLogger(__name__)

SUPPORTED_BASES: Final[tuple[int, ...]] = (2, 8, 10, 16)

_BASE_PREFIX: Final[dict[int, str]] = {2: "0b", 8: "0o", 10: "", 16: "0x"}


class TextSink(Protocol):
    """Любой приёмник текста: io.StringIO, sys.stdout, открытый файл"""

    def write(self, text: str, /) -> object: ...


@dataclass(frozen=True)
class RenderConfig:
    """
    Конфигурация текстового представления.

    Attributes:
        base: Система счисления (2, 8, 10, 16)
        failure_token: Токен для failed значения
        show_kind: Добавлять имя типа (например, "int32:42")
    """

    base: int = 10
    failure_token: str = "<failure>"
    show_kind: bool = False

    def __post_init__(self) -> None:
        if self.base not in SUPPORTED_BASES:
            raise ValueError(f"base must be one of {SUPPORTED_BASES}, got {self.base}")

        if not self.failure_token:
            raise ValueError("failure_token must be a non-empty string")


DEFAULT_RENDER_CONFIG: Final[RenderConfig] = RenderConfig()


def _digits(value: int, base: int) -> str:
    magnitude = abs(value)
    if base == 2:
        body = format(magnitude, "b")
    elif base == 8:
        body = format(magnitude, "o")
    elif base == 16:
        body = format(magnitude, "x")
    else:
        body = str(magnitude)

    sign = "-" if value < 0 else ""
    return f"{sign}{_BASE_PREFIX[base]}{body}"


def render(value: "CheckedInt", config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
    """
    Текстовый токен checked-значения.

    Examples:
        >>> render(SafeInt32(-42))
        '-42'
        >>> render(SafeUInt8(255), RenderConfig(base=16))
        '0xff'
        >>> render(SafeInt32(7, error=True))
        '<failure>'
    """
    if value.failure():
        token = config.failure_token
    else:
        token = _digits(value.get(), config.base)

    if config.show_kind:
        return f"{value.KIND.value}:{token}"
    return token


def write_to(
    sink: TextSink,
    value: "CheckedInt",
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> TextSink:
    """Дописать токен значения в sink; возвращает sink для цепочек."""
    sink.write(render(value, config))
    return sink


def log_checked(
    label: str,
    value: "CheckedInt",
    log: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> None:
    """
    Записать значение в лог.

    Failed значения логируются с уровнем не ниже WARNING.
    """
    target = log or logger
    if value.failure():
        level = max(level, logging.WARNING)

    target.log(level, "%s = %s", label, render(value, config))
