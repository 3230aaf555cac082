"""
Тесты для текстового представления checked значений

Проверяет:
1. render() для валидных и failed значений, системы счисления, имя типа
2. RenderConfig валидацию
3. write_to() в произвольный sink
4. log_checked() через стандартный logging
5. __str__ / __repr__
"""

import io
import logging

import pytest

from src.core.domain import (
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
    SafeInt8,
    SafeInt32,
    SafeUInt8,
    SafeUInt16,
    log_checked,
    render,
    write_to,
)


class TestRenderConfig:
    """Тесты RenderConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_RENDER_CONFIG.base == 10
        assert DEFAULT_RENDER_CONFIG.failure_token == "<failure>"
        assert DEFAULT_RENDER_CONFIG.show_kind is False

    def test_invalid_base(self) -> None:
        with pytest.raises(ValueError, match="base must be one of"):
            RenderConfig(base=3)

    def test_empty_failure_token(self) -> None:
        with pytest.raises(ValueError, match="failure_token"):
            RenderConfig(failure_token="")


class TestRender:
    """Тесты render"""

    def test_decimal(self) -> None:
        assert render(SafeInt32(-42)) == "-42"
        assert render(SafeUInt8(0)) == "0"

    @pytest.mark.parametrize(
        "base,expected",
        [(2, "0b11111111"), (8, "0o377"), (10, "255"), (16, "0xff")],
    )
    def test_bases(self, base: int, expected: str) -> None:
        assert render(SafeUInt8(255), RenderConfig(base=base)) == expected

    def test_negative_hex(self) -> None:
        assert render(SafeInt8(-16), RenderConfig(base=16)) == "-0x10"

    def test_failure_token(self) -> None:
        assert render(SafeInt32(7, True)) == "<failure>"
        assert render(SafeInt32(7, True), RenderConfig(failure_token="ERR")) == "ERR"

    def test_show_kind(self) -> None:
        config = RenderConfig(show_kind=True)
        assert render(SafeUInt16(5), config) == "uint16:5"
        assert render(SafeUInt16(5, True), config) == "uint16:<failure>"


class TestWriteTo:
    """Тесты write_to"""

    def test_appends_tokens(self) -> None:
        sink = io.StringIO()
        write_to(sink, SafeInt32(1))
        sink.write(" ")
        write_to(sink, SafeInt32(2, True))
        assert sink.getvalue() == "1 <failure>"

    def test_returns_sink(self) -> None:
        sink = io.StringIO()
        assert write_to(sink, SafeUInt8(3)) is sink


class TestLogChecked:
    """Тесты log_checked"""

    def test_valid_value_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.rendering"):
            log_checked("answer", SafeInt32(303))

        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].getMessage() == "answer = 303"

    def test_failed_value_escalated_to_warning(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.rendering"):
            log_checked("index", SafeUInt8(1, True))

        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == "index = <failure>"

    def test_custom_logger(self, caplog) -> None:
        custom = logging.getLogger("checked.custom")
        with caplog.at_level(logging.INFO, logger="checked.custom"):
            log_checked("x", SafeInt8(-1), log=custom, level=logging.INFO)

        assert [r.name for r in caplog.records] == ["checked.custom"]


class TestDunderText:
    """Тесты __str__ / __repr__"""

    def test_str(self) -> None:
        assert str(SafeInt32(42)) == "42"
        assert str(SafeInt32(42, True)) == "<failure>"
        assert f"{SafeUInt8(7)}" == "7"

    def test_repr(self) -> None:
        assert repr(SafeInt32(42)) == "SafeInt32(42)"
        assert repr(SafeUInt8(9, True)) == "SafeUInt8(0, error=True)"
