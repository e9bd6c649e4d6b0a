import logging
from typing import Any, cast

from botwire.logging import (
    RedactTokenFilter,
    get_logger,
    redact_token_processor,
    setup_logging,
)


def _record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestRedactTokenFilter:
    def test_redacts_bot_token(self) -> None:
        record = _record("https://api.telegram.org/bot123456789:ABCdefGHI_jkl/sendMessage")

        RedactTokenFilter().filter(record)

        assert "123456789" not in record.getMessage()
        assert "bot[REDACTED]" in record.getMessage()

    def test_redacts_bare_token(self) -> None:
        record = _record("Token is 123456789:ABCDEFGHIJ_klmnop")

        RedactTokenFilter().filter(record)

        assert "123456789" not in record.getMessage()
        assert "[REDACTED_TOKEN]" in record.getMessage()

    def test_no_token_unchanged(self) -> None:
        record = _record("This is a normal message")

        assert RedactTokenFilter().filter(record) is True
        assert record.getMessage() == "This is a normal message"

    def test_handles_format_args(self) -> None:
        record = _record(
            'HTTP Request: POST %s "%s"',
            "https://api.telegram.org/bot123456789:ABCdefGHI_jkl/getMe",
            "HTTP/1.1 200 OK",
        )

        RedactTokenFilter().filter(record)

        assert "123456789" not in record.getMessage()
        assert record.getMessage().endswith('"HTTP/1.1 200 OK"')

    def test_handles_broken_record(self) -> None:
        class BadRecord:
            def getMessage(self):
                raise TypeError("bad")

        assert RedactTokenFilter().filter(cast(Any, BadRecord())) is True


class TestRedactProcessor:
    def test_redacts_every_string_value(self) -> None:
        event = {
            "event": "telegram.network_error",
            "url": "https://api.telegram.org/bot123:abcdefghijklmnop/getMe",
            "status": 500,
        }

        result = redact_token_processor(None, "error", event)

        assert result["url"] == "https://api.telegram.org/bot[REDACTED]/getMe"
        assert result["status"] == 500
        assert result["event"] == "telegram.network_error"


class TestSetupLogging:
    def test_setup_debug_mode(self) -> None:
        setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_info_mode(self) -> None:
        setup_logging(debug=False)
        assert logging.getLogger().level == logging.INFO

    def test_silences_noisy_loggers(self) -> None:
        setup_logging()
        assert logging.getLogger("httpcore").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_root_handler_redacts(self) -> None:
        setup_logging()
        assert any(
            isinstance(f, RedactTokenFilter)
            for handler in logging.getLogger().handlers
            for f in handler.filters
        )


def test_get_logger_binds() -> None:
    logger = get_logger("botwire.test")
    assert hasattr(logger, "info")
