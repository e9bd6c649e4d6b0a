from __future__ import annotations

import errno
import logging
import re
import sys
from typing import Any

import structlog

TELEGRAM_TOKEN_RE = re.compile(r"bot\d+:[A-Za-z0-9_-]+")
TELEGRAM_BARE_TOKEN_RE = re.compile(r"\b\d+:[A-Za-z0-9_-]{10,}\b")

_NOISY_LOGGERS = ("httpcore", "httpx")


def redact_token(text: str) -> str:
    redacted = TELEGRAM_TOKEN_RE.sub("bot[REDACTED]", text)
    return TELEGRAM_BARE_TOKEN_RE.sub("[REDACTED_TOKEN]", redacted)


def redact_token_processor(_, __, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor to redact Telegram tokens from every string in an event."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            redacted = redact_token(value)
            if redacted != value:
                event_dict[key] = redacted
    return event_dict


class RedactTokenFilter(logging.Filter):
    """Scrub tokens from stdlib records, such as httpx's request lines."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            return True
        redacted = redact_token(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


class SafeStreamHandler(logging.StreamHandler):
    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        if isinstance(exc, BrokenPipeError) or (
            isinstance(exc, OSError) and exc.errno == errno.EPIPE
        ):
            try:
                self.stream.close()
            except OSError:
                pass
            return
        super().handleError(record)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def setup_logging(*, debug: bool = False) -> None:
    """Configure structlog with console output and token redaction."""

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            redact_token_processor,
            structlog.dev.ConsoleRenderer(colors=True)
            if debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = SafeStreamHandler(sys.stderr)
    handler.addFilter(RedactTokenFilter())
    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=logging.DEBUG if debug else logging.INFO,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = [
    "RedactTokenFilter",
    "SafeStreamHandler",
    "get_logger",
    "redact_token",
    "redact_token_processor",
    "setup_logging",
]
