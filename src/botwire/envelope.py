"""The ``{"ok": ...}`` wrapper every Bot API method answers with."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from .codec import DecodeError, convert
from .ids import ChatId
from .objects.base import TelegramObject

T = TypeVar("T")

_RETRY_AFTER_RE = re.compile(r"retry after (\d+)", re.IGNORECASE)


class ResponseParameters(TelegramObject):
    migrate_to_chat_id: ChatId | None = None
    retry_after: int | None = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    result: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failed:
    error_code: int
    description: str
    parameters: ResponseParameters | None = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def retry_after(self) -> int | None:
        """Seconds to wait before repeating the call, when the server said so."""
        if self.parameters is not None and self.parameters.retry_after is not None:
            return self.parameters.retry_after
        match = _RETRY_AFTER_RE.search(self.description)
        if match is None:
            return None
        return int(match.group(1))

    @property
    def migrate_to_chat_id(self) -> ChatId | None:
        if self.parameters is None:
            return None
        return self.parameters.migrate_to_chat_id


Envelope: TypeAlias = Ok[T] | Failed


class ApiError(RuntimeError):
    def __init__(self, failed: Failed) -> None:
        super().__init__(f"{failed.error_code}: {failed.description}")
        self.failed = failed

    @property
    def error_code(self) -> int:
        return self.failed.error_code

    @property
    def description(self) -> str:
        return self.failed.description


def decode_envelope(raw: Any, result_type: Any) -> Ok[Any] | Failed:
    """Decode an already-parsed response into ``Ok`` or ``Failed``.

    The ``result`` of a successful response is decoded with ``result_type``'s
    own rules, variant families included. Any payload that is not a well
    formed envelope raises :class:`DecodeError` instead.
    """
    if not isinstance(raw, dict):
        raise DecodeError("Response is not an object", raw=raw)
    ok = raw.get("ok")
    if not isinstance(ok, bool):
        if "ok" not in raw:
            raise DecodeError("Response missing required field `ok`", raw=raw)
        raise DecodeError("Expected `bool`", raw=raw, path="$.ok")
    if ok:
        if "result" not in raw:
            raise DecodeError("Response missing required field `result`", raw=raw)
        return Ok(convert(raw["result"], result_type, path="$.result"))

    error_code = raw.get("error_code")
    if not isinstance(error_code, int) or isinstance(error_code, bool):
        raise DecodeError("Expected `int` error code", raw=raw, path="$.error_code")
    description = raw.get("description")
    if not isinstance(description, str):
        raise DecodeError("Expected `str` description", raw=raw, path="$.description")
    parameters = raw.get("parameters")
    if parameters is not None:
        parameters = convert(parameters, ResponseParameters, path="$.parameters")
    return Failed(error_code, description, parameters)


def unwrap(envelope: Ok[T] | Failed) -> T:
    if isinstance(envelope, Failed):
        raise ApiError(envelope)
    return envelope.result


__all__ = [
    "ApiError",
    "Envelope",
    "Failed",
    "Ok",
    "ResponseParameters",
    "decode_envelope",
    "unwrap",
]
