from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .codec import DecodeError
from .envelope import Failed, Ok
from .logging import get_logger
from .methods import Request
from .operations import OPERATIONS, HttpVerb, Operation
from .transport import DEFAULT_API_URL, HttpxTransport, Transport

logger = get_logger(__name__)

Req = TypeVar("Req", bound=Request)
Res = TypeVar("Res")

RequestHook = Callable[[Operation[Any, Any], dict[str, Any] | None], None]
ResponseHook = Callable[[Operation[Any, Any], Ok[Any] | Failed], None]


@dataclass(frozen=True, slots=True)
class BoundOperation(Generic[Req, Res]):
    api: BotApi
    op: Operation[Req, Res]

    async def __call__(
        self, request: Req | None = None, /, **fields: Any
    ) -> Ok[Res] | Failed:
        if request is not None and fields:
            raise TypeError(
                f"{self.op.name} takes a request record or fields, not both"
            )
        if request is None and (fields or self.op.request_type is not None):
            request = self.op.build(**fields)
        return await self.api.call(self.op, request)


class BotApi:
    """Invoke bound operations over a :class:`Transport`.

    ``api.send_message(chat_id=42, text="hi")`` builds the request record,
    sends it and returns the decoded envelope. A ``Failed`` envelope is a
    normal return value; only transport and decode problems raise.

    The server-side ``close`` method is shadowed by :meth:`close`; invoke it
    with ``api.call(operations.close)``.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        on_request: RequestHook | None = None,
        on_response: ResponseHook | None = None,
    ) -> None:
        self._transport = transport
        self._on_request = on_request
        self._on_response = on_response

    @classmethod
    def from_token(
        cls,
        token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout_s: float = 120,
        on_request: RequestHook | None = None,
        on_response: ResponseHook | None = None,
    ) -> BotApi:
        transport = HttpxTransport(token, base_url=base_url, timeout_s=timeout_s)
        return cls(transport, on_request=on_request, on_response=on_response)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def __aenter__(self) -> BotApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    async def call(
        self, op: Operation[Req, Res], request: Req | None = None
    ) -> Ok[Res] | Failed:
        body = op.encode(request)
        if self._on_request is not None:
            self._on_request(op, body)
        logger.debug(
            "telegram.request",
            operation=op.name,
            method=op.wire_name,
            verb=op.verb.value,
            payload=body,
        )
        if op.verb is HttpVerb.GET:
            raw = await self._transport.get_operation(op.wire_name)
        else:
            assert body is not None
            raw = await self._transport.post_operation(op.wire_name, body)

        try:
            envelope = op.decode(raw)
        except DecodeError as e:
            logger.error(
                "telegram.decode_error",
                operation=op.name,
                method=op.wire_name,
                path=e.path,
                error=e.reason,
            )
            raise

        if isinstance(envelope, Failed):
            logger.info(
                "telegram.api_error",
                operation=op.name,
                method=op.wire_name,
                error_code=envelope.error_code,
                description=envelope.description,
                retry_after=envelope.retry_after,
            )
        else:
            logger.debug("telegram.response", operation=op.name, method=op.wire_name)
        if self._on_response is not None:
            self._on_response(op, envelope)
        return envelope

    def bind(self, op: Operation[Req, Res]) -> BoundOperation[Req, Res]:
        return BoundOperation(self, op)

    def __getattr__(self, name: str) -> BoundOperation[Any, Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        op = OPERATIONS.get(name)
        if op is None:
            raise AttributeError(f"{type(self).__name__} has no operation {name!r}")
        return BoundOperation(self, op)


__all__ = ["BotApi", "BoundOperation", "RequestHook", "ResponseHook"]
