"""Where encoded operations leave the process.

The core only ever calls the two methods of :class:`Transport`. Whatever
implements them owns the network, timeouts and cancellation; it hands back
the response already decoded from JSON and leaves envelope handling to the
caller.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.telegram.org"


class TransportError(RuntimeError):
    """The request never produced a JSON response."""

    def __init__(self, message: str, *, wire_name: str) -> None:
        super().__init__(message)
        self.wire_name = wire_name


class Transport(Protocol):
    async def post_operation(self, wire_name: str, body: dict[str, Any]) -> Any: ...

    async def get_operation(self, wire_name: str) -> Any: ...

    async def close(self) -> None: ...


class HttpxTransport:
    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout_s: float = 120,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not token:
            raise ValueError("Telegram token is empty")
        self._base = f"{base_url.rstrip('/')}/bot{token}"
        self._client = client or httpx.AsyncClient(timeout=timeout_s)
        self._owns_client = client is None

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def post_operation(self, wire_name: str, body: dict[str, Any]) -> Any:
        return await self._send("POST", wire_name, body)

    async def get_operation(self, wire_name: str) -> Any:
        return await self._send("GET", wire_name, None)

    async def _send(
        self, verb: str, wire_name: str, body: dict[str, Any] | None
    ) -> Any:
        url = f"{self._base}/{wire_name}"
        try:
            if body is None:
                resp = await self._client.get(url)
            else:
                resp = await self._client.post(url, json=body)
        except httpx.HTTPError as e:
            logger.error(
                "telegram.network_error",
                method=wire_name,
                verb=verb,
                url=url,
                error=str(e),
                error_type=e.__class__.__name__,
            )
            raise TransportError(
                f"{wire_name}: {e.__class__.__name__}: {e}", wire_name=wire_name
            ) from e

        try:
            payload = resp.json()
        except ValueError as e:
            logger.error(
                "telegram.bad_response",
                method=wire_name,
                status=resp.status_code,
                url=str(resp.request.url),
                error=str(e),
                error_type=e.__class__.__name__,
                body=resp.text,
            )
            raise TransportError(
                f"{wire_name}: HTTP {resp.status_code} with a non-JSON body",
                wire_name=wire_name,
            ) from e

        if resp.is_error:
            # Telegram reports failures as envelopes; they decode as Failed.
            logger.debug(
                "telegram.http_error",
                method=wire_name,
                status=resp.status_code,
                url=str(resp.request.url),
            )
        return payload


__all__ = ["DEFAULT_API_URL", "HttpxTransport", "Transport", "TransportError"]
