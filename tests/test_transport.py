import json

import httpx
import pytest

from botwire.client import BotApi
from botwire.envelope import Failed, Ok
from botwire.transport import HttpxTransport, TransportError

TOKEN = "123:abcDEF_ghij"


@pytest.mark.anyio
async def test_post_sends_json_body() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"ok": True, "result": True}, request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = HttpxTransport(TOKEN, client=client)
        payload = await transport.post_operation("deleteMessage", {"chat_id": 1, "message_id": 2})

    assert payload == {"ok": True, "result": True}
    (request,) = captured
    assert request.method == "POST"
    assert str(request.url) == f"https://api.telegram.org/bot{TOKEN}/deleteMessage"
    assert json.loads(request.content) == {"chat_id": 1, "message_id": 2}


@pytest.mark.anyio
async def test_get_sends_no_body() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            json={"ok": True, "result": {"id": 1, "is_bot": True, "first_name": "b"}},
            request=request,
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = HttpxTransport(TOKEN, base_url="http://localhost:8081/", client=client)
        await transport.get_operation("getMe")

    (request,) = captured
    assert request.method == "GET"
    assert str(request.url) == f"http://localhost:8081/bot{TOKEN}/getMe"
    assert request.content == b""


@pytest.mark.anyio
async def test_error_status_still_returns_envelope() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            429,
            json={
                "ok": False,
                "error_code": 429,
                "description": "Too Many Requests: retry after 3",
                "parameters": {"retry_after": 3},
            },
            request=request,
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = BotApi(HttpxTransport(TOKEN, client=client))
        envelope = await api.send_message(chat_id=1, text="hi")

    assert isinstance(envelope, Failed)
    assert envelope.error_code == 429
    assert envelope.retry_after == 3


@pytest.mark.anyio
async def test_non_json_body_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = HttpxTransport(TOKEN, client=client)
        with pytest.raises(TransportError) as exc:
            await transport.post_operation("sendMessage", {"chat_id": 1, "text": "x"})

    assert exc.value.wire_name == "sendMessage"
    assert "502" in str(exc.value)


@pytest.mark.anyio
async def test_network_error_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = BotApi(HttpxTransport(TOKEN, client=client))
        with pytest.raises(TransportError, match="ConnectError"):
            await api.get_me()


@pytest.mark.anyio
async def test_ok_through_httpx() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True, "result": "https://t.me/+abc"}, request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        api = BotApi(HttpxTransport(TOKEN, client=client))
        envelope = await api.export_chat_invite_link(chat_id=-100)

    assert envelope == Ok("https://t.me/+abc")


def test_empty_token_raises() -> None:
    with pytest.raises(ValueError, match="empty"):
        HttpxTransport("")


@pytest.mark.anyio
async def test_close_owned_client() -> None:
    async with HttpxTransport(TOKEN) as transport:
        assert transport is not None


@pytest.mark.anyio
async def test_close_leaves_external_client_open() -> None:
    async with httpx.AsyncClient() as external:
        transport = HttpxTransport(TOKEN, client=external)
        await transport.close()
        assert not external.is_closed
