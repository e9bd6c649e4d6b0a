import pytest

from botwire import operations
from botwire.client import BotApi, BoundOperation
from botwire.codec import DecodeError
from botwire.envelope import Failed, Ok
from botwire.methods import EditMessageText, GetChat, SendMessage, SetChatTitle
from botwire.objects import Message, User
from botwire.transport import HttpxTransport
from tests.factories import FakeTransport, failed, message_payload, ok, user_payload


@pytest.mark.anyio
async def test_send_message_end_to_end(api: BotApi, fake_transport: FakeTransport) -> None:
    fake_transport.reply(ok(message_payload(7, "hi")))

    envelope = await api.send_message(chat_id=42, text="hi")

    assert fake_transport.posts == [("sendMessage", {"chat_id": 42, "text": "hi"})]
    assert isinstance(envelope, Ok)
    assert isinstance(envelope.result, Message)
    assert envelope.result.message_id == 7
    assert envelope.result.text == "hi"


@pytest.mark.anyio
async def test_call_with_record(api: BotApi, fake_transport: FakeTransport) -> None:
    fake_transport.reply(ok(message_payload()))

    await api.call(operations.send_message, SendMessage(chat_id="@news", text="hi"))

    assert fake_transport.posts == [("sendMessage", {"chat_id": "@news", "text": "hi"})]


@pytest.mark.anyio
async def test_bound_operation_accepts_record(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    fake_transport.reply(ok(message_payload()))

    await api.send_message(SendMessage(chat_id=1, text="x"))

    assert fake_transport.posts[0][1] == {"chat_id": 1, "text": "x"}


@pytest.mark.anyio
async def test_bound_operation_rejects_record_and_fields(api: BotApi) -> None:
    with pytest.raises(TypeError, match="not both"):
        await api.send_message(SendMessage(chat_id=1, text="x"), text="y")


@pytest.mark.anyio
async def test_set_chat_title_failure_is_returned(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    title = "t" * 300
    fake_transport.reply(failed(400, "Bad Request: title too long"))

    envelope = await api.set_chat_title(chat_id=-100, title=title)

    assert fake_transport.posts == [("setChatTitle", {"chat_id": -100, "title": title})]
    assert envelope == Failed(400, "Bad Request: title too long")


@pytest.mark.anyio
async def test_get_operation_sends_no_body(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    fake_transport.reply(ok(user_payload(99, is_bot=True, username="wire_bot")))

    envelope = await api.get_me()

    assert fake_transport.gets == ["getMe"]
    assert fake_transport.posts == []
    assert isinstance(envelope.result, User)
    assert envelope.result.username == "wire_bot"


@pytest.mark.anyio
async def test_get_operation_with_body_is_type_error(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    with pytest.raises(TypeError):
        await api.call(operations.get_me, GetChat(chat_id=1))
    with pytest.raises(TypeError):
        await api.get_me(chat_id=1)
    assert fake_transport.gets == []


@pytest.mark.anyio
async def test_wrong_record_type(api: BotApi) -> None:
    with pytest.raises(TypeError):
        await api.call(operations.set_chat_title, GetChat(chat_id=1))


@pytest.mark.anyio
async def test_edit_by_chat_and_by_inline_id(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    fake_transport.reply(ok(message_payload(5, "new")), ok(True))

    by_chat = await api.edit_message_text(chat_id=1, message_id=5, text="new")
    by_inline = await api.edit_inline_message_text(
        EditMessageText(inline_message_id="AAQ", text="new")
    )

    assert isinstance(by_chat.result, Message)
    assert by_inline == Ok(True)
    assert [wire for wire, _ in fake_transport.posts] == [
        "editMessageText",
        "editMessageText",
    ]
    assert fake_transport.posts[1][1] == {"inline_message_id": "AAQ", "text": "new"}


@pytest.mark.anyio
async def test_inline_edit_rejects_message_payload(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    fake_transport.reply(ok(message_payload()))

    with pytest.raises(DecodeError):
        await api.edit_inline_message_text(inline_message_id="AAQ", text="new")


@pytest.mark.anyio
async def test_malformed_envelope_raises(
    api: BotApi, fake_transport: FakeTransport
) -> None:
    fake_transport.reply({"result": True})

    with pytest.raises(DecodeError, match="`ok`"):
        await api.delete_message(chat_id=1, message_id=2)


@pytest.mark.anyio
async def test_hooks_observe_calls(fake_transport: FakeTransport) -> None:
    seen: list[tuple[str, object]] = []
    api = BotApi(
        fake_transport,
        on_request=lambda op, body: seen.append(("request", (op.name, body))),
        on_response=lambda op, envelope: seen.append(("response", envelope)),
    )
    fake_transport.reply(ok(True))

    await api.set_chat_title(SetChatTitle(chat_id=1, title="t"))

    assert seen == [
        ("request", ("set_chat_title", {"chat_id": 1, "title": "t"})),
        ("response", Ok(True)),
    ]


def test_unknown_attribute(api: BotApi) -> None:
    with pytest.raises(AttributeError, match="send_telegram"):
        api.send_telegram
    with pytest.raises(AttributeError):
        api._private


def test_bound_operation(api: BotApi) -> None:
    bound = api.send_message
    assert isinstance(bound, BoundOperation)
    assert bound.op is operations.send_message
    assert api.bind(operations.close).op is operations.close


@pytest.mark.anyio
async def test_server_close_via_call(api: BotApi, fake_transport: FakeTransport) -> None:
    fake_transport.reply(ok(True))

    assert await api.call(operations.close) == Ok(True)
    assert fake_transport.gets == ["close"]
    assert fake_transport.closed is False


@pytest.mark.anyio
async def test_context_manager_closes_transport(fake_transport: FakeTransport) -> None:
    async with BotApi(fake_transport) as api:
        assert api.transport is fake_transport
    assert fake_transport.closed is True


@pytest.mark.anyio
async def test_from_token_builds_httpx_transport() -> None:
    api = BotApi.from_token("123:abc", base_url="http://localhost:8081")
    try:
        assert isinstance(api.transport, HttpxTransport)
    finally:
        await api.close()
