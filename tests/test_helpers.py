import pytest

from botwire.client import BotApi
from botwire.codec import convert
from botwire.envelope import ApiError
from botwire.helpers import (
    SelfCheckError,
    ensure_bot_username,
    entity_text,
    find_entity,
    find_lead_command,
    is_group_chat,
    text_after,
    username_or_id,
)
from botwire.objects import Message, MessageEntity, User
from tests.factories import FakeTransport, failed, message_payload, ok, user_payload


def _message(text: str | None, *entities: dict) -> Message:
    extra = {"entities": list(entities)} if entities else {}
    return convert(message_payload(text=text, **extra), Message)


class TestEntities:
    def test_entity_text_ascii(self) -> None:
        message = _message("/start now", {"type": "bot_command", "offset": 0, "length": 6})
        entity = find_lead_command(message)
        assert entity is not None
        assert entity_text(message, entity) == "/start"
        assert text_after(message, entity) == " now"

    def test_offsets_count_utf16_units(self) -> None:
        # the emoji occupies two UTF-16 code units
        message = _message(
            "😀 hi @ada!",
            {"type": "mention", "offset": 6, "length": 4},
        )
        entity = find_entity(message, "mention")
        assert entity is not None
        assert entity_text(message, entity) == "@ada"
        assert text_after(message, entity) == "!"

    def test_lead_command_must_start_the_message(self) -> None:
        message = _message("hey /start", {"type": "bot_command", "offset": 4, "length": 6})
        assert find_lead_command(message) is None

    def test_no_entities(self) -> None:
        assert find_lead_command(_message("plain")) is None

    def test_missing_text(self) -> None:
        message = _message(None)
        entity = MessageEntity(type="bold", offset=0, length=1)
        with pytest.raises(ValueError, match="missing text"):
            entity_text(message, entity)
        with pytest.raises(ValueError, match="empty text"):
            text_after(message, entity)


class TestUsers:
    def test_username(self) -> None:
        user = User(id=5, is_bot=False, first_name="A", username="ada")
        assert username_or_id(user) == "@ada"

    def test_falls_back_to_id(self) -> None:
        assert username_or_id(User(id=5, is_bot=False, first_name="A")) == "@5"

    def test_group_chat(self) -> None:
        assert is_group_chat(-1001)
        assert not is_group_chat(42)


class TestSelfCheck:
    @pytest.mark.anyio
    async def test_matching_username(self, api: BotApi, fake_transport: FakeTransport) -> None:
        fake_transport.reply(ok(user_payload(1, is_bot=True, username="wire_bot")))
        me = await ensure_bot_username(api, "wire_bot")
        assert me.username == "wire_bot"
        assert fake_transport.gets == ["getMe"]

    @pytest.mark.anyio
    async def test_wrong_username(self, api: BotApi, fake_transport: FakeTransport) -> None:
        fake_transport.reply(ok(user_payload(1, is_bot=True, username="other_bot")))
        with pytest.raises(SelfCheckError, match="@wire_bot"):
            await ensure_bot_username(api, "wire_bot")

    @pytest.mark.anyio
    async def test_not_a_bot(self, api: BotApi, fake_transport: FakeTransport) -> None:
        fake_transport.reply(ok(user_payload(1, username="wire_bot")))
        with pytest.raises(SelfCheckError, match="being a bot"):
            await ensure_bot_username(api, "wire_bot")

    @pytest.mark.anyio
    async def test_api_failure(self, api: BotApi, fake_transport: FakeTransport) -> None:
        fake_transport.reply(failed(401, "Unauthorized"))
        with pytest.raises(ApiError):
            await ensure_bot_username(api, "wire_bot")
