import msgspec
import pytest

from botwire.codec import DecodeError, convert, decode_json, encode, to_json
from botwire.methods import SendMessage, SetChatDescription
from botwire.objects import (
    Chat,
    InlineKeyboardMarkup,
    Message,
    MessageEntity,
    ParseMode,
    ReplyKeyboardRemove,
    User,
)


class TestEncode:
    def test_unset_fields_are_omitted(self) -> None:
        assert encode(SendMessage(chat_id=42, text="hi")) == {"chat_id": 42, "text": "hi"}

    def test_explicit_empty_string_is_kept(self) -> None:
        assert encode(SetChatDescription(chat_id=1)) == {"chat_id": 1}
        assert encode(SetChatDescription(chat_id=1, description="")) == {
            "chat_id": 1,
            "description": "",
        }

    def test_none_fields_of_objects_are_omitted(self) -> None:
        user = User(id=1, is_bot=False, first_name="Ada")
        assert encode(user) == {"id": 1, "is_bot": False, "first_name": "Ada"}

    def test_from_is_renamed_on_the_wire(self) -> None:
        message = Message(
            message_id=1,
            date=0,
            chat=Chat(id=1, type="private"),
            from_=User(id=2, is_bot=True, first_name="bot"),
        )
        body = encode(message)
        assert body["from"]["id"] == 2
        assert "from_" not in body

    def test_enums_encode_to_wire_values(self) -> None:
        request = SendMessage(chat_id=1, text="*x*", parse_mode=ParseMode.MARKDOWN)
        assert encode(request)["parse_mode"] == "MarkdownV2"

    def test_nested_variant_keeps_its_shape(self) -> None:
        request = SendMessage(
            chat_id=1, text="x", reply_markup=ReplyKeyboardRemove(remove_keyboard=True)
        )
        assert encode(request)["reply_markup"] == {"remove_keyboard": True}

    def test_to_json(self) -> None:
        assert msgspec.json.decode(to_json(SendMessage(chat_id=1, text="x"))) == {
            "chat_id": 1,
            "text": "x",
        }


class TestConvert:
    def test_missing_required_field_names_it(self) -> None:
        with pytest.raises(DecodeError) as exc:
            convert({"id": 1, "is_bot": False}, User)
        assert "first_name" in exc.value.reason
        assert exc.value.raw == {"id": 1, "is_bot": False}

    def test_wrong_primitive_kind(self) -> None:
        with pytest.raises(DecodeError) as exc:
            convert({"id": "one", "is_bot": False, "first_name": "x"}, User)
        assert exc.value.path == "$.id"

    def test_nested_path_is_reported(self) -> None:
        raw = {"message_id": 1, "date": 0, "chat": {"id": 1}}
        with pytest.raises(DecodeError) as exc:
            convert(raw, Message)
        assert exc.value.path == "$.chat"
        assert "type" in exc.value.reason

    def test_path_into_nested_lists(self) -> None:
        raw = {"inline_keyboard": [[{"text": "a", "callback_data": 1}]]}
        with pytest.raises(DecodeError) as exc:
            convert(raw, InlineKeyboardMarkup)
        assert exc.value.path.startswith("$.inline_keyboard[0][0]")

    def test_unknown_fields_are_ignored(self) -> None:
        user = convert(
            {"id": 1, "is_bot": False, "first_name": "Ada", "has_main_web_app": True},
            User,
        )
        assert user == User(id=1, is_bot=False, first_name="Ada")

    def test_absent_optional_request_field_stays_unset(self) -> None:
        request = convert({"chat_id": 1}, SetChatDescription)
        assert request.description is msgspec.UNSET

    def test_entities_round_trip(self) -> None:
        entity = MessageEntity(type="bold", offset=0, length=3)
        assert convert(encode(entity), MessageEntity) == entity

    def test_path_prefix(self) -> None:
        with pytest.raises(DecodeError) as exc:
            convert("nope", User, path="$.result")
        assert exc.value.path == "$.result"
        assert "`$.result`" in str(exc.value)


class TestDecodeJson:
    def test_decodes_bytes(self) -> None:
        user = decode_json(b'{"id": 5, "is_bot": true, "first_name": "b"}', User)
        assert user.id == 5

    def test_malformed_json(self) -> None:
        with pytest.raises(DecodeError):
            decode_json(b"{", User)
