from __future__ import annotations

import enum
import re
import types
from typing import Any, Union, get_args, get_origin

import msgspec
import pytest

from botwire import operations
from botwire.codec import DecodeError
from botwire.envelope import Failed, Ok
from botwire.methods import (
    EditMessageText,
    GetChat,
    Request,
    SendMessage,
    SetChatTitle,
)
from botwire.objects import Message
from botwire.operations import (
    OPERATIONS,
    HttpVerb,
    Operation,
    operation,
    operations_for_wire_name,
)
from tests.factories import message_payload, ok

INLINE_TWINS = {
    "edit_inline_message_text": "edit_message_text",
    "edit_inline_message_caption": "edit_message_caption",
    "edit_inline_message_media": "edit_message_media",
    "edit_inline_message_live_location": "edit_message_live_location",
    "stop_inline_message_live_location": "stop_message_live_location",
    "edit_inline_message_reply_markup": "edit_message_reply_markup",
    "set_inline_game_score": "set_game_score",
}

GET_WIRE_NAMES = {"getWebhookInfo", "getMe", "logOut", "close", "getForumTopicIconStickers"}


def _sample(tp: Any, *, full: bool) -> Any:
    origin = get_origin(tp)
    if origin in (Union, types.UnionType):
        members = [
            arg
            for arg in get_args(tp)
            if arg is not type(None) and arg is not msgspec.UnsetType
        ]
        return _sample(members[0], full=full)
    if origin is list:
        (item,) = get_args(tp)
        return [_sample(item, full=False)]
    if hasattr(tp, "__supertype__"):
        return _sample(tp.__supertype__, full=full)
    if isinstance(tp, type) and issubclass(tp, msgspec.Struct):
        return _build(tp, full=full)
    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        return next(iter(tp))
    if tp is bool:
        return True
    if tp is int:
        return 1
    if tp is float:
        return 1.5
    if tp is str:
        return "x"
    raise AssertionError(f"no sample for {tp!r}")


def _build(tp: type, *, full: bool) -> Any:
    kwargs = {
        field.name: _sample(field.type, full=False)
        for field in msgspec.structs.fields(tp)
        if field.required or full
    }
    return tp(**kwargs)


BODY_OPS = [op for op in OPERATIONS.values() if op.request_type is not None]


class TestBindingTable:
    def test_registry_matches_module_constants(self) -> None:
        for name, op in OPERATIONS.items():
            assert op.name == name
            assert getattr(operations, name) is op
            assert operation(name) is op

    def test_unknown_operation(self) -> None:
        with pytest.raises(KeyError, match="nope"):
            operation("nope")

    def test_verbs(self) -> None:
        get_ops = {op.wire_name for op in OPERATIONS.values() if op.verb is HttpVerb.GET}
        assert get_ops == GET_WIRE_NAMES
        for op in OPERATIONS.values():
            assert (op.verb is HttpVerb.GET) == (op.request_type is None)

    def test_wire_names_are_camel_case(self) -> None:
        for op in OPERATIONS.values():
            assert re.fullmatch(r"[a-z][A-Za-z]*", op.wire_name), op.wire_name

    def test_each_wire_name_bound_once_except_inline_twins(self) -> None:
        wire_names = [op.wire_name for op in OPERATIONS.values()]
        assert len(wire_names) - len(set(wire_names)) == len(INLINE_TWINS)

    @pytest.mark.parametrize(("inline", "chat"), sorted(INLINE_TWINS.items()))
    def test_inline_twin(self, inline: str, chat: str) -> None:
        inline_op, chat_op = operation(inline), operation(chat)
        assert inline_op.wire_name == chat_op.wire_name
        assert inline_op.request_type is chat_op.request_type
        assert inline_op.result_type is bool
        assert chat_op.result_type is not bool
        assert {op.name for op in operations_for_wire_name(chat_op.wire_name)} == {
            inline,
            chat,
        }

    def test_supplemented_operations_are_bound(self) -> None:
        for wire_name in (
            "forwardMessages",
            "copyMessages",
            "setMessageReaction",
            "deleteMessages",
            "replaceStickerInSet",
        ):
            assert operations_for_wire_name(wire_name)

    def test_request_types_are_requests(self) -> None:
        for op in BODY_OPS:
            assert issubclass(op.request_type, Request)


class TestRequestRoundTrip:
    @pytest.mark.parametrize("op", BODY_OPS, ids=[op.name for op in BODY_OPS])
    def test_required_fields_only(self, op: Operation[Any, Any]) -> None:
        request = _build(op.request_type, full=False)
        body = op.encode(request)
        required = {
            field.encode_name
            for field in msgspec.structs.fields(op.request_type)
            if field.required
        }
        assert set(body) == required
        decoded = op.decode_request(body)
        assert decoded == request
        for field in msgspec.structs.fields(op.request_type):
            if not field.required:
                assert getattr(decoded, field.name) is msgspec.UNSET

    @pytest.mark.parametrize("op", BODY_OPS, ids=[op.name for op in BODY_OPS])
    def test_all_fields(self, op: Operation[Any, Any]) -> None:
        request = _build(op.request_type, full=True)
        body = op.encode(request)
        assert len(body) == len(msgspec.structs.fields(op.request_type))
        assert op.decode_request(msgspec.json.decode(msgspec.json.encode(body))) == request


class TestOperation:
    def test_encode_send_message(self) -> None:
        body = operations.send_message.encode(SendMessage(chat_id=42, text="hi"))
        assert body == {"chat_id": 42, "text": "hi"}

    def test_over_long_title_is_not_validated_locally(self) -> None:
        title = "t" * 500
        assert operations.set_chat_title.encode(SetChatTitle(chat_id=1, title=title)) == {
            "chat_id": 1,
            "title": title,
        }

    def test_wrong_request_type(self) -> None:
        with pytest.raises(TypeError, match="SendMessage"):
            operations.send_message.encode(GetChat(chat_id=1))

    def test_missing_request(self) -> None:
        with pytest.raises(TypeError):
            operations.send_message.encode(None)

    def test_get_operation_rejects_body(self) -> None:
        assert operations.get_me.encode() is None
        with pytest.raises(TypeError, match="no parameters"):
            operations.get_me.encode(GetChat(chat_id=1))
        with pytest.raises(TypeError):
            operations.get_me.build(chat_id=1)

    def test_build(self) -> None:
        request = operations.send_message.build(chat_id=1, text="x")
        assert request == SendMessage(chat_id=1, text="x")
        with pytest.raises(TypeError):
            operations.send_message.build(text="x")

    def test_decode_uses_result_type(self) -> None:
        envelope = operations.edit_message_text.decode(ok(message_payload()))
        assert isinstance(envelope, Ok)
        assert isinstance(envelope.result, Message)
        assert operations.edit_inline_message_text.decode(ok(True)) == Ok(True)

    def test_inline_twin_rejects_message_payload(self) -> None:
        with pytest.raises(DecodeError):
            operations.edit_inline_message_text.decode(ok(message_payload()))
        with pytest.raises(DecodeError):
            operations.edit_message_text.decode(ok(True))

    def test_shared_request_record(self) -> None:
        request = EditMessageText(inline_message_id="abc", text="new")
        assert operations.edit_inline_message_text.encode(request) == {
            "inline_message_id": "abc",
            "text": "new",
        }

    def test_decode_failed(self) -> None:
        envelope = operations.set_chat_title.decode(
            {"ok": False, "error_code": 400, "description": "Bad Request: title too long"}
        )
        assert envelope == Failed(400, "Bad Request: title too long")
