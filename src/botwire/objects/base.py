from __future__ import annotations

import enum

import msgspec


class TelegramObject(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    forbid_unknown_fields=False,
    omit_defaults=True,
    repr_omit_defaults=True,
):
    """Common base for every object the Bot API sends or accepts."""


class TypeTagged(TelegramObject, tag_field="type"):
    @property
    def type(self) -> str:
        return self.__struct_config__.tag


class ParseMode(str, enum.Enum):
    MARKDOWN = "MarkdownV2"
    HTML = "HTML"
    MARKDOWN_LEGACY = "Markdown"


class UpdateType(str, enum.Enum):
    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"


__all__ = ["ParseMode", "TelegramObject", "TypeTagged", "UpdateType"]
