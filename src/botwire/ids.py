from __future__ import annotations

from typing import NewType, TypeAlias

ChatId = NewType("ChatId", int)
UserId = NewType("UserId", int)
MessageId = NewType("MessageId", int)
MessageThreadId = NewType("MessageThreadId", int)

Username = NewType("Username", str)
FileId = NewType("FileId", str)
FileUniqueId = NewType("FileUniqueId", str)
CallbackQueryId = NewType("CallbackQueryId", str)
InlineQueryId = NewType("InlineQueryId", str)
InlineQueryResultId = NewType("InlineQueryResultId", str)
InlineMessageId = NewType("InlineMessageId", str)
ShippingQueryId = NewType("ShippingQueryId", str)
PreCheckoutQueryId = NewType("PreCheckoutQueryId", str)
WebAppQueryId = NewType("WebAppQueryId", str)
CustomEmojiId = NewType("CustomEmojiId", str)
BusinessConnectionId = NewType("BusinessConnectionId", str)
MessageEffectId = NewType("MessageEffectId", str)

Seconds = NewType("Seconds", int)
UnixTimestamp = NewType("UnixTimestamp", int)

# Numeric chat id or "@channelusername". The JSON kind picks the variant.
ChatRef: TypeAlias = ChatId | Username


def is_username(ref: ChatRef) -> bool:
    return isinstance(ref, str)


__all__ = [
    "BusinessConnectionId",
    "CallbackQueryId",
    "ChatId",
    "ChatRef",
    "CustomEmojiId",
    "FileId",
    "FileUniqueId",
    "InlineMessageId",
    "InlineQueryId",
    "InlineQueryResultId",
    "MessageEffectId",
    "MessageId",
    "MessageThreadId",
    "PreCheckoutQueryId",
    "Seconds",
    "ShippingQueryId",
    "UnixTimestamp",
    "UserId",
    "Username",
    "WebAppQueryId",
    "is_username",
]
