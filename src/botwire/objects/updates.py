from __future__ import annotations

from typing import Any, TypeAlias

import msgspec

from ..ids import (
    CallbackQueryId,
    InlineMessageId,
    PreCheckoutQueryId,
    ShippingQueryId,
    UnixTimestamp,
)
from ..variants import variant_family
from .base import TelegramObject, UpdateType
from .chats import ChatJoinRequest, ChatMemberUpdated
from .inline import ChosenInlineResult, InlineQuery
from .messages import Message, Poll, PollAnswer, User
from .payments import OrderInfo, ShippingAddress


class CallbackQuery(TelegramObject):
    id: CallbackQueryId
    from_: User = msgspec.field(name="from")
    chat_instance: str
    message: Message | None = None
    inline_message_id: InlineMessageId | None = None
    data: str | None = None
    game_short_name: str | None = None


class ShippingQuery(TelegramObject):
    id: ShippingQueryId
    from_: User = msgspec.field(name="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    id: PreCheckoutQueryId
    from_: User = msgspec.field(name="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: str | None = None
    order_info: OrderInfo | None = None


class WebhookInfo(TelegramObject):
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: str | None = None
    last_error_date: UnixTimestamp | None = None
    last_error_message: str | None = None
    last_synchronization_error_date: UnixTimestamp | None = None
    max_connections: int | None = None
    allowed_updates: list[UpdateType] | None = None


# An update carries `update_id` plus exactly one payload key.


class MessageUpdate(TelegramObject):
    update_id: int
    message: Message


class EditedMessageUpdate(TelegramObject):
    update_id: int
    edited_message: Message


class ChannelPostUpdate(TelegramObject):
    update_id: int
    channel_post: Message


class EditedChannelPostUpdate(TelegramObject):
    update_id: int
    edited_channel_post: Message


class InlineQueryUpdate(TelegramObject):
    update_id: int
    inline_query: InlineQuery


class ChosenInlineResultUpdate(TelegramObject):
    update_id: int
    chosen_inline_result: ChosenInlineResult


class CallbackQueryUpdate(TelegramObject):
    update_id: int
    callback_query: CallbackQuery


class ShippingQueryUpdate(TelegramObject):
    update_id: int
    shipping_query: ShippingQuery


class PreCheckoutQueryUpdate(TelegramObject):
    update_id: int
    pre_checkout_query: PreCheckoutQuery


class PollUpdate(TelegramObject):
    update_id: int
    poll: Poll


class PollAnswerUpdate(TelegramObject):
    update_id: int
    poll_answer: PollAnswer


class MyChatMemberUpdate(TelegramObject):
    update_id: int
    my_chat_member: ChatMemberUpdated


class ChatMemberUpdate(TelegramObject):
    update_id: int
    chat_member: ChatMemberUpdated


class ChatJoinRequestUpdate(TelegramObject):
    update_id: int
    chat_join_request: ChatJoinRequest


Update: TypeAlias = (
    MessageUpdate
    | EditedMessageUpdate
    | ChannelPostUpdate
    | EditedChannelPostUpdate
    | InlineQueryUpdate
    | ChosenInlineResultUpdate
    | CallbackQueryUpdate
    | ShippingQueryUpdate
    | PreCheckoutQueryUpdate
    | PollUpdate
    | PollAnswerUpdate
    | MyChatMemberUpdate
    | ChatMemberUpdate
    | ChatJoinRequestUpdate
)

UPDATE = variant_family("Update", Update)

_UPDATE_TYPES: dict[type, UpdateType] = {
    MessageUpdate: UpdateType.MESSAGE,
    EditedMessageUpdate: UpdateType.EDITED_MESSAGE,
    ChannelPostUpdate: UpdateType.CHANNEL_POST,
    EditedChannelPostUpdate: UpdateType.EDITED_CHANNEL_POST,
    InlineQueryUpdate: UpdateType.INLINE_QUERY,
    ChosenInlineResultUpdate: UpdateType.CHOSEN_INLINE_RESULT,
    CallbackQueryUpdate: UpdateType.CALLBACK_QUERY,
    ShippingQueryUpdate: UpdateType.SHIPPING_QUERY,
    PreCheckoutQueryUpdate: UpdateType.PRE_CHECKOUT_QUERY,
    PollUpdate: UpdateType.POLL,
    PollAnswerUpdate: UpdateType.POLL_ANSWER,
    MyChatMemberUpdate: UpdateType.MY_CHAT_MEMBER,
    ChatMemberUpdate: UpdateType.CHAT_MEMBER,
    ChatJoinRequestUpdate: UpdateType.CHAT_JOIN_REQUEST,
}


def update_type(update: Update) -> UpdateType:
    return _UPDATE_TYPES[type(update)]


def update_payload(update: Update) -> Any:
    """The single payload object an update carries."""
    return getattr(update, update_type(update).value)


__all__ = [
    "UPDATE",
    "CallbackQuery",
    "CallbackQueryUpdate",
    "ChannelPostUpdate",
    "ChatJoinRequestUpdate",
    "ChatMemberUpdate",
    "ChosenInlineResultUpdate",
    "EditedChannelPostUpdate",
    "EditedMessageUpdate",
    "InlineQueryUpdate",
    "MessageUpdate",
    "MyChatMemberUpdate",
    "PollAnswerUpdate",
    "PollUpdate",
    "PreCheckoutQuery",
    "PreCheckoutQueryUpdate",
    "ShippingQuery",
    "ShippingQueryUpdate",
    "Update",
    "WebhookInfo",
    "update_payload",
    "update_type",
]
