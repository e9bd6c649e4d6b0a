from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from ..variants import variant_family
from .base import TelegramObject
from .permissions import ChatAdministratorRights


class WebAppInfo(TelegramObject):
    url: str


class LoginUrl(TelegramObject):
    url: str
    forward_text: str | None = None
    bot_username: str | None = None
    request_write_access: bool | None = None


class SwitchInlineQueryChosenChat(TelegramObject):
    query: str | None = None
    allow_user_chats: bool | None = None
    allow_bot_chats: bool | None = None
    allow_group_chats: bool | None = None
    allow_channel_chats: bool | None = None


class CallbackGame(TelegramObject):
    pass


class InlineKeyboardButton(TelegramObject):
    text: str
    url: str | None = None
    callback_data: str | None = None
    web_app: WebAppInfo | None = None
    login_url: LoginUrl | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None
    switch_inline_query_chosen_chat: SwitchInlineQueryChosenChat | None = None
    callback_game: CallbackGame | None = None
    pay: bool | None = None


class InlineKeyboardMarkup(TelegramObject):
    inline_keyboard: list[list[InlineKeyboardButton]]


class KeyboardButtonRequestUsers(TelegramObject):
    request_id: int
    user_is_bot: bool | None = None
    user_is_premium: bool | None = None
    max_quantity: int | None = None


class KeyboardButtonRequestChat(TelegramObject):
    request_id: int
    chat_is_channel: bool
    chat_is_forum: bool | None = None
    chat_has_username: bool | None = None
    chat_is_created: bool | None = None
    user_administrator_rights: ChatAdministratorRights | None = None
    bot_administrator_rights: ChatAdministratorRights | None = None
    bot_is_member: bool | None = None


class KeyboardButtonPollType(TelegramObject):
    type: str | None = None


class KeyboardButton(TelegramObject):
    text: str
    request_users: KeyboardButtonRequestUsers | None = None
    request_chat: KeyboardButtonRequestChat | None = None
    request_contact: bool | None = None
    request_location: bool | None = None
    request_poll: KeyboardButtonPollType | None = None
    web_app: WebAppInfo | None = None


class ReplyKeyboardMarkup(TelegramObject):
    keyboard: list[list[KeyboardButton]]
    is_persistent: bool | None = None
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    input_field_placeholder: str | None = None
    selective: bool | None = None


class ReplyKeyboardRemove(TelegramObject):
    remove_keyboard: bool
    selective: bool | None = None


class ForceReply(TelegramObject):
    force_reply: bool
    input_field_placeholder: str | None = None
    selective: bool | None = None


ReplyMarkup: TypeAlias = (
    InlineKeyboardMarkup | ReplyKeyboardMarkup | ReplyKeyboardRemove | ForceReply
)

REPLY_MARKUP = variant_family("ReplyMarkup", ReplyMarkup)


class InlineKeyboardBuilder:
    """Accumulates rows of inline buttons.

    ``button`` appends to the current row; ``row`` starts a new one.
    """

    def __init__(self) -> None:
        self._rows: list[list[InlineKeyboardButton]] = []

    def row(self, *buttons: InlineKeyboardButton) -> InlineKeyboardBuilder:
        self._rows.append(list(buttons))
        return self

    def button(
        self,
        text: str,
        *,
        callback_data: str | None = None,
        url: str | None = None,
        web_app: WebAppInfo | None = None,
        switch_inline_query: str | None = None,
        switch_inline_query_current_chat: str | None = None,
        pay: bool | None = None,
    ) -> InlineKeyboardBuilder:
        if not self._rows:
            self._rows.append([])
        self._rows[-1].append(
            InlineKeyboardButton(
                text=text,
                callback_data=callback_data,
                url=url,
                web_app=web_app,
                switch_inline_query=switch_inline_query,
                switch_inline_query_current_chat=switch_inline_query_current_chat,
                pay=pay,
            )
        )
        return self

    def build(self) -> InlineKeyboardMarkup:
        return InlineKeyboardMarkup(
            inline_keyboard=[list(row) for row in self._rows if row]
        )


def inline_keyboard(
    *rows: Iterable[InlineKeyboardButton],
) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[list(row) for row in rows])


def callback_button(text: str, data: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, callback_data=data)


def url_button(text: str, url: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, url=url)


__all__ = [
    "REPLY_MARKUP",
    "CallbackGame",
    "ForceReply",
    "InlineKeyboardBuilder",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "KeyboardButton",
    "KeyboardButtonPollType",
    "KeyboardButtonRequestChat",
    "KeyboardButtonRequestUsers",
    "LoginUrl",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "SwitchInlineQueryChosenChat",
    "WebAppInfo",
    "callback_button",
    "inline_keyboard",
    "url_button",
]
