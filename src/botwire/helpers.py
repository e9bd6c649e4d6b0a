from __future__ import annotations

from typing import TYPE_CHECKING

from .envelope import unwrap
from .ids import ChatId
from .objects.messages import Message, MessageEntity, User
from .operations import get_me

if TYPE_CHECKING:
    from .client import BotApi

BOT_COMMAND = "bot_command"


class SelfCheckError(RuntimeError):
    pass


def is_group_chat(chat_id: ChatId) -> bool:
    return chat_id < 0


def username_or_id(user: User) -> str:
    return "@" + (user.username or str(user.id))


def _require_text(message: Message, reason: str) -> str:
    if message.text is None:
        raise ValueError(reason)
    return message.text


def _utf16(text: str) -> bytes:
    return text.encode("utf-16-le")


def entity_text(message: Message, entity: MessageEntity) -> str:
    """Slice of ``message.text`` covered by ``entity``.

    Entity offsets count UTF-16 code units, so emoji and other astral
    characters take two positions.
    """
    raw = _utf16(_require_text(message, "unable to extract entity from missing text"))
    start = entity.offset * 2
    end = start + entity.length * 2
    return raw[start:end].decode("utf-16-le")


def text_after(message: Message, entity: MessageEntity) -> str:
    raw = _utf16(
        _require_text(message, "unable to determine entity boundaries in empty text")
    )
    return raw[(entity.offset + entity.length) * 2 :].decode("utf-16-le")


def find_entity(message: Message, entity_type: str) -> MessageEntity | None:
    for entity in message.entities or ():
        if entity.type == entity_type:
            return entity
    return None


def find_lead_command(message: Message) -> MessageEntity | None:
    """The ``bot_command`` entity that opens the message, if any."""
    entity = find_entity(message, BOT_COMMAND)
    if entity is None or entity.offset != 0:
        return None
    return entity


async def ensure_bot_username(api: BotApi, username: str) -> User:
    """Confirm the token belongs to the bot ``username`` (without the ``@``)."""
    me = unwrap(await api.call(get_me))
    if not me.is_bot:
        raise SelfCheckError("Self-check for being a bot has failed")
    if me.username != username:
        raise SelfCheckError(
            f"Username must be @{username}, but it is @{me.username}"
        )
    return me


__all__ = [
    "BOT_COMMAND",
    "SelfCheckError",
    "ensure_bot_username",
    "entity_text",
    "find_entity",
    "find_lead_command",
    "is_group_chat",
    "text_after",
    "username_or_id",
]
