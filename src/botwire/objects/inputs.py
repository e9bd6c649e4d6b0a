from __future__ import annotations

from typing import TypeAlias

from ..ids import ChatRef, CustomEmojiId, MessageId, Seconds
from ..variants import variant_family
from .base import ParseMode, TelegramObject, TypeTagged
from .messages import MessageEntity


class InputMediaPhoto(TypeTagged, tag="photo"):
    media: str
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    show_caption_above_media: bool | None = None
    has_spoiler: bool | None = None


class InputMediaVideo(TypeTagged, tag="video"):
    media: str
    thumbnail: str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    show_caption_above_media: bool | None = None
    width: int | None = None
    height: int | None = None
    duration: Seconds | None = None
    supports_streaming: bool | None = None
    has_spoiler: bool | None = None


class InputMediaAnimation(TypeTagged, tag="animation"):
    media: str
    thumbnail: str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    show_caption_above_media: bool | None = None
    width: int | None = None
    height: int | None = None
    duration: Seconds | None = None
    has_spoiler: bool | None = None


class InputMediaAudio(TypeTagged, tag="audio"):
    media: str
    thumbnail: str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    duration: Seconds | None = None
    performer: str | None = None
    title: str | None = None


class InputMediaDocument(TypeTagged, tag="document"):
    media: str
    thumbnail: str | None = None
    caption: str | None = None
    parse_mode: ParseMode | None = None
    caption_entities: list[MessageEntity] | None = None
    disable_content_type_detection: bool | None = None


InputMedia: TypeAlias = (
    InputMediaPhoto
    | InputMediaVideo
    | InputMediaAnimation
    | InputMediaAudio
    | InputMediaDocument
)

INPUT_MEDIA = variant_family("InputMedia", InputMedia)


class ReactionTypeEmoji(TypeTagged, tag="emoji"):
    emoji: str


class ReactionTypeCustomEmoji(TypeTagged, tag="custom_emoji"):
    custom_emoji_id: CustomEmojiId


ReactionType: TypeAlias = ReactionTypeEmoji | ReactionTypeCustomEmoji

REACTION_TYPE = variant_family("ReactionType", ReactionType)


class LinkPreviewOptions(TelegramObject):
    is_disabled: bool | None = None
    url: str | None = None
    prefer_small_media: bool | None = None
    prefer_large_media: bool | None = None
    show_above_text: bool | None = None


class ReplyParameters(TelegramObject):
    message_id: MessageId
    chat_id: ChatRef | None = None
    allow_sending_without_reply: bool | None = None
    quote: str | None = None
    quote_parse_mode: ParseMode | None = None
    quote_entities: list[MessageEntity] | None = None
    quote_position: int | None = None


class InputPollOption(TelegramObject):
    text: str
    text_parse_mode: ParseMode | None = None
    text_entities: list[MessageEntity] | None = None


__all__ = [
    "INPUT_MEDIA",
    "REACTION_TYPE",
    "InputMedia",
    "InputMediaAnimation",
    "InputMediaAudio",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMediaVideo",
    "InputPollOption",
    "LinkPreviewOptions",
    "ReactionType",
    "ReactionTypeCustomEmoji",
    "ReactionTypeEmoji",
    "ReplyParameters",
]
