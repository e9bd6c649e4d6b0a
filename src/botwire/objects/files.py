from __future__ import annotations

from ..ids import CustomEmojiId, FileId, FileUniqueId, Seconds
from .base import TelegramObject


class PhotoSize(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    width: int
    height: int
    file_size: int | None = None


class Animation(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    width: int
    height: int
    duration: Seconds
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Audio(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    duration: Seconds
    performer: str | None = None
    title: str | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
    thumbnail: PhotoSize | None = None


class Document(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Video(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    width: int
    height: int
    duration: Seconds
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class VideoNote(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    length: int
    duration: Seconds
    thumbnail: PhotoSize | None = None
    file_size: int | None = None


class Voice(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    duration: Seconds
    mime_type: str | None = None
    file_size: int | None = None


class File(TelegramObject):
    """Handle for downloading a file; ``file_path`` is valid for at least an hour."""

    file_id: FileId
    file_unique_id: FileUniqueId
    file_size: int | None = None
    file_path: str | None = None


class UserProfilePhotos(TelegramObject):
    total_count: int
    photos: list[list[PhotoSize]]


class MaskPosition(TelegramObject):
    point: str
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    type: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumbnail: PhotoSize | None = None
    emoji: str | None = None
    set_name: str | None = None
    premium_animation: File | None = None
    mask_position: MaskPosition | None = None
    custom_emoji_id: CustomEmojiId | None = None
    needs_repainting: bool | None = None
    file_size: int | None = None


class StickerSet(TelegramObject):
    name: str
    title: str
    sticker_type: str
    stickers: list[Sticker]
    is_animated: bool | None = None
    is_video: bool | None = None
    thumbnail: PhotoSize | None = None


class InputSticker(TelegramObject):
    sticker: str
    format: str
    emoji_list: list[str]
    mask_position: MaskPosition | None = None
    keywords: list[str] | None = None


__all__ = [
    "Animation",
    "Audio",
    "Document",
    "File",
    "InputSticker",
    "MaskPosition",
    "PhotoSize",
    "Sticker",
    "StickerSet",
    "UserProfilePhotos",
    "Video",
    "VideoNote",
    "Voice",
]
