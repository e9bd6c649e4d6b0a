from __future__ import annotations

import msgspec

from ..ids import (
    ChatId,
    CustomEmojiId,
    FileId,
    FileUniqueId,
    MessageId,
    MessageThreadId,
    Seconds,
    UnixTimestamp,
    UserId,
)
from .base import TelegramObject
from .files import Animation, Audio, Document, PhotoSize, Sticker, Video, VideoNote, Voice
from .markup import InlineKeyboardMarkup
from .payments import Invoice, PassportData, SuccessfulPayment
from .permissions import ChatPermissions


class User(TelegramObject):
    id: UserId
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
    is_premium: bool | None = None
    added_to_attachment_menu: bool | None = None
    can_join_groups: bool | None = None
    can_read_all_group_messages: bool | None = None
    supports_inline_queries: bool | None = None


class ChatPhoto(TelegramObject):
    small_file_id: FileId
    small_file_unique_id: FileUniqueId
    big_file_id: FileId
    big_file_unique_id: FileUniqueId


class Location(TelegramObject):
    longitude: float
    latitude: float
    horizontal_accuracy: float | None = None
    live_period: int | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class ChatLocation(TelegramObject):
    location: Location
    address: str


class Chat(TelegramObject):
    id: ChatId
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_forum: bool | None = None
    photo: ChatPhoto | None = None
    active_usernames: list[str] | None = None
    emoji_status_custom_emoji_id: CustomEmojiId | None = None
    emoji_status_expiration_date: UnixTimestamp | None = None
    bio: str | None = None
    has_private_forwards: bool | None = None
    has_restricted_voice_and_video_messages: bool | None = None
    join_to_send_messages: bool | None = None
    join_by_request: bool | None = None
    description: str | None = None
    invite_link: str | None = None
    pinned_message: Message | None = None
    permissions: ChatPermissions | None = None
    slow_mode_delay: int | None = None
    message_auto_delete_time: int | None = None
    has_aggressive_anti_spam_enabled: bool | None = None
    has_hidden_members: bool | None = None
    has_protected_content: bool | None = None
    sticker_set_name: str | None = None
    can_set_sticker_set: bool | None = None
    linked_chat_id: ChatId | None = None
    location: ChatLocation | None = None


class MessageEntity(TelegramObject):
    """Formatting span; ``offset`` and ``length`` count UTF-16 code units."""

    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None
    custom_emoji_id: CustomEmojiId | None = None


class Contact(TelegramObject):
    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: UserId | None = None
    vcard: str | None = None


class Dice(TelegramObject):
    emoji: str
    value: int


class PollOption(TelegramObject):
    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    poll_id: str
    option_ids: list[int]
    voter_chat: Chat | None = None
    user: User | None = None


class Poll(TelegramObject):
    id: str
    question: str
    options: list[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: int | None = None
    explanation: str | None = None
    explanation_entities: list[MessageEntity] | None = None
    open_period: Seconds | None = None
    close_date: UnixTimestamp | None = None


class Venue(TelegramObject):
    location: Location
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None


class Game(TelegramObject):
    title: str
    description: str
    photo: list[PhotoSize]
    text: str | None = None
    text_entities: list[MessageEntity] | None = None
    animation: Animation | None = None


class GameHighScore(TelegramObject):
    position: int
    user: User
    score: int


class Story(TelegramObject):
    chat: Chat
    id: int


class WebAppData(TelegramObject):
    data: str
    button_text: str


class ProximityAlertTriggered(TelegramObject):
    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(TelegramObject):
    message_auto_delete_time: int


class ForumTopicCreated(TelegramObject):
    name: str
    icon_color: int
    icon_custom_emoji_id: CustomEmojiId | None = None


class ForumTopicEdited(TelegramObject):
    name: str | None = None
    icon_custom_emoji_id: CustomEmojiId | None = None


class ForumTopicClosed(TelegramObject):
    pass


class ForumTopicReopened(TelegramObject):
    pass


class GeneralForumTopicHidden(TelegramObject):
    pass


class GeneralForumTopicUnhidden(TelegramObject):
    pass


class UsersShared(TelegramObject):
    request_id: int
    user_ids: list[UserId]


class ChatShared(TelegramObject):
    request_id: int
    chat_id: ChatId


class WriteAccessAllowed(TelegramObject):
    web_app_name: str | None = None


class VideoChatScheduled(TelegramObject):
    start_date: UnixTimestamp


class VideoChatStarted(TelegramObject):
    pass


class VideoChatEnded(TelegramObject):
    duration: Seconds


class VideoChatParticipantsInvited(TelegramObject):
    users: list[User]


class Message(TelegramObject):
    message_id: MessageId
    date: UnixTimestamp
    chat: Chat
    message_thread_id: MessageThreadId | None = None
    from_: User | None = msgspec.field(default=None, name="from")
    sender_chat: Chat | None = None
    forward_from: User | None = None
    forward_from_chat: Chat | None = None
    forward_from_message_id: MessageId | None = None
    forward_signature: str | None = None
    forward_sender_name: str | None = None
    forward_date: UnixTimestamp | None = None
    is_topic_message: bool | None = None
    is_automatic_forward: bool | None = None
    reply_to_message: Message | None = None
    via_bot: User | None = None
    edit_date: UnixTimestamp | None = None
    has_protected_content: bool | None = None
    media_group_id: str | None = None
    author_signature: str | None = None
    text: str | None = None
    entities: list[MessageEntity] | None = None
    animation: Animation | None = None
    audio: Audio | None = None
    document: Document | None = None
    photo: list[PhotoSize] | None = None
    sticker: Sticker | None = None
    story: Story | None = None
    video: Video | None = None
    video_note: VideoNote | None = None
    voice: Voice | None = None
    caption: str | None = None
    caption_entities: list[MessageEntity] | None = None
    has_media_spoiler: bool | None = None
    contact: Contact | None = None
    dice: Dice | None = None
    game: Game | None = None
    poll: Poll | None = None
    venue: Venue | None = None
    location: Location | None = None
    new_chat_members: list[User] | None = None
    left_chat_member: User | None = None
    new_chat_title: str | None = None
    new_chat_photo: list[PhotoSize] | None = None
    delete_chat_photo: bool | None = None
    group_chat_created: bool | None = None
    supergroup_chat_created: bool | None = None
    channel_chat_created: bool | None = None
    message_auto_delete_timer_changed: MessageAutoDeleteTimerChanged | None = None
    migrate_to_chat_id: ChatId | None = None
    migrate_from_chat_id: ChatId | None = None
    pinned_message: Message | None = None
    invoice: Invoice | None = None
    successful_payment: SuccessfulPayment | None = None
    users_shared: UsersShared | None = None
    chat_shared: ChatShared | None = None
    connected_website: str | None = None
    write_access_allowed: WriteAccessAllowed | None = None
    passport_data: PassportData | None = None
    proximity_alert_triggered: ProximityAlertTriggered | None = None
    forum_topic_created: ForumTopicCreated | None = None
    forum_topic_edited: ForumTopicEdited | None = None
    forum_topic_closed: ForumTopicClosed | None = None
    forum_topic_reopened: ForumTopicReopened | None = None
    general_forum_topic_hidden: GeneralForumTopicHidden | None = None
    general_forum_topic_unhidden: GeneralForumTopicUnhidden | None = None
    video_chat_scheduled: VideoChatScheduled | None = None
    video_chat_started: VideoChatStarted | None = None
    video_chat_ended: VideoChatEnded | None = None
    video_chat_participants_invited: VideoChatParticipantsInvited | None = None
    web_app_data: WebAppData | None = None
    reply_markup: InlineKeyboardMarkup | None = None


class MessageIdResult(TelegramObject):
    message_id: MessageId


__all__ = [
    "Chat",
    "ChatLocation",
    "ChatPhoto",
    "ChatShared",
    "Contact",
    "Dice",
    "ForumTopicClosed",
    "ForumTopicCreated",
    "ForumTopicEdited",
    "ForumTopicReopened",
    "Game",
    "GameHighScore",
    "GeneralForumTopicHidden",
    "GeneralForumTopicUnhidden",
    "Location",
    "Message",
    "MessageAutoDeleteTimerChanged",
    "MessageEntity",
    "MessageIdResult",
    "Poll",
    "PollAnswer",
    "PollOption",
    "ProximityAlertTriggered",
    "Story",
    "User",
    "UsersShared",
    "Venue",
    "VideoChatEnded",
    "VideoChatParticipantsInvited",
    "VideoChatScheduled",
    "VideoChatStarted",
    "WebAppData",
    "WriteAccessAllowed",
]
