"""Request records, one per Bot API method.

Required parameters have no default. Optional parameters default to
``msgspec.UNSET`` and are left out of the encoded body until set, so
``SetChatDescription(chat_id=1)`` clears the description while
``SetChatDescription(chat_id=1, description="")`` sends an explicit empty
string. Length and range limits are left for the server to enforce.
"""

from __future__ import annotations

import msgspec
from msgspec import UNSET, UnsetType

from .ids import (
    BusinessConnectionId,
    CallbackQueryId,
    ChatId,
    ChatRef,
    CustomEmojiId,
    FileId,
    InlineMessageId,
    InlineQueryId,
    MessageEffectId,
    MessageId,
    MessageThreadId,
    PreCheckoutQueryId,
    Seconds,
    ShippingQueryId,
    UnixTimestamp,
    UserId,
    WebAppQueryId,
)
from .objects.base import ParseMode, UpdateType
from .objects.chats import BotCommand, BotCommandScope, MenuButton
from .objects.files import InputSticker, MaskPosition
from .objects.inline import InlineQueryResult, InlineQueryResultsButton
from .objects.inputs import (
    InputMedia,
    InputPollOption,
    LinkPreviewOptions,
    ReactionType,
    ReplyParameters,
)
from .objects.markup import InlineKeyboardMarkup, ReplyMarkup
from .objects.messages import MessageEntity
from .objects.payments import LabeledPrice, PassportElementError, ShippingOption
from .objects.permissions import ChatAdministratorRights, ChatPermissions


class Request(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=False):
    pass


# Updates and webhooks


class GetUpdates(Request):
    offset: int | UnsetType = UNSET
    limit: int | UnsetType = UNSET
    timeout: Seconds | UnsetType = UNSET
    allowed_updates: list[UpdateType] | UnsetType = UNSET


class SetWebhook(Request):
    url: str
    certificate: str | UnsetType = UNSET
    ip_address: str | UnsetType = UNSET
    max_connections: int | UnsetType = UNSET
    allowed_updates: list[UpdateType] | UnsetType = UNSET
    drop_pending_updates: bool | UnsetType = UNSET
    secret_token: str | UnsetType = UNSET


class DeleteWebhook(Request):
    drop_pending_updates: bool | UnsetType = UNSET


# Sending messages


class SendMessage(Request):
    chat_id: ChatRef
    text: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    entities: list[MessageEntity] | UnsetType = UNSET
    link_preview_options: LinkPreviewOptions | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class ForwardMessage(Request):
    chat_id: ChatRef
    from_chat_id: ChatRef
    message_id: MessageId
    message_thread_id: MessageThreadId | UnsetType = UNSET
    video_start_timestamp: int | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET


class ForwardMessages(Request):
    chat_id: ChatRef
    from_chat_id: ChatRef
    message_ids: list[MessageId]
    message_thread_id: MessageThreadId | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET


class CopyMessage(Request):
    chat_id: ChatRef
    from_chat_id: ChatRef
    message_id: MessageId
    message_thread_id: MessageThreadId | UnsetType = UNSET
    video_start_timestamp: int | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    show_caption_above_media: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class CopyMessages(Request):
    chat_id: ChatRef
    from_chat_id: ChatRef
    message_ids: list[MessageId]
    message_thread_id: MessageThreadId | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    remove_caption: bool | UnsetType = UNSET


class SendPhoto(Request):
    chat_id: ChatRef
    photo: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    show_caption_above_media: bool | UnsetType = UNSET
    has_spoiler: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendAudio(Request):
    chat_id: ChatRef
    audio: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    duration: Seconds | UnsetType = UNSET
    performer: str | UnsetType = UNSET
    title: str | UnsetType = UNSET
    thumbnail: str | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendDocument(Request):
    chat_id: ChatRef
    document: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    thumbnail: str | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    disable_content_type_detection: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendVideo(Request):
    chat_id: ChatRef
    video: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    duration: Seconds | UnsetType = UNSET
    width: int | UnsetType = UNSET
    height: int | UnsetType = UNSET
    thumbnail: str | UnsetType = UNSET
    cover: str | UnsetType = UNSET
    start_timestamp: int | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    show_caption_above_media: bool | UnsetType = UNSET
    has_spoiler: bool | UnsetType = UNSET
    supports_streaming: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendAnimation(Request):
    chat_id: ChatRef
    animation: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    duration: Seconds | UnsetType = UNSET
    width: int | UnsetType = UNSET
    height: int | UnsetType = UNSET
    thumbnail: str | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    show_caption_above_media: bool | UnsetType = UNSET
    has_spoiler: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendVoice(Request):
    chat_id: ChatRef
    voice: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    duration: Seconds | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendVideoNote(Request):
    chat_id: ChatRef
    video_note: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    duration: Seconds | UnsetType = UNSET
    length: int | UnsetType = UNSET
    thumbnail: str | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendMediaGroup(Request):
    chat_id: ChatRef
    media: list[InputMedia]
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET


class SendLocation(Request):
    chat_id: ChatRef
    latitude: float
    longitude: float
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    horizontal_accuracy: float | UnsetType = UNSET
    live_period: int | UnsetType = UNSET
    heading: int | UnsetType = UNSET
    proximity_alert_radius: int | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendVenue(Request):
    chat_id: ChatRef
    latitude: float
    longitude: float
    title: str
    address: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    foursquare_id: str | UnsetType = UNSET
    foursquare_type: str | UnsetType = UNSET
    google_place_id: str | UnsetType = UNSET
    google_place_type: str | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendContact(Request):
    chat_id: ChatRef
    phone_number: str
    first_name: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    last_name: str | UnsetType = UNSET
    vcard: str | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendPoll(Request):
    chat_id: ChatRef
    question: str
    options: list[InputPollOption]
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    question_parse_mode: ParseMode | UnsetType = UNSET
    question_entities: list[MessageEntity] | UnsetType = UNSET
    is_anonymous: bool | UnsetType = UNSET
    type: str | UnsetType = UNSET
    allows_multiple_answers: bool | UnsetType = UNSET
    correct_option_id: int | UnsetType = UNSET
    explanation: str | UnsetType = UNSET
    explanation_parse_mode: ParseMode | UnsetType = UNSET
    explanation_entities: list[MessageEntity] | UnsetType = UNSET
    open_period: Seconds | UnsetType = UNSET
    close_date: UnixTimestamp | UnsetType = UNSET
    is_closed: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendDice(Request):
    chat_id: ChatRef
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    emoji: str | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class SendChatAction(Request):
    chat_id: ChatRef
    action: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET


class SetMessageReaction(Request):
    chat_id: ChatRef
    message_id: MessageId
    reaction: list[ReactionType] | UnsetType = UNSET
    is_big: bool | UnsetType = UNSET


# Users and files


class GetUserProfilePhotos(Request):
    user_id: UserId
    offset: int | UnsetType = UNSET
    limit: int | UnsetType = UNSET


class GetFile(Request):
    file_id: FileId


# Chat administration


class BanChatMember(Request):
    chat_id: ChatRef
    user_id: UserId
    until_date: UnixTimestamp | UnsetType = UNSET
    revoke_messages: bool | UnsetType = UNSET


class UnbanChatMember(Request):
    chat_id: ChatRef
    user_id: UserId
    only_if_banned: bool | UnsetType = UNSET


class RestrictChatMember(Request):
    chat_id: ChatRef
    user_id: UserId
    permissions: ChatPermissions
    use_independent_chat_permissions: bool | UnsetType = UNSET
    until_date: UnixTimestamp | UnsetType = UNSET


class PromoteChatMember(Request):
    chat_id: ChatRef
    user_id: UserId
    is_anonymous: bool | UnsetType = UNSET
    can_manage_chat: bool | UnsetType = UNSET
    can_delete_messages: bool | UnsetType = UNSET
    can_manage_video_chats: bool | UnsetType = UNSET
    can_restrict_members: bool | UnsetType = UNSET
    can_promote_members: bool | UnsetType = UNSET
    can_change_info: bool | UnsetType = UNSET
    can_invite_users: bool | UnsetType = UNSET
    can_post_stories: bool | UnsetType = UNSET
    can_edit_stories: bool | UnsetType = UNSET
    can_delete_stories: bool | UnsetType = UNSET
    can_post_messages: bool | UnsetType = UNSET
    can_edit_messages: bool | UnsetType = UNSET
    can_pin_messages: bool | UnsetType = UNSET
    can_manage_topics: bool | UnsetType = UNSET


class SetChatAdministratorCustomTitle(Request):
    chat_id: ChatRef
    user_id: UserId
    custom_title: str


class BanChatSenderChat(Request):
    chat_id: ChatRef
    sender_chat_id: ChatId


class UnbanChatSenderChat(Request):
    chat_id: ChatRef
    sender_chat_id: ChatId


class SetChatPermissions(Request):
    chat_id: ChatRef
    permissions: ChatPermissions
    use_independent_chat_permissions: bool | UnsetType = UNSET


class ExportChatInviteLink(Request):
    chat_id: ChatRef


class CreateChatInviteLink(Request):
    chat_id: ChatRef
    name: str | UnsetType = UNSET
    expire_date: UnixTimestamp | UnsetType = UNSET
    member_limit: int | UnsetType = UNSET
    creates_join_request: bool | UnsetType = UNSET


class EditChatInviteLink(Request):
    chat_id: ChatRef
    invite_link: str
    name: str | UnsetType = UNSET
    expire_date: UnixTimestamp | UnsetType = UNSET
    member_limit: int | UnsetType = UNSET
    creates_join_request: bool | UnsetType = UNSET


class RevokeChatInviteLink(Request):
    chat_id: ChatRef
    invite_link: str


class ApproveChatJoinRequest(Request):
    chat_id: ChatRef
    user_id: UserId


class DeclineChatJoinRequest(Request):
    chat_id: ChatRef
    user_id: UserId


class SetChatPhoto(Request):
    chat_id: ChatRef
    photo: str


class DeleteChatPhoto(Request):
    chat_id: ChatRef


class SetChatTitle(Request):
    chat_id: ChatRef
    title: str


class SetChatDescription(Request):
    chat_id: ChatRef
    description: str | UnsetType = UNSET


class PinChatMessage(Request):
    chat_id: ChatRef
    message_id: MessageId
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET


class UnpinChatMessage(Request):
    chat_id: ChatRef
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET


class UnpinAllChatMessages(Request):
    chat_id: ChatRef


class LeaveChat(Request):
    chat_id: ChatRef


class GetChat(Request):
    chat_id: ChatRef


class GetChatAdministrators(Request):
    chat_id: ChatRef


class GetChatMemberCount(Request):
    chat_id: ChatRef


class GetChatMember(Request):
    chat_id: ChatRef
    user_id: UserId


class SetChatStickerSet(Request):
    chat_id: ChatRef
    sticker_set_name: str


class DeleteChatStickerSet(Request):
    chat_id: ChatRef


# Forum topics


class CreateForumTopic(Request):
    chat_id: ChatRef
    name: str
    icon_color: int | UnsetType = UNSET
    icon_custom_emoji_id: CustomEmojiId | UnsetType = UNSET


class EditForumTopic(Request):
    chat_id: ChatRef
    message_thread_id: MessageThreadId
    name: str | UnsetType = UNSET
    icon_custom_emoji_id: CustomEmojiId | UnsetType = UNSET


class CloseForumTopic(Request):
    chat_id: ChatRef
    message_thread_id: MessageThreadId


class ReopenForumTopic(Request):
    chat_id: ChatRef
    message_thread_id: MessageThreadId


class DeleteForumTopic(Request):
    chat_id: ChatRef
    message_thread_id: MessageThreadId


class UnpinAllForumTopicMessages(Request):
    chat_id: ChatRef
    message_thread_id: MessageThreadId


class EditGeneralForumTopic(Request):
    chat_id: ChatRef
    name: str


class CloseGeneralForumTopic(Request):
    chat_id: ChatRef


class ReopenGeneralForumTopic(Request):
    chat_id: ChatRef


class HideGeneralForumTopic(Request):
    chat_id: ChatRef


class UnhideGeneralForumTopic(Request):
    chat_id: ChatRef


class UnpinAllGeneralForumTopicMessages(Request):
    chat_id: ChatRef


# Callback queries and bot settings


class AnswerCallbackQuery(Request):
    callback_query_id: CallbackQueryId
    text: str | UnsetType = UNSET
    show_alert: bool | UnsetType = UNSET
    url: str | UnsetType = UNSET
    cache_time: Seconds | UnsetType = UNSET


class SetMyCommands(Request):
    commands: list[BotCommand]
    scope: BotCommandScope | UnsetType = UNSET
    language_code: str | UnsetType = UNSET


class DeleteMyCommands(Request):
    scope: BotCommandScope | UnsetType = UNSET
    language_code: str | UnsetType = UNSET


class GetMyCommands(Request):
    scope: BotCommandScope | UnsetType = UNSET
    language_code: str | UnsetType = UNSET


class SetMyName(Request):
    name: str | UnsetType = UNSET
    language_code: str | UnsetType = UNSET


class GetMyName(Request):
    language_code: str | UnsetType = UNSET


class SetMyDescription(Request):
    description: str | UnsetType = UNSET
    language_code: str | UnsetType = UNSET


class GetMyDescription(Request):
    language_code: str | UnsetType = UNSET


class SetMyShortDescription(Request):
    short_description: str | UnsetType = UNSET
    language_code: str | UnsetType = UNSET


class GetMyShortDescription(Request):
    language_code: str | UnsetType = UNSET


class SetChatMenuButton(Request):
    chat_id: ChatId | UnsetType = UNSET
    menu_button: MenuButton | UnsetType = UNSET


class GetChatMenuButton(Request):
    chat_id: ChatId | UnsetType = UNSET


class SetMyDefaultAdministratorRights(Request):
    rights: ChatAdministratorRights | UnsetType = UNSET
    for_channels: bool | UnsetType = UNSET


class GetMyDefaultAdministratorRights(Request):
    for_channels: bool | UnsetType = UNSET


# Editing. The same record addresses a message either by chat_id+message_id
# or by inline_message_id; the two forms are bound as separate operations.


class EditMessageText(Request):
    text: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    chat_id: ChatRef | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    entities: list[MessageEntity] | UnsetType = UNSET
    link_preview_options: LinkPreviewOptions | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class EditMessageCaption(Request):
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    chat_id: ChatRef | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
    caption: str | UnsetType = UNSET
    parse_mode: ParseMode | UnsetType = UNSET
    caption_entities: list[MessageEntity] | UnsetType = UNSET
    show_caption_above_media: bool | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class EditMessageMedia(Request):
    media: InputMedia
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    chat_id: ChatRef | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class EditMessageLiveLocation(Request):
    latitude: float
    longitude: float
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    chat_id: ChatRef | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
    live_period: int | UnsetType = UNSET
    horizontal_accuracy: float | UnsetType = UNSET
    heading: int | UnsetType = UNSET
    proximity_alert_radius: int | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class StopMessageLiveLocation(Request):
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    chat_id: ChatRef | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class EditMessageReplyMarkup(Request):
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    chat_id: ChatRef | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class StopPoll(Request):
    chat_id: ChatRef
    message_id: MessageId
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class DeleteMessage(Request):
    chat_id: ChatRef
    message_id: MessageId


class DeleteMessages(Request):
    chat_id: ChatRef
    message_ids: list[MessageId]


# Stickers


class SendSticker(Request):
    chat_id: ChatRef
    sticker: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    emoji: str | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: ReplyMarkup | UnsetType = UNSET


class GetStickerSet(Request):
    name: str


class GetCustomEmojiStickers(Request):
    custom_emoji_ids: list[CustomEmojiId]


class UploadStickerFile(Request):
    user_id: UserId
    sticker: str
    sticker_format: str


class CreateNewStickerSet(Request):
    user_id: UserId
    name: str
    title: str
    stickers: list[InputSticker]
    sticker_type: str | UnsetType = UNSET
    needs_repainting: bool | UnsetType = UNSET


class AddStickerToSet(Request):
    user_id: UserId
    name: str
    sticker: InputSticker


class ReplaceStickerInSet(Request):
    user_id: UserId
    name: str
    old_sticker: str
    sticker: InputSticker


class SetStickerPositionInSet(Request):
    sticker: str
    position: int


class DeleteStickerFromSet(Request):
    sticker: str


class SetStickerEmojiList(Request):
    sticker: str
    emoji_list: list[str]


class SetStickerKeywords(Request):
    sticker: str
    keywords: list[str] | UnsetType = UNSET


class SetStickerMaskPosition(Request):
    sticker: str
    mask_position: MaskPosition | UnsetType = UNSET


class SetStickerSetTitle(Request):
    name: str
    title: str


class SetStickerSetThumbnail(Request):
    name: str
    user_id: UserId
    format: str
    thumbnail: str | UnsetType = UNSET


class SetCustomEmojiStickerSetThumbnail(Request):
    name: str
    custom_emoji_id: CustomEmojiId | UnsetType = UNSET


class DeleteStickerSet(Request):
    name: str


# Inline mode


class AnswerInlineQuery(Request):
    inline_query_id: InlineQueryId
    results: list[InlineQueryResult]
    cache_time: Seconds | UnsetType = UNSET
    is_personal: bool | UnsetType = UNSET
    next_offset: str | UnsetType = UNSET
    button: InlineQueryResultsButton | UnsetType = UNSET


class AnswerWebAppQuery(Request):
    web_app_query_id: WebAppQueryId
    result: InlineQueryResult


# Payments


class SendInvoice(Request):
    chat_id: ChatRef
    title: str
    description: str
    payload: str
    currency: str
    prices: list[LabeledPrice]
    message_thread_id: MessageThreadId | UnsetType = UNSET
    provider_token: str | UnsetType = UNSET
    max_tip_amount: int | UnsetType = UNSET
    suggested_tip_amounts: list[int] | UnsetType = UNSET
    start_parameter: str | UnsetType = UNSET
    provider_data: str | UnsetType = UNSET
    photo_url: str | UnsetType = UNSET
    photo_size: int | UnsetType = UNSET
    photo_width: int | UnsetType = UNSET
    photo_height: int | UnsetType = UNSET
    need_name: bool | UnsetType = UNSET
    need_phone_number: bool | UnsetType = UNSET
    need_email: bool | UnsetType = UNSET
    need_shipping_address: bool | UnsetType = UNSET
    send_phone_number_to_provider: bool | UnsetType = UNSET
    send_email_to_provider: bool | UnsetType = UNSET
    is_flexible: bool | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class CreateInvoiceLink(Request):
    title: str
    description: str
    payload: str
    currency: str
    prices: list[LabeledPrice]
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    provider_token: str | UnsetType = UNSET
    subscription_period: Seconds | UnsetType = UNSET
    max_tip_amount: int | UnsetType = UNSET
    suggested_tip_amounts: list[int] | UnsetType = UNSET
    provider_data: str | UnsetType = UNSET
    photo_url: str | UnsetType = UNSET
    photo_size: int | UnsetType = UNSET
    photo_width: int | UnsetType = UNSET
    photo_height: int | UnsetType = UNSET
    need_name: bool | UnsetType = UNSET
    need_phone_number: bool | UnsetType = UNSET
    need_email: bool | UnsetType = UNSET
    need_shipping_address: bool | UnsetType = UNSET
    send_phone_number_to_provider: bool | UnsetType = UNSET
    send_email_to_provider: bool | UnsetType = UNSET
    is_flexible: bool | UnsetType = UNSET


class AnswerShippingQuery(Request):
    shipping_query_id: ShippingQueryId
    ok: bool
    shipping_options: list[ShippingOption] | UnsetType = UNSET
    error_message: str | UnsetType = UNSET


class AnswerPreCheckoutQuery(Request):
    pre_checkout_query_id: PreCheckoutQueryId
    ok: bool
    error_message: str | UnsetType = UNSET


class SetPassportDataErrors(Request):
    user_id: UserId
    errors: list[PassportElementError]


# Games


class SendGame(Request):
    chat_id: ChatId
    game_short_name: str
    business_connection_id: BusinessConnectionId | UnsetType = UNSET
    message_thread_id: MessageThreadId | UnsetType = UNSET
    disable_notification: bool | UnsetType = UNSET
    protect_content: bool | UnsetType = UNSET
    allow_paid_broadcast: bool | UnsetType = UNSET
    message_effect_id: MessageEffectId | UnsetType = UNSET
    reply_parameters: ReplyParameters | UnsetType = UNSET
    reply_markup: InlineKeyboardMarkup | UnsetType = UNSET


class SetGameScore(Request):
    user_id: UserId
    score: int
    force: bool | UnsetType = UNSET
    disable_edit_message: bool | UnsetType = UNSET
    chat_id: ChatId | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET


class GetGameHighScores(Request):
    user_id: UserId
    chat_id: ChatId | UnsetType = UNSET
    message_id: MessageId | UnsetType = UNSET
    inline_message_id: InlineMessageId | UnsetType = UNSET
