"""The binding table: one constant per Bot API operation.

Each :class:`Operation` pins a wire method name to its request record and the
type its ``result`` decodes into. Operations without a request record are
parameterless and go out as GET; everything else is a JSON POST.

Edits that target an inline message share the wire name and request record of
their chat-addressed counterpart but are bound separately, because the server
answers them with ``true`` instead of the edited :class:`Message`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from . import codec
from . import methods as m
from .envelope import Failed, Ok, decode_envelope
from .objects.chats import (
    BotCommand,
    BotDescription,
    BotName,
    BotShortDescription,
    ChatInviteLink,
    ChatMember,
    ForumTopic,
    MenuButton,
)
from .objects.files import File, Sticker, StickerSet, UserProfilePhotos
from .objects.inline import SentWebAppMessage
from .objects.messages import Chat, GameHighScore, Message, MessageIdResult, Poll, User
from .objects.permissions import ChatAdministratorRights
from .objects.updates import Update, WebhookInfo

Req = TypeVar("Req", bound=m.Request)
Res = TypeVar("Res")


class HttpVerb(str, enum.Enum):
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True, slots=True)
class Operation(Generic[Req, Res]):
    name: str
    wire_name: str
    request_type: type[Req] | None
    result_type: Any

    @property
    def verb(self) -> HttpVerb:
        return HttpVerb.GET if self.request_type is None else HttpVerb.POST

    def encode(self, request: Req | None = None) -> dict[str, Any] | None:
        """Serialize ``request`` into the JSON body sent for this operation."""
        if self.request_type is None:
            if request is not None:
                raise TypeError(f"{self.name} takes no parameters")
            return None
        if not isinstance(request, self.request_type):
            raise TypeError(
                f"{self.name} expects {self.request_type.__name__}, "
                f"got {type(request).__name__}"
            )
        return codec.encode(request)

    def build(self, **fields: Any) -> Req | None:
        if self.request_type is None:
            if fields:
                raise TypeError(f"{self.name} takes no parameters")
            return None
        return self.request_type(**fields)

    def decode_request(self, body: dict[str, Any]) -> Req:
        if self.request_type is None:
            raise TypeError(f"{self.name} takes no parameters")
        return codec.convert(body, self.request_type)

    def decode(self, raw: Any) -> Ok[Res] | Failed:
        return decode_envelope(raw, self.result_type)


OPERATIONS: dict[str, Operation[Any, Any]] = {}


def _snake(wire_name: str) -> str:
    out = []
    for char in wire_name:
        if char.isupper():
            out.append("_")
            out.append(char.lower())
        else:
            out.append(char)
    return "".join(out)


def _op(
    wire_name: str,
    request_type: type[Req] | None,
    result_type: Any,
    *,
    name: str | None = None,
) -> Operation[Req, Any]:
    op = Operation(name or _snake(wire_name), wire_name, request_type, result_type)
    if op.name in OPERATIONS:
        raise ValueError(f"operation {op.name} is already bound")
    OPERATIONS[op.name] = op
    return op


def operation(name: str) -> Operation[Any, Any]:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"unknown operation {name!r}") from None


def operations_for_wire_name(wire_name: str) -> list[Operation[Any, Any]]:
    return [op for op in OPERATIONS.values() if op.wire_name == wire_name]


# Updates and bot identity
get_updates = _op("getUpdates", m.GetUpdates, list[Update])
set_webhook = _op("setWebhook", m.SetWebhook, bool)
delete_webhook = _op("deleteWebhook", m.DeleteWebhook, bool)
get_webhook_info = _op("getWebhookInfo", None, WebhookInfo)
get_me = _op("getMe", None, User)
log_out = _op("logOut", None, bool)
close = _op("close", None, bool)

# Sending messages
send_message = _op("sendMessage", m.SendMessage, Message)
forward_message = _op("forwardMessage", m.ForwardMessage, Message)
forward_messages = _op("forwardMessages", m.ForwardMessages, list[MessageIdResult])
copy_message = _op("copyMessage", m.CopyMessage, MessageIdResult)
copy_messages = _op("copyMessages", m.CopyMessages, list[MessageIdResult])
send_photo = _op("sendPhoto", m.SendPhoto, Message)
send_audio = _op("sendAudio", m.SendAudio, Message)
send_document = _op("sendDocument", m.SendDocument, Message)
send_video = _op("sendVideo", m.SendVideo, Message)
send_animation = _op("sendAnimation", m.SendAnimation, Message)
send_voice = _op("sendVoice", m.SendVoice, Message)
send_video_note = _op("sendVideoNote", m.SendVideoNote, Message)
send_media_group = _op("sendMediaGroup", m.SendMediaGroup, list[Message])
send_location = _op("sendLocation", m.SendLocation, Message)
send_venue = _op("sendVenue", m.SendVenue, Message)
send_contact = _op("sendContact", m.SendContact, Message)
send_poll = _op("sendPoll", m.SendPoll, Message)
send_dice = _op("sendDice", m.SendDice, Message)
send_chat_action = _op("sendChatAction", m.SendChatAction, bool)
set_message_reaction = _op("setMessageReaction", m.SetMessageReaction, bool)

# Users and files
get_user_profile_photos = _op(
    "getUserProfilePhotos", m.GetUserProfilePhotos, UserProfilePhotos
)
get_file = _op("getFile", m.GetFile, File)

# Chat membership
ban_chat_member = _op("banChatMember", m.BanChatMember, bool)
unban_chat_member = _op("unbanChatMember", m.UnbanChatMember, bool)
restrict_chat_member = _op("restrictChatMember", m.RestrictChatMember, bool)
promote_chat_member = _op("promoteChatMember", m.PromoteChatMember, bool)
set_chat_administrator_custom_title = _op(
    "setChatAdministratorCustomTitle", m.SetChatAdministratorCustomTitle, bool
)
ban_chat_sender_chat = _op("banChatSenderChat", m.BanChatSenderChat, bool)
unban_chat_sender_chat = _op("unbanChatSenderChat", m.UnbanChatSenderChat, bool)
set_chat_permissions = _op("setChatPermissions", m.SetChatPermissions, bool)

# Invite links and join requests
export_chat_invite_link = _op("exportChatInviteLink", m.ExportChatInviteLink, str)
create_chat_invite_link = _op(
    "createChatInviteLink", m.CreateChatInviteLink, ChatInviteLink
)
edit_chat_invite_link = _op("editChatInviteLink", m.EditChatInviteLink, ChatInviteLink)
revoke_chat_invite_link = _op(
    "revokeChatInviteLink", m.RevokeChatInviteLink, ChatInviteLink
)
approve_chat_join_request = _op(
    "approveChatJoinRequest", m.ApproveChatJoinRequest, bool
)
decline_chat_join_request = _op(
    "declineChatJoinRequest", m.DeclineChatJoinRequest, bool
)

# Chat settings
set_chat_photo = _op("setChatPhoto", m.SetChatPhoto, bool)
delete_chat_photo = _op("deleteChatPhoto", m.DeleteChatPhoto, bool)
set_chat_title = _op("setChatTitle", m.SetChatTitle, bool)
set_chat_description = _op("setChatDescription", m.SetChatDescription, bool)
pin_chat_message = _op("pinChatMessage", m.PinChatMessage, bool)
unpin_chat_message = _op("unpinChatMessage", m.UnpinChatMessage, bool)
unpin_all_chat_messages = _op("unpinAllChatMessages", m.UnpinAllChatMessages, bool)
leave_chat = _op("leaveChat", m.LeaveChat, bool)
get_chat = _op("getChat", m.GetChat, Chat)
get_chat_administrators = _op(
    "getChatAdministrators", m.GetChatAdministrators, list[ChatMember]
)
get_chat_member_count = _op("getChatMemberCount", m.GetChatMemberCount, int)
get_chat_member = _op("getChatMember", m.GetChatMember, ChatMember)
set_chat_sticker_set = _op("setChatStickerSet", m.SetChatStickerSet, bool)
delete_chat_sticker_set = _op("deleteChatStickerSet", m.DeleteChatStickerSet, bool)

# Forum topics
get_forum_topic_icon_stickers = _op("getForumTopicIconStickers", None, list[Sticker])
create_forum_topic = _op("createForumTopic", m.CreateForumTopic, ForumTopic)
edit_forum_topic = _op("editForumTopic", m.EditForumTopic, bool)
close_forum_topic = _op("closeForumTopic", m.CloseForumTopic, bool)
reopen_forum_topic = _op("reopenForumTopic", m.ReopenForumTopic, bool)
delete_forum_topic = _op("deleteForumTopic", m.DeleteForumTopic, bool)
unpin_all_forum_topic_messages = _op(
    "unpinAllForumTopicMessages", m.UnpinAllForumTopicMessages, bool
)
edit_general_forum_topic = _op(
    "editGeneralForumTopic", m.EditGeneralForumTopic, bool
)
close_general_forum_topic = _op(
    "closeGeneralForumTopic", m.CloseGeneralForumTopic, bool
)
reopen_general_forum_topic = _op(
    "reopenGeneralForumTopic", m.ReopenGeneralForumTopic, bool
)
hide_general_forum_topic = _op("hideGeneralForumTopic", m.HideGeneralForumTopic, bool)
unhide_general_forum_topic = _op(
    "unhideGeneralForumTopic", m.UnhideGeneralForumTopic, bool
)
unpin_all_general_forum_topic_messages = _op(
    "unpinAllGeneralForumTopicMessages", m.UnpinAllGeneralForumTopicMessages, bool
)

# Callback queries and bot settings
answer_callback_query = _op("answerCallbackQuery", m.AnswerCallbackQuery, bool)
set_my_commands = _op("setMyCommands", m.SetMyCommands, bool)
delete_my_commands = _op("deleteMyCommands", m.DeleteMyCommands, bool)
get_my_commands = _op("getMyCommands", m.GetMyCommands, list[BotCommand])
set_my_name = _op("setMyName", m.SetMyName, bool)
get_my_name = _op("getMyName", m.GetMyName, BotName)
set_my_description = _op("setMyDescription", m.SetMyDescription, bool)
get_my_description = _op("getMyDescription", m.GetMyDescription, BotDescription)
set_my_short_description = _op(
    "setMyShortDescription", m.SetMyShortDescription, bool
)
get_my_short_description = _op(
    "getMyShortDescription", m.GetMyShortDescription, BotShortDescription
)
set_chat_menu_button = _op("setChatMenuButton", m.SetChatMenuButton, bool)
get_chat_menu_button = _op("getChatMenuButton", m.GetChatMenuButton, MenuButton)
set_my_default_administrator_rights = _op(
    "setMyDefaultAdministratorRights", m.SetMyDefaultAdministratorRights, bool
)
get_my_default_administrator_rights = _op(
    "getMyDefaultAdministratorRights",
    m.GetMyDefaultAdministratorRights,
    ChatAdministratorRights,
)

# Editing messages
edit_message_text = _op("editMessageText", m.EditMessageText, Message)
edit_inline_message_text = _op(
    "editMessageText", m.EditMessageText, bool, name="edit_inline_message_text"
)
edit_message_caption = _op("editMessageCaption", m.EditMessageCaption, Message)
edit_inline_message_caption = _op(
    "editMessageCaption", m.EditMessageCaption, bool, name="edit_inline_message_caption"
)
edit_message_media = _op("editMessageMedia", m.EditMessageMedia, Message)
edit_inline_message_media = _op(
    "editMessageMedia", m.EditMessageMedia, bool, name="edit_inline_message_media"
)
edit_message_live_location = _op(
    "editMessageLiveLocation", m.EditMessageLiveLocation, Message
)
edit_inline_message_live_location = _op(
    "editMessageLiveLocation",
    m.EditMessageLiveLocation,
    bool,
    name="edit_inline_message_live_location",
)
stop_message_live_location = _op(
    "stopMessageLiveLocation", m.StopMessageLiveLocation, Message
)
stop_inline_message_live_location = _op(
    "stopMessageLiveLocation",
    m.StopMessageLiveLocation,
    bool,
    name="stop_inline_message_live_location",
)
edit_message_reply_markup = _op(
    "editMessageReplyMarkup", m.EditMessageReplyMarkup, Message
)
edit_inline_message_reply_markup = _op(
    "editMessageReplyMarkup",
    m.EditMessageReplyMarkup,
    bool,
    name="edit_inline_message_reply_markup",
)
stop_poll = _op("stopPoll", m.StopPoll, Poll)
delete_message = _op("deleteMessage", m.DeleteMessage, bool)
delete_messages = _op("deleteMessages", m.DeleteMessages, bool)

# Stickers
send_sticker = _op("sendSticker", m.SendSticker, Message)
get_sticker_set = _op("getStickerSet", m.GetStickerSet, StickerSet)
get_custom_emoji_stickers = _op(
    "getCustomEmojiStickers", m.GetCustomEmojiStickers, list[Sticker]
)
upload_sticker_file = _op("uploadStickerFile", m.UploadStickerFile, File)
create_new_sticker_set = _op("createNewStickerSet", m.CreateNewStickerSet, bool)
add_sticker_to_set = _op("addStickerToSet", m.AddStickerToSet, bool)
replace_sticker_in_set = _op("replaceStickerInSet", m.ReplaceStickerInSet, bool)
set_sticker_position_in_set = _op(
    "setStickerPositionInSet", m.SetStickerPositionInSet, bool
)
delete_sticker_from_set = _op("deleteStickerFromSet", m.DeleteStickerFromSet, bool)
set_sticker_emoji_list = _op("setStickerEmojiList", m.SetStickerEmojiList, bool)
set_sticker_keywords = _op("setStickerKeywords", m.SetStickerKeywords, bool)
set_sticker_mask_position = _op(
    "setStickerMaskPosition", m.SetStickerMaskPosition, bool
)
set_sticker_set_title = _op("setStickerSetTitle", m.SetStickerSetTitle, bool)
set_sticker_set_thumbnail = _op(
    "setStickerSetThumbnail", m.SetStickerSetThumbnail, bool
)
set_custom_emoji_sticker_set_thumbnail = _op(
    "setCustomEmojiStickerSetThumbnail", m.SetCustomEmojiStickerSetThumbnail, bool
)
delete_sticker_set = _op("deleteStickerSet", m.DeleteStickerSet, bool)

# Inline mode and web apps
answer_inline_query = _op("answerInlineQuery", m.AnswerInlineQuery, bool)
answer_web_app_query = _op(
    "answerWebAppQuery", m.AnswerWebAppQuery, SentWebAppMessage
)

# Payments and passport
send_invoice = _op("sendInvoice", m.SendInvoice, Message)
create_invoice_link = _op("createInvoiceLink", m.CreateInvoiceLink, str)
answer_shipping_query = _op("answerShippingQuery", m.AnswerShippingQuery, bool)
answer_pre_checkout_query = _op(
    "answerPreCheckoutQuery", m.AnswerPreCheckoutQuery, bool
)
set_passport_data_errors = _op("setPassportDataErrors", m.SetPassportDataErrors, bool)

# Games
send_game = _op("sendGame", m.SendGame, Message)
set_game_score = _op("setGameScore", m.SetGameScore, Message)
set_inline_game_score = _op(
    "setGameScore", m.SetGameScore, bool, name="set_inline_game_score"
)
get_game_high_scores = _op(
    "getGameHighScores", m.GetGameHighScores, list[GameHighScore]
)


__all__ = [
    "OPERATIONS",
    "HttpVerb",
    "Operation",
    "operation",
    "operations_for_wire_name",
    *OPERATIONS,
]
