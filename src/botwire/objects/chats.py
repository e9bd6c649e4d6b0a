from __future__ import annotations

from typing import TypeAlias

import msgspec

from ..ids import ChatId, ChatRef, CustomEmojiId, MessageThreadId, UnixTimestamp, UserId
from ..variants import variant_family
from .base import TelegramObject, TypeTagged
from .markup import WebAppInfo
from .messages import Chat, User


class ChatInviteLink(TelegramObject):
    invite_link: str
    creator: User
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: str | None = None
    expire_date: UnixTimestamp | None = None
    member_limit: int | None = None
    pending_join_request_count: int | None = None


class _ChatMember(TelegramObject, tag_field="status"):
    @property
    def status(self) -> str:
        return self.__struct_config__.tag


class ChatMemberOwner(_ChatMember, tag="creator"):
    user: User
    is_anonymous: bool
    custom_title: str | None = None


class ChatMemberAdministrator(_ChatMember, tag="administrator"):
    user: User
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool | None = None
    can_edit_stories: bool | None = None
    can_delete_stories: bool | None = None
    can_post_messages: bool | None = None
    can_edit_messages: bool | None = None
    can_pin_messages: bool | None = None
    can_manage_topics: bool | None = None
    custom_title: str | None = None


class ChatMemberMember(_ChatMember, tag="member"):
    user: User
    until_date: UnixTimestamp | None = None


class ChatMemberRestricted(_ChatMember, tag="restricted"):
    user: User
    is_member: bool
    can_send_messages: bool
    can_send_audios: bool
    can_send_documents: bool
    can_send_photos: bool
    can_send_videos: bool
    can_send_video_notes: bool
    can_send_voice_notes: bool
    can_send_polls: bool
    can_send_other_messages: bool
    can_add_web_page_previews: bool
    can_change_info: bool
    can_invite_users: bool
    can_pin_messages: bool
    can_manage_topics: bool
    until_date: UnixTimestamp


class ChatMemberLeft(_ChatMember, tag="left"):
    user: User


class ChatMemberBanned(_ChatMember, tag="kicked"):
    user: User
    until_date: UnixTimestamp


ChatMember: TypeAlias = (
    ChatMemberOwner
    | ChatMemberAdministrator
    | ChatMemberMember
    | ChatMemberRestricted
    | ChatMemberLeft
    | ChatMemberBanned
)

CHAT_MEMBER = variant_family("ChatMember", ChatMember)


class ChatMemberUpdated(TelegramObject):
    chat: Chat
    from_: User = msgspec.field(name="from")
    date: UnixTimestamp
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: ChatInviteLink | None = None
    via_chat_folder_invite_link: bool | None = None


class ChatJoinRequest(TelegramObject):
    chat: Chat
    from_: User = msgspec.field(name="from")
    user_chat_id: ChatId
    date: UnixTimestamp
    bio: str | None = None
    invite_link: ChatInviteLink | None = None


class ForumTopic(TelegramObject):
    message_thread_id: MessageThreadId
    name: str
    icon_color: int
    icon_custom_emoji_id: CustomEmojiId | None = None


class BotCommand(TelegramObject):
    command: str
    description: str


class BotName(TelegramObject):
    name: str


class BotDescription(TelegramObject):
    description: str


class BotShortDescription(TelegramObject):
    short_description: str


# Which users and chats a command list applies to.


class BotCommandScopeDefault(TypeTagged, tag="default"):
    pass


class BotCommandScopeAllPrivateChats(TypeTagged, tag="all_private_chats"):
    pass


class BotCommandScopeAllGroupChats(TypeTagged, tag="all_group_chats"):
    pass


class BotCommandScopeAllChatAdministrators(TypeTagged, tag="all_chat_administrators"):
    pass


class BotCommandScopeChat(TypeTagged, tag="chat"):
    chat_id: ChatRef


class BotCommandScopeChatAdministrators(TypeTagged, tag="chat_administrators"):
    chat_id: ChatRef


class BotCommandScopeChatMember(TypeTagged, tag="chat_member"):
    chat_id: ChatRef
    user_id: UserId


BotCommandScope: TypeAlias = (
    BotCommandScopeDefault
    | BotCommandScopeAllPrivateChats
    | BotCommandScopeAllGroupChats
    | BotCommandScopeAllChatAdministrators
    | BotCommandScopeChat
    | BotCommandScopeChatAdministrators
    | BotCommandScopeChatMember
)

BOT_COMMAND_SCOPE = variant_family("BotCommandScope", BotCommandScope)


class MenuButtonCommands(TypeTagged, tag="commands"):
    pass


class MenuButtonWebApp(TypeTagged, tag="web_app"):
    text: str
    web_app: WebAppInfo


class MenuButtonDefault(TypeTagged, tag="default"):
    pass


MenuButton: TypeAlias = MenuButtonCommands | MenuButtonWebApp | MenuButtonDefault

MENU_BUTTON = variant_family("MenuButton", MenuButton)


__all__ = [
    "BOT_COMMAND_SCOPE",
    "CHAT_MEMBER",
    "MENU_BUTTON",
    "BotCommand",
    "BotCommandScope",
    "BotCommandScopeAllChatAdministrators",
    "BotCommandScopeAllGroupChats",
    "BotCommandScopeAllPrivateChats",
    "BotCommandScopeChat",
    "BotCommandScopeChatAdministrators",
    "BotCommandScopeChatMember",
    "BotCommandScopeDefault",
    "BotDescription",
    "BotName",
    "BotShortDescription",
    "ChatInviteLink",
    "ChatJoinRequest",
    "ChatMember",
    "ChatMemberAdministrator",
    "ChatMemberBanned",
    "ChatMemberLeft",
    "ChatMemberMember",
    "ChatMemberOwner",
    "ChatMemberRestricted",
    "ChatMemberUpdated",
    "ForumTopic",
    "MenuButton",
    "MenuButtonCommands",
    "MenuButtonDefault",
    "MenuButtonWebApp",
]
