"""Loose shapes of the Discord objects sent and received by the clients.

These are TypedDicts only: responses are returned exactly as decoded and are
never validated against them.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, TypedDict

WebhookUrl = str
BotToken = str
Snowflake = str


class EmbedFooter(TypedDict, total=False):
    text: str
    icon_url: str


class EmbedMedia(TypedDict, total=False):
    """Shared shape of ``image``, ``thumbnail`` and ``video``."""
    url: str
    proxy_url: str
    height: int
    width: int


class EmbedProvider(TypedDict, total=False):
    name: str
    url: str


class EmbedAuthor(TypedDict, total=False):
    name: str
    url: str
    icon_url: str


class EmbedField(TypedDict, total=False):
    name: str
    value: str
    inline: bool


class Embed(TypedDict, total=False):
    """Rich content block attached to a message."""
    title: str
    type: Literal["rich", "image", "video", "gifv", "article", "link"]
    description: str
    url: str
    timestamp: str
    color: int
    footer: EmbedFooter
    image: EmbedMedia
    thumbnail: EmbedMedia
    video: EmbedMedia
    provider: EmbedProvider
    author: EmbedAuthor
    fields: list[EmbedField]


class User(TypedDict, total=False):
    id: Snowflake
    username: str
    discriminator: str
    global_name: Optional[str]
    avatar: Optional[str]
    bot: bool


class WebhookInfo(TypedDict):
    """Response of ``GET <webhook url>``."""
    id: Snowflake
    guild_id: Snowflake
    channel_id: Snowflake
    user: User
    name: str
    avatar: Optional[str]
    token: str


class Guild(TypedDict, total=False):
    id: Snowflake
    name: str
    icon: Optional[str]
    owner_id: Snowflake
    roles: list[dict[str, Any]]
    emojis: list[dict[str, Any]]


class Channel(TypedDict, total=False):
    id: Snowflake
    type: int
    guild_id: Snowflake
    name: str
    recipients: list[User]


class Message(TypedDict, total=False):
    id: Snowflake
    channel_id: Snowflake
    author: User
    content: str
    timestamp: str
    embeds: list[Embed]


class Role(TypedDict, total=False):
    id: Snowflake
    name: str
    color: int
    permissions: str
    position: int


class Emoji(TypedDict, total=False):
    id: Optional[Snowflake]
    name: Optional[str]
    roles: list[Snowflake]
    animated: bool


class Webhook(TypedDict, total=False):
    id: Snowflake
    type: int
    channel_id: Snowflake
    name: Optional[str]
    avatar: Optional[str]
    token: str
