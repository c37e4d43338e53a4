"""Discord bot REST client.

Every authenticated call goes through :meth:`BotClient._request`, which adds the
``Authorization: Bot <token>`` header, logs, and raises a
:class:`~discord_rest.errors.DiscordError` subclass on failure. The public
methods are one-line forwarders, one per REST endpoint, returning the decoded
response body as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union
from urllib.parse import quote

import requests

from discord_rest import _http
from discord_rest._files import ImageInput, image_data_uri
from discord_rest.errors import DiscordError, HTTPError
from discord_rest.types import (
    BotToken,
    Channel,
    Embed,
    Emoji,
    Guild,
    Message,
    Role,
    User,
    Webhook,
)

logger = logging.getLogger(__name__)

API_BASE = "https://discord.com/api"
DEFAULT_API_VERSION = 10

# Channel types accepted by create_channel, by name.
CHANNEL_TYPES = {"text": 0, "voice": 2}
DM_CHANNEL_TYPE = 1


class BotClient:
    """Client authenticated as a bot principal."""

    def __init__(
        self,
        token: BotToken,
        log_requests: bool = True,
        *,
        api_version: int = DEFAULT_API_VERSION,
        timeout: float = _http.DEFAULT_TIMEOUT,
        max_retries: int = 0,
        raise_errors: bool = False,
        session: Optional[requests.Session] = None,
        proxies: Optional[dict[str, str]] = None,
    ) -> None:
        """Create a new bot client.

        Args:
            token: Discord bot token.
            log_requests: Log every successful request at INFO level.
            api_version: REST API version used for every endpoint.
            timeout: Per-request timeout in seconds.
            max_retries: Number of retries on HTTP 429 before the error is raised.
            raise_errors: Make :meth:`dm` raise instead of logging failures.
            session: Optional pre-configured session (mostly useful in tests).
            proxies: Optional ``requests`` proxies mapping used when no session is given.

        Raises:
            ValueError: If the token is empty.
        """
        if not token:
            raise ValueError("No bot token provided")

        self._token = token
        self.log_requests = log_requests
        self.base_url = f"{API_BASE}/v{api_version}"
        self.timeout = timeout
        self.max_retries = max_retries
        self.raise_errors = raise_errors
        self.session = session or _http.new_session(proxies)

    def __repr__(self) -> str:
        return f"BotClient(base_url={self.base_url!r})"

    @property
    def token(self) -> BotToken:
        return self._token

    def _request(
        self,
        endpoint: str,
        method: str,
        data: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send an authenticated request to the Discord API.

        Args:
            endpoint: Path relative to the versioned base URL (e.g. ``/users/@me``).
            method: HTTP verb ("get", "post", "put", "patch", "delete").
            data: JSON body, if any.
            params: Query string parameters, if any.

        Returns:
            The decoded response body, or None for empty responses.

        Raises:
            DiscordError: The request failed (after logging the server's error payload).
        """
        headers = {
            "Authorization": f"Bot {self._token}",
            "Content-Type": "application/json",
        }

        try:
            result = _http.request(
                self.session,
                method,
                f"{self.base_url}{endpoint}",
                timeout=self.timeout,
                max_retries=self.max_retries,
                json=data,
                params=params,
                headers=headers,
            )
        except HTTPError as exc:
            logger.error("Discord API Error: %s", exc.payload if exc.payload is not None else exc)
            raise
        except DiscordError as exc:
            logger.error("Discord API Error: %s", exc)
            raise

        if self.log_requests:
            logger.info("response sent to endpoint: %s", endpoint)
        return result

    # -- messages ------------------------------------------------------------

    def send_message(self, channel_id: str, content: str) -> Message:
        """Send a text message to a channel."""
        return self._request(f"/channels/{channel_id}/messages", "post", {"content": content})

    def send_embeds(self, channel_id: str, embeds: list[Embed], content: Optional[str] = None) -> Message:
        """Send one or more embeds (and optional text) to a channel."""
        data: dict[str, Any] = {"embeds": list(embeds)}
        if content:
            data["content"] = content
        return self._request(f"/channels/{channel_id}/messages", "post", data)

    def edit_message(self, channel_id: str, message_id: str, content: str) -> Message:
        """Replace the content of a message sent by the bot."""
        return self._request(f"/channels/{channel_id}/messages/{message_id}", "patch", {"content": content})

    def delete_message(self, channel_id: str, message_id: str) -> None:
        return self._request(f"/channels/{channel_id}/messages/{message_id}", "delete")

    def get_channel_messages(self, channel_id: str, limit: int = 50) -> list[Message]:
        """Fetch the most recent messages of a channel (``limit`` is 1-100)."""
        return self._request(f"/channels/{channel_id}/messages", "get", params={"limit": limit})

    # -- reactions -----------------------------------------------------------

    def add_reaction(self, channel_id: str, message_id: str, emoji: str) -> None:
        """React to a message as the bot.

        Args:
            channel_id: The ID of the channel.
            message_id: The ID of the message.
            emoji: Unicode emoji, or ``name:id`` for a custom emoji.
        """
        return self._request(
            f"/channels/{channel_id}/messages/{message_id}/reactions/{quote(emoji, safe='')}/@me",
            "put",
        )

    def remove_reaction(self, channel_id: str, message_id: str, emoji: str, user_id: str) -> None:
        """Remove ``user_id``'s reaction from a message."""
        return self._request(
            f"/channels/{channel_id}/messages/{message_id}/reactions/{quote(emoji, safe='')}/{user_id}",
            "delete",
        )

    # -- users ---------------------------------------------------------------

    def get_user(self, user_id: str) -> User:
        return self._request(f"/users/{user_id}", "get")

    def info(self) -> User:
        """Fetch the bot's own user object."""
        return self._request("/users/@me", "get")

    def edit_username(self, username: str) -> User:
        return self._request("/users/@me", "patch", {"username": username})

    def edit_avatar(self, image: ImageInput) -> User:
        """Replace the bot's avatar with an image file path or raw image bytes."""
        return self._request("/users/@me", "patch", {"avatar": image_data_uri(image)})

    def edit_status(self, status: str) -> Any:
        """Update the account status ("online", "idle", "dnd", "invisible").

        Discord only accepts this for user accounts; with a bot token the API
        error is raised like any other.
        """
        return self._request("/users/@me/settings", "patch", {"status": status})

    def get_connections(self) -> list[dict[str, Any]]:
        return self._request("/users/@me/connections", "get")

    # -- guilds --------------------------------------------------------------

    def get_guild(self, guild_id: str) -> Guild:
        return self._request(f"/guilds/{guild_id}", "get")

    def get_guilds(self) -> list[Guild]:
        """List the guilds the bot is a member of."""
        return self._request("/users/@me/guilds", "get")

    def leave_guild(self, guild_id: str) -> None:
        return self._request(f"/users/@me/guilds/{guild_id}", "delete")

    def get_members(self, guild_id: str, limit: int = 1000) -> list[dict[str, Any]]:
        """List guild members (needs the GUILD_MEMBERS intent; ``limit`` is 1-1000)."""
        return self._request(f"/guilds/{guild_id}/members", "get", params={"limit": limit})

    def kick_member(self, guild_id: str, user_id: str) -> None:
        return self._request(f"/guilds/{guild_id}/members/{user_id}", "delete")

    def get_roles(self, guild_id: str) -> list[Role]:
        return self._request(f"/guilds/{guild_id}/roles", "get")

    def edit_role(self, guild_id: str, role_id: str, data: dict[str, Any]) -> Role:
        """Edit a role; ``data`` holds the fields to change (name, color, permissions, ...)."""
        return self._request(f"/guilds/{guild_id}/roles/{role_id}", "patch", data)

    def get_channels(self, guild_id: str) -> list[Channel]:
        return self._request(f"/guilds/{guild_id}/channels", "get")

    def create_channel(self, guild_id: str, name: str, type: Union[str, int] = "text") -> Channel:
        """Create a channel in a guild.

        Args:
            guild_id: The ID of the guild.
            name: The name of the channel.
            type: "text", "voice", or a raw Discord channel type integer.

        Raises:
            ValueError: If ``type`` is an unknown name.
        """
        if isinstance(type, str):
            if type not in CHANNEL_TYPES:
                raise ValueError(f"unknown channel type {type!r}, expected one of {sorted(CHANNEL_TYPES)}")
            type = CHANNEL_TYPES[type]

        return self._request(f"/guilds/{guild_id}/channels", "post", {"name": name, "type": type})

    def create_emoji(
        self,
        guild_id: str,
        name: str,
        image: ImageInput,
        roles: Optional[list[str]] = None,
    ) -> Emoji:
        """Upload a custom emoji from an image path or raw bytes (max 256 KB)."""
        data = {"name": name, "image": image_data_uri(image), "roles": roles or []}
        return self._request(f"/guilds/{guild_id}/emojis", "post", data)

    def delete_emoji(self, guild_id: str, emoji_id: str) -> None:
        return self._request(f"/guilds/{guild_id}/emojis/{emoji_id}", "delete")

    # -- webhooks ------------------------------------------------------------

    def create_webhook(self, channel_id: str, name: str, avatar: Optional[ImageInput] = None) -> Webhook:
        """Create a webhook in a channel.

        Args:
            channel_id: The ID of the channel.
            name: The name of the webhook.
            avatar: Optional avatar image (path or bytes).

        Returns:
            The created webhook, including its token.
        """
        data = {"name": name, "avatar": image_data_uri(avatar) if avatar is not None else None}
        webhook: Webhook = self._request(f"/channels/{channel_id}/webhooks", "post", data)

        logger.info("Webhook created: %s/webhooks/%s/***", API_BASE, webhook.get("id"))
        return webhook

    def delete_webhook(self, webhook_id: str) -> None:
        self._request(f"/webhooks/{webhook_id}", "delete")
        logger.info("Webhook deleted successfully: %s", webhook_id)

    # -- gateway -------------------------------------------------------------

    def get_gateway(self) -> dict[str, Any]:
        """Fetch the gateway URL and recommended shard count for the bot."""
        return self._request("/gateway/bot", "get")

    # -- direct messages -----------------------------------------------------

    def is_dm_open(self, user_id: str) -> Optional[str]:
        """Look for an existing one-to-one DM channel with a user.

        Args:
            user_id: The ID of the user.

        Returns:
            The channel id of the first matching DM channel, or None.
        """
        channels: list[Channel] = self._request("/users/@me/channels", "get") or []

        for channel in channels:
            if channel.get("type") != DM_CHANNEL_TYPE:
                continue
            if any(r.get("id") == user_id for r in channel.get("recipients") or []):
                return channel["id"]
        return None

    def open_or_get_dm(self, user_id: str) -> str:
        """Return the DM channel with a user, creating it when none exists."""
        existing = self.is_dm_open(user_id)
        if existing:
            return existing

        channel: Channel = self._request("/users/@me/channels", "post", {"recipient_id": user_id})
        return channel["id"]

    def dm(self, user_id: str, message: str) -> Optional[Message]:
        """Send a direct message to a user.

        Failures are logged and None is returned, unless the client was created
        with ``raise_errors=True``.
        """
        try:
            channel_id = self.open_or_get_dm(user_id)
            return self.send_message(channel_id, message)
        except DiscordError as exc:
            logger.error("Error sending DM to %s: %s", user_id, exc)
            if self.raise_errors:
                raise
            return None

    # -- attachments ---------------------------------------------------------

    def download_image(self, url: str) -> bytes:
        """Download an attachment (or any URL) into memory.

        No Authorization header is sent: the URL may point outside Discord.
        """
        return _http.request(
            self.session,
            "get",
            url,
            timeout=self.timeout,
            max_retries=self.max_retries,
            raw=True,
        )

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "BotClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
