"""Discord webhook client.

Design:
- The webhook URL is the only credential; no Authorization header is sent.
- Every operation is a single request (``update_webhook`` issues two in a row).
- Sends, deletes and updates log failures and return None; ``info`` always raises.
  Pass ``raise_errors=True`` to make every operation raise instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import requests

from discord_rest import _http
from discord_rest._files import image_data_uri, read_file
from discord_rest.errors import DiscordError
from discord_rest.types import Embed, WebhookInfo, WebhookUrl

logger = logging.getLogger(__name__)


class WebhookClient:
    """Client bound to a single webhook URL."""

    def __init__(
        self,
        webhook_url: WebhookUrl,
        *,
        timeout: float = _http.DEFAULT_TIMEOUT,
        max_retries: int = 0,
        raise_errors: bool = False,
        session: Optional[requests.Session] = None,
        proxies: Optional[dict[str, str]] = None,
    ) -> None:
        """Create a new webhook client.

        Args:
            webhook_url: Discord webhook URL (``https://discord.com/api/webhooks/<id>/<token>``).
            timeout: Per-request timeout in seconds.
            max_retries: Number of retries on HTTP 429 before the error is reported.
            raise_errors: Raise on failure from every operation instead of only logging.
            session: Optional pre-configured session (mostly useful in tests).
            proxies: Optional ``requests`` proxies mapping used when no session is given.

        Raises:
            ValueError: If the webhook URL is empty.
        """
        if not webhook_url:
            raise ValueError("No webhook URL provided")

        self.url = webhook_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.raise_errors = raise_errors
        self.session = session or _http.new_session(proxies)

    def __repr__(self) -> str:
        return f"WebhookClient(url={_http.safe_url(self.url)!r})"

    def _request(self, method: str, url: Optional[str] = None, **kwargs: Any) -> Any:
        return _http.request(
            self.session,
            method,
            url or self.url,
            timeout=self.timeout,
            max_retries=self.max_retries,
            **kwargs,
        )

    def _fail(self, action: str, exc: DiscordError) -> None:
        """Log a failed operation, re-raising only when the client is in raise mode."""
        logger.error("Error %s: %s", action, exc)
        if self.raise_errors:
            raise exc

    def _call(self, action: str, done: str, method: str, url: Optional[str] = None, **kwargs: Any) -> None:
        try:
            self._request(method, url, **kwargs)
        except DiscordError as exc:
            self._fail(action, exc)
            return
        logger.info(done)

    @staticmethod
    def _message_payload(
        payload: dict[str, Any],
        username: Optional[str],
        avatar_url: Optional[str],
    ) -> dict[str, Any]:
        if username:
            payload["username"] = username
        if avatar_url:
            payload["avatar_url"] = avatar_url
        return payload

    def send_message(
        self,
        message: str,
        username: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        """Send a plain text message.

        Args:
            message: The message content.
            username: Optional display name overriding the webhook's name.
            avatar_url: Optional avatar URL overriding the webhook's avatar.
        """
        payload = self._message_payload({"content": message}, username, avatar_url)
        self._call("sending message", "Message sent successfully.", "post", json=payload)

    def send_file(self, message: str, file_path: Union[str, Path]) -> None:
        """Send a message with a file attachment.

        The file is read before anything is sent, so a bad path fails without
        touching the network.

        Args:
            message: The message content.
            file_path: Path of the file to attach.

        Raises:
            FileNotFoundError: If ``file_path`` does not exist.
        """
        file_name, file_data = read_file(file_path)
        size = len(file_data)
        logger.info("File size: %d bytes (%.2f KB)", size, size / 1024)

        self._call(
            "sending file to Discord",
            f"File {file_name} sent successfully.",
            "post",
            data={"content": message},
            files={"file": (file_name, file_data)},
        )

    def send_simple_embed(self, content: str) -> None:
        """Send a single embed whose description is ``content``."""
        simple_embed: Embed = {"description": content}
        self._call("sending simple embed", "Simple embed sent.", "post", json={"embeds": [simple_embed]})

    def send_multiple_embeds(
        self,
        embeds: list[Embed],
        username: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        """Send several embeds in a single message.

        Args:
            embeds: Embed objects, sent as given.
            username: Optional display name override.
            avatar_url: Optional avatar URL override.
        """
        payload = self._message_payload({"embeds": list(embeds)}, username, avatar_url)
        self._call(
            "sending multiple embeds",
            "Multiple embeds sent in a single message.",
            "post",
            json=payload,
        )

    def delete_message(self, message_id: str) -> None:
        """Delete a message previously sent by this webhook."""
        self._call(
            "deleting message",
            f"Message {message_id} deleted.",
            "delete",
            f"{self.url}/messages/{message_id}",
        )

    def delete_all_messages(self) -> None:
        """Delete the webhook itself, and with it its messages (requires MANAGE_WEBHOOKS)."""
        self._call("deleting all messages", "All messages deleted.", "delete")

    def info(self) -> WebhookInfo:
        """Fetch information about the webhook.

        Returns:
            The webhook object (id, guild_id, channel_id, user, name, avatar, token).

        Raises:
            DiscordError: Always, on failure, regardless of ``raise_errors``.
        """
        try:
            data: WebhookInfo = self._request("get")
        except DiscordError as exc:
            logger.error("Error fetching webhook information: %s", exc)
            raise

        logger.info("Webhook information fetched: %s (%s)", data.get("name"), data.get("id"))
        return data

    def update_webhook(self, image_path: Union[str, Path], new_name: str) -> None:
        """Replace the webhook's avatar and name.

        Two PATCH requests are sent, avatar first; if the first one fails the
        name is left untouched.

        Args:
            image_path: Path of the new avatar image.
            new_name: New webhook name.

        Raises:
            FileNotFoundError: If ``image_path`` does not exist.
        """
        avatar = image_data_uri(image_path)

        try:
            self._request("patch", json={"avatar": avatar})
            self._request("patch", json={"name": new_name})
        except DiscordError as exc:
            self._fail("updating webhook", exc)
            return

        logger.info("Webhook updated successfully!")

    def _set_rate_limit(self, rate_limit_per_user: int) -> None:
        """Set the per-user slowmode (seconds) on the webhook."""
        self._call(
            "setting rate limit",
            f"Rate limit set to {rate_limit_per_user}s.",
            "patch",
            json={"rate_limit_per_user": rate_limit_per_user},
        )

    def _set_owner(self, user_id: str) -> None:
        """Transfer the webhook to another user."""
        self._call("setting webhook owner", f"Webhook owner set to {user_id}.", "patch", json={"owner_id": user_id})

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "WebhookClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
