"""Thin client for the Discord REST API and webhooks.

Two independent clients are provided:
- :class:`WebhookClient` posts to a single webhook URL
- :class:`BotClient` calls the REST API with a bot token
"""

from discord_rest.bot import BotClient
from discord_rest.client import build_bot_client, build_webhook_client
from discord_rest.embeds import build_embed, field
from discord_rest.errors import (
    AuthenticationError,
    DiscordError,
    HTTPError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from discord_rest.webhook import WebhookClient

__all__ = [
    "AuthenticationError",
    "BotClient",
    "DiscordError",
    "HTTPError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ValidationError",
    "WebhookClient",
    "build_bot_client",
    "build_embed",
    "build_webhook_client",
    "field",
]
