"""Client construction from ``config.json``.

The factories read the credentials and transport settings written by
:func:`utils.config.load_config` and return ready-to-use clients.
"""

from __future__ import annotations

from typing import Any, Optional

import utils.config
from discord_rest.bot import DEFAULT_API_VERSION, BotClient
from discord_rest.webhook import WebhookClient
from utils.proxy import proxy_string_to_dict


def _transport_options(config: dict[str, Any]) -> dict[str, Any]:
    proxy = config.get("proxy") or ""
    return {
        "timeout": float(config.get("timeout") or 15),
        "max_retries": int(config.get("max_retries") or 0),
        "proxies": proxy_string_to_dict(proxy) if proxy else None,
    }


def _flag(config: dict[str, Any], key: str, default: bool) -> bool:
    value = config.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"config key {key!r} must be true or false, got {value!r}")
    return value


def build_webhook_client(config: Optional[dict[str, Any]] = None) -> WebhookClient:
    """Create the WebhookClient using the configured webhook URL.

    Args:
        config: Parsed configuration; loaded from ``config.json`` when omitted.

    Returns:
        A WebhookClient instance.

    Raises:
        ValueError: If no webhook URL is configured.
    """
    if config is None:
        config = utils.config.load_config()
    return WebhookClient(config.get("webhook") or "", **_transport_options(config))


def build_bot_client(config: Optional[dict[str, Any]] = None) -> BotClient:
    """Create the BotClient using the configured bot token.

    Args:
        config: Parsed configuration; loaded from ``config.json`` when omitted.

    Returns:
        A BotClient instance.

    Raises:
        ValueError: If no bot token is configured, or "log_requests" is not a boolean.
    """
    if config is None:
        config = utils.config.load_config()
    return BotClient(
        config.get("token") or "",
        log_requests=_flag(config, "log_requests", True),
        api_version=int(config.get("api_version") or DEFAULT_API_VERSION),
        **_transport_options(config),
    )
