"""Helpers to assemble embed payloads.

The clients send embeds unmodified; these helpers only exist so callers do not
have to hand-write the nested dicts or worry about Discord's length limits.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from discord_rest.types import Embed, EmbedField

TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
FOOTER_LIMIT = 2048
AUTHOR_LIMIT = 256
MAX_FIELDS = 25


def _truncate(text: str, max_len: int) -> str:
    """Truncate a string with an ellipsis if needed.

    Args:
        text: Input string.
        max_len: Maximum length of the returned string.

    Returns:
        The original text if it fits, otherwise a shortened version ending with "...".
    """
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def field(name: str, value: str, inline: bool = False) -> EmbedField:
    """Build one embed field, truncated to Discord's limits."""
    return {
        "name": _truncate(name, FIELD_NAME_LIMIT),
        "value": _truncate(value, FIELD_VALUE_LIMIT),
        "inline": inline,
    }


def build_embed(
    title: Optional[str] = None,
    description: Optional[str] = None,
    *,
    url: Optional[str] = None,
    color: Optional[int] = None,
    fields: Optional[Iterable[EmbedField]] = None,
    author: Optional[str] = None,
    author_icon: Optional[str] = None,
    footer: Optional[str] = None,
    footer_icon: Optional[str] = None,
    image: Optional[str] = None,
    thumbnail: Optional[str] = None,
    timestamp: bool | datetime = False,
) -> Embed:
    """Assemble a rich embed.

    Only the keys that were given end up in the result.

    Args:
        title: Embed title.
        description: Main text.
        url: Link attached to the title.
        color: RGB integer (e.g. ``0xFFFFFF``).
        fields: Fields, usually built with :func:`field`. Extra fields past 25 are dropped.
        author: Author name.
        author_icon: Author icon URL.
        footer: Footer text.
        footer_icon: Footer icon URL.
        image: Large image URL.
        thumbnail: Thumbnail URL.
        timestamp: ``True`` for "now" (UTC), or an explicit datetime.

    Returns:
        The embed dict.
    """
    embed: Embed = {}

    if title:
        embed["title"] = _truncate(title, TITLE_LIMIT)
    if description:
        embed["description"] = _truncate(description, DESCRIPTION_LIMIT)
    if url:
        embed["url"] = url
    if color is not None:
        embed["color"] = color
    if fields:
        embed["fields"] = list(fields)[:MAX_FIELDS]
    if author:
        embed["author"] = {"name": _truncate(author, AUTHOR_LIMIT)}
        if author_icon:
            embed["author"]["icon_url"] = author_icon
    if footer:
        embed["footer"] = {"text": _truncate(footer, FOOTER_LIMIT)}
        if footer_icon:
            embed["footer"]["icon_url"] = footer_icon
    if image:
        embed["image"] = {"url": image}
    if thumbnail:
        embed["thumbnail"] = {"url": thumbnail}

    if isinstance(timestamp, datetime):
        embed["timestamp"] = timestamp.isoformat()
    elif timestamp:
        embed["timestamp"] = datetime.now(timezone.utc).isoformat()

    return embed
