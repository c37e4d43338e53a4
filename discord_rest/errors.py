"""Error types raised by the Discord REST clients.

Every failure coming back from Discord (or from the transport underneath) is
mapped to a subclass of :class:`DiscordError`, so callers can catch a single
base type or react to a specific class (not found, rate limited, ...).
"""

from __future__ import annotations

from typing import Any, Optional


class DiscordError(Exception):
    """Base class for every error raised by this package."""


class NetworkError(DiscordError):
    """Raised when the request never produced an HTTP response (DNS, timeout, ...)."""


class HTTPError(DiscordError):
    """Raised when Discord answers with a non-2xx status."""

    def __init__(self, status: int, payload: Optional[Any] = None, message: str = "") -> None:
        """
        Args:
            status: HTTP status code returned by Discord.
            payload: Decoded error body (usually ``{"message": ..., "code": ...}``), if any.
            message: Human readable description.
        """
        self.status = status
        self.payload = payload
        super().__init__(message or f"HTTP {status}")


class AuthenticationError(HTTPError):
    """401 / 403: invalid token or missing permission."""


class NotFoundError(HTTPError):
    """404: unknown channel, user, message, webhook, ..."""


class ValidationError(HTTPError):
    """400: Discord rejected the request body."""


class ServerError(HTTPError):
    """5xx: Discord-side failure."""


class RateLimitError(HTTPError):
    """Raised when Discord returns HTTP 429 (rate limited)."""

    def __init__(
        self,
        retry_after: float,
        global_limit: bool,
        payload: Optional[Any] = None,
    ) -> None:
        """
        Args:
            retry_after: Seconds to wait before retrying.
            global_limit: Whether the rate limit is global.
            payload: Decoded 429 body.
        """
        self.retry_after = retry_after
        self.global_limit = global_limit
        super().__init__(429, payload, f"rate limited, retry after {retry_after:.2f}s")
