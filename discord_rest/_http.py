"""Shared HTTP transport for the webhook and bot clients.

Internal module. Both clients call :func:`request`, which:
- sends the request through a ``requests.Session``
- turns transport failures and non-2xx answers into :mod:`discord_rest.errors` types
- optionally retries 429 responses after the ``retry_after`` delay
- unwraps the body (JSON, raw bytes, or ``None`` for empty responses)
"""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Optional

import requests

from discord_rest.errors import (
    AuthenticationError,
    HTTPError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0

_WEBHOOK_TOKEN_RE = re.compile(r"(/webhooks/\d+/)[^/?]+")


def safe_url(url: str) -> str:
    """Hide the token part of a webhook URL so it can be logged."""
    return _WEBHOOK_TOKEN_RE.sub(r"\1***", url)


def _decode_error_body(resp: requests.Response) -> Optional[Any]:
    """Return the decoded JSON error body, or None if Discord sent something else."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


def _error_message(resp: requests.Response, payload: Optional[Any]) -> str:
    if isinstance(payload, dict) and payload.get("message"):
        code = payload.get("code")
        suffix = f" (code {code})" if code is not None else ""
        return f"{resp.status_code} {payload['message']}{suffix}"
    return f"{resp.status_code} {resp.reason or resp.text}".strip()


def classify_response(resp: requests.Response) -> HTTPError:
    """Map a failed Discord response to the matching error class.

    Args:
        resp: A response whose status is not 2xx.

    Returns:
        The error instance (not raised).
    """
    payload = _decode_error_body(resp)

    if resp.status_code == 429:
        data = payload if isinstance(payload, dict) else {}
        retry_after = data.get("retry_after", resp.headers.get("Retry-After", 1.0))
        try:
            retry_after = float(retry_after)
        except (TypeError, ValueError):
            retry_after = 1.0
        return RateLimitError(
            retry_after=retry_after,
            global_limit=bool(data.get("global", False)),
            payload=payload,
        )

    message = _error_message(resp, payload)
    status = resp.status_code
    if status in (401, 403):
        return AuthenticationError(status, payload, message)
    if status == 404:
        return NotFoundError(status, payload, message)
    if status in (400, 422):
        return ValidationError(status, payload, message)
    if status >= 500:
        return ServerError(status, payload, message)
    return HTTPError(status, payload, message)


def _send_once(
    session: requests.Session,
    method: str,
    url: str,
    timeout: float,
    **kwargs: Any,
) -> requests.Response:
    try:
        resp = session.request(method.upper(), url, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        raise NetworkError(str(exc)) from exc

    if not (200 <= resp.status_code < 300):
        raise classify_response(resp)
    return resp


def request(
    session: requests.Session,
    method: str,
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = 0,
    raw: bool = False,
    **kwargs: Any,
) -> Any:
    """Send one Discord request and unwrap the response.

    Args:
        session: Session used to send the request.
        method: HTTP verb ("get", "post", "put", "patch", "delete").
        url: Absolute URL.
        timeout: Per-request timeout in seconds.
        max_retries: How many times a 429 answer is retried before giving up.
        raw: Return the body as bytes instead of decoding JSON.
        **kwargs: Forwarded to ``requests.Session.request`` (json, data, files, params, headers).

    Returns:
        Decoded JSON, raw bytes when ``raw`` is set, or None for empty bodies.

    Raises:
        NetworkError: The request could not be sent.
        HTTPError: Discord answered with a non-2xx status (subclass per status),
            or with a 2xx body that is not JSON.
    """
    retries = 0
    while True:
        try:
            resp = _send_once(session, method, url, timeout, **kwargs)
            break
        except RateLimitError as exc:
            if retries >= max_retries:
                raise
            retries += 1
            logger.warning(
                "rate limited on %s %s, retrying in %.2fs (%d/%d)",
                method.upper(),
                safe_url(url),
                exc.retry_after,
                retries,
                max_retries,
            )
            time.sleep(exc.retry_after)

    if raw:
        return resp.content
    if resp.status_code == 204 or not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as exc:
        raise HTTPError(resp.status_code, None, f"{resp.status_code} invalid JSON body: {exc}") from exc


def new_session(proxies: Optional[dict[str, str]] = None) -> requests.Session:
    """Create a session, optionally routed through a proxy mapping."""
    session = requests.Session()
    if proxies:
        session.proxies.update(proxies)
    return session
