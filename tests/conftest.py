"""Shared test fixtures: fake HTTP responses and a mocked requests session."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

WEBHOOK_URL = "https://discord.com/api/webhooks/123456/s3cr3t-token"


def make_response(
    status: int = 200,
    body: Optional[Any] = None,
    content: Optional[bytes] = None,
    headers: Optional[dict[str, str]] = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    resp = requests.Response()
    resp.status_code = status
    resp.reason = HTTPStatus(status).phrase
    if body is not None:
        resp._content = json.dumps(body).encode()
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = content if content is not None else b""
    resp.headers.update(headers or {})
    return resp


@pytest.fixture
def session() -> MagicMock:
    """A session whose ``request`` returns 204 unless a test says otherwise."""
    mock = MagicMock(spec=requests.Session)
    mock.request.return_value = make_response(204)
    return mock
