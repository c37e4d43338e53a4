"""Tests for the shared transport: response unwrapping and error classification."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from discord_rest import _http
from discord_rest.errors import (
    AuthenticationError,
    HTTPError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from tests.conftest import WEBHOOK_URL, make_response

URL = "https://discord.com/api/v10/users/@me"


class TestResponseUnwrapping:
    def test_returns_decoded_json(self, session: MagicMock) -> None:
        session.request.return_value = make_response(200, {"id": "1"})
        assert _http.request(session, "get", URL) == {"id": "1"}

    def test_no_content_returns_none(self, session: MagicMock) -> None:
        assert _http.request(session, "delete", URL) is None

    def test_raw_returns_bytes(self, session: MagicMock) -> None:
        session.request.return_value = make_response(200, content=b"\x89PNG")
        assert _http.request(session, "get", URL, raw=True) == b"\x89PNG"

    def test_non_json_success_body_raises_http_error(self, session: MagicMock) -> None:
        session.request.return_value = make_response(200, content=b"<html>proxy page</html>")

        with pytest.raises(HTTPError) as exc_info:
            _http.request(session, "get", URL)

        assert exc_info.value.status == 200
        assert exc_info.value.payload is None
        assert "invalid JSON body" in str(exc_info.value)

    def test_method_is_uppercased_and_timeout_forwarded(self, session: MagicMock) -> None:
        _http.request(session, "patch", URL, timeout=3.0, json={"a": 1})
        session.request.assert_called_once_with("PATCH", URL, timeout=3.0, json={"a": 1})


class TestErrorClassification:
    @pytest.mark.parametrize(
        ("status", "error_cls"),
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (405, HTTPError),
            (500, ServerError),
            (502, ServerError),
        ],
    )
    def test_status_maps_to_error_class(self, session: MagicMock, status: int, error_cls: type) -> None:
        session.request.return_value = make_response(status, {"message": "nope", "code": 0})
        with pytest.raises(error_cls) as exc_info:
            _http.request(session, "get", URL)
        assert exc_info.value.status == status

    def test_server_payload_is_kept(self, session: MagicMock) -> None:
        payload = {"message": "Unknown User", "code": 10013}
        session.request.return_value = make_response(404, payload)

        with pytest.raises(NotFoundError) as exc_info:
            _http.request(session, "get", URL)

        assert exc_info.value.payload == payload
        assert "Unknown User" in str(exc_info.value)
        assert "10013" in str(exc_info.value)

    def test_non_json_error_body(self, session: MagicMock) -> None:
        session.request.return_value = make_response(502, content=b"<html>bad gateway</html>")
        with pytest.raises(ServerError) as exc_info:
            _http.request(session, "get", URL)
        assert exc_info.value.payload is None

    def test_transport_failure_becomes_network_error(self, session: MagicMock) -> None:
        session.request.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(NetworkError, match="connection refused"):
            _http.request(session, "get", URL)


class TestRateLimit:
    def test_429_raises_without_retries(self, session: MagicMock) -> None:
        session.request.return_value = make_response(429, {"retry_after": 0.5, "global": True})

        with pytest.raises(RateLimitError) as exc_info:
            _http.request(session, "get", URL)

        assert exc_info.value.retry_after == 0.5
        assert exc_info.value.global_limit is True
        session.request.assert_called_once()

    def test_429_retried_then_succeeds(self, session: MagicMock) -> None:
        session.request.side_effect = [
            make_response(429, {"retry_after": 1.25, "global": False}),
            make_response(200, {"ok": True}),
        ]

        with patch("discord_rest._http.time.sleep") as mock_sleep:
            result = _http.request(session, "post", URL, max_retries=2)

        assert result == {"ok": True}
        mock_sleep.assert_called_once_with(1.25)
        assert session.request.call_count == 2

    def test_429_gives_up_after_max_retries(self, session: MagicMock) -> None:
        session.request.return_value = make_response(429, {"retry_after": 0.1})

        with patch("discord_rest._http.time.sleep"):
            with pytest.raises(RateLimitError):
                _http.request(session, "post", URL, max_retries=2)

        assert session.request.call_count == 3

    def test_retry_after_header_fallback(self, session: MagicMock) -> None:
        session.request.return_value = make_response(429, content=b"", headers={"Retry-After": "7"})
        with pytest.raises(RateLimitError) as exc_info:
            _http.request(session, "get", URL)
        assert exc_info.value.retry_after == 7.0


class TestHelpers:
    def test_safe_url_hides_webhook_token(self) -> None:
        assert _http.safe_url(WEBHOOK_URL) == "https://discord.com/api/webhooks/123456/***"

    def test_safe_url_keeps_message_suffix(self) -> None:
        assert _http.safe_url(f"{WEBHOOK_URL}/messages/9") == "https://discord.com/api/webhooks/123456/***/messages/9"

    def test_new_session_applies_proxies(self) -> None:
        proxies = {"http": "http://h:1", "https": "http://h:1"}
        session = _http.new_session(proxies)
        assert session.proxies["https"] == "http://h:1"
