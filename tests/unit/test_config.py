"""Tests for config loading, proxy parsing and the client factories."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from discord_rest.bot import BotClient
from discord_rest.client import build_bot_client, build_webhook_client
from discord_rest.webhook import WebhookClient
from tests.conftest import WEBHOOK_URL
from utils.config import DEFAULT_CONFIG, load_config, save_config
from utils.proxy import proxy_string_to_dict


class TestLoadConfig:
    def test_missing_file_is_created_and_exits(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"

        with patch("utils.config.time.sleep"), pytest.raises(SystemExit) as exc_info:
            load_config(str(path))

        assert exc_info.value.code == 1
        assert json.loads(path.read_text()) == DEFAULT_CONFIG

    def test_no_credentials_exits(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        save_config({"token": "", "webhook": ""}, str(path))

        with patch("utils.config.time.sleep"), pytest.raises(SystemExit):
            load_config(str(path))

    def test_defaults_fill_missing_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        save_config({"webhook": WEBHOOK_URL, "timeout": 5}, str(path))

        config = load_config(str(path))

        assert config["webhook"] == WEBHOOK_URL
        assert config["timeout"] == 5
        assert config["api_version"] == 10
        assert config["log_requests"] is True


class TestProxy:
    def test_host_port(self) -> None:
        assert proxy_string_to_dict("10.0.0.1:8080") == {
            "http": "http://10.0.0.1:8080",
            "https": "http://10.0.0.1:8080",
        }

    def test_with_credentials(self) -> None:
        proxies = proxy_string_to_dict("proxy.local:3128:user:pa:ss")
        assert proxies["https"] == "http://user:pa:ss@proxy.local:3128"

    @pytest.mark.parametrize("bad", ["", "host", "host:port", "a:1:b", "a:1::c"])
    def test_invalid(self, bad: str) -> None:
        with pytest.raises(ValueError):
            proxy_string_to_dict(bad)


class TestFactories:
    def test_webhook_client_from_config(self) -> None:
        config = {**DEFAULT_CONFIG, "webhook": WEBHOOK_URL, "timeout": 3, "max_retries": 2}

        client = build_webhook_client(config)

        assert isinstance(client, WebhookClient)
        assert client.url == WEBHOOK_URL
        assert client.timeout == 3.0
        assert client.max_retries == 2

    def test_bot_client_from_config(self) -> None:
        config = {
            **DEFAULT_CONFIG,
            "token": "T",
            "api_version": 9,
            "log_requests": False,
            "proxy": "h:1",
        }

        bot = build_bot_client(config)

        assert isinstance(bot, BotClient)
        assert bot.token == "T"
        assert bot.base_url == "https://discord.com/api/v9"
        assert bot.log_requests is False
        assert bot.session.proxies["http"] == "http://h:1"

    @pytest.mark.parametrize("value", ["false", 0, None])
    def test_log_requests_must_be_boolean(self, value: object) -> None:
        with pytest.raises(ValueError, match="log_requests"):
            build_bot_client({**DEFAULT_CONFIG, "token": "T", "log_requests": value})

    def test_log_requests_defaults_to_true(self) -> None:
        config = {key: value for key, value in DEFAULT_CONFIG.items() if key != "log_requests"}
        assert build_bot_client({**config, "token": "T"}).log_requests is True

    def test_missing_credential_raises(self) -> None:
        with pytest.raises(ValueError):
            build_bot_client({**DEFAULT_CONFIG, "webhook": WEBHOOK_URL})

    def test_loads_config_file_when_not_given(self) -> None:
        config = {**DEFAULT_CONFIG, "token": "T"}
        with patch("utils.config.load_config", return_value=config) as mock_load:
            bot = build_bot_client()
        mock_load.assert_called_once_with()
        assert bot.token == "T"
