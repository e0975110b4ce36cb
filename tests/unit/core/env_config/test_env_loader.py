"""Тесты загрузки конфигурации из окружения."""

import os

import pytest
from pydantic import ValidationError

from api_connector import HttpxSender, RequestsSender
from api_connector.core.env_config import (
    ConnectorSettings,
    OAuthSettings,
    load_from_env,
    load_oauth_config_from_env,
    load_sender_from_env,
)
from api_connector.core.logging import LogFormat, LogLevel


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Работать в пустой директории без унаследованных API_CONNECTOR_* переменных."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("API_CONNECTOR_"):
            monkeypatch.delenv(key)


class TestConnectorSettings:
    def test_defaults(self):
        settings = ConnectorSettings()

        assert settings.sender == "requests"
        assert settings.timeout_connect == 10.0
        assert settings.timeout_read == 30.0
        assert settings.verify_ssl is True
        assert settings.log_enabled is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_SENDER", "HTTPX")
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_READ", "90")
        monkeypatch.setenv("API_CONNECTOR_LOG_LEVEL", "debug")

        settings = ConnectorSettings()

        assert settings.sender == "httpx"
        assert settings.timeout_read == 90.0
        assert settings.log_level == "DEBUG"

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_CONNECT", "0")

        with pytest.raises(ValidationError):
            ConnectorSettings()

    def test_invalid_sender(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_SENDER", "curl")

        with pytest.raises(ValidationError):
            ConnectorSettings()


class TestLoadFromEnv:
    def test_sender_config(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_CONNECT", "3")
        monkeypatch.setenv("API_CONNECTOR_VERIFY_SSL", "false")

        config = load_from_env()

        assert config.timeout.as_tuple() == (3.0, 30.0)
        assert config.verify_ssl is False
        assert config.logging is None

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text(
            "API_CONNECTOR_TIMEOUT_READ=120\n"
            "API_CONNECTOR_LOG_ENABLED=true\n"
            "API_CONNECTOR_LOG_FORMAT=json\n"
            "API_CONNECTOR_LOG_ENABLE_CONSOLE=false\n"
        )

        config = load_from_env(env_file=str(env_file))

        assert config.timeout.read == 120.0
        assert config.logging is not None
        assert config.logging.format == LogFormat.JSON
        assert config.logging.level == LogLevel.INFO
        assert config.logging.enable_console is False

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_READ", "90")

        config = load_from_env(timeout_read=5, allow_redirects=False)

        assert config.timeout.read == 5
        assert config.allow_redirects is False


class TestLoadSenderFromEnv:
    def test_default_requests(self):
        sender = load_sender_from_env()

        assert isinstance(sender, RequestsSender)
        sender.close()

    def test_httpx_from_env(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_SENDER", "httpx")
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_READ", "45")

        sender = load_sender_from_env()

        assert isinstance(sender, HttpxSender)
        assert sender.config.timeout.read == 45.0
        sender.close()

    def test_override_sender(self):
        sender = load_sender_from_env(sender="httpx")

        assert isinstance(sender, HttpxSender)
        sender.close()

    def test_unknown_sender_override(self):
        with pytest.raises(ValueError, match="Unknown sender"):
            load_sender_from_env(sender="curl")


class TestOAuthSettings:
    def test_load_oauth_config(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_OAUTH_CLIENT_ID", "client-id")
        monkeypatch.setenv("API_CONNECTOR_OAUTH_CLIENT_SECRET", "client-secret")
        monkeypatch.setenv("API_CONNECTOR_OAUTH_REDIRECT_URI", "https://app.example.com/callback")
        monkeypatch.setenv("API_CONNECTOR_OAUTH_DEFAULT_SCOPES", "read, write,,admin")

        config = load_oauth_config_from_env()

        assert config.client_id == "client-id"
        assert config.redirect_uri == "https://app.example.com/callback"
        assert config.default_scopes == ["read", "write", "admin"]
        assert config.validate() is True

    def test_overrides(self):
        config = load_oauth_config_from_env(client_id="override", token_endpoint="oauth/token")

        assert config.client_id == "override"
        assert config.token_endpoint == "oauth/token"

    def test_relative_redirect_uri_rejected(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_OAUTH_REDIRECT_URI", "/callback")

        with pytest.raises(ValidationError):
            OAuthSettings()
