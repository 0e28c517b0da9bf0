"""Unit tests for settings and the client factory."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from incident_sms.config import Settings
from incident_sms.services.factory import create_client
from incident_sms.transport import IHttpTransport


class TestSettings:
    """Test cases for Settings."""

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("SMS_API_BASE_URI", " https://sms.test.com/ ")
        monkeypatch.setenv("SMS_API_USERNAME", "user")
        monkeypatch.setenv("SMS_RETRY_ATTEMPTS", "5")
        monkeypatch.setenv("SMS_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.api_base_uri == "https://sms.test.com/"
        assert settings.api_username == "user"
        assert settings.retry_attempts == 5
        assert settings.log_level == "DEBUG"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SMS_RETRY_ATTEMPTS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.retry_attempts == 3
        assert settings.request_timeout == 30.0
        assert settings.api_access_token is None

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_negative_retry_attempts(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, retry_attempts=-1)


class TestCreateClient:
    """Test cases for create_client."""

    def test_builds_client_from_settings(self):
        settings = Settings(
            _env_file=None,
            api_base_uri="https://sms.test.com/",
            api_username="user",
            api_password="secret",
            api_access_token="access",
            api_refresh_token="refresh",
            retry_attempts=2,
        )
        transport = MagicMock(spec=IHttpTransport)

        client = create_client(settings, transport=transport)

        assert client.config.base_uri == "https://sms.test.com/"
        assert client.config.retry_attempts == 2
        assert client.credentials.username == "user"
        assert client.credentials.password == "secret"
        assert client.token_state.access_token == "access"
        assert client.token_state.refresh_token == "refresh"

    def test_each_call_returns_a_new_client(self):
        settings = Settings(_env_file=None, api_base_uri="https://sms.test.com/")
        transport = MagicMock(spec=IHttpTransport)

        assert create_client(settings, transport) is not create_client(settings, transport)

    def test_missing_base_uri(self):
        with pytest.raises(ValueError):
            create_client(Settings(_env_file=None, api_base_uri=""), transport=MagicMock(spec=IHttpTransport))
