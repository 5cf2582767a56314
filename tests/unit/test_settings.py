"""Unit tests for UniFiSettings."""

import pytest

from unifi_rest.config.settings import UniFiSettings
from unifi_rest.models.requests import Credentials

_REQUIRED_ENV = {
    "UNIFI_BASE_URL": "https://unifi.example.com:8443",
    "UNIFI_USERNAME": "admin",
    "UNIFI_PASSWORD": "secret",
}


class TestUniFiSettings:
    def test_loads_with_required_env_vars(self, monkeypatch: pytest.MonkeyPatch):
        for k, v in _REQUIRED_ENV.items():
            monkeypatch.setenv(k, v)

        settings = UniFiSettings()

        assert settings.base_url == "https://unifi.example.com:8443"
        assert settings.username == "admin"
        assert settings.password == "secret"

    def test_defaults_are_correct(self, monkeypatch: pytest.MonkeyPatch):
        for k, v in _REQUIRED_ENV.items():
            monkeypatch.setenv(k, v)

        settings = UniFiSettings()

        assert settings.ignore_ssl_validation is False
        assert settings.request_timeout_seconds == 30.0
        assert settings.log_level == "INFO"
        assert settings.login_path == "api/login"
        assert settings.session_expired_message == "api.err.LoginRequired"
        assert settings.login_redirect_marker == "/manage/account/login?redirect"

    def test_env_prefix_is_unifi(self, monkeypatch: pytest.MonkeyPatch):
        for k, v in _REQUIRED_ENV.items():
            monkeypatch.setenv(k, v)
        monkeypatch.setenv("UNIFI_IGNORE_SSL_VALIDATION", "true")
        monkeypatch.setenv("UNIFI_REQUEST_TIMEOUT_SECONDS", "12.5")

        settings = UniFiSettings()
        assert settings.ignore_ssl_validation is True
        assert settings.request_timeout_seconds == 12.5

    def test_missing_required_field_raises(self, monkeypatch: pytest.MonkeyPatch):
        # Clear any existing env vars that might satisfy requirements
        for k in _REQUIRED_ENV:
            monkeypatch.delenv(k, raising=False)

        with pytest.raises(Exception):
            UniFiSettings()

    def test_timeout_must_be_positive(self, monkeypatch: pytest.MonkeyPatch):
        for k, v in _REQUIRED_ENV.items():
            monkeypatch.setenv(k, v)
        monkeypatch.setenv("UNIFI_REQUEST_TIMEOUT_SECONDS", "0")

        with pytest.raises(Exception):
            UniFiSettings()

    def test_credentials(self, monkeypatch: pytest.MonkeyPatch):
        for k, v in _REQUIRED_ENV.items():
            monkeypatch.setenv(k, v)

        assert UniFiSettings().credentials() == Credentials(username="admin", password="secret")
