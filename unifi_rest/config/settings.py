"""Pydantic Settings for the UniFi REST client.

All environment variables use the UNIFI_ prefix.
Example: UNIFI_BASE_URL=https://unifi.example.com:8443, UNIFI_USERNAME=admin
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from unifi_rest.models.requests import Credentials


class UniFiSettings(BaseSettings):
    """UniFi client configuration validated from environment variables."""

    # Controller
    base_url: str = Field(..., min_length=1)  # e.g. "https://unifi.example.com:8443"
    username: str = Field(..., min_length=1)
    password: str
    ignore_ssl_validation: bool = False  # Controllers usually ship self-signed certs

    # Transport
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = "INFO"

    # Controller protocol
    login_path: str = "api/login"
    session_expired_message: str = "api.err.LoginRequired"
    login_redirect_marker: str = "/manage/account/login?redirect"

    model_config = {"env_prefix": "UNIFI_"}

    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)
