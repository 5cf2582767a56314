"""Configuration module: client settings."""

from unifi_rest.config.settings import UniFiSettings

__all__ = [
    "UniFiSettings",
]
