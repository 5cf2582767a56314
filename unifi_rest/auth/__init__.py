"""Authentication and session-expiry handling."""

from unifi_rest.auth.reauth import (
    LOGIN_PATH,
    AttemptState,
    Authenticator,
    ReauthenticationManager,
    unwrap_many,
    unwrap_single,
)

__all__ = [
    "AttemptState",
    "Authenticator",
    "LOGIN_PATH",
    "ReauthenticationManager",
    "unwrap_many",
    "unwrap_single",
]
