"""Error hierarchy for the UniFi REST pipeline.

All pipeline errors extend UniFiError. Session expiry is never raised: it is
detected from the envelope (or an upload redirect) and handled by the single
reauthenticate-and-retry cycle in ``unifi_rest.auth.reauth``.
"""

from __future__ import annotations


class UniFiError(Exception):
    """Base error for all UniFi pipeline errors."""

    message: str = "UniFi request failed"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(UniFiError):
    """The controller could not be reached (no HTTP response)."""

    message = "Could not reach the UniFi controller"


class DecodeError(UniFiError):
    """The response body is not a well-formed envelope."""

    message = "Malformed response envelope"

    def __init__(self, message: str | None = None, raw_body: bytes = b"", **kwargs: object) -> None:
        super().__init__(message, **kwargs)
        self.raw_body = raw_body


class ApiError(UniFiError):
    """The envelope reported an error result code."""

    message = "UniFi API returned an error"

    def __init__(self, server_message: str = "", **kwargs: object) -> None:
        self.server_message = server_message
        super().__init__(f"UniFi API returned an error: {server_message}", **kwargs)


class UploadError(ApiError):
    """A file upload finished with an unexpected HTTP status."""

    message = "Upload failed"

    def __init__(self, status_code: int, **kwargs: object) -> None:
        self.status_code = status_code
        # No envelope on upload responses, so there is no server message.
        self.server_message = ""
        UniFiError.__init__(self, f"Upload failed with HTTP {status_code}", **kwargs)


class AuthenticationFailure(UniFiError):
    """The login call itself failed."""

    message = "Authentication with the UniFi controller failed"
