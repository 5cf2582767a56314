"""unifi-rest: session-authenticated REST pipeline for UniFi controllers."""

from __future__ import annotations

from unifi_rest.client import UniFiRestClient, build_transport
from unifi_rest.config.settings import UniFiSettings
from unifi_rest.errors import (
    ApiError,
    AuthenticationFailure,
    DecodeError,
    TransportError,
    UniFiError,
    UploadError,
)
from unifi_rest.models import (
    ApiErrorCondition,
    Credentials,
    Envelope,
    HttpMethod,
    Metadata,
    RequestDescriptor,
    UploadRequest,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "UniFiRestClient",
    "UniFiSettings",
    "build_transport",
    # Models
    "ApiErrorCondition",
    "Credentials",
    "Envelope",
    "HttpMethod",
    "Metadata",
    "RequestDescriptor",
    "UploadRequest",
    # Errors
    "ApiError",
    "AuthenticationFailure",
    "DecodeError",
    "TransportError",
    "UniFiError",
    "UploadError",
]
