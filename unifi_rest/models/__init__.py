"""Public models for the UniFi REST pipeline."""

from unifi_rest.models.envelope import (
    SESSION_EXPIRED_MESSAGE,
    ApiErrorCondition,
    Envelope,
    Metadata,
)
from unifi_rest.models.requests import (
    Credentials,
    HttpMethod,
    RequestDescriptor,
    UploadRequest,
)

__all__ = [
    "ApiErrorCondition",
    "Credentials",
    "Envelope",
    "HttpMethod",
    "Metadata",
    "RequestDescriptor",
    "SESSION_EXPIRED_MESSAGE",
    "UploadRequest",
]
