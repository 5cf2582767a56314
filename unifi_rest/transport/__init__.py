"""Transport layer: envelope codec, session cookies, request execution, uploads."""

from unifi_rest.transport.codec import decode_envelope, encode_body
from unifi_rest.transport.executor import RequestExecutor
from unifi_rest.transport.session_state import CSRF_COOKIE, CSRF_HEADER, SessionState
from unifi_rest.transport.upload import LOGIN_REDIRECT_MARKER, MultipartUploader

__all__ = [
    "CSRF_COOKIE",
    "CSRF_HEADER",
    "LOGIN_REDIRECT_MARKER",
    "MultipartUploader",
    "RequestExecutor",
    "SessionState",
    "decode_envelope",
    "encode_body",
]
