"""Per-client session cookie jar and CSRF token derivation.

The controller keeps the session in cookies and expects the ``csrf_token``
cookie echoed back in the ``X-Csrf-Token`` header. One SessionState is owned
by one client; it is updated after every response and never cleared. There is
no locking: concurrent calls on one client see last-writer-wins cookie state.
"""

from __future__ import annotations

import logging
from http.cookiejar import Cookie

import httpx

logger = logging.getLogger(__name__)

CSRF_COOKIE = "csrf_token"
CSRF_HEADER = "X-Csrf-Token"


def _visible_to(cookie: Cookie, host: str) -> bool:
    """Whether a stored cookie would be sent to ``host``."""
    domain = cookie.domain.lstrip(".").lower()
    host = host.lower()
    # cookiejar stores dotless hosts as "<host>.local"
    return host == domain or f"{host}.local" == domain or host.endswith(f".{domain}")


class SessionState:
    """Cookie jar plus CSRF token lookup for a single controller session."""

    def __init__(self, cookies: httpx.Cookies | None = None) -> None:
        self._cookies = cookies if cookies is not None else httpx.Cookies()

    @property
    def cookies(self) -> httpx.Cookies:
        return self._cookies

    def observe(self, response: httpx.Response) -> None:
        """Store any ``Set-Cookie`` headers carried by ``response``."""
        if "set-cookie" in response.headers:
            self._cookies.extract_cookies(response)
            logger.debug("Session cookies updated from %s", response.request.url)

    def apply(self, request: httpx.Request) -> None:
        """Write the jar's ``Cookie`` header onto an outgoing request."""
        self._cookies.set_cookie_header(request)

    def has_cookies(self, host: str) -> bool:
        return any(_visible_to(cookie, host) for cookie in self._cookies.jar)

    def csrf_token(self, host: str) -> str | None:
        """Return the ``csrf_token`` cookie value for ``host``, or None."""
        for cookie in self._cookies.jar:
            if cookie.name == CSRF_COOKIE and _visible_to(cookie, host):
                return cookie.value
        return None
