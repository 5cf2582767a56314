"""Unit tests for SessionState cookie handling and CSRF token lookup."""

from __future__ import annotations

import httpx

from unifi_rest.transport.session_state import SessionState

BASE_URL = "https://unifi.example.com:8443"
HOST = "unifi.example.com"


def _response(*set_cookies: str, url: str = f"{BASE_URL}/api/login") -> httpx.Response:
    return httpx.Response(
        200,
        headers=[("set-cookie", value) for value in set_cookies],
        request=httpx.Request("POST", url),
    )


class TestObserve:
    def test_starts_empty(self):
        state = SessionState()
        assert not state.has_cookies(HOST)
        assert state.csrf_token(HOST) is None

    def test_stores_set_cookie_headers(self):
        state = SessionState()
        state.observe(_response("unifises=abc; Path=/", "csrf_token=tok123; Path=/"))

        assert state.has_cookies(HOST)
        assert state.cookies.get("unifises") == "abc"
        assert state.csrf_token(HOST) == "tok123"

    def test_later_cookie_replaces_earlier(self):
        state = SessionState()
        state.observe(_response("csrf_token=old; Path=/"))
        state.observe(_response("csrf_token=new; Path=/"))
        assert state.csrf_token(HOST) == "new"

    def test_response_without_cookies_keeps_jar(self):
        state = SessionState()
        state.observe(_response("unifises=abc; Path=/"))
        state.observe(_response())
        assert state.cookies.get("unifises") == "abc"


class TestCsrfToken:
    def test_absent_csrf_cookie_returns_none(self):
        state = SessionState()
        state.observe(_response("unifises=abc; Path=/"))
        assert state.has_cookies(HOST)
        assert state.csrf_token(HOST) is None

    def test_other_host_does_not_see_token(self):
        state = SessionState()
        state.observe(_response("csrf_token=tok; Path=/"))
        assert state.csrf_token("other.example.org") is None
        assert not state.has_cookies("other.example.org")

    def test_domain_cookie_visible_to_subdomain(self):
        state = SessionState()
        state.observe(_response("csrf_token=tok; Domain=example.com; Path=/"))
        assert state.csrf_token(HOST) == "tok"

    def test_host_lookup_is_case_insensitive(self):
        state = SessionState()
        state.observe(_response("csrf_token=tok; Path=/"))
        assert state.csrf_token("UniFi.Example.com") == "tok"

    def test_ip_address_host(self):
        state = SessionState()
        state.observe(_response("csrf_token=tok; Path=/", url="https://192.168.1.1:8443/api/login"))
        assert state.csrf_token("192.168.1.1") == "tok"


class TestApply:
    def test_writes_cookie_header(self):
        state = SessionState()
        state.observe(_response("unifises=abc; Path=/"))
        request = httpx.Request("GET", f"{BASE_URL}/api/self")

        state.apply(request)

        assert request.headers["cookie"] == "unifises=abc"

    def test_no_cookie_header_when_empty(self):
        request = httpx.Request("GET", f"{BASE_URL}/api/self")
        SessionState().apply(request)
        assert "cookie" not in request.headers

    def test_shares_given_jar(self):
        jar = httpx.Cookies()
        state = SessionState(jar)
        state.observe(_response("unifises=abc; Path=/"))
        assert jar.get("unifises") == "abc"
