"""Single-request executor for envelope endpoints.

Builds one HTTP request from a RequestDescriptor, attaches the session headers
(``Referrer``, cookies and, when available, ``X-Csrf-Token``), sends it through
the injected ``httpx.AsyncClient`` with redirect following enabled, records
response cookies and decodes the envelope. No retries happen at this layer.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx

from unifi_rest.errors import TransportError
from unifi_rest.models.envelope import Envelope
from unifi_rest.models.requests import RequestDescriptor
from unifi_rest.transport.codec import decode_envelope, encode_body
from unifi_rest.transport.session_state import CSRF_HEADER, SessionState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestExecutor:
    """Issues envelope requests against one controller base URL.

    Parameters
    ----------
    transport:
        The HTTP client used to send requests (TLS policy and timeouts are
        configured on it by the caller).
    base_url:
        Controller base URL, e.g. "https://unifi.example.com:8443".
    session:
        Session cookie state shared by every request of one client.
    """

    def __init__(
        self,
        transport: httpx.AsyncClient,
        base_url: str,
        session: SessionState,
    ) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._host = httpx.URL(self._base_url).host
        self._session = session

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> SessionState:
        return self._session

    def url_for(self, path: str) -> str:
        """Resolve a controller-relative path against the base URL."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def session_headers(self) -> dict[str, str]:
        """Headers attached to every request: referrer plus CSRF when known."""
        headers = {"Referrer": self._base_url}
        if self._session.has_cookies(self._host):
            token = self._session.csrf_token(self._host)
            if token is not None:
                headers[CSRF_HEADER] = token
        return headers

    async def send(self, request: httpx.Request, *, follow_redirects: bool) -> httpx.Response:
        """Send a prepared request and record its cookies.

        Raises
        ------
        TransportError
            If no response was received (connection refused, timeout, ...).
        """
        self._session.apply(request)
        try:
            response = await self._transport.send(request, follow_redirects=follow_redirects)
        except httpx.RequestError as exc:
            logger.warning(
                "Transport failure for %s %s: %s",
                request.method,
                request.url,
                exc,
                extra={"method": request.method, "url": str(request.url)},
            )
            raise TransportError(f"Could not reach {request.url}: {exc}") from exc

        # Redirect hops may set cookies too; httpx keeps them in response.history.
        for hop in (*response.history, response):
            self._session.observe(hop)
        logger.debug(
            "%s %s -> %d",
            request.method,
            request.url,
            response.status_code,
            extra={
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
            },
        )
        return response

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        headers = self.session_headers()
        content: bytes | None = None
        if descriptor.method.carries_body and descriptor.json_body is not None:
            content = encode_body(descriptor.json_body)
            headers["Content-Type"] = "application/json"
        return httpx.Request(
            descriptor.method.value,
            self.url_for(descriptor.url),
            headers=headers,
            content=content,
        )

    async def execute(self, descriptor: RequestDescriptor, item_type: type[T] = dict) -> Envelope[T]:  # type: ignore[assignment]
        """Send one request and decode its envelope."""
        request = self.build_request(descriptor)
        response = await self.send(request, follow_redirects=True)
        return decode_envelope(response.content, item_type)

    async def execute_discarding(self, descriptor: RequestDescriptor) -> None:
        """Send one request for its side effects; the envelope is decoded and dropped."""
        await self.execute(descriptor)
