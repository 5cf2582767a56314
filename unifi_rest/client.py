"""UniFi controller REST client.

Composes the pipeline for one controller session:

    UniFiRestClient -> ReauthenticationManager -> RequestExecutor -> httpx
                    -> MultipartUploader (uploads)

Every request goes through the single reauthenticate-and-retry cycle. The
session cookies live in one SessionState owned by the client; concurrent
calls on the same client share it without locking.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from unifi_rest.auth.reauth import (
    LOGIN_PATH,
    Authenticator,
    ReauthenticationManager,
    unwrap_many,
    unwrap_single,
)
from unifi_rest.config.settings import UniFiSettings
from unifi_rest.logging_config import configure_logging
from unifi_rest.models.envelope import SESSION_EXPIRED_MESSAGE
from unifi_rest.models.requests import (
    Credentials,
    HttpMethod,
    RequestDescriptor,
    UploadRequest,
)
from unifi_rest.transport.executor import RequestExecutor
from unifi_rest.transport.session_state import SessionState
from unifi_rest.transport.upload import LOGIN_REDIRECT_MARKER, MultipartUploader

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_transport(settings: UniFiSettings) -> httpx.AsyncClient:
    """Build the HTTP client described by ``settings``."""
    if settings.ignore_ssl_validation:
        logger.warning("TLS certificate validation disabled for %s", settings.base_url)
    return httpx.AsyncClient(
        verify=not settings.ignore_ssl_validation,
        timeout=settings.request_timeout_seconds,
    )


class UniFiRestClient:
    """Session-authenticated client for a UniFi controller.

    Parameters
    ----------
    base_url:
        Controller base URL (e.g. "https://unifi.example.com:8443").
    credentials:
        Username and password used for every (re)authentication.
    transport:
        HTTP client to send requests with. When omitted a default
        ``httpx.AsyncClient`` is created and closed by :meth:`aclose`.
    session:
        Cookie state to start from (default: empty).
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials,
        transport: httpx.AsyncClient | None = None,
        session: SessionState | None = None,
        *,
        login_path: str = LOGIN_PATH,
        session_expired_message: str = SESSION_EXPIRED_MESSAGE,
        login_redirect_marker: str = LOGIN_REDIRECT_MARKER,
    ) -> None:
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else httpx.AsyncClient()
        self._session = session if session is not None else SessionState()
        self._executor = RequestExecutor(self._transport, base_url, self._session)
        self._authenticator = Authenticator(self._executor, credentials, login_path)
        self._reauth = ReauthenticationManager(
            self._executor, self._authenticator, session_expired_message
        )
        self._uploader = MultipartUploader(
            self._executor, self._reauth, login_redirect_marker
        )

    @classmethod
    def from_settings(
        cls, settings: UniFiSettings, *, configure_logs: bool = True
    ) -> UniFiRestClient:
        """Build a client, its transport and (optionally) its logging from settings.

        With ``configure_logs`` the ``unifi_rest`` loggers emit JSON at
        ``settings.log_level``. Pass False when the application configures
        logging itself.
        """
        if configure_logs:
            configure_logging(settings.log_level)
        client = cls(
            settings.base_url,
            settings.credentials(),
            build_transport(settings),
            login_path=settings.login_path,
            session_expired_message=settings.session_expired_message,
            login_redirect_marker=settings.login_redirect_marker,
        )
        client._owns_transport = True
        return client

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def base_url(self) -> str:
        return self._executor.base_url

    async def authenticate(self) -> None:
        """Log in explicitly (requests also log in on demand)."""
        await self._authenticator.authenticate()

    # -- envelope requests ---------------------------------------------------

    async def request(
        self,
        method: HttpMethod,
        url: str,
        json_body: Any = None,
        item_type: type[T] = dict,  # type: ignore[assignment]
    ) -> T | None:
        """Issue a request and return its single result object (or None)."""
        descriptor = RequestDescriptor(method=method, url=url, json_body=json_body)
        return unwrap_single(await self._reauth.execute(descriptor, item_type))

    async def request_many(
        self,
        method: HttpMethod,
        url: str,
        json_body: Any = None,
        item_type: type[T] = dict,  # type: ignore[assignment]
    ) -> list[T]:
        """Issue a request and return every result object."""
        descriptor = RequestDescriptor(method=method, url=url, json_body=json_body)
        return unwrap_many(await self._reauth.execute(descriptor, item_type))

    async def send(self, method: HttpMethod, url: str, json_body: Any = None) -> None:
        """Issue a request for its side effects; the response envelope is dropped."""
        descriptor = RequestDescriptor(method=method, url=url, json_body=json_body)
        await self._reauth.execute(descriptor)

    async def get(self, url: str, item_type: type[T] = dict) -> T | None:  # type: ignore[assignment]
        return await self.request(HttpMethod.GET, url, item_type=item_type)

    async def get_many(self, url: str, item_type: type[T] = dict) -> list[T]:  # type: ignore[assignment]
        return await self.request_many(HttpMethod.GET, url, item_type=item_type)

    async def post(self, url: str, json_body: Any, item_type: type[T] = dict) -> T | None:  # type: ignore[assignment]
        return await self.request(HttpMethod.POST, url, json_body, item_type)

    async def post_many(self, url: str, json_body: Any, item_type: type[T] = dict) -> list[T]:  # type: ignore[assignment]
        return await self.request_many(HttpMethod.POST, url, json_body, item_type)

    async def put(self, url: str, json_body: Any, item_type: type[T] = dict) -> T | None:  # type: ignore[assignment]
        return await self.request(HttpMethod.PUT, url, json_body, item_type)

    async def put_many(self, url: str, json_body: Any, item_type: type[T] = dict) -> list[T]:  # type: ignore[assignment]
        return await self.request_many(HttpMethod.PUT, url, json_body, item_type)

    async def delete(self, url: str) -> None:
        await self.send(HttpMethod.DELETE, url)

    # -- uploads -------------------------------------------------------------

    async def upload(
        self,
        url: str,
        name: str,
        file_name: str,
        content_type: str,
        data: bytes,
    ) -> None:
        """Upload a file as multipart form data (e.g. .ogg sounds for EDU APs)."""
        await self._uploader.upload(
            UploadRequest(
                url=url,
                field_name=name,
                file_name=file_name,
                content_type=content_type,
                data=data,
            )
        )

    # -- lifecycle -----------------------------------------------------------

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> UniFiRestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
