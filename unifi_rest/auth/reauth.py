"""Login and the bounded reauthenticate-and-retry cycle.

Each logical call moves through at most two states:

- FIRST_ATTEMPT: the request is issued. If the result signals an expired
  session, the client logs in again and moves on.
- RETRIED_AFTER_REAUTH (terminal): the identical request is issued once more
  and its result is handed back as-is, whatever it reports.

A login failure aborts the cycle and surfaces as AuthenticationFailure.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable, TypeVar

from unifi_rest.errors import (
    ApiError,
    AuthenticationFailure,
    DecodeError,
    TransportError,
)
from unifi_rest.models.envelope import (
    SESSION_EXPIRED_MESSAGE,
    ApiErrorCondition,
    Envelope,
)
from unifi_rest.models.requests import Credentials, HttpMethod, RequestDescriptor
from unifi_rest.transport.executor import RequestExecutor

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

LOGIN_PATH = "api/login"


class AttemptState(str, Enum):
    """Position of a logical call in the reauthentication cycle."""

    FIRST_ATTEMPT = "first_attempt"
    RETRIED_AFTER_REAUTH = "retried_after_reauth"


class Authenticator:
    """Performs the controller login with the client's credentials."""

    def __init__(
        self,
        executor: RequestExecutor,
        credentials: Credentials,
        login_path: str = LOGIN_PATH,
    ) -> None:
        self._executor = executor
        self._credentials = credentials
        self._login_path = login_path

    async def authenticate(self) -> None:
        """Log in and store the fresh session cookies.

        Sent straight through the executor, so a login that itself reports an
        expired session can never start another reauth cycle.

        Raises
        ------
        AuthenticationFailure
            If the login request fails to reach the controller, returns a
            malformed body, or returns a non-ok envelope.
        """
        descriptor = RequestDescriptor(
            method=HttpMethod.POST,
            url=self._login_path,
            json_body=self._credentials.login_body(),
        )
        try:
            envelope = await self._executor.execute(descriptor)
        except (TransportError, DecodeError) as exc:
            logger.error("Login request failed: %s", exc)
            raise AuthenticationFailure(
                f"Authentication with the UniFi controller failed: {exc.message}"
            ) from exc

        if not envelope.metadata.is_ok:
            logger.error(
                "Login rejected by controller: %s",
                envelope.metadata.message,
                extra={"result_code": envelope.metadata.result_code},
            )
            raise AuthenticationFailure(
                "Authentication with the UniFi controller failed: "
                f"{envelope.metadata.message}",
                server_message=envelope.metadata.message,
            )

        logger.info("Authenticated as %s", self._credentials.username)


class ReauthenticationManager:
    """Wraps the executor with a single reauthenticate-and-retry cycle.

    Parameters
    ----------
    executor:
        Executor issuing the envelope requests.
    authenticator:
        Login performed when a session-expired result is observed.
    session_expired_message:
        Envelope ``msg`` value that marks an expired session.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        authenticator: Authenticator,
        session_expired_message: str = SESSION_EXPIRED_MESSAGE,
    ) -> None:
        self._executor = executor
        self._authenticator = authenticator
        self._session_expired_message = session_expired_message

    @property
    def authenticator(self) -> Authenticator:
        return self._authenticator

    async def run(
        self,
        attempt: Callable[[], Awaitable[R]],
        is_session_expired: Callable[[R], bool],
    ) -> R:
        """Run ``attempt``, reauthenticating and retrying it at most once."""
        state = AttemptState.FIRST_ATTEMPT
        while True:
            result = await attempt()
            if state is AttemptState.RETRIED_AFTER_REAUTH or not is_session_expired(result):
                return result

            logger.info("Session expired; reauthenticating", extra={"attempt": state.value})
            await self._authenticator.authenticate()
            state = AttemptState.RETRIED_AFTER_REAUTH

    def is_session_expired(self, envelope: Envelope) -> bool:
        condition = envelope.condition(self._session_expired_message)
        return condition is ApiErrorCondition.SESSION_EXPIRED

    async def execute(self, descriptor: RequestDescriptor, item_type: type[T] = dict) -> Envelope[T]:  # type: ignore[assignment]
        """Execute an envelope request with the bounded reauth cycle."""
        return await self.run(
            lambda: self._executor.execute(descriptor, item_type),
            self.is_session_expired,
        )


def unwrap_single(envelope: Envelope[T]) -> T | None:
    """Return the first item, raise on an error envelope, else None.

    Raises
    ------
    ApiError
        If ``data`` is empty and the result code is ``error``.
    """
    if envelope.data:
        return envelope.data[0]
    if envelope.metadata.is_error:
        raise ApiError(envelope.metadata.message, result_code=envelope.metadata.result_code)
    return None


def unwrap_many(envelope: Envelope[T]) -> list[T]:
    """Return all data items; error metadata is ignored."""
    return list(envelope.data)
