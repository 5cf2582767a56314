"""Shared test fixtures for the unifi-rest test suite."""

from __future__ import annotations

import logging
import os

import httpx
import pytest

from tests.stubs import BASE_URL, ControllerStub
from unifi_rest.client import UniFiRestClient
from unifi_rest.config.settings import UniFiSettings
from unifi_rest.models.requests import Credentials
from unifi_rest.transport.executor import RequestExecutor
from unifi_rest.transport.session_state import SessionState


# ---------------------------------------------------------------------------
# Ensure required env vars are set for UniFiSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so UniFiSettings can be instantiated in tests."""
    defaults = {
        "UNIFI_BASE_URL": BASE_URL,
        "UNIFI_USERNAME": "admin",
        "UNIFI_PASSWORD": "test-password",
    }
    for key, value in defaults.items():
        if key not in os.environ:
            monkeypatch.setenv(key, value)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> UniFiSettings:
    """Test settings with safe defaults."""
    return UniFiSettings(
        base_url=BASE_URL,
        username="admin",
        password="test-password",
        ignore_ssl_validation=True,
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="admin", password="test-password")


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def controller() -> ControllerStub:
    return ControllerStub()


@pytest.fixture
def transport(controller: ControllerStub) -> httpx.AsyncClient:
    return controller.transport()


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def executor(transport: httpx.AsyncClient, session: SessionState) -> RequestExecutor:
    return RequestExecutor(transport, BASE_URL, session)


@pytest.fixture
def client(
    transport: httpx.AsyncClient, session: SessionState, credentials: Credentials
) -> UniFiRestClient:
    return UniFiRestClient(BASE_URL, credentials, transport, session)


# ---------------------------------------------------------------------------
# Package logger isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo logging configuration installed by a test."""
    package_logger = logging.getLogger("unifi_rest")
    handlers, level, propagate = (
        package_logger.handlers[:], package_logger.level, package_logger.propagate
    )
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
