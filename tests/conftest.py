"""Shared fixtures for SDK tests.

Clients are built against `httpx.MockTransport`, so client tests exercise
the full runtime pipeline without network access.
"""

from typing import Callable
from unittest.mock import patch

import pytest
import structlog

from cumulus.runtime.clock import reset_clock_offsets
from cumulus.runtime.credentials import BasicAWSCredentials, SessionAWSCredentials
from tests.fixtures.transport import RecordingTransport, Reply

ACCESS_KEY = "AKIDEXAMPLE"
SECRET_KEY = "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY"


@pytest.fixture
def credentials():
    """Static credentials used by client fixtures."""
    return BasicAWSCredentials(ACCESS_KEY, SECRET_KEY)


@pytest.fixture
def session_credentials():
    """Temporary credentials carrying a session token."""
    return SessionAWSCredentials(ACCESS_KEY, SECRET_KEY, "session-token")


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory fixture for a recording transport replaying canned replies."""

    def _factory(*replies: Reply) -> RecordingTransport:
        return RecordingTransport(list(replies))

    return _factory


@pytest.fixture
def make_client(credentials):
    """Factory fixture building a service client wired to a transport."""

    def _factory(client_class, transport: RecordingTransport, **kwargs):
        kwargs.setdefault("region", "us-east-1")
        return client_class(
            kwargs.pop("credentials", credentials),
            http_client=transport.sync_client(),
            async_http_client=transport.async_client(),
            **kwargs,
        )

    return _factory


@pytest.fixture
def no_sleep():
    """Skip retry back-off sleeps; yields the patched `time.sleep`."""
    with patch("cumulus.runtime.retry.time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture(autouse=True)
def reset_runtime_state():
    """Clear clock offsets and bound log context between tests."""
    reset_clock_offsets()
    structlog.contextvars.clear_contextvars()
    yield
    reset_clock_offsets()
    structlog.contextvars.clear_contextvars()
