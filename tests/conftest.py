"""
Common pytest configuration and fixtures.
This file is automatically loaded by pytest.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from voice_dictation.domain import (
    MessageResponse,
    Organization,
    RecorderStartResult,
    TranscriptionResponse,
    UserInfo,
)
from voice_dictation.infrastructure.interfaces import (
    AccountClient,
    AuthProvider,
    MessageHost,
    RecorderBackend,
    TaskHost,
    TelemetrySink,
)


@pytest.fixture
def signed_in_user():
    """Return a signed-in user with one inactive and one active organization."""
    return UserInfo(
        uid="user-123",
        email="dev@example.com",
        organizations=[
            Organization(id="org-1", active=False),
            Organization(id="org-2", active=True),
        ],
    )


@pytest.fixture
def auth(signed_in_user):
    """Return an auth provider reporting a signed-in user."""
    provider = MagicMock(spec=AuthProvider)
    provider.get_info.return_value = signed_in_user
    provider.create_auth_request = AsyncMock()
    return provider


@pytest.fixture
def recorder():
    """Return a recorder backend that starts successfully."""
    backend = MagicMock(spec=RecorderBackend)
    backend.start_recording = AsyncMock(return_value=RecorderStartResult(success=True))
    return backend


@pytest.fixture
def message_host():
    """Return a message host where the user dismisses every dialog."""
    host = MagicMock(spec=MessageHost)
    host.show_message = AsyncMock(return_value=MessageResponse())
    return host


@pytest.fixture
def task_host():
    """Return a task host with an open task."""
    host = MagicMock(spec=TaskHost)
    host.current_task_id = "task-42"
    host.init_task = AsyncMock()
    return host


@pytest.fixture
def telemetry():
    """Return a telemetry sink recording its calls."""
    return MagicMock(spec=TelemetrySink)


@pytest.fixture
def account(signed_in_user):
    """Return an account client that transcribes successfully."""
    client = MagicMock(spec=AccountClient)
    client.fetch_me = AsyncMock(return_value=signed_in_user)
    client.transcribe_audio = AsyncMock(
        return_value=TranscriptionResponse(text="hello world")
    )
    return client
