import pytest
from fastapi.testclient import TestClient

from config import load_settings
from main import create_app


class RecordingTransport:
    """Mail transport double that keeps every mail it is asked to send."""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send(self, mail):
        self.sent.append(mail)
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings():
    return load_settings(
        EMAIL_USER="relay@gmail.com",
        EMAIL_PASS="app-password",
        EMAIL_TO="owner@example.com",
        _env_file=None,
    )


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    return RecordingTransport(error=ConnectionRefusedError("smtp auth rejected for relay@gmail.com"))


@pytest.fixture
def client(settings, transport):
    return TestClient(create_app(settings=settings, transport=transport))


@pytest.fixture
def failing_client(settings, failing_transport):
    return TestClient(create_app(settings=settings, transport=failing_transport))
