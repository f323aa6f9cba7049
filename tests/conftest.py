import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fastapi.testclient import TestClient

from message_service.domain.entities import message as message_module
from message_service.fastapi_app import create_fastapi_app
from message_service.infrastructure.persistence import InMemoryMessageRepository
from message_service.setup.ioc import create_container


class FakeClock:
    """Deterministic replacement for the entity clock; every call advances it."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture()
def clock(monkeypatch):
    """Patch the entity clock so successive timestamps are strictly increasing."""
    fake = FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
    monkeypatch.setattr(message_module, "_utcnow", fake)
    return fake


@pytest.fixture()
def repository():
    return InMemoryMessageRepository()


@pytest.fixture()
def app(repository):
    """A FastAPI app wired to the in-memory repository of this test."""
    return create_fastapi_app(create_container(repository=repository))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs lifespan startup/shutdown)."""
    with TestClient(app) as test_client:
        yield test_client
