"""Shared fixtures: a throwaway SQLite database and in-memory event observers."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "warehouse_inventory_tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["SEED_DEFAULT_USERS"] = "false"
os.environ["ADMIN_PASSWORD"] = "admin123"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fastapi.testclient import TestClient  # noqa: E402

from app.infrastructure.database import Base, SessionLocal, engine  # noqa: E402
from app.infrastructure.realtime import ClientSession  # noqa: E402


class FakeTransport:
    """In-memory transport recording what was written to it."""

    def __init__(self, *, fail_with: Exception | None = None) -> None:
        self.sent: list[str] = []
        self.open = True
        self.fail_with = fail_with

    @property
    def is_open(self) -> bool:
        return self.open

    async def send_text(self, message: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(message)


class RecordingPublisher:
    """Publisher keeping every event instead of broadcasting it."""

    def __init__(self) -> None:
        self.events = []

    def publish(self, event) -> None:
        self.events.append(event)


class Observer:
    """A registered session nobody drains, used to inspect broadcasts."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    def messages(self) -> list[dict]:
        return [json.loads(message) for message in self.session.pending()]

    def types(self) -> list[str]:
        return [message["type"] for message in self.messages()]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def reset_database():
    """Start every test from empty tables."""

    from app.infrastructure import models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(reset_database):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(reset_database):
    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broadcaster(client):
    return client.app.state.broadcaster


@pytest.fixture
def observe(broadcaster):
    """Return a factory registering an :class:`Observer` on the app's broadcaster."""

    def _observe() -> Observer:
        return Observer(broadcaster.open_session(FakeTransport()))

    return _observe


@pytest.fixture
def fake_transport():
    return FakeTransport


@pytest.fixture
def recording_publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def user(client) -> dict:
    response = client.post(
        "/api/users", json={"name": "Anna Andersson", "password": "hemligt1"}
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def article(client) -> dict:
    response = client.post(
        "/api/articles",
        json={
            "articleNumber": "ART-1",
            "description": "Regel 45x95",
            "length": "4.5",
            "location": "A1",
        },
    )
    assert response.status_code == 201
    return response.json()
