"""Shared fixtures: in-memory stores, a deterministic clock, a test client."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from partnerhub.config import Settings
from partnerhub.main import create_app
from partnerhub.storage.backends import MemoryBackend
from partnerhub.storage.store import PrototypeStore
from partnerhub.storage.view import DatabaseView


class FlakyBackend(MemoryBackend):
    """MemoryBackend whose writes fail with OSError while fail_writes is set."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False

    def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError(28, "No space left on device")
        super().write(key, value)


class TickingClock:
    """Returns a new instant, one second later, on every call."""

    def __init__(self, start: datetime = datetime(2025, 7, 1, 8, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def flaky_backend():
    return FlakyBackend()


@pytest.fixture
def store(backend):
    return PrototypeStore(backend, key="test_db", clock=TickingClock())


@pytest.fixture
def seeded_store(store):
    store.seed()
    return store


@pytest.fixture
def seeded_db(seeded_store):
    return seeded_store.load()


@pytest.fixture
def view(store):
    v = DatabaseView(store).open()
    yield v
    v.close()


@pytest.fixture
def settings():
    return Settings(
        storage_backend="memory",
        data_dir=Path("."),
        storage_key="test_db",
        seed_on_start=True,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, prototype_store=store)
    with TestClient(app) as test_client:
        yield test_client
