"""Shared test fixtures."""
from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from read_receipts.app import create_app
from read_receipts.application.exceptions import StoreError
from read_receipts.infrastructure.store.memory import InMemoryKeyValueStore

IDENTITY_HEADER = "Mattermost-User-ID"


def as_user(user_id: str) -> dict[str, str]:
    return {IDENTITY_HEADER: user_id}


@dataclass
class FailingKeyValueStore:
    """Store whose every call fails, as an unreachable backend would."""

    message: str = "store unavailable"
    calls: list[str] = field(default_factory=list)

    async def put(self, key: str, value: bytes) -> None:
        self.calls.append(f"put:{key}")
        raise StoreError(self.message)

    async def get(self, key: str) -> bytes | None:
        self.calls.append(f"get:{key}")
        raise StoreError(self.message)

    async def close(self) -> None:
        pass


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def client(store):
    app = create_app(store=store)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def failing_store() -> FailingKeyValueStore:
    return FailingKeyValueStore()


@pytest.fixture
def failing_client(failing_store):
    app = create_app(store=failing_store)
    return TestClient(app, raise_server_exceptions=False)
