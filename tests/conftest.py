import os
import time
import uuid
from datetime import datetime, timedelta, timezone

# Settings are read at import time
os.environ["APP_ENV"] = "testing"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SERVICE_AUTH_SECRET"] = "test-secret"
os.environ["SERVICE_AUTH_ISSUER"] = "your_service_name"
os.environ["SERVICE_AUTH_AUDIENCE"] = "your_service_audience"

import jwt
import pytest
from fastapi.testclient import TestClient

from chatcore.application.services.chat_facade import ChatFacade
from chatcore.config.settings import Config
from chatcore.domain.value_objects import UserId
from chatcore.fastapi_app import create_fastapi_app
from chatcore.infrastructure.persistence.memory import (
    InMemoryBookmarkRepository,
    InMemoryChatStore,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
    InMemoryReactionRepository,
)
from chatcore.setup.ioc import create_container


class StepClock:
    """Deterministic clock: every reading is one second after the last."""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        self.now = self.now + timedelta(seconds=1)
        return self.now


def new_user_id() -> UserId:
    return UserId(str(uuid.uuid4()))


def build_facade(store: InMemoryChatStore, **limits) -> ChatFacade:
    return ChatFacade(
        InMemoryConversationRepository(store),
        InMemoryParticipantRepository(store),
        InMemoryMessageRepository(store),
        InMemoryReactionRepository(store),
        InMemoryBookmarkRepository(store),
        **limits,
    )


def service_token(user_id: str, expires_in: int = 300) -> str:
    now = int(time.time())
    return jwt.encode(
        {
            "sub": user_id,
            "iat": now,
            "exp": now + expires_in,
            "iss": Config.SERVICE_AUTH_ISSUER,
            "aud": Config.SERVICE_AUTH_AUDIENCE,
        },
        Config.SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )


@pytest.fixture()
def clock():
    return StepClock()


@pytest.fixture()
def store(clock):
    return InMemoryChatStore(clock=clock)


@pytest.fixture()
def facade(store):
    return build_facade(store)


@pytest.fixture()
def alice():
    return new_user_id()


@pytest.fixture()
def bob():
    return new_user_id()


@pytest.fixture()
def carol():
    return new_user_id()


@pytest.fixture()
def app(store):
    """FastAPI app over the test's in-memory store."""
    return create_fastapi_app(create_container("memory", store=store))


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Build Authorization headers for a given user."""

    def _headers(user_id: UserId) -> dict:
        return {"Authorization": f"Bearer {service_token(user_id.value)}"}

    return _headers
