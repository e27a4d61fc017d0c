"""Shared pytest fixtures.

Tests run against the in-memory repository unless a test builds its own
adapter. Settings and the DI container are reset around every test so
environment changes never leak between tests.
"""

from datetime import UTC, datetime

import pytest

from webinars.core.config import reset_settings
from webinars.di.container import reset_container
from webinars.domain.models.user import User
from webinars.domain.models.webinar import Webinar
from webinars.infrastructure.db.in_memory_webinar_repository import (
    InMemoryWebinarRepository,
)
from webinars.infrastructure.db.mongo_connection import reset_mongo_client


@pytest.fixture(autouse=True)
def memory_backend(monkeypatch: pytest.MonkeyPatch):
    """Force the in-memory backend and fresh singletons for each test."""
    monkeypatch.setenv("WEBINAR_REPOSITORY", "memory")
    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()
    reset_mongo_client()


@pytest.fixture
def alice() -> User:
    """Organizer of the seeded webinar."""
    return User(id="alice", email="alice@gmail.com")


@pytest.fixture
def bob() -> User:
    """User who organizes nothing."""
    return User(id="bob", email="bob@gmail.com")


@pytest.fixture
def webinar(alice: User) -> Webinar:
    """Webinar organized by alice with 100 seats."""
    return Webinar(
        id="webinar-id",
        organizer_id=alice.id,
        title="Webinar title",
        start_date=datetime(2024, 1, 1, 0, 0, tzinfo=UTC),
        end_date=datetime(2024, 1, 1, 1, 0, tzinfo=UTC),
        seats=100,
    )


@pytest.fixture
def webinar_repository(webinar: Webinar) -> InMemoryWebinarRepository:
    """In-memory repository seeded with the default webinar."""
    return InMemoryWebinarRepository([webinar])
