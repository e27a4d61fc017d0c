"""Unit tests for settings and the DI container wiring."""

import pytest

from webinars.application.services.webinar_service import WebinarService
from webinars.core.config import Settings, get_settings, reset_settings
from webinars.di.base_container import BaseContainer, RegistrationNotFoundError
from webinars.di.container import DIContainer, get_container, peek_container
from webinars.domain.repositories.webinar_repository import WebinarRepository
from webinars.infrastructure.db.in_memory_webinar_repository import (
    InMemoryWebinarRepository,
)
from webinars.infrastructure.db.mongo_webinar_repository import MongoWebinarRepository


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MONGO_URI", "DB_NAME", "WEBINARS_COLLECTION", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.repository_backend == "memory"
    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.mongo_database_name == "webinars"
    assert settings.webinars_collection == "webinars"
    assert settings.log_level == "INFO"


def test_settings_reject_unknown_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBINAR_REPOSITORY", "postgres")

    with pytest.raises(ValueError):
        Settings()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_memory_backend_wiring() -> None:
    container = get_container()

    repository = container.get(WebinarRepository)
    assert isinstance(repository, InMemoryWebinarRepository)
    assert isinstance(container.get(WebinarService), WebinarService)
    assert "mongo_client" not in container


def test_mongo_backend_wiring(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBINAR_REPOSITORY", "mongo")
    reset_settings()

    container = DIContainer()

    assert "mongo_client" in container
    assert isinstance(container.get(WebinarRepository), MongoWebinarRepository)


def test_base_container_factory_and_missing() -> None:
    container = BaseContainer()
    container.register_factory("counter", lambda: object())

    assert container.get("counter") is not container.get("counter")
    with pytest.raises(RegistrationNotFoundError):
        container.get("missing")


def test_base_container_later_registration_wins() -> None:
    container = BaseContainer()
    shared = object()
    container.register_factory("value", lambda: object())

    container.register_singleton("value", shared)

    assert container.get("value") is shared
    assert "value" in container


def test_peek_container_does_not_build() -> None:
    assert peek_container() is None

    container = get_container()

    assert peek_container() is container
