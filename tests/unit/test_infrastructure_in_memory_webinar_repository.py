"""Unit tests for InMemoryWebinarRepository."""

import pytest

from webinars.domain.models.webinar import Webinar
from webinars.domain.repositories.webinar_repository import (
    DuplicateWebinarError,
    WebinarRecordNotFoundError,
)
from webinars.infrastructure.db.in_memory_webinar_repository import (
    InMemoryWebinarRepository,
)


@pytest.mark.asyncio
async def test_find_by_id_returns_seeded_webinar(
    webinar_repository: InMemoryWebinarRepository, webinar: Webinar
) -> None:
    assert await webinar_repository.find_by_id("webinar-id") == webinar


@pytest.mark.asyncio
async def test_find_by_id_returns_none_when_missing(
    webinar_repository: InMemoryWebinarRepository,
) -> None:
    assert await webinar_repository.find_by_id("missing") is None


@pytest.mark.asyncio
async def test_create_then_find(webinar: Webinar) -> None:
    repository = InMemoryWebinarRepository()

    await repository.create(webinar)

    assert repository.find_by_id_sync("webinar-id") == webinar


@pytest.mark.asyncio
async def test_create_duplicate_raises(
    webinar_repository: InMemoryWebinarRepository, webinar: Webinar
) -> None:
    with pytest.raises(DuplicateWebinarError):
        await webinar_repository.create(webinar.with_seats(5))

    assert webinar_repository.find_by_id_sync("webinar-id") == webinar


@pytest.mark.asyncio
async def test_update_missing_raises(webinar: Webinar) -> None:
    repository = InMemoryWebinarRepository()

    with pytest.raises(WebinarRecordNotFoundError):
        await repository.update(webinar)

    assert repository.all() == []


def test_instances_do_not_share_storage(webinar: Webinar) -> None:
    first = InMemoryWebinarRepository([webinar])
    second = InMemoryWebinarRepository()

    assert first.find_by_id_sync("webinar-id") == webinar
    assert second.find_by_id_sync("webinar-id") is None
