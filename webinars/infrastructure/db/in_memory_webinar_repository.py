"""
In-Memory Webinar Repository
============================

Implementation of WebinarRepository backed by a dict owned by the instance.
Used by tests and by local runs with ``WEBINAR_REPOSITORY=memory``.
"""
from typing import Dict, Iterable, List, Optional

from webinars.domain.models.webinar import Webinar
from webinars.domain.repositories.webinar_repository import (
    DuplicateWebinarError,
    WebinarRecordNotFoundError,
    WebinarRepository,
)


class InMemoryWebinarRepository(WebinarRepository):
    """In-memory implementation of WebinarRepository."""

    def __init__(self, webinars: Optional[Iterable[Webinar]] = None):
        self._webinars: Dict[str, Webinar] = {}
        for webinar in webinars or ():
            self._webinars[webinar.id] = webinar

    def find_by_id_sync(self, webinar_id: str) -> Optional[Webinar]:
        """Synchronous lookup for assertions outside the event loop."""
        return self._webinars.get(webinar_id)

    def all(self) -> List[Webinar]:
        """Return every stored webinar."""
        return list(self._webinars.values())

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        return self._webinars.get(webinar_id)

    async def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise DuplicateWebinarError(webinar.id)
        self._webinars[webinar.id] = webinar

    async def update(self, webinar: Webinar) -> None:
        if webinar.id not in self._webinars:
            raise WebinarRecordNotFoundError(webinar.id)
        self._webinars[webinar.id] = webinar
