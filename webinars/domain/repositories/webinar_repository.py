"""
Webinar Repository Interface
============================

Abstract interface for webinar data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from webinars.domain.models.webinar import Webinar


class WebinarRepositoryError(Exception):
    """Base class for storage errors raised by webinar repositories."""


class DuplicateWebinarError(WebinarRepositoryError):
    """A webinar with the same id is already stored."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(f"Webinar '{webinar_id}' already exists")
        self.webinar_id = webinar_id


class WebinarRecordNotFoundError(WebinarRepositoryError):
    """An update targeted a webinar id that is not stored."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(f"Webinar '{webinar_id}' not found")
        self.webinar_id = webinar_id


class WebinarRepository(ABC):
    """
    Abstract repository for webinar persistence operations.

    This interface defines the contract for webinar data access.
    Every operation is a coroutine; adapters do their I/O there and nowhere else.
    """

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """
        Find a webinar by its ID.

        Args:
            webinar_id: Unique webinar identifier

        Returns:
            Webinar entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """
        Store a new webinar.

        Args:
            webinar: Webinar entity to create

        Raises:
            DuplicateWebinarError: If a webinar with the same id exists
        """
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """
        Replace every field of an existing webinar, keyed by id.

        Args:
            webinar: Webinar entity with updated data

        Raises:
            WebinarRecordNotFoundError: If no webinar with that id is stored
        """
        pass
