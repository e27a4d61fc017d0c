"""
MongoDB Webinar Repository
==========================

Concrete implementation of WebinarRepository using MongoDB.
"""
from typing import Optional

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError

from webinars.core.config import get_settings
from webinars.domain.constants.webinar_fields import WebinarFields
from webinars.domain.models.webinar import Webinar
from webinars.domain.repositories.webinar_repository import (
    DuplicateWebinarError,
    WebinarRecordNotFoundError,
    WebinarRepository,
)
from webinars.infrastructure.db.mongo_connection import get_mongo_client
from webinars.utils.datetime_utils import to_storage_precision


class MongoWebinarRepository(WebinarRepository):
    """
    MongoDB implementation of WebinarRepository.

    The webinar id is the document ``_id``, so MongoDB enforces uniqueness.
    Dates are written as UTC with millisecond precision, the values MongoDB
    hands back, so a stored webinar reads back equal to what was written
    once its dates are in that form.
    """

    def __init__(self, collection: Optional[AsyncCollection] = None):
        """
        Initialize repository.

        Args:
            collection: Collection to use; defaults to the configured webinars collection
        """
        if collection is None:
            collection = get_mongo_client().get_collection(get_settings().webinars_collection)
        self._collection = collection

    def _to_entity(self, doc: dict) -> Webinar:
        """Convert MongoDB document to Webinar entity."""
        return Webinar(
            id=doc[WebinarFields.MONGO_ID],
            organizer_id=doc[WebinarFields.ORGANIZER_ID],
            title=doc[WebinarFields.TITLE],
            start_date=to_storage_precision(doc[WebinarFields.START_DATE]),
            end_date=to_storage_precision(doc[WebinarFields.END_DATE]),
            seats=doc[WebinarFields.SEATS],
        )

    def _to_document(self, webinar: Webinar) -> dict:
        """Convert Webinar entity to MongoDB document."""
        return {
            WebinarFields.MONGO_ID: webinar.id,
            WebinarFields.ORGANIZER_ID: webinar.organizer_id,
            WebinarFields.TITLE: webinar.title,
            WebinarFields.START_DATE: to_storage_precision(webinar.start_date),
            WebinarFields.END_DATE: to_storage_precision(webinar.end_date),
            WebinarFields.SEATS: webinar.seats,
        }

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """Find a webinar by its ID."""
        doc = await self._collection.find_one({WebinarFields.MONGO_ID: webinar_id})
        if not doc:
            return None
        return self._to_entity(doc)

    async def create(self, webinar: Webinar) -> None:
        """Create a new webinar."""
        try:
            await self._collection.insert_one(self._to_document(webinar))
        except DuplicateKeyError as e:
            raise DuplicateWebinarError(webinar.id) from e

    async def update(self, webinar: Webinar) -> None:
        """Replace an existing webinar."""
        result = await self._collection.replace_one(
            {WebinarFields.MONGO_ID: webinar.id},
            self._to_document(webinar),
        )
        if result.matched_count == 0:
            raise WebinarRecordNotFoundError(webinar.id)
