from typing import TYPE_CHECKING
from ...domain.repositories.webinar_repository import WebinarRepository
from ...infrastructure.db.in_memory_webinar_repository import InMemoryWebinarRepository
from ...infrastructure.db.mongo_webinar_repository import MongoWebinarRepository

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the webinar repository for the configured backend.
        """
        if container.settings.repository_backend == "memory":
            container.register_singleton(WebinarRepository, InMemoryWebinarRepository())
            return

        # Domain interface -> MongoDB implementation
        mongo_client = container.get("mongo_client")
        collection = mongo_client.get_collection(container.settings.webinars_collection)
        container.register_singleton(
            WebinarRepository,
            MongoWebinarRepository(collection=collection)
        )
