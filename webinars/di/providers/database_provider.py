from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register database connections in the container.
        Nothing is registered for the in-memory backend.
        """
        if container.settings.repository_backend != "mongo":
            return

        # Client connects lazily on first collection access
        container.register_singleton("mongo_client", get_mongo_client())
