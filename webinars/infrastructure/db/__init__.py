from .in_memory_webinar_repository import InMemoryWebinarRepository
from .mongo_webinar_repository import MongoWebinarRepository

__all__ = ["InMemoryWebinarRepository", "MongoWebinarRepository"]
