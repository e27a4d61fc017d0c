from .webinar_repository import (
    DuplicateWebinarError,
    WebinarRecordNotFoundError,
    WebinarRepository,
    WebinarRepositoryError,
)

__all__ = [
    "DuplicateWebinarError",
    "WebinarRecordNotFoundError",
    "WebinarRepository",
    "WebinarRepositoryError",
]
