from typing import TYPE_CHECKING
from ...domain.repositories.webinar_repository import WebinarRepository
from ...application.services.webinar_service import WebinarService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class WebinarProvider:
    """Webinar service provider - registers webinar-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register webinar service.
        Service is created with repository from container.
        """
        container.register_singleton(
            WebinarService,
            WebinarService(
                webinar_repository=container.get(WebinarRepository)
            )
        )
