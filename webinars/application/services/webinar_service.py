"""
Webinar Service
===============

Application service that coordinates webinar-related operations.
"""
from webinars.application.use_cases.webinar.change_seats import (
    ChangeSeatsCommand,
    ChangeSeatsUseCase,
)
from webinars.domain.models.user import User
from webinars.domain.repositories.webinar_repository import WebinarRepository


class WebinarService:
    """
    Application service for webinar operations.

    Gives the API a single entry point and keeps command construction
    out of the controllers.
    """

    def __init__(self, webinar_repository: WebinarRepository):
        self._change_seats_use_case = ChangeSeatsUseCase(webinar_repository)

    async def change_seats(self, user: User, webinar_id: str, seats: int) -> None:
        """
        Change the seat capacity of a webinar on behalf of a user.

        Args:
            user: Requesting user
            webinar_id: Target webinar identifier
            seats: New seat count

        Raises:
            WebinarException: One subclass per refused rule
        """
        command = ChangeSeatsCommand(user=user, webinar_id=webinar_id, seats=seats)
        await self._change_seats_use_case.execute(command)
