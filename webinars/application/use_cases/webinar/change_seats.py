"""
Change Seats Use Case
=====================

Business use case for changing the seat capacity of a webinar.
"""
import logging
from dataclasses import dataclass

from webinars.domain.constants.webinar_rules import MAX_SEATS
from webinars.domain.exceptions.webinar_exceptions import (
    WebinarNotFoundException,
    WebinarNotOrganizerException,
    WebinarReduceSeatsException,
    WebinarTooManySeatsException,
)
from webinars.domain.models.user import User
from webinars.domain.repositories.webinar_repository import WebinarRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSeatsCommand:
    """Input of the change seats use case."""
    user: User
    webinar_id: str
    seats: int


class ChangeSeatsUseCase:
    """
    Use case for changing the number of seats of a webinar.

    Checks run in a fixed order and the first failure wins:
    existence, organizer, no reduction, upper bound.
    The webinar is written only once every check has passed.
    """

    def __init__(self, webinar_repository: WebinarRepository):
        """
        Initialize use case with repository.

        Args:
            webinar_repository: Repository for webinar persistence
        """
        self._repository = webinar_repository

    async def execute(self, command: ChangeSeatsCommand) -> None:
        """
        Execute the change seats use case.

        Args:
            command: Requesting user, target webinar id and new seat count

        Raises:
            WebinarNotFoundException: If the webinar does not exist
            WebinarNotOrganizerException: If the user is not the organizer
            WebinarReduceSeatsException: If the seat count would decrease
            WebinarTooManySeatsException: If the seat count exceeds MAX_SEATS
        """
        webinar = await self._repository.find_by_id(command.webinar_id)
        if webinar is None:
            logger.info(f"Seat change refused for webinar {command.webinar_id}: not found")
            raise WebinarNotFoundException()

        if webinar.organizer_id != command.user.id:
            logger.info(
                f"Seat change refused for webinar {webinar.id}: "
                f"user {command.user.id} is not the organizer"
            )
            raise WebinarNotOrganizerException()

        if command.seats < webinar.seats:
            logger.info(
                f"Seat change refused for webinar {webinar.id}: "
                f"{command.seats} is below current {webinar.seats}"
            )
            raise WebinarReduceSeatsException()

        if command.seats > MAX_SEATS:
            logger.info(
                f"Seat change refused for webinar {webinar.id}: "
                f"{command.seats} exceeds {MAX_SEATS}"
            )
            raise WebinarTooManySeatsException()

        # Equal seat counts are accepted and still written
        await self._repository.update(webinar.with_seats(command.seats))
        logger.info(f"Webinar {webinar.id} seats changed from {webinar.seats} to {command.seats}")
