"""
Webinar Exceptions
==================

Each refusal of a seat change has its own class and a stable ``code``.
The transport layer matches on the class (or the code) to pick a response.
"""
from typing import Optional

from webinars.domain.constants.webinar_rules import MAX_SEATS


class WebinarException(Exception):
    """Base class for webinar business rule violations."""

    code: str = "webinar_error"
    message: str = "Webinar operation refused"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class WebinarNotFoundException(WebinarException):
    """No webinar exists for the requested id."""

    code = "webinar_not_found"
    message = "Webinar not found"


class WebinarNotOrganizerException(WebinarException):
    """The requesting user does not organize the webinar."""

    code = "webinar_not_organizer"
    message = "User is not allowed to update this webinar"


class WebinarReduceSeatsException(WebinarException):
    """The requested seat count is lower than the current one."""

    code = "webinar_reduce_seats"
    message = "You cannot reduce the number of seats"


class WebinarTooManySeatsException(WebinarException):
    """The requested seat count is above the allowed maximum."""

    code = "webinar_too_many_seats"
    message = f"Webinar must have at most {MAX_SEATS} seats"
