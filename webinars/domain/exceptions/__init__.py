"""
Domain Exceptions
=================

Business rule violations raised while changing a webinar.
"""
from .webinar_exceptions import (
    WebinarException,
    WebinarNotFoundException,
    WebinarNotOrganizerException,
    WebinarReduceSeatsException,
    WebinarTooManySeatsException,
)

__all__ = [
    "WebinarException",
    "WebinarNotFoundException",
    "WebinarNotOrganizerException",
    "WebinarReduceSeatsException",
    "WebinarTooManySeatsException",
]
