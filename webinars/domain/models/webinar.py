"""
Webinar Model
=============

Domain model representing a scheduled webinar and its seat capacity.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class Webinar:
    """
    Webinar domain model.

    Immutable value holder. Range and ownership rules are enforced by the
    use cases that change a webinar, not at construction: a seat count that
    is valid for a new webinar may still be refused as a change.
    """
    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    @classmethod
    def from_props(cls, props: Dict[str, Any]) -> "Webinar":
        """Build a webinar from its property bag."""
        return cls(**props)

    def to_props(self) -> Dict[str, Any]:
        """Return the property bag of this webinar."""
        return asdict(self)

    def with_seats(self, seats: int) -> "Webinar":
        """Return a copy of this webinar with a new seat capacity."""
        return replace(self, seats=seats)
