"""
User Model
==========

The requesting user. Only the identifier takes part in authorization.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """User domain model."""
    id: str
    email: Optional[str] = None
