"""
Dependency Container
====================

FastAPI dependencies backed by the DI container.
"""
from typing import Optional

from fastapi import Header, HTTPException, status

from webinars.application.services.webinar_service import WebinarService
from webinars.di.container import get_container
from webinars.domain.models.user import User


def get_webinar_service() -> WebinarService:
    """
    Get webinar service instance (singleton).

    Returns:
        WebinarService instance
    """
    container = get_container()
    return container.get(WebinarService)


def get_current_user(x_user_id: Optional[str] = Header(None)) -> User:
    """
    Resolve the requesting user from the X-User-Id header.

    Raises:
        HTTPException: 401 when the header is missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header"
        )
    return User(id=x_user_id.strip())
