"""
Webinar Controller
==================

FastAPI controller for webinar management endpoints.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from webinars.api.v1.dependencies import get_current_user, get_webinar_service
from webinars.application.dto.webinar_dto import ChangeSeatsRequest, ChangeSeatsResponse
from webinars.application.services.webinar_service import WebinarService
from webinars.domain.exceptions.webinar_exceptions import (
    WebinarNotFoundException,
    WebinarNotOrganizerException,
    WebinarReduceSeatsException,
    WebinarTooManySeatsException,
)
from webinars.domain.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webinars"])


@router.post(
    "/{webinar_id}/seats",
    response_model=ChangeSeatsResponse,
    summary="Change webinar seats",
    description="""
    Change the number of seats of a webinar.

    Only the organizer may change the seats. The new value cannot be lower
    than the current one and cannot exceed 1000.
    """
)
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    user: User = Depends(get_current_user),
    service: WebinarService = Depends(get_webinar_service),
) -> ChangeSeatsResponse:
    """Change the seat capacity of a webinar."""
    try:
        await service.change_seats(user=user, webinar_id=webinar_id, seats=request.seats)
    except WebinarNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except WebinarNotOrganizerException as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except (WebinarReduceSeatsException, WebinarTooManySeatsException) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Webinar {webinar_id} seats set to {request.seats} by {user.id}")
    return ChangeSeatsResponse()
