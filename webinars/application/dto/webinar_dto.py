"""
Webinar DTO
===========

Pydantic models for webinar API requests and responses.
"""
from pydantic import BaseModel, ConfigDict, Field


class ChangeSeatsRequest(BaseModel):
    """DTO for changing the seat capacity of a webinar."""
    seats: int = Field(..., ge=1, description="New number of seats")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "seats": 200,
            }
        }
    )


class ChangeSeatsResponse(BaseModel):
    """DTO returned once the seat capacity has been changed."""
    message: str = "Seats updated"
