"""
Pydantic schemas for seat-related responses.
"""

from typing import Dict, Optional
from pydantic import BaseModel, Field

from seatlock.models.seat import SeatStatus


class SeatState(BaseModel):
    status: SeatStatus
    lock_timestamp: Optional[int] = Field(None, serialization_alias="lockTimestamp")

    model_config = {"from_attributes": True}


SeatMap = Dict[int, SeatState]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    message: str
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    seats: Dict[SeatStatus, int]
