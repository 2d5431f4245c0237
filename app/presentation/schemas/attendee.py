"""RSVP参加者のスキーマ定義"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common import MessageResponse, SuccessResponse


class AttendeeSchema(BaseModel):
    """参加者レコード"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    dietary_restrictions: Optional[str] = None
    plus_one: bool
    arrival_time: Optional[str] = None
    departure_time: Optional[str] = None
    excited_about: Optional[str] = None
    payment_status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RSVPCreatedResponse(MessageResponse):
    attendeeId: int
    email: str


class AttendeeResponse(SuccessResponse):
    message: Optional[str] = None
    attendee: AttendeeSchema


class AttendeeListResponse(SuccessResponse):
    attendees: list[AttendeeSchema]
