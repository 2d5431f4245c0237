from typing import Any

from fastapi import APIRouter, Depends, Request

from app.core.logging import get_logger
from app.domain.exceptions.base import ConflictError
from app.domain.validation import validate_attendee_update
from app.infrastructure.repositories import AttendeeRepository
from app.presentation.api.deps import (
    clean_text,
    get_attendee_repository,
    get_or_404,
    raise_for_errors,
    read_json_object,
)
from app.presentation.schemas.attendee import (
    AttendeeListResponse,
    AttendeeResponse,
    AttendeeSchema,
)
from app.presentation.schemas.common import MessageResponse

router = APIRouter()
logger = get_logger(__name__)

OPTIONAL_TEXT_FIELDS = (
    "dietary_restrictions",
    "arrival_time",
    "departure_time",
    "excited_about",
)


@router.get("", response_model=AttendeeListResponse)
async def list_rsvps(
    attendees: AttendeeRepository = Depends(get_attendee_repository),
) -> AttendeeListResponse:
    """参加者一覧（新しい順）"""
    return AttendeeListResponse(
        attendees=[AttendeeSchema.model_validate(a) for a in attendees.list_all()]
    )


@router.get("/{attendee_id}", response_model=AttendeeResponse)
async def get_rsvp(
    attendee_id: int,
    attendees: AttendeeRepository = Depends(get_attendee_repository),
) -> AttendeeResponse:
    attendee = get_or_404(attendees, attendee_id, "Attendee")
    return AttendeeResponse(attendee=AttendeeSchema.model_validate(attendee))


@router.put("/{attendee_id}", response_model=AttendeeResponse)
async def update_rsvp(
    attendee_id: int,
    request: Request,
    attendees: AttendeeRepository = Depends(get_attendee_repository),
) -> AttendeeResponse:
    """
    参加者情報の部分更新

    リクエストに含まれるフィールドのみ更新する。
    """
    attendee = get_or_404(attendees, attendee_id, "Attendee")
    body = await read_json_object(request)
    raise_for_errors(validate_attendee_update(body))

    updates: dict[str, Any] = {}
    if "name" in body:
        updates["name"] = body["name"].strip()
    if "email" in body:
        email = body["email"].strip().lower()
        other = attendees.get_by_email(email)
        if other is not None and other.id != attendee.id:
            raise ConflictError("Another attendee already uses this email")
        updates["email"] = email
    for field in OPTIONAL_TEXT_FIELDS:
        if field in body:
            updates[field] = clean_text(body[field])
    if "plus_one" in body:
        updates["plus_one"] = bool(body["plus_one"])
    if "payment_status" in body:
        updates["payment_status"] = body["payment_status"]

    attendee = attendees.update(attendee, updates)
    logger.info(f"Attendee updated: attendee_id={attendee.id}")

    return AttendeeResponse(
        message="Attendee updated successfully",
        attendee=AttendeeSchema.model_validate(attendee),
    )


@router.delete("/{attendee_id}", response_model=MessageResponse)
async def delete_rsvp(
    attendee_id: int,
    attendees: AttendeeRepository = Depends(get_attendee_repository),
) -> MessageResponse:
    attendee = get_or_404(attendees, attendee_id, "Attendee")
    attendees.delete(attendee)
    logger.info(f"Attendee deleted: attendee_id={attendee_id}")
    return MessageResponse(message="Attendee deleted successfully")
