from fastapi import APIRouter, Depends, Request, status

from app.core.logging import get_logger
from app.domain.exceptions.base import ConflictError, ForbiddenError
from app.domain.validation import validate_rsvp
from app.infrastructure.repositories import AttendeeRepository, SettingRepository
from app.infrastructure.repositories.setting_repository import RSVP_OPEN
from app.presentation.api.deps import (
    clean_text,
    get_attendee_repository,
    get_setting_repository,
    raise_for_errors,
    read_json_object,
)
from app.presentation.schemas.attendee import RSVPCreatedResponse

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/rsvp",
    response_model=RSVPCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_rsvp(
    request: Request,
    attendees: AttendeeRepository = Depends(get_attendee_repository),
    settings: SettingRepository = Depends(get_setting_repository),
) -> RSVPCreatedResponse:
    """
    RSVP登録

    - 受付停止中は403
    - 同じメールアドレス（大文字小文字を区別しない）での重複登録は409
    """
    if not settings.is_enabled(RSVP_OPEN):
        raise ForbiddenError("RSVPs are currently closed")

    body = await read_json_object(request)
    raise_for_errors(validate_rsvp(body))

    email = body["email"].strip().lower()
    if attendees.get_by_email(email) is not None:
        raise ConflictError(
            "An RSVP with this email already exists. "
            "If you need to make changes, please contact us."
        )

    attendee = attendees.create(
        name=body["name"].strip(),
        email=email,
        dietary_restrictions=clean_text(body.get("dietary_restrictions")),
        plus_one=body.get("plus_one") is True,
        arrival_time=clean_text(body.get("arrival_time")),
        departure_time=clean_text(body.get("departure_time")),
        excited_about=clean_text(body.get("excited_about")),
    )
    logger.info(f"RSVP received: attendee_id={attendee.id}")

    return RSVPCreatedResponse(
        message="RSVP submitted successfully",
        attendeeId=attendee.id,
        email=attendee.email,
    )
