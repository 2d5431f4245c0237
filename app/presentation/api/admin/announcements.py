from fastapi import APIRouter, Depends, Request, status

from app.core.logging import get_logger
from app.domain.exceptions.base import ValidationError
from app.domain.validation import validate_announcement
from app.infrastructure.repositories import AnnouncementRepository
from app.presentation.api.deps import (
    get_announcement_repository,
    get_or_404,
    read_json_object,
)
from app.presentation.schemas.announcement import (
    AnnouncementCreatedResponse,
    AnnouncementListResponse,
    AnnouncementSchema,
)
from app.presentation.schemas.common import SuccessResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=AnnouncementListResponse)
async def list_announcements(
    announcements: AnnouncementRepository = Depends(get_announcement_repository),
) -> AnnouncementListResponse:
    """全お知らせ一覧（非掲示を含む）"""
    return AnnouncementListResponse(
        announcements=[
            AnnouncementSchema.model_validate(a) for a in announcements.list_all()
        ]
    )


@router.post(
    "",
    response_model=AnnouncementCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_announcement(
    request: Request,
    announcements: AnnouncementRepository = Depends(get_announcement_repository),
) -> AnnouncementCreatedResponse:
    body = await read_json_object(request)
    error = validate_announcement(body)
    if error:
        raise ValidationError(error, details={"message": error})

    announcement = announcements.create(message=body["message"].strip(), active=True)
    logger.info(f"Announcement created: announcement_id={announcement.id}")
    return AnnouncementCreatedResponse(id=announcement.id)


@router.delete("/{announcement_id}", response_model=SuccessResponse)
async def delete_announcement(
    announcement_id: int,
    announcements: AnnouncementRepository = Depends(get_announcement_repository),
) -> SuccessResponse:
    announcement = get_or_404(announcements, announcement_id, "Announcement")
    announcements.delete(announcement)
    return SuccessResponse()


@router.patch("/{announcement_id}/toggle", response_model=SuccessResponse)
async def toggle_announcement(
    announcement_id: int,
    request: Request,
    announcements: AnnouncementRepository = Depends(get_announcement_repository),
) -> SuccessResponse:
    """掲示/非掲示の切り替え（activeは真偽値のみ受け付ける）"""
    announcement = get_or_404(announcements, announcement_id, "Announcement")
    body = await read_json_object(request)
    active = body.get("active")
    if not isinstance(active, bool):
        raise ValidationError("Active status must be a boolean value")

    announcements.set_active(announcement, active)
    return SuccessResponse()
