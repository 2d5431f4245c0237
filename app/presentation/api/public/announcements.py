from fastapi import APIRouter, Depends

from app.infrastructure.repositories import AnnouncementRepository
from app.presentation.api.deps import get_announcement_repository
from app.presentation.schemas.announcement import (
    AnnouncementListResponse,
    AnnouncementSchema,
)

router = APIRouter()


@router.get("/announcements", response_model=AnnouncementListResponse)
async def list_active_announcements(
    announcements: AnnouncementRepository = Depends(get_announcement_repository),
) -> AnnouncementListResponse:
    """掲示中のお知らせ一覧"""
    return AnnouncementListResponse(
        announcements=[
            AnnouncementSchema.model_validate(a) for a in announcements.list_active()
        ]
    )
