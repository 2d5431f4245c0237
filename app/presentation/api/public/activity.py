from fastapi import APIRouter, Depends, Request, status

from app.core.logging import get_logger
from app.domain.exceptions.base import ForbiddenError
from app.domain.validation import validate_activity_submission
from app.infrastructure.repositories import ActivityRepository, SettingRepository
from app.infrastructure.repositories.setting_repository import (
    ACTIVITY_SUBMISSIONS_OPEN,
)
from app.presentation.api.deps import (
    clean_text,
    get_activity_repository,
    get_setting_repository,
    raise_for_errors,
    read_json_object,
)
from app.presentation.schemas.activity import (
    ActivityCreatedResponse,
    ActivityListResponse,
    ActivitySchema,
)

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/activity",
    response_model=ActivityCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_activity(
    request: Request,
    activities: ActivityRepository = Depends(get_activity_repository),
    settings: SettingRepository = Depends(get_setting_repository),
) -> ActivityCreatedResponse:
    """
    アクティビティ提案

    提案はpending状態で登録され、管理者の承認を待つ。
    """
    if not settings.is_enabled(ACTIVITY_SUBMISSIONS_OPEN):
        raise ForbiddenError("Activity submissions are currently closed")

    body = await read_json_object(request)
    raise_for_errors(validate_activity_submission(body))

    activity = activities.create(
        title=body["title"].strip(),
        description=body["description"].strip(),
        host_name=body["host_name"].strip(),
        host_email=body["host_email"].strip().lower(),
        duration=body["duration"],
        equipment_needed=clean_text(body.get("equipment_needed")),
        capacity=body.get("capacity"),
        time_preference=body["time_preference"],
        activity_type=body["activity_type"],
        status="pending",
    )
    logger.info(f"Activity submitted: activity_id={activity.id}")

    return ActivityCreatedResponse(
        message="Activity submitted successfully. Thank you!",
        activityId=activity.id,
    )


@router.get("/activities", response_model=ActivityListResponse)
async def list_lineup(
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityListResponse:
    """承認済み・スケジュール済みのアクティビティ一覧（タイトル順）"""
    return ActivityListResponse(
        activities=[
            ActivitySchema.model_validate(a)
            for a in activities.list_approved_and_scheduled()
        ]
    )


@router.get("/schedule", response_model=ActivityListResponse)
async def list_schedule(
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityListResponse:
    """スケジュール確定済みのアクティビティ一覧（開始時刻順）"""
    return ActivityListResponse(
        activities=[
            ActivitySchema.model_validate(a) for a in activities.list_scheduled()
        ]
    )
