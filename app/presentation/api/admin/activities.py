from typing import Any, Optional

from fastapi import APIRouter, Depends, Request

from app.core.logging import get_logger
from app.domain.exceptions.base import BadRequestError
from app.domain.validation import (
    ACTIVITY_STATUSES,
    validate_activity_update,
    validate_schedule,
)
from app.infrastructure.repositories import ActivityRepository
from app.presentation.api.deps import (
    clean_text,
    get_activity_repository,
    get_or_404,
    raise_for_errors,
    read_json_object,
)
from app.presentation.schemas.activity import (
    ActivityListResponse,
    ActivityResponse,
    ActivitySchema,
)
from app.presentation.schemas.common import SuccessResponse

router = APIRouter()
logger = get_logger(__name__)

REQUIRED_TEXT_FIELDS = ("title", "host_name", "host_email")
OPTIONAL_TEXT_FIELDS = (
    "description",
    "activity_type",
    "equipment_needed",
    "time_preference",
    "notes",
    "location",
)
PASSTHROUGH_FIELDS = ("duration", "capacity", "status")


def _schedule_value(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    status: Optional[str] = None,
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityListResponse:
    """
    アクティビティ一覧（新しい順）

    ?status= で pending/approved/scheduled/cancelled に絞り込める
    """
    if status is not None and status not in ACTIVITY_STATUSES:
        raise BadRequestError("Invalid status value")
    return ActivityListResponse(
        activities=[
            ActivitySchema.model_validate(a) for a in activities.list_by_status(status)
        ]
    )


@router.get("/{activity_id}", response_model=ActivityResponse)
async def get_activity(
    activity_id: int,
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityResponse:
    activity = get_or_404(activities, activity_id, "Activity")
    return ActivityResponse(activity=ActivitySchema.model_validate(activity))


@router.put("/{activity_id}", response_model=ActivityResponse)
async def update_activity(
    activity_id: int,
    request: Request,
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityResponse:
    """アクティビティの部分更新"""
    activity = get_or_404(activities, activity_id, "Activity")
    body = await read_json_object(request)
    raise_for_errors(validate_activity_update(body))

    updates: dict[str, Any] = {}
    for field in REQUIRED_TEXT_FIELDS:
        if field in body:
            updates[field] = body[field].strip()
    for field in OPTIONAL_TEXT_FIELDS:
        if field in body:
            updates[field] = clean_text(body[field])
    for field in PASSTHROUGH_FIELDS:
        if field in body:
            updates[field] = body[field]
    for field in ("scheduled_start", "scheduled_end"):
        if field in body:
            updates[field] = _schedule_value(body[field])

    activity = activities.update(activity, updates)
    logger.info(f"Activity updated: activity_id={activity.id}")
    return ActivityResponse(activity=ActivitySchema.model_validate(activity))


@router.delete("/{activity_id}", response_model=SuccessResponse)
async def delete_activity(
    activity_id: int,
    activities: ActivityRepository = Depends(get_activity_repository),
) -> SuccessResponse:
    activity = get_or_404(activities, activity_id, "Activity")
    activities.delete(activity)
    logger.info(f"Activity deleted: activity_id={activity_id}")
    return SuccessResponse()


@router.patch("/{activity_id}/approve", response_model=ActivityResponse)
async def approve_activity(
    activity_id: int,
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityResponse:
    activity = get_or_404(activities, activity_id, "Activity")
    activity = activities.update(activity, {"status": "approved"})
    logger.info(f"Activity approved: activity_id={activity.id}")
    return ActivityResponse(activity=ActivitySchema.model_validate(activity))


@router.patch("/{activity_id}/schedule", response_model=ActivityResponse)
async def schedule_activity(
    activity_id: int,
    request: Request,
    activities: ActivityRepository = Depends(get_activity_repository),
) -> ActivityResponse:
    """
    日時と場所を確定してscheduled状態にする

    終了日時は開始日時より後でなければならない。
    """
    activity = get_or_404(activities, activity_id, "Activity")
    body = await read_json_object(request)
    raise_for_errors(validate_schedule(body))

    activity = activities.update(
        activity,
        {
            "scheduled_start": body["scheduled_start"],
            "scheduled_end": body["scheduled_end"],
            "location": body["location"].strip(),
            "status": "scheduled",
        },
    )
    logger.info(f"Activity scheduled: activity_id={activity.id}")
    return ActivityResponse(activity=ActivitySchema.model_validate(activity))
