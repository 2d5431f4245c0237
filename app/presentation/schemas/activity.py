"""アクティビティのスキーマ定義"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common import MessageResponse, SuccessResponse


class ActivitySchema(BaseModel):
    """
    アクティビティレコード

    Attributes:
        status: pending/approved/scheduled/cancelled
        scheduled_start: 開始日時（ISO 8601文字列、スケジュール確定時のみ）
        scheduled_end: 終了日時（ISO 8601文字列、スケジュール確定時のみ）
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    host_name: str
    host_email: Optional[str] = None
    duration: Optional[int] = None
    equipment_needed: Optional[str] = None
    capacity: Optional[int] = None
    time_preference: Optional[str] = None
    activity_type: Optional[str] = None
    notes: Optional[str] = None
    status: str
    scheduled_start: Optional[str] = None
    scheduled_end: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ActivityCreatedResponse(MessageResponse):
    activityId: int


class ActivityResponse(SuccessResponse):
    activity: ActivitySchema


class ActivityListResponse(SuccessResponse):
    activities: list[ActivitySchema]
