"""お知らせ・イベント設定のスキーマ定義"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common import SuccessResponse


class AnnouncementSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    message: str
    active: bool
    created_at: Optional[datetime] = None


class AnnouncementListResponse(SuccessResponse):
    announcements: list[AnnouncementSchema]


class AnnouncementCreatedResponse(SuccessResponse):
    id: int


class SettingsResponse(SuccessResponse):
    """
    イベント全体設定

    Attributes:
        settings: 設定キー→値（真偽値は"true"/"false"の文字列）
    """

    settings: dict[str, str]
