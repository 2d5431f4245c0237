from fastapi import APIRouter, Depends, Request

from app.core.logging import get_logger
from app.domain.validation import validate_settings_update
from app.infrastructure.repositories import SettingRepository
from app.presentation.api.deps import (
    get_setting_repository,
    raise_for_errors,
    read_json_object,
)
from app.presentation.schemas.announcement import SettingsResponse

router = APIRouter()
logger = get_logger(__name__)

TEXT_SETTINGS = ("event_date_start", "event_date_end", "location")
TOGGLE_SETTINGS = ("rsvp_open", "activity_submissions_open")


@router.get("", response_model=SettingsResponse)
async def get_event_settings(
    settings: SettingRepository = Depends(get_setting_repository),
) -> SettingsResponse:
    return SettingsResponse(settings=settings.get_all())


@router.put("", response_model=SettingsResponse)
async def update_event_settings(
    request: Request,
    settings: SettingRepository = Depends(get_setting_repository),
) -> SettingsResponse:
    """
    イベント全体設定の部分更新

    真偽値はtrue/falseのほか"true"/"false"の文字列も受け付け、文字列で保存する。
    """
    body = await read_json_object(request)
    raise_for_errors(validate_settings_update(body))

    values: dict[str, str] = {}
    for key in TEXT_SETTINGS:
        if key in body:
            values[key] = body[key].strip()
    for key in TOGGLE_SETTINGS:
        if key in body:
            value = body[key]
            if isinstance(value, bool):
                value = "true" if value else "false"
            values[key] = value

    if values:
        settings.set_many(values)
        logger.info(f"Settings updated: {', '.join(sorted(values))}")

    return SettingsResponse(settings=settings.get_all())
