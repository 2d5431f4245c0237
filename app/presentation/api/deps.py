"""APIエンドポイント共通のdependency/ヘルパー"""

import json
from typing import Any, Optional, Sequence, TypeVar

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ...core.config import Settings, get_settings
from ...domain.exceptions.base import (
    BadRequestError,
    NotFoundError,
    ValidationError,
)
from ...domain.validation import FieldErrors
from ...infrastructure.database import get_db
from ...infrastructure.repositories import (
    ActivityRepository,
    AnnouncementRepository,
    AttendeeRepository,
    LoginAttemptService,
    SettingRepository,
)
from ...infrastructure.repositories.base import CRUDRepository

T = TypeVar("T")

# プロキシ経由の場合に送信元アドレスを運ぶヘッダー（優先順）
CLIENT_IP_HEADERS = ("CF-Connecting-IP", "X-Forwarded-For")


def get_client_ip(request: Request, trusted_proxies: Sequence[str] = ()) -> str:
    """
    送信元IPアドレスを取得

    転送ヘッダーは接続元がtrusted_proxiesに含まれる（"*"は全て）場合のみ参照し、
    それ以外は接続元アドレスを使う。X-Forwarded-Forは先頭（クライアント側）の
    アドレスを使用する。特定できない場合は"unknown"（全員で1つの試行枠を共有する）。
    """
    peer = request.client.host if request.client else None
    if peer and "*" not in trusted_proxies and peer not in trusted_proxies:
        return peer

    for header in CLIENT_IP_HEADERS:
        value = request.headers.get(header)
        if value:
            first = value.split(",")[0].strip()
            if first:
                return first
    return peer or "unknown"


async def read_json_object(request: Request) -> dict[str, Any]:
    """
    リクエストボディをJSONオブジェクトとして読み込む

    Raises:
        ValidationError: JSONとして不正、またはオブジェクトでない場合
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("Invalid JSON body")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def raise_for_errors(errors: FieldErrors) -> None:
    """フィールドエラーがあればValidationError（400）を送出"""
    if errors:
        raise ValidationError(details=errors)


def require_valid_id(id: int, label: str) -> int:
    """IDが正の整数でなければ400"""
    if id <= 0:
        raise BadRequestError(f"Invalid {label} ID")
    return id


def get_or_404(repo: CRUDRepository[Any], id: int, label: str) -> Any:
    """
    IDでレコードを取得

    Raises:
        BadRequestError: IDが0以下
        NotFoundError: 存在しない
    """
    require_valid_id(id, label.lower())
    obj = repo.get(id)
    if obj is None:
        raise NotFoundError(f"{label} not found")
    return obj


def clean_text(value: Any) -> Optional[str]:
    """前後の空白を除去し、空文字列・非文字列はNoneにする"""
    if not isinstance(value, str):
        return None
    return value.strip() or None


def get_attendee_repository(db: Session = Depends(get_db)) -> AttendeeRepository:
    return AttendeeRepository(db)


def get_activity_repository(db: Session = Depends(get_db)) -> ActivityRepository:
    return ActivityRepository(db)


def get_announcement_repository(
    db: Session = Depends(get_db),
) -> AnnouncementRepository:
    return AnnouncementRepository(db)


def get_setting_repository(db: Session = Depends(get_db)) -> SettingRepository:
    return SettingRepository(db)


def get_login_attempt_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> LoginAttemptService:
    return LoginAttemptService(
        db,
        max_attempts=settings.LOGIN_MAX_ATTEMPTS,
        lockout_minutes=settings.LOGIN_LOCKOUT_MINUTES,
    )
