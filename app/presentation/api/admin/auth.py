"""
管理者ログイン/ログアウト

ログインは送信元IPごとの失敗回数で制限する。
ロックアウト中はリクエストボディを検証する前に拒否する。
"""

from fastapi import APIRouter, Depends, Request, Response

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.domain.exceptions.base import (
    ConfigurationError,
    TooManyRequestsError,
    UnauthorizedError,
    ValidationError,
)
from app.domain.validation import is_blank
from app.infrastructure.repositories import LoginAttemptService
from app.infrastructure.security.password import verify_password
from app.infrastructure.security.session_token import issue_session_token
from app.presentation.api.deps import (
    get_client_ip,
    get_login_attempt_service,
    read_json_object,
)
from app.presentation.schemas.common import MessageResponse

router = APIRouter()
logger = get_logger(__name__)


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def failed_login_message(locked: bool, remaining: int, lockout_minutes: int) -> str:
    if locked:
        return (
            "Too many failed login attempts. "
            f"You have been locked out for {lockout_minutes} minutes."
        )
    plural = "attempt" if remaining == 1 else "attempts"
    return f"Invalid password. {remaining} {plural} remaining."


@router.post("/auth", response_model=MessageResponse)
async def login(
    request: Request,
    response: Response,
    attempts: LoginAttemptService = Depends(get_login_attempt_service),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """
    管理者ログイン

    - ロックアウト中: 429
    - パスワード未指定: 400
    - パスワード不一致: 401（残り回数、またはロックアウトを通知）
    - 成功: セッションCookieを発行し、失敗回数をリセット
    """
    ip_address = get_client_ip(request, settings.trusted_proxies)

    if attempts.is_locked(ip_address):
        logger.warning(f"Login rejected (locked out): {ip_address}")
        raise TooManyRequestsError(
            "Too many failed login attempts. "
            f"Please try again in {attempts.lockout_minutes} minutes."
        )

    body = await read_json_object(request)
    password = body.get("password")
    if is_blank(password):
        raise ValidationError(
            "Password is required", details={"password": "Password is required"}
        )

    if not settings.ADMIN_PASSWORD_HASH:
        raise ConfigurationError("ADMIN_PASSWORD_HASH is not set")

    if not verify_password(password, settings.ADMIN_PASSWORD_HASH):
        locked = attempts.record_failure(ip_address)
        remaining = attempts.remaining_attempts(ip_address)
        raise UnauthorizedError(
            failed_login_message(locked, remaining, attempts.lockout_minutes),
            details={"remaining_attempts": remaining},
        )

    attempts.clear(ip_address)

    if not settings.SESSION_SECRET:
        raise ConfigurationError("SESSION_SECRET is not set")

    token = issue_session_token(
        settings.SESSION_SECRET, duration_ms=settings.SESSION_EXPIRE * 1000
    )
    set_session_cookie(response, token, settings)
    logger.info(f"Admin login succeeded: {ip_address}")

    return MessageResponse(message="Login successful")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response, settings: Settings = Depends(get_settings)
) -> MessageResponse:
    """
    ログアウト

    Cookieを即時失効させる。トークン自体はサーバー側で無効化しない。
    """
    clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out successfully")
