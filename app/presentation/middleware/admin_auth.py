"""
管理APIのアクセス制御ミドルウェア

/api/admin 配下へのリクエストはセッションCookieの署名と有効期限を
リクエストごとに検証する（サーバー側にセッション状態は持たない）。
ログイン・ログアウトのエンドポイントのみ検証対象外。
"""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.logging import get_logger
from app.infrastructure.security.session_token import verify_session_token
from app.presentation.exceptions.api_errors import ErrorResponse

logger = get_logger(__name__)

ADMIN_API_PREFIX = "/api/admin"
PUBLIC_ADMIN_PATHS = frozenset({"/api/admin/auth", "/api/admin/logout"})

UNAUTHORIZED_MESSAGE = "Unauthorized. Please login to access this resource."


def is_protected_path(path: str) -> bool:
    """管理APIかつ認証不要パス以外ならTrue"""
    if path != ADMIN_API_PREFIX and not path.startswith(ADMIN_API_PREFIX + "/"):
        return False
    normalized = path.rstrip("/") or "/"
    return normalized not in PUBLIC_ADMIN_PATHS


def unauthorized_response() -> JSONResponse:
    error = ErrorResponse(code="unauthorized", error=UNAUTHORIZED_MESSAGE)
    return JSONResponse(
        content=jsonable_encoder(error),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


async def admin_auth_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    管理APIへのリクエストを認証済みセッションに限定する

    Args:
        request: HTTPリクエスト
        call_next: 次のミドルウェア/エンドポイント

    Returns:
        HTTPレスポンス（未認証の場合は401）
    """
    # CORSプリフライトは対象外
    if request.method == "OPTIONS" or not is_protected_path(request.url.path):
        return await call_next(request)

    settings = get_settings()
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)

    if not token:
        logger.info(f"Admin request without session: {request.url.path}")
        return unauthorized_response()

    if not verify_session_token(token, settings.SESSION_SECRET):
        logger.warning(f"Admin request with invalid session: {request.url.path}")
        return unauthorized_response()

    return await call_next(request)
