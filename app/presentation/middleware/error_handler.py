"""未処理例外を500のJSONレスポンスに変換するミドルウェア"""

from collections.abc import Awaitable, Callable

import sentry_sdk
from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.logging import get_logger
from app.presentation.exceptions.api_errors import APIError

logger = get_logger(__name__)


async def error_response_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    例外の内容はクライアントに返さず、ログとSentryにのみ記録する。
    ドメインエラー等は例外ハンドラーで処理済みのため、ここに届くのは想定外の例外のみ。
    """
    try:
        return await call_next(request)
    except Exception as e:
        sentry_sdk.capture_exception(e)
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}", exc_info=e
        )
        error = APIError()
        return JSONResponse(
            content=jsonable_encoder(error.to_response()),
            status_code=error.status_code,
        )
