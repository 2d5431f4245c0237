"""FastAPIアプリケーションファクトリー"""

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.core.logging import get_logger, install_access_log_filters
from app.presentation import api_router
from app.presentation.exception_handlers import register_exception_handlers
from app.presentation.middleware.admin_auth import admin_auth_middleware
from app.presentation.middleware.error_handler import error_response_middleware
from app.presentation.middleware.security_headers import SecurityHeadersMiddleware

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    FastAPIアプリケーションを生成

    Returns:
        FastAPIアプリケーションインスタンス
    """
    settings = get_settings()

    # アプリケーションパラメータ
    app_params: dict[str, Any] = {
        "title": "Event RSVP",
        "description": "イベント参加登録・アクティビティ募集API",
        "version": "0.1.0",
        "lifespan": lifespan,
    }

    # 本番環境ではドキュメントを無効化
    if settings.is_production:
        app_params["docs_url"] = None
        app_params["redoc_url"] = None
        app_params["openapi_url"] = None

    # アプリ生成
    app = FastAPI(**app_params)

    # ヘルスチェックログフィルター
    install_access_log_filters()

    # CORS
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # セキュリティヘッダー
    app.add_middleware(SecurityHeadersMiddleware)

    # 例外ハンドラー登録
    register_exception_handlers(app)

    # ミドルウェア登録（後に登録したものが外側）
    app.middleware("http")(admin_auth_middleware)
    app.middleware("http")(error_response_middleware)

    # ルーター登録
    app.include_router(api_router, prefix="/api")

    return app
