from datetime import datetime, timezone

from fastapi import APIRouter, Request, Response, status
from sqlalchemy import text

from app.core.config import get_settings
from app.core.logging import get_logger
from app.infrastructure.batch.registry import task_registry
from app.infrastructure.database import connection
from app.presentation.schemas.system import DatabaseStatus, HealthCheckResponse

router = APIRouter()
logger = get_logger(__name__)


def check_database() -> DatabaseStatus:
    """SELECT 1 による疎通確認"""
    if connection.engine is None:
        return DatabaseStatus(
            status="unhealthy", connection=False, error="Database not configured"
        )

    backend = "sqlite" if get_settings().is_sqlite else "postgresql"
    try:
        with connection.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return DatabaseStatus(status="healthy", connection=True, backend=backend)
    except Exception as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        return DatabaseStatus(
            status="unhealthy", connection=False, backend=backend, error=str(e)
        )


@router.get("/", response_model=HealthCheckResponse)
async def healthcheck(request: Request, response: Response) -> HealthCheckResponse:
    """
    ヘルスチェックエンドポイント

    - DB接続状況
    - 管理者認証の設定有無（値そのものは返さない）
    - 登録済みバッチタスク
    - アプリケーションuptime

    DB接続に失敗した場合は503 Service Unavailableを返す
    """
    settings = get_settings()

    start_time = getattr(request.app.state, "start_time", None)
    uptime_seconds = 0.0
    if start_time:
        uptime_seconds = (datetime.now(timezone.utc) - start_time).total_seconds()

    db_status = check_database()
    overall_status = "ok" if db_status.connection else "unhealthy"
    if overall_status == "unhealthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthCheckResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        uptime_seconds=uptime_seconds,
        database=db_status,
        admin_auth_configured=bool(
            settings.ADMIN_PASSWORD_HASH and settings.SESSION_SECRET
        ),
        scheduled_tasks=sorted(task_registry.get_all()),
        environment=settings.normalized_env_mode,
    )
