"""アプリケーションライフサイクル管理"""

import contextlib
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def warn_missing_auth_config(settings: Settings) -> list[str]:
    """
    管理者認証に必要な設定の不足を警告する

    起動は止めず、ログイン時に500（ConfigurationError）とする。

    Returns:
        未設定の項目名
    """
    missing = [
        name
        for name in ("ADMIN_PASSWORD_HASH", "SESSION_SECRET")
        if not getattr(settings, name)
    ]
    for name in missing:
        logger.warning(f"{name} is not set; admin login will fail until it is")
    return missing


def start_batch_scheduler() -> Optional[BackgroundScheduler]:
    """登録済みタスクがあればスケジューラーを起動する"""
    from app.infrastructure.batch import tasks  # noqa: F401
    from app.infrastructure.batch.registry import task_registry
    from app.infrastructure.batch.scheduler import create_scheduler, start_scheduler

    if not task_registry.get_all():
        logger.info("[SCHEDULER] No scheduled tasks; scheduler not started")
        return None

    scheduler = create_scheduler(task_registry)
    start_scheduler(scheduler)
    return scheduler


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    起動時: 起動時刻の記録、認証設定の確認、マイグレーション、スケジューラー起動
    終了時: スケジューラー停止
    """
    settings = get_settings()
    app.state.start_time = datetime.now(timezone.utc)

    warn_missing_auth_config(settings)

    if settings.has_database:
        from app.infrastructure.database.migration import run_migrations

        run_migrations(logger_key="uvicorn")
    else:
        logger.info("Database migrations are disabled")

    scheduler = start_batch_scheduler()
    app.state.scheduler = scheduler

    yield

    if scheduler is not None:
        from app.infrastructure.batch.scheduler import stop_scheduler

        stop_scheduler(scheduler)
