"""
ログイン試行記録のクリーンアップタスク

ロック期限切れの判定はログイン時に遅延評価されるため、
このタスクはロック期限を過ぎた記録を掃除するだけの補助的なもの。
LOGIN_ATTEMPT_CLEANUP_SCHEDULE 設定時のみ登録される。
"""

from app.core.config import get_settings
from app.infrastructure.database.connection import SessionLocal
from app.infrastructure.repositories.login_attempt_repository import (
    LoginAttemptService,
)

from ..base import BatchTask
from ..registry import task_registry


class LoginAttemptCleanupTask(BatchTask):
    """ロック期限切れのログイン試行記録を削除するタスク"""

    task_id = "login_attempt_cleanup"
    description = "Remove expired login lockouts"

    def execute(self) -> int:
        if SessionLocal is None:
            raise RuntimeError("Database not configured")

        settings = get_settings()
        db = SessionLocal()
        try:
            return LoginAttemptService(
                db,
                max_attempts=settings.LOGIN_MAX_ATTEMPTS,
                lockout_minutes=settings.LOGIN_LOCKOUT_MINUTES,
            ).cleanup_stale()
        finally:
            db.close()


def register_login_attempt_cleanup() -> bool:
    """
    スケジュール設定があればタスクを登録する

    Returns:
        登録した場合True
    """
    schedule = get_settings().LOGIN_ATTEMPT_CLEANUP_SCHEDULE
    if not schedule:
        return False

    task_registry.register(LoginAttemptCleanupTask, schedule)
    return True


register_login_attempt_cleanup()
