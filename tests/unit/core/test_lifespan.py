"""
ライフサイクル管理の単体テスト
"""

from typing import Any
from unittest.mock import Mock, patch

from app.core.config import Settings
from app.core.lifespan import start_batch_scheduler, warn_missing_auth_config
from app.infrastructure.batch import registry as registry_module
from app.infrastructure.batch.base import BatchTask
from app.infrastructure.batch.registry import TaskRegistry


class PurgeTask(BatchTask):
    task_id = "purge"

    def execute(self) -> int:
        return 0


class TestWarnMissingAuthConfig:
    """warn_missing_auth_config()のテスト"""

    @patch("app.core.lifespan.logger")
    def test_reports_missing_settings(self, mock_logger: Mock) -> None:
        """未設定の認証設定が警告されること"""
        settings = Settings(_env_file=None, ADMIN_PASSWORD_HASH="", SESSION_SECRET="")

        missing = warn_missing_auth_config(settings)

        assert missing == ["ADMIN_PASSWORD_HASH", "SESSION_SECRET"]
        assert mock_logger.warning.call_count == 2

    @patch("app.core.lifespan.logger")
    def test_nothing_missing(self, mock_logger: Mock) -> None:
        """設定済みの場合は警告しないこと"""
        assert warn_missing_auth_config(Settings(_env_file=None)) == []
        mock_logger.warning.assert_not_called()


class TestStartBatchScheduler:
    """start_batch_scheduler()のテスト"""

    def test_not_started_without_tasks(self, monkeypatch: Any) -> None:
        """登録タスクがない場合はスケジューラーを起動しないこと"""
        monkeypatch.setattr(registry_module, "task_registry", TaskRegistry())

        assert start_batch_scheduler() is None

    @patch("app.infrastructure.batch.scheduler.start_scheduler")
    def test_started_with_tasks(self, mock_start: Mock, monkeypatch: Any) -> None:
        """登録タスクがある場合はジョブ付きで起動すること"""
        registry = TaskRegistry()
        registry.register(PurgeTask, "0 * * * *")
        monkeypatch.setattr(registry_module, "task_registry", registry)

        scheduler = start_batch_scheduler()

        assert scheduler is not None
        assert scheduler.get_job("purge") is not None
        mock_start.assert_called_once_with(scheduler)
