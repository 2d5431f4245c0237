"""バッチタスクの登録レジストリ"""

from typing import NamedTuple

from apscheduler.triggers.cron import CronTrigger

from .base import BatchTask


class ScheduledTask(NamedTuple):
    task_class: type[BatchTask]
    trigger: CronTrigger


class TaskRegistry:
    """
    スケジュール対象のバッチタスク一覧

    タスクIDはクラスのtask_idを使う。同じIDで再登録した場合は上書きする。
    """

    def __init__(self) -> None:
        self.tasks: dict[str, ScheduledTask] = {}

    def register(self, task_class: type[BatchTask], cron: str) -> None:
        """
        タスクを登録する

        Args:
            task_class: BatchTaskのサブクラス（実行ごとにインスタンス化する）
            cron: cron形式のスケジュール (例: "*/30 * * * *")

        Raises:
            ValueError: 無効なcron形式の場合
        """
        self.tasks[task_class.task_id] = ScheduledTask(
            task_class, CronTrigger.from_crontab(cron)
        )

    def get_all(self) -> dict[str, ScheduledTask]:
        return self.tasks


task_registry = TaskRegistry()
