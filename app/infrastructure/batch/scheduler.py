"""バッチスケジューラー管理"""

from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from app.core.logging import get_logger

from .base import BatchTask
from .registry import TaskRegistry, task_registry

logger = get_logger(__name__)


def run_task(task_class: type[BatchTask]) -> None:
    """ジョブ実行ごとに新しいタスクインスタンスで実行する"""
    task_class().run()


def create_scheduler(registry: Optional[TaskRegistry] = None) -> BackgroundScheduler:
    """
    スケジューラーを作成し、登録されたタスクをセットアップする。

    同一タスクの多重実行は行わず、取りこぼした実行はまとめて1回にする。

    Args:
        registry: タスクレジストリ（省略時はグローバルレジストリ）

    Returns:
        BackgroundScheduler: タスクが登録されたスケジューラー
    """
    registry = registry or task_registry
    scheduler = BackgroundScheduler(
        job_defaults={"coalesce": True, "max_instances": 1}
    )

    for task_id, scheduled in registry.get_all().items():
        scheduler.add_job(
            run_task,
            trigger=scheduled.trigger,
            args=[scheduled.task_class],
            id=task_id,
            name=scheduled.task_class.description or task_id,
        )
        logger.info(f"[SCHEDULER] Registered task: {task_id}")

    return scheduler


def start_scheduler(scheduler: BackgroundScheduler) -> None:
    """
    スケジューラーを起動し、次回実行時刻をログに出力する。

    Args:
        scheduler: 起動するスケジューラー
    """
    scheduler.start()
    logger.info("[SCHEDULER] Started")

    for job in scheduler.get_jobs():
        logger.info(f"[SCHEDULER] {job.id} next run: {job.next_run_time}")


def stop_scheduler(scheduler: BackgroundScheduler) -> None:
    """
    スケジューラーを停止する。実行中のタスクの完了は待たない。

    Args:
        scheduler: 停止するスケジューラー
    """
    if scheduler.running:
        scheduler.shutdown(wait=False)
    logger.info("[SCHEDULER] Stopped")
