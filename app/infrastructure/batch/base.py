"""バッチタスクの基底クラス"""

import time
from abc import ABC, abstractmethod
from typing import ClassVar

import sentry_sdk

from app.core.logging import get_logger


class BatchTask(ABC):
    """
    バッチタスクの基底クラス。

    サブクラスはtask_idを定義し、処理件数を返すexecute()を実装する。
    run()は開始/終了ログ、処理時間の計測、失敗時のSentry送信を行う。

    Example:
        >>> class PurgeTask(BatchTask):
        ...     task_id = "purge"
        ...     def execute(self) -> int:
        ...         return 0
        ...
        >>> PurgeTask().run()
        0
    """

    task_id: ClassVar[str]
    description: ClassVar[str] = ""

    def __init__(self) -> None:
        self.logger = get_logger(self.__class__.__module__)

    @abstractmethod
    def execute(self) -> int:
        """
        タスクの実行処理

        Returns:
            処理した件数
        """

    def run(self) -> int:
        """
        タスクを実行し、処理件数を返す

        Raises:
            Exception: execute()で発生した例外を再送出
        """
        self.logger.info(f"[BATCH] {self.task_id} start")
        started = time.monotonic()
        try:
            count = self.execute()
        except Exception as e:
            self.logger.error(f"[BATCH] {self.task_id} failed: {e}", exc_info=True)
            sentry_sdk.capture_exception(e)
            raise
        elapsed = time.monotonic() - started
        self.logger.info(
            f"[BATCH] {self.task_id} completed: {count} rows ({elapsed:.3f}s)"
        )
        return count
