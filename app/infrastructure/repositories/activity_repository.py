from typing import Optional, Sequence

from sqlalchemy import select

from ..database.models.activity import Activity
from .base import CRUDRepository


class ActivityRepository(CRUDRepository[Activity]):
    """
    アクティビティのCRUD操作
    """

    model = Activity

    def list_by_status(self, status: Optional[str] = None) -> Sequence[Activity]:
        """
        ステータスで絞り込んで取得（Noneの場合は全件）
        """
        if status is None:
            return self.list_all()
        stmt = (
            select(Activity)
            .where(Activity.status == status)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
        )
        return self.db.scalars(stmt).all()

    def list_scheduled(self) -> Sequence[Activity]:
        """スケジュール確定済みを開始時刻順で取得"""
        stmt = (
            select(Activity)
            .where(Activity.status == "scheduled")
            .order_by(Activity.scheduled_start.asc())
        )
        return self.db.scalars(stmt).all()

    def list_approved_and_scheduled(self) -> Sequence[Activity]:
        """承認済み・スケジュール済みをタイトル順で取得"""
        stmt = (
            select(Activity)
            .where(Activity.status.in_(("approved", "scheduled")))
            .order_by(Activity.title.asc())
        )
        return self.db.scalars(stmt).all()
