from typing import Sequence

from sqlalchemy import select

from ..database.models.announcement import Announcement
from .base import CRUDRepository


class AnnouncementRepository(CRUDRepository[Announcement]):
    """
    お知らせのCRUD操作
    """

    model = Announcement

    def list_active(self) -> Sequence[Announcement]:
        """掲示中のお知らせを新しい順で取得"""
        stmt = (
            select(Announcement)
            .where(Announcement.active.is_(True))
            .order_by(Announcement.created_at.desc(), Announcement.id.desc())
        )
        return self.db.scalars(stmt).all()

    def set_active(self, announcement: Announcement, active: bool) -> Announcement:
        return self.update(announcement, {"active": active})
