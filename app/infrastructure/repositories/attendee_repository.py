from typing import Optional

from sqlalchemy import select

from ..database.models.attendee import Attendee
from .base import CRUDRepository


class AttendeeRepository(CRUDRepository[Attendee]):
    """
    RSVP参加者のCRUD操作
    """

    model = Attendee

    def get_by_email(self, email: str) -> Optional[Attendee]:
        """
        メールアドレスで取得

        Args:
            email: 小文字正規化済みのメールアドレス
        """
        return self.db.scalars(select(Attendee).where(Attendee.email == email)).first()
