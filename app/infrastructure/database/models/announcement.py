from sqlalchemy import Boolean, String, true
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Announcement(BaseModel):
    """
    お知らせモデル

    Attributes:
        message: 本文（500文字以内）
        active: 掲示中かどうか
    """

    __tablename__ = "announcements"

    message: Mapped[str] = mapped_column(String(500), nullable=False)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(), index=True
    )

    def __repr__(self) -> str:
        return f"<Announcement(id={self.id}, active={self.active})>"
