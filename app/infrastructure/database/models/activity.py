from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Activity(BaseModel):
    """
    アクティビティモデル

    一般参加者が提案し（pending）、管理者が承認（approved）・
    日時と場所を確定（scheduled）する。

    scheduled_start/scheduled_endはクライアントから受け取ったISO 8601文字列をそのまま保持する。
    """

    __tablename__ = "activities"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    host_name: Mapped[str] = mapped_column(String(255), nullable=False)
    host_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    equipment_needed: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    time_preference: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    activity_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="pending", server_default="pending", index=True
    )
    scheduled_start: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    scheduled_end: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, title={self.title}, status={self.status})>"
