from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Setting(Base):
    """
    イベント全体設定（キーバリュー）

    主なキー: rsvp_open, activity_submissions_open,
    event_date_start, event_date_end, location
    真偽値は"true"/"false"の文字列で保持する。
    """

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Setting(key={self.key}, value={self.value})>"
