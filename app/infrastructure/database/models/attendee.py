from typing import Optional

from sqlalchemy import Boolean, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Attendee(BaseModel):
    """
    RSVP参加者モデル

    Attributes:
        name: 氏名
        email: メールアドレス（小文字正規化済み、一意）
        dietary_restrictions: 食事制限
        plus_one: 同伴者あり
        arrival_time: 到着予定
        departure_time: 出発予定
        excited_about: 楽しみにしていること
        payment_status: 支払い状況（pending/completed/refunded/cancelled）
    """

    __tablename__ = "attendees"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    dietary_restrictions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    plus_one: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    arrival_time: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    departure_time: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    excited_about: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    payment_status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="pending", server_default="pending"
    )

    def __repr__(self) -> str:
        return f"<Attendee(id={self.id}, email={self.email})>"
