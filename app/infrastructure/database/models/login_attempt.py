from typing import Optional

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class LoginAttempt(Base):
    """
    管理者ログイン失敗の記録（送信元IPごと）

    時刻はすべてエポックミリ秒で保持する。

    Attributes:
        ip_address: 送信元アドレス（主キー）
        attempts: 連続失敗回数
        last_attempt: 最終失敗時刻
        locked_until: ロック解除時刻（attempts >= 上限の場合のみ設定）
    """

    __tablename__ = "login_attempts"

    ip_address: Mapped[str] = mapped_column(String(64), primary_key=True)
    attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_attempt: Mapped[int] = mapped_column(BigInteger, nullable=False)
    locked_until: Mapped[Optional[int]] = mapped_column(
        BigInteger, nullable=True, index=True
    )

    def __repr__(self) -> str:
        return (
            f"<LoginAttempt(ip_address={self.ip_address}, attempts={self.attempts}, "
            f"locked_until={self.locked_until})>"
        )
