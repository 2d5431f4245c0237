from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, declarative_base

Base = declarative_base()


class TimeStampMixin:
    """
    タイムスタンプMixin

    func.now()はPostgreSQLではnow()、SQLiteではCURRENT_TIMESTAMPに展開される
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class BaseModel(Base, TimeStampMixin):
    """
    ベースモデル
    全てのエンティティモデルで継承して使用
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
