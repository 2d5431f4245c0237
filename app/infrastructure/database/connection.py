from typing import Any, Generator, Optional
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session
import logging

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def build_engine(settings: Settings) -> Engine:
    """
    設定からEngineを生成

    SQLiteはスレッド間共有のためcheck_same_threadを無効化し、
    PostgreSQLはコネクションプールを設定する
    """
    options: dict[str, Any]
    if settings.is_sqlite:
        options = {"connect_args": {"check_same_thread": False}}
    else:
        options = {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_timeout": 30,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
        }
    return create_engine(settings.database_uri, **options)


# データベース接続設定
engine: Optional[Engine]
SessionLocal: Optional[sessionmaker[Session]]

if settings.has_database:
    engine = build_engine(settings)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    logger.info(
        f"Database connection established ({'sqlite' if settings.is_sqlite else 'postgresql'})"
    )
else:
    engine = None
    SessionLocal = None
    logger.warning("DATABASE_URL not set. Database functionality disabled.")


def get_db() -> Generator[Session, None, None]:
    """
    DB接続のためのデペンデンシー
    yield構文でセッションをコンテキストマネージャとして提供
    """
    if not SessionLocal:
        raise RuntimeError(
            "Database not configured. Set DATABASE_URL environment variable."
        )

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
