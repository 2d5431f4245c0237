"""
データベースマイグレーション実行モジュール

FastAPIアプリケーション起動時にAlembicマイグレーションを
プログラム的に実行するための機能を提供します。
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from app.core.config import Settings, get_settings
from app.core.logging import get_logger

SCRIPT_LOCATION = (Path(__file__).parent / "alembic").resolve()


def _configure_migration_logging(settings: Settings) -> None:
    """
    マイグレーション用のロガーを設定する。

    Alembic/SQLAlchemyのロガーをuvicornロガーに統合し、
    環境に応じた適切なログレベルを設定する。
    """
    uvicorn_logger = logging.getLogger("uvicorn")

    alembic_logger = logging.getLogger("alembic")
    for handler in uvicorn_logger.handlers:
        alembic_logger.addHandler(handler)

    if settings.is_staging:
        alembic_logger.setLevel(logging.DEBUG)
    else:
        alembic_logger.setLevel(logging.INFO)

    # マイグレーション時のSQL文表示用
    sqlalchemy_logger = logging.getLogger("sqlalchemy.engine")
    for handler in uvicorn_logger.handlers:
        sqlalchemy_logger.addHandler(handler)

    if settings.is_staging:
        sqlalchemy_logger.setLevel(logging.INFO)
    else:
        sqlalchemy_logger.setLevel(logging.WARNING)


def create_alembic_config(database_url: str) -> Config:
    """
    Alembic設定オブジェクトを作成する。

    Args:
        database_url: 対象データベースのURL

    Returns:
        Config: Alembic設定オブジェクト
    """
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    # ConfigParserの補間対策
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return alembic_cfg


def run_migrations(logger_key: str | None = None) -> None:
    """
    データベースマイグレーションを実行

    Alembicを使用してデータベースを最新の状態に更新します。
    マイグレーションが失敗した場合は例外をraiseし、
    アプリケーション起動を停止します。

    Raises:
        RuntimeError: マイグレーション実行に失敗した場合
    """
    logger = get_logger(logger_key or __name__)
    try:
        settings = get_settings()

        _configure_migration_logging(settings)
        alembic_cfg = create_alembic_config(settings.database_uri)

        logger.info("Starting database migrations...")
        logger.info(f"Script location: {SCRIPT_LOCATION}")
        logger.info(
            f"Database: {make_url(settings.database_uri).render_as_string(hide_password=True)}"
        )

        command.upgrade(alembic_cfg, "head")

        logger.info("Database migrations completed successfully")

    except Exception as e:
        logger.error(f"Database migration failed: {e}", exc_info=True)
        # マイグレーション失敗時は起動を停止
        raise RuntimeError(f"Database migration failed: {e}") from e
