"""
Alembic環境設定

create_alembic_config() で作成した設定から実行される。
接続先URLは sqlalchemy.url（未設定の場合はアプリケーション設定）を使う。
"""

from typing import Any

from alembic import context
from sqlalchemy import create_engine, pool

from app.core.config import get_settings
from app.infrastructure.database import models  # noqa: F401
from app.infrastructure.database.models.base import Base


def database_url() -> str:
    return context.config.get_main_option("sqlalchemy.url") or (
        get_settings().database_uri
    )


def configure_options(url: str) -> dict[str, Any]:
    # SQLiteはALTER TABLEの制約が多いため、テーブル再作成方式で変更する
    return {
        "target_metadata": Base.metadata,
        "render_as_batch": url.startswith("sqlite"),
        "compare_type": True,
    }


def run_migrations_offline(url: str) -> None:
    """SQLスクリプトを出力する"""
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **configure_options(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online(url: str) -> None:
    engine = create_engine(url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **configure_options(url))
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline(database_url())
else:
    run_migrations_online(database_url())
