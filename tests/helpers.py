"""SQLiteテスト用ヘルパー関数"""

from typing import Any, Iterator

from alembic import command
from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.infrastructure.database.migration import create_alembic_config
from app.infrastructure.database.models import (
    Activity,
    Announcement,
    Attendee,
    LoginAttempt,
    Setting,
)

from tests.env import (  # noqa: F401
    TEST_ADMIN_PASSWORD,
    TEST_SESSION_SECRET,
    make_password_hash,
)

DEFAULT_SETTINGS = {
    "rsvp_open": "true",
    "activity_submissions_open": "true",
    "event_date_start": "",
    "event_date_end": "",
    "location": "",
}


def run_migrations(database_url: str) -> None:
    """
    Alembicマイグレーションを実行する。

    Args:
        database_url: 対象データベースのURL
    """
    command.upgrade(create_alembic_config(database_url), "head")


def reset_database(db: Session) -> None:
    """全テーブルを空にし、設定を初期値に戻す"""
    for model in (Attendee, Activity, Announcement, LoginAttempt, Setting):
        db.execute(delete(model))
    for key, value in DEFAULT_SETTINGS.items():
        db.add(Setting(key=key, value=value))
    db.commit()


class FakeClock:
    """
    テスト用の時計（エポックミリ秒）

    Example:
        >>> clock = FakeClock(1_000)
        >>> clock.advance(minutes=15)
        >>> clock()
        901000
    """

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int = 0, minutes: int = 0) -> None:
        self.now_ms += ms + minutes * 60 * 1000


def login(client: Any, password: str = TEST_ADMIN_PASSWORD, **kwargs: Any) -> Any:
    """管理者ログインAPIを呼び出す"""
    return client.post("/api/admin/auth", json={"password": password}, **kwargs)


def iter_failed_logins(client: Any, count: int, **kwargs: Any) -> Iterator[Any]:
    """誤ったパスワードでcount回ログインを試みる"""
    for _ in range(count):
        yield login(client, password="wrong-password", **kwargs)
