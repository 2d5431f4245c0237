"""
pytest設定と共通フィクスチャ（SQLiteベース）
"""

from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from tests.env import TEST_ADMIN_PASSWORD, configure_test_environment

# DB接続・管理者認証の設定はappのインポート時に読み込まれるため、
# 以降のインポートより前に環境変数を設定する
_test_db_dir = configure_test_environment()

from app.core.config import get_settings  # noqa: E402
from app.infrastructure.database import get_db  # noqa: E402
from app.main import app  # noqa: E402
from tests.helpers import reset_database, run_migrations  # noqa: E402


def pytest_unconfigure(config: Any) -> None:
    """一時ディレクトリ（SQLiteファイル）を削除"""
    _test_db_dir.cleanup()


@pytest.fixture(scope="session")
def test_engine() -> Generator[Engine, None, None]:
    """
    マイグレーション済みのテスト用Engineを作成する。

    Yields:
        SQLAlchemy Engine
    """
    database_url = get_settings().database_uri
    run_migrations(database_url)

    engine = create_engine(
        database_url, connect_args={"check_same_thread": False}, echo=False
    )

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine: Engine) -> Generator[Session, None, None]:
    """
    テスト用DBセッション

    リポジトリがコミットするため、テスト前後で全テーブルを初期状態へ戻す。

    Args:
        test_engine: テスト用Engine

    Yields:
        SQLAlchemy Session
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )
    session = TestingSessionLocal()
    reset_database(session)

    yield session

    session.rollback()
    reset_database(session)
    session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    テスト用FastAPIクライアント

    Args:
        db_session: テスト用DBセッション

    Yields:
        FastAPI TestClient
    """

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    """
    ログイン済みのクライアント

    Returns:
        セッションCookieを保持したTestClient
    """
    response = client.post("/api/admin/auth", json={"password": TEST_ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
