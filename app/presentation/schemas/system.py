"""システム関連のスキーマ定義"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


class DatabaseStatus(BaseModel):
    """
    データベース接続状況

    Attributes:
        status: healthy/unhealthy
        connection: SELECT 1 が成功したか
        backend: 接続先の種類（未設定時はNone）
        error: エラーメッセージ（エラー時のみ）
    """

    status: Literal["healthy", "unhealthy"]
    connection: bool
    backend: Optional[Literal["sqlite", "postgresql"]] = None
    error: Optional[str] = None


class HealthCheckResponse(BaseModel):
    """
    ヘルスチェックレスポンス

    認証不要のため、設定値そのものは含めず有無のみを返す。

    Attributes:
        status: 全体の状態（DB接続に失敗した場合はunhealthy）
        timestamp: レスポンス生成時刻
        uptime_seconds: 起動からの経過秒数
        database: データベース接続状況
        admin_auth_configured: 管理者パスワードハッシュと署名鍵が両方設定済みか
        scheduled_tasks: 登録済みバッチタスクのID
        environment: 実行環境（production/staging/local/test）
    """

    status: Literal["ok", "unhealthy"]
    timestamp: datetime
    uptime_seconds: float
    database: DatabaseStatus
    admin_auth_configured: bool
    scheduled_tasks: list[str]
    environment: str
