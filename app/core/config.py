from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import get_logger

logger = get_logger(__name__)


class Settings(BaseSettings):
    """
    アプリケーション設定
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # 未定義のフィールドを無視
    )

    ENV_MODE: Literal["local", "development", "production", "test"] = "development"

    # カンマ区切り、または"*"
    BACKEND_CORS_ORIGINS: str = ""

    @property
    def cors_origins(self) -> list[str]:
        """CORS許可オリジンのリスト"""
        v = self.BACKEND_CORS_ORIGINS.strip()
        if v == "":
            return []
        if v == "*":
            return ["*"]
        return [i.strip() for i in v.split(",") if i.strip()]

    SECURITY_HEADERS: bool = False
    CSP_POLICY: str = (
        "default-src 'self'; img-src 'self' data:; script-src 'self'; style-src 'self'"
    )

    # 指定時はPOSTGRES_*より優先（例: sqlite:///./db/local.db）
    DATABASE_URL: Optional[str] = None

    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_DB: str = "main"
    POSTGRES_HOST: str = "db"
    POSTGRES_PORT: str = "5432"

    @field_validator("DATABASE_URL")
    @classmethod
    def database_url_can_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v.strip() == "":
            return None
        return v.strip()

    @property
    def database_uri(self) -> str:
        """データベース接続URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        # Kerberos設定済み環境だとタイムアウト待ちにハマるので、gssencmode=disableを設定
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            f"?gssencmode=disable"
        )

    @property
    def has_database(self) -> bool:
        """データベース設定有無"""
        if self.DATABASE_URL:
            return True
        return bool(
            self.POSTGRES_USER and self.POSTGRES_PASSWORD and self.POSTGRES_HOST
        )

    @property
    def is_sqlite(self) -> bool:
        """SQLite使用判定"""
        return self.database_uri.startswith("sqlite")

    # 管理者認証
    ADMIN_PASSWORD_HASH: str = ""
    SESSION_SECRET: str = ""
    SESSION_COOKIE_NAME: str = "session"
    SESSION_EXPIRE: int = 60 * 60 * 24 * 7  # 7 days

    LOGIN_MAX_ATTEMPTS: int = 5
    LOGIN_LOCKOUT_MINUTES: int = 15
    BCRYPT_ROUNDS: int = 12

    @field_validator("ADMIN_PASSWORD_HASH")
    @classmethod
    def validate_admin_password_hash(cls, v: str) -> str:
        """管理者パスワードハッシュ検証"""
        v = v.strip()
        if not v:
            logger.warning("ADMIN_PASSWORD_HASH is not set. Admin login will fail.")
            return ""
        if not v.startswith("$2"):
            # 検証時は常に失敗する（fail closed）
            logger.warning(
                "ADMIN_PASSWORD_HASH does not look like a bcrypt hash. Generate with: "
                'python -m app.utils.secrets_cli hash-password "your-password"'
            )
        return v

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """セッション署名鍵検証"""
        if not v:
            logger.warning("SESSION_SECRET is not set. Admin sessions are disabled.")
            return ""
        if len(v) < 32:
            logger.warning("SESSION_SECRET is shorter than 32 characters.")
        return v

    # 転送ヘッダー（CF-Connecting-IP / X-Forwarded-For）を信頼する接続元
    # カンマ区切り、または"*"。空の場合は常に接続元アドレスを使う
    TRUSTED_PROXY_IPS: str = ""

    @property
    def trusted_proxies(self) -> list[str]:
        """転送ヘッダーを信頼する接続元アドレスのリスト"""
        v = self.TRUSTED_PROXY_IPS.strip()
        if v == "":
            return []
        if v == "*":
            return ["*"]
        return [i.strip() for i in v.split(",") if i.strip()]

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    # cron形式 (例: "*/30 * * * *")
    LOGIN_ATTEMPT_CLEANUP_SCHEDULE: Optional[str] = None

    @field_validator("LOGIN_ATTEMPT_CLEANUP_SCHEDULE")
    @classmethod
    def cleanup_schedule_can_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v.strip() == "":
            return None
        return v

    SENTRY_DSN: Optional[str] = None
    SENTRY_TRACES_SAMPLE_RATE: float = 1.0

    @field_validator("SENTRY_DSN")
    @classmethod
    def sentry_dsn_can_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        return v

    NEW_RELIC_LICENSE_KEY: Optional[str] = None
    NEW_RELIC_APP_NAME: str = "Event RSVP"
    NEW_RELIC_HIGH_SECURITY: bool = False
    NEW_RELIC_MONITOR_MODE: bool = True

    @property
    def normalized_env_mode(self) -> str:
        """監視ツール向けの環境名"""
        if self.ENV_MODE == "development":
            return "staging"
        return self.ENV_MODE

    @property
    def is_local(self) -> bool:
        """ローカル環境かどうか"""
        return self.ENV_MODE == "local"

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.ENV_MODE == "development"

    @property
    def is_staging(self) -> bool:
        """ステージング（開発）環境かどうか"""
        return self.is_development

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.ENV_MODE == "production"

    @property
    def is_test(self) -> bool:
        """テスト環境かどうか"""
        return self.ENV_MODE == "test"


@lru_cache
def get_settings() -> Settings:
    """
    アプリケーション設定を取得（キャッシュ）
    """
    return Settings()
