"""
管理者セッショントークン

サーバー側にセッションテーブルを持たない署名付きトークン。
形式: {random}.{expires_at_ms}.{signature}

- random: 32バイトの暗号論的乱数（HEX）
- expires_at_ms: 有効期限（エポックミリ秒）
- signature: "{random}.{expires_at_ms}" のHMAC-SHA256（HEX）

ログアウトはクライアント側のCookie破棄のみで、失効リストは持たない。
"""

import hashlib
import hmac
import logging
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SESSION_DURATION_MS = 7 * 24 * 60 * 60 * 1000  # 7 days
RANDOM_BYTES = 32

Clock = Callable[[], int]


def current_time_millis() -> int:
    """現在時刻（エポックミリ秒）"""
    return time.time_ns() // 1_000_000


def _sign(payload: str, secret: str) -> str:
    return hmac.new(
        secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256
    ).hexdigest()


@dataclass(frozen=True)
class SessionToken:
    """
    デコード済みセッショントークン

    Attributes:
        random: 乱数部（HEX）
        expires_at: 有効期限（エポックミリ秒）
        signature: 署名部（HEX）
    """

    random: str
    expires_at: int
    signature: str

    @property
    def payload(self) -> str:
        """署名対象文字列"""
        return f"{self.random}.{self.expires_at}"

    def encode(self) -> str:
        return f"{self.payload}.{self.signature}"

    @classmethod
    def decode(cls, token: str) -> Optional["SessionToken"]:
        """
        トークン文字列を分解

        Returns:
            形式不正の場合はNone
        """
        parts = token.split(".")
        if len(parts) != 3:
            return None
        random_part, expires_str, signature = parts
        # int()は符号や空白を受け付けるため、数字のみを許可
        if not (expires_str.isascii() and expires_str.isdigit()):
            return None
        return cls(random=random_part, expires_at=int(expires_str), signature=signature)

    def is_expired(self, now_ms: int) -> bool:
        """有効期限時刻ちょうどで失効扱い"""
        return now_ms >= self.expires_at

    def has_valid_signature(self, secret: str) -> bool:
        """
        署名を定数時間比較で検証

        HEX文字列のまま比較する（大文字小文字の違いも改ざんとみなす）
        """
        provided = self.signature.encode("utf-8")
        expected = _sign(self.payload, secret).encode("utf-8")
        if len(provided) != len(expected):
            return False
        return hmac.compare_digest(provided, expected)


def issue_session_token(
    secret: str,
    clock: Clock = current_time_millis,
    duration_ms: int = SESSION_DURATION_MS,
) -> str:
    """
    セッショントークンを発行

    Args:
        secret: 署名鍵（SESSION_SECRET）
        clock: 現在時刻取得関数（エポックミリ秒）
        duration_ms: 有効期間（ミリ秒）

    Returns:
        エンコード済みトークン

    Raises:
        ValueError: 署名鍵が空の場合（設定エラー）
    """
    if not secret:
        raise ValueError("SESSION_SECRET is required")

    random_part = secrets.token_hex(RANDOM_BYTES)
    expires_at = clock() + duration_ms
    payload = f"{random_part}.{expires_at}"
    token = SessionToken(
        random=random_part, expires_at=expires_at, signature=_sign(payload, secret)
    )
    return token.encode()


def verify_session_token(
    token: str, secret: str, clock: Clock = current_time_millis
) -> bool:
    """
    セッショントークンを検証

    期限切れ・改ざん・形式不正のいずれも区別せずFalseを返す。
    例外は送出しない。

    Args:
        token: Cookieから取得したトークン
        secret: 署名鍵（SESSION_SECRET）
        clock: 現在時刻取得関数（エポックミリ秒）

    Returns:
        有効な場合True
    """
    try:
        if not secret:
            logger.error("SESSION_SECRET is required")
            return False

        decoded = SessionToken.decode(token)
        if decoded is None:
            return False

        if decoded.is_expired(clock()):
            return False

        return decoded.has_valid_signature(secret)
    except Exception as e:
        logger.error(f"Error verifying session token: {e}")
        return False
