"""
管理者ログイン試行の追跡サービス

送信元IPごとに連続失敗回数を記録し、上限到達でロックアウトする。
- ロック期限切れはチェック時に遅延削除（バッチでの一括削除は補助的なもの）
- 失敗回数の加算はUPDATE文内でのアトミックな加算で行う
"""

import logging
from typing import Optional, cast

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DBSession

from ..database.models.login_attempt import LoginAttempt
from ..security.session_token import Clock, current_time_millis

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5
LOCKOUT_MINUTES = 15


class LoginAttemptService:
    """
    ログイン試行追跡サービス
    """

    def __init__(
        self,
        db: DBSession,
        clock: Clock = current_time_millis,
        max_attempts: int = MAX_ATTEMPTS,
        lockout_minutes: int = LOCKOUT_MINUTES,
    ):
        """
        Args:
            db: DBセッション
            clock: 現在時刻取得関数（エポックミリ秒）、テスト時に差し替え可能
            max_attempts: ロックアウトまでの失敗回数
            lockout_minutes: ロックアウト時間（分）
        """
        self.db = db
        self.clock = clock
        self.max_attempts = max_attempts
        self.lockout_minutes = lockout_minutes

    @property
    def lockout_ms(self) -> int:
        return self.lockout_minutes * 60 * 1000

    def _get_attempts(self, ip_address: str) -> Optional[int]:
        return self.db.scalar(
            select(LoginAttempt.attempts).where(LoginAttempt.ip_address == ip_address)
        )

    def is_locked(self, ip_address: str) -> bool:
        """
        ロックアウト中かどうか

        ロック期限を過ぎている場合は記録を削除してFalseを返す。

        Args:
            ip_address: 送信元アドレス

        Returns:
            ロックアウト中の場合True
        """
        locked_until = self.db.scalar(
            select(LoginAttempt.locked_until).where(
                LoginAttempt.ip_address == ip_address
            )
        )
        if locked_until is None:
            return False

        if self.clock() < locked_until:
            return True

        logger.info(f"Login lockout expired: {ip_address}")
        self.clear(ip_address)
        return False

    def record_failure(self, ip_address: str) -> bool:
        """
        ログイン失敗を記録

        Args:
            ip_address: 送信元アドレス

        Returns:
            今回の失敗でロックアウトされた場合True
        """
        now = self.clock()

        if not self._increment(ip_address, now):
            try:
                self.db.add(
                    LoginAttempt(
                        ip_address=ip_address,
                        attempts=1,
                        last_attempt=now,
                        locked_until=None,
                    )
                )
                self.db.flush()
            except IntegrityError:
                # 同一IPからの同時リクエストが先にINSERTした場合
                self.db.rollback()
                self._increment(ip_address, now)

        attempts = self._get_attempts(ip_address) or 0
        locked = attempts >= self.max_attempts
        self.db.execute(
            update(LoginAttempt)
            .where(LoginAttempt.ip_address == ip_address)
            .values(locked_until=now + self.lockout_ms if locked else None)
        )
        self.db.commit()

        if locked:
            logger.warning(
                f"Login locked out: {ip_address} ({attempts} failed attempts, "
                f"{self.lockout_minutes} minutes)"
            )
        else:
            logger.info(f"Login failed: {ip_address} ({attempts} failed attempts)")
        return locked

    def _increment(self, ip_address: str, now: int) -> bool:
        result = self.db.execute(
            update(LoginAttempt)
            .where(LoginAttempt.ip_address == ip_address)
            .values(attempts=LoginAttempt.attempts + 1, last_attempt=now)
        )
        return cast(int, getattr(result, "rowcount", 0)) > 0

    def clear(self, ip_address: str) -> None:
        """
        試行記録を削除（ログイン成功時・ロック期限切れ時）

        Args:
            ip_address: 送信元アドレス
        """
        self.db.execute(
            delete(LoginAttempt).where(LoginAttempt.ip_address == ip_address)
        )
        self.db.commit()

    def remaining_attempts(self, ip_address: str) -> int:
        """
        ロックアウトまでの残り試行回数

        Args:
            ip_address: 送信元アドレス

        Returns:
            残り回数（0未満にはならない）、記録がない場合は上限値
        """
        attempts = self._get_attempts(ip_address)
        if attempts is None:
            return self.max_attempts
        return max(0, self.max_attempts - attempts)

    def cleanup_stale(self) -> int:
        """
        ロック期限を過ぎた試行記録を一括削除

        ロックされていない記録は経過時間に関係なく残す（失敗回数は成功時と
        ロック期限切れ時にのみリセットされる）。

        Returns:
            削除された件数
        """
        now = self.clock()
        try:
            result = self.db.execute(
                delete(LoginAttempt).where(LoginAttempt.locked_until <= now)
            )
            self.db.commit()
            count = cast(int, getattr(result, "rowcount", 0))
            if count > 0:
                logger.info(f"Cleaned up {count} stale login attempt records")
            return count
        except Exception as e:
            logger.error(f"Failed to cleanup login attempts: {e}")
            self.db.rollback()
            return 0
