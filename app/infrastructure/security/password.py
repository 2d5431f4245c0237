"""
管理者パスワードのハッシュ化/検証

bcryptを使用。ストレッチング回数はBCRYPT_ROUNDSで指定する。
"""

import logging
from typing import Optional

import bcrypt

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    パスワードのbcryptハッシュを生成

    Args:
        password: 平文パスワード
        rounds: コストファクター（Noneの場合は設定値を使用）

    Returns:
        bcryptハッシュ文字列（$2b$...）
    """
    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    平文パスワードをbcryptハッシュと照合

    ハッシュが不正な形式の場合も含め、例外は送出せずFalseを返す（fail closed）。

    Args:
        password: 平文パスワード
        password_hash: 保存されているbcryptハッシュ

    Returns:
        一致する場合True
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError, AttributeError) as e:
        logger.error(f"Error verifying password: {e}")
        return False
