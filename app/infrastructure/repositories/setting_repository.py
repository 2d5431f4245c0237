"""
イベント全体設定のリポジトリ

設定はキーバリュー形式で保持し、真偽値は"true"/"false"の文字列とする。
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session as DBSession

from ..database.models.setting import Setting

RSVP_OPEN = "rsvp_open"
ACTIVITY_SUBMISSIONS_OPEN = "activity_submissions_open"


class SettingRepository:
    """
    設定の取得/更新
    """

    def __init__(self, db: DBSession):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        return self.db.scalar(select(Setting.value).where(Setting.key == key))

    def set(self, key: str, value: str, commit: bool = True) -> None:
        """
        設定値を保存（存在しなければ作成）

        Args:
            key: 設定キー
            value: 設定値
            commit: Falseの場合は呼び出し側でコミットする
        """
        self.db.merge(Setting(key=key, value=value))
        if commit:
            self.db.commit()

    def set_many(self, values: dict[str, str]) -> None:
        """複数の設定値を1トランザクションで保存"""
        for key, value in values.items():
            self.set(key, value, commit=False)
        self.db.commit()

    def get_all(self) -> dict[str, str]:
        """全設定をキー→値の辞書で取得"""
        rows = self.db.scalars(select(Setting).order_by(Setting.key)).all()
        return {row.key: row.value for row in rows}

    def is_enabled(self, key: str) -> bool:
        """真偽値設定が"true"かどうか"""
        return self.get(key) == "true"
