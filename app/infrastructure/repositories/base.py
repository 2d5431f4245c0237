"""
汎用CRUDリポジトリ

エンティティごとのリポジトリはこのクラスを継承し、
固有の検索メソッドのみを追加する。
"""

from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session as DBSession

from ..database.models.base import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)

# 更新対象外のカラム
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class CRUDRepository(Generic[ModelType]):
    """
    CRUD操作の基底クラス

    DBセッションはコンストラクタで明示的に受け取る。
    """

    model: type[ModelType]

    def __init__(self, db: DBSession):
        """
        Args:
            db: DBセッション
        """
        self.db = db

    def get(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def list_all(self) -> Sequence[ModelType]:
        """作成日時の降順で全件取得"""
        stmt = select(self.model).order_by(
            self.model.created_at.desc(), self.model.id.desc()
        )
        return self.db.scalars(stmt).all()

    def create(self, **fields: Any) -> ModelType:
        obj = self.model(**fields)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def update(self, obj: ModelType, updates: dict[str, Any]) -> ModelType:
        """
        部分更新

        Args:
            obj: 更新対象
            updates: カラム名をキーとした更新値（id・タイムスタンプは無視）
        """
        for key, value in updates.items():
            if key in PROTECTED_FIELDS:
                continue
            setattr(obj, key, value)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: ModelType) -> None:
        self.db.delete(obj)
        self.db.commit()
