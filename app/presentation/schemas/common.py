"""共通レスポンススキーマ"""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """処理成功のみを返すレスポンス"""

    success: bool = True


class MessageResponse(SuccessResponse):
    """
    メッセージ付き成功レスポンス

    Attributes:
        success: 常にTrue
        message: 利用者向けメッセージ
    """

    message: str
