"""
Presentation層のAPIエラークラス

FastAPI/Pydanticに依存するAPIエラークラス。
ドメインエラーをHTTPレスポンスに変換する。
"""

from typing import Any, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel

from ...domain.exceptions.base import (
    BadRequestError,
    ConfigurationError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    TooManyRequestsError,
    UnauthorizedError,
    ValidationError,
)

ErrorDetails = Optional[list[dict[str, Any]] | dict[str, Any]]


class ErrorResponse(BaseModel):
    """
    標準エラーレスポンス

    Attributes:
        success: 常にFalse
        error: エラーメッセージ（利用者向け）
        code: エラーコード
        details: エラーの詳細情報（フィールド別のバリデーションエラーなど）
    """

    success: bool = False
    error: str
    code: str
    details: ErrorDetails = None


class APIError(HTTPException):
    """
    API エラーの基底クラス

    Attributes:
        status_code: HTTPステータスコード
        error_code: エラーコード
        error_message: エラーメッセージ
        details: エラーの詳細情報
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "internal_server_error"
    error_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: ErrorDetails = None,
    ) -> None:
        self.error_message = message or self.error_message
        self.details = details
        super().__init__(status_code=self.status_code, detail=self.error_message)

    def to_response(self) -> ErrorResponse:
        """
        標準エラーレスポンス形式に変換
        """
        return ErrorResponse(
            error=self.error_message, code=self.error_code, details=self.details
        )


# エラータイプに応じたHTTPステータスコードのマッピング
STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    TooManyRequestsError: status.HTTP_429_TOO_MANY_REQUESTS,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_error_to_api_error(domain_error: DomainError) -> APIError:
    """
    ドメインエラーをAPIエラーに変換

    ConfigurationErrorの内部メッセージはクライアントに返さない。

    Args:
        domain_error: ドメイン層のエラー

    Returns:
        APIError: API層のエラー

    Examples:
        >>> from app.domain.exceptions.base import NotFoundError
        >>> api_err = domain_error_to_api_error(NotFoundError("Activity not found"))
        >>> api_err.status_code
        404
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type in type(domain_error).__mro__:
        if error_type in STATUS_MAP:
            status_code = STATUS_MAP[error_type]
            break

    message = domain_error.message
    details = domain_error.details
    if isinstance(domain_error, ConfigurationError):
        message = ConfigurationError.public_message
        details = None

    api_error = APIError(message=message, details=details)
    api_error.status_code = status_code
    api_error.error_code = domain_error.code
    api_error.error_message = message

    return api_error
