"""
ドメイン層の例外クラス

ビジネスロジックで発生するエラーを表現する純粋なPython例外。
フレームワークに依存しない。
"""

from typing import Any, Optional


ErrorDetails = Optional[dict[str, Any] | list[dict[str, Any]]]


class DomainError(Exception):
    """
    ドメイン層のベース例外

    Attributes:
        message: エラーメッセージ
        code: エラーコード（識別子）
        details: エラーの詳細情報（オプション）
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: ErrorDetails = None,
    ) -> None:
        """
        Args:
            message: エラーメッセージ
            code: エラーコード
            details: エラーの詳細情報（オプション）
        """
        self.message = message
        self.code = code
        self.details = details
        super().__init__(message)


class NotFoundError(DomainError):
    """リソースが見つからない場合のエラー"""

    def __init__(
        self,
        message: str = "Resource not found",
        details: ErrorDetails = None,
    ) -> None:
        super().__init__(message=message, code="not_found", details=details)


class BadRequestError(DomainError):
    """不正なリクエストエラー"""

    def __init__(
        self,
        message: str = "Bad request",
        details: ErrorDetails = None,
    ) -> None:
        super().__init__(message=message, code="bad_request", details=details)


class UnauthorizedError(DomainError):
    """認証エラー"""

    def __init__(
        self,
        message: str = "Authentication required",
        details: ErrorDetails = None,
    ) -> None:
        super().__init__(message=message, code="unauthorized", details=details)


class ForbiddenError(DomainError):
    """アクセス権限エラー（受付終了など）"""

    def __init__(
        self,
        message: str = "Access forbidden",
        details: ErrorDetails = None,
    ) -> None:
        super().__init__(message=message, code="forbidden", details=details)


class ConflictError(DomainError):
    """一意制約違反などの競合エラー"""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: ErrorDetails = None,
    ) -> None:
        super().__init__(message=message, code="conflict", details=details)


class TooManyRequestsError(DomainError):
    """ログイン試行回数超過（ロックアウト中）"""

    def __init__(
        self,
        message: str = "Too many requests",
        details: ErrorDetails = None,
    ) -> None:
        super().__init__(message=message, code="too_many_requests", details=details)


class ConfigurationError(DomainError):
    """
    サーバー設定エラー

    SESSION_SECRETやADMIN_PASSWORD_HASHの未設定など。
    messageはサーバーログ用で、クライアントには汎用メッセージのみ返す。
    """

    public_message = "Server configuration error. Please contact the administrator."

    def __init__(self, message: str = "Server configuration error") -> None:
        super().__init__(message=message, code="configuration_error", details=None)


class ValidationError(BadRequestError):
    """バリデーションエラー"""

    def __init__(
        self,
        message: str = "Validation failed",
        details: ErrorDetails = None,
    ) -> None:
        """
        Args:
            message: エラーメッセージ
            details: フィールド名をキーとしたエラー詳細、またはエラーのリスト
        """
        super().__init__(message=message, details=None)
        self.code = "validation_error"
        self.details = details
