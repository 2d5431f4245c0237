"""アプリケーション用のロギングユーティリティ。"""

import logging
import sys

HEALTHCHECK_PATH = "/api/system/healthcheck"
CLI_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def is_fastapi_context() -> bool:
    """
    FastAPI/uvicornコンテキストで実行中かどうかを判定する。

    Returns:
        bool: uvicornがロードされている場合True、そうでない場合False。
    """
    return "uvicorn" in sys.modules


def get_logger(name: str) -> logging.Logger:
    """
    ロガーインスタンスを取得する。

    Webサーバーで実行中の場合は"uvicorn"ロガーを使用し、
    アクセスログ・ログイン試行の記録などを同じ出力先にまとめる。
    CLIやマイグレーションでは呼び出し元のモジュール名のロガーを返す。

    Args:
        name: ロガー名、通常は呼び出し元モジュールの__name__を指定。

    Returns:
        logging.Logger: 設定済みのロガーインスタンス。

    Examples:
        >>> logger = get_logger(__name__)  # uvicorn起動時はuvicornロガー
        >>> logger = get_logger("app.utils.secrets_cli")  # CLI実行時はモジュールのロガー
    """
    if is_fastapi_context():
        return logging.getLogger("uvicorn")
    return logging.getLogger(name)


def configure_cli_logging(verbose: bool = False) -> None:
    """
    CLI実行時のログ出力を設定する（標準エラー出力）

    Args:
        verbose: TrueならDEBUGレベルまで出力
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=CLI_LOG_FORMAT,
        stream=sys.stderr,
    )


class HealthCheckFilter(logging.Filter):
    """ヘルスチェックのアクセスログを除外するフィルター"""

    def filter(self, record: logging.LogRecord) -> bool:
        return HEALTHCHECK_PATH not in record.getMessage()


def install_access_log_filters() -> None:
    """uvicornのアクセスログにフィルターを追加"""
    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
