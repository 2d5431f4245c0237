"""監視ツール（Sentry, New Relic）の初期化"""

import os
from typing import Any, Optional

import newrelic.agent
import sentry_sdk

from app.core.config import get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)

FILTERED = "[Filtered]"
SENSITIVE_KEYS = frozenset({"password", "cookie", "set-cookie", "authorization"})


def scrub_sensitive_data(
    event: dict[str, Any], hint: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    """
    Sentry送信前に管理者パスワード・セッションCookieを除去する

    Args:
        event: Sentryイベント
        hint: Sentryのヒント（未使用）

    Returns:
        マスク済みイベント
    """
    request = event.get("request")
    if not isinstance(request, dict):
        return event

    if "cookies" in request:
        request["cookies"] = FILTERED

    headers = request.get("headers")
    if isinstance(headers, dict):
        for key in headers:
            if key.lower() in SENSITIVE_KEYS:
                headers[key] = FILTERED

    data = request.get("data")
    if isinstance(data, dict):
        for key in data:
            if key.lower() in SENSITIVE_KEYS:
                data[key] = FILTERED

    return event


def init_monitoring() -> None:
    """
    Sentry/New Relicの初期化

    New Relicは本番環境でのみ有効化される。
    いずれも環境変数が設定されていない場合はスキップされる
    """
    settings = get_settings()

    # New Relic
    if settings.is_production and settings.NEW_RELIC_LICENSE_KEY:
        os.environ["NEW_RELIC_LICENSE_KEY"] = settings.NEW_RELIC_LICENSE_KEY
        os.environ["NEW_RELIC_APP_NAME"] = settings.NEW_RELIC_APP_NAME

        newrelic_config = newrelic.agent.global_settings()
        newrelic_config.high_security = settings.NEW_RELIC_HIGH_SECURITY
        newrelic_config.monitor_mode = settings.NEW_RELIC_MONITOR_MODE
        newrelic_config.app_name = (
            f"{settings.NEW_RELIC_APP_NAME}[{settings.normalized_env_mode}]"
        )

        newrelic.agent.initialize(
            config_file="/etc/newrelic.ini", environment=settings.ENV_MODE
        )
        logger.info(f"New Relic is enabled (name: {newrelic_config.app_name})")
    elif settings.is_production:
        logger.info("New Relic license key is not set")
    else:
        logger.info(f"New Relic is disabled on {settings.ENV_MODE} mode")

    # Sentry
    if settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.normalized_env_mode,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            send_default_pii=False,
            before_send=scrub_sensitive_data,  # type: ignore[arg-type]
        )
        logger.info(f"Sentry is enabled on {settings.normalized_env_mode} mode")
    else:
        logger.info(f"Sentry DSN is not set ({settings.normalized_env_mode} mode)")
