"""
監視ツール初期化の単体テスト
"""

from typing import Any
from unittest.mock import Mock, patch

from app.core import monitoring
from app.core.monitoring import FILTERED, init_monitoring, scrub_sensitive_data


class TestScrubSensitiveData:
    """Sentryイベントのマスク処理のテスト"""

    def test_scrubs_cookie_and_password(self) -> None:
        """セッションCookieとパスワードがマスクされること"""
        event: dict[str, Any] = {
            "request": {
                "url": "http://testserver/api/admin/auth",
                "cookies": {"session": "abc.1.def"},
                "headers": {"Cookie": "session=abc.1.def", "User-Agent": "pytest"},
                "data": {"password": "hunter2"},
            }
        }

        scrubbed = scrub_sensitive_data(event, None)

        request = scrubbed["request"]
        assert request["cookies"] == FILTERED
        assert request["headers"]["Cookie"] == FILTERED
        assert request["headers"]["User-Agent"] == "pytest"
        assert request["data"] == {"password": FILTERED}

    def test_event_without_request(self) -> None:
        """リクエスト情報がないイベントはそのまま返すこと"""
        event = {"message": "batch failed"}

        assert scrub_sensitive_data(event) == {"message": "batch failed"}


class TestInitMonitoring:
    """init_monitoring関数のテスト"""

    @patch("app.core.monitoring.sentry_sdk")
    def test_sentry_disabled_without_dsn(
        self, mock_sentry: Mock, monkeypatch: Any
    ) -> None:
        """DSN未設定の場合はSentryを初期化しないこと"""
        settings = Mock(SENTRY_DSN=None, is_production=False, ENV_MODE="test")
        monkeypatch.setattr(monitoring, "get_settings", lambda: settings)

        init_monitoring()

        mock_sentry.init.assert_not_called()

    @patch("app.core.monitoring.sentry_sdk")
    def test_sentry_enabled_with_dsn(
        self, mock_sentry: Mock, monkeypatch: Any
    ) -> None:
        """DSN設定時はマスク処理付きで初期化すること"""
        settings = Mock(
            SENTRY_DSN="https://key@sentry.example/1",
            SENTRY_TRACES_SAMPLE_RATE=0.5,
            is_production=False,
            ENV_MODE="development",
            normalized_env_mode="staging",
        )
        monkeypatch.setattr(monitoring, "get_settings", lambda: settings)

        init_monitoring()

        kwargs = mock_sentry.init.call_args.kwargs
        assert kwargs["environment"] == "staging"
        assert kwargs["send_default_pii"] is False
        assert kwargs["before_send"] is scrub_sensitive_data
