"""
依存性注入（deps）・共通ヘルパーの単体テスト
"""

import asyncio
from typing import Any, Optional
from unittest.mock import Mock

import pytest

from app.domain.exceptions.base import (
    BadRequestError,
    NotFoundError,
    ValidationError,
)
from app.presentation.api.deps import (
    clean_text,
    get_client_ip,
    get_or_404,
    raise_for_errors,
    read_json_object,
    require_valid_id,
)


def make_request(
    headers: Optional[dict[str, str]] = None, host: Optional[str] = "10.0.0.1"
) -> Any:
    request = Mock()
    request.headers = headers or {}
    request.client = Mock(host=host) if host is not None else None
    return request


class TestGetClientIP:
    """送信元アドレス取得のテスト"""

    def test_ignores_forwarding_headers_from_untrusted_peer(self) -> None:
        """信頼していない接続元の転送ヘッダーは無視されること"""
        request = make_request(
            {"CF-Connecting-IP": "203.0.113.7", "X-Forwarded-For": "198.51.100.1"}
        )

        assert get_client_ip(request) == "10.0.0.1"
        assert get_client_ip(request, ["10.0.0.2"]) == "10.0.0.1"

    def test_cf_connecting_ip_first_from_trusted_proxy(self) -> None:
        """信頼する接続元からはCF-Connecting-IPが最優先されること"""
        request = make_request(
            {"CF-Connecting-IP": "203.0.113.7", "X-Forwarded-For": "198.51.100.1"}
        )

        assert get_client_ip(request, ["10.0.0.1"]) == "203.0.113.7"

    def test_forwarded_for_uses_first_entry(self) -> None:
        """X-Forwarded-Forは先頭のアドレスを使うこと"""
        request = make_request({"X-Forwarded-For": "198.51.100.1, 10.0.0.2"})

        assert get_client_ip(request, ["10.0.0.1"]) == "198.51.100.1"

    def test_wildcard_trusts_any_peer(self) -> None:
        """"*"の場合はどの接続元でも転送ヘッダーを参照すること"""
        request = make_request({"X-Forwarded-For": "198.51.100.1"}, host="172.16.0.9")

        assert get_client_ip(request, ["*"]) == "198.51.100.1"

    def test_trusted_proxy_without_headers_uses_peer(self) -> None:
        """信頼する接続元でもヘッダーがなければ接続元アドレスを使うこと"""
        assert get_client_ip(make_request(), ["10.0.0.1"]) == "10.0.0.1"

    def test_headers_used_when_peer_unknown(self) -> None:
        """接続元が不明な場合は転送ヘッダーを参照すること"""
        request = make_request({"X-Forwarded-For": "198.51.100.1"}, host=None)

        assert get_client_ip(request) == "198.51.100.1"

    def test_unknown_when_nothing_available(self) -> None:
        """特定できない場合は"unknown"となること"""
        assert get_client_ip(make_request(host=None)) == "unknown"


class TestReadJsonObject:
    """リクエストボディ読み込みのテスト"""

    def _request(self, payload: Any = None, error: Optional[Exception] = None) -> Any:
        async def json() -> Any:
            if error is not None:
                raise error
            return payload

        request = Mock()
        request.json = json
        return request

    def test_object(self) -> None:
        """JSONオブジェクトを辞書として返すこと"""
        body = asyncio.run(read_json_object(self._request({"password": "x"})))

        assert body == {"password": "x"}

    def test_invalid_json(self) -> None:
        """JSONとして不正な場合はValidationErrorとなること"""
        import json

        request = self._request(error=json.JSONDecodeError("bad", "{", 1))

        with pytest.raises(ValidationError, match="Invalid JSON body"):
            asyncio.run(read_json_object(request))

    @pytest.mark.parametrize("payload", [[1, 2], "text", 3, None])
    def test_non_object(self, payload: Any) -> None:
        """オブジェクト以外のJSONはValidationErrorとなること"""
        with pytest.raises(ValidationError):
            asyncio.run(read_json_object(self._request(payload)))


class TestIdHelpers:
    """ID関連ヘルパーのテスト"""

    @pytest.mark.parametrize("value", [0, -1])
    def test_invalid_id(self, value: int) -> None:
        """0以下のIDは400となること"""
        with pytest.raises(BadRequestError, match="Invalid attendee ID"):
            require_valid_id(value, "attendee")

    def test_get_or_404_not_found(self) -> None:
        """存在しないIDは404となること"""
        repo = Mock()
        repo.get.return_value = None

        with pytest.raises(NotFoundError, match="Activity not found"):
            get_or_404(repo, 42, "Activity")

    def test_get_or_404_invalid_id_skips_lookup(self) -> None:
        """不正なIDでは検索を行わないこと"""
        repo = Mock()

        with pytest.raises(BadRequestError, match="Invalid activity ID"):
            get_or_404(repo, 0, "Activity")
        repo.get.assert_not_called()


class TestMiscHelpers:
    """その他ヘルパーのテスト"""

    def test_raise_for_errors(self) -> None:
        """フィールドエラーがあればdetailsに格納して送出すること"""
        with pytest.raises(ValidationError) as exc_info:
            raise_for_errors({"name": "Name is required"})

        assert exc_info.value.details == {"name": "Name is required"}

    def test_raise_for_errors_empty(self) -> None:
        """エラーがなければ何もしないこと"""
        raise_for_errors({})

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("  vegan ", "vegan"), ("   ", None), ("", None), (None, None), (5, None)],
    )
    def test_clean_text(self, value: Any, expected: Optional[str]) -> None:
        """前後の空白を除去し、空なら None にすること"""
        assert clean_text(value) == expected
