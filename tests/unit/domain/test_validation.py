"""
入力バリデーションの単体テスト
"""

from datetime import datetime, timezone
from typing import Any

import pytest

from app.domain.validation import (
    is_blank,
    is_number,
    is_valid_email,
    parse_datetime,
    validate_activity_submission,
    validate_activity_update,
    validate_announcement,
    validate_attendee_update,
    validate_rsvp,
    validate_schedule,
    validate_settings_update,
)


def valid_activity(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "title": "Board Games",
        "host_name": "Sam",
        "host_email": "sam@example.com",
        "description": "Bring your favourite game",
        "duration": 60,
        "activity_type": "Gaming",
        "time_preference": "Evening",
    }
    body.update(overrides)
    return body


class TestHelpers:
    """共通ヘルパーのテスト"""

    @pytest.mark.parametrize("value", [None, "", "   ", 0, ["a"]])
    def test_is_blank_true(self, value: Any) -> None:
        """文字列でない値や空白のみの文字列はblankと判定されること"""
        assert is_blank(value) is True

    def test_is_blank_false(self) -> None:
        """文字を含む文字列はblankでないこと"""
        assert is_blank(" x ") is False

    def test_is_valid_email(self) -> None:
        """メールアドレス形式を判定できること"""
        assert is_valid_email("someone@example.com") is True
        assert is_valid_email("someone@example") is False
        assert is_valid_email("some one@example.com") is False

    def test_is_number_excludes_bool(self) -> None:
        """真偽値は数値として扱わないこと"""
        assert is_number(60) is True
        assert is_number(1.5) is True
        assert is_number(True) is False
        assert is_number("60") is False

    def test_parse_datetime_with_z_suffix(self) -> None:
        """末尾ZのISO 8601文字列をUTCとして解釈すること"""
        parsed = parse_datetime("2026-07-04T18:00:00Z")

        assert parsed == datetime(2026, 7, 4, 18, 0, tzinfo=timezone.utc)

    def test_parse_datetime_naive_is_utc(self) -> None:
        """タイムゾーンなしの値はUTCとして扱うこと"""
        parsed = parse_datetime("2026-07-04T18:00:00")

        assert parsed is not None
        assert parsed.tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["not a date", "", None, 1234])
    def test_parse_datetime_invalid(self, value: Any) -> None:
        """解釈できない値はNoneを返すこと"""
        assert parse_datetime(value) is None


class TestValidateRSVP:
    """RSVP登録のバリデーション"""

    def test_valid(self) -> None:
        """必須項目が揃っていればエラーなしとなること"""
        assert validate_rsvp({"name": "Alex", "email": "alex@example.com"}) == {}

    def test_missing_required_fields(self) -> None:
        """氏名・メールアドレスが必須であること"""
        errors = validate_rsvp({})

        assert errors == {"name": "Name is required", "email": "Email is required"}

    def test_invalid_email(self) -> None:
        """メールアドレス形式が不正な場合エラーとなること"""
        errors = validate_rsvp({"name": "Alex", "email": "alex"})

        assert errors == {"email": "Please enter a valid email address"}

    def test_optional_text_length(self) -> None:
        """任意項目は500文字以内であること"""
        errors = validate_rsvp(
            {
                "name": "Alex",
                "email": "alex@example.com",
                "dietary_restrictions": "x" * 501,
                "excited_about": "x" * 501,
            }
        )

        assert set(errors) == {"dietary_restrictions", "excited_about"}


class TestValidateAttendeeUpdate:
    """参加者部分更新のバリデーション"""

    def test_absent_fields_are_not_validated(self) -> None:
        """リクエストに含まれないフィールドは検証しないこと"""
        assert validate_attendee_update({}) == {}

    def test_blank_name_when_present(self) -> None:
        """氏名を空文字列で更新しようとした場合エラーとなること"""
        assert validate_attendee_update({"name": " "}) == {"name": "Name is required"}

    def test_invalid_payment_status(self) -> None:
        """支払い状況は定義済みの値のみ許可されること"""
        errors = validate_attendee_update({"payment_status": "paid"})

        assert errors == {"payment_status": "Invalid payment status"}


class TestValidateActivitySubmission:
    """アクティビティ提案のバリデーション"""

    def test_valid(self) -> None:
        """必須項目が揃っていればエラーなしとなること"""
        assert validate_activity_submission(valid_activity()) == {}

    def test_invalid_duration(self) -> None:
        """所要時間は選択肢の値のみ許可されること"""
        errors = validate_activity_submission(valid_activity(duration=45))

        assert errors == {"duration": "Invalid duration selected"}

    def test_bool_duration_is_rejected(self) -> None:
        """真偽値の所要時間は未入力扱いとなること"""
        errors = validate_activity_submission(valid_activity(duration=True))

        assert errors == {"duration": "Duration is required"}

    def test_invalid_choices(self) -> None:
        """種別・希望時間帯は選択肢の値のみ許可されること"""
        errors = validate_activity_submission(
            valid_activity(activity_type="Sports", time_preference="Noon")
        )

        assert errors == {
            "activity_type": "Invalid activity type selected",
            "time_preference": "Invalid time preference selected",
        }

    @pytest.mark.parametrize("capacity", [0, 1000, "10"])
    def test_capacity_out_of_range(self, capacity: Any) -> None:
        """定員は1〜999の数値であること"""
        errors = validate_activity_submission(valid_activity(capacity=capacity))

        assert errors == {"capacity": "Capacity must be between 1 and 999"}

    def test_capacity_null_is_allowed(self) -> None:
        """定員は省略できること"""
        assert validate_activity_submission(valid_activity(capacity=None)) == {}


class TestValidateActivityUpdate:
    """アクティビティ部分更新のバリデーション"""

    def test_invalid_status(self) -> None:
        """ステータスは定義済みの値のみ許可されること"""
        errors = validate_activity_update({"status": "done"})

        assert errors == {"status": "Invalid status value"}

    def test_schedule_window_order(self) -> None:
        """終了日時は開始日時より後であること"""
        errors = validate_activity_update(
            {
                "scheduled_start": "2026-07-04T18:00:00Z",
                "scheduled_end": "2026-07-04T18:00:00Z",
            }
        )

        assert errors == {"scheduled_end": "End time must be after start time"}

    def test_null_schedule_is_allowed(self) -> None:
        """スケジュールの解除（null）は許可されること"""
        errors = validate_activity_update(
            {"scheduled_start": None, "scheduled_end": None}
        )

        assert errors == {}

    def test_negative_capacity(self) -> None:
        """定員は0以上であること"""
        errors = validate_activity_update({"capacity": -1})

        assert errors == {"capacity": "Capacity must be a non-negative number"}


class TestValidateSchedule:
    """スケジュール確定のバリデーション"""

    def test_required_fields(self) -> None:
        """開始・終了日時と場所が必須であること"""
        errors = validate_schedule({})

        assert errors == {
            "scheduled_start": "Scheduled start time is required",
            "scheduled_end": "Scheduled end time is required",
            "location": "Location is required",
        }

    def test_valid(self) -> None:
        """正しい値ならエラーなしとなること"""
        errors = validate_schedule(
            {
                "scheduled_start": "2026-07-04T18:00:00Z",
                "scheduled_end": "2026-07-04T19:00:00Z",
                "location": "Main hall",
            }
        )

        assert errors == {}


class TestValidateSettingsUpdate:
    """イベント設定更新のバリデーション"""

    def test_toggle_accepts_bool_and_string(self) -> None:
        """受付フラグは真偽値と"true"/"false"文字列を受け付けること"""
        assert validate_settings_update({"rsvp_open": False}) == {}
        assert validate_settings_update({"activity_submissions_open": "true"}) == {}

    def test_toggle_rejects_other_values(self) -> None:
        """受付フラグにその他の値は指定できないこと"""
        errors = validate_settings_update({"rsvp_open": "yes"})

        assert errors == {"rsvp_open": "RSVP open must be a boolean value"}

    def test_end_date_before_start(self) -> None:
        """終了日は開始日以降であること"""
        errors = validate_settings_update(
            {"event_date_start": "2026-07-05", "event_date_end": "2026-07-04"}
        )

        assert errors == {
            "event_date_end": "Event end date must be after start date"
        }

    def test_same_start_and_end_date(self) -> None:
        """開始日と終了日が同じ場合は許可されること"""
        errors = validate_settings_update(
            {"event_date_start": "2026-07-04", "event_date_end": "2026-07-04"}
        )

        assert errors == {}


class TestValidateAnnouncement:
    """お知らせ本文のバリデーション"""

    def test_required(self) -> None:
        """本文が必須であること"""
        assert validate_announcement({"message": " "}) == (
            "Announcement message is required"
        )

    def test_max_length(self) -> None:
        """本文は500文字以内であること"""
        assert validate_announcement({"message": "x" * 500}) is None
        assert validate_announcement({"message": "x" * 501}) == (
            "Announcement message must be 500 characters or less"
        )
