"""
入力バリデーションルール

各関数はフィールド名をキー、エラーメッセージを値とする辞書を返す。
空の辞書はバリデーション成功を意味する。
部分更新系の関数では、キーが存在しないフィールドは検証しない。
"""

import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PAYMENT_STATUSES = ("pending", "completed", "refunded", "cancelled")
ACTIVITY_STATUSES = ("pending", "approved", "scheduled", "cancelled")
VALID_DURATIONS = (30, 60, 120, 180, 240)
VALID_ACTIVITY_TYPES = ("Gaming", "Outdoor", "Creative", "Social", "18+", "Other")
VALID_TIME_PREFERENCES = (
    "Morning",
    "Afternoon",
    "Evening",
    "Late Night",
    "No Preference",
)

ANNOUNCEMENT_MAX_LENGTH = 500

FieldErrors = dict[str, str]


def is_blank(value: Any) -> bool:
    """値が文字列でない、または空白のみの場合True"""
    return not isinstance(value, str) or value.strip() == ""


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value.strip()))


def is_number(value: Any) -> bool:
    """boolを除く数値判定（JSONのtrue/falseを数値扱いしない）"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    ISO 8601文字列を日時に変換

    タイムゾーンなしの値はUTCとして扱う。

    Returns:
        変換できない場合はNone
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _too_long(value: Any, limit: int) -> bool:
    return isinstance(value, str) and len(value) > limit


def validate_rsvp(body: Mapping[str, Any]) -> FieldErrors:
    """RSVP新規登録"""
    errors: FieldErrors = {}

    if is_blank(body.get("name")):
        errors["name"] = "Name is required"
    elif len(body["name"].strip()) > 255:
        errors["name"] = "Name must be less than 255 characters"

    email = body.get("email")
    if is_blank(email):
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    if _too_long(body.get("dietary_restrictions"), 500):
        errors["dietary_restrictions"] = (
            "Dietary restrictions must be less than 500 characters"
        )
    if _too_long(body.get("excited_about"), 500):
        errors["excited_about"] = "Response must be less than 500 characters"

    return errors


def validate_attendee_update(body: Mapping[str, Any]) -> FieldErrors:
    """参加者情報の部分更新"""
    errors: FieldErrors = {}

    if "name" in body:
        if is_blank(body["name"]):
            errors["name"] = "Name is required"
        elif len(body["name"].strip()) > 255:
            errors["name"] = "Name must be less than 255 characters"

    if "email" in body:
        if is_blank(body["email"]):
            errors["email"] = "Email is required"
        elif not is_valid_email(body["email"]):
            errors["email"] = "Please enter a valid email address"

    if _too_long(body.get("dietary_restrictions"), 500):
        errors["dietary_restrictions"] = (
            "Dietary restrictions must be less than 500 characters"
        )
    if _too_long(body.get("excited_about"), 500):
        errors["excited_about"] = "Response must be less than 500 characters"

    if "payment_status" in body and body["payment_status"] not in PAYMENT_STATUSES:
        errors["payment_status"] = "Invalid payment status"

    return errors


def validate_activity_submission(body: Mapping[str, Any]) -> FieldErrors:
    """アクティビティ提案（一般公開フォーム）"""
    errors: FieldErrors = {}

    title = body.get("title")
    if is_blank(title):
        errors["title"] = "Activity title is required"
    elif len(title.strip()) > 255:
        errors["title"] = "Title must be less than 255 characters"

    host_name = body.get("host_name")
    if is_blank(host_name):
        errors["host_name"] = "Your name is required"
    elif len(host_name.strip()) > 255:
        errors["host_name"] = "Name must be less than 255 characters"

    host_email = body.get("host_email")
    if is_blank(host_email):
        errors["host_email"] = "Your email is required"
    elif not is_valid_email(host_email):
        errors["host_email"] = "Please enter a valid email address"

    description = body.get("description")
    if is_blank(description):
        errors["description"] = "Description is required"
    elif len(description.strip()) > 2000:
        errors["description"] = "Description must be less than 2000 characters"

    duration = body.get("duration")
    if not is_number(duration) or not duration:
        errors["duration"] = "Duration is required"
    elif duration not in VALID_DURATIONS:
        errors["duration"] = "Invalid duration selected"

    activity_type = body.get("activity_type")
    if is_blank(activity_type):
        errors["activity_type"] = "Activity type is required"
    elif activity_type not in VALID_ACTIVITY_TYPES:
        errors["activity_type"] = "Invalid activity type selected"

    time_preference = body.get("time_preference")
    if is_blank(time_preference):
        errors["time_preference"] = "Time preference is required"
    elif time_preference not in VALID_TIME_PREFERENCES:
        errors["time_preference"] = "Invalid time preference selected"

    if _too_long(body.get("equipment_needed"), 1000):
        errors["equipment_needed"] = (
            "Equipment description must be less than 1000 characters"
        )

    capacity = body.get("capacity")
    if capacity is not None:
        if not is_number(capacity) or capacity < 1 or capacity > 999:
            errors["capacity"] = "Capacity must be between 1 and 999"

    return errors


def _validate_schedule_window(
    body: Mapping[str, Any], errors: FieldErrors, required: bool
) -> None:
    start_raw = body.get("scheduled_start")
    end_raw = body.get("scheduled_end")

    start: Optional[datetime] = None
    if start_raw is None or start_raw == "":
        if required:
            errors["scheduled_start"] = "Scheduled start time is required"
    else:
        start = parse_datetime(start_raw)
        if start is None:
            errors["scheduled_start"] = "Invalid scheduled start time"

    if end_raw is None or end_raw == "":
        if required:
            errors["scheduled_end"] = "Scheduled end time is required"
        return

    end = parse_datetime(end_raw)
    if end is None:
        errors["scheduled_end"] = "Invalid scheduled end time"
    elif start is not None and end <= start:
        errors["scheduled_end"] = "End time must be after start time"


def validate_activity_update(body: Mapping[str, Any]) -> FieldErrors:
    """アクティビティの部分更新（管理画面）"""
    errors: FieldErrors = {}

    if "title" in body:
        if is_blank(body["title"]):
            errors["title"] = "Title is required"
        elif len(body["title"].strip()) > 255:
            errors["title"] = "Title must be 255 characters or less"

    if _too_long(body.get("description"), 2000):
        errors["description"] = "Description must be 2000 characters or less"

    if "host_name" in body:
        if is_blank(body["host_name"]):
            errors["host_name"] = "Host name is required"
        elif len(body["host_name"].strip()) > 255:
            errors["host_name"] = "Host name must be 255 characters or less"

    if "host_email" in body:
        host_email = body["host_email"]
        if is_blank(host_email):
            errors["host_email"] = "Host email is required"
        elif not is_valid_email(host_email):
            errors["host_email"] = "Invalid email format"
        elif len(host_email) > 255:
            errors["host_email"] = "Email must be 255 characters or less"

    if "duration" in body:
        duration = body["duration"]
        if not is_number(duration) or duration <= 0:
            errors["duration"] = "Duration must be a positive number"

    if _too_long(body.get("activity_type"), 100):
        errors["activity_type"] = "Activity type must be 100 characters or less"
    if _too_long(body.get("equipment_needed"), 500):
        errors["equipment_needed"] = "Equipment needed must be 500 characters or less"

    if "capacity" in body and body["capacity"] is not None:
        capacity = body["capacity"]
        if not is_number(capacity) or capacity < 0:
            errors["capacity"] = "Capacity must be a non-negative number"

    if _too_long(body.get("time_preference"), 500):
        errors["time_preference"] = "Time preference must be 500 characters or less"
    if _too_long(body.get("notes"), 1000):
        errors["notes"] = "Notes must be 1000 characters or less"

    if "status" in body and body["status"] not in ACTIVITY_STATUSES:
        errors["status"] = "Invalid status value"

    _validate_schedule_window(body, errors, required=False)

    if _too_long(body.get("location"), 255):
        errors["location"] = "Location must be 255 characters or less"

    return errors


def validate_schedule(body: Mapping[str, Any]) -> FieldErrors:
    """アクティビティのスケジュール確定"""
    errors: FieldErrors = {}
    _validate_schedule_window(body, errors, required=True)

    location = body.get("location")
    if is_blank(location):
        errors["location"] = "Location is required"
    elif len(location) > 255:
        errors["location"] = "Location must be 255 characters or less"

    return errors


def _is_boolean_like(value: Any) -> bool:
    return isinstance(value, bool) or value in ("true", "false")


def validate_settings_update(body: Mapping[str, Any]) -> FieldErrors:
    """イベント全体設定の部分更新"""
    errors: FieldErrors = {}

    start: Optional[datetime] = None
    if "event_date_start" in body:
        raw = body["event_date_start"]
        if is_blank(raw):
            errors["event_date_start"] = "Event start date is required"
        else:
            start = parse_datetime(raw)
            if start is None:
                errors["event_date_start"] = "Invalid event start date"

    if "event_date_end" in body:
        raw = body["event_date_end"]
        if is_blank(raw):
            errors["event_date_end"] = "Event end date is required"
        else:
            end = parse_datetime(raw)
            if end is None:
                errors["event_date_end"] = "Invalid event end date"
            elif start is not None and end < start:
                errors["event_date_end"] = "Event end date must be after start date"

    if "location" in body:
        if is_blank(body["location"]):
            errors["location"] = "Location is required"
        elif len(body["location"]) > 255:
            errors["location"] = "Location must be 255 characters or less"

    if "rsvp_open" in body and not _is_boolean_like(body["rsvp_open"]):
        errors["rsvp_open"] = "RSVP open must be a boolean value"

    if "activity_submissions_open" in body and not _is_boolean_like(
        body["activity_submissions_open"]
    ):
        errors["activity_submissions_open"] = (
            "Activity submissions open must be a boolean value"
        )

    return errors


def validate_announcement(body: Mapping[str, Any]) -> Optional[str]:
    """
    お知らせ本文の検証

    Returns:
        エラーメッセージ（問題なければNone）
    """
    message = body.get("message")
    if is_blank(message):
        return "Announcement message is required"
    if len(message) > ANNOUNCEMENT_MAX_LENGTH:
        return (
            f"Announcement message must be {ANNOUNCEMENT_MAX_LENGTH} characters or less"
        )
    return None
