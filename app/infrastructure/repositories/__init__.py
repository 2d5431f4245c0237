from .activity_repository import ActivityRepository
from .announcement_repository import AnnouncementRepository
from .attendee_repository import AttendeeRepository
from .login_attempt_repository import LoginAttemptService
from .setting_repository import SettingRepository

__all__ = [
    "ActivityRepository",
    "AnnouncementRepository",
    "AttendeeRepository",
    "LoginAttemptService",
    "SettingRepository",
]
