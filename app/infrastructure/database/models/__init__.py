from .base import Base, BaseModel, TimeStampMixin
from .attendee import Attendee
from .activity import Activity
from .announcement import Announcement
from .setting import Setting
from .login_attempt import LoginAttempt

__all__ = [
    "Base",
    "BaseModel",
    "TimeStampMixin",
    "Attendee",
    "Activity",
    "Announcement",
    "Setting",
    "LoginAttempt",
]
