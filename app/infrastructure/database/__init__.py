from .connection import get_db, engine, SessionLocal
from .models import (
    Base,
    BaseModel,
    TimeStampMixin,
    Attendee,
    Activity,
    Announcement,
    Setting,
    LoginAttempt,
)

__all__ = [
    "get_db",
    "engine",
    "SessionLocal",
    "Base",
    "BaseModel",
    "TimeStampMixin",
    "Attendee",
    "Activity",
    "Announcement",
    "Setting",
    "LoginAttempt",
]
