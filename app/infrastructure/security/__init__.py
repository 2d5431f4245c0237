from .password import hash_password, verify_password
from .session_token import (
    SESSION_DURATION_MS,
    SessionToken,
    current_time_millis,
    issue_session_token,
    verify_session_token,
)

__all__ = [
    "hash_password",
    "verify_password",
    "SESSION_DURATION_MS",
    "SessionToken",
    "current_time_millis",
    "issue_session_token",
    "verify_session_token",
]
