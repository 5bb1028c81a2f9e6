"""
Response status model.

Contains the StatusCode enum reported by every payload of the
student-information system.
"""

from enum import Enum


class StatusCode(Enum):
    """
    Outcome reported in a payload's {"status": {"code": ...}} object.

    SUCCESS: Data is present and current
    SESSION_TIMEOUT: Session cookie expired, caller must log in again
    INVALID_CREDENTIALS: Registration number / date of birth rejected
    TEMPORARY_ERROR: Upstream hiccup, safe to retry later
    SERVER_ERROR: Upstream failure (codes 89 and 97)
    UNDER_MAINTENANCE: Upstream is down for maintenance
    UNKNOWN_ERROR: A well-formed status with a code we do not recognize
    INVALID_DATA: The document is malformed or has no status code at all
    """
    SUCCESS = "success"
    SESSION_TIMEOUT = "session_timeout"
    INVALID_CREDENTIALS = "invalid_credentials"
    TEMPORARY_ERROR = "temporary_error"
    SERVER_ERROR = "server_error"
    UNDER_MAINTENANCE = "under_maintenance"
    UNKNOWN_ERROR = "unknown_error"
    INVALID_DATA = "invalid_data"
