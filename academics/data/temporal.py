"""
Timestamp normalization.

All times and dates are fixed to one of two references when decoding:

1. Class hours, class dates and dates of birth are campus-local (+05:30).
   Opening the app in another timezone must not shift the timetable; any
   re-projection is the presentation layer's job.
2. "Refreshed" timestamps stay in UTC so they read consistently wherever
   the student travels.

Text without a zone is taken to be UTC in both cases.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Optional

from ..config import (
    IST,
    TIME_ONLY_ANCHOR_DATE,
    DOB_FORMAT,
    CLASS_DATE_FORMAT,
    EXAM_HELD_FORMAT,
)
from ..errors import MalformedTimestamp


_DOB_PATTERN = re.compile(r"\d{8}")
_CLASS_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _parse_instant(text: str, field: str, allow_time_only: bool) -> datetime:
    """Parse ISO text into an aware datetime, assuming UTC when unzoned."""
    if not isinstance(text, str):
        raise MalformedTimestamp(field, repr(text))
    stripped = text.strip()
    try:
        parsed = datetime.fromisoformat(stripped)
    except ValueError:
        if not allow_time_only:
            raise MalformedTimestamp(field, text) from None
        try:
            parsed = datetime.combine(TIME_ONLY_ANCHOR_DATE, time.fromisoformat(stripped))
        except ValueError:
            raise MalformedTimestamp(field, text) from None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _shift(instant: datetime, tz, field: str, text: str) -> datetime:
    """Re-express an instant in `tz`; instants at the edge of the calendar fail."""
    try:
        return instant.astimezone(tz)
    except OverflowError:
        raise MalformedTimestamp(field, text) from None


def to_local_fixed_offset(text: str, field: str = "time") -> datetime:
    """
    Convert a class start/end time to campus-local time (+05:30).

    Accepts a full ISO datetime or a bare ISO time ("02:30:00Z"); bare times
    are placed on TIME_ONLY_ANCHOR_DATE.
    """
    return _shift(_parse_instant(text, field, allow_time_only=True), IST, field, text)


def to_canonical_utc(text: str, field: str = "refreshed") -> datetime:
    """Convert a "refreshed" timestamp to UTC."""
    return _shift(_parse_instant(text, field, allow_time_only=False), timezone.utc, field, text)


def parse_date_of_birth(text: str, field: str = "dob") -> date:
    """Parse a strict ddMMyyyy date of birth."""
    if not isinstance(text, str) or not _DOB_PATTERN.fullmatch(text):
        raise MalformedTimestamp(field, str(text))
    try:
        return datetime.strptime(text, DOB_FORMAT).date()
    except ValueError:
        raise MalformedTimestamp(field, text) from None


def parse_class_date(text: str, field: str = "date") -> datetime:
    """Parse a strict yyyy-MM-dd class date as local midnight (+05:30)."""
    if not isinstance(text, str) or not _CLASS_DATE_PATTERN.fullmatch(text):
        raise MalformedTimestamp(field, str(text))
    try:
        return datetime.strptime(text, CLASS_DATE_FORMAT).replace(tzinfo=IST)
    except ValueError:
        raise MalformedTimestamp(field, text) from None


def parse_exam_month(text: str) -> Optional[date]:
    """
    Return the first day of an exam month label like "Nov-2014".

    Exam ids are opaque join keys, so anything else gives None rather than
    an error.
    """
    try:
        return datetime.strptime(text, EXAM_HELD_FORMAT).date()
    except (TypeError, ValueError):
        return None
