"""
Configuration constants for the academics decoder.

This module contains all configuration values and constants used throughout
the decode pipeline. Centralizing these makes it easy to adjust behavior
when the upstream student-information system changes its wire format.
"""

import os
from datetime import date, timedelta, timezone


# =============================================================================
# TIME REFERENCES
# =============================================================================
# Class and exam timestamps are shown in campus-local time so that the
# timetable reads the same wherever the student happens to be. "Refreshed"
# timestamps stay in UTC so they compare consistently across regions.

IST_OFFSET = timedelta(hours=5, minutes=30)
IST = timezone(IST_OFFSET, "IST")

# Time-only class timings ("08:00:00Z") carry no date. They are attached to
# a fixed date so decoding the same document twice gives equal results.
TIME_ONLY_ANCHOR_DATE = date(1970, 1, 1)

# Strict wire patterns
DOB_FORMAT = "%d%m%Y"            # ddMMyyyy, e.g. "04071995"
CLASS_DATE_FORMAT = "%Y-%m-%d"   # yyyy-MM-dd, e.g. "2015-01-20"

# Exam sessions are published as month labels ("Nov-2014"). Only used to
# order semesters chronologically; ids in any other shape sort by text.
EXAM_HELD_FORMAT = "%b-%Y"


# =============================================================================
# DEFAULTS AND SENTINELS
# =============================================================================

# Substituted for optional descriptive strings that the payload omits
NOT_AVAILABLE = "NA"

# Campuses whose payloads never carry a usable mobile number
PHONE_SUPPRESSED_CAMPUSES = {"chennai"}

# Appended to the title of lab (LBC) courses
LAB_TITLE_SUFFIX = " Lab"

# Grade records use "NIL" for courses without an option
NIL_COURSE_OPTION = "NIL"


# =============================================================================
# LTPJC DESCRIPTOR
# =============================================================================
# The LTPJC string packs Lecture, Tutorial, Practical, proJect hours and
# Credits into one descriptor, e.g. "30024" or "00210".
#   - index 2 is the practical (lab) hours digit
#   - everything from index 4 on is the credit count

LTPJC_LAB_HOURS_INDEX = 2
LTPJC_CREDITS_INDEX = 4


# =============================================================================
# STATUS CODES
# =============================================================================
# Integer codes returned in {"status": {"code": ...}}. Values are the names
# of StatusCode members; codes not listed here map to UNKNOWN_ERROR.

STATUS_CODES = {
    0: "SUCCESS",
    11: "SESSION_TIMEOUT",
    12: "INVALID_CREDENTIALS",
    13: "TEMPORARY_ERROR",
    89: "SERVER_ERROR",
    97: "SERVER_ERROR",
    98: "UNDER_MAINTENANCE",
}


# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = "academics"
LOG_LEVEL = os.environ.get("ACADEMICS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
