"""
User data models.

Contains the User aggregate that owns the decoded courses, and the
CoursesMetadata that describes the enrollment snapshot.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from .course import Course


@dataclass(frozen=True)
class CoursesMetadata:
    """
    Describes one enrollment snapshot.

    Attributes:
        semester: Semester label as sent (e.g., "WS 2014-15")
        refreshed: When the upstream data was last refreshed, in UTC
        total_credits: Sum of credits of the decoded courses (computed)
    """
    semester: str
    refreshed: datetime
    total_credits: int


@dataclass(frozen=True)
class User:
    """
    A student and, once enrollment is decoded, their courses.

    A bare user (from the identity decoder) has no courses and no metadata.

    Attributes:
        reg_no: Registration number
        date_of_birth: Date of birth
        campus: Campus identifier (e.g., "vellore", "chennai")
        phone: Mobile number, or "NA" where the campus never sends one
        courses: Courses in payload order; unknown course types are left out
        metadata: Enrollment snapshot details, None for a bare user
    """
    reg_no: str
    date_of_birth: date
    campus: str
    phone: str
    courses: Tuple[Course, ...] = ()
    metadata: Optional[CoursesMetadata] = None

    def get_course(self, class_number: int) -> Optional[Course]:
        """Find an owned course by its class number."""
        for course in self.courses:
            if course.class_number == class_number:
                return course
        return None
