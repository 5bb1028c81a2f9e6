"""
Grade history data models.

Contains the per-exam GradeInfo records, the SemesterInfo groups they are
joined into, and the AcademicHistory aggregate.
"""

from dataclasses import dataclass
from datetime import date, datetime
from functools import total_ordering
from typing import Optional, Tuple


@dataclass(frozen=True)
class GradeInfo:
    """
    One graded course from the student's history.

    Attributes:
        course_code: Catalog code
        course_title: Course title
        course_type: Course type label as sent (e.g., "TH", "LO")
        course_option: Upper-cased option, "" when the source says "NIL"
        credits: Credits of the course
        grade: Single-character letter grade
        exam_id: The raw "exam held" value; join key against semesters
        exam_date: First day of the exam month when exam_id is a month
            label such as "Nov-2014", otherwise None
    """
    course_code: str
    course_title: str
    course_type: str
    course_option: str
    credits: int
    grade: str
    exam_id: str
    exam_date: Optional[date] = None


@total_ordering
@dataclass(frozen=True)
class SemesterInfo:
    """
    All grades from one exam session plus that session's summary.

    Ordering is chronological when exam ids are month labels; ids that are
    not dates come after them, ordered by text.
    """
    exam_id: str
    grades: Tuple[GradeInfo, ...]
    credits_earned: int
    gpa: float
    exam_date: Optional[date] = None

    @property
    def sort_key(self) -> tuple:
        return (self.exam_date is None, self.exam_date or date.min, self.exam_id)

    def __lt__(self, other):
        if not isinstance(other, SemesterInfo):
            return NotImplemented
        return self.sort_key < other.sort_key


@dataclass(frozen=True)
class AcademicHistory:
    """
    Complete grade history of a student.

    Attributes:
        grades: Every GradeInfo in payload order
        semesters: Grades grouped per exam session, joined with the
            semester summaries and sorted
        cgpa: Cumulative GPA
        credits_registered: Total credits registered
        credits_earned: Total credits earned
        last_refreshed: When the grades were last refreshed, in UTC
    """
    grades: Tuple[GradeInfo, ...]
    semesters: Tuple[SemesterInfo, ...]
    cgpa: float
    credits_registered: int
    credits_earned: int
    last_refreshed: datetime
