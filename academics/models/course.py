"""
Course data models.

Contains the closed set of course variants a student can be enrolled in,
together with the timetable, attendance and internal-marks records that
hang off the lecture/tutorial/practical (LTP) variants.

COURSE VARIANTS
---------------

    kind   LTP?   extra data
    ----   ----   ------------------------------------------
    CBL    yes    -
    LBC    yes    title carries the " Lab" suffix
    PBL    yes    -
    RBL    no     -
    PBC    no     optional project title

Each variant is its own frozen dataclass holding a shared ``CourseBase``.
``Course`` is the union of the five, so code that needs variant-specific
data branches on ``course.kind`` instead of walking a class hierarchy.

Records below a course (ClassHours, Attendance, MarkInfo) point back at
their course through ``class_number`` only; use ``User.get_course`` to
navigate upwards.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, IntEnum
from typing import ClassVar, Optional, Tuple, Union


class Weekday(IntEnum):
    """
    ISO weekday numbering (Monday = 1 ... Sunday = 7).

    Matches ``datetime.isoweekday()``. The wire format sends a 0-based
    Monday-first index, so wire day ``n`` is ``Weekday(n + 1)``.
    """
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class CourseKind(Enum):
    """
    Course categories offered by the university.

    CBL: Classroom-based learning (theory)
    LBC: Lab-based course
    PBL: Project-based learning attached to a timetabled course
    RBL: Research-based learning (not timetabled)
    PBC: Project-based component (not timetabled, may carry a project title)
    """
    CBL = "CBL"
    LBC = "LBC"
    PBL = "PBL"
    RBL = "RBL"
    PBC = "PBC"

    @property
    def is_ltp(self) -> bool:
        """True for kinds that have timetable slots, attendance and marks."""
        return self in (CourseKind.CBL, CourseKind.LBC, CourseKind.PBL)


@dataclass(frozen=True)
class CourseBase:
    """
    Fields every course variant carries.

    Attributes:
        class_number: Unique number of this class offering
        course_code: Catalog code (e.g., "CSE101")
        title: Course title (LBC courses end in " Lab")
        course_mode: Delivery mode, "NA" if not sent
        course_option: Registration option, "NA" if not sent
        subject_type: Subject category, "NA" if not sent
        faculty: Faculty name, "NA" if not sent
        ltpjc: Raw LTPJC descriptor (e.g., "30024")
        credits: Credit count taken from the LTPJC descriptor
    """
    class_number: int
    course_code: str
    title: str
    course_mode: str
    course_option: str
    subject_type: str
    faculty: str
    ltpjc: str
    credits: int


@dataclass(frozen=True)
class ClassHours:
    """One weekly timetable slot of a course, in campus-local time."""
    class_number: int
    start: datetime
    end: datetime
    day: Weekday


@dataclass(frozen=True)
class AttendanceStub:
    """Attendance entry for a single class held on ``class_date``."""
    class_date: datetime
    slot: str
    status: str
    reason: str


@dataclass(frozen=True)
class Attendance:
    """
    Attendance summary for an LTP course.

    The percentage is stored as sent by the source rather than recomputed,
    since the upstream rounding does not always agree with attended/total.

    class_length is how many hours one attendance entry stands for: 1 for
    most courses, the lab-hours digit of LTPJC for LBC courses.

    When the source marks attendance as unsupported, counts are zero and
    ``details`` is empty.
    """
    class_number: int
    supported: bool
    total_classes: int
    attended_classes: int
    percentage: float
    class_length: int = 1
    details: Tuple[AttendanceStub, ...] = ()

    def stubs_on(self, day: date) -> Tuple[AttendanceStub, ...]:
        """Return the entries recorded for a calendar date."""
        return tuple(s for s in self.details if s.class_date.date() == day)


@dataclass(frozen=True)
class MarkInfo:
    """
    One internal assessment of an LTP course.

    scored is None when the assessment has not been conducted yet.
    """
    class_number: int
    title: str
    max_marks: int
    weightage: int
    scored: Optional[float] = None
    status: Optional[str] = None

    @property
    def is_conducted(self) -> bool:
        return self.scored is not None

    @property
    def weighted_marks(self) -> Optional[float]:
        """scored / max_marks * weightage, or None if not conducted."""
        if self.scored is None:
            return None
        return self.scored / self.max_marks * self.weightage


@dataclass(frozen=True)
class LtpDetails:
    """
    Timetable, attendance and marks of a lecture/tutorial/practical course.

    internal_marks_scored: Sum of weighted marks of conducted assessments,
        rounded to 2 decimal places
    total_marks_tested: Sum of weightage of conducted assessments
    Both are zero when marks are unsupported for the course.
    """
    slot: str
    venue: str
    timings: Tuple[ClassHours, ...]
    attendance: Attendance
    marks: Tuple[MarkInfo, ...]
    marks_supported: bool
    internal_marks_scored: float
    total_marks_tested: int


class _CourseAccessors:
    """Read-only shortcuts into ``base`` shared by all variants."""

    @property
    def class_number(self) -> int:
        return self.base.class_number

    @property
    def course_code(self) -> str:
        return self.base.course_code

    @property
    def title(self) -> str:
        return self.base.title

    @property
    def credits(self) -> int:
        return self.base.credits

    @property
    def is_ltp(self) -> bool:
        return self.kind.is_ltp


@dataclass(frozen=True)
class CBLCourse(_CourseAccessors):
    kind: ClassVar[CourseKind] = CourseKind.CBL
    base: CourseBase
    ltp: LtpDetails


@dataclass(frozen=True)
class LBCCourse(_CourseAccessors):
    kind: ClassVar[CourseKind] = CourseKind.LBC
    base: CourseBase
    ltp: LtpDetails


@dataclass(frozen=True)
class PBLCourse(_CourseAccessors):
    kind: ClassVar[CourseKind] = CourseKind.PBL
    base: CourseBase
    ltp: LtpDetails


@dataclass(frozen=True)
class RBLCourse(_CourseAccessors):
    kind: ClassVar[CourseKind] = CourseKind.RBL
    base: CourseBase


@dataclass(frozen=True)
class PBCCourse(_CourseAccessors):
    kind: ClassVar[CourseKind] = CourseKind.PBC
    base: CourseBase
    project_title: Optional[str] = None


Course = Union[CBLCourse, LBCCourse, PBLCourse, RBLCourse, PBCCourse]
LtpCourse = Union[CBLCourse, LBCCourse, PBLCourse]
