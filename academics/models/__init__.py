"""
Data models for the academics decoder.

This package contains all dataclasses and enums produced by the decode
pipeline. These serve as "contracts" between the decoders and whatever
presents the data.
"""

from .status import StatusCode
from .course import (
    Weekday,
    CourseKind,
    CourseBase,
    ClassHours,
    AttendanceStub,
    Attendance,
    MarkInfo,
    LtpDetails,
    CBLCourse,
    LBCCourse,
    PBLCourse,
    RBLCourse,
    PBCCourse,
    Course,
    LtpCourse,
)
from .user import User, CoursesMetadata
from .grades import GradeInfo, SemesterInfo, AcademicHistory
from .contacts import FacultyAdvisor, Contributor
from .result import DecodeResult

__all__ = [
    # Status
    "StatusCode",
    # Course models
    "Weekday",
    "CourseKind",
    "CourseBase",
    "ClassHours",
    "AttendanceStub",
    "Attendance",
    "MarkInfo",
    "LtpDetails",
    "CBLCourse",
    "LBCCourse",
    "PBLCourse",
    "RBLCourse",
    "PBCCourse",
    "Course",
    "LtpCourse",
    # User models
    "User",
    "CoursesMetadata",
    # Grade history
    "GradeInfo",
    "SemesterInfo",
    "AcademicHistory",
    # Contacts
    "FacultyAdvisor",
    "Contributor",
    # Results
    "DecodeResult",
]
