"""
Decode engines.

This package contains the builders that turn validated payload fragments
into domain aggregates, plus views derived from those aggregates.
"""

from .course_builder import CourseBuilder
from .grade_history import GradeHistoryJoiner
from .timetable import Timetable, build_timetable

__all__ = [
    "CourseBuilder",
    "GradeHistoryJoiner",
    "Timetable",
    "build_timetable",
]
