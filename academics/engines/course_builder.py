"""
Course Builder.

This module turns one element of the enrollment "courses" array into one
of the five course variants.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

from ..config import (
    NOT_AVAILABLE,
    LAB_TITLE_SUFFIX,
    LTPJC_LAB_HOURS_INDEX,
    LTPJC_CREDITS_INDEX,
)
from ..data.extractors import (
    get_string,
    get_string_or,
    get_optional_string,
    get_number,
    get_optional_number,
    get_int,
    get_bool,
    get_object,
    get_object_items,
)
from ..data.temporal import to_local_fixed_offset, parse_class_date
from ..errors import MissingOrInvalidField, UnrecognizedVariant
from ..logger import get_logger
from ..models import (
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
)

logger = get_logger("course_builder")


# Wire course_type code -> variant. 5 and 6 are both project components.
COURSE_TYPE_CODES = {
    1: CourseKind.CBL,
    2: CourseKind.LBC,
    3: CourseKind.PBL,
    4: CourseKind.RBL,
    5: CourseKind.PBC,
    6: CourseKind.PBC,
}


def parse_ltpjc_credits(ltpjc: str) -> int:
    """Credits are the digits from index 4 of the LTPJC descriptor."""
    digits = ltpjc[LTPJC_CREDITS_INDEX:]
    if not digits.isdecimal():
        raise MissingOrInvalidField("ltpjc", f"has no credit count ({ltpjc!r})")
    return int(digits)


def parse_ltpjc_lab_hours(ltpjc: str) -> int:
    """The practical (lab) hours digit at index 2 of the LTPJC descriptor."""
    if len(ltpjc) <= LTPJC_LAB_HOURS_INDEX or not ltpjc[LTPJC_LAB_HOURS_INDEX].isdecimal():
        raise MissingOrInvalidField("ltpjc", f"has no lab hours digit ({ltpjc!r})")
    return int(ltpjc[LTPJC_LAB_HOURS_INDEX])


class CourseBuilder:
    """
    Builds course variants in three stages.

    ═══════════════════════════════════════════════════════════════════════════
    STAGES
    ═══════════════════════════════════════════════════════════════════════════

    1. SELECT VARIANT:  course_type code -> CourseKind
                        (unknown codes raise UnrecognizedVariant)

    2. COMMON FIELDS:   CourseBase for every variant, and LtpDetails
                        (slot, venue, timings, attendance, marks) for
                        CBL, LBC and PBL only

    3. SPECIALIZE:      LBC  -> title gets " Lab"
                        PBC  -> optional project title
                        CBL, PBL, RBL -> nothing extra

    Each stage returns new immutable values; nothing is mutated in place.

    SKIP VS ABORT:
    --------------
    build_all() skips an element whose type code is unknown and keeps
    going. Any other failure (a missing field, a malformed time) escapes
    and aborts the whole enrollment decode.

    ═══════════════════════════════════════════════════════════════════════════
    """

    def select_variant(self, code: int) -> CourseKind:
        kind = COURSE_TYPE_CODES.get(code)
        if kind is None:
            raise UnrecognizedVariant(code)
        return kind

    def build_root(self, course_obj: dict) -> CourseBase:
        """Stage 2a: fields shared by every variant."""
        ltpjc = get_string(course_obj, "ltpjc")
        return CourseBase(
            class_number=get_int(course_obj, "class_number"),
            course_code=get_string(course_obj, "course_code"),
            title=get_string(course_obj, "course_title"),
            course_mode=get_string_or(course_obj, "course_mode", NOT_AVAILABLE),
            course_option=get_string_or(course_obj, "course_option", NOT_AVAILABLE),
            subject_type=get_string_or(course_obj, "subject_type", NOT_AVAILABLE),
            faculty=get_string_or(course_obj, "faculty", NOT_AVAILABLE),
            ltpjc=ltpjc,
            credits=parse_ltpjc_credits(ltpjc),
        )

    def build_ltp_details(self, course_obj: dict, kind: CourseKind, base: CourseBase) -> LtpDetails:
        """Stage 2b: timetable, attendance and marks of an LTP course."""
        timings = tuple(
            self._build_class_hours(timing_obj, base.class_number)
            for timing_obj in get_object_items(course_obj, "timings")
        )

        class_length = 1
        if kind == CourseKind.LBC:
            class_length = parse_ltpjc_lab_hours(base.ltpjc)
        attendance = self._build_attendance(
            get_object(course_obj, "attendance"), base.class_number, class_length
        )

        marks_obj = get_object(course_obj, "marks")
        marks_supported = get_bool(marks_obj, "supported")
        marks: Tuple[MarkInfo, ...] = ()
        scored_total = 0.0
        tested_total = 0
        if marks_supported:
            marks = tuple(
                self._build_mark_info(mark_obj, base.class_number)
                for mark_obj in get_object_items(marks_obj, "assessments")
            )
            for mark in marks:
                if mark.is_conducted:
                    scored_total += mark.weighted_marks
                    tested_total += mark.weightage

        return LtpDetails(
            slot=get_string_or(course_obj, "slot", NOT_AVAILABLE),
            venue=get_string_or(course_obj, "venue", NOT_AVAILABLE),
            timings=timings,
            attendance=attendance,
            marks=marks,
            marks_supported=marks_supported,
            internal_marks_scored=round(scored_total, 2),
            total_marks_tested=tested_total,
        )

    def specialize(self, kind: CourseKind, base: CourseBase,
                   ltp: Optional[LtpDetails], course_obj: dict) -> Course:
        """Stage 3: wrap the common parts into the concrete variant."""
        if kind == CourseKind.CBL:
            return CBLCourse(base=base, ltp=ltp)
        if kind == CourseKind.LBC:
            lab_base = replace(base, title=base.title + LAB_TITLE_SUFFIX)
            return LBCCourse(base=lab_base, ltp=ltp)
        if kind == CourseKind.PBL:
            return PBLCourse(base=base, ltp=ltp)
        if kind == CourseKind.RBL:
            return RBLCourse(base=base)
        if kind == CourseKind.PBC:
            return PBCCourse(
                base=base,
                project_title=get_string_or(course_obj, "project_title", None),
            )
        raise UnrecognizedVariant(kind)

    def build(self, course_obj: dict) -> Course:
        """Run all three stages for one course object."""
        kind = self.select_variant(get_int(course_obj, "course_type"))
        base = self.build_root(course_obj)
        ltp = self.build_ltp_details(course_obj, kind, base) if kind.is_ltp else None
        return self.specialize(kind, base, ltp, course_obj)

    def build_all(self, course_objs: list) -> Tuple[Tuple[Course, ...], int]:
        """
        Build every course of the enrollment array.

        Returns:
            (courses, total_credits) where courses excludes skipped elements
            and total_credits is the sum of their LTPJC credits
        """
        courses: List[Course] = []
        total_credits = 0

        for index, course_obj in enumerate(course_objs):
            try:
                course = self.build(course_obj)
            except UnrecognizedVariant as exc:
                logger.info("Skipping courses[%d]: %s", index, exc)
                continue
            courses.append(course)
            total_credits += course.credits

        return tuple(courses), total_credits

    # -------------------------------------------------------------------------
    # Sub-record builders
    # -------------------------------------------------------------------------

    def _build_class_hours(self, timing_obj: dict, class_number: int) -> ClassHours:
        # Wire days are 0-based (0 = Monday); Weekday is ISO 1-based.
        day_index = get_int(timing_obj, "day")
        if not 0 <= day_index <= 6:
            raise MissingOrInvalidField("day", f"out of range ({day_index})")
        return ClassHours(
            class_number=class_number,
            start=to_local_fixed_offset(get_string(timing_obj, "start_time"), "start_time"),
            end=to_local_fixed_offset(get_string(timing_obj, "end_time"), "end_time"),
            day=Weekday(day_index + 1),
        )

    def _build_attendance(self, attendance_obj: dict, class_number: int,
                          class_length: int) -> Attendance:
        if not get_bool(attendance_obj, "supported"):
            return Attendance(
                class_number=class_number,
                supported=False,
                total_classes=0,
                attended_classes=0,
                percentage=0.0,
                class_length=class_length,
            )

        stubs = [
            AttendanceStub(
                class_date=parse_class_date(get_string(stub_obj, "date")),
                slot=get_string(stub_obj, "slot"),
                status=get_string(stub_obj, "status"),
                reason=get_string(stub_obj, "reason"),
            )
            for stub_obj in get_object_items(attendance_obj, "details")
        ]
        # list.sort is stable, so several classes on one date keep payload order
        stubs.sort(key=lambda stub: stub.class_date)

        return Attendance(
            class_number=class_number,
            supported=True,
            total_classes=get_int(attendance_obj, "total_classes"),
            attended_classes=get_int(attendance_obj, "attended_classes"),
            percentage=get_number(attendance_obj, "attendance_percentage"),
            class_length=class_length,
            details=tuple(stubs),
        )

    def _build_mark_info(self, mark_obj: dict, class_number: int) -> MarkInfo:
        max_marks = get_int(mark_obj, "max_marks")
        scored = get_optional_number(mark_obj, "scored_marks")
        if scored is not None and max_marks <= 0:
            raise MissingOrInvalidField("max_marks", f"not positive ({max_marks})")
        status = get_optional_string(mark_obj, "status")
        return MarkInfo(
            class_number=class_number,
            title=get_string(mark_obj, "title").upper(),
            max_marks=max_marks,
            weightage=get_int(mark_obj, "weightage"),
            scored=scored,
            status=status.upper() if status is not None else None,
        )
