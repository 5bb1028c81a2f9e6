from datetime import date, datetime

import pytest

from academics.config import IST
from academics.engines.course_builder import (
    CourseBuilder,
    parse_ltpjc_credits,
    parse_ltpjc_lab_hours,
)
from academics.errors import MissingOrInvalidField, MalformedTimestamp, UnrecognizedVariant
from academics.models import (
    CourseKind,
    Weekday,
    CBLCourse,
    LBCCourse,
    PBLCourse,
    RBLCourse,
    PBCCourse,
)


@pytest.fixture
def builder():
    return CourseBuilder()


@pytest.fixture
def course_objs(enrollment_payload):
    return enrollment_payload["courses"]


@pytest.mark.parametrize("code, kind", [
    (1, CourseKind.CBL),
    (2, CourseKind.LBC),
    (3, CourseKind.PBL),
    (4, CourseKind.RBL),
    (5, CourseKind.PBC),
    (6, CourseKind.PBC),
])
def test_select_variant(builder, code, kind):
    assert builder.select_variant(code) == kind


@pytest.mark.parametrize("code", [0, 7, 99, -1])
def test_select_variant_rejects_unknown_codes(builder, code):
    with pytest.raises(UnrecognizedVariant):
        builder.select_variant(code)


def test_ltpjc_parsing():
    assert parse_ltpjc_credits("30003") == 3
    assert parse_ltpjc_credits("000012") == 12
    assert parse_ltpjc_lab_hours("00202") == 2
    with pytest.raises(MissingOrInvalidField):
        parse_ltpjc_credits("3000")
    with pytest.raises(MissingOrInvalidField):
        parse_ltpjc_lab_hours("00x02")
    with pytest.raises(MissingOrInvalidField):
        parse_ltpjc_credits("0000\u00b2")
    with pytest.raises(MissingOrInvalidField):
        parse_ltpjc_lab_hours("00\u00b302")


def test_root_fields_default_to_na(builder, course_objs):
    base = builder.build_root(course_objs[0])
    assert base.class_number == 1001
    assert base.course_mode == "CBL"
    assert base.faculty == "Dr. R. Rao"
    assert base.course_option == "NA"
    assert base.subject_type == "NA"
    assert base.credits == 3


def test_each_code_builds_its_variant(builder, course_objs):
    built = [builder.build(obj) for obj in course_objs]
    assert [type(c) for c in built] == [CBLCourse, LBCCourse, PBLCourse, RBLCourse, PBCCourse]
    assert [c.is_ltp for c in built] == [True, True, True, False, False]


def test_cbl_course_ltp_details(builder, course_objs):
    course = builder.build(course_objs[0])
    assert course.title == "Computer Programming"
    assert course.ltp.slot == "A1+TA1"
    assert course.ltp.venue == "SJT 101"
    assert len(course.ltp.timings) == 2


def test_day_index_is_shifted_by_one(builder, course_objs):
    course = builder.build(course_objs[0])
    monday_slot = course.ltp.timings[1]
    assert monday_slot.day == Weekday.MONDAY
    assert int(monday_slot.day) == 1
    assert course.ltp.timings[0].day == Weekday.WEDNESDAY


def test_class_hours_are_local_and_point_back_by_class_number(builder, course_objs):
    hours = builder.build(course_objs[0]).ltp.timings[1]
    assert hours.class_number == 1001
    assert hours.start == datetime(1970, 1, 1, 8, 0, tzinfo=IST)
    assert hours.end == datetime(1970, 1, 1, 8, 50, tzinfo=IST)


def test_day_index_out_of_range_fails(builder, course_objs):
    course_objs[0]["timings"][0]["day"] = 7
    with pytest.raises(MissingOrInvalidField):
        builder.build(course_objs[0])


def test_attendance_keeps_source_percentage_and_orders_stubs(builder, course_objs):
    course_objs[0]["attendance"]["attendance_percentage"] = 89.5
    attendance = builder.build(course_objs[0]).ltp.attendance
    assert attendance.supported
    assert (attendance.total_classes, attendance.attended_classes) == (20, 18)
    assert attendance.percentage == 89.5
    assert attendance.class_length == 1
    assert [s.class_date.date() for s in attendance.details] == [date(2015, 1, 7), date(2015, 1, 14)]
    assert attendance.details[0].reason == "Medical"
    assert attendance.stubs_on(date(2015, 1, 14))[0].status == "Present"


def test_unsupported_attendance_is_zeroed(builder, course_objs):
    attendance = builder.build(course_objs[1]).ltp.attendance
    assert not attendance.supported
    assert attendance.total_classes == attendance.attended_classes == 0
    assert attendance.percentage == 0
    assert attendance.details == ()


def test_lab_class_length_is_lab_hours_digit(builder, course_objs):
    course = builder.build(course_objs[1])
    assert course.ltp.attendance.class_length == 2


def test_lab_title_suffix(builder, course_objs):
    course = builder.build(course_objs[1])
    assert course.title == "Computer Programming Lab"
    assert course.title.endswith(" Lab")


def test_marks_aggregates(builder, course_objs):
    ltp = builder.build(course_objs[0]).ltp
    assert ltp.marks_supported
    assert [m.title for m in ltp.marks] == ["CAT-1", "QUIZ-1", "CAT-2"]
    assert ltp.marks[0].status == "PRESENT"
    assert ltp.marks[0].weighted_marks == pytest.approx(12.0)
    assert not ltp.marks[2].is_conducted
    assert ltp.marks[2].weighted_marks is None
    assert ltp.marks[2].status is None
    assert ltp.internal_marks_scored == 15.5
    assert ltp.total_marks_tested == 20


def test_internal_marks_are_rounded_to_two_places(builder, course_objs):
    course_objs[0]["marks"]["assessments"] = [
        {"title": "cat-1", "max_marks": 3, "weightage": 10, "scored_marks": 1, "status": "p"},
    ]
    assert builder.build(course_objs[0]).ltp.internal_marks_scored == 3.33


def test_unsupported_marks_are_zeroed(builder, course_objs):
    ltp = builder.build(course_objs[1]).ltp
    assert not ltp.marks_supported
    assert ltp.marks == ()
    assert ltp.internal_marks_scored == 0
    assert ltp.total_marks_tested == 0


def test_pbc_project_title(builder, course_objs):
    with_title = builder.build(course_objs[4])
    assert with_title.project_title == "Campus Navigation App"

    del course_objs[4]["project_title"]
    assert builder.build(course_objs[4]).project_title is None


def test_non_ltp_courses_ignore_ltp_fields(builder, course_objs):
    course_objs[3]["timings"] = "not even a list"
    course = builder.build(course_objs[3])
    assert isinstance(course, RBLCourse)
    assert not hasattr(course, "ltp")


def test_build_all_skips_unknown_types(builder, course_objs):
    course_objs.append({"course_type": 7, "course_title": "Mystery"})
    courses, total_credits = builder.build_all(course_objs)
    assert len(courses) == len(course_objs) - 1
    assert total_credits == sum(c.credits for c in courses) == 12


def test_build_all_propagates_other_failures(builder, course_objs):
    course_objs[0]["timings"][0]["start_time"] = "soon"
    with pytest.raises(MalformedTimestamp):
        builder.build_all(course_objs)


def test_ltp_course_without_attendance_fails(builder, course_objs):
    del course_objs[2]["attendance"]
    with pytest.raises(MissingOrInvalidField):
        builder.build(course_objs[2])
