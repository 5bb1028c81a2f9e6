from datetime import date, datetime, timedelta, timezone

import pytest

from academics.config import IST
from academics.data.temporal import (
    to_local_fixed_offset,
    to_canonical_utc,
    parse_date_of_birth,
    parse_class_date,
    parse_exam_month,
)
from academics.errors import MalformedTimestamp


IST_OFFSET = timedelta(hours=5, minutes=30)


def test_time_only_is_taken_as_utc_and_shown_in_ist():
    start = to_local_fixed_offset("02:30:00Z")
    assert start.utcoffset() == IST_OFFSET
    assert (start.hour, start.minute) == (8, 0)
    assert start.date() == date(1970, 1, 1)


def test_unzoned_datetime_is_assumed_utc():
    start = to_local_fixed_offset("2015-01-20T02:30:00")
    assert start == datetime(2015, 1, 20, 8, 0, tzinfo=IST)


def test_zoned_datetime_is_converted_not_relabelled():
    start = to_local_fixed_offset("2015-01-20T08:00:00+05:30")
    assert start == datetime(2015, 1, 20, 8, 0, tzinfo=IST)
    assert start.utcoffset() == IST_OFFSET


def test_refresh_timestamps_stay_utc():
    refreshed = to_canonical_utc("2015-01-20T10:20:30Z")
    assert refreshed == datetime(2015, 1, 20, 10, 20, 30, tzinfo=timezone.utc)
    assert refreshed.utcoffset() == timedelta(0)

    shifted = to_canonical_utc("2015-06-01T12:00:00+05:30")
    assert shifted.utcoffset() == timedelta(0)
    assert (shifted.hour, shifted.minute) == (6, 30)


def test_refresh_timestamps_reject_time_only():
    with pytest.raises(MalformedTimestamp):
        to_canonical_utc("10:20:30Z")


def test_instants_shifted_off_the_calendar_fail():
    with pytest.raises(MalformedTimestamp):
        to_local_fixed_offset("9999-12-31T23:59:59Z")
    with pytest.raises(MalformedTimestamp):
        to_canonical_utc("0001-01-01T00:00:00+05:30")


@pytest.mark.parametrize("text", ["yesterday", "", "25:00:00"])
def test_garbage_times_fail(text):
    with pytest.raises(MalformedTimestamp):
        to_local_fixed_offset(text)


def test_date_of_birth_is_strict_ddmmyyyy():
    assert parse_date_of_birth("04071995") == date(1995, 7, 4)


@pytest.mark.parametrize("text", ["4071995", "1995-07-04", "31021995", "0407199x"])
def test_date_of_birth_rejects_other_shapes(text):
    with pytest.raises(MalformedTimestamp) as exc_info:
        parse_date_of_birth(text)
    assert exc_info.value.field == "dob"


def test_class_date_is_local_midnight():
    class_date = parse_class_date("2015-01-14")
    assert class_date == datetime(2015, 1, 14, tzinfo=IST)


@pytest.mark.parametrize("text", ["2015-1-14", "14-01-2015", "2015-02-30"])
def test_class_date_rejects_other_shapes(text):
    with pytest.raises(MalformedTimestamp):
        parse_class_date(text)


def test_exam_month_is_lenient():
    assert parse_exam_month("Nov-2014") == date(2014, 11, 1)
    assert parse_exam_month("S1") is None
