"""
Weekly timetable view.

Rearranges the ClassHours of every LTP course of a decoded User into one
schedule per weekday.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..models import User, ClassHours, Course, Weekday


@dataclass(frozen=True)
class Timetable:
    """
    A student's week, one ordered schedule per weekday.

    ``days`` holds a ``(Weekday, slots)`` pair for every weekday, Monday
    first, so ``for_day`` never fails and the view stays hashable.
    """
    owner: User
    days: Tuple[Tuple[Weekday, Tuple[ClassHours, ...]], ...]

    def for_day(self, day: Weekday) -> Tuple[ClassHours, ...]:
        for weekday, slots in self.days:
            if weekday == day:
                return slots
        return ()

    def active_days(self) -> Tuple[Weekday, ...]:
        """Weekdays that have at least one class, Monday first."""
        return tuple(day for day, slots in self.days if slots)

    def course_for(self, hours: ClassHours) -> Optional[Course]:
        """Resolve the course a timetable slot belongs to."""
        return self.owner.get_course(hours.class_number)


def build_timetable(user: User) -> Timetable:
    """
    Build the weekly timetable of a decoded user.

    Slots on the same day are ordered by start time; slots that start at
    the same time keep course order.
    """
    days: Dict[Weekday, list] = {day: [] for day in Weekday}
    for course in user.courses:
        if not course.is_ltp:
            continue
        for hours in course.ltp.timings:
            days[hours.day].append(hours)

    return Timetable(
        owner=user,
        days=tuple(
            (day, tuple(sorted(days[day], key=lambda h: h.start.time())))
            for day in Weekday
        ),
    )
