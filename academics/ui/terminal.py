"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the academics package.

To present the decoded data elsewhere (a web page, an app screen), create a
new class with the same method signatures but different output handling.
"""

from typing import List

from ..models import (
    StatusCode,
    User,
    Course,
    CourseKind,
    AcademicHistory,
    FacultyAdvisor,
    Contributor,
)
from ..engines import Timetable


class TerminalDisplay:
    """
    Pretty terminal output for decoded payloads.

    Times are printed exactly as decoded: class hours in campus-local time,
    refresh times in UTC.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    # Attendance below this is shown in red
    ATTENDANCE_WARNING = 75.0

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"{cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_status(cls, status: StatusCode):
        color = cls.GREEN if status == StatusCode.SUCCESS else cls.YELLOW
        print(f"  {cls.BOLD}Status:{cls.RESET} {color}{status.name}{cls.RESET}")

    @classmethod
    def print_user_info(cls, user: User):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Reg. No:{cls.RESET} {user.reg_no}")
        print(f"  {cls.BOLD}Date of Birth:{cls.RESET} {user.date_of_birth.isoformat()}")
        print(f"  {cls.BOLD}Campus:{cls.RESET} {user.campus}")
        print(f"  {cls.BOLD}Phone:{cls.RESET} {user.phone}")
        if user.metadata is not None:
            print(f"  {cls.BOLD}Semester:{cls.RESET} {user.metadata.semester}")
            print(f"  {cls.BOLD}Refreshed (UTC):{cls.RESET} {user.metadata.refreshed:%Y-%m-%d %H:%M}")
            print(f"  {cls.BOLD}Total Credits:{cls.RESET} {user.metadata.total_credits}")

    @classmethod
    def print_courses(cls, user: User):
        """Print the enrolled courses in tabular format."""
        cls.print_header(f"COURSES ({len(user.courses)})")
        print(f"\n  {cls.BOLD}{'CLASS':<8} {'KIND':<5} {'CODE':<10} {'TITLE':<32} {'CR':>3} {'ATT%':>6}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 68}{cls.RESET}")
        for course in user.courses:
            print(f"  {course.class_number:<8} {course.kind.value:<5} {course.course_code:<10} "
                  f"{course.title[:32]:<32} {course.credits:>3} {cls._attendance_str(course):>6}")
            if course.kind == CourseKind.PBC and course.project_title:
                print(f"  {cls.DIM}         └─ Project: {course.project_title}{cls.RESET}")

    @classmethod
    def _attendance_str(cls, course: Course) -> str:
        if not course.is_ltp or not course.ltp.attendance.supported:
            return "-"
        percentage = course.ltp.attendance.percentage
        color = cls.RED if percentage < cls.ATTENDANCE_WARNING else cls.GREEN
        return f"{color}{percentage:>5.1f}{cls.RESET}"

    @classmethod
    def print_timetable(cls, timetable: Timetable):
        """Print the weekly timetable, one block per day with classes."""
        cls.print_header("TIMETABLE (IST)")
        active_days = timetable.active_days()
        if not active_days:
            print(f"  {cls.DIM}No timetabled classes.{cls.RESET}")
            return
        for day in active_days:
            cls.print_subheader(day.name.capitalize())
            for hours in timetable.for_day(day):
                course = timetable.course_for(hours)
                title = course.title if course is not None else str(hours.class_number)
                venue = course.ltp.venue if course is not None and course.is_ltp else ""
                print(f"  {hours.start:%H:%M}-{hours.end:%H:%M}  {title:<36} {cls.DIM}{venue}{cls.RESET}")

    @classmethod
    def print_academic_history(cls, history: AcademicHistory):
        """Print semester-wise grades and the overall summary."""
        cls.print_header("ACADEMIC HISTORY")
        print(f"  {cls.BOLD}CGPA:{cls.RESET} {history.cgpa:.2f}")
        print(f"  {cls.BOLD}Credits:{cls.RESET} {history.credits_earned} earned / "
              f"{history.credits_registered} registered")
        print(f"  {cls.BOLD}Refreshed (UTC):{cls.RESET} {history.last_refreshed:%Y-%m-%d %H:%M}")

        for semester in history.semesters:
            cls.print_subheader(f"{semester.exam_id}  GPA {semester.gpa:.2f}  "
                                f"({semester.credits_earned} credits)")
            for grade in semester.grades:
                print(f"  {grade.course_code:<10} {grade.course_title[:40]:<40} "
                      f"{grade.credits:>2}  {cls.BOLD}{grade.grade}{cls.RESET}")

    @classmethod
    def print_advisor(cls, advisor: FacultyAdvisor):
        cls.print_header("FACULTY ADVISOR")
        print(f"  {cls.BOLD}{advisor.name}{cls.RESET}, {advisor.designation}")
        print(f"  {advisor.school} / {advisor.division}")
        print(f"  Cabin {advisor.cabin}  Intercom {advisor.intercom}")
        print(f"  {advisor.phone}  {advisor.email}")

    @classmethod
    def print_contributors(cls, contributors: List[Contributor]):
        cls.print_header("CONTRIBUTORS")
        for contributor in contributors:
            print(f"  {contributor.name:<24} {contributor.role:<20} {cls.DIM}{contributor.github_profile}{cls.RESET}")
