"""
Grade History Joiner.

This module builds a student's AcademicHistory from the two arrays of the
grades payload: flat per-course grade entries and per-semester summaries.
"""

from typing import Dict, List, Tuple

from ..config import NIL_COURSE_OPTION
from ..data.extractors import get_string, get_number, get_int, get_object_items
from ..data.temporal import to_canonical_utc, parse_exam_month
from ..errors import MissingOrInvalidField
from ..logger import get_logger
from ..models import GradeInfo, SemesterInfo, AcademicHistory

logger = get_logger("grade_history")


class GradeHistoryJoiner:
    """
    Groups grade entries by exam session and joins them with summaries.

    THE TWO ARRAYS:
    ---------------
    "grades":        one entry per course per exam, each with "exam_held"
    "semester_wise": one entry per exam session with credits and GPA,
                     keyed by the same "exam_held" value

    JOIN SEMANTICS:
    ---------------
    This is an INNER join. An exam session that has grades but no summary
    (e.g., results published before the GPA is computed) is left out of
    ``semesters``; its grades are still in the flat ``grades`` list.
    A summary with no grades is left out too.

    FAILURE POLICY:
    ---------------
    There is no skipping here. A single bad grade or summary entry aborts
    the whole history decode.
    """

    def build_grade_info(self, grade_obj: dict) -> GradeInfo:
        grade = get_string(grade_obj, "grade")
        if not grade:
            raise MissingOrInvalidField("grade", "empty")

        option = get_string(grade_obj, "option").upper()
        if option == NIL_COURSE_OPTION:
            option = ""

        exam_id = get_string(grade_obj, "exam_held")
        return GradeInfo(
            course_code=get_string(grade_obj, "course_code"),
            course_title=get_string(grade_obj, "course_title"),
            course_type=get_string(grade_obj, "course_type"),
            course_option=option,
            credits=get_int(grade_obj, "credits"),
            grade=grade[0],
            exam_id=exam_id,
            exam_date=parse_exam_month(exam_id),
        )

    def group_by_exam(self, grades) -> Dict[str, List[GradeInfo]]:
        """Group grades by exam id, keeping payload order inside each group."""
        groups: Dict[str, List[GradeInfo]] = {}
        for info in grades:
            groups.setdefault(info.exam_id, []).append(info)
        return groups

    def join_semesters(self, groups: Dict[str, List[GradeInfo]],
                       summary_objs: list) -> Tuple[SemesterInfo, ...]:
        """
        Inner-join grade groups with semester summaries on the exam id.

        Every summary is decoded (and validated) even when it has no
        matching group.
        """
        semesters = []
        for summary_obj in summary_objs:
            exam_id = get_string(summary_obj, "exam_held")
            credits_earned = get_int(summary_obj, "credits")
            gpa = get_number(summary_obj, "gpa")

            group = groups.get(exam_id)
            if group is None:
                continue
            semesters.append(SemesterInfo(
                exam_id=exam_id,
                grades=tuple(group),
                credits_earned=credits_earned,
                gpa=gpa,
                exam_date=parse_exam_month(exam_id),
            ))

        unmatched = set(groups) - {s.exam_id for s in semesters}
        if unmatched:
            logger.debug("Exam sessions without a summary: %s", sorted(unmatched))

        return tuple(sorted(semesters))

    def build(self, root: dict) -> AcademicHistory:
        """Build the full history from the grades payload root object."""
        grades = tuple(
            self.build_grade_info(grade_obj)
            for grade_obj in get_object_items(root, "grades")
        )
        semesters = self.join_semesters(
            self.group_by_exam(grades),
            get_object_items(root, "semester_wise"),
        )

        return AcademicHistory(
            grades=grades,
            semesters=semesters,
            cgpa=get_number(root, "cgpa"),
            credits_registered=get_int(root, "credits_registered"),
            credits_earned=get_int(root, "credits_earned"),
            last_refreshed=to_canonical_utc(
                get_string(root, "grades_refreshed"), "grades_refreshed"
            ),
        )
