"""
Payload parsing.

This module holds the public decode operations. Each takes raw JSON text
(or an already-parsed dict) and returns domain objects.

NOTE ON RESULTS:
    try_decode_*  -> DecodeResult carrying either the value or the error
    decode_*      -> the value, or None when decoding failed
    decode_status -> always a StatusCode (INVALID_DATA on failure)

None of these raise. Failures are logged once, here, at the boundary.
"""

import json
from typing import List, Optional, Union

from ..config import STATUS_CODES, NOT_AVAILABLE, PHONE_SUPPRESSED_CAMPUSES
from ..engines.course_builder import CourseBuilder
from ..engines.grade_history import GradeHistoryJoiner
from ..errors import DecodeError, MissingOrInvalidField, StructuralFailure
from ..logger import get_logger
from ..models import (
    StatusCode,
    User,
    CoursesMetadata,
    AcademicHistory,
    FacultyAdvisor,
    Contributor,
    DecodeResult,
)
from .extractors import get_string, get_int, get_object, get_object_items
from .temporal import parse_date_of_birth, to_canonical_utc

logger = get_logger("parser")

RawDocument = Union[str, bytes, bytearray, dict]


def parse_document(raw: RawDocument) -> dict:
    """
    Parse raw payload text into its root object.

    An already-parsed dict is returned as is, so callers that fetched and
    parsed the JSON themselves can hand the tree straight in.
    """
    if isinstance(raw, dict):
        return raw
    try:
        root = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise StructuralFailure(f"Payload is not valid JSON: {exc}") from None
    if not isinstance(root, dict):
        raise StructuralFailure(f"Payload root is {type(root).__name__}, expected an object")
    return root


def _require_object(root: dict, key: str) -> dict:
    try:
        return get_object(root, key)
    except MissingOrInvalidField as exc:
        raise StructuralFailure(f"Top-level '{key}': {exc}") from None


def _require_object_items(root: dict, key: str) -> list:
    try:
        return get_object_items(root, key)
    except MissingOrInvalidField as exc:
        raise StructuralFailure(f"Top-level '{key}': {exc}") from None


def _run(operation: str, decode, raw: RawDocument) -> DecodeResult:
    """Run one decode at the public boundary and wrap the outcome."""
    try:
        value = decode(parse_document(raw))
    except DecodeError as exc:
        logger.warning("%s decode failed: %s: %s", operation, type(exc).__name__, exc)
        return DecodeResult.failure(exc)
    logger.debug("%s decode succeeded", operation)
    return DecodeResult.success(value)


# =============================================================================
# STATUS
# =============================================================================

def decode_status(raw: RawDocument) -> StatusCode:
    """
    Map the payload's {"status": {"code": ...}} to a StatusCode.

    INVALID_DATA means the document is unusable or has no code;
    UNKNOWN_ERROR means a well-formed code we do not recognize.
    """
    try:
        code = get_int(_require_object(parse_document(raw), "status"), "code")
    except DecodeError as exc:
        logger.warning("Status decode failed: %s: %s", type(exc).__name__, exc)
        return StatusCode.INVALID_DATA
    return StatusCode[STATUS_CODES.get(code, "UNKNOWN_ERROR")]


# =============================================================================
# USER
# =============================================================================

def _build_bare_user(root: dict) -> User:
    reg_no = get_string(root, "reg_no")
    date_of_birth = parse_date_of_birth(get_string(root, "dob"))
    campus = get_string(root, "campus")

    # Some campuses never send a usable mobile number
    if campus in PHONE_SUPPRESSED_CAMPUSES:
        phone = NOT_AVAILABLE
    else:
        phone = get_string(root, "mobile")

    return User(reg_no=reg_no, date_of_birth=date_of_birth, campus=campus, phone=phone)


def try_decode_bare_user(raw: RawDocument) -> DecodeResult[User]:
    """Decode only the identity fields of a payload."""
    return _run("Bare user", _build_bare_user, raw)


def decode_bare_user(raw: RawDocument) -> Optional[User]:
    return try_decode_bare_user(raw).value


def _build_enrollment(root: dict) -> User:
    # STEP 1: Identity
    bare = _build_bare_user(root)

    # STEP 2: Courses (unknown course types are skipped, nothing else is)
    courses, total_credits = CourseBuilder().build_all(_require_object_items(root, "courses"))

    # STEP 3: Snapshot metadata
    metadata = CoursesMetadata(
        semester=get_string(root, "semester"),
        refreshed=to_canonical_utc(get_string(root, "refreshed"), "refreshed"),
        total_credits=total_credits,
    )

    return User(
        reg_no=bare.reg_no,
        date_of_birth=bare.date_of_birth,
        campus=bare.campus,
        phone=bare.phone,
        courses=courses,
        metadata=metadata,
    )


def try_decode_enrollment(raw: RawDocument) -> DecodeResult[User]:
    """
    Decode the full enrollment snapshot: identity, courses and metadata.

    A course element with an unknown type code is skipped. Any other
    problem, inside a course or at the top level, fails the whole decode.
    """
    return _run("Enrollment", _build_enrollment, raw)


def decode_enrollment(raw: RawDocument) -> Optional[User]:
    return try_decode_enrollment(raw).value


# =============================================================================
# GRADES
# =============================================================================

def _build_grade_history(root: dict) -> AcademicHistory:
    _require_object_items(root, "grades")
    _require_object_items(root, "semester_wise")
    return GradeHistoryJoiner().build(root)


def try_decode_grade_history(raw: RawDocument) -> DecodeResult[AcademicHistory]:
    """Decode the academic history; any bad entry fails the whole decode."""
    return _run("Grade history", _build_grade_history, raw)


def decode_grade_history(raw: RawDocument) -> Optional[AcademicHistory]:
    return try_decode_grade_history(raw).value


# =============================================================================
# ADVISOR AND CONTRIBUTORS
# =============================================================================

def _build_advisor(root: dict) -> FacultyAdvisor:
    advisor_obj = _require_object(root, "advisor")
    return FacultyAdvisor(
        name=get_string(advisor_obj, "name"),
        school=get_string(advisor_obj, "school"),
        designation=get_string(advisor_obj, "designation"),
        division=get_string(advisor_obj, "division"),
        phone=get_string(advisor_obj, "phone"),
        email=get_string(advisor_obj, "email"),
        cabin=get_string(advisor_obj, "cabin"),
        intercom=get_string(advisor_obj, "intercom"),
    )


def try_decode_advisor(raw: RawDocument) -> DecodeResult[FacultyAdvisor]:
    return _run("Advisor", _build_advisor, raw)


def decode_advisor(raw: RawDocument) -> Optional[FacultyAdvisor]:
    return try_decode_advisor(raw).value


def _build_contributors(root: dict) -> List[Contributor]:
    return [
        Contributor(
            name=get_string(contributor_obj, "name"),
            role=get_string(contributor_obj, "role"),
            github_profile=get_string(contributor_obj, "github_profile"),
        )
        for contributor_obj in _require_object_items(root, "contributors")
    ]


def try_decode_contributors(raw: RawDocument) -> DecodeResult[List[Contributor]]:
    """Decode the contributor list; one bad entry fails the whole list."""
    return _run("Contributors", _build_contributors, raw)


def decode_contributors(raw: RawDocument) -> Optional[List[Contributor]]:
    return try_decode_contributors(raw).value
