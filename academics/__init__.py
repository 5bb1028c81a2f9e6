"""
Student Academics Decoder Package
=================================

Decodes the JSON payloads of a university student-information system
(profile, enrolled courses, attendance, internal marks, grade history,
faculty advisor, contributors) into an immutable, typed academic model.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           DECODE LAYER                                  │
│        (Pure functions - JSON in, domain objects out, NO I/O)           │
│                                                                         │
│  ┌──────────────┐  ┌──────────────┐  ┌──────────────────────────────┐   │
│  │  extractors  │  │   temporal   │  │  parser (decode_* entry       │   │
│  │ (typed reads)│  │ (IST / UTC)  │  │  points, DecodeResult)        │   │
│  └──────────────┘  └──────────────┘  └──────────────────────────────┘   │
│                                                                         │
│  ┌────────────────────┐  ┌────────────────────┐  ┌──────────────────┐   │
│  │   CourseBuilder    │  │ GradeHistoryJoiner │  │    Timetable     │   │
│  │ (5 course variants)│  │ (group + join)     │  │ (weekly view)    │   │
│  └────────────────────┘  └────────────────────┘  └──────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns frozen dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│           (UI only - can be swapped without touching decoding)          │
│                                                                         │
│  TerminalDisplay: formats and prints to console                         │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     AcademicsReporter                                   │
│       (Orchestrator - reads a saved payload, decodes, displays)         │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

academics/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # DecodeError taxonomy
├── logger.py            # Package logger
├── reporter.py          # AcademicsReporter orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── status.py        # StatusCode
│   ├── course.py        # Course variants, ClassHours, Attendance, MarkInfo
│   ├── user.py          # User, CoursesMetadata
│   ├── grades.py        # GradeInfo, SemesterInfo, AcademicHistory
│   ├── contacts.py      # FacultyAdvisor, Contributor
│   └── result.py        # DecodeResult
│
├── data/                # Value extraction and parsing
│   ├── extractors.py    # get_string, get_number, ...
│   ├── temporal.py      # Timestamp normalization
│   └── parser.py        # decode_* / try_decode_* operations
│
├── engines/             # Builders and derived views
│   ├── course_builder.py # CourseBuilder
│   ├── grade_history.py  # GradeHistoryJoiner
│   └── timetable.py      # Timetable, build_timetable
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from academics import decode_enrollment, decode_grade_history

    user = decode_enrollment(payload_text)
    if user is None:
        ...  # payload was malformed

    for course in user.courses:
        print(course.title, course.credits)

Or, when the reason for a failure matters:

    from academics import try_decode_enrollment

    result = try_decode_enrollment(payload_text)
    if not result.ok:
        print(type(result.error).__name__, result.error)

Running from command line:

    python -m academics enrollment payload.json

"""

# Version
__version__ = "2.0.0"

# Decode operations (imported first: the engines depend on data.extractors)
from .data import (
    parse_document,
    decode_status,
    try_decode_bare_user,
    decode_bare_user,
    try_decode_enrollment,
    decode_enrollment,
    try_decode_grade_history,
    decode_grade_history,
    try_decode_advisor,
    decode_advisor,
    try_decode_contributors,
    decode_contributors,
)

# Model exports
from .models import (
    StatusCode,
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
    User,
    CoursesMetadata,
    GradeInfo,
    SemesterInfo,
    AcademicHistory,
    FacultyAdvisor,
    Contributor,
    DecodeResult,
)

# Errors
from .errors import (
    DecodeError,
    MissingOrInvalidField,
    MalformedTimestamp,
    UnrecognizedVariant,
    StructuralFailure,
)

# Engine exports
from .engines import CourseBuilder, GradeHistoryJoiner, Timetable, build_timetable

# Orchestration and UI
from .reporter import AcademicsReporter
from .ui import TerminalDisplay
from .cli import main

__all__ = [
    # Version
    "__version__",
    # Decode operations
    "parse_document",
    "decode_status",
    "try_decode_bare_user",
    "decode_bare_user",
    "try_decode_enrollment",
    "decode_enrollment",
    "try_decode_grade_history",
    "decode_grade_history",
    "try_decode_advisor",
    "decode_advisor",
    "try_decode_contributors",
    "decode_contributors",
    # Models
    "StatusCode",
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
    "User",
    "CoursesMetadata",
    "GradeInfo",
    "SemesterInfo",
    "AcademicHistory",
    "FacultyAdvisor",
    "Contributor",
    "DecodeResult",
    # Errors
    "DecodeError",
    "MissingOrInvalidField",
    "MalformedTimestamp",
    "UnrecognizedVariant",
    "StructuralFailure",
    # Engines
    "CourseBuilder",
    "GradeHistoryJoiner",
    "Timetable",
    "build_timetable",
    # Orchestration and UI
    "AcademicsReporter",
    "TerminalDisplay",
    "main",
]
