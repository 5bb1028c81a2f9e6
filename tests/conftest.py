import copy
import json

import pytest


ENROLLMENT = {
    "status": {"code": 0},
    "reg_no": "14BCE0001",
    "dob": "04071995",
    "campus": "vellore",
    "mobile": "9876543210",
    "semester": "WS 2014-15",
    "refreshed": "2015-01-20T10:20:30Z",
    "courses": [
        {
            "course_type": 1,
            "class_number": 1001,
            "course_code": "CSE101",
            "course_title": "Computer Programming",
            "course_mode": "CBL",
            "faculty": "Dr. R. Rao",
            "ltpjc": "30003",
            "slot": "A1+TA1",
            "venue": "SJT 101",
            "timings": [
                {"start_time": "04:30:00Z", "end_time": "05:20:00Z", "day": 2},
                {"start_time": "02:30:00Z", "end_time": "03:20:00Z", "day": 0},
            ],
            "attendance": {
                "supported": True,
                "total_classes": 20,
                "attended_classes": 18,
                "attendance_percentage": 90,
                "details": [
                    {"date": "2015-01-14", "slot": "A1", "status": "Present", "reason": ""},
                    {"date": "2015-01-07", "slot": "A1", "status": "Absent", "reason": "Medical"},
                ],
            },
            "marks": {
                "supported": True,
                "assessments": [
                    {"title": "cat-1", "max_marks": 50, "weightage": 15,
                     "scored_marks": 40, "status": "present"},
                    {"title": "quiz-1", "max_marks": 5, "weightage": 5,
                     "scored_marks": 3.5, "status": "present"},
                    {"title": "cat-2", "max_marks": 50, "weightage": 15,
                     "scored_marks": None},
                ],
            },
        },
        {
            "course_type": 2,
            "class_number": 1002,
            "course_code": "CSE101",
            "course_title": "Computer Programming",
            "ltpjc": "00202",
            "slot": "L21+L22",
            "venue": "SJT 516",
            "timings": [
                {"start_time": "08:30:00Z", "end_time": "10:10:00Z", "day": 4},
            ],
            "attendance": {
                "supported": False,
                "total_classes": 10,
                "attended_classes": 9,
                "attendance_percentage": 90,
                "details": [
                    {"date": "2015-01-09", "slot": "L21", "status": "Present", "reason": ""},
                ],
            },
            "marks": {"supported": False},
        },
        {
            "course_type": 3,
            "class_number": 1003,
            "course_code": "MEE201",
            "course_title": "Engineering Design",
            "ltpjc": "20224",
            "timings": [
                {"start_time": "03:30:00Z", "end_time": "04:20:00Z", "day": 0},
            ],
            "attendance": {
                "supported": True,
                "total_classes": 5,
                "attended_classes": 5,
                "attendance_percentage": 100,
                "details": [],
            },
            "marks": {"supported": True, "assessments": []},
        },
        {
            "course_type": 4,
            "class_number": 1004,
            "course_code": "RES301",
            "course_title": "Research Methods",
            "ltpjc": "00002",
        },
        {
            "course_type": 6,
            "class_number": 1005,
            "course_code": "CSE497",
            "course_title": "Project",
            "ltpjc": "00011",
            "project_title": "Campus Navigation App",
        },
    ],
}


GRADES = {
    "status": {"code": 0},
    "grades": [
        {"course_code": "MAT101", "course_title": "Calculus", "course_type": "TH",
         "option": "NIL", "credits": 4, "grade": "S", "exam_held": "S1"},
        {"course_code": "PHY101", "course_title": "Physics", "course_type": "TH",
         "option": "elective", "credits": 3, "grade": "A", "exam_held": "S1"},
        {"course_code": "CSE201", "course_title": "Data Structures", "course_type": "ETH",
         "option": "NIL", "credits": 4, "grade": "B", "exam_held": "S2"},
    ],
    "semester_wise": [
        {"exam_held": "S1", "credits": 20, "gpa": 9.1},
    ],
    "cgpa": 8.9,
    "credits_registered": 60,
    "credits_earned": 56,
    "grades_refreshed": "2015-06-01T12:00:00+05:30",
}


ADVISOR = {
    "advisor": {
        "name": "Dr. S. Kumar",
        "school": "SCSE",
        "designation": "Associate Professor",
        "division": "Software Systems",
        "phone": "0416-2202020",
        "email": "skumar@example.edu",
        "cabin": "SJT 312-A",
        "intercom": "5510",
    }
}


CONTRIBUTORS = {
    "contributors": [
        {"name": "Aarav", "role": "Backend", "github_profile": "https://github.com/aarav"},
        {"name": "Meera", "role": "App", "github_profile": "https://github.com/meera"},
    ]
}


@pytest.fixture
def enrollment_payload():
    """A fresh, mutable enrollment payload (one course of each variant)."""
    return copy.deepcopy(ENROLLMENT)


@pytest.fixture
def grades_payload():
    return copy.deepcopy(GRADES)


@pytest.fixture
def advisor_payload():
    return copy.deepcopy(ADVISOR)


@pytest.fixture
def contributors_payload():
    return copy.deepcopy(CONTRIBUTORS)


@pytest.fixture
def as_text():
    """Serialize a payload the way it arrives over the wire."""
    return json.dumps
