import json

import pytest

from academics.cli import main


@pytest.fixture
def write_payload(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload)
        return str(path)
    return _write


def test_enrollment_report(write_payload, enrollment_payload, capsys):
    path = write_payload("enrollment.json", enrollment_payload)
    assert main(["enrollment", path]) == 0
    out = capsys.readouterr().out
    assert "14BCE0001" in out
    assert "Computer Programming Lab" in out
    assert "Campus Navigation App" in out


def test_timetable_report(write_payload, enrollment_payload, capsys):
    path = write_payload("enrollment.json", enrollment_payload)
    assert main(["timetable", path]) == 0
    out = capsys.readouterr().out
    assert "Monday" in out
    assert "08:00-08:50" in out


def test_grades_report(write_payload, grades_payload, capsys):
    path = write_payload("grades.json", grades_payload)
    assert main(["grades", path]) == 0
    assert "GPA 9.10" in capsys.readouterr().out


def test_status_report(write_payload, capsys):
    assert main(["status", write_payload("ok.json", {"status": {"code": 97}})]) == 0
    assert "SERVER_ERROR" in capsys.readouterr().out
    assert main(["status", write_payload("bad.json", "{}")]) == 1


def test_decode_failure_exit_code(write_payload, enrollment_payload, capsys):
    del enrollment_payload["semester"]
    path = write_payload("enrollment.json", enrollment_payload)
    assert main(["enrollment", path]) == 1
    assert "Could not decode enrollment" in capsys.readouterr().out


def test_advisor_and_contributors_reports(write_payload, advisor_payload,
                                          contributors_payload, capsys):
    assert main(["advisor", write_payload("advisor.json", advisor_payload)]) == 0
    assert main(["contributors", write_payload("system.json", contributors_payload)]) == 0
    out = capsys.readouterr().out
    assert "Dr. S. Kumar" in out
    assert "Meera" in out


def test_unreadable_file_exit_code(tmp_path):
    assert main(["user", str(tmp_path / "missing.json")]) == 2
