"""
Academics Reporter - Main Orchestrator.

This module contains the AcademicsReporter class that connects the decode
layer to the presentation layer.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m academics enrollment path/to/payload.json
"""

from pathlib import Path
from typing import Union

from .data import (
    decode_status,
    try_decode_bare_user,
    try_decode_enrollment,
    try_decode_grade_history,
    try_decode_advisor,
    try_decode_contributors,
)
from .engines import build_timetable
from .logger import get_logger
from .models import DecodeResult, StatusCode
from .ui import TerminalDisplay

logger = get_logger("reporter")


class AcademicsReporter:
    """
    Main interface for inspecting saved payloads.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Reads a payload file that something else already fetched
    2. Calls one decode operation (pure, returns a DecodeResult)
    3. Passes the decoded value to the display, or reports the failure

    The decode layer never touches files or the network; reading the file
    happens here and only here.

    TO CHANGE THE UI:
    -----------------
    Pass a different object with TerminalDisplay's method signatures.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        reporter = AcademicsReporter()
        result = reporter.run_enrollment_report("payloads/enrollment.json")
        if result.ok:
            user = result.value
    """

    def __init__(self, display=None):
        self.display = display or TerminalDisplay()

    def _read(self, payload_path: Union[str, Path]) -> str:
        with open(payload_path, "r", encoding="utf-8") as f:
            return f.read()

    def _report_failure(self, operation: str, result: DecodeResult):
        self.display.print_error(f"Could not decode {operation}: {result.error}")

    def run_status_report(self, payload_path) -> StatusCode:
        status = decode_status(self._read(payload_path))
        self.display.print_status(status)
        return status

    def run_user_report(self, payload_path) -> DecodeResult:
        result = try_decode_bare_user(self._read(payload_path))
        if result.ok:
            self.display.print_user_info(result.value)
        else:
            self._report_failure("user", result)
        return result

    def run_enrollment_report(self, payload_path, show_timetable: bool = False) -> DecodeResult:
        """
        Decode an enrollment payload and display the student and courses.

        Args:
            payload_path: Path to the enrollment JSON payload
            show_timetable: Also print the weekly timetable

        Returns:
            DecodeResult holding the decoded User
        """
        result = try_decode_enrollment(self._read(payload_path))
        if not result.ok:
            self._report_failure("enrollment", result)
            return result

        user = result.value
        logger.debug("Decoded %d courses for %s", len(user.courses), user.reg_no)
        self.display.print_user_info(user)
        self.display.print_courses(user)
        if show_timetable:
            self.display.print_timetable(build_timetable(user))
        return result

    def run_grades_report(self, payload_path) -> DecodeResult:
        result = try_decode_grade_history(self._read(payload_path))
        if result.ok:
            self.display.print_academic_history(result.value)
        else:
            self._report_failure("grade history", result)
        return result

    def run_advisor_report(self, payload_path) -> DecodeResult:
        result = try_decode_advisor(self._read(payload_path))
        if result.ok:
            self.display.print_advisor(result.value)
        else:
            self._report_failure("advisor", result)
        return result

    def run_contributors_report(self, payload_path) -> DecodeResult:
        result = try_decode_contributors(self._read(payload_path))
        if result.ok:
            self.display.print_contributors(result.value)
        else:
            self._report_failure("contributors", result)
        return result
