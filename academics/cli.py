"""
Command-Line Interface for the academics decoder.

This module provides a small inspection CLI: point it at a payload that was
saved to disk and it prints what the decoder makes of it.

NOTE: Run from the repository root:
    python3 -m academics enrollment payloads/enrollment.json
    python3 -m academics timetable payloads/enrollment.json
    python3 -m academics grades payloads/grades.json
"""

import argparse
import sys

from .models import StatusCode
from .reporter import AcademicsReporter
from .ui import TerminalDisplay


REPORTS = ("status", "user", "enrollment", "timetable", "grades", "advisor", "contributors")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="academics",
        description="Decode a saved student-information-system payload and print it.",
    )
    parser.add_argument("report", choices=REPORTS, help="which decoder to run")
    parser.add_argument("payload", help="path to the JSON payload")
    return parser


def main(argv=None) -> int:
    """
    Run one report and return the process exit code.

    Exit codes:
        0  payload decoded
        1  payload could not be decoded
        2  payload file could not be read (or bad arguments, via argparse)
    """
    args = _build_arg_parser().parse_args(argv)
    reporter = AcademicsReporter()

    try:
        if args.report == "status":
            ok = reporter.run_status_report(args.payload) != StatusCode.INVALID_DATA
        elif args.report == "user":
            ok = reporter.run_user_report(args.payload).ok
        elif args.report == "enrollment":
            ok = reporter.run_enrollment_report(args.payload).ok
        elif args.report == "timetable":
            ok = reporter.run_enrollment_report(args.payload, show_timetable=True).ok
        elif args.report == "grades":
            ok = reporter.run_grades_report(args.payload).ok
        elif args.report == "advisor":
            ok = reporter.run_advisor_report(args.payload).ok
        else:
            ok = reporter.run_contributors_report(args.payload).ok
    except (OSError, UnicodeDecodeError) as exc:
        TerminalDisplay.print_error(f"Cannot read {args.payload}: {exc}")
        return 2

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
