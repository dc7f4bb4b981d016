"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the degree_audit package.

To create a different UI (web, JSON API, etc.), create a new class with
the same method signatures but different output handling.
"""

import json
import sys

from ..models import AggregationResult, Requirement, ResolvedCourse


class TerminalDisplay:
    """
    Pretty terminal output for parsed requirements and resolved courses.

    Two views, mirroring the web viewer the data model came from:

    1. REQUIREMENT LIST: incomplete sections first, then completed ones.
    2. COURSE DETAILS: for one requirement, a "need to complete" table and
       a "completed" table, each with a credit total.
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

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

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
    def status_badge(cls, requirement: Requirement) -> str:
        """Return a colored status badge."""
        if requirement.is_completed:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ COMPLETE {cls.RESET}"
        elif not requirement.incompleted:
            return f"{cls.BG_YELLOW}{cls.WHITE} ⏳ IN PROGRESS {cls.RESET}"
        else:
            return f"{cls.BG_RED}{cls.WHITE} ✗ NEEDED {cls.RESET}"

    @classmethod
    def print_requirements(cls, requirements: list, source: str = ""):
        """Print the requirement list, incomplete sections first."""
        cls.print_header(f"DEGREE AUDIT{': ' + source if source else ''}")

        if not requirements:
            print(f"\n  {cls.DIM}No requirements found in this audit.{cls.RESET}")
            return

        incomplete = [r for r in requirements if not r.is_completed]
        completed = [r for r in requirements if r.is_completed]

        cls.print_subheader(f"Incomplete Categories ({len(incomplete)})")
        for req in incomplete:
            cls._print_requirement_line(req)

        cls.print_subheader(f"Completed Categories ({len(completed)})")
        for req in completed:
            cls._print_requirement_line(req)

    @classmethod
    def _print_requirement_line(cls, req: Requirement):
        counts = (
            f"{cls.GREEN}{len(req.completed)} done{cls.RESET}, "
            f"{cls.YELLOW}{len(req.in_progress)} in progress{cls.RESET}, "
            f"{cls.RED}{len(req.incompleted)} needed{cls.RESET}"
        )
        print(f"  {cls.DIM}[{req.id:>2}]{cls.RESET} {req.title}")
        print(f"       {cls.status_badge(req)} {counts}")

    @classmethod
    def print_requirement_details(cls, requirement: Requirement, result: AggregationResult):
        """Print the course tables of one requirement with credit totals."""
        cls.print_header(requirement.title)

        cls.print_subheader("Need to Complete Courses")
        cls._print_course_table(requirement.incompleted, result, result.totals.incompleted)

        cls.print_subheader("Completed Courses")
        cls._print_course_table(requirement.completed, result, result.totals.completed)

        if requirement.in_progress:
            cls.print_subheader("In Progress")
            for ref in requirement.in_progress:
                print(f"  {cls.YELLOW}⏳ {ref}{cls.RESET}")

        missing = result.not_found
        if missing:
            print(f"\n  {cls.DIM}Not found in catalog: {', '.join(missing)}{cls.RESET}")

    @classmethod
    def _print_course_table(cls, references, result: AggregationResult, total: float):
        print(f"\n  {cls.BOLD}{'COURSE NAME':<58} {'CREDITS':>8}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 67}{cls.RESET}")

        for ref in references:
            course = result.get(ref)
            name = cls._course_name(ref, course)
            units = course.units if course is not None and course.units else "N/A"
            color = cls.RED if course is None or course.not_found else ""
            print(f"  {color}{name[:58]:<58}{cls.RESET} {str(units):>8}")

        print(f"  {cls.DIM}{'-' * 67}{cls.RESET}")
        print(f"  {cls.BOLD}{'Total Credits':<58} {total:>8g}{cls.RESET}")

    @staticmethod
    def _course_name(reference: str, course: ResolvedCourse) -> str:
        if course is None:
            return reference
        return f"{course.subject} {course.class_number}: {course.title}"

    @classmethod
    def print_course(cls, course: ResolvedCourse):
        """Print the full details of a single course."""
        cls.print_subheader(course.title)
        print(f"  {cls.BOLD}Credit Hours:{cls.RESET} {course.units}    "
              f"{cls.BOLD}Course ID:{cls.RESET} {course.course_id}")
        if course.description:
            print(f"  {course.description}")

    @staticmethod
    def print_json(data):
        print(json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def print_error(cls, message: str):
        print(f"{cls.RED}Error: {message}{cls.RESET}", file=sys.stderr)
