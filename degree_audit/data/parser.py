"""
Degree audit parsing.

This module turns the registrar's HTML audit export into Requirement
objects. The export has no semantic markup: the only reliable signals are
CSS class names and which section a node is nested under.
"""

import logging
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..config import (
    COMPLETED_TABLE_CLASS,
    COURSE_FIELD_CLASS,
    CREDIT_FIELD_CLASS,
    EXCLUDED_REQUIREMENT_TITLES,
    GRADE_FIELD_CLASS,
    IN_PROGRESS_ROW_CLASS,
    NEEDED_COURSE_CLASSES,
    REQUIREMENT_CLASS,
    REQUIREMENT_TITLE_CLASS,
    TAKEN_COURSE_CLASS,
    TERM_FIELD_CLASS,
)
from ..exceptions import DocumentLoadError
from ..models import Requirement, RequirementClasses, TakenCourse
from ..utils import collapse_whitespace, is_numeric_label, to_number
from .loader import AuditDocument

logger = logging.getLogger(__name__)


# =============================================================================
# SUBJECT CARRYOVER
# =============================================================================
# The audit prints a bare number when a course shares the subject of the row
# above it:
#
#     CSE 2231H   AU23   A
#         2321    SP24   B+     <- means "CSE 2321"
#
# The last seen subject is threaded through the completed-table scan and then
# into the still-needed scan of the same section, so the order of those two
# passes matters.

def apply_carryover(label: str, last_subject: str) -> Tuple[str, str]:
    """
    Expand a bare catalog number with the last seen subject.

    Returns the (possibly expanded) label and the updated last subject. Only
    a two-token label ("CSE 2231H") sets a new subject.
    """
    if is_numeric_label(label) and last_subject:
        return f"{last_subject} {label}", last_subject
    parts = label.split()
    if len(parts) == 2:
        last_subject = parts[0]
    return label, last_subject


def _has_class(tag: Tag, class_name: str) -> bool:
    return class_name in (tag.get("class") or [])


def _field_text(row: Tag, class_name: str) -> str:
    cell = row.find(class_=class_name)
    return cell.get_text().strip() if cell is not None else ""


class AuditParser:
    """
    Parses a degree audit document into an ordered list of requirements.

    DOCUMENT SHAPE (only the parts we rely on):

        .requirement
          .reqTitle                      -> Requirement.title
          .completedCourses              (zero or more tables)
            .takenCourse[.ip]            -> completed / in progress
              .term .course .credit .grade
          .course.draggable              -> still needed

    EXCLUSIONS:
    Administrative sections (transfer credit, the term schedule, the GE
    reflection...) are dropped by exact, case-insensitive title match.
    Excluded sections do not consume an id.

    Missing cells and missing tables never fail the parse. Only a document
    that cannot be parsed at all raises DocumentLoadError.
    """

    EXCLUDED_TITLES = frozenset(t.lower() for t in EXCLUDED_REQUIREMENT_TITLES)

    def parse(self, document) -> List[Requirement]:
        """
        Parse an audit and return its requirements in document order.

        Args:
            document: AuditDocument or raw HTML string

        Returns:
            [Requirement, ...] with ids 0, 1, 2... after exclusions
        """
        soup = self._make_soup(document)
        requirements = []

        for title_node in soup.find_all(class_=REQUIREMENT_TITLE_CLASS):
            title = title_node.get_text().strip()
            if self.is_excluded(title):
                logger.debug("Skipping excluded section %r", title)
                continue

            section = self._section_for(title_node)
            requirements.append(self._parse_section(len(requirements), title, section))

        logger.debug("Parsed %d requirements", len(requirements))
        return requirements

    def is_excluded(self, title: str) -> bool:
        return title.lower() in self.EXCLUDED_TITLES

    def _make_soup(self, document) -> BeautifulSoup:
        html = document.html if isinstance(document, AuditDocument) else document
        if not isinstance(html, str):
            raise DocumentLoadError(f"Expected audit HTML text, got {type(html).__name__}")
        try:
            return BeautifulSoup(html, "lxml")
        except Exception as e:
            raise DocumentLoadError(f"Could not parse audit document: {e}") from e

    def _section_for(self, title_node: Tag):
        """Nearest enclosing .requirement node (the title itself counts)."""
        if _has_class(title_node, REQUIREMENT_CLASS):
            return title_node
        return title_node.find_parent(class_=REQUIREMENT_CLASS)

    def _parse_section(self, req_id: int, title: str, section) -> Requirement:
        if section is None:
            # Title outside any section: keep it, with nothing in it
            return Requirement(id=req_id, title=title)

        taken, last_subject = self._scan_completed(section, "")
        incompleted, _ = self._scan_needed(section, last_subject)

        classes = RequirementClasses(
            completed=tuple(t.course for t in taken if not t.in_progress),
            incompleted=tuple(incompleted),
            in_progress=tuple(t.course for t in taken if t.in_progress),
        )
        return Requirement(id=req_id, title=title, classes=classes, taken=tuple(taken))

    def _scan_completed(self, section: Tag, last_subject: str) -> Tuple[List[TakenCourse], str]:
        """Read every completed-courses row, in document order."""
        taken = []
        for table in section.find_all(class_=COMPLETED_TABLE_CLASS):
            for row in table.find_all(class_=TAKEN_COURSE_CLASS):
                label = collapse_whitespace(_field_text(row, COURSE_FIELD_CLASS))
                course, last_subject = apply_carryover(label, last_subject)
                taken.append(TakenCourse(
                    term=_field_text(row, TERM_FIELD_CLASS),
                    course=course,
                    credit=to_number(_field_text(row, CREDIT_FIELD_CLASS)),
                    grade=_field_text(row, GRADE_FIELD_CLASS),
                    in_progress=_has_class(row, IN_PROGRESS_ROW_CLASS),
                ))
        return taken, last_subject

    def _scan_needed(self, section: Tag, last_subject: str) -> Tuple[List[str], str]:
        """Read the still-needed course chips, continuing the subject carryover."""
        selector = "".join(f".{c}" for c in NEEDED_COURSE_CLASSES)
        needed = []
        for node in section.select(selector):
            label = collapse_whitespace(node.get_text())
            course, last_subject = apply_carryover(label, last_subject)
            needed.append(course)
        return needed, last_subject
