"""
Course data models.

Contains the ResolvedCourse dataclass (catalog metadata for one course
reference) and the CourseStatus enum used to tag which bucket a resolved
course came from.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import NOT_FOUND_TITLE


class CourseStatus(Enum):
    """
    Bucket a resolved course belongs to within one requirement.

    COMPLETED: Listed in a completed-courses table (not in progress)
    INCOMPLETED: Listed as still needed
    """
    COMPLETED = "completed"
    INCOMPLETED = "incompleted"


def split_reference(reference: str) -> Tuple[str, str]:
    """
    Split a "SUBJECT NUMBER" course reference into its two tokens.

    Missing tokens come back as empty strings, so "CSE" gives ("CSE", "").
    """
    parts = str(reference or "").split()
    subject = parts[0] if parts else ""
    number = parts[1] if len(parts) > 1 else ""
    return subject, number


@dataclass(frozen=True)
class ResolvedCourse:
    """
    Catalog metadata for a course reference, or an unresolved placeholder.

    Attributes:
        subject: Upper-cased subject code (e.g., "CSE")
        class_number: Catalog number (e.g., "2231H")
        title: Course title, "Course not found" when unresolved
        units: Credit value as the catalog returned it (may be a string),
            0 when unknown
        description: Catalog description, empty when unknown
        course_id: Catalog identifier, None when unresolved
        not_found: True when no catalog candidate matched
        status: Bucket tag, only set by the requirement aggregator
    """
    subject: str
    class_number: str
    title: str = NOT_FOUND_TITLE
    units: Union[int, float, str] = 0
    description: str = ""
    course_id: Optional[str] = None
    not_found: bool = True
    status: Optional[CourseStatus] = None

    @classmethod
    def unresolved(cls, subject: str, class_number: str, title: str = NOT_FOUND_TITLE,
                   description: str = "", status: Optional[CourseStatus] = None) -> "ResolvedCourse":
        """Build the placeholder returned when no candidate matched."""
        return cls(
            subject=subject,
            class_number=class_number,
            title=title,
            units=0,
            description=description,
            course_id=None,
            not_found=True,
            status=status,
        )

    @property
    def reference(self) -> str:
        return f"{self.subject} {self.class_number}".strip()

    def with_status(self, status: CourseStatus) -> "ResolvedCourse":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        """Serialize using the key names of the original audit viewer."""
        data = {
            "subject": self.subject,
            "classNumber": self.class_number,
            "title": self.title,
            "units": self.units,
            "description": self.description,
            "courseID": self.course_id,
            "notFound": self.not_found,
        }
        if self.status is not None:
            data["status"] = self.status.value
        return data
