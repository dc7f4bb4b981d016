"""
Requirement data models.

Contains the Requirement dataclass produced by the audit parser, along with
the course-reference buckets and the raw completed-course rows it carries.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TakenCourse:
    """
    One row of a "completed courses" table in the audit.

    Attributes:
        term: Term label as printed in the audit (e.g., "AU24")
        course: Course reference after subject carryover (e.g., "CSE 2321")
        credit: Credit hours, 0 when the cell is missing or not a number
        grade: Letter grade, empty for in-progress rows
        in_progress: True when the row carries the in-progress marker
    """
    term: str
    course: str
    credit: float
    grade: str
    in_progress: bool = False

    def to_dict(self) -> dict:
        return {
            "term": self.term,
            "course": self.course,
            "credit": self.credit,
            "grade": self.grade,
            "inProgress": self.in_progress,
        }


@dataclass(frozen=True)
class RequirementClasses:
    """
    Course references of one requirement, grouped by completion state.

    Each list keeps document order. Duplicates are kept as they appear in
    the audit; the same reference may also show up in other requirements.
    """
    completed: tuple = ()
    incompleted: tuple = ()
    in_progress: tuple = ()

    def to_dict(self) -> dict:
        return {
            "completed": list(self.completed),
            "incompleted": list(self.incompleted),
            "inProgress": list(self.in_progress),
        }


@dataclass(frozen=True)
class Requirement:
    """
    One degree-audit section grouping course references by completion state.

    Requirements are built once per parse and never change afterwards. The
    completion flag is derived at construction time: a requirement is done
    when nothing is still needed and nothing is in progress.

    Example:
        id: 3
        title: "CSE CORE COURSES"
        classes.completed: ("CSE 2221", "CSE 2231H", "CSE 2321")
        classes.incompleted: ("CSE 3341",)
        classes.in_progress: ()
        is_completed: False
    """
    id: int
    title: str
    classes: RequirementClasses = field(default_factory=RequirementClasses)
    taken: tuple = ()  # TakenCourse rows from the completed tables
    is_completed: bool = field(init=False)

    def __post_init__(self):
        done = not self.classes.incompleted and not self.classes.in_progress
        object.__setattr__(self, "is_completed", done)

    @property
    def completed(self) -> tuple:
        return self.classes.completed

    @property
    def incompleted(self) -> tuple:
        return self.classes.incompleted

    @property
    def in_progress(self) -> tuple:
        return self.classes.in_progress

    def to_dict(self) -> dict:
        """Serialize using the key names of the original audit viewer."""
        return {
            "id": self.id,
            "title": self.title,
            "class": self.classes.to_dict(),
            "isCompleted": self.is_completed,
        }
