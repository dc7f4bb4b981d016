"""
Aggregation result data models.

Contains the dataclasses returned by the requirement aggregator: the
reference -> resolved course map and the credit totals per bucket.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CreditTotals:
    """Sum of resolved credit values for each bucket of a requirement."""
    completed: float = 0
    incompleted: float = 0

    def to_dict(self) -> dict:
        return {"completed": self.completed, "incompleted": self.incompleted}


@dataclass
class AggregationResult:
    """
    Resolved view of one requirement.

    `courses` has an entry for every reference in the requirement's completed
    and incompleted lists, resolved or not. Unresolved entries are flagged
    with not_found so a caller can always render something.
    """
    requirement_id: int
    courses: dict = field(default_factory=dict)  # reference -> ResolvedCourse
    totals: CreditTotals = field(default_factory=CreditTotals)

    def get(self, reference: str):
        return self.courses.get(reference)

    @property
    def not_found(self) -> list:
        """References the catalog could not resolve."""
        return [ref for ref, course in self.courses.items() if course.not_found]

    def to_dict(self) -> dict:
        return {
            "requirementId": self.requirement_id,
            "map": {ref: course.to_dict() for ref, course in self.courses.items()},
            "totals": self.totals.to_dict(),
        }
