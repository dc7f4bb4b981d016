"""
Resolution and aggregation engines.

This package contains the algorithms that turn parsed course references
into catalog data: the term-by-term course resolver and the per-requirement
aggregator.
"""

from .resolver import CourseResolver, normalize_course, to_resolved_course
from .aggregator import CancellationToken, RequirementAggregator, credit_total

__all__ = [
    "CourseResolver",
    "normalize_course",
    "to_resolved_course",
    "CancellationToken",
    "RequirementAggregator",
    "credit_total",
]
