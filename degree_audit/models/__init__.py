"""
Data models for the degree audit reader.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the parser, the engines and the display.
"""

from .requirement import Requirement, RequirementClasses, TakenCourse
from .course import CourseStatus, ResolvedCourse, split_reference
from .aggregate import AggregationResult, CreditTotals

__all__ = [
    # Requirement models
    "Requirement",
    "RequirementClasses",
    "TakenCourse",
    # Course models
    "CourseStatus",
    "ResolvedCourse",
    "split_reference",
    # Aggregation results
    "AggregationResult",
    "CreditTotals",
]
