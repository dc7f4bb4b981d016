"""
Requirement Aggregation Engine.

This module resolves every course reference of one requirement and adds up
the credit hours per bucket, for the course-details view.
"""

import asyncio
import logging
from typing import Iterable, List, Tuple

from ..config import UNAVAILABLE_DESCRIPTION, UNAVAILABLE_TITLE
from ..exceptions import AggregationCancelled
from ..models import (
    AggregationResult,
    CourseStatus,
    CreditTotals,
    Requirement,
    ResolvedCourse,
    split_reference,
)
from ..utils import to_number
from .resolver import CourseResolver

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    Flag that tells one in-flight aggregation its results are no longer wanted.

    The aggregator checks it after every catalog call. The owner (normally
    AuditReader) cancels the token when a new document is loaded.
    """

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self):
        if self._cancelled:
            raise AggregationCancelled("Aggregation abandoned: audit document changed")


def credit_total(references: Iterable[str], courses: dict) -> float:
    """
    Sum the credit value of each reference that has a resolved entry.

    Units are coerced to numbers ("5" -> 5.0, "TBD" -> 0). A reference
    listed twice counts twice.
    """
    total = 0
    for ref in references:
        course = courses.get(ref)
        if course is not None:
            total += to_number(course.units)
    return total


class RequirementAggregator:
    """
    Resolves the completed and still-needed courses of a requirement.

    ORDERING:
    Completed references are resolved first, then still-needed ones. The map
    is keyed by reference string, so a reference listed in both buckets
    ends up tagged "incompleted". In-progress references are not resolved.

    CONCURRENCY:
    With concurrency=1 (the default) one catalog lookup runs at a time, so
    the catalog never sees more than one request from us. A higher value
    bounds parallel lookups with a semaphore; the map is still assembled in
    input order, so the result does not depend on which lookup finished
    first.

    The result is only returned once complete. If the token is cancelled
    mid-way, AggregationCancelled is raised and nothing is returned.
    """

    def __init__(self, resolver: CourseResolver, concurrency: int = 1):
        self.resolver = resolver
        self.concurrency = max(1, int(concurrency))

    async def resolve_all(self, requirement: Requirement, token: CancellationToken = None) -> AggregationResult:
        """
        Resolve every course of a requirement.

        Returns:
            AggregationResult with a map entry for every completed and
            incompleted reference, plus the credit totals of each bucket
        """
        token = token or CancellationToken()
        jobs = self._plan(requirement)

        try:
            if self.concurrency == 1:
                resolved = []
                for reference, status in jobs:
                    course = await self._resolve_one(reference, status)
                    token.raise_if_cancelled()
                    resolved.append((reference, course))
            else:
                resolved = await self._resolve_bounded(jobs, token)
        except AggregationCancelled:
            logger.info("Aggregation of requirement %s (%s) cancelled", requirement.id, requirement.title)
            raise

        courses = {}
        for reference, course in resolved:
            courses[reference] = course

        totals = CreditTotals(
            completed=credit_total(requirement.completed, courses),
            incompleted=credit_total(requirement.incompleted, courses),
        )
        return AggregationResult(requirement_id=requirement.id, courses=courses, totals=totals)

    def _plan(self, requirement: Requirement) -> List[Tuple[str, CourseStatus]]:
        """(reference, status) pairs to resolve, each pair once, in order."""
        jobs = []
        seen = set()
        buckets = (
            (requirement.completed, CourseStatus.COMPLETED),
            (requirement.incompleted, CourseStatus.INCOMPLETED),
        )
        for references, status in buckets:
            for reference in references:
                if (reference, status) in seen:
                    continue
                seen.add((reference, status))
                jobs.append((reference, status))
        return jobs

    async def _resolve_bounded(self, jobs, token: CancellationToken) -> List[Tuple[str, ResolvedCourse]]:
        semaphore = asyncio.Semaphore(self.concurrency)

        async def run(reference, status):
            async with semaphore:
                token.raise_if_cancelled()
                course = await self._resolve_one(reference, status)
            token.raise_if_cancelled()
            return reference, course

        tasks = [asyncio.ensure_future(run(ref, status)) for ref, status in jobs]
        try:
            return list(await asyncio.gather(*tasks))
        except AggregationCancelled:
            for task in tasks:
                task.cancel()
            raise

    async def _resolve_one(self, reference: str, status: CourseStatus) -> ResolvedCourse:
        subject, number = split_reference(reference)
        try:
            course = await self.resolver.resolve(subject, number)
        except Exception:
            # The resolver absorbs catalog errors itself; this keeps the map
            # total if anything else slips through.
            logger.warning("Could not resolve %r", reference, exc_info=True)
            course = ResolvedCourse.unresolved(
                subject,
                number,
                title=UNAVAILABLE_TITLE,
                description=UNAVAILABLE_DESCRIPTION,
            )
        return course.with_status(status)
