"""
Course Resolution Engine.

This module turns a bare "SUBJECT NUMBER" course reference into catalog
metadata, working around a catalog that only answers for some terms and
some campuses.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..config import NOT_FOUND_TITLE, TERM_SEQUENCE, term_label
from ..exceptions import CatalogError
from ..models import ResolvedCourse, split_reference
from ..utils import digits_only

logger = logging.getLogger(__name__)


def normalize_course(subject: str, number: str) -> Tuple[str, str, str]:
    """
    Normalize a course reference for matching.

    Returns (subject, number, numeric_core), e.g.
    (" cse", "2231H ") -> ("CSE", "2231H", "2231")
    """
    subj = str(subject or "").strip().upper()
    num_raw = str(number or "").strip()
    return subj, num_raw, digits_only(num_raw)


def _first_present(record: dict, *keys, default=None):
    """Value of the first key that is present and not None."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def _candidate_subject(candidate: dict) -> str:
    return str(candidate.get("subject") or "").strip().upper()


def _candidate_number(candidate: dict) -> str:
    return str(candidate.get("catalogNumber") or "")


def find_exact_match(candidates: List[dict], subj: str, num_raw: str) -> Optional[dict]:
    """Same subject and the same catalog number, ignoring whitespace."""
    wanted = re.sub(r"\s+", "", num_raw)
    for c in candidates:
        if _candidate_subject(c) == subj and re.sub(r"\s+", "", _candidate_number(c)) == wanted:
            return c
    return None


def find_core_match(candidates: List[dict], subj: str, num_core: str) -> Optional[dict]:
    """Same subject and the same digits, so "2231H" matches "2231"."""
    for c in candidates:
        if _candidate_subject(c) == subj and digits_only(_candidate_number(c)) == num_core:
            return c
    return None


def to_resolved_course(match: dict, subj: str, num_raw: str) -> ResolvedCourse:
    """
    Convert a catalog record to a ResolvedCourse.

    Credit precedence is maxUnits, then units, then minUnits. A present 0
    wins over a later field.
    """
    course_id = _first_present(match, "courseId", "id")
    return ResolvedCourse(
        subject=str(_first_present(match, "subject", default=subj)).strip().upper(),
        class_number=str(_first_present(match, "catalogNumber", default=num_raw)).strip(),
        title=_first_present(match, "title", "longDesc", default=NOT_FOUND_TITLE),
        units=_first_present(match, "maxUnits", "units", "minUnits", default=0),
        description=_first_present(match, "description", "longDescription", default=""),
        course_id=str(course_id) if course_id is not None else None,
        not_found=course_id is None,
    )


class CourseResolver:
    """
    Resolves course references against the catalog, term by term.

    ═══════════════════════════════════════════════════════════════════════════
    SEARCH ORDER
    ═══════════════════════════════════════════════════════════════════════════

    For each term in TERM_SEQUENCE (most recent first):

    1. CAMPUS-FILTERED QUERY
       Take an exact catalog-number match, else a core match (digits
       only, so "2231H" finds "2231"). Never an arbitrary candidate.

    2. UNFILTERED QUERY (only if step 1 matched nothing)
       Take a core match, else the FIRST candidate returned. The catalog
       often lists a course under a regional campus only, so this pass is
       deliberately looser.

    3. Both empty -> next term.

    If a query for a term fails (HTTP error, HTML login page, network, or any
    unexpected error), the rest of that term is skipped and the next term is
    tried. When every term comes up empty the result is a "Course not found"
    record, never an exception.
    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, client, terms=TERM_SEQUENCE):
        self.client = client
        self.terms = tuple(terms)

    async def resolve(self, subject: str, number: str) -> ResolvedCourse:
        """
        Resolve one course.

        Args:
            subject: Subject code, any case (e.g., "cse")
            number: Catalog number as written in the audit (e.g., "2231H")

        Returns:
            ResolvedCourse; not_found is True if no term produced a match
        """
        subj, num_raw, num_core = normalize_course(subject, number)

        for term in self.terms:
            try:
                match = await self._search_term(subj, num_raw, num_core, term)
            except CatalogError as e:
                logger.warning("Catalog lookup for %s %s failed in %s: %s", subj, num_raw, term_label(term), e)
                continue
            except Exception:
                logger.warning("Unexpected error looking up %s %s in %s", subj, num_raw, term_label(term), exc_info=True)
                continue

            if match is not None:
                return to_resolved_course(match, subj, num_raw)

        logger.debug("%s %s not found in any term", subj, num_raw)
        return ResolvedCourse.unresolved(subj, num_raw)

    async def resolve_reference(self, reference: str) -> ResolvedCourse:
        """Resolve a "SUBJECT NUMBER" string."""
        subject, number = split_reference(reference)
        return await self.resolve(subject, number)

    async def _search_term(self, subj: str, num_raw: str, num_core: str, term: int) -> Optional[dict]:
        candidates = await self.client.search(subj, num_raw, term, campus_filter=True)
        logger.debug("%s %s %s (campus): %d candidates", subj, num_raw, term_label(term), len(candidates))
        if candidates:
            match = find_exact_match(candidates, subj, num_raw) or find_core_match(candidates, subj, num_core)
            if match is not None:
                return match

        candidates = await self.client.search(subj, num_raw, term, campus_filter=False)
        logger.debug("%s %s %s (no campus): %d candidates", subj, num_raw, term_label(term), len(candidates))
        if candidates:
            return find_core_match(candidates, subj, num_core) or candidates[0]
        return None
