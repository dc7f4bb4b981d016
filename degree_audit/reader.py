"""
Audit Reader - Main Orchestrator.

This module contains the AuditReader class that owns the currently loaded
audit document and connects the parser and engines to the display.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m degree_audit audit.html
"""

import asyncio
import logging
from typing import List, Optional

from .config import TERM_SEQUENCE
from .data import AuditDocument, AuditParser, CatalogClient, DocumentLoader
from .engines import CancellationToken, CourseResolver, RequirementAggregator
from .exceptions import AggregationCancelled, DocumentLoadError
from .models import AggregationResult, Requirement, ResolvedCourse
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class AuditReader:
    """
    Main interface for the degree audit reader.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR + DOCUMENT OWNER
    ═══════════════════════════════════════════════════════════════════════════

    1. `load()` takes an audit (path, bytes or HTML) and makes it the
       current document. Any aggregation still running for the previous
       document is cancelled and its result is never published.
    2. `requirements` is the parse of the current document.
    3. `resolve_all()` resolves one requirement's courses against the
       catalog for the current document.
    4. `reset()` forgets the current document.

    The parser and the engines never look at this object; they receive the
    document or the requirement explicitly.

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with your custom display class,
    or skip the `show_*` methods and use the returned data directly.
    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        reader = AuditReader()
        requirements = reader.load(Path("audit.html"))
        result = asyncio.run(reader.resolve_all(requirements[0]))
        print(result.totals.completed)
    """

    def __init__(self, client: CatalogClient = None, terms=TERM_SEQUENCE, concurrency: int = 1):
        self.loader = DocumentLoader()
        self.parser = AuditParser()
        self.client = client or CatalogClient()
        self.resolver = CourseResolver(self.client, terms)
        self.aggregator = RequirementAggregator(self.resolver, concurrency)
        self.display = TerminalDisplay()

        self._document: Optional[AuditDocument] = None
        self._requirements: List[Requirement] = []
        self._tokens = set()

    # =========================================================================
    #  DOCUMENT LIFECYCLE
    # =========================================================================

    @property
    def document(self) -> Optional[AuditDocument]:
        return self._document

    @property
    def requirements(self) -> List[Requirement]:
        return list(self._requirements)

    def load(self, source) -> List[Requirement]:
        """
        Load and parse an audit, replacing the current one.

        Raises:
            DocumentLoadError: the audit could not be read or parsed. The
                previous document stays current in that case.
        """
        document = self.loader.load(source)
        requirements = self.parser.parse(document)

        self._cancel_in_flight()
        self._document = document
        self._requirements = requirements
        logger.info("Loaded %s: %d requirements", document.source, len(requirements))
        return self.requirements

    def reset(self):
        """Forget the current document and abandon running aggregations."""
        self._cancel_in_flight()
        self._document = None
        self._requirements = []

    def _cancel_in_flight(self):
        for token in self._tokens:
            token.cancel()
        self._tokens.clear()

    # =========================================================================
    #  QUERIES
    # =========================================================================

    def parse(self, document=None) -> List[Requirement]:
        """Parse `document`, or return the requirements of the current one."""
        if document is None:
            return self.requirements
        return self.parser.parse(self.loader.load(document))

    def completed_requirements(self) -> List[Requirement]:
        return [r for r in self._requirements if r.is_completed]

    def incomplete_requirements(self) -> List[Requirement]:
        return [r for r in self._requirements if not r.is_completed]

    def find_requirement(self, req_id: int) -> Optional[Requirement]:
        for req in self._requirements:
            if req.id == req_id:
                return req
        return None

    async def resolve_all(self, requirement: Requirement) -> AggregationResult:
        """
        Resolve a requirement's courses for the current document.

        Raises:
            DocumentLoadError: no document is loaded
            AggregationCancelled: a different document was loaded (or the
                reader was reset) before resolution finished
        """
        document = self._document
        if document is None:
            raise DocumentLoadError("No audit document loaded")

        token = CancellationToken()
        self._tokens.add(token)
        try:
            result = await self.aggregator.resolve_all(requirement, token)
        finally:
            self._tokens.discard(token)

        if token.cancelled or self._document is not document:
            raise AggregationCancelled("Audit document changed during resolution")
        return result

    async def resolve_many(self, requirements) -> List[AggregationResult]:
        """Resolve several requirements one after another."""
        results = []
        for requirement in requirements:
            results.append(await self.resolve_all(requirement))
        return results

    async def resolve_course(self, reference: str) -> ResolvedCourse:
        return await self.resolver.resolve_reference(reference)

    # =========================================================================
    #  PRESENTATION
    # =========================================================================

    def show_requirements(self, as_json: bool = False):
        if as_json:
            self.display.print_json([r.to_dict() for r in self._requirements])
        else:
            source = self._document.source if self._document else ""
            self.display.print_requirements(self._requirements, source)

    def show_details(self, requirements, as_json: bool = False) -> List[AggregationResult]:
        """Resolve and display the course tables of the given requirements."""
        results = asyncio.run(self.resolve_many(requirements))
        if as_json:
            self.display.print_json([result.to_dict() for result in results])
        else:
            for requirement, result in zip(requirements, results):
                self.display.print_requirement_details(requirement, result)
        return results

    def show_course(self, reference: str, as_json: bool = False) -> ResolvedCourse:
        course = asyncio.run(self.resolve_course(reference))
        if as_json:
            self.display.print_json(course.to_dict())
        else:
            self.display.print_course(course)
        return course

    def close(self):
        self.client.close()
