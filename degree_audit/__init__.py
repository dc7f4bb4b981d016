"""
Degree Audit Reader
===================

Turns an exported degree-audit web page into a clean list of requirements,
and looks up every course it mentions in the university class catalog.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO printing)              │
│                                                                         │
│  ┌────────────────┐  ┌──────────────┐  ┌─────────────────────────────┐  │
│  │ DocumentLoader │  │ AuditParser  │  │ CatalogClient               │  │
│  │  (I/O)         │  │ (HTML → reqs)│  │ (one catalog search)        │  │
│  └────────────────┘  └──────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │     CourseResolver      │  │       RequirementAggregator         │  │
│  │ (term/campus fallback)  │  │   (per-requirement map + credits)   │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                    TerminalDisplay (the only printing)                   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          AuditReader                                     │
│     (Orchestrator - owns the current document, cancels stale work)      │
└─────────────────────────────────────────────────────────────────────────┘

Data flows one way:
    document → AuditParser → [Requirement] → RequirementAggregator
             → CourseResolver → CatalogClient

PACKAGE STRUCTURE
-----------------

degree_audit/
├── __init__.py          # This file - main exports
├── config.py            # Terms, catalog URL, exclusion list, CSS classes
├── exceptions.py        # DocumentLoadError, CatalogError, ...
├── reader.py            # AuditReader orchestrator
├── cli.py               # Command-line interface
├── models/              # Requirement, ResolvedCourse, AggregationResult
├── data/                # DocumentLoader, AuditParser, CatalogClient
├── engines/             # CourseResolver, RequirementAggregator
└── ui/                  # TerminalDisplay

USAGE
-----

    import asyncio
    from pathlib import Path
    from degree_audit import AuditReader

    reader = AuditReader()
    requirements = reader.load(Path("audit.html"))
    for req in reader.incomplete_requirements():
        result = asyncio.run(reader.resolve_all(req))
        print(req.title, result.totals.incompleted)

Running from command line:

    python -m degree_audit audit.html --all

"""

__version__ = "1.0.0"

from .reader import AuditReader
from .cli import main

from .models import (
    AggregationResult,
    CourseStatus,
    CreditTotals,
    Requirement,
    RequirementClasses,
    ResolvedCourse,
    TakenCourse,
    split_reference,
)

from .engines import CancellationToken, CourseResolver, RequirementAggregator

from .data import AuditDocument, AuditParser, CatalogClient, DocumentLoader

from .ui import TerminalDisplay

from .exceptions import (
    AggregationCancelled,
    CatalogContentTypeError,
    CatalogError,
    CatalogHTTPError,
    CatalogResponseError,
    CatalogTransportError,
    DegreeAuditError,
    DocumentLoadError,
)

from .config import TERM_SEQUENCE, EXCLUDED_REQUIREMENT_TITLES

__all__ = [
    "__version__",
    # Main entry points
    "AuditReader",
    "main",
    # Models
    "AggregationResult",
    "CourseStatus",
    "CreditTotals",
    "Requirement",
    "RequirementClasses",
    "ResolvedCourse",
    "TakenCourse",
    "split_reference",
    # Engines
    "CancellationToken",
    "CourseResolver",
    "RequirementAggregator",
    # Data
    "AuditDocument",
    "AuditParser",
    "CatalogClient",
    "DocumentLoader",
    # UI
    "TerminalDisplay",
    # Errors
    "AggregationCancelled",
    "CatalogContentTypeError",
    "CatalogError",
    "CatalogHTTPError",
    "CatalogResponseError",
    "CatalogTransportError",
    "DegreeAuditError",
    "DocumentLoadError",
    # Config
    "TERM_SEQUENCE",
    "EXCLUDED_REQUIREMENT_TITLES",
]
