"""
Data loading, parsing and catalog access.

This package handles all I/O: reading the audit document, parsing it into
requirements, and querying the catalog service.
"""

from .loader import AuditDocument, DocumentLoader
from .parser import AuditParser, apply_carryover
from .catalog import CatalogClient, create_retry_session, extract_courses

__all__ = [
    "AuditDocument",
    "DocumentLoader",
    "AuditParser",
    "apply_carryover",
    "CatalogClient",
    "create_retry_session",
    "extract_courses",
]
