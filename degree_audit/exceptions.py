"""
Exception types for the degree audit reader.

Only DocumentLoadError is meant to reach callers of the package. Catalog
errors are raised by CatalogClient and absorbed by CourseResolver, one term
at a time.
"""


class DegreeAuditError(Exception):
    """Base class for every error raised by this package."""


class DocumentLoadError(DegreeAuditError):
    """The audit document could not be read, decoded or parsed."""


class AggregationCancelled(DegreeAuditError):
    """An in-flight aggregation was abandoned because its document changed."""


# =============================================================================
# CATALOG ERRORS
# =============================================================================

class CatalogError(DegreeAuditError):
    """A single catalog query failed."""

    def __init__(self, message: str, term=None):
        super().__init__(message)
        self.term = term


class CatalogHTTPError(CatalogError):
    """The catalog answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str = "", term=None):
        super().__init__(f"HTTP {status_code} {reason} - {body[:200]}", term)
        self.status_code = status_code
        self.body = body


class CatalogContentTypeError(CatalogError):
    """The catalog answered with something other than JSON."""

    def __init__(self, content_type: str, body: str = "", term=None):
        super().__init__(f"Expected JSON but got {content_type or 'no content type'} - {body[:200]}", term)
        self.content_type = content_type


class CatalogTransportError(CatalogError):
    """The request never produced a response (DNS, connection, timeout)."""


class CatalogResponseError(CatalogError):
    """The response claimed to be JSON but could not be understood."""
