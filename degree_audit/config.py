"""
Configuration constants for the degree audit reader.

This module contains all configuration values and constants used throughout
the parser, resolver and catalog client. Centralizing these makes it easy to
adjust behavior as the registrar's audit markup or the catalog service
changes.
"""

# =============================================================================
# CATALOG SERVICE
# =============================================================================

CATALOG_SEARCH_URL = "https://content.osu.edu/v2/classes/search"

# The search endpoint rejects requests without a known client id
CATALOG_CLIENT_ID = "class-search-ui"

# Campus filter applied on the first query of every term ("col" = Columbus)
CATALOG_CAMPUS = "col"

# Seconds before a single catalog request gives up
CATALOG_TIMEOUT = 15

# Transport-level retries on 429/5xx, handled by the urllib3 adapter
CATALOG_MAX_RETRIES = 2
CATALOG_BACKOFF_FACTOR = 0.5
CATALOG_RETRY_STATUSES = [429, 500, 502, 503, 504]

CATALOG_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


# =============================================================================
# TERM SEQUENCE
# =============================================================================
# Term codes are "1" + two-digit year + term digit:
#   - 1258 = Autumn 2025
#   - 1254 = Summer 2025
#   - 1252 = Spring 2025
#   - 1248 = Autumn 2024
# The catalog only answers for a rolling window of recent terms, so the list
# has to be bumped forward every semester. Most recent term first.

TERM_SEQUENCE = (1258, 1254, 1252, 1248)

TERM_LABELS = {
    1258: "AU25",
    1254: "SU25",
    1252: "SP25",
    1248: "AU24",
}


# =============================================================================
# RESOLVED COURSE PLACEHOLDERS
# =============================================================================

NOT_FOUND_TITLE = "Course not found"
UNAVAILABLE_TITLE = "Unavailable"
UNAVAILABLE_DESCRIPTION = "Could not load course details."


# =============================================================================
# AUDIT DOCUMENT MARKUP
# =============================================================================
# The audit export has no semantic structure beyond these class names.

REQUIREMENT_CLASS = "requirement"
REQUIREMENT_TITLE_CLASS = "reqTitle"
COMPLETED_TABLE_CLASS = "completedCourses"
TAKEN_COURSE_CLASS = "takenCourse"
IN_PROGRESS_ROW_CLASS = "ip"
NEEDED_COURSE_CLASSES = ("course", "draggable")

TERM_FIELD_CLASS = "term"
COURSE_FIELD_CLASS = "course"
CREDIT_FIELD_CLASS = "credit"
GRADE_FIELD_CLASS = "grade"

# Administrative sections that never hold degree coursework. Compared
# case-insensitively against the whole title.
EXCLUDED_REQUIREMENT_TITLES = (
    "current/ future term schedule",
    "computer science engineering required non-major coursework",
    "THEMATIC PATHWAYS - COMPLETE THE CITIZENSHIP FOR A DIVERSE AND JUST WORLD THEME AND ONE ADDITIONAL THEME",
    "TRANSFER CREDIT: COURSE WORK THAT APPEARS HERE WILL NOT APPLY TO ANY DEGREE REQUIREMENTS.",
    "GENERAL GRADUATION REQUIREMENTS (MINIMUM HOURS: 126)",
    "general education reflection",
    "BASIC MATH & SCIENCE - ABET REQUIREMENTS: 30 HR MIN",
    "THEMATIC PATHWAYS - COMPLETE THE CITIZENSHIP FOR A DIVERSEAND JUST WORLD THEME AND ONE ADDITIONAL THEME.",
)


def term_label(term: int) -> str:
    """Convert a term code (e.g., 1258) to its short label (e.g., "AU25")."""
    return TERM_LABELS.get(term, str(term))
