"""
Small text and number helpers shared by the parser and the engines.
"""

import math
import re

_LEADING_NUMBER_RE = re.compile(r"^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")
_NUMERIC_LABEL_RE = re.compile(r"\d+")


def to_number(value) -> float:
    """
    Coerce a credit value to a number, defaulting to 0.

    Numbers pass through unchanged. Strings are read like a lenient float
    parse: the leading numeric part counts ("4.0 hrs" -> 4.0) and anything
    without one is 0. NaN and infinities also count as 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if match:
            number = float(match.group(0))
            return number if math.isfinite(number) else 0
    return 0


def collapse_whitespace(text: str) -> str:
    """Trim and squeeze runs of whitespace to single spaces."""
    return " ".join((text or "").split())


def is_numeric_label(label: str) -> bool:
    """True for a bare catalog number such as "2321"."""
    return bool(_NUMERIC_LABEL_RE.fullmatch(label or ""))


def digits_only(text: str) -> str:
    """Strip every non-digit character ("2231H" -> "2231")."""
    return re.sub(r"\D", "", text or "")
