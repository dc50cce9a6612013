"""
Field normalizers for sortable release fields.

Build and date values are turned into floats so they can be compared
directly. Missing or unreadable values become negative infinity: they sort
first in ascending order and last in descending order, and they compare
equal to each other so the next tie-breaker decides.
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
import math

NEGATIVE_INFINITY = float("-inf")

# Largest distance from the epoch a calendar date may have, in milliseconds
MAX_TIMESTAMP_MS = 8.64e15


def _finite_or_lowest(number: float) -> float:
    return number if math.isfinite(number) else NEGATIVE_INFINITY


def _coerce_number(value) -> float:
    """float() that maps overflow to -inf instead of raising"""
    try:
        return _finite_or_lowest(float(value))
    except (OverflowError, ValueError):
        return NEGATIVE_INFINITY


def _parse_number_text(text: str) -> float:
    """Read numeric text the way a JSON build field is usually meant"""
    # Digit separators are not numbers in JSON sources
    if "_" in text:
        return NEGATIVE_INFINITY

    if text[:2].lower() in ("0x", "0o", "0b"):
        try:
            return _coerce_number(int(text, 0))
        except ValueError:
            return NEGATIVE_INFINITY

    return _coerce_number(text)


def normalize_build(value) -> float:
    """
    Convert a build identifier into a sortable number.

    Args:
        value: Build value as supplied (int, float, numeric text or None)

    Returns:
        float value, or -inf for None, booleans, empty or non-numeric text
        and numbers too large for a float

    Examples:
        >>> normalize_build("42")
        42.0
        >>> normalize_build("0x1A")
        26.0
        >>> normalize_build("nightly")
        -inf
    """
    if value is None or isinstance(value, bool):
        return NEGATIVE_INFINITY

    if isinstance(value, (int, float)):
        return _coerce_number(value)

    return _parse_number_text(str(value).strip())


def has_numeric_build(value) -> bool:
    """Check whether a build value normalizes to a real number"""
    return math.isfinite(normalize_build(value))


def _parse_date_text(text: str):
    """Parse ISO-8601 or RFC 2822 date text, None if neither format fits"""
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def _epoch_millis(value) -> float:
    millis = _coerce_number(value)
    return millis if abs(millis) <= MAX_TIMESTAMP_MS else NEGATIVE_INFINITY


def normalize_date(value) -> float:
    """
    Convert a date into a sortable timestamp in milliseconds.

    Date-only and naive date-time values are read as UTC. Numbers are taken
    as milliseconds since the epoch.

    Args:
        value: Date text ("2024-03-05", "2024-03-05T10:00:00Z",
            "Tue, 05 Mar 2024 10:00:00 GMT"), a number, or None

    Returns:
        Milliseconds since the epoch, or -inf if the value can't be read
    """
    if value is None or isinstance(value, bool):
        return NEGATIVE_INFINITY

    if isinstance(value, (int, float)):
        return _epoch_millis(value)

    text = str(value).strip()
    if not text:
        return NEGATIVE_INFINITY

    parsed = _parse_date_text(text)
    if parsed is None:
        return NEGATIVE_INFINITY

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    try:
        return parsed.timestamp() * 1000
    except (OverflowError, OSError, ValueError):
        return NEGATIVE_INFINITY


def compare_numbers(a: float, b: float) -> int:
    """
    Three-way comparison of normalized values.

    Returns:
        -1, 0 or 1; two -inf values compare equal
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
