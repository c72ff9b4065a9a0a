"""Validation predicates.

Pure functions used by Rule chains (src/domain/validators/rules.py).
Each returns True when the value passes. Predicates never raise; a value
of the wrong type simply fails.

Length-style predicates treat None as passing so that optional fields
(full_name, request_message) are only checked when present. Pair them with
is_present() for required fields.
"""

import re
from collections.abc import Callable, Collection
from datetime import datetime
from typing import Any

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def is_present(value: Any) -> bool:
    """Fail on None, empty and whitespace-only strings.

    Example:
        >>> is_present("  ")
        False
        >>> is_present("alice")
        True
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_non_empty(value: Any) -> bool:
    """Fail on None and empty collections."""
    return value is not None and len(value) > 0


def is_email(value: Any) -> bool:
    """Check email format. Empty values pass (is_present reports those)."""
    if not value:
        return True
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def max_length(limit: int) -> Callable[[Any], bool]:
    """Build predicate: string length at most limit."""

    def check(value: Any) -> bool:
        return value is None or len(value) <= limit

    return check


def min_length(limit: int) -> Callable[[Any], bool]:
    """Build predicate: string length at least limit (empty values pass)."""

    def check(value: Any) -> bool:
        return not value or len(value) >= limit

    return check


def length_between(low: int, high: int) -> Callable[[Any], bool]:
    """Build predicate: low <= len(value) <= high (empty values pass)."""

    def check(value: Any) -> bool:
        return not value or low <= len(value) <= high

    return check


def matches(pattern: re.Pattern[str]) -> Callable[[Any], bool]:
    """Build predicate: full-string regex match (empty values pass)."""

    def check(value: Any) -> bool:
        return not value or (
            isinstance(value, str) and pattern.fullmatch(value) is not None
        )

    return check


def has_uppercase(value: Any) -> bool:
    return not value or any(c.isupper() for c in value)


def has_lowercase(value: Any) -> bool:
    return not value or any(c.islower() for c in value)


def has_digit(value: Any) -> bool:
    return not value or any(c.isdigit() for c in value)


def one_of(allowed: Collection[str]) -> Callable[[Any], bool]:
    """Build predicate: value is one of allowed (case-insensitive)."""
    normalized = {a.lower() for a in allowed}

    def check(value: Any) -> bool:
        return isinstance(value, str) and value.lower() in normalized

    return check


def all_in(allowed: Collection[str]) -> Callable[[Any], bool]:
    """Build predicate: every item of a collection is one of allowed."""
    member = one_of(allowed)

    def check(value: Any) -> bool:
        return not value or all(member(item) for item in value)

    return check


def at_least(bound: int) -> Callable[[Any], bool]:
    """Build predicate: value >= bound."""

    def check(value: Any) -> bool:
        return value is not None and value >= bound

    return check


def between(low: int, high: int) -> Callable[[Any], bool]:
    """Build predicate: low <= value <= high."""

    def check(value: Any) -> bool:
        return value is not None and low <= value <= high

    return check


def is_timezone_aware(value: Any) -> bool:
    """Datetimes must carry an offset (missing values pass)."""
    return value is None or (
        isinstance(value, datetime) and value.utcoffset() is not None
    )
