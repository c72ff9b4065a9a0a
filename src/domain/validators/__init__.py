"""Declarative validation building blocks.

Exports:
    - Rule, FieldRules, Verdict, validate (from rules.py)
    - Predicates (from functions.py)
"""

from src.domain.validators.functions import (
    EMAIL_PATTERN,
    USERNAME_PATTERN,
    all_in,
    at_least,
    between,
    has_digit,
    has_lowercase,
    has_uppercase,
    is_email,
    is_non_empty,
    is_present,
    is_timezone_aware,
    length_between,
    matches,
    max_length,
    min_length,
    one_of,
)
from src.domain.validators.rules import (
    FieldRules,
    Rule,
    Validator,
    Verdict,
    is_valid,
    validate,
)

__all__ = [
    # Rules
    "FieldRules",
    "Rule",
    "Validator",
    "Verdict",
    "is_valid",
    "validate",
    # Predicates
    "EMAIL_PATTERN",
    "USERNAME_PATTERN",
    "all_in",
    "at_least",
    "between",
    "has_digit",
    "has_lowercase",
    "has_uppercase",
    "is_email",
    "is_non_empty",
    "is_present",
    "is_timezone_aware",
    "length_between",
    "matches",
    "max_length",
    "min_length",
    "one_of",
]
