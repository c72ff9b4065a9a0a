"""Declarative validation rules.

A validator is an ordered mapping of field name to a list of rules. Rules
run in order per field and the first failing rule's message is reported for
that field; other fields are still checked. Nothing here performs I/O or
raises for a failed rule.

Verdicts are tuples of ValidationError, empty when the request is valid.
Validators hold no state, so validating the same request twice yields equal
verdicts.

Usage:
    RULES: FieldRules = {
        "email": [
            Rule(is_present, "Email is required"),
            Rule(is_email, "Email must be a valid email address"),
        ],
    }

    verdict = validate(RULES, command)
    if verdict:
        ...
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError

type Verdict = tuple[ValidationError, ...]


@dataclass(frozen=True, slots=True)
class Rule:
    """Predicate plus the message reported when it fails.

    Attributes:
        predicate: Returns True when the checked value is acceptable.
        message: Human-readable failure message.
        code: Error code carried by the resulting ValidationError.
        whole_request: Pass the entire request to predicate instead of the
            field value (cross-field rules such as date ranges).
    """

    predicate: Callable[[Any], bool]
    message: str
    code: ErrorCode = ErrorCode.VALIDATION_FAILED
    whole_request: bool = False

    def passes(self, request: object, field: str) -> bool:
        subject = request if self.whole_request else getattr(request, field, None)
        return self.predicate(subject)


type FieldRules = Mapping[str, Sequence[Rule]]


def validate(rules: FieldRules, request: object) -> Verdict:
    """Run rules against request.

    Args:
        rules: Ordered field -> rule chain mapping.
        request: Command, query or request model with the named attributes.

    Returns:
        One ValidationError per failing field, in field order.
    """
    failures: list[ValidationError] = []
    for field, chain in rules.items():
        for rule in chain:
            if not rule.passes(request, field):
                failures.append(
                    ValidationError(code=rule.code, message=rule.message, field=field)
                )
                break
    return tuple(failures)


def is_valid(verdict: Verdict) -> bool:
    """True when verdict holds no failures."""
    return not verdict


@dataclass(frozen=True)
class Validator:
    """Named rule set for one request type.

    Example:
        >>> logout_validator = Validator(
        ...     {"refresh_token": [Rule(is_present, "Refresh token is required")]}
        ... )
        >>> logout_validator.validate(Logout(refresh_token=""))[0].message
        'Refresh token is required'
    """

    rules: FieldRules

    def validate(self, request: object) -> Verdict:
        return validate(self.rules, request)
