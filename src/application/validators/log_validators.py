"""Request validators for log commands and queries."""

from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from src.application.commands.log_commands import CreateClientLogBatch
from src.core.enums import ErrorCode
from src.domain.enums import LogLevel
from src.domain.validators import (
    Rule,
    Validator,
    Verdict,
    at_least,
    between,
    is_non_empty,
    is_present,
    is_timezone_aware,
    max_length,
    one_of,
)

MESSAGE_MAX_LENGTH = 4000
PAGE_SIZE_MAX = 100


def _optional_level(value: Any) -> bool:
    return value is None or one_of(LogLevel.values())(value)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _date_range_ordered(request: Any) -> bool:
    """Naive bounds count as UTC, so mixed offsets still compare."""
    start, end = request.start_date, request.end_date
    return start is None or end is None or _as_utc(start) <= _as_utc(end)


delete_logs_batch_validator = Validator(
    {
        "log_ids": [Rule(is_non_empty, "At least one log ID is required")],
    }
)

create_client_log_validator = Validator(
    {
        "log_level": [
            Rule(one_of(LogLevel.values()), "Invalid log level", ErrorCode.INVALID_LOG_LEVEL),
        ],
        "message": [
            Rule(is_present, "Message is required"),
            Rule(
                max_length(MESSAGE_MAX_LENGTH),
                f"Message must not exceed {MESSAGE_MAX_LENGTH} characters",
            ),
        ],
    }
)

log_filter_validator = Validator(
    {
        "log_level": [
            Rule(_optional_level, "Invalid log level", ErrorCode.INVALID_LOG_LEVEL),
        ],
        "page": [Rule(at_least(1), "Page must be at least 1")],
        "page_size": [
            Rule(
                between(1, PAGE_SIZE_MAX),
                f"Page size must be between 1 and {PAGE_SIZE_MAX}",
            ),
        ],
        "start_date": [
            Rule(
                _date_range_ordered,
                "Start date must be before or equal to end date",
                ErrorCode.INVALID_DATE_RANGE,
                whole_request=True,
            ),
        ],
    }
)

log_cleanup_validator = Validator(
    {
        "cutoff_date": [
            Rule(is_present, "Cutoff date is required"),
            Rule(
                is_timezone_aware,
                "Cutoff date must include a timezone offset",
                ErrorCode.INVALID_DATE_RANGE,
            ),
        ],
    }
)


def validate_client_log_batch(command: CreateClientLogBatch) -> Verdict:
    """Check every entry; fields are reported as entries[<index>].<field>."""
    return tuple(
        replace(failure, field=f"entries[{index}].{failure.field}")
        for index, entry in enumerate(command.entries)
        for failure in create_client_log_validator.validate(entry)
    )
