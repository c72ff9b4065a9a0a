"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types and surfaced in RFC 7807 error responses.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    INVALID_USERNAME = "invalid_username"
    PASSWORD_TOO_WEAK = "password_too_weak"
    INVALID_ROLE = "invalid_role"
    INVALID_LOG_LEVEL = "invalid_log_level"
    INVALID_DATE_RANGE = "invalid_date_range"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    PERMISSION_REQUEST_NOT_FOUND = "permission_request_not_found"
    LOG_NOT_FOUND = "log_not_found"
    TOKEN_NOT_FOUND = "token_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    USERNAME_ALREADY_EXISTS = "username_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_INACTIVE = "account_inactive"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
