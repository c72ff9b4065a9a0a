"""Request validators for identity commands.

Each validator is an ordered field -> rule chain mapping. The first failing
rule per field is reported; handlers assume their command already passed.
"""

from src.core.enums import ErrorCode
from src.domain.enums import UserRole
from src.domain.validators import (
    USERNAME_PATTERN,
    Rule,
    Validator,
    all_in,
    has_digit,
    has_lowercase,
    has_uppercase,
    is_email,
    is_non_empty,
    is_present,
    length_between,
    matches,
    max_length,
    min_length,
)

EMAIL_MAX_LENGTH = 255
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
FULL_NAME_MAX_LENGTH = 100
REQUEST_MESSAGE_MAX_LENGTH = 500

register_user_validator = Validator(
    {
        "email": [
            Rule(is_present, "Email is required"),
            Rule(is_email, "Email must be a valid email address", ErrorCode.INVALID_EMAIL),
            Rule(
                max_length(EMAIL_MAX_LENGTH),
                f"Email must not exceed {EMAIL_MAX_LENGTH} characters",
            ),
        ],
        "username": [
            Rule(is_present, "Username is required"),
            Rule(
                length_between(USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH),
                f"Username must be between {USERNAME_MIN_LENGTH} and "
                f"{USERNAME_MAX_LENGTH} characters",
                ErrorCode.INVALID_USERNAME,
            ),
            Rule(
                matches(USERNAME_PATTERN),
                "Username must contain only alphanumeric characters and underscores",
                ErrorCode.INVALID_USERNAME,
            ),
        ],
        "password": [
            Rule(is_present, "Password is required"),
            Rule(
                min_length(PASSWORD_MIN_LENGTH),
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                ErrorCode.PASSWORD_TOO_WEAK,
            ),
            Rule(
                has_uppercase,
                "Password must contain at least one uppercase letter",
                ErrorCode.PASSWORD_TOO_WEAK,
            ),
            Rule(
                has_lowercase,
                "Password must contain at least one lowercase letter",
                ErrorCode.PASSWORD_TOO_WEAK,
            ),
            Rule(
                has_digit,
                "Password must contain at least one digit",
                ErrorCode.PASSWORD_TOO_WEAK,
            ),
        ],
        "full_name": [
            Rule(
                max_length(FULL_NAME_MAX_LENGTH),
                f"Full name must not exceed {FULL_NAME_MAX_LENGTH} characters",
            ),
        ],
    }
)

login_validator = Validator(
    {
        "username_or_email": [Rule(is_present, "Username or email is required")],
        "password": [Rule(is_present, "Password is required")],
    }
)

logout_validator = Validator(
    {
        "refresh_token": [Rule(is_present, "Refresh token is required")],
    }
)

refresh_tokens_validator = Validator(
    {
        "refresh_token": [Rule(is_present, "Refresh token is required")],
    }
)

create_permission_requests_validator = Validator(
    {
        "requested_roles": [
            Rule(is_non_empty, "At least one role must be selected"),
            Rule(
                all_in([role.value for role in UserRole.requestable()]),
                "Invalid role",
                ErrorCode.INVALID_ROLE,
            ),
        ],
        "request_message": [
            Rule(
                max_length(REQUEST_MESSAGE_MAX_LENGTH),
                f"Request message must not exceed {REQUEST_MESSAGE_MAX_LENGTH} characters",
            ),
        ],
    }
)

bulk_permission_requests_validator = Validator(
    {
        "request_ids": [Rule(is_non_empty, "At least one request ID is required")],
    }
)
