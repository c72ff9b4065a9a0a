"""DomainError subclasses, one per HTTP outcome.

    ValidationError      422  a validator rule failed for one field
    NotFoundError        404  record absent, or already revoked/processed
    ConflictError        409  username or email taken
    AuthenticationError  401  bad credentials, inactive account, bad token

Example:
    return Failure(error=NotFoundError(
        code=ErrorCode.LOG_NOT_FOUND,
        message="Log not found",
        resource_type="LogEntry",
        resource_id=str(log_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """resource_id is only set when it is safe to echo (never for tokens)."""

    resource_type: str
    resource_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    pass
