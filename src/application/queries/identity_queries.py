"""Identity queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. Queries NEVER
change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CheckIdentityHealth:
    """Ping the user store."""


@dataclass(frozen=True, kw_only=True)
class CheckEmailExists:
    """Check whether an email is already registered.

    Attributes:
        email: Email to check (case-insensitive).
        exclude_user_id: User whose own record does not count (profile edits).

    Example:
        >>> query = CheckEmailExists(email="alice@example.com")
        >>> taken = await handler.handle(query)
    """

    email: str
    exclude_user_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class CheckUsernameExists:
    """Check whether a username is taken. Same semantics as CheckEmailExists."""

    username: str
    exclude_user_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class GetAvailableRoles:
    """Roles the user may still request.

    Attributes:
        user_id: Requesting user.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListPermissionRequests:
    """All pending permission requests, newest first."""
