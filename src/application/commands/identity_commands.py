"""Identity commands (CQRS write operations).

Registration, sessions and permission requests. Commands are immutable
(frozen=True) keyword-only data containers; handlers hold the logic.
Collection fields are tuples so a command cannot be mutated after
construction.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account with the default User role.

    Attributes:
        username: Login name (3-50 chars, alphanumeric and underscore).
        email: Email address.
        password: Plain text password (hashed by the handler).
        full_name: Optional display name.

    Example:
        >>> command = RegisterUser(
        ...     username="alice",
        ...     email="alice@example.com",
        ...     password="SecurePass123",
        ... )
        >>> result = await handler.handle(command)
    """

    username: str
    email: str
    password: str
    full_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class Login:
    """Authenticate with username or email and issue tokens.

    Attributes:
        username_or_email: Either login identifier.
        password: Plain text password.
    """

    username_or_email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class Logout:
    """Revoke the refresh token presented by the client.

    Attributes:
        refresh_token: Opaque refresh token issued at login.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RefreshTokens:
    """Exchange a refresh token for a new token pair (rotation).

    Attributes:
        refresh_token: Opaque refresh token issued at login or last refresh.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class CreatePermissionRequests:
    """Request one or more elevated roles for the current user.

    Attributes:
        user_id: Requesting user.
        requested_by: Username recorded as the request creator.
        requested_roles: Role names (Developer, Admin).
        request_message: Optional justification shown to admins.
    """

    user_id: UUID
    requested_by: str
    requested_roles: tuple[str, ...]
    request_message: str | None = None


@dataclass(frozen=True, kw_only=True)
class ApprovePermissionRequest:
    """Grant the requested role and remove the request."""

    request_id: UUID


@dataclass(frozen=True, kw_only=True)
class RejectPermissionRequest:
    """Remove a request without granting the role."""

    request_id: UUID


@dataclass(frozen=True, kw_only=True)
class BulkApprovePermissionRequests:
    """Approve many requests in one operation.

    Attributes:
        request_ids: Requests to approve. Unknown IDs are skipped.
    """

    request_ids: tuple[UUID, ...]


@dataclass(frozen=True, kw_only=True)
class BulkRejectPermissionRequests:
    """Reject many requests with a single batched delete.

    Attributes:
        request_ids: Requests to reject. Duplicates count once.
    """

    request_ids: tuple[UUID, ...]
