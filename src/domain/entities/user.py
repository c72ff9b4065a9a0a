"""User domain entity for identity management.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums import UserRole


@dataclass
class User:
    """User account.

    Business Rules:
        - Inactive users cannot log in
        - Role names are compared case-insensitively
        - Every registered user holds the User role

    Attributes:
        id: Unique user identifier.
        username: Login name (3-50 chars, alphanumeric and underscore).
        email: Email address (stored lowercase).
        password_hash: Bcrypt hash (never plaintext).
        is_active: Deactivated users cannot log in.
        roles: Role names held by the user.
        full_name: Optional display name.
        created_at: When the user registered.
        updated_at: When the user was last modified.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     username="jdoe",
        ...     email="jdoe@example.com",
        ...     password_hash="$2b$12$...",
        ...     is_active=True,
        ...     roles=["User"],
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.has_role("user")
        True
    """

    id: UUID
    username: str
    email: str
    password_hash: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    roles: list[str] = field(default_factory=lambda: [UserRole.USER.value])
    full_name: str | None = None

    def has_role(self, role: str) -> bool:
        """Check role membership (case-insensitive).

        Args:
            role: Role name to look for.

        Returns:
            bool: True if the user holds the role.
        """
        wanted = role.casefold()
        return any(held.casefold() == wanted for held in self.roles)

    def can_login(self) -> bool:
        """Check whether the account may authenticate."""
        return self.is_active
