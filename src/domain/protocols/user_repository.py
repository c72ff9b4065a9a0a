"""Identity store port: users and their role grants."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """Persistence for User entities.

    Every username/email comparison is case-insensitive; "JDoe" and "jdoe"
    are the same account. Implementations flush but never commit.
    """

    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def find_by_username(self, username: str) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        """Login lookup: identifier may be either field."""
        ...

    async def save(self, user: User) -> None:
        """Insert a new user together with user.roles."""
        ...

    async def email_exists(
        self, email: str, exclude_user_id: UUID | None = None
    ) -> bool:
        """True if some user other than exclude_user_id holds email."""
        ...

    async def username_exists(
        self, username: str, exclude_user_id: UUID | None = None
    ) -> bool: ...

    async def add_role(self, user_id: UUID, role: str) -> None:
        """Grant role; no-op when the user already holds it."""
        ...

    async def get_roles(self, user_id: UUID) -> list[str]: ...

    async def ping(self) -> None:
        """Read at most one row.

        Succeeds on an empty store; raises the driver's error when the store
        cannot be reached.
        """
        ...
