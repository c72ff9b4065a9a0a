"""User roles for authorization.

Role names match the values stored in the user_roles table and carried in
the access token's "roles" claim.

Requestable roles:
    Developer and Admin are granted through permission requests.
    User is assigned automatically at registration and cannot be requested.

Usage:
    from src.domain.enums import UserRole

    if UserRole.ADMIN in current_user.roles:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for authorization.

    String Enum:
        Inherits from str so members compare equal to stored role names.
    """

    USER = "User"
    """Default role granted at registration."""

    DEVELOPER = "Developer"
    """Access to developer tooling (log viewer)."""

    ADMIN = "Admin"
    """Full administrative access (user and permission management)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['User', 'Developer', 'Admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def requestable(cls) -> tuple["UserRole", ...]:
        """Roles a user may ask for through a permission request.

        Returns:
            tuple[UserRole, ...]: Requestable roles in display order.
        """
        return (cls.DEVELOPER, cls.ADMIN)

    @classmethod
    def is_requestable(cls, value: str) -> bool:
        """Check if a string names a requestable role (case-insensitive).

        Args:
            value: Role name to check.

        Returns:
            bool: True if the role can be requested.
        """
        return value.casefold() in {role.value.casefold() for role in cls.requestable()}
