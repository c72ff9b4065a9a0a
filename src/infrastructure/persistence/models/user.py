"""User database models.

Users and their role grants. Roles live in a separate table so a grant can
be added without rewriting the user row.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - username is unique ignoring case (uq_users_username_lower); email is
      stored lowercase and unique
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class User(BaseMutableModel):
    """User account.

    Fields:
        id, created_at, updated_at: From BaseMutableModel.
        username: Login name (unique, case-insensitive).
        email: Email address (unique, stored lowercase).
        full_name: Optional display name.
        password_hash: Bcrypt hash (NEVER plaintext).
        is_active: Deactivated users cannot log in.

    Relationships:
        - roles: One-to-many role grants (cascade delete)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )
    full_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    roles: Mapped[list["UserRoleGrant"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return (
            f"<User("
            f"id={self.id}, "
            f"username={self.username!r}, "
            f"is_active={self.is_active}"
            f")>"
        )


# Lookups compare lower(username), so uniqueness has to as well.
Index("uq_users_username_lower", func.lower(User.username), unique=True)


class UserRoleGrant(BaseModel):
    """Role held by a user.

    Indexes:
        - uq_user_roles_user_role: one grant per (user_id, role)
    """

    __tablename__ = "user_roles"
    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(50), nullable=False)

    user: Mapped[User] = relationship(back_populates="roles")
