"""Declarative base for the identity and log tables.

    BaseModel            id (uuid7), created_at
    BaseMutableModel     + updated_at          -> User
    (plain BaseModel)                          -> UserRoleGrant, PermissionRequest,
                                                  LogEntry, RefreshToken

Generic Uuid and DateTime(timezone=True) columns run on PostgreSQL and on
the SQLite database the integration tests use. Rows never leave the
repositories; they are mapped to domain entities there.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class BaseMutableModel(BaseModel):
    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


def as_utc(value: datetime) -> datetime:
    """SQLite hands timestamps back naive; treat them as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
