"""SQLAlchemy adapter for the UserRepository port.

Username and email match case-insensitively via lower() equality. ILIKE
is avoided because "_" is legal in usernames and is a wildcard there.
Writes flush only; Database.get_session() owns the commit.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.models.user import UserRoleGrant


def _matches(column: Any, value: str) -> ColumnElement[bool]:
    return func.lower(column) == value.lower()


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        return await self._find_one(UserModel.id == user_id)

    async def find_by_username(self, username: str) -> User | None:
        return await self._find_one(_matches(UserModel.username, username))

    async def find_by_email(self, email: str) -> User | None:
        return await self._find_one(_matches(UserModel.email, email))

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        """Login lookup: identifier may be either the username or the email."""
        return await self._find_one(
            or_(
                _matches(UserModel.username, identifier),
                _matches(UserModel.email, identifier),
            )
        )

    async def save(self, user: User) -> None:
        """Insert the user and its role grants.

        Raises:
            IntegrityError: username or email taken (checked earlier by the
                handler, so this only fires on a race).
        """
        self.session.add(self._to_model(user))
        await self.session.flush()

    async def email_exists(self, email: str, exclude_user_id: UUID | None = None) -> bool:
        return await self._exists(_matches(UserModel.email, email), exclude_user_id)

    async def username_exists(
        self, username: str, exclude_user_id: UUID | None = None
    ) -> bool:
        return await self._exists(_matches(UserModel.username, username), exclude_user_id)

    async def add_role(self, user_id: UUID, role: str) -> None:
        """Grant role; a role already held (any casing) is a no-op."""
        held = {name.casefold() for name in await self.get_roles(user_id)}
        if role.casefold() in held:
            return
        self.session.add(UserRoleGrant(user_id=user_id, role=role))
        await self.session.flush()

    async def get_roles(self, user_id: UUID) -> list[str]:
        rows = await self.session.scalars(
            select(UserRoleGrant.role)
            .where(UserRoleGrant.user_id == user_id)
            .order_by(UserRoleGrant.role)
        )
        return list(rows)

    async def ping(self) -> None:
        """Cheapest possible read; raises when the store is unreachable."""
        await self.session.execute(select(UserModel.id).limit(1))

    async def _find_one(self, condition: ColumnElement[bool]) -> User | None:
        row = await self.session.scalar(select(UserModel).where(condition).limit(1))
        return None if row is None else self._to_domain(row)

    async def _exists(
        self, condition: ColumnElement[bool], exclude_user_id: UUID | None
    ) -> bool:
        stmt: Select[tuple[UUID]] = select(UserModel.id).where(condition)
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.id != exclude_user_id)
        return await self.session.scalar(stmt.limit(1)) is not None

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User(
            id=row.id,
            username=row.username,
            email=row.email,
            full_name=row.full_name,
            password_hash=row.password_hash,
            is_active=row.is_active,
            roles=[grant.role for grant in row.roles],
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )

    @staticmethod
    def _to_model(user: User) -> UserModel:
        row = UserModel(
            id=user.id,
            username=user.username,
            email=user.email.lower(),
            full_name=user.full_name,
            password_hash=user.password_hash,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        row.roles = [UserRoleGrant(role=role) for role in dict.fromkeys(user.roles)]
        return row
