"""Username and email availability query handlers.

Used by the registration and profile forms. Comparison is
case-insensitive; exclude_user_id lets a user keep their own value.
"""

from src.application.queries.identity_queries import (
    CheckEmailExists,
    CheckUsernameExists,
)
from src.domain.protocols import UserRepository


class CheckEmailExistsHandler:
    """Handler for CheckEmailExists query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: CheckEmailExists) -> bool:
        return await self._user_repo.email_exists(
            query.email, exclude_user_id=query.exclude_user_id
        )


class CheckUsernameExistsHandler:
    """Handler for CheckUsernameExists query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: CheckUsernameExists) -> bool:
        return await self._user_repo.username_exists(
            query.username, exclude_user_id=query.exclude_user_id
        )
