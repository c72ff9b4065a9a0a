"""Create permission requests handler.

Idempotent: roles the user already holds or already has pending are
skipped, so resubmitting the same form creates nothing new.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.identity_commands import CreatePermissionRequests
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.permission_request import PermissionRequest
from src.domain.enums import UserRole
from src.domain.protocols import PermissionRequestRepository, UserRepository


class CreatePermissionRequestsHandler:
    """Handler for CreatePermissionRequests command."""

    def __init__(
        self,
        user_repo: UserRepository,
        permission_request_repo: PermissionRequestRepository,
    ) -> None:
        self._user_repo = user_repo
        self._permission_request_repo = permission_request_repo

    async def handle(
        self, cmd: CreatePermissionRequests
    ) -> Result[int, NotFoundError]:
        """Create one request per new role.

        Returns:
            Success(number of requests created), possibly 0.
            Failure(NotFoundError) if the user does not exist.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        pending = await self._permission_request_repo.get_by_user_id(cmd.user_id)
        skip = {role.casefold() for role in user.roles}
        skip.update(request.requested_role.casefold() for request in pending)

        created = 0
        now = datetime.now(UTC)
        for requested in cmd.requested_roles:
            role = _canonical_role(requested)
            if role.casefold() in skip:
                continue
            await self._permission_request_repo.create(
                PermissionRequest(
                    id=uuid7(),
                    user_id=cmd.user_id,
                    requested_role=role,
                    request_message=cmd.request_message,
                    created_by=cmd.requested_by,
                    created_at=now,
                )
            )
            skip.add(role.casefold())
            created += 1

        return Success(value=created)


def _canonical_role(name: str) -> str:
    """Map a case-insensitive role name to its stored spelling."""
    for role in UserRole:
        if role.value.casefold() == name.casefold():
            return role.value
    return name
