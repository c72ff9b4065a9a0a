"""Approve permission request handler.

Grants the requested role to the requesting user, then deletes the request.
"""

from src.application.commands.identity_commands import ApprovePermissionRequest
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import PermissionRequestRepository, UserRepository

REQUEST_NOT_FOUND = "Permission request not found"


def request_not_found(request_id: object) -> NotFoundError:
    """Failure reported when a permission request is absent."""
    return NotFoundError(
        code=ErrorCode.PERMISSION_REQUEST_NOT_FOUND,
        message=REQUEST_NOT_FOUND,
        resource_type="PermissionRequest",
        resource_id=str(request_id),
    )


class ApprovePermissionRequestHandler:
    """Handler for ApprovePermissionRequest command."""

    def __init__(
        self,
        user_repo: UserRepository,
        permission_request_repo: PermissionRequestRepository,
    ) -> None:
        self._user_repo = user_repo
        self._permission_request_repo = permission_request_repo

    async def handle(
        self, cmd: ApprovePermissionRequest
    ) -> Result[None, NotFoundError]:
        """Approve one request.

        Returns:
            Success(None) once the role is granted and the request removed.
            Failure(NotFoundError) if no such request exists.
        """
        request = await self._permission_request_repo.get_by_id(cmd.request_id)
        if request is None:
            return Failure(error=request_not_found(cmd.request_id))

        await self._user_repo.add_role(request.user_id, request.requested_role)
        await self._permission_request_repo.delete(request.id)
        return Success(value=None)
