"""Reject permission request handler."""

from src.application.commands.handlers.approve_permission_request_handler import (
    request_not_found,
)
from src.application.commands.identity_commands import RejectPermissionRequest
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import PermissionRequestRepository


class RejectPermissionRequestHandler:
    """Handler for RejectPermissionRequest command.

    Deletes the request without granting the role.
    """

    def __init__(self, permission_request_repo: PermissionRequestRepository) -> None:
        self._permission_request_repo = permission_request_repo

    async def handle(self, cmd: RejectPermissionRequest) -> Result[None, NotFoundError]:
        request = await self._permission_request_repo.get_by_id(cmd.request_id)
        if request is None:
            return Failure(error=request_not_found(cmd.request_id))

        await self._permission_request_repo.delete(request.id)
        return Success(value=None)
