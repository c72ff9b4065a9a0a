"""Permission request query handlers."""

from src.application.queries.identity_queries import (
    GetAvailableRoles,
    ListPermissionRequests,
)
from src.domain.entities.permission_request import PermissionRequest
from src.domain.enums import UserRole
from src.domain.protocols import PermissionRequestRepository, UserRepository


class GetAvailableRolesHandler:
    """Handler for GetAvailableRoles query.

    Available roles are the requestable roles minus roles the user holds and
    roles the user has already requested.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        permission_request_repo: PermissionRequestRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: Source of held roles.
            permission_request_repo: Source of pending requests.
        """
        self._user_repo = user_repo
        self._permission_request_repo = permission_request_repo

    async def handle(self, query: GetAvailableRoles) -> list[str]:
        """Handle available roles query.

        Returns:
            Requestable role names in display order (Developer, Admin).
        """
        held = await self._user_repo.get_roles(query.user_id)
        pending = await self._permission_request_repo.get_by_user_id(query.user_id)

        excluded = {role.casefold() for role in held}
        excluded.update(request.requested_role.casefold() for request in pending)

        return [
            role.value
            for role in UserRole.requestable()
            if role.value.casefold() not in excluded
        ]


class ListPermissionRequestsHandler:
    """Handler for ListPermissionRequests query."""

    def __init__(self, permission_request_repo: PermissionRequestRepository) -> None:
        self._permission_request_repo = permission_request_repo

    async def handle(self, query: ListPermissionRequests) -> list[PermissionRequest]:
        """Return all pending requests, newest first."""
        return await self._permission_request_repo.get_all()
