"""Bulk approve permission requests handler.

Flow:
1. Materialize unique request IDs (order preserved)
2. Load matching requests in one query
3. Grant each requested role, skipping users that no longer exist
4. Delete all listed requests with one batched delete
5. Return the number of roles granted
"""

from src.application.commands.identity_commands import BulkApprovePermissionRequests
from src.domain.protocols import (
    LoggerProtocol,
    PermissionRequestRepository,
    UserRepository,
)


class BulkApprovePermissionRequestsHandler:
    """Handler for BulkApprovePermissionRequests command."""

    def __init__(
        self,
        user_repo: UserRepository,
        permission_request_repo: PermissionRequestRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._permission_request_repo = permission_request_repo
        self._logger = logger

    async def handle(self, cmd: BulkApprovePermissionRequests) -> int:
        """Approve all listed requests.

        Returns:
            Number of requests approved. 0 for an empty ID list, in which
            case no store call is made.
        """
        request_ids = list(dict.fromkeys(cmd.request_ids))
        if not request_ids:
            return 0

        requests = await self._permission_request_repo.get_by_ids(request_ids)

        approved = 0
        for request in requests:
            if await self._user_repo.find_by_id(request.user_id) is None:
                self._logger.warning(
                    "Skipping permission request for missing user",
                    request_id=str(request.id),
                    user_id=str(request.user_id),
                )
                continue
            await self._user_repo.add_role(request.user_id, request.requested_role)
            approved += 1

        await self._permission_request_repo.delete_range(request_ids)

        self._logger.info(
            "Permission requests approved",
            requested_count=len(request_ids),
            approved_count=approved,
        )
        return approved
