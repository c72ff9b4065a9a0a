"""Bulk reject permission requests handler.

Rejecting is a plain delete, so the request IDs are materialized once and
removed with a single batched delete. The count returned is the number of
unique IDs submitted.
"""

from src.application.commands.identity_commands import BulkRejectPermissionRequests
from src.domain.protocols import LoggerProtocol, PermissionRequestRepository


class BulkRejectPermissionRequestsHandler:
    """Handler for BulkRejectPermissionRequests command."""

    def __init__(
        self,
        permission_request_repo: PermissionRequestRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._permission_request_repo = permission_request_repo
        self._logger = logger

    async def handle(self, cmd: BulkRejectPermissionRequests) -> int:
        """Reject all listed requests.

        Returns:
            Number of unique IDs rejected. 0 for an empty ID list, in which
            case no store call is made.
        """
        request_ids = list(dict.fromkeys(cmd.request_ids))
        if not request_ids:
            return 0

        await self._permission_request_repo.delete_range(request_ids)

        self._logger.info(
            "Permission requests rejected", rejected_count=len(request_ids)
        )
        return len(request_ids)
