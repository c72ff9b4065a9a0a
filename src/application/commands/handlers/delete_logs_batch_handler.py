"""Delete logs batch handler.

The ID list is materialized once (duplicates dropped, order kept) and
removed with a single batched delete. The count returned is the number of
unique IDs submitted, not a store-reported row count.
"""

from src.application.commands.log_commands import DeleteLogsBatch
from src.domain.protocols import LogRepository, LoggerProtocol


class DeleteLogsBatchHandler:
    """Handler for DeleteLogsBatch command."""

    def __init__(self, log_repo: LogRepository, logger: LoggerProtocol) -> None:
        """Initialize handler.

        Args:
            log_repo: Log store.
            logger: Structured logger for the destructive operation.
        """
        self._log_repo = log_repo
        self._logger = logger

    async def handle(self, cmd: DeleteLogsBatch) -> int:
        """Delete all listed entries.

        Returns:
            Number of unique IDs deleted. 0 for an empty ID list, in which
            case no store call is made.
        """
        log_ids = list(dict.fromkeys(cmd.log_ids))
        if not log_ids:
            return 0

        await self._log_repo.delete_range(log_ids)

        self._logger.info("Logs batch deleted", deleted_count=len(log_ids))
        return len(log_ids)
