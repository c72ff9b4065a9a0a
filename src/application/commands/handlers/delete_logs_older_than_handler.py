"""Retention cleanup handler."""

from src.application.commands.log_commands import DeleteLogsOlderThan
from src.domain.protocols import LogRepository, LoggerProtocol


class DeleteLogsOlderThanHandler:
    """Handler for DeleteLogsOlderThan command."""

    def __init__(self, log_repo: LogRepository, logger: LoggerProtocol) -> None:
        self._log_repo = log_repo
        self._logger = logger

    async def handle(self, cmd: DeleteLogsOlderThan) -> int:
        """Delete entries created before cmd.cutoff.

        Returns:
            Number of entries deleted.

        Raises:
            ValueError: If cutoff is a naive datetime.
        """
        if cmd.cutoff.tzinfo is None:
            raise ValueError("cutoff must be timezone-aware")

        deleted = await self._log_repo.delete_older_than(cmd.cutoff)

        self._logger.info(
            "Log retention cleanup completed",
            cutoff=cmd.cutoff.isoformat(),
            deleted_count=deleted,
        )
        return deleted
