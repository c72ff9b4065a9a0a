"""Delete single log entry handler."""

from src.application.commands.log_commands import DeleteLog
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LogRepository


class DeleteLogHandler:
    """Handler for DeleteLog command."""

    def __init__(self, log_repo: LogRepository) -> None:
        self._log_repo = log_repo

    async def handle(self, cmd: DeleteLog) -> Result[None, NotFoundError]:
        """Delete one entry.

        Returns:
            Success(None) if the entry existed.
            Failure(NotFoundError) otherwise.
        """
        if not await self._log_repo.delete_by_id(cmd.log_id):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.LOG_NOT_FOUND,
                    message="Log not found",
                    resource_type="LogEntry",
                    resource_id=str(cmd.log_id),
                )
            )
        return Success(value=None)
