"""Create client log handlers.

Store log entries reported by the browser client so client and server
errors can be viewed together. Single entries and batches share the
mapping below.
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.log_commands import CreateClientLog, CreateClientLogBatch
from src.domain.entities.log_entry import LogEntry
from src.domain.enums import LogLevel
from src.domain.protocols import LogRepository, LoggerProtocol

CLIENT_SOURCE_CONTEXT = "Client"


def build_client_log_entry(cmd: CreateClientLog) -> LogEntry:
    """Map a client report to a LogEntry.

    The level is stored in its canonical spelling; an unrecognised level
    (validator bypassed) is stored as given.
    """
    level = LogLevel.parse(cmd.log_level)
    return LogEntry(
        id=uuid7(),
        log_level=level.value if level else cmd.log_level,
        message=cmd.message,
        exception_message=cmd.exception_message,
        stack_trace=cmd.stack_trace,
        source_context=cmd.source_context or CLIENT_SOURCE_CONTEXT,
        request_path=cmd.request_path,
        correlation_id=cmd.correlation_id,
        created_at=datetime.now(UTC),
    )


class CreateClientLogHandler:
    """Handler for CreateClientLog command."""

    def __init__(self, log_repo: LogRepository) -> None:
        self._log_repo = log_repo

    async def handle(self, cmd: CreateClientLog) -> UUID:
        """Persist the entry and return its ID."""
        entry = build_client_log_entry(cmd)
        await self._log_repo.create(entry)
        return entry.id


class CreateClientLogBatchHandler:
    """Handler for CreateClientLogBatch command."""

    def __init__(self, log_repo: LogRepository, logger: LoggerProtocol) -> None:
        self._log_repo = log_repo
        self._logger = logger

    async def handle(self, cmd: CreateClientLogBatch) -> int:
        """Persist every entry with one store call.

        Returns:
            Number of entries stored. An empty batch stores nothing and
            does not touch the store.
        """
        if not cmd.entries:
            return 0

        await self._log_repo.create_many(
            [build_client_log_entry(entry) for entry in cmd.entries]
        )
        self._logger.info("Client log batch stored", entry_count=len(cmd.entries))
        return len(cmd.entries)
