"""Log management commands (CQRS write operations)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateClientLog:
    """Store a log entry reported by a browser client.

    Attributes:
        log_level: One of the LogLevel values.
        message: Log message.
        exception_message: Client-side exception text, if any.
        stack_trace: Client-side stack trace, if any.
        source_context: Component that produced the entry.
        request_path: Route the client was on.
        correlation_id: Trace ID tying the entry to server logs.
    """

    log_level: str
    message: str
    exception_message: str | None = None
    stack_trace: str | None = None
    source_context: str | None = None
    request_path: str | None = None
    correlation_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateClientLogBatch:
    """Store several client-reported entries at once.

    Attributes:
        entries: Entries in the order the client sent them.
    """

    entries: tuple[CreateClientLog, ...]


@dataclass(frozen=True, kw_only=True)
class DeleteLog:
    """Delete a single log entry."""

    log_id: UUID


@dataclass(frozen=True, kw_only=True)
class DeleteLogsBatch:
    """Delete many log entries with a single batched delete.

    Attributes:
        log_ids: Entries to delete. Duplicates count once.
    """

    log_ids: tuple[UUID, ...]


@dataclass(frozen=True, kw_only=True)
class DeleteLogsOlderThan:
    """Retention cleanup.

    Attributes:
        cutoff: Timezone-aware timestamp; entries created before it go.
    """

    cutoff: datetime
