"""Stored log entry entity.

Log entries are written by the server log sink and by the browser client
(client-side errors). They are immutable once stored; the only lifecycle
operations are listing and deletion.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class LogEntry:
    """Persisted log record.

    Attributes:
        id: Entry identifier.
        log_level: Severity (see LogLevel).
        message: Rendered log message.
        created_at: When the entry was written.
        exception_message: Exception text, if an exception was attached.
        stack_trace: Stack trace, if available.
        source_context: Logger / component name.
        request_path: HTTP path that produced the entry.
        correlation_id: Trace ID of the originating request.
    """

    id: UUID
    log_level: str
    message: str
    created_at: datetime
    exception_message: str | None = None
    stack_trace: str | None = None
    source_context: str | None = None
    request_path: str | None = None
    correlation_id: str | None = None
