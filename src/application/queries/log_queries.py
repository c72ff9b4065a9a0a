"""Log queries (CQRS read operations)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class CheckLogStoreHealth:
    """Ping the log store."""


@dataclass(frozen=True, kw_only=True)
class GetPagedLogs:
    """One page of stored log entries.

    Attributes:
        log_level: Only entries at this level.
        start_date: Inclusive lower bound on created_at.
        end_date: Inclusive upper bound on created_at.
        search_term: Substring searched across message, exception message,
            source context, request path and stack trace.
        sort_descending: Newest first (default).
        page: 1-based page number.
        page_size: Entries per page (1-100).

    Example:
        >>> query = GetPagedLogs(log_level="Error", page=2, page_size=25)
        >>> page = await handler.handle(query)
    """

    log_level: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    search_term: str | None = None
    sort_descending: bool = True
    page: int = 1
    page_size: int = 50
