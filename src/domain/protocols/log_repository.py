"""LogRepository protocol for stored log entries."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.log_entry import LogEntry


class LogRepository(Protocol):
    """Log store port.

    Implementations:
        - LogRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def create(self, entry: LogEntry) -> None:
        """Persist a log entry."""
        ...

    async def create_many(self, entries: Sequence[LogEntry]) -> None:
        """Persist several entries with one flush."""
        ...

    async def get_paged(
        self,
        *,
        log_level: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        search_term: str | None = None,
        sort_descending: bool = True,
        page: int = 1,
        page_size: int = 50,
    ) -> tuple[list[LogEntry], int]:
        """Return one page of entries plus the total matching count.

        Args:
            log_level: Exact level to match.
            start_date: Inclusive lower bound on created_at.
            end_date: Inclusive upper bound on created_at.
            search_term: Substring matched against message, exception message,
                source context, request path and stack trace.
            sort_descending: Newest first when True.
            page: 1-based page number.
            page_size: Entries per page.

        Returns:
            Tuple of (entries on the page, total matching entries).
        """
        ...

    async def delete_by_id(self, log_id: UUID) -> bool:
        """Delete one entry. Returns False when no entry had that ID."""
        ...

    async def delete_range(self, log_ids: Sequence[UUID]) -> None:
        """Delete all entries in log_ids in one statement. Unknown IDs are ignored."""
        ...

    async def delete_older_than(self, cutoff: datetime) -> int:
        """Delete entries created before cutoff. Returns the number deleted."""
        ...

    async def ping(self) -> None:
        """Fetch at most one row from the log store (raises when unreachable)."""
        ...
