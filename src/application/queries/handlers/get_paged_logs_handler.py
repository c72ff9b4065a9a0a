"""Paged log listing query handler."""

from src.application.dtos import PagedResult
from src.application.queries.log_queries import GetPagedLogs
from src.domain.entities.log_entry import LogEntry
from src.domain.enums import LogLevel
from src.domain.protocols import LogRepository


class GetPagedLogsHandler:
    """Handler for GetPagedLogs query.

    Filtering, sorting and paging run in the store; the handler only
    canonicalizes the level name and wraps the page.
    """

    def __init__(self, log_repo: LogRepository) -> None:
        self._log_repo = log_repo

    async def handle(self, query: GetPagedLogs) -> PagedResult[LogEntry]:
        """Handle paged logs query.

        Args:
            query: Validated GetPagedLogs query.

        Returns:
            PagedResult with the requested page and total matching count.
        """
        level = LogLevel.parse(query.log_level) if query.log_level else None
        search_term = query.search_term.strip() if query.search_term else None

        items, total = await self._log_repo.get_paged(
            log_level=level.value if level else query.log_level,
            start_date=query.start_date,
            end_date=query.end_date,
            search_term=search_term or None,
            sort_descending=query.sort_descending,
            page=query.page,
            page_size=query.page_size,
        )

        return PagedResult(
            items=items,
            total_count=total,
            page=query.page,
            page_size=query.page_size,
        )
