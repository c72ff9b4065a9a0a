"""LogRepository - SQLAlchemy implementation of LogRepository protocol.

Maps between domain LogEntry entities and LogEntryModel.
"""

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.log_entry import LogEntry
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.log_entry import (
    LogEntry as LogEntryModel,
)

SEARCHABLE_COLUMNS = (
    LogEntryModel.message,
    LogEntryModel.exception_message,
    LogEntryModel.source_context,
    LogEntryModel.request_path,
    LogEntryModel.stack_trace,
)


class LogRepository:
    """SQLAlchemy implementation of LogRepository protocol.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = LogRepository(session)
        ...     entries, total = await repo.get_paged(log_level="Error")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, entry: LogEntry) -> None:
        self.session.add(self._to_model(entry))
        await self.session.flush()

    async def create_many(self, entries: Sequence[LogEntry]) -> None:
        self.session.add_all([self._to_model(entry) for entry in entries])
        await self.session.flush()

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
        """Return one page of matching entries and the total match count.

        Search is a case-insensitive substring match across message,
        exception message, source context, request path and stack trace.
        """
        conditions = []
        if log_level:
            conditions.append(LogEntryModel.log_level == log_level)
        if start_date is not None:
            conditions.append(LogEntryModel.created_at >= start_date)
        if end_date is not None:
            conditions.append(LogEntryModel.created_at <= end_date)
        if search_term:
            pattern = f"%{search_term.lower()}%"
            conditions.append(
                or_(*(func.lower(column).like(pattern) for column in SEARCHABLE_COLUMNS))
            )

        count_stmt = select(func.count()).select_from(LogEntryModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        order = (
            LogEntryModel.created_at.desc()
            if sort_descending
            else LogEntryModel.created_at.asc()
        )
        stmt = (
            select(LogEntryModel)
            .where(*conditions)
            .order_by(order, LogEntryModel.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def delete_by_id(self, log_id: UUID) -> bool:
        result = await self.session.execute(
            delete(LogEntryModel).where(LogEntryModel.id == log_id)
        )
        return result.rowcount > 0

    async def delete_range(self, log_ids: Sequence[UUID]) -> None:
        """Delete all listed entries with one DELETE ... WHERE id IN (...)."""
        if not log_ids:
            return
        await self.session.execute(
            delete(LogEntryModel).where(LogEntryModel.id.in_(log_ids))
        )

    async def delete_older_than(self, cutoff: datetime) -> int:
        result = await self.session.execute(
            delete(LogEntryModel).where(LogEntryModel.created_at < cutoff)
        )
        return result.rowcount

    async def ping(self) -> None:
        """Fetch at most one entry ID; raises if the store is unreachable."""
        await self.session.execute(select(LogEntryModel.id).limit(1))

    def _to_domain(self, model: LogEntryModel) -> LogEntry:
        return LogEntry(
            id=model.id,
            log_level=model.log_level,
            message=model.message,
            exception_message=model.exception_message,
            stack_trace=model.stack_trace,
            source_context=model.source_context,
            request_path=model.request_path,
            correlation_id=model.correlation_id,
            created_at=as_utc(model.created_at),
        )

    def _to_model(self, entry: LogEntry) -> LogEntryModel:
        return LogEntryModel(
            id=entry.id,
            log_level=entry.log_level,
            message=entry.message,
            exception_message=entry.exception_message,
            stack_trace=entry.stack_trace,
            source_context=entry.source_context,
            request_path=entry.request_path,
            correlation_id=entry.correlation_id,
            created_at=entry.created_at,
        )
