"""Stored log entry database model.

Rows are written by the server log sink and by client log submissions.
They are immutable; retention cleanup deletes them by created_at.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class LogEntry(BaseModel):
    """Log entry.

    Indexes:
        - created_at: retention cleanup and default sort (from BaseModel)
        - log_level: level filter
        - correlation_id: trace lookups
    """

    __tablename__ = "log_entries"

    log_level: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    message: Mapped[str] = mapped_column(String(4000), nullable=False)
    exception_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    stack_trace: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_context: Mapped[str | None] = mapped_column(String(500), nullable=True)
    request_path: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    correlation_id: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True
    )
