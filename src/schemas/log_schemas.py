"""Log management request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ClientLogCreateRequest(BaseModel):
    """POST /api/v1/logs/client (204 No Content).

    Reported by the browser client. The log level is validated against the
    known levels case-insensitively.
    """

    log_level: str = Field("", examples=["Error"])
    message: str = Field("", description="Log message (max 4000 chars)")
    exception_message: str | None = None
    stack_trace: str | None = None
    source_context: str | None = Field(None, description="Defaults to 'Client'")
    request_path: str | None = None
    correlation_id: str | None = None


class LogEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    log_level: str
    message: str
    exception_message: str | None = None
    stack_trace: str | None = None
    source_context: str | None = None
    request_path: str | None = None
    correlation_id: str | None = None
    created_at: datetime


class LogPageResponse(BaseModel):
    """GET /api/v1/logs response."""

    items: list[LogEntryResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class LogBatchDeleteRequest(BaseModel):
    log_ids: list[UUID] = Field(default_factory=list)


class LogBatchDeleteResponse(BaseModel):
    deleted_count: int


class LogCleanupQuery(BaseModel):
    """DELETE /api/v1/logs/cleanup query string.

    cutoff_date must carry an offset ("2024-01-01T00:00:00Z"); entries
    created before it are removed.
    """

    cutoff_date: datetime | None = None
