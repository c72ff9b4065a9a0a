"""Logs resource router.

Endpoints:
    GET    /api/v1/logs                 - Paged, filtered listing (admin)
    POST   /api/v1/logs/client          - Report a browser-side log entry
    POST   /api/v1/logs/client/batch    - Report several browser-side entries
    DELETE /api/v1/logs/cleanup         - Purge entries older than a cutoff (admin)
    DELETE /api/v1/logs/{id}            - Delete one entry (admin)
    POST   /api/v1/logs/batch-deletions - Delete many entries (admin)
"""

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import (
    CreateClientLog,
    CreateClientLogBatch,
    DeleteLog,
    DeleteLogsBatch,
    DeleteLogsOlderThan,
)
from src.application.commands.handlers.create_client_log_handler import (
    CreateClientLogBatchHandler,
    CreateClientLogHandler,
)
from src.application.commands.handlers.delete_log_handler import DeleteLogHandler
from src.application.commands.handlers.delete_logs_batch_handler import (
    DeleteLogsBatchHandler,
)
from src.application.commands.handlers.delete_logs_older_than_handler import (
    DeleteLogsOlderThanHandler,
)
from src.application.queries import GetPagedLogs
from src.application.queries.handlers.get_paged_logs_handler import (
    GetPagedLogsHandler,
)
from src.application.validators import (
    create_client_log_validator,
    delete_logs_batch_validator,
    log_cleanup_validator,
    log_filter_validator,
    validate_client_log_batch,
)
from src.core.container import (
    get_create_client_log_batch_handler,
    get_create_client_log_handler,
    get_delete_log_handler,
    get_delete_logs_batch_handler,
    get_delete_logs_older_than_handler,
    get_paged_logs_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    require_admin,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import (
    ClientLogCreateRequest,
    LogBatchDeleteRequest,
    LogBatchDeleteResponse,
    LogCleanupQuery,
    LogEntryResponse,
    LogPageResponse,
)

router = APIRouter(prefix="/logs", tags=["Logs"])

_INVALID = {422: {"description": "Validation failed", "model": ProblemDetails}}


def _utc(value: datetime | None) -> datetime | None:
    """Read offset-less query timestamps as UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def _client_log_command(data: ClientLogCreateRequest) -> CreateClientLog:
    return CreateClientLog(
        log_level=data.log_level,
        message=data.message,
        exception_message=data.exception_message,
        stack_trace=data.stack_trace,
        source_context=data.source_context,
        request_path=data.request_path,
        correlation_id=data.correlation_id,
    )


@router.get(
    "",
    response_model=LogPageResponse,
    responses=_INVALID,
    summary="List stored log entries",
)
async def list_logs(
    request: Request,
    _: Annotated[CurrentUser, Depends(require_admin)],
    log_level: str | None = Query(None, description="Exact level (case-insensitive)"),
    start_date: datetime | None = Query(None, description="Created at or after"),
    end_date: datetime | None = Query(None, description="Created at or before"),
    search_term: str | None = Query(
        None,
        description="Substring match on message, exception, source, path and stack trace",
    ),
    sort_descending: bool = Query(True, description="Newest first"),
    page: int = Query(1),
    page_size: int = Query(50),
    handler: GetPagedLogsHandler = Depends(get_paged_logs_handler),
) -> LogPageResponse | JSONResponse:
    query = GetPagedLogs(
        log_level=log_level,
        start_date=_utc(start_date),
        end_date=_utc(end_date),
        search_term=search_term,
        sort_descending=sort_descending,
        page=page,
        page_size=page_size,
    )
    if verdict := log_filter_validator.validate(query):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    result = await handler.handle(query)
    return LogPageResponse(
        items=[LogEntryResponse.model_validate(entry) for entry in result.items],
        total_count=result.total_count,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        has_next_page=result.has_next_page,
        has_previous_page=result.has_previous_page,
    )


@router.post(
    "/client",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_INVALID,
    summary="Report a client-side log entry",
)
async def create_client_log(
    request: Request,
    data: ClientLogCreateRequest,
    handler: CreateClientLogHandler = Depends(get_create_client_log_handler),
) -> Response:
    """Store an entry reported by the browser client (no authentication)."""
    command = _client_log_command(data)
    if verdict := create_client_log_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    await handler.handle(command)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/client/batch",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_INVALID,
    summary="Report several client-side log entries",
)
async def create_client_log_batch(
    request: Request,
    data: list[ClientLogCreateRequest],
    handler: CreateClientLogBatchHandler = Depends(get_create_client_log_batch_handler),
) -> Response:
    """Store a batch from the browser client (no authentication).

    Every entry is validated first; one invalid entry rejects the whole
    batch and nothing is stored. An empty array is accepted.
    """
    command = CreateClientLogBatch(
        entries=tuple(_client_log_command(entry) for entry in data)
    )
    if verdict := validate_client_log_batch(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    await handler.handle(command)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/cleanup",
    response_model=LogBatchDeleteResponse,
    responses=_INVALID,
    summary="Purge old log entries",
)
async def cleanup_logs(
    request: Request,
    _: Annotated[CurrentUser, Depends(require_admin)],
    cutoff_date: datetime | None = Query(
        None, description="Entries created before this instant are deleted"
    ),
    handler: DeleteLogsOlderThanHandler = Depends(get_delete_logs_older_than_handler),
) -> LogBatchDeleteResponse | JSONResponse:
    """Manual retention run; the same cleanup also runs at startup."""
    params = LogCleanupQuery(cutoff_date=cutoff_date)
    if verdict := log_cleanup_validator.validate(params):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    assert params.cutoff_date is not None
    deleted = await handler.handle(DeleteLogsOlderThan(cutoff=params.cutoff_date))
    return LogBatchDeleteResponse(deleted_count=deleted)


@router.post(
    "/batch-deletions",
    response_model=LogBatchDeleteResponse,
    responses=_INVALID,
    summary="Delete several log entries",
)
async def delete_logs_batch(
    request: Request,
    data: LogBatchDeleteRequest,
    _: Annotated[CurrentUser, Depends(require_admin)],
    handler: DeleteLogsBatchHandler = Depends(get_delete_logs_batch_handler),
) -> LogBatchDeleteResponse | JSONResponse:
    command = DeleteLogsBatch(log_ids=tuple(data.log_ids))
    if verdict := delete_logs_batch_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)
    return LogBatchDeleteResponse(deleted_count=await handler.handle(command))


@router.delete(
    "/{log_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Log not found", "model": ProblemDetails}},
    summary="Delete a log entry",
)
async def delete_log(
    request: Request,
    _: Annotated[CurrentUser, Depends(require_admin)],
    log_id: UUID = Path(..., description="Log entry ID"),
    handler: DeleteLogHandler = Depends(get_delete_log_handler),
) -> Response:
    match await handler.handle(DeleteLog(log_id=log_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
