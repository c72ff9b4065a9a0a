"""Log management handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger
from src.core.container.repositories import get_log_repository
from src.domain.protocols import LogRepository

if TYPE_CHECKING:
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
    from src.application.queries.handlers.get_paged_logs_handler import (
        GetPagedLogsHandler,
    )
    from src.application.queries.handlers.health_check_handlers import (
        CheckLogStoreHealthHandler,
    )


async def get_paged_logs_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "GetPagedLogsHandler":
    """Get GetPagedLogs query handler (request-scoped)."""
    from src.application.queries.handlers.get_paged_logs_handler import (
        GetPagedLogsHandler,
    )

    return GetPagedLogsHandler(log_repo=log_repo)


async def get_create_client_log_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "CreateClientLogHandler":
    from src.application.commands.handlers.create_client_log_handler import (
        CreateClientLogHandler,
    )

    return CreateClientLogHandler(log_repo=log_repo)


async def get_create_client_log_batch_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "CreateClientLogBatchHandler":
    from src.application.commands.handlers.create_client_log_handler import (
        CreateClientLogBatchHandler,
    )

    return CreateClientLogBatchHandler(log_repo=log_repo, logger=get_logger())


async def get_delete_log_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "DeleteLogHandler":
    from src.application.commands.handlers.delete_log_handler import DeleteLogHandler

    return DeleteLogHandler(log_repo=log_repo)


async def get_delete_logs_batch_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "DeleteLogsBatchHandler":
    """Get DeleteLogsBatch command handler (request-scoped)."""
    from src.application.commands.handlers.delete_logs_batch_handler import (
        DeleteLogsBatchHandler,
    )

    return DeleteLogsBatchHandler(log_repo=log_repo, logger=get_logger())


async def get_delete_logs_older_than_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "DeleteLogsOlderThanHandler":
    """Get retention cleanup handler (request-scoped)."""
    from src.application.commands.handlers.delete_logs_older_than_handler import (
        DeleteLogsOlderThanHandler,
    )

    return DeleteLogsOlderThanHandler(log_repo=log_repo, logger=get_logger())


async def get_check_log_store_health_handler(
    log_repo: LogRepository = Depends(get_log_repository),
) -> "CheckLogStoreHealthHandler":
    from src.application.queries.handlers.health_check_handlers import (
        CheckLogStoreHealthHandler,
    )

    return CheckLogStoreHealthHandler(log_repo=log_repo, logger=get_logger())
