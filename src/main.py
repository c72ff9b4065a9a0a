"""
Main FastAPI application entry point.

Wires the v1 routers, trace middleware and RFC 7807 exception handlers.
Startup creates tables outside production (production schemas are managed
by the deployment) and purges log entries past the retention window.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta

from fastapi import FastAPI

from src.application.commands import DeleteLogsOlderThan
from src.application.commands.handlers.delete_logs_older_than_handler import (
    DeleteLogsOlderThanHandler,
)
from src.core.config import settings
from src.core.container import get_database, get_logger
from src.infrastructure.persistence.repositories import LogRepository
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


async def purge_expired_logs() -> int:
    """Delete log entries older than settings.log_retention_days."""
    cutoff = datetime.now(UTC) - timedelta(days=settings.log_retention_days)
    database = get_database()
    async with database.get_session() as session:
        handler = DeleteLogsOlderThanHandler(
            log_repo=LogRepository(session=session),
            logger=get_logger(),
        )
        return await handler.handle(DeleteLogsOlderThan(cutoff=cutoff))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: schema setup and retention on startup, pool disposal on shutdown."""
    logger = get_logger()
    database = get_database()

    if not settings.is_production:
        await database.create_all()
    await purge_expired_logs()
    logger.info(
        "Application started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield

    await database.close()
    logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="User identity, permission requests and log management API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(TraceMiddleware)

register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic liveness check."""
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }
