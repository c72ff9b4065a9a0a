"""Health resource router.

Endpoints:
    GET /api/v1/health - Identity store and log store reachability
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.queries import CheckIdentityHealth, CheckLogStoreHealth
from src.application.queries.handlers.health_check_handlers import (
    CheckIdentityHealthHandler,
    CheckLogStoreHealthHandler,
)
from src.core.container import (
    get_check_identity_health_handler,
    get_check_log_store_health_handler,
)
from src.schemas import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=HealthResponse,
    responses={503: {"description": "A store is unreachable", "model": HealthResponse}},
    summary="Check store health",
)
async def get_health(
    identity_handler: CheckIdentityHealthHandler = Depends(
        get_check_identity_health_handler
    ),
    log_store_handler: CheckLogStoreHealthHandler = Depends(
        get_check_log_store_health_handler
    ),
) -> JSONResponse:
    """200 when both stores answer their ping, 503 otherwise."""
    identity = await identity_handler.handle(CheckIdentityHealth())
    log_store = await log_store_handler.handle(CheckLogStoreHealth())
    healthy = identity and log_store

    body = HealthResponse(
        status="healthy" if healthy else "degraded",
        identity=identity,
        log_store=log_store,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )
