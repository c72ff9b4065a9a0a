"""API v1 routers.

Resources:
    /api/v1/users                - Registration and availability checks
    /api/v1/sessions             - Login and logout
    /api/v1/tokens               - Refresh token rotation
    /api/v1/permission-requests  - Role elevation requests
    /api/v1/logs                 - Stored log management
    /api/v1/health               - Store reachability
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.health import router as health_router
from src.presentation.routers.api.v1.logs import router as logs_router
from src.presentation.routers.api.v1.permission_requests import (
    router as permission_requests_router,
)
from src.presentation.routers.api.v1.sessions import router as sessions_router
from src.presentation.routers.api.v1.tokens import router as tokens_router
from src.presentation.routers.api.v1.users import router as users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(users_router)
v1_router.include_router(sessions_router)
v1_router.include_router(tokens_router)
v1_router.include_router(permission_requests_router)
v1_router.include_router(logs_router)
v1_router.include_router(health_router)

__all__ = [
    "v1_router",
    "users_router",
    "sessions_router",
    "tokens_router",
    "permission_requests_router",
    "logs_router",
    "health_router",
]
