"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repositories
sharing one session (FastAPI caches get_db_session per request), so all
writes in a request commit or roll back together.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import get_db_session, get_logger
from src.domain.protocols import RefreshTokenRepository

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        LogRepository,
        PermissionRequestRepository,
        UserRepository,
    )
    from src.infrastructure.security.refresh_token_service import RefreshTokenService


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        UserRepository instance.

    Usage:
        @router.get("/users/email-exists")
        async def email_exists(
            user_repo: UserRepository = Depends(get_user_repository),
        ):
            ...
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_permission_request_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "PermissionRequestRepository":
    """Get permission request repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import (
        PermissionRequestRepository,
    )

    return PermissionRequestRepository(session=session)


async def get_log_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "LogRepository":
    """Get log repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import LogRepository

    return LogRepository(session=session)


async def get_refresh_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshTokenRepository":
    """Get refresh token repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return RefreshTokenRepository(session=session)


async def get_refresh_token_service(
    refresh_token_repo: RefreshTokenRepository = Depends(
        get_refresh_token_repository
    ),
) -> "RefreshTokenService":
    """Get refresh token service (request-scoped, wraps the token repository).

    Expiration comes from settings.refresh_token_expire_days.
    """
    from src.infrastructure.security.refresh_token_service import RefreshTokenService

    return RefreshTokenService(
        refresh_token_repo=refresh_token_repo,
        logger=get_logger(),
        expiration_days=settings.refresh_token_expire_days,
    )
