"""Process-wide services and the per-request database session.

Singletons (cached with lru_cache, built on first use):
    get_database         - engine + session factory for the identity/log store
    get_password_service - bcrypt hashing
    get_token_service    - HS256 access tokens
    get_logger           - structlog console adapter

Per request:
    get_db_session       - one transaction per request, shared by every
                           repository the request resolves
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
)
from src.infrastructure.persistence.database import Database


@lru_cache()
def get_database() -> Database:
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_password_service() -> PasswordHashingProtocol:
    """bcrypt hasher; cost factor from settings.bcrypt_rounds."""
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> TokenGenerationProtocol:
    """JWT issuer/validator shared by login and the auth dependencies."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_logger() -> LoggerProtocol:
    """Structured logger; JSON everywhere except local development."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT,
        level=settings.log_level,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's session.

    Commits when the request finishes normally and rolls back when it
    raises; repositories only flush.
    """
    async with get_database().get_session() as session:
        yield session
