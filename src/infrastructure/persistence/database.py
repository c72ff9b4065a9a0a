"""Async engine and transactional sessions for the identity and log store.

Repositories get an AsyncSession and only flush. Database.get_session() is
the single place that commits or rolls back, so one request (or one startup
job) is one transaction.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # one shared connection, so an in-memory database outlives each session
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": max_overflow,
    }
    if "asyncpg" in database_url:
        options["connect_args"] = {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
            "timeout": 30,
        }
    return options


class Database:
    """Engine plus session factory.

    Usage:
        db = Database("postgresql+asyncpg://app:secret@db/identity")
        async with db.get_session() as session:
            await UserRepository(session).save(user)
        # committed here
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            **_engine_options(database_url, pool_size, max_overflow),
        )
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session; commit on clean exit, roll back on any exception.

        BaseException is caught so a cancelled request also rolls back.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except BaseException:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create missing tables (development, testing and CI)."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop every table. Test teardown only."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()
