"""Store health check query handlers.

Each handler runs a bounded ping against one store and reports a boolean.
Any Exception raised by the ping means unhealthy. Task cancellation
(asyncio.CancelledError derives from BaseException) is not caught and
propagates to the caller unchanged.
"""

from src.application.queries.identity_queries import CheckIdentityHealth
from src.application.queries.log_queries import CheckLogStoreHealth
from src.domain.protocols import LogRepository, LoggerProtocol, UserRepository


class CheckIdentityHealthHandler:
    """Handler for CheckIdentityHealth query."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, query: CheckIdentityHealth) -> bool:
        """Return True if the user store answered the ping (even with no rows)."""
        try:
            await self._user_repo.ping()
        except Exception as e:
            self._logger.warning(
                "Health check failed",
                store="identity",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False
        return True


class CheckLogStoreHealthHandler:
    """Handler for CheckLogStoreHealth query."""

    def __init__(self, log_repo: LogRepository, logger: LoggerProtocol) -> None:
        self._log_repo = log_repo
        self._logger = logger

    async def handle(self, query: CheckLogStoreHealth) -> bool:
        """Return True if the log store answered the ping (even with no rows)."""
        try:
            await self._log_repo.ping()
        except Exception as e:
            self._logger.warning(
                "Health check failed",
                store="logs",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False
        return True
