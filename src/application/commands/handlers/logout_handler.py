"""Logout handler.

Revokes the presented refresh token. JWT access tokens cannot be revoked;
they expire on their own.
"""

from src.application.commands.identity_commands import Logout
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import RefreshTokenServiceProtocol


class LogoutError:
    """Logout failure reasons."""

    TOKEN_NOT_FOUND = "Token not found or already revoked"


class LogoutHandler:
    """Handler for Logout command."""

    def __init__(self, refresh_token_service: RefreshTokenServiceProtocol) -> None:
        """Initialize logout handler.

        Args:
            refresh_token_service: Service owning refresh token revocation.
        """
        self._refresh_token_service = refresh_token_service

    async def handle(self, cmd: Logout) -> Result[None, NotFoundError]:
        """Handle logout command.

        Returns:
            Success(None) when the token was active and is now revoked.
            Failure(NotFoundError) when the token is unknown or already revoked.
        """
        revoked = await self._refresh_token_service.revoke_refresh_token(
            cmd.refresh_token
        )
        if not revoked:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.TOKEN_NOT_FOUND,
                    message=LogoutError.TOKEN_NOT_FOUND,
                    resource_type="RefreshToken",
                )
            )
        return Success(value=None)
