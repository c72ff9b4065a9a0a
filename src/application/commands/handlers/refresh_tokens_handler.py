"""Refresh tokens handler.

Flow:
1. Find the active (unrevoked) refresh token for the presented value
2. Reject expired tokens
3. Load the owner; reject missing or inactive accounts
4. Rotate: revoke the presented token, issue a new one
5. Issue an access token carrying the owner's current roles

Roles granted since login (permission approvals) reach the client here
without a new login.
"""

from datetime import UTC, datetime

from src.application.commands.identity_commands import RefreshTokens
from src.application.dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    RefreshTokenServiceProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class RefreshError:
    """Refresh failure reasons."""

    TOKEN_INVALID = "Invalid or expired refresh token"
    ACCOUNT_INACTIVE = "Account is inactive"


def _rejected(code: ErrorCode, message: str) -> Failure[AuthenticationError]:
    return Failure(error=AuthenticationError(code=code, message=message))


class RefreshTokensHandler:
    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._refresh_token_service = refresh_token_service

    async def handle(self, cmd: RefreshTokens) -> Result[AuthTokens, AuthenticationError]:
        """Handle refresh command.

        Returns:
            Success(AuthTokens) with a new access token and a new refresh token.
            Failure(AuthenticationError) for unknown, revoked or expired tokens
            and for accounts that can no longer log in. The presented token is
            left untouched on failure.
        """
        token_data = await self._refresh_token_service.find_active_refresh_token(
            cmd.refresh_token
        )
        if token_data is None or token_data.expires_at <= datetime.now(UTC):
            return _rejected(ErrorCode.TOKEN_INVALID, RefreshError.TOKEN_INVALID)

        user = await self._user_repo.find_by_id(token_data.user_id)
        if user is None:
            return _rejected(ErrorCode.TOKEN_INVALID, RefreshError.TOKEN_INVALID)
        if not user.can_login():
            return _rejected(ErrorCode.ACCOUNT_INACTIVE, RefreshError.ACCOUNT_INACTIVE)

        refresh_token = await self._refresh_token_service.rotate_refresh_token(token_data)
        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            username=user.username,
            email=user.email,
            roles=list(user.roles),
        )
        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )
