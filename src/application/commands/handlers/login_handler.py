"""Login handler.

Flow:
1. Find user by username or email
2. Verify password (unknown user and wrong password share one message and
   one bcrypt check, so response time does not reveal which names exist)
3. Reject inactive accounts
4. Issue JWT access token
5. Issue refresh token (persisted as a hash by the token service)
6. Return Success(AuthTokens)
"""

from functools import cache

from src.application.commands.identity_commands import Login
from src.application.dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    PasswordHashingProtocol,
    RefreshTokenServiceProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


_UNKNOWN_USER_PASSWORD = "unknown-user-placeholder"


@cache
def _placeholder_hash(password_service: PasswordHashingProtocol) -> str:
    """Hash checked against when no user matched; built once per hasher."""
    return password_service.hash_password(_UNKNOWN_USER_PASSWORD)


class LoginError:
    """Login failure reasons."""

    INVALID_CREDENTIALS = "Invalid username or password"
    ACCOUNT_INACTIVE = "Account is inactive"


class LoginHandler:
    """Handler for Login command.

    Does not reveal whether the username exists: unknown users and wrong
    passwords produce the same failure.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._refresh_token_service = refresh_token_service

    async def handle(self, cmd: Login) -> Result[AuthTokens, AuthenticationError]:
        """Handle login command.

        Returns:
            Success(AuthTokens) with access and refresh tokens.
            Failure(AuthenticationError) on bad credentials or inactive account.
        """
        user = await self._user_repo.find_by_username_or_email(cmd.username_or_email)
        password_hash = (
            user.password_hash
            if user is not None
            else _placeholder_hash(self._password_service)
        )
        password_ok = self._password_service.verify_password(cmd.password, password_hash)
        if user is None or not password_ok:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=LoginError.INVALID_CREDENTIALS,
                )
            )

        if not user.can_login():
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=LoginError.ACCOUNT_INACTIVE,
                )
            )

        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            username=user.username,
            email=user.email,
            roles=list(user.roles),
        )
        refresh_token = await self._refresh_token_service.issue_refresh_token(user.id)

        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )
