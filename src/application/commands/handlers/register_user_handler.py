"""Registration handler.

Flow:
1. Check username uniqueness
2. Check email uniqueness
3. Hash password
4. Create User entity with the default User role
5. Save user
6. Return Success(user_id)

Validation (format, length, password strength) runs before the handler via
RegisterUserValidator; the handler does not re-validate.

Architecture:
- Application layer ONLY imports from domain/core layers
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.identity_commands import RegisterUser
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.protocols import PasswordHashingProtocol, UserRepository


class RegistrationError:
    """Registration failure reasons."""

    USERNAME_TAKEN = "Username already taken"
    EMAIL_TAKEN = "Email already registered"


class RegisterUserHandler:
    """Handler for RegisterUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
        """
        self._user_repo = user_repo
        self._password_service = password_service

    async def handle(self, cmd: RegisterUser) -> Result[UUID, ConflictError]:
        """Handle user registration command.

        Args:
            cmd: Validated RegisterUser command.

        Returns:
            Success(user_id) on successful registration.
            Failure(ConflictError) when the username or email is taken.
        """
        if await self._user_repo.username_exists(cmd.username):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message=RegistrationError.USERNAME_TAKEN,
                    resource_type="User",
                    conflicting_field="username",
                )
            )

        if await self._user_repo.email_exists(cmd.email):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=RegistrationError.EMAIL_TAKEN,
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        password_hash = self._password_service.hash_password(cmd.password)

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            username=cmd.username,
            email=cmd.email.lower(),
            password_hash=password_hash,
            is_active=True,
            roles=[UserRole.USER.value],
            full_name=cmd.full_name,
            created_at=now,
            updated_at=now,
        )
        await self._user_repo.save(user)

        return Success(value=user.id)
