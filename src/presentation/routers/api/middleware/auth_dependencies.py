"""Authentication dependencies for FastAPI routes.

Access tokens are validated statelessly; role checks read the roles claim
baked into the token at login.

Usage:
    @router.get("/permission-requests/available-roles")
    async def available_roles(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ):
        ...

    @router.get("/logs")
    async def list_logs(
        admin: Annotated[CurrentUser, Depends(require_admin)],
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols import TokenGenerationProtocol

# auto_error=False so a missing header yields our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier ('sub' claim).
        username: Login name ('username' claim).
        email: Email address ('email' claim).
        roles: Role names ('roles' claim).
    """

    user_id: UUID
    username: str
    email: str
    roles: tuple[str, ...] = ()

    def has_role(self, role: str) -> bool:
        wanted = role.casefold()
        return any(held.casefold() == wanted for held in self.roles)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Resolve the caller from the bearer access token.

    Raises:
        HTTPException 401: token missing, invalid or expired.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_service.validate_access_token(credentials.credentials):
        case Failure(error=error):
            raise _unauthorized(error.message)
        case Success(value=claims):
            try:
                return CurrentUser(
                    user_id=UUID(str(claims["sub"])),
                    username=str(claims["username"]),
                    email=str(claims["email"]),
                    roles=tuple(str(role) for role in claims.get("roles") or ()),
                )
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e


def require_role(required_role: str) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires a specific role.

    Raises:
        HTTPException 403: If the user does not hold the role.
    """

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not current_user.has_role(required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{required_role}' required",
            )
        return current_user

    return role_checker


require_admin = require_role(UserRole.ADMIN.value)
