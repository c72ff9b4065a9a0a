"""HS256 access tokens (PyJWT).

Claims: sub, username, email, roles, iat, exp and a uuid7 jti. Tokens
are validated statelessly; revocation applies only to refresh tokens.
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success

ALGORITHM = "HS256"
MIN_SECRET_LENGTH = 32

TokenClaims = dict[str, Any]


class JWTService:
    def __init__(self, secret_key: str, expiration_minutes: int = 15) -> None:
        if len(secret_key) < MIN_SECRET_LENGTH:
            raise ValueError(
                f"JWT secret key needs at least {MIN_SECRET_LENGTH} characters"
            )
        self._secret_key = secret_key
        self._lifetime = timedelta(minutes=expiration_minutes)

    @property
    def expires_in_seconds(self) -> int:
        return int(self._lifetime.total_seconds())

    def generate_access_token(
        self,
        user_id: UUID,
        username: str,
        email: str,
        roles: list[str],
    ) -> str:
        issued_at = datetime.now(UTC)
        claims: TokenClaims = {
            "sub": str(user_id),
            "username": username,
            "email": email,
            "roles": list(roles),
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
            "jti": str(uuid7()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)

    def validate_access_token(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Check signature and expiry; Failure carries "Invalid or expired token"."""
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired token",
                )
            )
        return Success(value=claims)
