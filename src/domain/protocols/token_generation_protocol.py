"""Access token port.

Access tokens are short-lived and validated without a store lookup.
Refresh tokens are a separate concern (RefreshTokenServiceProtocol).
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Issues and validates signed access tokens (JWTService)."""

    @property
    def expires_in_seconds(self) -> int: ...

    def generate_access_token(
        self,
        user_id: UUID,
        username: str,
        email: str,
        roles: list[str],
    ) -> str:
        """Token whose claims carry sub=user_id, username, email and roles."""
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Success(claims), or Failure when the signature, expiry or format is bad."""
        ...
