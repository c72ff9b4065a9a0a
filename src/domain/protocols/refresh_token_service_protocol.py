"""Refresh token service protocol.

The token-service capability consumed by Login, Logout and RefreshTokens.
Implementations own token generation, hashing and persistence; handlers
only see opaque token strings and the stored RefreshTokenData.
"""

from typing import Protocol
from uuid import UUID

from src.domain.protocols.refresh_token_repository import RefreshTokenData


class RefreshTokenServiceProtocol(Protocol):
    """Opaque refresh token lifecycle.

    Implementations:
        - RefreshTokenService: src/infrastructure/security/refresh_token_service.py
    """

    async def issue_refresh_token(self, user_id: UUID) -> str:
        """Create and persist a new refresh token for a user.

        Args:
            user_id: Owner of the token.

        Returns:
            The plain token to hand to the client (only its hash is stored).
        """
        ...

    async def find_active_refresh_token(self, token: str) -> RefreshTokenData | None:
        """Unrevoked stored token for a presented value (expiry not checked)."""
        ...

    async def rotate_refresh_token(self, token_data: RefreshTokenData) -> str:
        """Revoke token_data and issue a replacement for the same user."""
        ...

    async def revoke_refresh_token(self, token: str) -> bool:
        """Revoke a refresh token.

        Args:
            token: Plain token presented by the client.

        Returns:
            True if the token was active and is now revoked.
            False if the token is unknown or was already revoked.
        """
        ...
