"""Refresh token service.

Implements RefreshTokenServiceProtocol: issues opaque refresh tokens,
rotates them on refresh and revokes them at logout.

Token Strategy:
    - Opaque tokens (NOT JWT), 32 random bytes, urlsafe base64
    - Stored as SHA-256 hex digest, so lookup is a single indexed equality
      match (bcrypt's random salt would force a scan)
    - Expiration tracked in the database (settings.refresh_token_expire_days)
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.domain.protocols import (
    LoggerProtocol,
    RefreshTokenData,
    RefreshTokenRepository,
)


def hash_refresh_token(token: str) -> str:
    """SHA-256 hex digest of a refresh token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class RefreshTokenService:
    """Refresh token issuing and revocation.

    Request-scoped: wraps a repository bound to the request's session.

    Usage:
        service = RefreshTokenService(refresh_token_repo, logger, expiration_days=14)
        token = await service.issue_refresh_token(user_id)
        revoked = await service.revoke_refresh_token(token)
    """

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        logger: LoggerProtocol,
        expiration_days: int = 14,
    ) -> None:
        """Initialize refresh token service.

        Args:
            refresh_token_repo: Token persistence.
            logger: Structured logger (token values are never logged).
            expiration_days: Token lifetime in days.
        """
        self._refresh_token_repo = refresh_token_repo
        self._logger = logger
        self._expiration_days = expiration_days

    async def issue_refresh_token(self, user_id: UUID) -> str:
        token = secrets.token_urlsafe(32)
        await self._refresh_token_repo.save(
            user_id=user_id,
            token_hash=hash_refresh_token(token),
            expires_at=datetime.now(UTC) + timedelta(days=self._expiration_days),
        )
        return token

    async def find_active_refresh_token(self, token: str) -> RefreshTokenData | None:
        return await self._refresh_token_repo.find_active_by_hash(
            hash_refresh_token(token)
        )

    async def rotate_refresh_token(self, token_data: RefreshTokenData) -> str:
        """Revoke the presented token and issue its replacement.

        Both writes share the request transaction, so a failed refresh leaves
        the old token usable.
        """
        await self._refresh_token_repo.revoke(token_data.id, datetime.now(UTC))
        token = await self.issue_refresh_token(token_data.user_id)
        self._logger.info("Refresh token rotated", user_id=str(token_data.user_id))
        return token

    async def revoke_refresh_token(self, token: str) -> bool:
        """Revoke token if it is active.

        Expired but unrevoked tokens are still revoked.

        Returns:
            True if a token was revoked, False if unknown or already revoked.
        """
        token_data = await self.find_active_refresh_token(token)
        if token_data is None:
            return False

        await self._refresh_token_repo.revoke(token_data.id, datetime.now(UTC))
        self._logger.info("Refresh token revoked", user_id=str(token_data.user_id))
        return True
