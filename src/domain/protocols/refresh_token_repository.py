"""Refresh token store port.

Only SHA-256 digests are stored, so the active token for a presented value
is one indexed equality lookup.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class RefreshTokenData:
    """A stored refresh token; revoked_at is None while the token is live."""

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    revoked_at: datetime | None


class RefreshTokenRepository(Protocol):
    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData: ...

    async def find_active_by_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Unrevoked token with this digest.

        Expiry is not checked: logout revokes expired tokens too.
        """
        ...

    async def revoke(self, token_id: UUID, revoked_at: datetime) -> None: ...
