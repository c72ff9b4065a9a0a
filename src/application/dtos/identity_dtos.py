"""Identity DTOs returned by command and query handlers."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Tokens issued by a successful login.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: Opaque refresh token (long-lived, revocable).
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 900
