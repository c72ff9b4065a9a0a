"""Security infrastructure adapters.

- Password hashing (bcrypt)
- JWT access token generation/validation (PyJWT)
- Refresh token issuing/revocation (opaque tokens, SHA-256 hashed)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.refresh_token_service import RefreshTokenService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "RefreshTokenService",
]
