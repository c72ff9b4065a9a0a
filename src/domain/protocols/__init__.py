"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LogRepository, UserRepository
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

from src.domain.protocols.log_repository import LogRepository
from src.domain.protocols.permission_request_repository import (
    PermissionRequestRepository,
)
from src.domain.protocols.refresh_token_repository import (
    RefreshTokenData,
    RefreshTokenRepository,
)
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenServiceProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "LogRepository",
    "PermissionRequestRepository",
    "RefreshTokenData",
    "RefreshTokenRepository",
    "UserRepository",
]
