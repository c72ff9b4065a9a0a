"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.log_repository import LogRepository
from src.infrastructure.persistence.repositories.permission_request_repository import (
    PermissionRequestRepository,
)
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "LogRepository",
    "PermissionRequestRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
