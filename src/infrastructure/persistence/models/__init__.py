"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. These are infrastructure
concerns and must not be imported by the domain layer; repositories map
them to domain entities.

Models Organization:
    - user.py: Users and role grants
    - permission_request.py: Pending role requests
    - log_entry.py: Stored log entries
    - refresh_token.py: Refresh tokens (hashed)
"""

from src.infrastructure.persistence.models.log_entry import LogEntry
from src.infrastructure.persistence.models.permission_request import (
    PermissionRequest,
)
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User, UserRoleGrant

__all__ = [
    "LogEntry",
    "PermissionRequest",
    "RefreshToken",
    "User",
    "UserRoleGrant",
]
