"""Domain entities."""

from src.domain.entities.log_entry import LogEntry
from src.domain.entities.permission_request import PermissionRequest
from src.domain.entities.user import User

__all__ = ["LogEntry", "PermissionRequest", "User"]
