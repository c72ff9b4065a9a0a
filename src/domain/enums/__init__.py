"""Domain enums.

Available Enums:
    - UserRole: Authorization roles (User, Developer, Admin)
    - LogLevel: Stored log severity
"""

from src.domain.enums.log_level import LogLevel
from src.domain.enums.user_role import UserRole

__all__ = ["LogLevel", "UserRole"]
