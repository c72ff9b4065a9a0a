"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (CheckEmailExists, GetPagedLogs).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.identity_queries import (
    CheckEmailExists,
    CheckIdentityHealth,
    CheckUsernameExists,
    GetAvailableRoles,
    ListPermissionRequests,
)
from src.application.queries.log_queries import CheckLogStoreHealth, GetPagedLogs

__all__ = [
    # Identity queries
    "CheckEmailExists",
    "CheckIdentityHealth",
    "CheckUsernameExists",
    "GetAvailableRoles",
    "ListPermissionRequests",
    # Log queries
    "CheckLogStoreHealth",
    "GetPagedLogs",
]
