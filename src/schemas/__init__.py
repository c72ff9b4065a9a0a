"""Request/response schemas for API endpoints.

Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import UserCreateRequest, LogPageResponse
"""

from src.schemas.common_schemas import HealthResponse
from src.schemas.identity_schemas import (
    AvailableRolesResponse,
    BulkOperationResponse,
    ExistsResponse,
    PermissionRequestBulkRequest,
    PermissionRequestCreateRequest,
    PermissionRequestCreateResponse,
    PermissionRequestResponse,
    SessionCreateRequest,
    SessionCreateResponse,
    SessionDeleteRequest,
    TokenCreateRequest,
    UserCreateRequest,
    UserCreateResponse,
)
from src.schemas.log_schemas import (
    ClientLogCreateRequest,
    LogBatchDeleteRequest,
    LogBatchDeleteResponse,
    LogCleanupQuery,
    LogEntryResponse,
    LogPageResponse,
)

__all__ = [
    "AvailableRolesResponse",
    "BulkOperationResponse",
    "ClientLogCreateRequest",
    "ExistsResponse",
    "HealthResponse",
    "LogBatchDeleteRequest",
    "LogBatchDeleteResponse",
    "LogCleanupQuery",
    "LogEntryResponse",
    "LogPageResponse",
    "PermissionRequestBulkRequest",
    "PermissionRequestCreateRequest",
    "PermissionRequestCreateResponse",
    "PermissionRequestResponse",
    "SessionCreateRequest",
    "SessionCreateResponse",
    "SessionDeleteRequest",
    "TokenCreateRequest",
    "UserCreateRequest",
    "UserCreateResponse",
]
