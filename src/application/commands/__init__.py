"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, DeleteLogsBatch).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.identity_commands import (
    ApprovePermissionRequest,
    BulkApprovePermissionRequests,
    BulkRejectPermissionRequests,
    CreatePermissionRequests,
    Login,
    Logout,
    RefreshTokens,
    RegisterUser,
    RejectPermissionRequest,
)
from src.application.commands.log_commands import (
    CreateClientLog,
    CreateClientLogBatch,
    DeleteLog,
    DeleteLogsBatch,
    DeleteLogsOlderThan,
)

__all__ = [
    # Identity commands
    "ApprovePermissionRequest",
    "BulkApprovePermissionRequests",
    "BulkRejectPermissionRequests",
    "CreatePermissionRequests",
    "Login",
    "Logout",
    "RefreshTokens",
    "RegisterUser",
    "RejectPermissionRequest",
    # Log commands
    "CreateClientLog",
    "CreateClientLogBatch",
    "DeleteLog",
    "DeleteLogsBatch",
    "DeleteLogsOlderThan",
]
