"""Identity handler dependency factories.

Request-scoped handler instances for identity operations:
- Registration, login, logout, token refresh
- Username/email availability
- Permission requests (create, list, approve, reject, bulk)
- Identity store health
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import (
    get_permission_request_repository,
    get_refresh_token_service,
    get_user_repository,
)
from src.domain.protocols import (
    PermissionRequestRepository,
    RefreshTokenServiceProtocol,
    UserRepository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.approve_permission_request_handler import (
        ApprovePermissionRequestHandler,
    )
    from src.application.commands.handlers.bulk_approve_permission_requests_handler import (
        BulkApprovePermissionRequestsHandler,
    )
    from src.application.commands.handlers.bulk_reject_permission_requests_handler import (
        BulkRejectPermissionRequestsHandler,
    )
    from src.application.commands.handlers.create_permission_requests_handler import (
        CreatePermissionRequestsHandler,
    )
    from src.application.commands.handlers.login_handler import LoginHandler
    from src.application.commands.handlers.logout_handler import LogoutHandler
    from src.application.commands.handlers.refresh_tokens_handler import (
        RefreshTokensHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.reject_permission_request_handler import (
        RejectPermissionRequestHandler,
    )
    from src.application.queries.handlers.availability_handlers import (
        CheckEmailExistsHandler,
        CheckUsernameExistsHandler,
    )
    from src.application.queries.handlers.health_check_handlers import (
        CheckIdentityHealthHandler,
    )
    from src.application.queries.handlers.permission_request_query_handlers import (
        GetAvailableRolesHandler,
        ListPermissionRequestsHandler,
    )


# ============================================================================
# Registration and Sessions
# ============================================================================


async def get_register_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Dependencies:
    - UserRepository (request-scoped, uses session)
    - BcryptPasswordService (app-scoped singleton)

    Usage:
        @router.post("/users")
        async def create_user(
            handler: RegisterUserHandler = Depends(get_register_user_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
    )


async def get_login_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    refresh_token_service: RefreshTokenServiceProtocol = Depends(
        get_refresh_token_service
    ),
) -> "LoginHandler":
    """Get Login command handler (request-scoped)."""
    from src.application.commands.handlers.login_handler import LoginHandler

    return LoginHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        refresh_token_service=refresh_token_service,
    )


async def get_logout_handler(
    refresh_token_service: RefreshTokenServiceProtocol = Depends(
        get_refresh_token_service
    ),
) -> "LogoutHandler":
    """Get Logout command handler (request-scoped)."""
    from src.application.commands.handlers.logout_handler import LogoutHandler

    return LogoutHandler(refresh_token_service=refresh_token_service)


async def get_refresh_tokens_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    refresh_token_service: RefreshTokenServiceProtocol = Depends(
        get_refresh_token_service
    ),
) -> "RefreshTokensHandler":
    """Get RefreshTokens command handler (request-scoped).

    Revoking the old token and issuing the new one commit as one transaction.
    """
    from src.application.commands.handlers.refresh_tokens_handler import (
        RefreshTokensHandler,
    )

    return RefreshTokensHandler(
        user_repo=user_repo,
        token_service=get_token_service(),
        refresh_token_service=refresh_token_service,
    )


# ============================================================================
# Availability Checks and Health
# ============================================================================


async def get_check_email_exists_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> "CheckEmailExistsHandler":
    from src.application.queries.handlers.availability_handlers import (
        CheckEmailExistsHandler,
    )

    return CheckEmailExistsHandler(user_repo=user_repo)


async def get_check_username_exists_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> "CheckUsernameExistsHandler":
    from src.application.queries.handlers.availability_handlers import (
        CheckUsernameExistsHandler,
    )

    return CheckUsernameExistsHandler(user_repo=user_repo)


async def get_check_identity_health_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> "CheckIdentityHealthHandler":
    from src.application.queries.handlers.health_check_handlers import (
        CheckIdentityHealthHandler,
    )

    return CheckIdentityHealthHandler(user_repo=user_repo, logger=get_logger())


# ============================================================================
# Permission Requests
# ============================================================================


async def get_create_permission_requests_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "CreatePermissionRequestsHandler":
    from src.application.commands.handlers.create_permission_requests_handler import (
        CreatePermissionRequestsHandler,
    )

    return CreatePermissionRequestsHandler(
        user_repo=user_repo,
        permission_request_repo=permission_request_repo,
    )


async def get_available_roles_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "GetAvailableRolesHandler":
    from src.application.queries.handlers.permission_request_query_handlers import (
        GetAvailableRolesHandler,
    )

    return GetAvailableRolesHandler(
        user_repo=user_repo,
        permission_request_repo=permission_request_repo,
    )


async def get_list_permission_requests_handler(
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "ListPermissionRequestsHandler":
    from src.application.queries.handlers.permission_request_query_handlers import (
        ListPermissionRequestsHandler,
    )

    return ListPermissionRequestsHandler(
        permission_request_repo=permission_request_repo
    )


async def get_approve_permission_request_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "ApprovePermissionRequestHandler":
    from src.application.commands.handlers.approve_permission_request_handler import (
        ApprovePermissionRequestHandler,
    )

    return ApprovePermissionRequestHandler(
        user_repo=user_repo,
        permission_request_repo=permission_request_repo,
    )


async def get_reject_permission_request_handler(
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "RejectPermissionRequestHandler":
    from src.application.commands.handlers.reject_permission_request_handler import (
        RejectPermissionRequestHandler,
    )

    return RejectPermissionRequestHandler(
        permission_request_repo=permission_request_repo
    )


async def get_bulk_approve_permission_requests_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "BulkApprovePermissionRequestsHandler":
    from src.application.commands.handlers.bulk_approve_permission_requests_handler import (
        BulkApprovePermissionRequestsHandler,
    )

    return BulkApprovePermissionRequestsHandler(
        user_repo=user_repo,
        permission_request_repo=permission_request_repo,
        logger=get_logger(),
    )


async def get_bulk_reject_permission_requests_handler(
    permission_request_repo: PermissionRequestRepository = Depends(
        get_permission_request_repository
    ),
) -> "BulkRejectPermissionRequestsHandler":
    from src.application.commands.handlers.bulk_reject_permission_requests_handler import (
        BulkRejectPermissionRequestsHandler,
    )

    return BulkRejectPermissionRequestsHandler(
        permission_request_repo=permission_request_repo,
        logger=get_logger(),
    )
