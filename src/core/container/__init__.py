"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_user_repository, ...

The container is organized into modules by concern:
- infrastructure: Core services (database, security, logging)
- repositories: Repository and refresh token service factories
- identity_handlers: Identity handler factories
- logging_handlers: Log management handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_log_repository,
    get_permission_request_repository,
    get_refresh_token_repository,
    get_refresh_token_service,
    get_user_repository,
)

# Identity handlers
from src.core.container.identity_handlers import (
    get_approve_permission_request_handler,
    get_available_roles_handler,
    get_bulk_approve_permission_requests_handler,
    get_bulk_reject_permission_requests_handler,
    get_check_email_exists_handler,
    get_check_identity_health_handler,
    get_check_username_exists_handler,
    get_create_permission_requests_handler,
    get_list_permission_requests_handler,
    get_login_handler,
    get_logout_handler,
    get_refresh_tokens_handler,
    get_register_user_handler,
    get_reject_permission_request_handler,
)

# Logging handlers
from src.core.container.logging_handlers import (
    get_check_log_store_health_handler,
    get_create_client_log_batch_handler,
    get_create_client_log_handler,
    get_delete_log_handler,
    get_delete_logs_batch_handler,
    get_delete_logs_older_than_handler,
    get_paged_logs_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_log_repository",
    "get_permission_request_repository",
    "get_refresh_token_repository",
    "get_refresh_token_service",
    "get_user_repository",
    # Identity handlers
    "get_approve_permission_request_handler",
    "get_available_roles_handler",
    "get_bulk_approve_permission_requests_handler",
    "get_bulk_reject_permission_requests_handler",
    "get_check_email_exists_handler",
    "get_check_identity_health_handler",
    "get_check_username_exists_handler",
    "get_create_permission_requests_handler",
    "get_list_permission_requests_handler",
    "get_login_handler",
    "get_logout_handler",
    "get_refresh_tokens_handler",
    "get_register_user_handler",
    "get_reject_permission_request_handler",
    # Logging handlers
    "get_check_log_store_health_handler",
    "get_create_client_log_batch_handler",
    "get_create_client_log_handler",
    "get_delete_log_handler",
    "get_delete_logs_batch_handler",
    "get_delete_logs_older_than_handler",
    "get_paged_logs_handler",
]
