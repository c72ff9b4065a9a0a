"""Request validators.

Validators run in the presentation layer before a command or query reaches
its handler. A non-empty verdict becomes a 422 response.
"""

from src.application.validators.identity_validators import (
    bulk_permission_requests_validator,
    create_permission_requests_validator,
    login_validator,
    logout_validator,
    refresh_tokens_validator,
    register_user_validator,
)
from src.application.validators.log_validators import (
    create_client_log_validator,
    delete_logs_batch_validator,
    log_cleanup_validator,
    log_filter_validator,
    validate_client_log_batch,
)

__all__ = [
    "bulk_permission_requests_validator",
    "create_client_log_validator",
    "create_permission_requests_validator",
    "delete_logs_batch_validator",
    "log_cleanup_validator",
    "log_filter_validator",
    "login_validator",
    "logout_validator",
    "refresh_tokens_validator",
    "register_user_validator",
    "validate_client_log_batch",
]
