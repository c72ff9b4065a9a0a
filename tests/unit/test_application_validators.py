"""Unit tests for the command and query validators."""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.application.commands import (
    BulkRejectPermissionRequests,
    CreateClientLog,
    CreateClientLogBatch,
    CreatePermissionRequests,
    DeleteLogsBatch,
    Login,
    Logout,
    RefreshTokens,
    RegisterUser,
)
from src.application.queries import GetPagedLogs
from src.application.validators import (
    bulk_permission_requests_validator,
    create_client_log_validator,
    create_permission_requests_validator,
    delete_logs_batch_validator,
    log_cleanup_validator,
    log_filter_validator,
    login_validator,
    logout_validator,
    refresh_tokens_validator,
    register_user_validator,
    validate_client_log_batch,
)
from src.schemas import LogCleanupQuery


def _messages(verdict):
    return {failure.field: failure.message for failure in verdict}


def _register(**overrides):
    fields = {
        "username": "jdoe",
        "email": "jdoe@example.com",
        "password": "SecurePass123",
    }
    fields.update(overrides)
    return RegisterUser(**fields)


@pytest.mark.unit
class TestRegisterUserValidator:
    def test_valid_command(self):
        assert register_user_validator.validate(_register()) == ()

    def test_missing_fields(self):
        verdict = register_user_validator.validate(
            _register(username="", email="", password="")
        )

        assert _messages(verdict) == {
            "email": "Email is required",
            "username": "Username is required",
            "password": "Password is required",
        }

    def test_username_rules(self):
        assert _messages(register_user_validator.validate(_register(username="jd"))) == {
            "username": "Username must be between 3 and 50 characters"
        }
        assert _messages(
            register_user_validator.validate(_register(username="j.doe"))
        ) == {
            "username": "Username must contain only alphanumeric characters and underscores"
        }

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Short1", "Password must be at least 8 characters"),
            ("lowercase123", "Password must contain at least one uppercase letter"),
            ("UPPERCASE123", "Password must contain at least one lowercase letter"),
            ("NoDigitsHere", "Password must contain at least one digit"),
        ],
    )
    def test_password_strength(self, password, message):
        verdict = register_user_validator.validate(_register(password=password))

        assert _messages(verdict) == {"password": message}

    def test_invalid_email(self):
        verdict = register_user_validator.validate(_register(email="jdoe-at-example"))

        assert _messages(verdict) == {"email": "Email must be a valid email address"}

    def test_trailing_newline_is_rejected(self):
        verdict = register_user_validator.validate(
            _register(username="jdoe\n", email="jdoe@example.com\n")
        )

        assert _messages(verdict) == {
            "username": "Username must contain only alphanumeric characters and underscores",
            "email": "Email must be a valid email address",
        }

    def test_validation_is_idempotent(self):
        command = _register(username="", password="weak")

        assert register_user_validator.validate(command) == register_user_validator.validate(
            command
        )


@pytest.mark.unit
class TestSessionValidators:
    def test_login_requires_both_fields(self):
        verdict = login_validator.validate(Login(username_or_email="", password=""))

        assert _messages(verdict) == {
            "username_or_email": "Username or email is required",
            "password": "Password is required",
        }

    def test_logout_requires_token(self):
        verdict = logout_validator.validate(Logout(refresh_token=""))

        assert _messages(verdict) == {"refresh_token": "Refresh token is required"}

    def test_refresh_requires_token(self):
        verdict = refresh_tokens_validator.validate(RefreshTokens(refresh_token=" "))

        assert _messages(verdict) == {"refresh_token": "Refresh token is required"}


@pytest.mark.unit
class TestPermissionRequestValidators:
    def _command(self, roles, message=None):
        return CreatePermissionRequests(
            user_id=uuid7(),
            requested_by="jdoe",
            requested_roles=roles,
            request_message=message,
        )

    def test_at_least_one_role(self):
        verdict = create_permission_requests_validator.validate(self._command(()))

        assert _messages(verdict) == {
            "requested_roles": "At least one role must be selected"
        }

    def test_unknown_or_unrequestable_role(self):
        verdict = create_permission_requests_validator.validate(
            self._command(("Developer", "User"))
        )

        assert _messages(verdict) == {"requested_roles": "Invalid role"}

    def test_role_names_case_insensitive(self):
        assert create_permission_requests_validator.validate(
            self._command(("developer", "ADMIN"))
        ) == ()

    def test_message_length(self):
        verdict = create_permission_requests_validator.validate(
            self._command(("Admin",), message="x" * 501)
        )

        assert "request_message" in _messages(verdict)

    def test_bulk_requires_ids(self):
        verdict = bulk_permission_requests_validator.validate(
            BulkRejectPermissionRequests(request_ids=())
        )

        assert _messages(verdict) == {
            "request_ids": "At least one request ID is required"
        }


@pytest.mark.unit
class TestLogValidators:
    def test_batch_requires_ids(self):
        verdict = delete_logs_batch_validator.validate(DeleteLogsBatch(log_ids=()))

        assert _messages(verdict) == {"log_ids": "At least one log ID is required"}

    def test_client_log_level_and_message(self):
        verdict = create_client_log_validator.validate(
            CreateClientLog(log_level="Loud", message="")
        )

        assert _messages(verdict) == {
            "log_level": "Invalid log level",
            "message": "Message is required",
        }

    def test_client_log_message_length(self):
        verdict = create_client_log_validator.validate(
            CreateClientLog(log_level="error", message="x" * 4001)
        )

        assert list(_messages(verdict)) == ["message"]

    def test_default_filter_is_valid(self):
        assert log_filter_validator.validate(GetPagedLogs()) == ()

    def test_filter_page_bounds(self):
        verdict = log_filter_validator.validate(GetPagedLogs(page=0, page_size=101))

        assert _messages(verdict) == {
            "page": "Page must be at least 1",
            "page_size": "Page size must be between 1 and 100",
        }

    def test_filter_date_range_order(self):
        now = datetime.now(UTC)
        verdict = log_filter_validator.validate(
            GetPagedLogs(start_date=now, end_date=now - timedelta(days=1))
        )

        assert _messages(verdict) == {
            "start_date": "Start date must be before or equal to end date"
        }

    def test_filter_level_optional_but_checked(self):
        assert log_filter_validator.validate(GetPagedLogs(log_level="fatal")) == ()
        assert "log_level" in _messages(
            log_filter_validator.validate(GetPagedLogs(log_level="Loud"))
        )

    def test_filter_mixed_naive_and_aware_bounds(self):
        naive_start = datetime(2024, 1, 1)
        aware_end = datetime(2024, 1, 2, tzinfo=UTC)

        assert log_filter_validator.validate(
            GetPagedLogs(start_date=naive_start, end_date=aware_end)
        ) == ()
        assert _messages(
            log_filter_validator.validate(
                GetPagedLogs(start_date=datetime(2024, 1, 3), end_date=aware_end)
            )
        ) == {"start_date": "Start date must be before or equal to end date"}

    def test_client_batch_reports_entry_index(self):
        command = CreateClientLogBatch(
            entries=(
                CreateClientLog(log_level="Error", message="boom"),
                CreateClientLog(log_level="Error", message=""),
                CreateClientLog(log_level="Loud", message="ok"),
            )
        )

        assert _messages(validate_client_log_batch(command)) == {
            "entries[1].message": "Message is required",
            "entries[2].log_level": "Invalid log level",
        }

    def test_empty_client_batch_is_valid(self):
        assert validate_client_log_batch(CreateClientLogBatch(entries=())) == ()

    def test_cleanup_requires_aware_cutoff(self):
        assert _messages(
            log_cleanup_validator.validate(LogCleanupQuery(cutoff_date=None))
        ) == {"cutoff_date": "Cutoff date is required"}
        assert _messages(
            log_cleanup_validator.validate(
                LogCleanupQuery(cutoff_date=datetime(2024, 1, 1))
            )
        ) == {"cutoff_date": "Cutoff date must include a timezone offset"}
        assert log_cleanup_validator.validate(
            LogCleanupQuery(cutoff_date=datetime(2024, 1, 1, tzinfo=UTC))
        ) == ()
