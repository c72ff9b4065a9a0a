"""Users resource router.

Endpoints:
    POST   /api/v1/users                 - Create user (registration)
    GET    /api/v1/users/email-exists    - Check email availability
    GET    /api/v1/users/username-exists - Check username availability
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import RegisterUser
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.queries import CheckEmailExists, CheckUsernameExists
from src.application.queries.handlers.availability_handlers import (
    CheckEmailExistsHandler,
    CheckUsernameExistsHandler,
)
from src.application.validators import register_user_validator
from src.core.container import (
    get_check_email_exists_handler,
    get_check_username_exists_handler,
    get_register_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import ExistsResponse, UserCreateRequest, UserCreateResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreateResponse,
    responses={
        409: {"description": "Username or email taken", "model": ProblemDetails},
        422: {"description": "Validation failed", "model": ProblemDetails},
    },
    summary="Create user",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> UserCreateResponse | JSONResponse:
    """Register a new account holding the User role."""
    command = RegisterUser(
        username=data.username,
        email=data.email,
        password=data.password,
        full_name=data.full_name,
    )
    if verdict := register_user_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    match await handler.handle(command):
        case Success(value=user_id):
            return UserCreateResponse(id=user_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/email-exists",
    response_model=ExistsResponse,
    summary="Check whether an email is registered",
)
async def email_exists(
    email: str = Query(..., description="Email to look up (case-insensitive)"),
    exclude_user_id: UUID | None = Query(
        None, description="Ignore this user's own record (profile edits)"
    ),
    handler: CheckEmailExistsHandler = Depends(get_check_email_exists_handler),
) -> ExistsResponse:
    exists = await handler.handle(
        CheckEmailExists(email=email, exclude_user_id=exclude_user_id)
    )
    return ExistsResponse(exists=exists)


@router.get(
    "/username-exists",
    response_model=ExistsResponse,
    summary="Check whether a username is taken",
)
async def username_exists(
    username: str = Query(..., description="Username to look up (case-insensitive)"),
    exclude_user_id: UUID | None = Query(None),
    handler: CheckUsernameExistsHandler = Depends(get_check_username_exists_handler),
) -> ExistsResponse:
    exists = await handler.handle(
        CheckUsernameExists(username=username, exclude_user_id=exclude_user_id)
    )
    return ExistsResponse(exists=exists)
