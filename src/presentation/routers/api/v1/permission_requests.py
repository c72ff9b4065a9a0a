"""Permission requests resource router.

Users ask for additional roles; admins approve (grant role, remove request)
or reject (remove request).

Endpoints:
    GET    /api/v1/permission-requests                 - List pending (admin)
    POST   /api/v1/permission-requests                 - Request roles
    GET    /api/v1/permission-requests/available-roles - Roles the caller may request
    POST   /api/v1/permission-requests/{id}/approval   - Approve (admin)
    DELETE /api/v1/permission-requests/{id}            - Reject (admin)
    POST   /api/v1/permission-requests/bulk-approvals  - Approve many (admin)
    POST   /api/v1/permission-requests/bulk-rejections - Reject many (admin)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import (
    ApprovePermissionRequest,
    BulkApprovePermissionRequests,
    BulkRejectPermissionRequests,
    CreatePermissionRequests,
    RejectPermissionRequest,
)
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
from src.application.commands.handlers.reject_permission_request_handler import (
    RejectPermissionRequestHandler,
)
from src.application.queries import GetAvailableRoles, ListPermissionRequests
from src.application.queries.handlers.permission_request_query_handlers import (
    GetAvailableRolesHandler,
    ListPermissionRequestsHandler,
)
from src.application.validators import (
    bulk_permission_requests_validator,
    create_permission_requests_validator,
)
from src.core.container import (
    get_approve_permission_request_handler,
    get_available_roles_handler,
    get_bulk_approve_permission_requests_handler,
    get_bulk_reject_permission_requests_handler,
    get_create_permission_requests_handler,
    get_list_permission_requests_handler,
    get_reject_permission_request_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
    require_admin,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import (
    AvailableRolesResponse,
    BulkOperationResponse,
    PermissionRequestBulkRequest,
    PermissionRequestCreateRequest,
    PermissionRequestCreateResponse,
    PermissionRequestResponse,
)

router = APIRouter(prefix="/permission-requests", tags=["Permission Requests"])

_NOT_FOUND = {404: {"description": "Request not found", "model": ProblemDetails}}


@router.get(
    "",
    response_model=list[PermissionRequestResponse],
    summary="List pending permission requests",
)
async def list_permission_requests(
    _: Annotated[CurrentUser, Depends(require_admin)],
    handler: ListPermissionRequestsHandler = Depends(
        get_list_permission_requests_handler
    ),
) -> list[PermissionRequestResponse]:
    """All pending requests, newest first."""
    requests = await handler.handle(ListPermissionRequests())
    return [PermissionRequestResponse.model_validate(r) for r in requests]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PermissionRequestCreateResponse,
    responses={
        404: {"description": "User not found", "model": ProblemDetails},
        422: {"description": "Validation failed", "model": ProblemDetails},
    },
    summary="Request additional roles",
)
async def create_permission_requests(
    request: Request,
    data: PermissionRequestCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: CreatePermissionRequestsHandler = Depends(
        get_create_permission_requests_handler
    ),
) -> PermissionRequestCreateResponse | JSONResponse:
    command = CreatePermissionRequests(
        user_id=current_user.user_id,
        requested_by=current_user.username,
        requested_roles=tuple(data.requested_roles),
        request_message=data.request_message,
    )
    if verdict := create_permission_requests_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    match await handler.handle(command):
        case Success(value=created):
            return PermissionRequestCreateResponse(created_count=created)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/available-roles",
    response_model=AvailableRolesResponse,
    summary="Roles the caller may still request",
)
async def available_roles(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: GetAvailableRolesHandler = Depends(get_available_roles_handler),
) -> AvailableRolesResponse:
    roles = await handler.handle(GetAvailableRoles(user_id=current_user.user_id))
    return AvailableRolesResponse(roles=roles)


@router.post(
    "/bulk-approvals",
    response_model=BulkOperationResponse,
    responses={422: {"description": "Validation failed", "model": ProblemDetails}},
    summary="Approve several requests",
)
async def bulk_approve(
    request: Request,
    data: PermissionRequestBulkRequest,
    _: Annotated[CurrentUser, Depends(require_admin)],
    handler: BulkApprovePermissionRequestsHandler = Depends(
        get_bulk_approve_permission_requests_handler
    ),
) -> BulkOperationResponse | JSONResponse:
    """Unknown IDs are skipped; the count covers approved requests only."""
    command = BulkApprovePermissionRequests(request_ids=tuple(data.request_ids))
    if verdict := bulk_permission_requests_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)
    return BulkOperationResponse(processed_count=await handler.handle(command))


@router.post(
    "/bulk-rejections",
    response_model=BulkOperationResponse,
    responses={422: {"description": "Validation failed", "model": ProblemDetails}},
    summary="Reject several requests",
)
async def bulk_reject(
    request: Request,
    data: PermissionRequestBulkRequest,
    _: Annotated[CurrentUser, Depends(require_admin)],
    handler: BulkRejectPermissionRequestsHandler = Depends(
        get_bulk_reject_permission_requests_handler
    ),
) -> BulkOperationResponse | JSONResponse:
    command = BulkRejectPermissionRequests(request_ids=tuple(data.request_ids))
    if verdict := bulk_permission_requests_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)
    return BulkOperationResponse(processed_count=await handler.handle(command))


@router.post(
    "/{request_id}/approval",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Approve a request",
)
async def approve_permission_request(
    request: Request,
    _: Annotated[CurrentUser, Depends(require_admin)],
    request_id: UUID = Path(..., description="Permission request ID"),
    handler: ApprovePermissionRequestHandler = Depends(
        get_approve_permission_request_handler
    ),
) -> Response:
    """Grant the requested role and remove the request."""
    match await handler.handle(ApprovePermissionRequest(request_id=request_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.delete(
    "/{request_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Reject a request",
)
async def reject_permission_request(
    request: Request,
    _: Annotated[CurrentUser, Depends(require_admin)],
    request_id: UUID = Path(..., description="Permission request ID"),
    handler: RejectPermissionRequestHandler = Depends(
        get_reject_permission_request_handler
    ),
) -> Response:
    match await handler.handle(RejectPermissionRequest(request_id=request_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
