"""Role management endpoints.

Endpoints:
    GET /api/v1/roles/{role}/grants    Effective CRUD grants of a role
    PUT /api/v1/roles/{role}/grants    Replace the stored rows of a role

Both require admin:user_management. Saved rows are merged over the
static definitions and take effect immediately.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from talentgate.application.services import (
    RoleManagementService,
    RolePermissionMatrixStore,
)
from talentgate.core.container import (
    get_matrix_store,
    get_role_grant_repository,
    get_role_management_service,
)
from talentgate.core.enums import ErrorCode
from talentgate.core.result import Failure, Success
from talentgate.domain.entities import Actor
from talentgate.domain.enums import Permission, Role
from talentgate.domain.protocols import RoleGrantRepositoryProtocol
from talentgate.presentation.dependencies import require_actor, require_permission
from talentgate.schemas.role_schemas import (
    RoleGrantSchema,
    RoleGrantsResponse,
    RoleGrantsUpdateRequest,
)

roles_router = APIRouter(prefix="/api/v1/roles", tags=["Roles"])

_STATUS_BY_CODE = {
    ErrorCode.NO_ACTOR: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INVALID_ROLE: status.HTTP_404_NOT_FOUND,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PERMISSION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ROLE_GRANTS_SAVE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@roles_router.get("/{role}/grants", response_model=RoleGrantsResponse)
async def get_role_grants(
    role: str,
    _: Annotated[None, Depends(require_permission(Permission.ADMIN_USER_MANAGEMENT))],
    service: Annotated[RoleManagementService, Depends(get_role_management_service)],
    store: Annotated[RolePermissionMatrixStore, Depends(get_matrix_store)],
) -> RoleGrantsResponse:
    """CRUD flags per category as currently enforced."""
    if not Role.is_valid(role):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown role: {role}"
        )
    return RoleGrantsResponse(
        role=Role(role).value,
        version=store.version,
        grants=[RoleGrantSchema.from_entity(g) for g in service.current_grants(role)],
    )


@roles_router.put("/{role}/grants", response_model=RoleGrantsResponse)
async def update_role_grants(
    role: str,
    data: RoleGrantsUpdateRequest,
    actor: Annotated[Actor, Depends(require_actor)],
    service: Annotated[RoleManagementService, Depends(get_role_management_service)],
    repository: Annotated[
        RoleGrantRepositoryProtocol, Depends(get_role_grant_repository)
    ],
) -> RoleGrantsResponse:
    """Replace the stored rows of a role and reload the matrix."""
    grants = [g.to_entity(role) for g in data.grants]
    result = await service.update_role_grants(actor, role, grants, repository)

    match result:
        case Success(value=matrix):
            return RoleGrantsResponse(
                role=role,
                version=matrix.version,
                grants=[
                    RoleGrantSchema.from_entity(g) for g in service.current_grants(role)
                ],
            )
        case Failure(error=error):
            raise HTTPException(
                status_code=_STATUS_BY_CODE.get(
                    error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
                ),
                detail=error.message,
            )
