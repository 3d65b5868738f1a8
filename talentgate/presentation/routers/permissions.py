"""Permission and audit endpoints.

Endpoints:
    GET /api/v1/permissions/me    What the current actor may access
    GET /api/v1/audit-events      Audit trail (requires audit:view)
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from talentgate.application.services import PermissionService
from talentgate.core.container import get_permission_service
from talentgate.core.enums import ErrorCode
from talentgate.core.result import Failure, Success
from talentgate.domain.entities import Actor, AuditEventFilters
from talentgate.domain.enums import AuditEventType
from talentgate.presentation.dependencies import require_actor
from talentgate.schemas.permission_schemas import (
    ActorPermissionsResponse,
    AuditEventListResponse,
    AuditEventResponse,
    RouteResponse,
)

permissions_router = APIRouter(prefix="/api/v1", tags=["Permissions"])

_STATUS_BY_CODE = {
    ErrorCode.NO_ACTOR: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUDIT_QUERY_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@permissions_router.get("/permissions/me", response_model=ActorPermissionsResponse)
async def get_my_permissions(
    actor: Annotated[Actor, Depends(require_actor)],
    service: Annotated[PermissionService, Depends(get_permission_service)],
) -> ActorPermissionsResponse:
    """Menus, routes and permissions available to the current actor."""
    return ActorPermissionsResponse(
        actor_id=actor.id,
        role=actor.role.value,
        role_display_name=service.get_role_display_name(actor.role),
        permissions=sorted(p.value for p in service.permissions_for(actor)),
        menu_items=[item.value for item in service.accessible_menu_items(actor)],
        routes=[RouteResponse.from_route(r) for r in service.available_routes(actor)],
    )


@permissions_router.get("/audit-events", response_model=AuditEventListResponse)
async def list_audit_events(
    actor: Annotated[Actor, Depends(require_actor)],
    service: Annotated[PermissionService, Depends(get_permission_service)],
    event_type: AuditEventType | None = None,
    user_id: str | None = None,
    resource_type: str | None = None,
    resource_id: str | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
) -> AuditEventListResponse:
    """Query the audit trail, newest first."""
    filters = AuditEventFilters(
        event_type=event_type,
        user_id=user_id,
        resource_type=resource_type,
        resource_id=resource_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
    result = await service.get_audit_events(actor, filters)

    match result:
        case Success(value=events):
            return AuditEventListResponse(
                events=[AuditEventResponse.from_entity(e) for e in events],
                total_count=len(events),
            )
        case Failure(error=error):
            raise HTTPException(
                status_code=_STATUS_BY_CODE.get(
                    error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
                ),
                detail=error.message,
            )
