"""Permission and audit response schemas.

Pydantic schemas for the permission and audit API endpoints, with
entity-to-schema conversion methods.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from talentgate.domain.entities import AuditEvent
from talentgate.domain.policies import Route


# =============================================================================
# Response Schemas
# =============================================================================


class RouteResponse(BaseModel):
    path: str = Field(..., description="Frontend route path", examples=["/vendors"])
    label: str = Field(..., description="Navigation label")
    permission: str = Field(..., description="Permission guarding the route")

    @classmethod
    def from_route(cls, route: Route) -> "RouteResponse":
        return cls(path=route.path, label=route.label, permission=route.permission.value)


class ActorPermissionsResponse(BaseModel):
    """What the current actor may see and do.

    Attributes:
        actor_id: Actor identifier.
        role: Role slug.
        role_display_name: Human-readable role label.
        permissions: Effective permissions of the role, sorted.
        menu_items: Accessible menu items.
        routes: Accessible vendor-hub routes.
    """

    actor_id: str = Field(..., description="Actor identifier")
    role: str = Field(..., description="Role slug", examples=["vendor_manager"])
    role_display_name: str = Field(..., description="Role label")
    permissions: list[str] = Field(default_factory=list)
    menu_items: list[str] = Field(default_factory=list)
    routes: list[RouteResponse] = Field(default_factory=list)


class AuditEventResponse(BaseModel):
    """Single audit event."""

    id: UUID
    event_type: str
    actor_id: str | None
    actor_roles: list[str]
    timestamp: datetime
    resource_type: str | None
    resource_id: str | None
    action: str
    details: dict[str, Any]
    success: bool
    security_level: str
    error_message: str | None

    @classmethod
    def from_entity(cls, event: AuditEvent) -> "AuditEventResponse":
        return cls(
            id=event.id,
            event_type=event.event_type.value,
            actor_id=event.actor_id,
            actor_roles=list(event.actor_roles),
            timestamp=event.timestamp,
            resource_type=event.resource_type,
            resource_id=event.resource_id,
            action=event.action,
            details=event.details,
            success=event.success,
            security_level=event.security_level.value,
            error_message=event.error_message,
        )


class AuditEventListResponse(BaseModel):
    events: list[AuditEventResponse] = Field(default_factory=list)
    total_count: int = Field(..., description="Number of events returned")

