"""Domain entities."""

from talentgate.domain.entities.actor import Actor, ActorRestrictions
from talentgate.domain.entities.audit_event import AuditEvent, AuditEventFilters
from talentgate.domain.entities.decision import Decision
from talentgate.domain.entities.permission_context import (
    CONTEXT_ALIASES,
    PermissionContext,
    aliases_for,
)
from talentgate.domain.entities.role_grant import RoleGrant

__all__ = [
    "CONTEXT_ALIASES",
    "Actor",
    "ActorRestrictions",
    "AuditEvent",
    "AuditEventFilters",
    "Decision",
    "PermissionContext",
    "RoleGrant",
    "aliases_for",
]
