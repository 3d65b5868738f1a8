"""Database models."""

from talentgate.infrastructure.persistence.models.audit_event import AuditEventModel
from talentgate.infrastructure.persistence.models.role_permission import (
    RolePermissionModel,
)

__all__ = ["AuditEventModel", "RolePermissionModel"]
