"""Domain enums for authorization and audit.

Available Enums:
    - Role: Closed set of actor roles
    - Resource / Action / Permission: ``resource:action`` vocabulary
    - AuditEventType / SecurityLevel: Audit trail classification
    - MenuItem: Permission-gated navigation entries
"""

from talentgate.domain.enums.audit_event_type import (
    AuditEventType,
    SecurityLevel,
    security_level_for,
)
from talentgate.domain.enums.menu_item import MenuItem
from talentgate.domain.enums.permission import (
    PERMISSION_DESCRIPTIONS,
    Action,
    Permission,
    Resource,
)
from talentgate.domain.enums.role import Role

__all__ = [
    "Action",
    "AuditEventType",
    "MenuItem",
    "PERMISSION_DESCRIPTIONS",
    "Permission",
    "Resource",
    "Role",
    "SecurityLevel",
    "security_level_for",
]
