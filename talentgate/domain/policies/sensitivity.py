"""Permission sensitivity classes.

SENSITIVE_PERMISSIONS are audited on every grant and denial.
APPROVAL_REQUIRED permissions are high-risk and need a second approver.
"""

from talentgate.domain.enums import Action, Permission, Resource

SENSITIVE_PERMISSIONS: frozenset[Permission] = frozenset(
    p
    for p in Permission
    if p.action == Action.DELETE
    or p.resource == Resource.ADMIN
    or p
    in {
        Permission.CONSENT_REVOKE,
        Permission.AUDIT_EXPORT,
        Permission.AUTOMATION_ENABLE_DISABLE,
    }
)

APPROVAL_REQUIRED: frozenset[Permission] = frozenset(
    {
        Permission.VENDOR_DELETE,
        Permission.POC_DELETE,
        Permission.AUTOMATION_ENABLE_DISABLE,
        Permission.ADMIN_SETTINGS,
        Permission.ADMIN_USER_MANAGEMENT,
        Permission.ADMIN_SYSTEM_CONFIG,
    }
)


def is_sensitive(permission: Permission) -> bool:
    return permission in SENSITIVE_PERMISSIONS
