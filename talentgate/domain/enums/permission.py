"""Permission components for RBAC authorization.

Permissions are expressed as ``resource:action`` pairs (e.g. ``vendor:edit``).
The vocabulary is closed: ``Permission`` enumerates every valid pair, and
anything outside it is treated as "not granted".

Usage:
    from talentgate.domain.enums import Permission, Resource, Action

    perm = Permission.from_parts("bench_resources", "edit")
    if perm is None:
        ...  # unknown pair, deny

    perm.resource  # Resource.BENCH_RESOURCES
    perm.action    # Action.EDIT
"""

from enum import Enum


class Resource(str, Enum):
    """Resources that can be protected by authorization.

    Resource Categories:
        Recruiting:
            - BENCH_RESOURCES: Consultants on the bench
            - HOTLISTS: Marketing hotlists of bench consultants
            - ANALYTICS: Hotlist/bench performance analytics
            - SETTINGS: Auto-enrollment and module settings
            - WORK_AUTHORIZATION: Visa/work authorization details

        Vendor hub:
            - VENDOR, POC, COMMUNICATION, VALIDATION, DASHBOARD,
              AUTOMATION, CONSENT, AUDIT, ADMIN
    """

    BENCH_RESOURCES = "bench_resources"
    HOTLISTS = "hotlists"
    ANALYTICS = "analytics"
    SETTINGS = "settings"
    WORK_AUTHORIZATION = "work_authorization"

    VENDOR = "vendor"
    POC = "poc"
    COMMUNICATION = "communication"
    VALIDATION = "validation"
    DASHBOARD = "dashboard"
    AUTOMATION = "automation"
    CONSENT = "consent"
    AUDIT = "audit"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        return [resource.value for resource in cls]

    @property
    def is_vendor_scoped(self) -> bool:
        """Whether records of this type belong to a specific vendor.

        Vendor-scoped resources are subject to actor vendor restrictions.
        """
        return self in _VENDOR_SCOPED


_VENDOR_SCOPED = frozenset(
    {
        Resource.VENDOR,
        Resource.POC,
        Resource.COMMUNICATION,
        Resource.VALIDATION,
        Resource.CONSENT,
    }
)


class Action(str, Enum):
    """Actions that can be performed on resources.

    The first four mirror the view/add/edit/delete flags of the role
    management screens; the rest are vendor-hub specific verbs.
    """

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    EXPORT = "export"
    IMPORT = "import"
    VALIDATE = "validate"
    SEND = "send"
    BULK_SEND = "bulk_send"
    TEMPLATES = "templates"
    CONFIGURE = "configure"
    ANALYTICS = "analytics"
    REPORTS = "reports"
    ENABLE_DISABLE = "enable_disable"
    COLLECT = "collect"
    REVOKE = "revoke"
    SETTINGS = "settings"
    USER_MANAGEMENT = "user_management"
    SYSTEM_CONFIG = "system_config"

    @classmethod
    def values(cls) -> list[str]:
        return [action.value for action in cls]


class Permission(str, Enum):
    """Closed vocabulary of ``resource:action`` capabilities."""

    # Recruiting / bench
    BENCH_RESOURCES_VIEW = "bench_resources:view"
    BENCH_RESOURCES_CREATE = "bench_resources:create"
    BENCH_RESOURCES_EDIT = "bench_resources:edit"
    BENCH_RESOURCES_DELETE = "bench_resources:delete"
    HOTLISTS_VIEW = "hotlists:view"
    HOTLISTS_CREATE = "hotlists:create"
    HOTLISTS_EDIT = "hotlists:edit"
    HOTLISTS_DELETE = "hotlists:delete"
    ANALYTICS_VIEW = "analytics:view"
    ANALYTICS_EXPORT = "analytics:export"
    SETTINGS_VIEW = "settings:view"
    SETTINGS_EDIT = "settings:edit"
    WORK_AUTHORIZATION_VIEW = "work_authorization:view"

    # Vendor hub: vendors
    VENDOR_VIEW = "vendor:view"
    VENDOR_CREATE = "vendor:create"
    VENDOR_EDIT = "vendor:edit"
    VENDOR_DELETE = "vendor:delete"
    VENDOR_EXPORT = "vendor:export"
    VENDOR_IMPORT = "vendor:import"

    # Vendor hub: points of contact
    POC_VIEW = "poc:view"
    POC_CREATE = "poc:create"
    POC_EDIT = "poc:edit"
    POC_DELETE = "poc:delete"
    POC_VALIDATE = "poc:validate"
    POC_EXPORT = "poc:export"

    # Vendor hub: communication
    COMMUNICATION_VIEW = "communication:view"
    COMMUNICATION_SEND = "communication:send"
    COMMUNICATION_BULK_SEND = "communication:bulk_send"
    COMMUNICATION_TEMPLATES = "communication:templates"

    # Vendor hub: validation reminders
    VALIDATION_VIEW = "validation:view"
    VALIDATION_CREATE = "validation:create"
    VALIDATION_SEND = "validation:send"
    VALIDATION_BULK_SEND = "validation:bulk_send"
    VALIDATION_CONFIGURE = "validation:configure"

    # Vendor hub: dashboard
    DASHBOARD_VIEW = "dashboard:view"
    DASHBOARD_ANALYTICS = "dashboard:analytics"
    DASHBOARD_REPORTS = "dashboard:reports"

    # Vendor hub: automation
    AUTOMATION_VIEW = "automation:view"
    AUTOMATION_CONFIGURE = "automation:configure"
    AUTOMATION_ENABLE_DISABLE = "automation:enable_disable"

    # Vendor hub: consent
    CONSENT_VIEW = "consent:view"
    CONSENT_COLLECT = "consent:collect"
    CONSENT_REVOKE = "consent:revoke"
    CONSENT_EXPORT = "consent:export"

    # Vendor hub: audit
    AUDIT_VIEW = "audit:view"
    AUDIT_EXPORT = "audit:export"

    # Administration
    ADMIN_SETTINGS = "admin:settings"
    ADMIN_USER_MANAGEMENT = "admin:user_management"
    ADMIN_SYSTEM_CONFIG = "admin:system_config"

    @property
    def resource(self) -> Resource:
        return Resource(self.value.split(":", 1)[0])

    @property
    def action(self) -> Action:
        return Action(self.value.split(":", 1)[1])

    @property
    def description(self) -> str:
        """Human-readable description for admin screens."""
        return PERMISSION_DESCRIPTIONS[self]

    @classmethod
    def values(cls) -> list[str]:
        return [permission.value for permission in cls]

    @classmethod
    def parse(cls, value: object) -> "Permission | None":
        """Parse a ``resource:action`` string.

        Args:
            value: Permission member or string.

        Returns:
            Permission, or None when the value is outside the vocabulary.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_parts(cls, resource: object, action: object) -> "Permission | None":
        """Build a permission from separate resource and action values.

        Args:
            resource: Resource member or string.
            action: Action member or string.

        Returns:
            Permission, or None when the pair is outside the vocabulary.
        """
        resource_value = resource.value if isinstance(resource, Enum) else resource
        action_value = action.value if isinstance(action, Enum) else action
        if not isinstance(resource_value, str) or not isinstance(action_value, str):
            return None
        return cls.parse(f"{resource_value}:{action_value}")

    @classmethod
    def for_resource(cls, resource: Resource) -> list["Permission"]:
        """All permissions defined on a resource, in declaration order."""
        return [permission for permission in cls if permission.resource == resource]


PERMISSION_DESCRIPTIONS: dict[Permission, str] = {
    Permission.BENCH_RESOURCES_VIEW: "View bench resources",
    Permission.BENCH_RESOURCES_CREATE: "Add consultants to the bench",
    Permission.BENCH_RESOURCES_EDIT: "Edit bench resources",
    Permission.BENCH_RESOURCES_DELETE: "Remove bench resources",
    Permission.HOTLISTS_VIEW: "View hotlists",
    Permission.HOTLISTS_CREATE: "Create hotlists",
    Permission.HOTLISTS_EDIT: "Edit hotlists",
    Permission.HOTLISTS_DELETE: "Delete hotlists",
    Permission.ANALYTICS_VIEW: "View performance analytics",
    Permission.ANALYTICS_EXPORT: "Export analytics",
    Permission.SETTINGS_VIEW: "View module settings",
    Permission.SETTINGS_EDIT: "Change module settings",
    Permission.WORK_AUTHORIZATION_VIEW: "View work authorization details",
    Permission.VENDOR_VIEW: "View vendor information",
    Permission.VENDOR_CREATE: "Create new vendors",
    Permission.VENDOR_EDIT: "Edit vendor information",
    Permission.VENDOR_DELETE: "Delete vendors",
    Permission.VENDOR_EXPORT: "Export vendor data",
    Permission.VENDOR_IMPORT: "Import vendor data",
    Permission.POC_VIEW: "View point of contact information",
    Permission.POC_CREATE: "Create new points of contact",
    Permission.POC_EDIT: "Edit point of contact information",
    Permission.POC_DELETE: "Delete points of contact",
    Permission.POC_VALIDATE: "Validate point of contact information",
    Permission.POC_EXPORT: "Export point of contact data",
    Permission.COMMUNICATION_VIEW: "View communication logs",
    Permission.COMMUNICATION_SEND: "Send communications",
    Permission.COMMUNICATION_BULK_SEND: "Send bulk communications",
    Permission.COMMUNICATION_TEMPLATES: "Manage communication templates",
    Permission.VALIDATION_VIEW: "View validation reminders",
    Permission.VALIDATION_CREATE: "Create validation reminders",
    Permission.VALIDATION_SEND: "Send validation reminders",
    Permission.VALIDATION_BULK_SEND: "Send bulk validation reminders",
    Permission.VALIDATION_CONFIGURE: "Configure validation settings",
    Permission.DASHBOARD_VIEW: "View dashboard",
    Permission.DASHBOARD_ANALYTICS: "View analytics",
    Permission.DASHBOARD_REPORTS: "Generate reports",
    Permission.AUTOMATION_VIEW: "View automation settings",
    Permission.AUTOMATION_CONFIGURE: "Configure automation",
    Permission.AUTOMATION_ENABLE_DISABLE: "Enable/disable automation",
    Permission.CONSENT_VIEW: "View consent records",
    Permission.CONSENT_COLLECT: "Collect consent",
    Permission.CONSENT_REVOKE: "Revoke consent",
    Permission.CONSENT_EXPORT: "Export consent records",
    Permission.AUDIT_VIEW: "View audit logs",
    Permission.AUDIT_EXPORT: "Export audit logs",
    Permission.ADMIN_SETTINGS: "Manage system settings",
    Permission.ADMIN_USER_MANAGEMENT: "Manage users",
    Permission.ADMIN_SYSTEM_CONFIG: "Configure system",
}
