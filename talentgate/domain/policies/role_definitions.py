"""Static role definitions: direct grants and inheritance per role.

The effective permission set of a role is its direct grants plus the
effective sets of every role it inherits from. Inheritance is only used
where one role is a true superset of another.

Recruiting family grants follow the bench/hotlist screens:

    ====================  ====  ======  ====  ========  =========  ========
    role                  view  create  edit  hotlists  analytics  settings
    ====================  ====  ======  ====  ========  =========  ========
    bench_sales           yes   yes     yes   v/c/e     view       -
    account_manager       yes   -       yes   v/c       view       -
    cio_cto               yes   yes     yes   view      view       v/e
    recruiter             yes   -       -     view      view       -
    hr                    yes   -       -     -         view       -
    employee              yes   -       -     -         -          -
    ====================  ====  ======  ====  ========  =========  ========

Vendor-hub family grants match the vendor hub role sheet; every vendor-hub
role inherits from ``viewer``.
"""

from dataclasses import dataclass, field

from talentgate.domain.enums import Permission, Resource, Role

P = Permission


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleDefinition:
    """Configuration of one role.

    Attributes:
        role: Role being defined.
        display_name: Label for admin screens.
        description: One-line summary of the role.
        permissions: Direct grants (without inherited ones).
        inherits: Roles whose effective grants are added to this one.
    """

    role: Role
    display_name: str
    description: str = ""
    permissions: frozenset[Permission] = field(default_factory=frozenset)
    inherits: tuple[Role, ...] = ()


VENDOR_HUB_RESOURCES: frozenset[Resource] = frozenset(
    {
        Resource.VENDOR,
        Resource.POC,
        Resource.COMMUNICATION,
        Resource.VALIDATION,
        Resource.DASHBOARD,
        Resource.AUTOMATION,
        Resource.CONSENT,
        Resource.AUDIT,
        Resource.ADMIN,
    }
)

VENDOR_HUB_PERMISSIONS: frozenset[Permission] = frozenset(
    p for p in Permission if p.resource in VENDOR_HUB_RESOURCES
)


_DEFINITIONS: tuple[RoleDefinition, ...] = (
    RoleDefinition(
        role=Role.ADMIN,
        display_name="Administrator",
        description="Full access to every module",
        permissions=frozenset(Permission),
    ),
    RoleDefinition(
        role=Role.BENCH_SALES,
        display_name="Bench Sales",
        description="Markets bench consultants and manages hotlists",
        permissions=frozenset(
            {
                P.BENCH_RESOURCES_VIEW,
                P.BENCH_RESOURCES_CREATE,
                P.BENCH_RESOURCES_EDIT,
                P.HOTLISTS_VIEW,
                P.HOTLISTS_CREATE,
                P.HOTLISTS_EDIT,
                P.ANALYTICS_VIEW,
                P.WORK_AUTHORIZATION_VIEW,
            }
        ),
    ),
    RoleDefinition(
        role=Role.ACCOUNT_MANAGER,
        display_name="Account Manager",
        description="Client-facing role scoped to managed accounts",
        permissions=frozenset(
            {
                P.BENCH_RESOURCES_VIEW,
                P.BENCH_RESOURCES_EDIT,
                P.HOTLISTS_VIEW,
                P.HOTLISTS_CREATE,
                P.ANALYTICS_VIEW,
                P.WORK_AUTHORIZATION_VIEW,
                P.POC_EDIT,
                P.COMMUNICATION_SEND,
            }
        ),
        inherits=(Role.VIEWER,),
    ),
    RoleDefinition(
        role=Role.CIO_CTO,
        display_name="CIO/CTO",
        description="Executive oversight with settings management",
        permissions=frozenset(
            {
                P.BENCH_RESOURCES_VIEW,
                P.BENCH_RESOURCES_CREATE,
                P.BENCH_RESOURCES_EDIT,
                P.HOTLISTS_VIEW,
                P.ANALYTICS_VIEW,
                P.SETTINGS_VIEW,
                P.SETTINGS_EDIT,
                P.WORK_AUTHORIZATION_VIEW,
            }
        ),
    ),
    RoleDefinition(
        role=Role.RECRUITER,
        display_name="Recruiter",
        permissions=frozenset({P.BENCH_RESOURCES_VIEW, P.HOTLISTS_VIEW, P.ANALYTICS_VIEW}),
    ),
    RoleDefinition(
        role=Role.HR,
        display_name="HR",
        permissions=frozenset({P.BENCH_RESOURCES_VIEW, P.ANALYTICS_VIEW}),
    ),
    RoleDefinition(
        role=Role.EMPLOYEE,
        display_name="Employee",
        description="Consultant viewing their own bench record",
        permissions=frozenset({P.BENCH_RESOURCES_VIEW}),
    ),
    RoleDefinition(
        role=Role.VENDOR_ADMIN,
        display_name="Vendor Administrator",
        description="Full access to all vendor hub functionality",
        permissions=VENDOR_HUB_PERMISSIONS,
        inherits=(Role.VIEWER,),
    ),
    RoleDefinition(
        role=Role.VENDOR_MANAGER,
        display_name="Vendor Manager",
        description="Manage vendors and PoCs with full operational access",
        permissions=frozenset(
            {
                P.VENDOR_CREATE,
                P.VENDOR_EXPORT,
                P.POC_EXPORT,
                P.COMMUNICATION_BULK_SEND,
                P.VALIDATION_CREATE,
                P.VALIDATION_BULK_SEND,
                P.DASHBOARD_ANALYTICS,
                P.DASHBOARD_REPORTS,
                P.AUTOMATION_VIEW,
                P.CONSENT_EXPORT,
                P.AUDIT_VIEW,
            }
        ),
        inherits=(Role.VENDOR_COORDINATOR,),
    ),
    RoleDefinition(
        role=Role.VENDOR_COORDINATOR,
        display_name="Vendor Coordinator",
        description="Day-to-day vendor operations and PoC management",
        permissions=frozenset(
            {
                P.VENDOR_EDIT,
                P.POC_CREATE,
                P.POC_EDIT,
                P.POC_VALIDATE,
                P.COMMUNICATION_SEND,
                P.VALIDATION_VIEW,
                P.VALIDATION_SEND,
                P.CONSENT_VIEW,
                P.CONSENT_COLLECT,
            }
        ),
        inherits=(Role.VIEWER,),
    ),
    RoleDefinition(
        role=Role.POC_MANAGER,
        display_name="PoC Manager",
        description="Specialized in point of contact management and validation",
        permissions=frozenset(
            {
                P.POC_CREATE,
                P.POC_EDIT,
                P.POC_VALIDATE,
                P.POC_EXPORT,
                P.COMMUNICATION_SEND,
                P.VALIDATION_VIEW,
                P.VALIDATION_CREATE,
                P.VALIDATION_SEND,
                P.VALIDATION_BULK_SEND,
                P.CONSENT_VIEW,
                P.CONSENT_COLLECT,
            }
        ),
        inherits=(Role.VIEWER,),
    ),
    RoleDefinition(
        role=Role.COMPLIANCE_OFFICER,
        display_name="Compliance Officer",
        description="Focus on compliance, consent, and audit functions",
        permissions=frozenset(
            {
                P.VALIDATION_VIEW,
                P.DASHBOARD_REPORTS,
                P.CONSENT_VIEW,
                P.CONSENT_COLLECT,
                P.CONSENT_REVOKE,
                P.CONSENT_EXPORT,
                P.AUDIT_VIEW,
                P.AUDIT_EXPORT,
            }
        ),
        inherits=(Role.VIEWER,),
    ),
    RoleDefinition(
        role=Role.HR_MANAGER,
        display_name="HR Manager",
        description="HR-focused access for vendor relationship management",
        permissions=frozenset(
            {
                P.POC_EDIT,
                P.POC_VALIDATE,
                P.COMMUNICATION_SEND,
                P.VALIDATION_VIEW,
                P.VALIDATION_SEND,
                P.CONSENT_VIEW,
            }
        ),
        inherits=(Role.VIEWER,),
    ),
    RoleDefinition(
        role=Role.VIEWER,
        display_name="Viewer",
        description="Read-only access to vendor information",
        permissions=frozenset(
            {P.VENDOR_VIEW, P.POC_VIEW, P.COMMUNICATION_VIEW, P.DASHBOARD_VIEW}
        ),
    ),
)

ROLE_DEFINITIONS: dict[Role, RoleDefinition] = {d.role: d for d in _DEFINITIONS}
