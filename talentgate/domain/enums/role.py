"""Actor roles for RBAC authorization.

The role set is closed: every role the application knows is a member of
this enum, and the role-permission matrix must define all of them.

Role Families:
    Recruiting / bench:
        admin, bench_sales, account_manager, cio_cto, recruiter, hr, employee

    Vendor hub:
        vendor_admin, vendor_manager, vendor_coordinator, poc_manager,
        compliance_officer, hr_manager, account_manager, viewer

    account_manager belongs to both families; its grants are the union.

Usage:
    from talentgate.domain.enums import Role

    if Role.is_valid(raw_role):
        role = Role(raw_role)
"""

from enum import Enum


class Role(str, Enum):
    """Closed enumeration of actor roles.

    String Enum:
        Inherits from str for easy serialization and Casbin compatibility.
        Values are the snake_case slugs stored by the identity provider.
    """

    # Recruiting / bench family
    ADMIN = "admin"
    """Platform administrator; holds every permission."""

    BENCH_SALES = "bench_sales"
    """Markets bench consultants; edits only own or shared-account records."""

    ACCOUNT_MANAGER = "account_manager"
    """Client-facing; narrowed to the accounts they manage."""

    CIO_CTO = "cio_cto"
    """Executive view plus settings management."""

    RECRUITER = "recruiter"
    HR = "hr"
    EMPLOYEE = "employee"
    """Consultant; sees only their own bench record."""

    # Vendor hub family
    VENDOR_ADMIN = "vendor_admin"
    VENDOR_MANAGER = "vendor_manager"
    VENDOR_COORDINATOR = "vendor_coordinator"
    POC_MANAGER = "poc_manager"
    COMPLIANCE_OFFICER = "compliance_officer"
    HR_MANAGER = "hr_manager"
    VIEWER = "viewer"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: Role slugs in declaration order.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Check if a value is a valid role (member or slug).

        Args:
            value: Candidate role.

        Returns:
            bool: True if value names a role.
        """
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value in cls.values()
