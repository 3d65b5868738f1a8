"""Authorization policies: static role grants, narrowing rules, menus."""

from talentgate.domain.policies.menu_access import MENU_ACCESS, VENDOR_HUB_ROUTES, Route
from talentgate.domain.policies.narrowing_rules import (
    NARROWING_RULES,
    OWNERSHIP_FIELDS,
    NarrowingRule,
    OwnershipFields,
    lookup_in,
    ownership_fields_for,
    rules_for,
    vendor_restrictions_allow,
)
from talentgate.domain.policies.role_definitions import (
    ROLE_DEFINITIONS,
    VENDOR_HUB_PERMISSIONS,
    RoleDefinition,
)
from talentgate.domain.policies.sensitivity import (
    APPROVAL_REQUIRED,
    SENSITIVE_PERMISSIONS,
    is_sensitive,
)

__all__ = [
    "APPROVAL_REQUIRED",
    "MENU_ACCESS",
    "NARROWING_RULES",
    "OWNERSHIP_FIELDS",
    "ROLE_DEFINITIONS",
    "SENSITIVE_PERMISSIONS",
    "VENDOR_HUB_PERMISSIONS",
    "VENDOR_HUB_ROUTES",
    "NarrowingRule",
    "OwnershipFields",
    "RoleDefinition",
    "Route",
    "is_sensitive",
    "lookup_in",
    "ownership_fields_for",
    "rules_for",
    "vendor_restrictions_allow",
]
