"""Navigation access table.

Each menu item is visible when the actor holds any one of its permissions.
The vendor-hub routes list the path, label and the single permission that
guards each page.
"""

from dataclasses import dataclass

from talentgate.domain.enums import MenuItem, Permission

MENU_ACCESS: dict[MenuItem, frozenset[Permission]] = {
    MenuItem.DASHBOARD: frozenset({Permission.DASHBOARD_VIEW}),
    MenuItem.BENCH_RESOURCES: frozenset({Permission.BENCH_RESOURCES_VIEW}),
    MenuItem.HOTLIST_MANAGEMENT: frozenset({Permission.HOTLISTS_VIEW}),
    MenuItem.ANALYTICS: frozenset({Permission.ANALYTICS_VIEW}),
    MenuItem.SETTINGS: frozenset({Permission.ADMIN_SETTINGS, Permission.SETTINGS_EDIT}),
    MenuItem.VENDORS: frozenset({Permission.VENDOR_VIEW}),
    MenuItem.POCS: frozenset({Permission.POC_VIEW}),
    MenuItem.VALIDATION_REMINDERS: frozenset({Permission.VALIDATION_VIEW}),
    MenuItem.COMMUNICATION_LOGS: frozenset({Permission.COMMUNICATION_VIEW}),
    MenuItem.REPORTS: frozenset({Permission.DASHBOARD_REPORTS}),
    MenuItem.AUDIT_LOGS: frozenset({Permission.AUDIT_VIEW}),
    MenuItem.ROLE_MANAGEMENT: frozenset({Permission.ADMIN_USER_MANAGEMENT}),
}


@dataclass(frozen=True, slots=True)
class Route:
    """A vendor-hub page and the permission guarding it."""

    path: str
    label: str
    permission: Permission


VENDOR_HUB_ROUTES: tuple[Route, ...] = (
    Route("/vendor-hub/dashboard", "Dashboard", Permission.DASHBOARD_VIEW),
    Route("/vendor-hub/vendors", "Vendor Registry", Permission.VENDOR_VIEW),
    Route("/vendor-hub/pocs", "PoC Management", Permission.POC_VIEW),
    Route(
        "/vendor-hub/validation-reminders",
        "Validation Reminders",
        Permission.VALIDATION_VIEW,
    ),
    Route(
        "/vendor-hub/communication-logs",
        "Communication Logs",
        Permission.COMMUNICATION_VIEW,
    ),
    Route("/vendor-hub/reports", "Reports & Analytics", Permission.DASHBOARD_REPORTS),
    Route("/vendor-hub/audit-logs", "Audit Logs", Permission.AUDIT_VIEW),
    Route("/vendor-hub/settings", "Settings", Permission.ADMIN_SETTINGS),
)
