"""Navigation menu items whose visibility depends on permissions.

Menu visibility is advisory. The protected action behind each item checks
its permission again.
"""

from enum import Enum


class MenuItem(str, Enum):
    """Menu entries of the recruiting and vendor-hub navigation."""

    DASHBOARD = "dashboard"
    BENCH_RESOURCES = "bench_resources"
    HOTLIST_MANAGEMENT = "hotlist_management"
    ANALYTICS = "analytics"
    SETTINGS = "settings"
    VENDORS = "vendors"
    POCS = "pocs"
    VALIDATION_REMINDERS = "validation_reminders"
    COMMUNICATION_LOGS = "communication_logs"
    REPORTS = "reports"
    AUDIT_LOGS = "audit_logs"
    ROLE_MANAGEMENT = "role_management"

    @classmethod
    def parse(cls, value: object) -> "MenuItem | None":
        """Return the menu item for a value, or None when unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
