"""Resource context used to narrow a role grant.

Context never widens access. Every field is optional; a narrowing rule
that needs a field the caller left out denies.

Callers may pass plain mappings using either snake_case field names or the
camelCase keys the frontend sends (``ownerId``, ``employeeId``,
``createdBy``, ...). ``userId`` is read as the record owner. Keys that are
neither stay available in ``extra``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from talentgate.domain.enums import Resource

CONTEXT_ALIASES: dict[str, str] = {
    "resourceType": "resource_type",
    "resourceId": "resource_id",
    "ownerId": "owner_id",
    "userId": "owner_id",
    "createdBy": "created_by",
    "employeeId": "employee_id",
    "accountId": "account_id",
    "vendorId": "vendor_id",
    "vendorType": "vendor_type",
    "pocRole": "poc_role",
}

_ALIASES_BY_FIELD: dict[str, tuple[str, ...]] = {}
for _alias, _name in CONTEXT_ALIASES.items():
    _ALIASES_BY_FIELD[_name] = (*_ALIASES_BY_FIELD.get(_name, ()), _alias)


def aliases_for(name: str) -> tuple[str, ...]:
    """camelCase keys accepted for a context field."""
    return _ALIASES_BY_FIELD.get(name, ())


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionContext:
    """Facts about the record an action targets.

    Attributes:
        resource_type: Kind of record. Defaults to the permission's resource.
        resource_id: Record identifier.
        owner_id: Generic owner of the record.
        created_by: Creator of the record (hotlists).
        employee_id: Consultant the record belongs to (bench resources).
        account_id: Client account of the record.
        vendor_id: Vendor the record belongs to.
        vendor_type: Category of that vendor.
        poc_role: Role of the point of contact.
        extra: Keys that are not context fields (read-only).
    """

    resource_type: Resource | str | None = None
    resource_id: str | None = None
    owner_id: str | None = None
    created_by: str | None = None
    employee_id: str | None = None
    account_id: str | None = None
    vendor_id: str | None = None
    vendor_type: str | None = None
    poc_role: str | None = None
    extra: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PermissionContext":
        """Build a context from snake_case or camelCase keys.

        A snake_case key wins over its camelCase alias.
        """
        names = {f.name for f in fields(cls)} - {"extra"}
        values: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            if key in names:
                values[key] = value
        for key, value in data.items():
            if key in names:
                continue
            name = CONTEXT_ALIASES.get(key)
            if name is None:
                extra[key] = value
            elif values.get(name) is None:
                values[name] = value
        return cls(**values, extra=MappingProxyType(extra))

    def get(self, name: str) -> Any:
        if name != "extra" and name in self.__dataclass_fields__:
            return getattr(self, name)
        return self.extra.get(name)
