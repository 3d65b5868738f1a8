"""Context narrowing rules.

A narrowing rule can only turn a role grant into a denial. Rules are
registered per (role, resource, actions) and read record fields through a
lookup function, so the same rule serves single-record checks
(PermissionContext) and list filtering (mappings or objects).

Ownership Fields:
    Which field identifies the owner of a record depends on its resource
    type. Bench resources belong to the consultant (``employee_id``),
    hotlists to their creator (``created_by``). ``owner_id`` is the
    fallback everywhere.

Usage:
    from talentgate.domain.policies import rules_for

    for rule in rules_for(Role.BENCH_SALES, Resource.BENCH_RESOURCES, Action.EDIT):
        if not rule.allows(actor, Resource.BENCH_RESOURCES, lookup):
            return False
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from talentgate.domain.entities import Actor, PermissionContext, aliases_for
from talentgate.domain.enums import Action, Resource, Role

type FieldLookup = Callable[[str], Any]
type Predicate = Callable[[Actor, Resource, FieldLookup], bool]


@dataclass(frozen=True, slots=True)
class OwnershipFields:
    """Record fields used for ownership and account checks.

    Attributes:
        owner: Candidate owner fields, first non-empty wins.
        account: Field holding the record's client account.
    """

    owner: tuple[str, ...]
    account: str = "account_id"


DEFAULT_OWNERSHIP_FIELDS = OwnershipFields(owner=("owner_id", "created_by"))

OWNERSHIP_FIELDS: dict[Resource, OwnershipFields] = {
    Resource.BENCH_RESOURCES: OwnershipFields(owner=("employee_id", "owner_id")),
    Resource.HOTLISTS: OwnershipFields(owner=("created_by", "owner_id")),
}


def ownership_fields_for(resource: Resource) -> OwnershipFields:
    return OWNERSHIP_FIELDS.get(resource, DEFAULT_OWNERSHIP_FIELDS)


def lookup_in(record: Any) -> FieldLookup:
    """Build a field lookup over a context, a mapping or an object.

    Mappings and objects are read by snake_case name first, then by the
    camelCase aliases of that name.
    """
    if isinstance(record, PermissionContext):
        return record.get
    if isinstance(record, Mapping):
        read = record.get
    else:
        def read(name: str) -> Any:
            return getattr(record, name, None)

    def lookup(name: str) -> Any:
        value = read(name)
        if value is None:
            for alias in aliases_for(name):
                value = read(alias)
                if value is not None:
                    break
        return value

    return lookup


def owner_of(resource: Resource, lookup: FieldLookup) -> str | None:
    for name in ownership_fields_for(resource).owner:
        value = lookup(name)
        if value is not None and value != "":
            return str(value)
    return None


def is_owner(actor: Actor, resource: Resource, lookup: FieldLookup) -> bool:
    owner = owner_of(resource, lookup)
    return owner is not None and owner == actor.id


def in_actor_accounts(actor: Actor, resource: Resource, lookup: FieldLookup) -> bool:
    account = lookup(ownership_fields_for(resource).account)
    return account is not None and actor.manages_account(str(account))


def owner_or_shared_account(
    actor: Actor, resource: Resource, lookup: FieldLookup
) -> bool:
    return is_owner(actor, resource, lookup) or in_actor_accounts(
        actor, resource, lookup
    )


@dataclass(frozen=True, slots=True)
class NarrowingRule:
    """One narrowing rule.

    Attributes:
        role: Role the rule applies to.
        resource: Resource type the rule applies to.
        actions: Actions the rule applies to.
        predicate: Returns False to deny.
        reason: Human-readable explanation used in denials.
    """

    role: Role
    resource: Resource
    actions: frozenset[Action]
    predicate: Predicate
    reason: str

    def applies_to(self, role: Role, resource: Resource, action: Action) -> bool:
        return (
            self.role == role and self.resource == resource and action in self.actions
        )

    def allows(self, actor: Actor, resource: Resource, lookup: FieldLookup) -> bool:
        return bool(self.predicate(actor, resource, lookup))


NARROWING_RULES: tuple[NarrowingRule, ...] = (
    NarrowingRule(
        role=Role.BENCH_SALES,
        resource=Resource.BENCH_RESOURCES,
        actions=frozenset({Action.EDIT, Action.DELETE}),
        predicate=owner_or_shared_account,
        reason="Bench sales may only change their own or shared-account resources",
    ),
    NarrowingRule(
        role=Role.BENCH_SALES,
        resource=Resource.HOTLISTS,
        actions=frozenset({Action.EDIT, Action.DELETE}),
        predicate=owner_or_shared_account,
        reason="Bench sales may only change hotlists they created or share by account",
    ),
    NarrowingRule(
        role=Role.ACCOUNT_MANAGER,
        resource=Resource.BENCH_RESOURCES,
        actions=frozenset({Action.EDIT}),
        predicate=in_actor_accounts,
        reason="Account managers may only edit resources on their accounts",
    ),
    NarrowingRule(
        role=Role.ACCOUNT_MANAGER,
        resource=Resource.HOTLISTS,
        actions=frozenset({Action.CREATE, Action.EDIT}),
        predicate=in_actor_accounts,
        reason="Account managers may only manage hotlists on their accounts",
    ),
    NarrowingRule(
        role=Role.ACCOUNT_MANAGER,
        resource=Resource.ANALYTICS,
        actions=frozenset({Action.VIEW}),
        predicate=in_actor_accounts,
        reason="Account managers may only view analytics for their accounts",
    ),
    NarrowingRule(
        role=Role.EMPLOYEE,
        resource=Resource.BENCH_RESOURCES,
        actions=frozenset({Action.VIEW}),
        predicate=is_owner,
        reason="Employees may only view their own bench record",
    ),
)


def rules_for(role: Role, resource: Resource, action: Action) -> list[NarrowingRule]:
    """Rules registered for a (role, resource, action) triple."""
    return [rule for rule in NARROWING_RULES if rule.applies_to(role, resource, action)]


def vendor_restrictions_allow(
    actor: Actor, resource: Resource, lookup: FieldLookup
) -> bool:
    """Apply the actor's vendor-hub restrictions to a vendor-scoped record.

    A restriction whose record field is missing denies.
    """
    restrictions = actor.restrictions
    if restrictions is None or restrictions.is_empty:
        return True
    if not resource.is_vendor_scoped:
        return True
    checks: list[tuple[frozenset[str] | None, str]] = [
        (restrictions.vendor_ids, "vendor_id"),
        (restrictions.vendor_types, "vendor_type"),
    ]
    if resource == Resource.POC:
        checks.append((restrictions.poc_roles, "poc_role"))
    for allowed, name in checks:
        if allowed is None:
            continue
        value = lookup(name)
        if value is None or str(value) not in allowed:
            return False
    return True
