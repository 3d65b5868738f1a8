"""Context evaluator: role gate plus context narrowing.

Evaluation order:
    1. Programming errors raise (no actor, role outside the enum)
    2. Role gate: the permission must be in the role's effective set
    3. No context means the role grant stands
    4. A context naming a different resource type is ambiguous: deny
    5. Every narrowing rule for (role, resource, action) must pass
    6. Vendor-hub restrictions must pass for vendor-scoped resources

Context only ever narrows. Evaluation is synchronous and has no side
effects other than a debug log line.
"""

from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from talentgate.application.services.matrix_store import RolePermissionMatrixStore
from talentgate.domain.entities import Actor, Decision, PermissionContext
from talentgate.domain.enums import Permission, Resource, Role
from talentgate.domain.errors import NoActorError, UnknownRoleError
from talentgate.domain.policies import lookup_in, rules_for, vendor_restrictions_allow
from talentgate.domain.protocols import LoggerProtocol

T = TypeVar("T")


def _resource_type_value(value: Resource | str | None) -> str | None:
    if isinstance(value, Enum):
        return str(value.value)
    return value


class ContextEvaluator:
    """Decides whether an actor holds a permission for a record.

    Args:
        matrix_store: Source of role grants.
        logger: Optional structured logger.
    """

    def __init__(
        self,
        matrix_store: RolePermissionMatrixStore,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._store = matrix_store
        self._logger = logger

    def evaluate(
        self,
        actor: Actor | None,
        permission: Permission | str,
        context: PermissionContext | None = None,
    ) -> bool:
        """Return True if actor may exercise permission under context.

        Raises:
            NoActorError: If actor is None.
            UnknownRoleError: If actor.role is not a Role.
        """
        return self.explain(actor, permission, context).allowed

    def explain(
        self,
        actor: Actor | None,
        permission: Permission | str,
        context: PermissionContext | None = None,
    ) -> Decision:
        """Same as evaluate() but returns the reason for a denial."""
        if actor is None:
            raise NoActorError()
        if not isinstance(actor.role, Role):
            raise UnknownRoleError(actor.role)

        decision = self._decide(actor, permission, context)
        if self._logger is not None:
            self._logger.debug(
                "authorization_check",
                actor_id=actor.id,
                role=actor.role.value,
                permission=(
                    decision.permission.value
                    if decision.permission is not None
                    else str(permission)
                ),
                allowed=decision.allowed,
                reason=decision.reason,
            )
        return decision

    def _decide(
        self,
        actor: Actor,
        permission: Permission | str,
        context: PermissionContext | None,
    ) -> Decision:
        parsed = Permission.parse(permission)
        if parsed is None:
            return Decision(False, None, f"Unknown permission {permission!r}")

        if parsed not in self._store.get_permissions_for_role(actor.role):
            return Decision(
                False,
                parsed,
                f"Role '{actor.role.value}' lacks permission '{parsed.value}'",
            )

        if context is None:
            return Decision(True, parsed)

        resource = parsed.resource
        requested_type = _resource_type_value(context.resource_type)
        if requested_type is not None and requested_type != resource.value:
            return Decision(
                False,
                parsed,
                f"Context resource type '{requested_type}' does not match "
                f"permission '{parsed.value}'",
            )

        lookup = lookup_in(context)
        for rule in rules_for(actor.role, resource, parsed.action):
            if not rule.allows(actor, resource, lookup):
                return Decision(False, parsed, rule.reason)

        if not vendor_restrictions_allow(actor, resource, lookup):
            return Decision(False, parsed, "Outside the actor's vendor restrictions")

        return Decision(True, parsed)

    def filter_by_ownership(
        self,
        actor: Actor | None,
        resources: Iterable[T],
        permission: Permission | str,
    ) -> list[T]:
        """Keep the records the actor may exercise permission on.

        Records may be mappings or objects; fields are read by name.

        Returns:
            list: A new list. Empty when the role lacks the permission.

        Raises:
            NoActorError: If actor is None.
            UnknownRoleError: If actor.role is not a Role.
        """
        if actor is None:
            raise NoActorError()
        if not isinstance(actor.role, Role):
            raise UnknownRoleError(actor.role)

        parsed = Permission.parse(permission)
        if parsed is None or parsed not in self._store.get_permissions_for_role(
            actor.role
        ):
            return []

        resource = parsed.resource
        rules = rules_for(actor.role, resource, parsed.action)
        restricted = actor.restrictions is not None and resource.is_vendor_scoped
        if not rules and not restricted:
            return list(resources)

        kept: list[T] = []
        for item in resources:
            lookup = lookup_in(item)
            if all(rule.allows(actor, resource, lookup) for rule in rules) and (
                vendor_restrictions_allow(actor, resource, lookup)
            ):
                kept.append(item)
        return kept
