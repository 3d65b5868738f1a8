"""Utility functions for testing.

Provides helpers for building actors and permission contexts.
"""

from collections.abc import Iterable

from talentgate.domain.entities import Actor, ActorRestrictions, PermissionContext
from talentgate.domain.enums import Role


def make_actor(
    role: Role | str,
    actor_id: str = "u1",
    account_ids: Iterable[str] = (),
    restrictions: ActorRestrictions | None = None,
) -> Actor:
    """Create an Actor for testing.

    Usage:
        actor = make_actor(Role.BENCH_SALES, "u1", ["a1"])
    """
    return Actor.create(
        id=actor_id, role=role, account_ids=account_ids, restrictions=restrictions
    )


def bench_record(
    owner: str, account: str | None = None, resource_id: str = "r1"
) -> PermissionContext:
    """Context for a bench resource owned by ``owner``."""
    return PermissionContext(
        resource_type="bench_resources",
        resource_id=resource_id,
        employee_id=owner,
        account_id=account,
    )
