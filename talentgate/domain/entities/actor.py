"""Actor domain entity: who is asking.

An Actor is built once per request by the authentication layer and never
mutated afterwards. It carries only what authorization needs: the id, the
single role, the accounts the actor works on, and optional vendor-hub
restrictions that can only narrow what the role allows.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from talentgate.domain.enums import Role
from talentgate.domain.errors import UnknownRoleError


def _frozen(values: Iterable[str] | None) -> frozenset[str] | None:
    if values is None:
        return None
    return frozenset(str(value) for value in values)


@dataclass(frozen=True, slots=True, kw_only=True)
class ActorRestrictions:
    """Vendor-hub scoping applied on top of role grants.

    ``None`` means unrestricted. An empty set restricts to nothing, so every
    vendor-scoped check fails.

    Attributes:
        vendor_ids: Vendors the actor may touch.
        vendor_types: Vendor categories the actor may touch.
        poc_roles: Point-of-contact roles the actor may touch.
    """

    vendor_ids: frozenset[str] | None = None
    vendor_types: frozenset[str] | None = None
    poc_roles: frozenset[str] | None = None

    @classmethod
    def create(
        cls,
        *,
        vendor_ids: Iterable[str] | None = None,
        vendor_types: Iterable[str] | None = None,
        poc_roles: Iterable[str] | None = None,
    ) -> "ActorRestrictions":
        return cls(
            vendor_ids=_frozen(vendor_ids),
            vendor_types=_frozen(vendor_types),
            poc_roles=_frozen(poc_roles),
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.vendor_ids is None
            and self.vendor_types is None
            and self.poc_roles is None
        )


@dataclass(frozen=True, slots=True)
class Actor:
    """Authenticated principal for one request.

    Attributes:
        id: Stable user identifier from the identity provider.
        role: The actor's single role.
        account_ids: Client accounts the actor is assigned to.
        restrictions: Optional vendor-hub narrowing.

    Example:
        >>> actor = Actor.create(id="u1", role="bench_sales", account_ids=["a1"])
        >>> actor.manages_account("a1")
        True
    """

    id: str
    role: Role
    account_ids: frozenset[str] = field(default_factory=frozenset)
    restrictions: ActorRestrictions | None = None

    @classmethod
    def create(
        cls,
        *,
        id: str,
        role: Role | str,
        account_ids: Iterable[str] | None = None,
        restrictions: ActorRestrictions | None = None,
    ) -> "Actor":
        """Build an actor from raw identity data.

        Args:
            id: User identifier.
            role: Role member or role slug.
            account_ids: Assigned accounts (any iterable).
            restrictions: Optional vendor-hub restrictions.

        Returns:
            Actor: Immutable actor.

        Raises:
            UnknownRoleError: If role is not a Role member or slug.
        """
        if not Role.is_valid(role):
            raise UnknownRoleError(role)
        return cls(
            id=str(id),
            role=Role(role),
            account_ids=_frozen(account_ids) or frozenset(),
            restrictions=restrictions,
        )

    def manages_account(self, account_id: str | None) -> bool:
        """True when account_id is one of the actor's accounts."""
        return account_id is not None and account_id in self.account_ids
