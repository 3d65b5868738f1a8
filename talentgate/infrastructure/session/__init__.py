"""Actor resolvers."""

from talentgate.infrastructure.session.header_actor_resolver import HeaderActorResolver
from talentgate.infrastructure.session.static_actor_resolver import StaticActorResolver

__all__ = ["HeaderActorResolver", "StaticActorResolver"]
