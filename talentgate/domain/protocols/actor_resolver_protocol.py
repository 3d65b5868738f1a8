"""Actor resolver protocol: where the current actor comes from.

The authorization core never holds a global "current user". Callers
resolve the actor at the boundary and pass it explicitly.
"""

from typing import Protocol

from talentgate.domain.entities import Actor


class ActorResolverProtocol(Protocol):
    """Supplies the actor for the current unit of work."""

    def resolve(self) -> Actor | None:
        """Return the actor, or None when nobody is signed in."""
        ...
