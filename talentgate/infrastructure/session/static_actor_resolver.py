"""Actor resolver returning a fixed actor (tests, CLIs, batch jobs)."""

from talentgate.domain.entities import Actor


class StaticActorResolver:
    """ActorResolverProtocol implementation with a preset actor.

    Args:
        actor: Actor to return, or None for "nobody signed in".
    """

    def __init__(self, actor: Actor | None = None) -> None:
        self._actor = actor

    def resolve(self) -> Actor | None:
        return self._actor
