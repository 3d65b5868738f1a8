"""Actor resolver for HTTP requests.

An upstream auth middleware may place a ready Actor on
``request.state.actor``. Otherwise the actor is read from trusted gateway
headers:

    X-Actor-Id: u1
    X-Actor-Role: bench_sales
    X-Actor-Accounts: a1,a2

The headers must be set by the gateway after authentication; they are not
a login mechanism.
"""

from collections.abc import Mapping

from talentgate.domain.entities import Actor
from talentgate.domain.errors import UnknownRoleError
from talentgate.domain.protocols import LoggerProtocol

ACTOR_ID_HEADER = "x-actor-id"
ACTOR_ROLE_HEADER = "x-actor-role"
ACTOR_ACCOUNTS_HEADER = "x-actor-accounts"


def _split(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class HeaderActorResolver:
    """ActorResolverProtocol implementation over request headers.

    Args:
        headers: Case-insensitive request headers.
        logger: Structured logger (unknown roles are warned about).
        state_actor: Actor already resolved by middleware, if any.
    """

    def __init__(
        self,
        headers: Mapping[str, str],
        logger: LoggerProtocol,
        state_actor: Actor | None = None,
    ) -> None:
        self._headers = headers
        self._logger = logger
        self._state_actor = state_actor

    def resolve(self) -> Actor | None:
        if self._state_actor is not None:
            return self._state_actor

        actor_id = self._headers.get(ACTOR_ID_HEADER)
        role = self._headers.get(ACTOR_ROLE_HEADER)
        if not actor_id or not role:
            return None

        try:
            return Actor.create(
                id=actor_id,
                role=role.strip(),
                account_ids=_split(self._headers.get(ACTOR_ACCOUNTS_HEADER)),
            )
        except UnknownRoleError as e:
            # Treated as anonymous; the role set is closed.
            self._logger.warning("unknown_actor_role", actor_id=actor_id, role=e.role)
            return None
