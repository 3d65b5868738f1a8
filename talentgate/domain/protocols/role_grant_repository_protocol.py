"""Role grant repository protocol (port).

Persists the per-category view/add/edit/delete flags edited on the role
management screen.
"""

from typing import Protocol

from talentgate.core.errors import DomainError
from talentgate.core.result import Result
from talentgate.domain.entities import RoleGrant


class RoleGrantRepositoryProtocol(Protocol):
    """Storage for role grant rows."""

    async def list_all(self) -> Result[list[RoleGrant], DomainError]:
        """Return every grant row, inactive ones included."""
        ...

    async def replace_for_role(
        self, role: str, grants: list[RoleGrant]
    ) -> Result[None, DomainError]:
        """Replace all rows of one role with the given rows."""
        ...
