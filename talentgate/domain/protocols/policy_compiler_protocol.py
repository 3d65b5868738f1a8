"""Policy compiler protocol: turns role definitions into effective grants."""

from collections.abc import Mapping
from typing import Protocol

from talentgate.domain.enums import Permission, Role
from talentgate.domain.policies import RoleDefinition


class PolicyCompilerProtocol(Protocol):
    """Resolves role inheritance."""

    def compile(
        self, definitions: Mapping[Role, RoleDefinition]
    ) -> dict[Role, frozenset[Permission]]:
        """Return direct plus inherited grants for every defined role."""
        ...
