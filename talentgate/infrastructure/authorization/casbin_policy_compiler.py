"""Casbin-backed compiler for role inheritance.

Role definitions are loaded into an in-memory Casbin enforcer: each direct
grant becomes a ``p`` policy, each inheritance edge a ``g`` policy. The
effective grants of a role are read back through Casbin's implicit
permission resolution, so inheritance follows the same RBAC semantics the
enforcer uses for ``enforce()``.

The enforcer lives only for the duration of one compile. The resulting
sets are plain frozensets and evaluation never calls Casbin.
"""

from collections.abc import Mapping
from pathlib import Path

import casbin

from talentgate.domain.enums import Permission, Role
from talentgate.domain.policies import RoleDefinition
from talentgate.domain.protocols import LoggerProtocol

MODEL_PATH = Path(__file__).with_name("model.conf")


class CasbinPolicyCompiler:
    """Resolve effective role grants with Casbin.

    Attributes:
        model_path: Casbin model file (RBAC with one role hierarchy).
    """

    def __init__(
        self,
        model_path: Path | str = MODEL_PATH,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.model_path = str(model_path)
        self._logger = logger

    def build_enforcer(
        self, definitions: Mapping[Role, RoleDefinition]
    ) -> casbin.Enforcer:
        """Load definitions into a fresh in-memory enforcer."""
        enforcer = casbin.Enforcer(self.model_path)
        for definition in definitions.values():
            subject = definition.role.value
            for permission in sorted(definition.permissions, key=lambda p: p.value):
                enforcer.add_policy(
                    subject, permission.resource.value, permission.action.value
                )
            for parent in definition.inherits:
                enforcer.add_grouping_policy(subject, parent.value)
        return enforcer

    def compile(
        self, definitions: Mapping[Role, RoleDefinition]
    ) -> dict[Role, frozenset[Permission]]:
        """Compute the effective permission set of every defined role.

        Args:
            definitions: Validated, acyclic role definitions.

        Returns:
            dict[Role, frozenset[Permission]]: Direct plus inherited grants.
        """
        enforcer = self.build_enforcer(definitions)
        grants: dict[Role, frozenset[Permission]] = {}
        for role in definitions:
            resolved: set[Permission] = set()
            for _subject, obj, act in enforcer.get_implicit_permissions_for_user(
                role.value
            ):
                permission = Permission.from_parts(obj, act)
                if permission is not None:
                    resolved.add(permission)
            grants[role] = frozenset(resolved)

        if self._logger is not None:
            self._logger.debug(
                "casbin_policies_compiled",
                roles=len(grants),
                policies=len(enforcer.get_policy()),
                links=len(enforcer.get_grouping_policy()),
            )
        return grants
