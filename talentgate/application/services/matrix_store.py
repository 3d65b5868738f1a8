"""Role-permission matrix store.

Holds the effective permission set of every role as an immutable snapshot.
A reload builds a complete new snapshot off to the side and swaps the
reference in one assignment, so concurrent readers see either the old or
the new matrix, never a mix.

Usage:
    store = RolePermissionMatrixStore(CasbinPolicyCompiler())
    store.get_permissions_for_role(Role.VIEWER)
    # frozenset({Permission.VENDOR_VIEW, Permission.POC_VIEW, ...})
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from talentgate.domain.enums import Permission, Role
from talentgate.domain.errors import UnknownRoleError
from talentgate.domain.policies import ROLE_DEFINITIONS, RoleDefinition
from talentgate.domain.protocols import LoggerProtocol, PolicyCompilerProtocol


def _validate(definitions: Mapping[Role, RoleDefinition]) -> None:
    """Check totality, key consistency and acyclic inheritance.

    Raises:
        ValueError: On any inconsistency.
    """
    missing = [role.value for role in Role if role not in definitions]
    if missing:
        raise ValueError(f"Role definitions missing for: {', '.join(missing)}")

    for role, definition in definitions.items():
        if definition.role != role:
            raise ValueError(
                f"Definition for {role.value!r} declares role {definition.role.value!r}"
            )
        for parent in definition.inherits:
            if parent not in definitions:
                raise ValueError(f"{role.value!r} inherits undefined role {parent!r}")

    # Depth-first search; GREY marks the current path.
    WHITE, GREY, BLACK = 0, 1, 2
    state = {role: WHITE for role in definitions}

    def visit(role: Role, path: list[Role]) -> None:
        state[role] = GREY
        for parent in definitions[role].inherits:
            if state[parent] == GREY:
                cycle = " -> ".join(r.value for r in [*path, role, parent])
                raise ValueError(f"Role inheritance cycle: {cycle}")
            if state[parent] == WHITE:
                visit(parent, [*path, role])
        state[role] = BLACK

    for role in definitions:
        if state[role] == WHITE:
            visit(role, [])


@dataclass(frozen=True, slots=True)
class RolePermissionMatrix:
    """Immutable snapshot of effective grants.

    Attributes:
        version: Increments on every reload.
        grants: Role to effective permission set (read-only mapping).
        definitions: Role definitions the snapshot was built from.
    """

    version: int
    grants: Mapping[Role, frozenset[Permission]]
    definitions: Mapping[Role, RoleDefinition]

    @classmethod
    def build(
        cls,
        definitions: Mapping[Role, RoleDefinition],
        compiler: PolicyCompilerProtocol,
        *,
        version: int = 1,
    ) -> "RolePermissionMatrix":
        """Validate definitions and resolve inheritance.

        Raises:
            ValueError: If definitions are incomplete, refer to undefined
                roles or contain an inheritance cycle.
        """
        _validate(definitions)
        compiled = compiler.compile(definitions)
        grants = {role: frozenset(compiled.get(role, frozenset())) for role in Role}
        return cls(
            version=version,
            grants=MappingProxyType(grants),
            definitions=MappingProxyType(dict(definitions)),
        )

    def permissions_for(self, role: Role) -> frozenset[Permission]:
        return self.grants[role]


def _coerce_role(role: object) -> Role:
    if isinstance(role, Role):
        return role
    if Role.is_valid(role):
        return Role(role)
    raise UnknownRoleError(role)


class RolePermissionMatrixStore:
    """Owner of the current RolePermissionMatrix.

    Args:
        compiler: Resolves role inheritance (Casbin in production).
        definitions: Initial role definitions.
        logger: Optional structured logger.
    """

    def __init__(
        self,
        compiler: PolicyCompilerProtocol,
        definitions: Mapping[Role, RoleDefinition] = ROLE_DEFINITIONS,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._compiler = compiler
        self._logger = logger
        self._matrix = RolePermissionMatrix.build(definitions, compiler)

    @property
    def matrix(self) -> RolePermissionMatrix:
        return self._matrix

    @property
    def version(self) -> int:
        return self._matrix.version

    def get_permissions_for_role(self, role: Role | str) -> frozenset[Permission]:
        """Effective permission set of a role.

        Raises:
            UnknownRoleError: If role is not a Role member or slug.
        """
        return self._matrix.permissions_for(_coerce_role(role))

    def role_has_permission(self, role: Role | str, permission: Permission) -> bool:
        return permission in self.get_permissions_for_role(role)

    def roles_with_permission(self, permission: Permission) -> frozenset[Role]:
        matrix = self._matrix
        return frozenset(role for role in Role if permission in matrix.grants[role])

    def get_role_display_name(self, role: object) -> str:
        """Label for a role, falling back to the raw identifier."""
        if Role.is_valid(role):
            definition = self._matrix.definitions.get(Role(role))
            if definition is not None and definition.display_name:
                return definition.display_name
        if isinstance(role, Role):
            return role.value
        return str(role)

    def get_role_definition(self, role: Role | str) -> RoleDefinition:
        return self._matrix.definitions[_coerce_role(role)]

    def reload(
        self, definitions: Mapping[Role, RoleDefinition]
    ) -> RolePermissionMatrix:
        """Build a new matrix and swap it in.

        On invalid definitions the current matrix stays in place.

        Raises:
            ValueError: If definitions are invalid.
        """
        current = self._matrix
        matrix = RolePermissionMatrix.build(
            definitions, self._compiler, version=current.version + 1
        )
        self._matrix = matrix
        if self._logger is not None:
            changed = [
                role.value
                for role in Role
                if matrix.grants[role] != current.grants[role]
            ]
            self._logger.info(
                "matrix_reloaded",
                version=matrix.version,
                roles_changed=changed,
            )
        return matrix
