"""Role management: stored grant overrides and their admin workflow.

Administrators edit view/add/edit/delete flags per role and category.
Stored rows replace the CRUD grants of the static definition on the
categories they cover. Non-CRUD grants (validate, send, export, ...) and
role inheritance always come from the static definitions.

Every change rebuilds the matrix and swaps it in atomically, then records
``permission_granted`` / ``permission_revoked`` for the difference.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import replace

from talentgate.application.services.audit_emitter import AuditEmitter
from talentgate.application.services.matrix_store import (
    RolePermissionMatrix,
    RolePermissionMatrixStore,
)
from talentgate.application.services.permission_service import PermissionService
from talentgate.core.enums import ErrorCode
from talentgate.core.errors import DomainError, ValidationError
from talentgate.core.result import Failure, Result, Success
from talentgate.domain.entities import Actor, RoleGrant
from talentgate.domain.enums import Action, AuditEventType, Permission, Resource, Role
from talentgate.domain.policies import ROLE_DEFINITIONS, RoleDefinition
from talentgate.domain.protocols import LoggerProtocol, RoleGrantRepositoryProtocol

CRUD_ACTIONS: frozenset[Action] = frozenset(
    {Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE}
)


def merge_grants(
    base: RoleDefinition,
    rows: Iterable[RoleGrant],
    logger: LoggerProtocol | None = None,
) -> RoleDefinition:
    """Overlay stored rows on a static definition.

    Rows for categories outside the vocabulary, and flags whose
    ``category:action`` pair does not exist, are skipped with a warning.
    """
    categories: set[Resource] = set()
    granted: set[Permission] = set()
    for row in rows:
        try:
            resource = Resource(row.category)
        except ValueError:
            if logger is not None:
                logger.warning(
                    "role_grant_skipped", role=row.role, category=row.category
                )
            continue
        categories.add(resource)
        permissions, skipped = row.to_permissions()
        granted |= permissions
        if skipped and logger is not None:
            logger.warning("role_grant_skipped", role=row.role, permissions=skipped)

    kept = {
        p
        for p in base.permissions
        if not (p.resource in categories and p.action in CRUD_ACTIONS)
    }
    return replace(base, permissions=frozenset(kept | granted))


class RoleManagementService:
    """Loads and edits stored role grants.

    Args:
        matrix_store: Store whose matrix is rebuilt on change.
        permission_service: Used to authorize the acting administrator.
        audit_emitter: Records grant differences.
        logger: Structured logger.
        base_definitions: Static definitions stored rows are merged over.
    """

    def __init__(
        self,
        matrix_store: RolePermissionMatrixStore,
        permission_service: PermissionService,
        audit_emitter: AuditEmitter,
        logger: LoggerProtocol,
        base_definitions: Mapping[Role, RoleDefinition] = ROLE_DEFINITIONS,
    ) -> None:
        self._store = matrix_store
        self._permissions = permission_service
        self._emitter = audit_emitter
        self._logger = logger
        self._base = base_definitions

    def current_grants(self, role: Role | str) -> list[RoleGrant]:
        """CRUD flags per category for the role management screen."""
        effective = self._store.get_permissions_for_role(role)
        slug = Role(role).value
        return [
            RoleGrant.from_permissions(slug, resource.value, effective)
            for resource in Resource
            if any(p.action in CRUD_ACTIONS for p in Permission.for_resource(resource))
        ]

    async def load_from_repository(
        self, repository: RoleGrantRepositoryProtocol
    ) -> Result[RolePermissionMatrix, DomainError]:
        """Merge every stored row over the static definitions and reload."""
        result = await repository.list_all()
        if isinstance(result, Failure):
            self._logger.error(
                "role_grants_load_failed", code=result.error.code.value
            )
            return result

        by_role: dict[Role, list[RoleGrant]] = defaultdict(list)
        for row in result.value:
            if not Role.is_valid(row.role):
                self._logger.warning("role_grant_skipped", role=row.role)
                continue
            by_role[Role(row.role)].append(row)

        definitions = dict(self._base)
        for role, rows in by_role.items():
            definitions[role] = merge_grants(self._base[role], rows, self._logger)

        return Success(value=self._store.reload(definitions))

    async def update_role_grants(
        self,
        actor: Actor | None,
        role: Role | str,
        grants: list[RoleGrant],
        repository: RoleGrantRepositoryProtocol,
    ) -> Result[RolePermissionMatrix, DomainError]:
        """Replace a role's stored rows. Requires ``admin:user_management``.

        Returns:
            Result[RolePermissionMatrix, DomainError]:
                - Success(matrix) with the reloaded matrix
                - Failure(AuthorizationError) if the actor may not manage users
                - Failure(ValidationError) for an unknown role or category
                - Failure(DomainError) if the repository fails
        """
        authorized = self._permissions.authorize(
            actor,
            Permission.ADMIN_USER_MANAGEMENT,
            details={"target_role": str(role.value if isinstance(role, Role) else role)},
        )
        if isinstance(authorized, Failure):
            return authorized

        if not Role.is_valid(role):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ROLE,
                    message=f"Unknown role: {role}",
                    field="role",
                )
            )
        target = Role(role)
        for grant in grants:
            if grant.role != target.value:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=f"Grant for role '{grant.role}' submitted under '{target.value}'",
                        field="role",
                    )
                )
            if grant.category not in Resource.values():
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_PERMISSION,
                        message=f"Unknown permission category: {grant.category}",
                        field="category",
                    )
                )

        before = self._store.get_permissions_for_role(target)
        saved = await repository.replace_for_role(target.value, grants)
        if isinstance(saved, Failure):
            self._logger.error(
                "role_grants_save_failed",
                role=target.value,
                code=saved.error.code.value,
            )
            return saved

        definitions = dict(self._store.matrix.definitions)
        definitions[target] = merge_grants(self._base[target], grants, self._logger)
        matrix = self._store.reload(definitions)

        after = matrix.permissions_for(target)
        added = sorted(p.value for p in after - before)
        removed = sorted(p.value for p in before - after)
        if added:
            self._emitter.log_event(
                AuditEventType.PERMISSION_GRANTED,
                "role_grants_updated",
                {"role": target.value, "permissions": added},
                actor=actor,
                resource_type="role",
                resource_id=target.value,
            )
        if removed:
            self._emitter.log_event(
                AuditEventType.PERMISSION_REVOKED,
                "role_grants_updated",
                {"role": target.value, "permissions": removed},
                actor=actor,
                resource_type="role",
                resource_id=target.value,
            )
        self._logger.info(
            "role_grants_updated",
            role=target.value,
            added=added,
            removed=removed,
            version=matrix.version,
        )
        return Success(value=matrix)
