"""Authorization dependency factories.

The matrix store, evaluator, emitter and facade are app-scoped singletons.
The matrix is built from static definitions at first use; with
ROLE_GRANTS_SOURCE=database, call ``init_role_grants()`` during startup to
merge stored grants over it.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from talentgate.core.config import get_settings
from talentgate.core.container.infrastructure import (
    get_audit,
    get_database,
    get_db_session,
    get_logger,
)

if TYPE_CHECKING:
    from talentgate.application.services import (
        AuditEmitter,
        ContextEvaluator,
        PermissionService,
        RoleManagementService,
        RolePermissionMatrixStore,
    )
    from talentgate.domain.protocols import RoleGrantRepositoryProtocol


@lru_cache()
def get_matrix_store() -> "RolePermissionMatrixStore":
    """Role-permission matrix store compiled through Casbin (app-scoped)."""
    from talentgate.application.services import RolePermissionMatrixStore
    from talentgate.infrastructure.authorization import CasbinPolicyCompiler

    logger = get_logger()
    store = RolePermissionMatrixStore(CasbinPolicyCompiler(logger=logger), logger=logger)
    logger.info("matrix_loaded", version=store.version)
    return store


@lru_cache()
def get_context_evaluator() -> "ContextEvaluator":
    from talentgate.application.services import ContextEvaluator

    return ContextEvaluator(get_matrix_store(), logger=get_logger())


@lru_cache()
def get_audit_emitter() -> "AuditEmitter":
    from talentgate.application.services import AuditEmitter

    return AuditEmitter(
        get_audit(),
        get_logger(),
        timeout_seconds=get_settings().audit_write_timeout_seconds,
        max_backlog=get_settings().audit_backlog_max_size,
    )


@lru_cache()
def get_permission_service() -> "PermissionService":
    """Permission facade singleton (app-scoped).

    Usage:
        service = get_permission_service()
        service.has_permission(actor, "vendor", "edit")

        # FastAPI
        service: PermissionService = Depends(get_permission_service)
    """
    from talentgate.application.services import PermissionService

    return PermissionService(
        evaluator=get_context_evaluator(),
        matrix_store=get_matrix_store(),
        audit_emitter=get_audit_emitter(),
        audit=get_audit(),
        logger=get_logger(),
    )


@lru_cache()
def get_role_management_service() -> "RoleManagementService":
    from talentgate.application.services import RoleManagementService

    return RoleManagementService(
        matrix_store=get_matrix_store(),
        permission_service=get_permission_service(),
        audit_emitter=get_audit_emitter(),
        logger=get_logger(),
    )


async def get_role_grant_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RoleGrantRepositoryProtocol":
    """Role grant repository bound to the request session."""
    from talentgate.infrastructure.persistence.repositories import (
        RolePermissionRepository,
    )

    return RolePermissionRepository(session)


async def init_role_grants() -> None:
    """Merge stored role grants into the matrix at startup.

    No-op unless ROLE_GRANTS_SOURCE=database. A load failure keeps the
    static matrix in place and is logged.
    """
    if get_settings().role_grants_source != "database":
        return

    from talentgate.infrastructure.persistence.repositories import (
        RolePermissionRepository,
    )

    async with get_database().get_session() as session:
        await get_role_management_service().load_from_repository(
            RolePermissionRepository(session)
        )


async def shutdown_audit() -> None:
    """Flush pending audit writes (call from the app lifespan)."""
    await get_audit_emitter().drain()
