"""Container module - centralized dependency injection.

- infrastructure: logging, database, audit sink
- authorization: matrix store, evaluator, emitter, permission facade

Usage:
    from talentgate.core.container import get_permission_service
"""

from talentgate.core.container.authorization import (
    get_audit_emitter,
    get_context_evaluator,
    get_matrix_store,
    get_permission_service,
    get_role_grant_repository,
    get_role_management_service,
    init_role_grants,
    shutdown_audit,
)
from talentgate.core.container.infrastructure import (
    get_audit,
    get_database,
    get_db_session,
    get_logger,
)

__all__ = [
    "get_audit",
    "get_audit_emitter",
    "get_context_evaluator",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_matrix_store",
    "get_permission_service",
    "get_role_grant_repository",
    "get_role_management_service",
    "init_role_grants",
    "shutdown_audit",
]
