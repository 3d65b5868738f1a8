"""Application services."""

from talentgate.application.services.audit_emitter import AuditEmitter
from talentgate.application.services.context_evaluator import ContextEvaluator
from talentgate.application.services.matrix_store import (
    RolePermissionMatrix,
    RolePermissionMatrixStore,
)
from talentgate.application.services.permission_service import PermissionService
from talentgate.application.services.role_management_service import (
    RoleManagementService,
    merge_grants,
)

__all__ = [
    "AuditEmitter",
    "ContextEvaluator",
    "PermissionService",
    "RoleManagementService",
    "RolePermissionMatrix",
    "RolePermissionMatrixStore",
    "merge_grants",
]
