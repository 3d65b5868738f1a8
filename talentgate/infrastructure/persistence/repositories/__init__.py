"""Repository implementations."""

from talentgate.infrastructure.persistence.repositories.role_permission_repository import (
    RolePermissionRepository,
)

__all__ = ["RolePermissionRepository"]
