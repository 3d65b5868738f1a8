"""API routers."""

from talentgate.presentation.routers.permissions import permissions_router
from talentgate.presentation.routers.roles import roles_router
from talentgate.presentation.routers.system import system_router

__all__ = ["permissions_router", "roles_router", "system_router"]
