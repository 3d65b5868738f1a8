"""FastAPI dependencies for actor resolution and permission checks.

Architecture:
    - Authentication happens upstream (gateway or middleware)
    - get_current_actor turns the authenticated identity into an Actor
    - require_* dependencies ask the PermissionService

Usage:
    @router.delete("/vendors/{vendor_id}")
    async def delete_vendor(
        vendor_id: str,
        actor: Actor = Depends(get_current_actor),
        _: None = Depends(require_permission(Permission.VENDOR_DELETE)),
    ):
        ...

Error responses never carry stack traces or internal identifiers:
    - 401: nobody signed in
    - 403: "Permission denied: requires 'vendor:delete'"
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from talentgate.application.services import PermissionService
from talentgate.core.container import get_logger, get_permission_service
from talentgate.core.result import Failure
from talentgate.domain.entities import Actor
from talentgate.domain.enums import Permission
from talentgate.domain.protocols import LoggerProtocol
from talentgate.infrastructure.session import HeaderActorResolver


async def get_current_actor(
    request: Request,
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> Actor | None:
    """Resolve the actor for this request, or None when anonymous."""
    state_actor = getattr(request.state, "actor", None)
    resolver = HeaderActorResolver(
        request.headers,
        logger,
        state_actor=state_actor if isinstance(state_actor, Actor) else None,
    )
    return resolver.resolve()


async def require_actor(
    actor: Annotated[Actor | None, Depends(get_current_actor)],
) -> Actor:
    """Resolve the actor or fail with 401."""
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return actor


def _label(permission: Permission | str) -> str:
    parsed = Permission.parse(permission)
    return parsed.value if parsed is not None else str(permission)


def require_permission(
    permission: Permission | str,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires one permission (role gate only).

    The check goes through PermissionService.authorize, so a denial is
    recorded as ``unauthorized_access``.

    Raises:
        HTTPException 401: If nobody is signed in.
        HTTPException 403: If the actor's role lacks the permission.
    """

    async def permission_checker(
        actor: Annotated[Actor, Depends(require_actor)],
        service: Annotated[PermissionService, Depends(get_permission_service)],
    ) -> None:
        result = service.authorize(actor, permission)
        if isinstance(result, Failure):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=result.error.message,
            )

    return permission_checker


def require_any_permission(
    *permissions: Permission | str,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires at least one of the permissions.

    Raises:
        HTTPException 401: If nobody is signed in.
        HTTPException 403: If the actor holds none of them.
    """

    async def permission_checker(
        actor: Annotated[Actor, Depends(require_actor)],
        service: Annotated[PermissionService, Depends(get_permission_service)],
    ) -> None:
        if service.has_any_permission(actor, permissions):
            return

        perms_str = ", ".join(_label(p) for p in permissions)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: requires one of [{perms_str}]",
        )

    return permission_checker
