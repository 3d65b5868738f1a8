"""Permission facade: the query API the route and UI layers call.

The current actor is always passed in explicitly. A missing actor is a
normal state (nobody signed in): every check returns False and every list
query returns an empty list.

Checks of sensitive permissions are audited through the AuditEmitter:
a grant emits ``permission_granted``, a denial ``unauthorized_access``.
Everything else is side-effect free.

Usage:
    service = get_permission_service()

    service.has_permission(actor, "bench_resources", "edit", context)
    service.can_delete_vendor(actor, {"vendor_id": "v1"})
    service.accessible_menu_items(actor)

    match service.authorize(actor, Permission.VENDOR_DELETE):
        case Success():
            ...
        case Failure(error):
            raise HTTPException(403, error.message)
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from talentgate.application.services.audit_emitter import AuditEmitter
from talentgate.application.services.context_evaluator import ContextEvaluator
from talentgate.application.services.matrix_store import RolePermissionMatrixStore
from talentgate.core.enums import ErrorCode
from talentgate.core.errors import AuthorizationError, DomainError, ValidationError
from talentgate.core.result import Failure, Result, Success
from talentgate.domain.entities import (
    Actor,
    AuditEvent,
    AuditEventFilters,
    Decision,
    PermissionContext,
)
from talentgate.domain.enums import (
    Action,
    AuditEventType,
    MenuItem,
    Permission,
    Resource,
)
from talentgate.domain.policies import (
    APPROVAL_REQUIRED,
    MENU_ACCESS,
    VENDOR_HUB_ROUTES,
    Route,
    is_sensitive,
)
from talentgate.domain.protocols import AuditProtocol, LoggerProtocol

T = TypeVar("T")

type ContextInput = PermissionContext | Mapping[str, Any] | None

P = Permission


def _as_context(context: ContextInput) -> PermissionContext | None:
    if context is None or isinstance(context, PermissionContext):
        return context
    return PermissionContext.from_mapping(context)


class PermissionService:
    """Facade over the context evaluator, menus and audit trail.

    Dependencies (injected via constructor):
        - ContextEvaluator: Role gate and context narrowing
        - RolePermissionMatrixStore: Role metadata (display names)
        - AuditEmitter: Fire-and-forget audit writes
        - AuditProtocol: Audit trail queries
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        evaluator: ContextEvaluator,
        matrix_store: RolePermissionMatrixStore,
        audit_emitter: AuditEmitter,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._evaluator = evaluator
        self._store = matrix_store
        self._emitter = audit_emitter
        self._audit = audit
        self._logger = logger

    # =========================================================================
    # Generic checks
    # =========================================================================

    def has_permission(
        self,
        actor: Actor | None,
        resource: Resource | str,
        action: Action | str,
        context: ContextInput = None,
    ) -> bool:
        """Check ``resource:action`` for actor. Unknown pairs are denied."""
        permission = Permission.from_parts(resource, action)
        if permission is None:
            return False
        return self.check(actor, permission, context)

    def check(
        self,
        actor: Actor | None,
        permission: Permission | str,
        context: ContextInput = None,
    ) -> bool:
        """Typed check. Sensitive permissions are audited."""
        if actor is None:
            return False
        ctx = _as_context(context)
        decision = self._evaluator.explain(actor, permission, ctx)
        if decision.permission is not None and is_sensitive(decision.permission):
            self._audit_decision(actor, decision, ctx)
        return decision.allowed

    def has_any_permission(
        self,
        actor: Actor | None,
        permissions: Iterable[Permission | str],
        context: ContextInput = None,
    ) -> bool:
        """True when any of the permissions is granted.

        The whole check produces at most one audit event: the granting
        permission when it is sensitive, or a single ``unauthorized_access``
        when everything is denied and a sensitive permission was asked for.
        """
        if actor is None:
            return False
        ctx = _as_context(context)
        denied: list[Decision] = []
        for permission in permissions:
            decision = self._evaluator.explain(actor, permission, ctx)
            if decision.allowed:
                if decision.permission is not None and is_sensitive(decision.permission):
                    self._audit_decision(actor, decision, ctx)
                return True
            denied.append(decision)

        sensitive = [
            d for d in denied if d.permission is not None and is_sensitive(d.permission)
        ]
        if sensitive:
            any_of = [d.permission.value for d in denied if d.permission is not None]
            self._emit(
                AuditEventType.UNAUTHORIZED_ACCESS,
                actor,
                sensitive[0],
                ctx,
                {"any_of": any_of},
            )
        return False

    def has_all_permissions(
        self,
        actor: Actor | None,
        permissions: Iterable[Permission | str],
        context: ContextInput = None,
    ) -> bool:
        permissions = list(permissions)
        if actor is None or not permissions:
            return False
        return all(self.check(actor, p, context) for p in permissions)

    # =========================================================================
    # Recruiting / bench capabilities
    # =========================================================================

    def can_view_work_authorization(self, actor: Actor | None) -> bool:
        return self.check(actor, P.WORK_AUTHORIZATION_VIEW)

    def can_manage_bench_resources(self, actor: Actor | None) -> bool:
        return self.check(actor, P.BENCH_RESOURCES_EDIT)

    def can_create_bench_resource(self, actor: Actor | None) -> bool:
        return self.check(actor, P.BENCH_RESOURCES_CREATE)

    def can_update_bench_resource(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.BENCH_RESOURCES_EDIT, context)

    def can_delete_bench_resource(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.BENCH_RESOURCES_DELETE, context)

    def can_create_hotlists(self, actor: Actor | None) -> bool:
        return self.check(actor, P.HOTLISTS_CREATE)

    def can_create_hotlist(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.HOTLISTS_CREATE, context)

    def can_update_hotlist(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.HOTLISTS_EDIT, context)

    def can_delete_hotlist(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.HOTLISTS_DELETE, context)

    def can_view_analytics(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.ANALYTICS_VIEW, context)

    def can_manage_settings(self, actor: Actor | None) -> bool:
        return self.check(actor, P.SETTINGS_EDIT)

    def can_view_auto_enrollment_settings(self, actor: Actor | None) -> bool:
        return self.check(actor, P.SETTINGS_VIEW) and self.can_manage_settings(actor)

    def can_update_auto_enrollment_settings(self, actor: Actor | None) -> bool:
        return self.can_manage_settings(actor)

    # =========================================================================
    # Vendor hub capabilities
    # =========================================================================

    def can_edit_vendor(self, actor: Actor | None, context: ContextInput = None) -> bool:
        return self.check(actor, P.VENDOR_EDIT, context)

    def can_delete_vendor(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.VENDOR_DELETE, context)

    def can_validate_poc(self, actor: Actor | None, context: ContextInput = None) -> bool:
        return self.check(actor, P.POC_VALIDATE, context)

    def can_revoke_consent(
        self, actor: Actor | None, context: ContextInput = None
    ) -> bool:
        return self.check(actor, P.CONSENT_REVOKE, context)

    def can_view_audit(self, actor: Actor | None) -> bool:
        return self.check(actor, P.AUDIT_VIEW)

    def can_manage_users(self, actor: Actor | None) -> bool:
        return self.check(actor, P.ADMIN_USER_MANAGEMENT)

    # =========================================================================
    # Navigation (advisory, never audited)
    # =========================================================================

    def can_access_menu_item(
        self, actor: Actor | None, menu_item: MenuItem | str
    ) -> bool:
        """True when actor holds any permission guarding the menu item."""
        item = MenuItem.parse(menu_item)
        if actor is None or item is None:
            return False
        return any(self._role_allows(actor, p) for p in MENU_ACCESS.get(item, ()))

    def accessible_menu_items(self, actor: Actor | None) -> list[MenuItem]:
        return [item for item in MenuItem if self.can_access_menu_item(actor, item)]

    def available_routes(self, actor: Actor | None) -> list[Route]:
        if actor is None:
            return []
        return [r for r in VENDOR_HUB_ROUTES if self._role_allows(actor, r.permission)]

    # =========================================================================
    # Data filtering and introspection
    # =========================================================================

    def filter_bench_resources(
        self, actor: Actor | None, items: Iterable[T]
    ) -> list[T]:
        if actor is None:
            return []
        return self._evaluator.filter_by_ownership(actor, items, P.BENCH_RESOURCES_VIEW)

    def filter_hotlists(self, actor: Actor | None, items: Iterable[T]) -> list[T]:
        if actor is None:
            return []
        return self._evaluator.filter_by_ownership(actor, items, P.HOTLISTS_VIEW)

    def available_actions(
        self,
        actor: Actor | None,
        resource: Resource | str,
        context: ContextInput = None,
    ) -> list[Action]:
        """Actions the actor may perform on a resource, in vocabulary order."""
        if actor is None:
            return []
        try:
            parsed = Resource(resource)
        except ValueError:
            return []
        ctx = _as_context(context)
        return [
            p.action
            for p in Permission.for_resource(parsed)
            if self._evaluator.evaluate(actor, p, ctx)
        ]

    def requires_approval(self, permission: Permission | str) -> bool:
        return Permission.parse(permission) in APPROVAL_REQUIRED

    def describe_permission(self, permission: Permission | str) -> str:
        parsed = Permission.parse(permission)
        if parsed is None:
            return f"Unknown permission: {permission}"
        return parsed.description

    def get_role_display_name(self, role: object) -> str:
        return self._store.get_role_display_name(role)

    def permissions_for(self, actor: Actor | None) -> frozenset[Permission]:
        """Effective permissions of the actor's role (empty when anonymous)."""
        if actor is None:
            return frozenset()
        return self._store.get_permissions_for_role(actor.role)

    # =========================================================================
    # Sensitive actions and audit trail
    # =========================================================================

    def authorize(
        self,
        actor: Actor | None,
        permission: Permission | str,
        context: ContextInput = None,
        details: Mapping[str, Any] | None = None,
    ) -> Result[None, AuthorizationError]:
        """Validate an action before performing it.

        Every denial emits one ``unauthorized_access`` event; a grant of a
        sensitive permission emits one ``permission_granted`` event.

        Returns:
            Result[None, AuthorizationError]:
                - Success(None) if allowed
                - Failure(AuthorizationError) naming the required permission
        """
        ctx = _as_context(context)
        extra = dict(details or {})
        parsed = Permission.parse(permission)
        required = parsed.value if parsed is not None else str(permission)

        if actor is None:
            decision = Decision(False, parsed, "No signed-in actor")
            code = ErrorCode.NO_ACTOR
        else:
            decision = self._evaluator.explain(actor, permission, ctx)
            code = ErrorCode.PERMISSION_DENIED

        if decision.allowed:
            if parsed is not None and is_sensitive(parsed):
                self._emit(
                    AuditEventType.PERMISSION_GRANTED, actor, decision, ctx, extra
                )
            return Success(value=None)

        self._logger.warning(
            "authorization_denied",
            actor_id=actor.id if actor is not None else None,
            role=actor.role.value if actor is not None else None,
            permission=required,
            reason=decision.reason,
        )
        self._emit(
            AuditEventType.UNAUTHORIZED_ACCESS, actor, decision, ctx, extra, required
        )
        return Failure(
            error=AuthorizationError(
                code=code,
                message=f"Permission denied: requires '{required}'",
                required_permission=required,
                role=actor.role.value if actor is not None else None,
                details={"reason": decision.reason} if decision.reason else None,
            )
        )

    async def get_audit_events(
        self, actor: Actor | None, filters: AuditEventFilters | None = None
    ) -> Result[list[AuditEvent], DomainError]:
        """Query the audit trail. Requires ``audit:view``.

        Returns:
            Result[list[AuditEvent], DomainError]:
                - Success(events), newest first
                - Failure(AuthorizationError) without ``audit:view``
                - Failure(ValidationError) if date_from is after date_to
                - Failure(AuditError) if the sink fails
        """
        filters = filters or AuditEventFilters()
        if actor is None:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.NO_ACTOR,
                    message="Sign in to view audit logs",
                    required_permission=P.AUDIT_VIEW.value,
                )
            )
        if not self._role_allows(actor, P.AUDIT_VIEW):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message=f"Permission denied: requires '{P.AUDIT_VIEW.value}'",
                    required_permission=P.AUDIT_VIEW.value,
                    role=actor.role.value,
                )
            )
        if not filters.has_valid_range:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DATE_RANGE,
                    message="date_from must not be after date_to",
                    field="date_from",
                )
            )

        result = await self._audit.query(filters)
        if isinstance(result, Failure):
            self._logger.error(
                "audit_query_failed",
                actor_id=actor.id,
                code=result.error.code.value,
            )
        return result

    # =========================================================================
    # Internals
    # =========================================================================

    def _role_allows(self, actor: Actor, permission: Permission) -> bool:
        return permission in self._store.get_permissions_for_role(actor.role)

    def _audit_decision(
        self,
        actor: Actor,
        decision: Decision,
        context: PermissionContext | None,
    ) -> None:
        event_type = (
            AuditEventType.PERMISSION_GRANTED
            if decision.allowed
            else AuditEventType.UNAUTHORIZED_ACCESS
        )
        self._emit(event_type, actor, decision, context, {})

    def _emit(
        self,
        event_type: AuditEventType,
        actor: Actor | None,
        decision: Decision,
        context: PermissionContext | None,
        extra: dict[str, Any],
        attempted: str | None = None,
    ) -> None:
        permission = decision.permission
        attempted = permission.value if permission is not None else attempted
        details: dict[str, Any] = {**extra, "permission": attempted}
        if decision.reason:
            details["reason"] = decision.reason
        self._emitter.log_event(
            event_type,
            attempted or "unknown",
            details,
            actor=actor,
            resource_type=permission.resource.value if permission is not None else None,
            resource_id=context.resource_id if context is not None else None,
            success=decision.allowed,
            error_message=None if decision.allowed else decision.reason,
        )
