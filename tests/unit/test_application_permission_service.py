"""Tests for talentgate/application/services/permission_service.py.

Verifies the PermissionService facade:
- Generic checks with a missing actor
- Named capabilities per role
- Menu and route visibility
- Data filtering and introspection
- authorize() results and audit events
- Audit trail queries
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from talentgate.core.enums import ErrorCode
from talentgate.core.errors import AuthorizationError, ValidationError
from talentgate.core.result import Failure, Success
from talentgate.domain.entities import AuditEventFilters
from talentgate.domain.enums import (
    Action,
    AuditEventType,
    MenuItem,
    Permission,
    Role,
    SecurityLevel,
)
from talentgate.domain.errors import AuditError
from tests.utils.utils import bench_record, make_actor

P = Permission


@pytest.mark.unit
class TestGenericChecks:
    def test_no_actor_is_denied_everywhere(self, permission_service):
        assert permission_service.has_permission(None, "vendor", "view") is False
        assert permission_service.check(None, P.VENDOR_VIEW) is False
        assert permission_service.has_any_permission(None, [P.VENDOR_VIEW]) is False
        assert permission_service.accessible_menu_items(None) == []
        assert permission_service.available_routes(None) == []
        assert permission_service.available_actions(None, "vendor") == []
        assert permission_service.filter_bench_resources(None, [{"id": 1}]) == []

    def test_has_permission_with_parts(self, permission_service):
        actor = make_actor(Role.VENDOR_COORDINATOR)

        assert permission_service.has_permission(actor, "poc", "validate") is True
        assert permission_service.has_permission(actor, "vendor", "delete") is False

    def test_unknown_pair_is_denied(self, permission_service):
        actor = make_actor(Role.ADMIN)

        assert permission_service.has_permission(actor, "vendor", "approve") is False
        assert permission_service.has_permission(actor, "payroll", "view") is False

    def test_has_permission_with_mapping_context(self, permission_service):
        actor = make_actor(Role.BENCH_SALES, "u1", ["a1"])

        assert permission_service.has_permission(
            actor, "bench_resources", "edit", {"employee_id": "u2", "account_id": "a1"}
        )
        assert not permission_service.has_permission(
            actor, "bench_resources", "edit", {"employee_id": "u2", "account_id": "a9"}
        )

    def test_has_permission_with_camel_case_context(self, permission_service):
        actor = make_actor(Role.BENCH_SALES, "u1", ["a1"])

        assert permission_service.has_permission(
            actor, "bench_resources", "edit", {"ownerId": "u2", "accountId": "a1"}
        )
        assert permission_service.has_permission(
            actor, "bench_resources", "edit", {"employeeId": "u1"}
        )
        assert permission_service.has_permission(
            actor, "hotlists", "edit", {"createdBy": "u1"}
        )
        assert not permission_service.has_permission(
            actor, "hotlists", "edit", {"createdBy": "u2", "accountId": "a9"}
        )

    def test_any_and_all(self, permission_service):
        actor = make_actor(Role.VIEWER)

        assert permission_service.has_any_permission(actor, [P.VENDOR_DELETE, P.VENDOR_VIEW])
        assert not permission_service.has_all_permissions(
            actor, [P.VENDOR_DELETE, P.VENDOR_VIEW]
        )
        assert permission_service.has_all_permissions(actor, [P.VENDOR_VIEW, P.POC_VIEW])
        assert not permission_service.has_all_permissions(actor, [])


@pytest.mark.unit
class TestNamedCapabilities:
    def test_bench_capabilities(self, permission_service):
        sales = make_actor(Role.BENCH_SALES, "u1", ["a1"])
        recruiter = make_actor(Role.RECRUITER)

        assert permission_service.can_manage_bench_resources(sales)
        assert permission_service.can_create_bench_resource(sales)
        assert permission_service.can_update_bench_resource(
            sales, bench_record(owner="u2", account="a1")
        )
        assert not permission_service.can_update_bench_resource(
            sales, bench_record(owner="u2", account="a9")
        )
        assert not permission_service.can_delete_bench_resource(sales)
        assert not permission_service.can_manage_bench_resources(recruiter)
        assert permission_service.can_view_work_authorization(sales)
        assert not permission_service.can_view_work_authorization(recruiter)

    def test_hotlist_capabilities(self, permission_service):
        manager = make_actor(Role.ACCOUNT_MANAGER, "u1", ["a1"])

        assert permission_service.can_create_hotlists(manager)
        assert permission_service.can_create_hotlist(manager, {"account_id": "a1"})
        assert not permission_service.can_create_hotlist(manager, {"account_id": "a2"})
        assert not permission_service.can_update_hotlist(manager, {"account_id": "a1"})
        assert not permission_service.can_delete_hotlist(manager, {"account_id": "a1"})

    def test_settings_capabilities(self, permission_service):
        cio = make_actor(Role.CIO_CTO)
        sales = make_actor(Role.BENCH_SALES)

        assert permission_service.can_manage_settings(cio)
        assert permission_service.can_view_auto_enrollment_settings(cio)
        assert permission_service.can_update_auto_enrollment_settings(cio)
        assert not permission_service.can_view_auto_enrollment_settings(sales)

    def test_analytics_narrowed_for_account_manager(self, permission_service):
        manager = make_actor(Role.ACCOUNT_MANAGER, "u1", ["a1"])

        assert permission_service.can_view_analytics(manager)
        assert not permission_service.can_view_analytics(manager, {"account_id": "a2"})

    def test_vendor_hub_capabilities(self, permission_service):
        coordinator = make_actor(Role.VENDOR_COORDINATOR)
        compliance = make_actor(Role.COMPLIANCE_OFFICER)
        vendor_admin = make_actor(Role.VENDOR_ADMIN)

        assert permission_service.can_edit_vendor(coordinator)
        assert permission_service.can_validate_poc(coordinator)
        assert not permission_service.can_delete_vendor(coordinator)
        assert permission_service.can_revoke_consent(compliance)
        assert permission_service.can_view_audit(compliance)
        assert not permission_service.can_view_audit(coordinator)
        assert permission_service.can_manage_users(vendor_admin)
        assert not permission_service.can_manage_users(compliance)


@pytest.mark.unit
class TestNavigation:
    def test_settings_menu(self, permission_service):
        assert not permission_service.can_access_menu_item(
            make_actor(Role.ACCOUNT_MANAGER), MenuItem.SETTINGS
        )
        assert permission_service.can_access_menu_item(
            make_actor(Role.VENDOR_ADMIN), "settings"
        )
        assert permission_service.can_access_menu_item(
            make_actor(Role.CIO_CTO), MenuItem.SETTINGS
        )

    def test_unknown_menu_item(self, permission_service):
        assert not permission_service.can_access_menu_item(make_actor(Role.ADMIN), "billing")

    def test_accessible_menu_items_for_viewer(self, permission_service):
        assert permission_service.accessible_menu_items(make_actor(Role.VIEWER)) == [
            MenuItem.DASHBOARD,
            MenuItem.VENDORS,
            MenuItem.POCS,
            MenuItem.COMMUNICATION_LOGS,
        ]

    def test_admin_sees_every_menu_item(self, permission_service):
        assert permission_service.accessible_menu_items(make_actor(Role.ADMIN)) == list(
            MenuItem
        )

    def test_available_routes(self, permission_service):
        paths = [r.path for r in permission_service.available_routes(make_actor(Role.COMPLIANCE_OFFICER))]

        assert "/vendor-hub/audit-logs" in paths
        assert "/vendor-hub/reports" in paths
        assert "/vendor-hub/settings" not in paths

    def test_navigation_is_not_audited(self, permission_service, emitter):
        permission_service.accessible_menu_items(make_actor(Role.ADMIN))
        permission_service.available_routes(make_actor(Role.ADMIN))

        assert emitter.pending == 0


@pytest.mark.unit
class TestIntrospection:
    def test_available_actions(self, permission_service):
        actions = permission_service.available_actions(make_actor(Role.VIEWER), "vendor")

        assert actions == [Action.VIEW]

    def test_available_actions_respect_context(self, permission_service):
        actor = make_actor(Role.BENCH_SALES, "u1", ["a1"])

        foreign = permission_service.available_actions(
            actor, "bench_resources", {"employee_id": "u2", "account_id": "a9"}
        )

        assert foreign == [Action.VIEW, Action.CREATE]

    def test_available_actions_unknown_resource(self, permission_service):
        assert permission_service.available_actions(make_actor(Role.ADMIN), "payroll") == []

    def test_filter_hotlists(self, permission_service):
        items = [{"created_by": "u1"}, {"created_by": "u2"}]

        assert permission_service.filter_hotlists(make_actor(Role.HR), items) == []
        assert permission_service.filter_hotlists(make_actor(Role.RECRUITER), items) == items

    def test_filter_bench_resources_reads_camel_case_records(self, permission_service):
        items = [{"employeeId": "u1"}, {"employeeId": "u2"}, {"userId": "u1"}]

        assert permission_service.filter_bench_resources(
            make_actor(Role.EMPLOYEE, "u1"), items
        ) == [{"employeeId": "u1"}, {"userId": "u1"}]

    def test_requires_approval(self, permission_service):
        assert permission_service.requires_approval(P.VENDOR_DELETE)
        assert permission_service.requires_approval("admin:settings")
        assert not permission_service.requires_approval(P.HOTLISTS_DELETE)
        assert not permission_service.requires_approval("bogus")

    def test_describe_permission(self, permission_service):
        assert permission_service.describe_permission("vendor:delete") == "Delete vendors"
        assert permission_service.describe_permission("bogus") == "Unknown permission: bogus"

    def test_role_display_name(self, permission_service):
        assert permission_service.get_role_display_name("hr_manager") == "HR Manager"
        assert permission_service.get_role_display_name("ghost") == "ghost"

    def test_permissions_for(self, permission_service, matrix_store):
        actor = make_actor(Role.POC_MANAGER)

        assert permission_service.permissions_for(actor) == (
            matrix_store.get_permissions_for_role(Role.POC_MANAGER)
        )
        assert permission_service.permissions_for(None) == frozenset()


@pytest.mark.unit
class TestAuthorize:
    async def test_denied_delete_emits_one_unauthorized_event(
        self, permission_service, emitter, audit
    ):
        actor = make_actor(Role.VIEWER, "u9")

        result = permission_service.authorize(actor, P.VENDOR_DELETE, {"vendor_id": "v1"})
        await emitter.drain()

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert result.error.message == "Permission denied: requires 'vendor:delete'"
        assert result.error.required_permission == "vendor:delete"

        [event] = audit.events
        assert event.event_type == AuditEventType.UNAUTHORIZED_ACCESS
        assert event.success is False
        assert event.actor_id == "u9"
        assert event.actor_roles == ("viewer",)
        assert event.details["permission"] == "vendor:delete"
        assert event.details["reason"]
        assert event.security_level == SecurityLevel.RESTRICTED

    async def test_sensitive_grant_emits_permission_granted(
        self, permission_service, emitter, audit
    ):
        actor = make_actor(Role.ADMIN)

        result = permission_service.authorize(
            actor, P.VENDOR_DELETE, {"resource_id": "v1"}, details={"ticket": "T-1"}
        )
        await emitter.drain()

        assert isinstance(result, Success)
        [event] = audit.events
        assert event.event_type == AuditEventType.PERMISSION_GRANTED
        assert event.resource_type == "vendor"
        assert event.resource_id == "v1"
        assert event.details == {"ticket": "T-1", "permission": "vendor:delete"}

    async def test_plain_grant_is_not_audited(self, permission_service, emitter, audit):
        result = permission_service.authorize(make_actor(Role.VIEWER), P.VENDOR_VIEW)
        await emitter.drain()

        assert isinstance(result, Success)
        assert audit.events == ()

    async def test_denied_plain_permission_is_audited(
        self, permission_service, emitter, audit
    ):
        result = permission_service.authorize(make_actor(Role.VIEWER), P.VENDOR_EDIT)
        await emitter.drain()

        assert isinstance(result, Failure)
        assert [e.event_type for e in audit.events] == [AuditEventType.UNAUTHORIZED_ACCESS]

    async def test_no_actor(self, permission_service, emitter, audit):
        result = permission_service.authorize(None, P.AUDIT_VIEW)
        await emitter.drain()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NO_ACTOR
        [event] = audit.events
        assert event.actor_id is None
        assert event.actor_roles == ()

    async def test_unknown_permission(self, permission_service, emitter, audit):
        result = permission_service.authorize(make_actor(Role.ADMIN), "vendor:fly")
        await emitter.drain()

        assert isinstance(result, Failure)
        assert result.error.message == "Permission denied: requires 'vendor:fly'"
        assert audit.events[0].details["permission"] == "vendor:fly"

    def test_denial_is_logged(self, permission_service, mock_logger):
        permission_service.authorize(make_actor(Role.VIEWER), P.VENDOR_DELETE)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args == ("authorization_denied",)


@pytest.mark.unit
class TestCheckAuditing:
    async def test_sensitive_check_denial_is_audited_once(
        self, permission_service, emitter, audit
    ):
        assert not permission_service.can_delete_vendor(make_actor(Role.VIEWER))
        await emitter.drain()

        assert [e.event_type for e in audit.events] == [AuditEventType.UNAUTHORIZED_ACCESS]

    async def test_any_of_denial_is_audited_once(
        self, permission_service, emitter, audit
    ):
        allowed = permission_service.has_any_permission(
            make_actor(Role.VIEWER), [P.VENDOR_DELETE, P.POC_DELETE, P.VENDOR_EDIT]
        )
        await emitter.drain()

        assert allowed is False
        [event] = audit.events
        assert event.event_type == AuditEventType.UNAUTHORIZED_ACCESS
        assert event.details["permission"] == "vendor:delete"
        assert event.details["any_of"] == ["vendor:delete", "poc:delete", "vendor:edit"]

    async def test_any_of_grant_audits_only_granting_permission(
        self, permission_service, emitter, audit
    ):
        allowed = permission_service.has_any_permission(
            make_actor(Role.ADMIN), [P.VENDOR_DELETE, P.POC_DELETE]
        )
        await emitter.drain()

        assert allowed is True
        [event] = audit.events
        assert event.event_type == AuditEventType.PERMISSION_GRANTED
        assert event.action == "vendor:delete"

    async def test_any_of_without_sensitive_is_not_audited(
        self, permission_service, emitter, audit
    ):
        permission_service.has_any_permission(
            make_actor(Role.VIEWER), [P.VENDOR_EDIT, P.POC_EDIT]
        )
        await emitter.drain()

        assert audit.events == ()

    async def test_plain_check_is_not_audited(self, permission_service, emitter, audit):
        permission_service.can_edit_vendor(make_actor(Role.VIEWER))
        await emitter.drain()

        assert audit.events == ()

    async def test_audit_failure_does_not_change_decision(
        self, permission_service, audit, emitter
    ):
        audit.record = AsyncMock(side_effect=RuntimeError("sink down"))

        allowed = permission_service.can_delete_vendor(make_actor(Role.ADMIN))
        await emitter.drain()

        assert allowed is True


@pytest.mark.unit
class TestGetAuditEvents:
    async def test_requires_audit_view(self, permission_service):
        result = await permission_service.get_audit_events(make_actor(Role.VIEWER))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert "audit:view" in result.error.message

    async def test_requires_actor(self, permission_service):
        result = await permission_service.get_audit_events(None)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NO_ACTOR

    async def test_rejects_inverted_date_range(self, permission_service):
        now = datetime.now(UTC)
        filters = AuditEventFilters(date_from=now, date_to=now - timedelta(days=1))

        result = await permission_service.get_audit_events(
            make_actor(Role.COMPLIANCE_OFFICER), filters
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_DATE_RANGE

    async def test_returns_events_newest_first(self, permission_service, emitter):
        permission_service.authorize(make_actor(Role.VIEWER, "u1"), P.VENDOR_DELETE)
        permission_service.authorize(make_actor(Role.VIEWER, "u2"), P.POC_DELETE)
        await emitter.drain()

        result = await permission_service.get_audit_events(
            make_actor(Role.COMPLIANCE_OFFICER),
            AuditEventFilters(event_type=AuditEventType.UNAUTHORIZED_ACCESS),
        )

        assert isinstance(result, Success)
        assert [e.actor_id for e in result.value] == ["u2", "u1"]

    async def test_sink_failure_is_returned_and_logged(
        self, permission_service, audit, mock_logger
    ):
        error = AuditError(code=ErrorCode.AUDIT_QUERY_FAILED, message="down")
        audit.query = AsyncMock(return_value=Failure(error=error))

        result = await permission_service.get_audit_events(make_actor(Role.ADMIN))

        assert result == Failure(error=error)
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args == ("audit_query_failed",)
