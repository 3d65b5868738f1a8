"""API tests for permission dependencies and endpoints.

Tests cover:
- get_current_actor() from headers and request.state
- require_permission() returns 401/403 and audits denials
- require_any_permission() allows access if any permission matches
- /api/v1/permissions/me and /api/v1/audit-events

Architecture:
- Fresh app per test with dependency overrides
- Real PermissionService wired to an in-memory audit sink
"""

from typing import Annotated
from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from talentgate.core.container import get_logger, get_permission_service
from talentgate.domain.entities import Actor, AuditEvent
from talentgate.domain.enums import AuditEventType, Permission
from talentgate.main import create_app
from talentgate.presentation.dependencies import (
    get_current_actor,
    require_any_permission,
    require_permission,
)


def _headers(role: str, actor_id: str = "u1", accounts: str = "") -> dict[str, str]:
    headers = {"X-Actor-Id": actor_id, "X-Actor-Role": role}
    if accounts:
        headers["X-Actor-Accounts"] = accounts
    return headers


@pytest.fixture
def app(permission_service, mock_logger) -> FastAPI:
    app = create_app()

    @app.delete("/test/vendors/{vendor_id}")
    async def delete_vendor(
        vendor_id: str,
        _: Annotated[None, Depends(require_permission(Permission.VENDOR_DELETE))],
    ):
        return {"deleted": vendor_id}

    @app.get("/test/reports")
    async def reports(
        _: Annotated[
            None,
            Depends(
                require_any_permission(
                    Permission.DASHBOARD_REPORTS, Permission.AUDIT_VIEW
                )
            ),
        ],
    ):
        return {"reports": []}

    @app.get("/test/whoami")
    async def whoami(actor: Annotated[Actor | None, Depends(get_current_actor)]):
        if actor is None:
            return {"actor": None}
        return {"actor": actor.id, "role": actor.role.value}

    app.dependency_overrides[get_permission_service] = lambda: permission_service
    app.dependency_overrides[get_logger] = lambda: mock_logger
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.mark.api
class TestGetCurrentActor:
    def test_anonymous(self, client):
        assert client.get("/test/whoami").json() == {"actor": None}

    def test_from_headers(self, client):
        response = client.get("/test/whoami", headers=_headers("vendor_manager"))

        assert response.json() == {"actor": "u1", "role": "vendor_manager"}

    def test_unknown_role_is_anonymous(self, client, mock_logger):
        response = client.get("/test/whoami", headers=_headers("superuser"))

        assert response.json() == {"actor": None}
        mock_logger.warning.assert_called_once()

    def test_request_state_actor(self, app):
        @app.middleware("http")
        async def set_actor(request: Request, call_next):
            request.state.actor = Actor.create(id="mw-1", role="compliance_officer")
            return await call_next(request)

        response = TestClient(app).get("/test/whoami", headers=_headers("viewer"))

        assert response.json() == {"actor": "mw-1", "role": "compliance_officer"}


@pytest.mark.api
class TestRequirePermission:
    def test_no_actor_is_401(self, client):
        response = client.delete("/test/vendors/v1")

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    def test_viewer_is_403(self, client):
        response = client.delete("/test/vendors/v1", headers=_headers("viewer"))

        assert response.status_code == 403
        assert response.json()["detail"] == (
            "Permission denied: requires 'vendor:delete'"
        )

    def test_vendor_admin_allowed(self, client):
        response = client.delete("/test/vendors/v1", headers=_headers("vendor_admin"))

        assert response.status_code == 200
        assert response.json() == {"deleted": "v1"}

    def test_denial_is_logged(self, client, mock_logger):
        client.delete("/test/vendors/v1", headers=_headers("viewer", "u9"))

        mock_logger.warning.assert_any_call(
            "authorization_denied",
            actor_id="u9",
            role="viewer",
            permission="vendor:delete",
            reason="Role 'viewer' lacks permission 'vendor:delete'",
        )


@pytest.mark.api
class TestRequireAnyPermission:
    def test_any_match_allows(self, client):
        response = client.get("/test/reports", headers=_headers("compliance_officer"))

        assert response.status_code == 200

    def test_no_match_is_403(self, client):
        response = client.get("/test/reports", headers=_headers("viewer"))

        assert response.status_code == 403
        assert response.json()["detail"] == (
            "Permission denied: requires one of [dashboard:reports, audit:view]"
        )


@pytest.mark.api
class TestPermissionsEndpoints:
    def test_my_permissions(self, client):
        response = client.get("/api/v1/permissions/me", headers=_headers("viewer"))

        assert response.status_code == 200
        body = response.json()
        assert body["role_display_name"] == "Viewer"
        assert body["permissions"] == [
            "communication:view",
            "dashboard:view",
            "poc:view",
            "vendor:view",
        ]
        assert body["menu_items"] == ["dashboard", "vendors", "pocs", "communication_logs"]
        assert [r["path"] for r in body["routes"]] == [
            "/vendor-hub/dashboard",
            "/vendor-hub/vendors",
            "/vendor-hub/pocs",
            "/vendor-hub/communication-logs",
        ]

    def test_my_permissions_requires_actor(self, client):
        assert client.get("/api/v1/permissions/me").status_code == 401

    def test_audit_events_forbidden_without_audit_view(self, client):
        response = client.get("/api/v1/audit-events", headers=_headers("viewer"))

        assert response.status_code == 403

    async def test_audit_events_listing(self, client, audit):
        await audit.record(
            AuditEvent.create(
                event_type=AuditEventType.UNAUTHORIZED_ACCESS,
                action="vendor:delete",
                actor_id="u9",
                actor_roles=("viewer",),
                success=False,
            )
        )
        await audit.record(
            AuditEvent.create(
                event_type=AuditEventType.SETTINGS_CHANGED,
                action="settings_changed",
                actor_id="u1",
            )
        )

        response = client.get(
            "/api/v1/audit-events",
            params={"event_type": "unauthorized_access"},
            headers=_headers("compliance_officer"),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 1
        assert body["events"][0]["actor_id"] == "u9"
        assert body["events"][0]["security_level"] == "restricted"

    def test_audit_events_bad_range(self, client):
        response = client.get(
            "/api/v1/audit-events",
            params={"date_from": "2026-02-01T00:00:00Z", "date_to": "2026-01-01T00:00:00Z"},
            headers=_headers("admin"),
        )

        assert response.status_code == 400

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
