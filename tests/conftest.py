"""Pytest configuration and shared fixtures.

Provides:
- Matrix store compiled through the real Casbin compiler
- In-memory audit sink and emitter
- A fully wired PermissionService
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from talentgate.application.services import (
    AuditEmitter,
    ContextEvaluator,
    PermissionService,
    RolePermissionMatrixStore,
)
from talentgate.infrastructure.audit import InMemoryAuditAdapter
from talentgate.infrastructure.authorization import CasbinPolicyCompiler


@pytest.fixture
def mock_logger() -> MagicMock:
    """Mock LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def compiler() -> CasbinPolicyCompiler:
    return CasbinPolicyCompiler()


@pytest.fixture
def matrix_store(compiler, mock_logger) -> RolePermissionMatrixStore:
    """Matrix store built from the static role definitions."""
    return RolePermissionMatrixStore(compiler, logger=mock_logger)


@pytest.fixture
def evaluator(matrix_store, mock_logger) -> ContextEvaluator:
    return ContextEvaluator(matrix_store, logger=mock_logger)


@pytest.fixture
def audit() -> InMemoryAuditAdapter:
    return InMemoryAuditAdapter()


@pytest.fixture
def emitter(audit, mock_logger) -> AuditEmitter:
    return AuditEmitter(audit, mock_logger, timeout_seconds=1.0)


@pytest.fixture
def permission_service(
    evaluator, matrix_store, emitter, audit, mock_logger
) -> PermissionService:
    """PermissionService wired with real collaborators and a mock logger."""
    return PermissionService(
        evaluator=evaluator,
        matrix_store=matrix_store,
        audit_emitter=emitter,
        audit=audit,
        logger=mock_logger,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real database"
    )
    config.addinivalue_line("markers", "api: API tests through FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
