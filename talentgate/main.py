"""FastAPI application entry point.

Lifespan:
    - Startup: build the matrix, bind the audit emitter to the loop, merge
      stored role grants if configured
    - Shutdown: flush pending audit writes, dispose the database engine
"""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from talentgate.core.config import get_settings
from talentgate.presentation.routers import (
    permissions_router,
    roles_router,
    system_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from talentgate.core.container import (
        get_audit_emitter,
        get_database,
        get_logger,
        get_matrix_store,
        init_role_grants,
        shutdown_audit,
    )

    settings = get_settings()
    get_matrix_store()
    get_audit_emitter().bind_loop(asyncio.get_running_loop())
    await init_role_grants()
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        audit_backend=settings.audit_backend,
        role_grants_source=settings.role_grants_source,
    )

    yield

    await shutdown_audit()
    if settings.database_url:
        await get_database().close()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Role-based authorization core for the recruiting and vendor hub",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(system_router)
    app.include_router(permissions_router)
    app.include_router(roles_router)
    return app


app = create_app()
