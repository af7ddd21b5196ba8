"""
student_assignment.api.app

FastAPI app factory for the Student / Project assignment service.

Responsibilities:
- Build the FastAPI application and register routers, middleware, error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from student_assignment import __version__
from student_assignment.api.errors import register_error_handlers
from student_assignment.api.routers.health import router as health_router
from student_assignment.api.routers.projects import router as projects_router
from student_assignment.api.routers.students import router as students_router
from student_assignment.db.init_db import init_db
from student_assignment.db.session import create_engine, create_sessionmaker
from student_assignment.observability.logging import configure_logging, get_logger
from student_assignment.observability.middleware import RequestContextMiddleware
from student_assignment.settings import Settings, get_settings

log = get_logger(__name__)


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings if settings is not None else get_settings()
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One engine + sessionmaker per process; routers get sessions via `api.deps`.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod runs Alembic migrations instead.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Student Assignment API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(students_router)
    app.include_router(projects_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; business logic lives in services and repositories.
