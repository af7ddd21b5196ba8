"""
student_assignment.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and DB sessions.
- Build request-scoped services with explicit constructor arguments.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from student_assignment.db.repositories.projects import ProjectRepo
from student_assignment.db.repositories.students import StudentRepo
from student_assignment.services.projects import ProjectService
from student_assignment.services.students import StudentService
from student_assignment.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The settings the app was built with (see `api.app.create_app`).
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created in the app lifespan (`api.app.create_app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is owned by the service layer.
    async with session_factory() as session:
        yield session


def student_service(session: AsyncSession = Depends(db_session)) -> StudentService:
    return StudentService(
        session=session,
        students=StudentRepo(session),
        projects=ProjectRepo(session),
    )


def project_service(session: AsyncSession = Depends(db_session)) -> ProjectService:
    return ProjectService(
        session=session,
        projects=ProjectRepo(session),
        students=StudentRepo(session),
    )


# --- Module Notes -----------------------------------------------------------
# Both repositories of a service share one session, so reconcile + attach commit together.
