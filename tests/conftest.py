"""
tests.conftest

Shared fixtures: a per-test SQLite file database, session factory, and service builders.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from student_assignment.db.init_db import init_db
from student_assignment.db.repositories.projects import ProjectRepo
from student_assignment.db.repositories.students import StudentRepo
from student_assignment.db.session import create_engine, create_sessionmaker
from student_assignment.services.projects import ProjectService
from student_assignment.services.students import StudentService
from student_assignment.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    # File DB (not :memory:) so separate sessions get separate connections.
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_factory() as s:
        yield s


def student_service(session: AsyncSession, **overrides: Any) -> StudentService:
    return StudentService(
        session=session,
        students=overrides.get("students", StudentRepo(session)),
        projects=overrides.get("projects", ProjectRepo(session)),
    )


def project_service(session: AsyncSession, **overrides: Any) -> ProjectService:
    return ProjectService(
        session=session,
        projects=overrides.get("projects", ProjectRepo(session)),
        students=overrides.get("students", StudentRepo(session)),
    )


async def count_rows(session: AsyncSession, model: type, name: str | None = None) -> int:
    stmt = select(func.count()).select_from(model)
    if name is not None:
        stmt = stmt.where(model.name == name)
    return int((await session.execute(stmt)).scalar_one())
