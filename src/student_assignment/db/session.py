"""
student_assignment.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from settings.
- Create the async sessionmaker with safe defaults.
- Provide the commit-or-rollback scope that wraps every multi-step write.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from student_assignment.db.errors import translate_store_errors
from student_assignment.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    engine = create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ignores REFERENCES clauses unless enabled per connection; without it a
    # join row could point at a student deleted by a concurrent request.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps returned entities readable after the commit
    # (no lazy loads once the unit of work is closed).
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@asynccontextmanager
async def transaction(session: AsyncSession, *, kind: str, operation: str) -> AsyncIterator[AsyncSession]:
    """
    Scoped unit of work: commit when the block exits normally, roll back on any
    exception (cancellation included) and re-raise.

        async with transaction(session, kind="student", operation="create"):
            ...
    """

    try:
        yield session
        with translate_store_errors(kind, f"{operation} commit"):
            await session.commit()
    except BaseException:
        await session.rollback()
        raise


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Explicit session scope for non-FastAPI contexts (scripts, tests).
    In the API layer this is managed via FastAPI dependencies.
    """

    async with session_factory() as session:
        yield session


# --- Module Notes -----------------------------------------------------------
# The API layer uses FastAPI dependencies for session scoping (`api.deps.db_session`);
# services own the `transaction` boundaries.
