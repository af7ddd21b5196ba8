"""
student_assignment.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the students/projects/association tables for local development and tests.
- Keep production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from student_assignment.db import models  # noqa: F401  # registers tables on Base.metadata
from student_assignment.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Production runs `alembic upgrade head` instead.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(engine: AsyncEngine) -> None:
    # Test teardown helper.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# --- Module Notes -----------------------------------------------------------
# The unique constraints on `name` are part of metadata, so create_all and the
# initial Alembic revision produce the same duplicate guard.
