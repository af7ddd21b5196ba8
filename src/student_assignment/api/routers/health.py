"""
student_assignment.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that checks the entity tables are reachable.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from student_assignment.api.deps import db_session
from student_assignment.db.errors import translate_store_errors
from student_assignment.db.models import Project, Student

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, object]:
    # Fails with StoreError (-> 500) if the database or schema is unavailable.
    with translate_store_errors("health", "readiness"):
        students = (await session.execute(select(func.count()).select_from(Student))).scalar_one()
        projects = (await session.execute(select(func.count()).select_from(Project))).scalar_one()
    return {"status": "ready", "students": students, "projects": projects}
