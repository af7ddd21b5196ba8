"""
student_assignment.services.students

Student service.

Responsibilities:
- Student CRUD with project linking by name.
- Student-side cross queries (projects, projects count).
"""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from student_assignment.db.models import Project, Student
from student_assignment.db.repositories.projects import ProjectRepo
from student_assignment.db.repositories.students import StudentRepo
from student_assignment.services.base import EntityService
from student_assignment.services.reconciler import Reconciler


class StudentService(EntityService[Student, Project]):
    def __init__(
        self,
        *,
        session: AsyncSession,
        students: StudentRepo,
        projects: ProjectRepo,
        reconciler: Reconciler[Project] | None = None,
    ) -> None:
        super().__init__(
            session=session, store=students, counterparts=projects, reconciler=reconciler
        )

    async def get_projects(self, student_id: uuid.UUID) -> list[Project]:
        return await self.get_counterparts_of(student_id)

    async def get_projects_count(self, student_id: uuid.UUID) -> int:
        # Unknown student -> 0, not NotFound.
        return await self.count_counterparts(student_id)
