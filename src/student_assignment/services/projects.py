"""
student_assignment.services.projects

Project service.

Responsibilities:
- Project CRUD with student linking by name.
- Project-side cross queries (students, students count).
"""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from student_assignment.db.models import Project, Student
from student_assignment.db.repositories.projects import ProjectRepo
from student_assignment.db.repositories.students import StudentRepo
from student_assignment.services.base import EntityService
from student_assignment.services.reconciler import Reconciler


class ProjectService(EntityService[Project, Student]):
    def __init__(
        self,
        *,
        session: AsyncSession,
        projects: ProjectRepo,
        students: StudentRepo,
        reconciler: Reconciler[Student] | None = None,
    ) -> None:
        super().__init__(
            session=session, store=projects, counterparts=students, reconciler=reconciler
        )

    async def get_students(self, project_id: uuid.UUID) -> list[Student]:
        return await self.get_counterparts_of(project_id)

    async def get_students_count(self, project_id: uuid.UUID) -> int:
        return await self.count_counterparts(project_id)
