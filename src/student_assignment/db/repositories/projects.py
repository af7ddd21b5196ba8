"""
student_assignment.db.repositories.projects

Repository for `Project` entities.

Responsibilities:
- Bind the generic entity store to Project (counterpart: Student).
- Answer the project-side association queries.
"""

from __future__ import annotations

import uuid

from student_assignment.db.models import Project, Student
from student_assignment.db.repositories.base import EntityRepo


class ProjectRepo(EntityRepo[Project, Student]):
    model = Project
    counterpart = Student
    relation = "students"
    back_relation = "projects"
    join_column = "project_id"
    kind = "project"

    async def get_students(self, project_id: uuid.UUID) -> list[Student]:
        return await self.get_counterparts_of(project_id)

    async def get_students_count(self, project_id: uuid.UUID) -> int:
        return await self.count_counterparts(project_id)
