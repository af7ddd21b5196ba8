"""
student_assignment.db.repositories.students

Repository for `Student` entities.

Responsibilities:
- Bind the generic entity store to Student (counterpart: Project).
- Answer the student-side association queries.
"""

from __future__ import annotations

import uuid

from student_assignment.db.models import Project, Student
from student_assignment.db.repositories.base import EntityRepo


class StudentRepo(EntityRepo[Student, Project]):
    model = Student
    counterpart = Project
    relation = "projects"
    back_relation = "students"
    join_column = "student_id"
    kind = "student"

    async def get_projects(self, student_id: uuid.UUID) -> list[Project]:
        return await self.get_counterparts_of(student_id)

    async def get_projects_count(self, student_id: uuid.UUID) -> int:
        # 0 (not an error) for a student that does not exist.
        return await self.count_counterparts(student_id)
