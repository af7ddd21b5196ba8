"""
student_assignment.api.schemas

Request/response models and the entity -> transfer conversions.

Responsibilities:
- Define the JSON shapes of the students/projects resources.
- Project ORM entities into responses that carry counterpart *names* only, so a
  response never expands the association graph.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from student_assignment.db.models import Project, Student


class StudentIn(BaseModel):
    name: str
    project_names: list[str] = Field(default_factory=list)


class StudentUpdate(StudentIn):
    # Must match the id in the path.
    id: uuid.UUID


class StudentOut(BaseModel):
    id: uuid.UUID
    name: str
    project_names: list[str]


class StudentPage(BaseModel):
    page_number: int
    page_size: int
    # Number of students on this page.
    count: int
    students: list[StudentOut]


class ProjectIn(BaseModel):
    name: str
    student_names: list[str] = Field(default_factory=list)


class ProjectUpdate(ProjectIn):
    id: uuid.UUID


class ProjectOut(BaseModel):
    id: uuid.UUID
    name: str
    student_names: list[str]


class ProjectPage(BaseModel):
    page_number: int
    page_size: int
    count: int
    projects: list[ProjectOut]


def to_student_out(student: Student) -> StudentOut:
    return StudentOut(
        id=student.id,
        name=student.name,
        project_names=sorted(p.name for p in student.projects),
    )


def to_project_out(project: Project) -> ProjectOut:
    return ProjectOut(
        id=project.id,
        name=project.name,
        student_names=sorted(s.name for s in project.students),
    )


# --- Module Notes -----------------------------------------------------------
# Conversions read only already-loaded collections; repositories eager-load them.
