"""
student_assignment.db.models

Persistence schema for students, projects, and their many-to-many association.

Responsibilities:
- Define the two entity tables with a UNIQUE name column each.
- Define the `project_students` join table as the single source of truth for links.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Column, ForeignKey, String, Table, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from student_assignment.db.base import Base

NAME_MAX_LENGTH = 256

# Composite primary key: a (project, student) pair exists at most once.
project_students = Table(
    "project_students",
    Base.metadata,
    Column(
        "project_id",
        SAUuid(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "student_id",
        SAUuid(as_uuid=True),
        ForeignKey("students.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Student(Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    # Natural key; the unique constraint is the authoritative duplicate guard.
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False, unique=True)

    projects: Mapped[list[Project]] = relationship(
        secondary=project_students, back_populates="students"
    )

    def __repr__(self) -> str:
        return f"Student(id={self.id!s}, name={self.name!r})"


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False, unique=True)

    students: Mapped[list[Student]] = relationship(
        secondary=project_students, back_populates="projects"
    )

    def __repr__(self) -> str:
        return f"Project(id={self.id!s}, name={self.name!r})"


# --- Module Notes -----------------------------------------------------------
# Relationships are never lazy-loaded under the async session; repositories eager-load
# (selectinload) whatever the API layer projects.
