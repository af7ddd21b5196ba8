"""
student_assignment.db.repositories

Repository package.

Responsibilities:
- Group the entity stores for students and projects.
"""

from student_assignment.db.repositories.projects import ProjectRepo
from student_assignment.db.repositories.students import StudentRepo

__all__ = ["ProjectRepo", "StudentRepo"]


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; reconciliation and transactions live in services.
