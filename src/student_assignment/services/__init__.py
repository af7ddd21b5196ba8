"""
student_assignment.services

Service layer (transaction owners).

Responsibilities:
- Relationship reconciliation (names -> existing-or-new counterpart entities).
- Student/Project create/read/update/delete orchestration over the repositories.
"""

from student_assignment.services.projects import ProjectService
from student_assignment.services.reconciler import Reconciler
from student_assignment.services.students import StudentService

__all__ = ["ProjectService", "Reconciler", "StudentService"]


# --- Module Notes -----------------------------------------------------------
# Services are constructed per request with explicit collaborators (see `api.deps`).
