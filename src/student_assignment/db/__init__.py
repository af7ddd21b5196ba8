"""
student_assignment.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, error translation, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services only see repositories and the `transaction` scope; swapping the backend
# means changing `database_url`, not service code.
