"""
student_assignment.errors

Typed error taxonomy shared by the store, service, and API layers.

Responsibilities:
- Give callers error kinds to match on instead of message strings.
- Keep the original persistence-engine cause attached to store failures.

Mapping at the HTTP boundary (see `api.errors`):
- InvalidArgument -> 400
- NotFound        -> 404
- Conflict        -> 409
- StoreError      -> 500 (no internal detail in the body)
"""

from __future__ import annotations


class StudentAssignmentError(Exception):
    """Base class for all domain errors raised by this package."""


class InvalidArgument(StudentAssignmentError):
    pass


class NotFound(StudentAssignmentError):
    def __init__(self, kind: str, entity_id: object) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class StoreError(StudentAssignmentError):
    """
    Persistence-engine failure wrapped with context (entity kind + operation).
    `cause` is the original exception and is also chained via `__cause__`.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class Conflict(StoreError):
    # Uniqueness violation (e.g. two writers creating the same name).
    pass


# --- Module Notes -----------------------------------------------------------
# Conflict subclasses StoreError so generic store-failure handling still catches it,
# while the API layer can answer 409 instead of 500.
