"""
student_assignment.db.errors

Translation of SQLAlchemy failures into the domain error taxonomy.

Responsibilities:
- Map uniqueness/integrity violations to `Conflict`.
- Wrap every other engine failure in `StoreError` with entity/operation context.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from student_assignment.errors import Conflict, StoreError
from student_assignment.observability.logging import get_logger

log = get_logger(__name__)


@contextmanager
def translate_store_errors(kind: str, operation: str) -> Iterator[None]:
    """
    Usage:

        with translate_store_errors("student", "add"):
            await session.flush()
    """

    try:
        yield
    except IntegrityError as e:
        log.warning("store.conflict", kind=kind, operation=operation, error=str(e.orig))
        raise Conflict(f"{kind} {operation} violated an integrity constraint", cause=e) from e
    except SQLAlchemyError as e:
        log.error("store.error", kind=kind, operation=operation, exc_info=True)
        raise StoreError(f"{kind} {operation} failed", cause=e) from e
