"""
student_assignment.services.reconciler

Relationship reconciliation.

Responsibilities:
- Turn a list of counterpart names into counterpart entities, creating the ones
  that do not exist yet, so every named counterpart exists exactly once afterwards.

Matching policy: exact string comparison (case-sensitive, no trimming).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from student_assignment.db.repositories.base import EntityRepo
from student_assignment.observability.logging import get_logger

log = get_logger(__name__)

C = TypeVar("C")


class Reconciler(Generic[C]):
    """
    Bound to the store of the counterpart kind, e.g. `Reconciler(ProjectRepo(session))`
    resolves project names for a student.

    Algorithm:
    1. fetch counterparts whose name is in `names`
    2. missing = names - fetched names (input order kept, duplicates collapsed)
    3. add a fresh counterpart (empty association set) per missing name
    4. re-fetch by the full name set so callers see store-assigned ids

    Two reconcilers racing on the same new name both see it as missing; the
    unique constraint on `name` makes the second insert fail with `Conflict`.
    """

    def __init__(self, store: EntityRepo[Any, Any]) -> None:
        self._store = store

    async def reconcile(self, names: Iterable[str]) -> list[C]:
        wanted = list(names)
        existing = await self._store.get_by_names(wanted)
        found = {e.name for e in existing}

        missing = [name for name in dict.fromkeys(wanted) if name not in found]
        for name in missing:
            await self._store.add(self._store.build(name))
        if missing:
            log.info("reconcile.created", kind=self._store.kind, names=missing)

        return await self._store.get_by_names(wanted)
