"""
student_assignment.services.base

Operations shared by the student and project services.

Responsibilities:
- Validate input before any store call.
- Run each write inside one `transaction` scope (commit or rollback).
- Keep the create (merge via reconciliation) vs update (replace) split explicit.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from student_assignment.db.models import NAME_MAX_LENGTH
from student_assignment.db.repositories.base import EntityRepo
from student_assignment.db.session import transaction
from student_assignment.errors import InvalidArgument, NotFound
from student_assignment.observability.logging import get_logger
from student_assignment.services.reconciler import Reconciler

log = get_logger(__name__)

E = TypeVar("E")
C = TypeVar("C")


def _require_name(kind: str, name: str | None) -> str:
    if not name:
        raise InvalidArgument(f"{kind.capitalize()} name is required.")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidArgument(f"{kind.capitalize()} name exceeds {NAME_MAX_LENGTH} characters.")
    return name


class EntityService(Generic[E, C]):
    def __init__(
        self,
        *,
        session: AsyncSession,
        store: EntityRepo[Any, Any],
        counterparts: EntityRepo[Any, Any],
        reconciler: Reconciler[C] | None = None,
    ) -> None:
        self._session = session
        self._store = store
        self._counterparts = counterparts
        self._reconciler = reconciler if reconciler is not None else Reconciler(counterparts)

    @property
    def kind(self) -> str:
        return self._store.kind

    async def create(self, name: str, counterpart_names: Sequence[str]) -> E:
        """
        Link-by-name create: reconcile counterpart names (creating missing ones),
        then persist the entity with the full counterpart set attached.
        """

        _require_name(self.kind, name)
        names = list(counterpart_names or [])
        for counterpart_name in names:
            _require_name(self._counterparts.kind, counterpart_name)
        if not names:
            raise InvalidArgument(f"{self._counterparts.kind.capitalize()} names cannot be empty.")

        async with transaction(self._session, kind=self.kind, operation="create"):
            linked = await self._reconciler.reconcile(names)
            entity = self._store.build(name)
            setattr(entity, self._store.relation, linked)
            entity = await self._store.add(entity)

        log.info(f"{self.kind}.created", id=entity.id, linked=len(linked))
        return entity

    async def get(self, entity_id: uuid.UUID) -> E:
        entity = await self._store.get_by_id(entity_id)
        if entity is None:
            raise NotFound(self.kind, entity_id)
        return entity

    async def list(self, page: int, page_size: int) -> list[E]:
        return await self._store.list(page, page_size)

    async def update(self, entity_id: uuid.UUID, name: str, counterpart_names: Sequence[str]) -> E:
        """
        Replace, not merge: the counterpart set becomes brand-new entities built
        straight from the names, without looking up existing ones. A name that
        already exists therefore hits the unique constraint and raises `Conflict`.
        """

        _require_name(self.kind, name)
        names = list(dict.fromkeys(counterpart_names or []))
        for counterpart_name in names:
            _require_name(self._counterparts.kind, counterpart_name)

        async with transaction(self._session, kind=self.kind, operation="update"):
            fresh = [self._counterparts.build(n) for n in names]
            entity = await self._store.update(entity_id, name=name, counterparts=fresh)

        log.info(f"{self.kind}.updated", id=entity_id, linked=len(fresh))
        return entity

    async def delete(self, entity_id: uuid.UUID) -> None:
        async with transaction(self._session, kind=self.kind, operation="delete"):
            if await self._store.get_by_id(entity_id) is None:
                raise NotFound(self.kind, entity_id)
            await self._store.delete(entity_id)

        log.info(f"{self.kind}.deleted", id=entity_id)

    async def get_counterparts_of(self, entity_id: uuid.UUID) -> list[C]:
        return await self._store.get_counterparts_of(entity_id)

    async def count_counterparts(self, entity_id: uuid.UUID) -> int:
        return await self._store.count_counterparts(entity_id)


# --- Module Notes -----------------------------------------------------------
# No automatic retry on Conflict: retrying a racing create could link a different
# entity than the caller named.
