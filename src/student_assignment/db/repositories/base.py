"""
student_assignment.db.repositories.base

Generic entity store shared by the student and project repositories.

Responsibilities:
- Implement the store contract once, parameterized over an entity model and its
  counterpart model (lookup by id/names, paginated scan, add, update, delete,
  association queries).
- Validate arguments before touching the database.
- Translate engine failures into `Conflict` / `StoreError`.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from typing import ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from student_assignment.db.base import Base
from student_assignment.db.errors import translate_store_errors
from student_assignment.db.models import project_students
from student_assignment.errors import InvalidArgument, NotFound

E = TypeVar("E", bound=Base)
C = TypeVar("C", bound=Base)

NIL_UUID = uuid.UUID(int=0)


class EntityRepo(Generic[E, C]):
    """
    Subclasses bind:
    - `model` / `counterpart`: the two ORM classes
    - `relation`: attribute on `model` holding counterparts
    - `back_relation`: attribute on `counterpart` holding models
    - `join_column`: this kind's column in `project_students`
    - `kind`: label used in error messages and logs
    """

    model: ClassVar[type]
    counterpart: ClassVar[type]
    relation: ClassVar[str]
    back_relation: ClassVar[str]
    join_column: ClassVar[str]
    kind: ClassVar[str]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _check_id(self, entity_id: uuid.UUID | None) -> None:
        if entity_id is None or entity_id == NIL_UUID:
            raise InvalidArgument(f"Invalid {self.kind} id.")

    def build(self, name: str) -> E:
        # New entities always start with an initialized (empty) association set so that
        # touching the collection later never triggers a lazy load.
        return self.model(name=name, **{self.relation: []})

    async def get_by_id(self, entity_id: uuid.UUID) -> E | None:
        self._check_id(entity_id)
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .options(selectinload(getattr(self.model, self.relation)))
            .execution_options(populate_existing=True)
        )
        with translate_store_errors(self.kind, "get"):
            return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list(self, page: int, page_size: int) -> list[E]:
        # 1-based pages; (name, id) ordering keeps pages disjoint without concurrent writes.
        if page <= 0 or page_size <= 0:
            raise InvalidArgument("Page number and page size must be greater than zero.")
        stmt = (
            select(self.model)
            .order_by(self.model.name, self.model.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
            .options(selectinload(getattr(self.model, self.relation)))
            .execution_options(populate_existing=True)
        )
        with translate_store_errors(self.kind, "list"):
            return list((await self._session.execute(stmt)).scalars().all())

    async def add(self, entity: E | None) -> E:
        if entity is None:
            raise InvalidArgument(f"{self.kind.capitalize()} cannot be None.")
        with translate_store_errors(self.kind, "add"):
            self._session.add(entity)
            await self._session.flush()
        return entity

    async def update(self, entity_id: uuid.UUID, *, name: str, counterparts: Sequence[C]) -> E:
        """
        Overwrite the name and replace the whole counterpart collection.
        Counterparts that are transient get inserted on flush.
        """

        existing = await self.get_by_id(entity_id)
        if existing is None:
            raise NotFound(self.kind, entity_id)
        existing.name = name
        setattr(existing, self.relation, list(counterparts))
        with translate_store_errors(self.kind, "update"):
            await self._session.flush()
        return existing

    async def delete(self, entity_id: uuid.UUID) -> None:
        # Missing ids are a no-op. Association rows go with the entity; counterparts stay.
        existing = await self.get_by_id(entity_id)
        if existing is None:
            return
        with translate_store_errors(self.kind, "delete"):
            await self._session.delete(existing)
            await self._session.flush()

    async def get_by_names(self, names: Iterable[str] | None) -> list[E]:
        # Exact, case-sensitive match on the natural key.
        wanted = set(names) if names is not None else set()
        if not wanted:
            raise InvalidArgument(f"{self.kind.capitalize()} names cannot be null or empty.")
        stmt = (
            select(self.model)
            .where(self.model.name.in_(wanted))
            .order_by(self.model.name)
            .options(selectinload(getattr(self.model, self.relation)))
            .execution_options(populate_existing=True)
        )
        with translate_store_errors(self.kind, "get by names"):
            return list((await self._session.execute(stmt)).scalars().all())

    async def get_counterparts_of(self, entity_id: uuid.UUID) -> list[C]:
        self._check_id(entity_id)
        back = getattr(self.counterpart, self.back_relation)
        stmt = (
            select(self.counterpart)
            .where(back.any(self.model.id == entity_id))
            .order_by(self.counterpart.name)
            .options(selectinload(back))
            .execution_options(populate_existing=True)
        )
        with translate_store_errors(self.kind, "get counterparts"):
            return list((await self._session.execute(stmt)).scalars().all())

    async def count_counterparts(self, entity_id: uuid.UUID) -> int:
        # Counts join rows directly; an unknown id simply has none.
        self._check_id(entity_id)
        stmt = (
            select(func.count())
            .select_from(project_students)
            .where(project_students.c[self.join_column] == entity_id)
        )
        with translate_store_errors(self.kind, "count counterparts"):
            return int((await self._session.execute(stmt)).scalar_one())


# --- Module Notes -----------------------------------------------------------
# Repositories only flush; commit/rollback belongs to the service layer's
# `db.session.transaction` scope.
