"""
tests.test_repositories

Entity store contract: validation, pagination, association queries, error translation.
"""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from conftest import count_rows, project_service
from student_assignment.db.models import Project, Student, project_students
from student_assignment.db.repositories.base import NIL_UUID
from student_assignment.db.repositories.projects import ProjectRepo
from student_assignment.db.repositories.students import StudentRepo
from student_assignment.errors import Conflict, InvalidArgument, NotFound, StoreError


@pytest.mark.asyncio
async def test_add_assigns_id_and_empty_association(session) -> None:
    repo = StudentRepo(session)
    student = await repo.add(repo.build("Ann"))

    assert isinstance(student.id, uuid.UUID)
    assert student.projects == []
    fetched = await repo.get_by_id(student.id)
    assert fetched is student


@pytest.mark.asyncio
async def test_add_none_is_invalid(session) -> None:
    with pytest.raises(InvalidArgument):
        await StudentRepo(session).add(None)


@pytest.mark.asyncio
async def test_add_duplicate_name_raises_conflict_with_cause(session) -> None:
    repo = ProjectRepo(session)
    await repo.add(repo.build("Alpha"))
    await session.commit()

    with pytest.raises(Conflict) as exc_info:
        await repo.add(repo.build("Alpha"))
    assert isinstance(exc_info.value, StoreError)
    assert isinstance(exc_info.value.cause, IntegrityError)
    assert exc_info.value.__cause__ is exc_info.value.cause


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(session) -> None:
    assert await StudentRepo(session).get_by_id(uuid.uuid4()) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_id", [None, NIL_UUID])
async def test_empty_ids_are_invalid(session, bad_id) -> None:
    repo = ProjectRepo(session)
    with pytest.raises(InvalidArgument):
        await repo.get_by_id(bad_id)
    with pytest.raises(InvalidArgument):
        await repo.delete(bad_id)
    with pytest.raises(InvalidArgument):
        await repo.count_counterparts(bad_id)


@pytest.mark.asyncio
@pytest.mark.parametrize(("page", "page_size"), [(0, 10), (1, 0), (-1, 5), (2, -3)])
async def test_list_rejects_non_positive_paging(session, page, page_size) -> None:
    with pytest.raises(InvalidArgument):
        await StudentRepo(session).list(page, page_size)


@pytest.mark.asyncio
async def test_list_pages_are_bounded_and_disjoint(session) -> None:
    repo = StudentRepo(session)
    for i in range(23):
        await repo.add(repo.build(f"student-{i:02d}"))
    await session.commit()

    pages = [await repo.list(page, 10) for page in (1, 2, 3, 4)]

    assert [len(p) for p in pages] == [10, 10, 3, 0]
    ids = [s.id for page in pages for s in page]
    assert len(ids) == len(set(ids)) == 23
    assert pages[0][0].name == "student-00"


@pytest.mark.asyncio
async def test_get_by_names_rejects_empty(session) -> None:
    repo = ProjectRepo(session)
    with pytest.raises(InvalidArgument):
        await repo.get_by_names([])
    with pytest.raises(InvalidArgument):
        await repo.get_by_names(None)


@pytest.mark.asyncio
async def test_get_by_names_is_exact_match(session) -> None:
    repo = StudentRepo(session)
    for name in ("Ann", "ann", "Bob"):
        await repo.add(repo.build(name))

    found = await repo.get_by_names(["Ann", "Bob", "Bob", " Ann", "Zed"])

    assert sorted(s.name for s in found) == ["Ann", "Bob"]


@pytest.mark.asyncio
async def test_update_missing_id_raises_not_found(session) -> None:
    with pytest.raises(NotFound):
        await StudentRepo(session).update(uuid.uuid4(), name="Ghost", counterparts=[])


@pytest.mark.asyncio
async def test_delete_missing_id_is_noop(session) -> None:
    await StudentRepo(session).delete(uuid.uuid4())


@pytest.mark.asyncio
async def test_delete_removes_links_but_not_counterparts(session_factory) -> None:
    async with session_factory() as s:
        project = await project_service(s).create("Alpha", ["Ann", "Bob"])
        ann = next(st for st in project.students if st.name == "Ann")

    async with session_factory() as s:
        await StudentRepo(s).delete(ann.id)
        await s.commit()

    async with session_factory() as s:
        assert await StudentRepo(s).get_by_id(ann.id) is None
        assert await count_rows(s, Project, "Alpha") == 1
        students = await ProjectRepo(s).get_students(project.id)
        assert [st.name for st in students] == ["Bob"]
        links = await s.execute(project_students.select())
        assert len(links.all()) == 1


@pytest.mark.asyncio
async def test_association_is_symmetric(session_factory) -> None:
    async with session_factory() as s:
        project = await project_service(s).create("Alpha", ["Ann", "Bob"])

    async with session_factory() as s:
        students = StudentRepo(s)
        projects = ProjectRepo(s)
        for student in await projects.get_students(project.id):
            assert [p.id for p in await students.get_projects(student.id)] == [project.id]
            assert await students.get_projects_count(student.id) == 1
        assert await projects.get_students_count(project.id) == 2


@pytest.mark.asyncio
async def test_count_for_unknown_entity_is_zero(session) -> None:
    assert await StudentRepo(session).get_projects_count(uuid.uuid4()) == 0
    assert await count_rows(session, Student) == 0


@pytest.mark.asyncio
async def test_link_to_concurrently_deleted_student_is_conflict(session_factory) -> None:
    async with session_factory() as s:
        await project_service(s).create("Alpha", ["Ann"])

    async with session_factory() as s1:
        (ann,) = await StudentRepo(s1).get_by_names(["Ann"])

        async with session_factory() as s2:
            await StudentRepo(s2).delete(ann.id)
            await s2.commit()

        repo = ProjectRepo(s1)
        beta = repo.build("Beta")
        beta.students = [ann]
        with pytest.raises(Conflict):
            await repo.add(beta)
        await s1.rollback()

    async with session_factory() as s:
        assert await StudentRepo(s).get_projects_count(ann.id) == 0
        assert await count_rows(s, Project, "Beta") == 0
        links = await s.execute(project_students.select())
        assert links.all() == []
