"""
student_assignment.api.routers.students

`/students` resource.

Responsibilities:
- CRUD for students; POST links projects by name (creating missing projects).
- Count the projects of a student.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Request, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from student_assignment.api.deps import settings_dep, student_service
from student_assignment.api.schemas import (
    StudentIn,
    StudentOut,
    StudentPage,
    StudentUpdate,
    to_student_out,
)
from student_assignment.errors import InvalidArgument
from student_assignment.services.students import StudentService
from student_assignment.settings import Settings

router = APIRouter(prefix="/students", tags=["students"])


@router.get("/{student_id}", response_model=StudentOut)
async def get_student(
    student_id: uuid.UUID,
    svc: StudentService = Depends(student_service),
) -> StudentOut:
    return to_student_out(await svc.get(student_id))


@router.get("", response_model=StudentPage)
async def list_students(
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    svc: StudentService = Depends(student_service),
    settings: Settings = Depends(settings_dep),
) -> StudentPage:
    size = page_size if page_size is not None else settings.default_page_size
    students = await svc.list(page_number, size)
    return StudentPage(
        page_number=page_number,
        page_size=size,
        count=len(students),
        students=[to_student_out(s) for s in students],
    )


@router.post("", response_model=StudentOut, status_code=HTTP_201_CREATED)
async def create_student(
    request: Request,
    response: Response,
    body: StudentIn,
    svc: StudentService = Depends(student_service),
) -> StudentOut:
    student = await svc.create(body.name, body.project_names)
    response.headers["Location"] = str(request.url_for("get_student", student_id=str(student.id)))
    return to_student_out(student)


@router.put("/{student_id}", status_code=HTTP_204_NO_CONTENT)
async def update_student(
    student_id: uuid.UUID,
    body: StudentUpdate,
    svc: StudentService = Depends(student_service),
) -> Response:
    if body.id != student_id:
        raise InvalidArgument("Student id in body does not match the path.")
    await svc.update(student_id, body.name, body.project_names)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.delete("/{student_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: uuid.UUID,
    svc: StudentService = Depends(student_service),
) -> Response:
    await svc.delete(student_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.get("/{student_id}/projects-count", response_model=int)
async def get_projects_count(
    student_id: uuid.UUID,
    svc: StudentService = Depends(student_service),
) -> int:
    return await svc.get_projects_count(student_id)
