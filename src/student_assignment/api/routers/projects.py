"""
student_assignment.api.routers.projects

`/projects` resource.

Responsibilities:
- CRUD for projects; POST links students by name (creating missing students).
- List the students of a project.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from student_assignment.api.deps import project_service, settings_dep
from student_assignment.api.schemas import (
    ProjectIn,
    ProjectOut,
    ProjectPage,
    ProjectUpdate,
    StudentOut,
    to_project_out,
    to_student_out,
)
from student_assignment.errors import InvalidArgument
from student_assignment.services.projects import ProjectService
from student_assignment.settings import Settings

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("/{project_id}", response_model=ProjectOut)
async def get_project(
    project_id: uuid.UUID,
    svc: ProjectService = Depends(project_service),
) -> ProjectOut:
    return to_project_out(await svc.get(project_id))


@router.get("", response_model=ProjectPage)
async def list_projects(
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    svc: ProjectService = Depends(project_service),
    settings: Settings = Depends(settings_dep),
) -> ProjectPage:
    size = page_size if page_size is not None else settings.default_page_size
    projects = await svc.list(page_number, size)
    return ProjectPage(
        page_number=page_number,
        page_size=size,
        count=len(projects),
        projects=[to_project_out(p) for p in projects],
    )


@router.post("", response_model=ProjectOut, status_code=HTTP_201_CREATED)
async def create_project(
    request: Request,
    response: Response,
    body: ProjectIn,
    svc: ProjectService = Depends(project_service),
) -> ProjectOut:
    project = await svc.create(body.name, body.student_names)
    response.headers["Location"] = str(request.url_for("get_project", project_id=str(project.id)))
    return to_project_out(project)


@router.put("/{project_id}", status_code=HTTP_204_NO_CONTENT)
async def update_project(
    project_id: uuid.UUID,
    body: ProjectUpdate,
    svc: ProjectService = Depends(project_service),
) -> Response:
    if body.id != project_id:
        raise InvalidArgument("Project id in body does not match the path.")
    await svc.update(project_id, body.name, body.student_names)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.delete("/{project_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: uuid.UUID,
    svc: ProjectService = Depends(project_service),
) -> Response:
    await svc.delete(project_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.get("/{project_id}/students", response_model=list[StudentOut])
async def list_project_students(
    project_id: uuid.UUID,
    svc: ProjectService = Depends(project_service),
) -> list[StudentOut]:
    students = await svc.get_students(project_id)
    # An unknown project and a project without students both answer 404.
    if not students:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="No students found")
    return [to_student_out(s) for s in students]
