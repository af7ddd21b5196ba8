"""
student_assignment.api.errors

Mapping of the domain error taxonomy to HTTP responses.

Responsibilities:
- InvalidArgument / request validation -> 400
- NotFound -> 404
- Conflict -> 409
- StoreError -> 500 with a generic body (cause is logged, never returned)
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from student_assignment.errors import Conflict, InvalidArgument, NotFound, StoreError
from student_assignment.observability.logging import get_logger

log = get_logger(__name__)


async def _invalid_argument(_: Request, exc: InvalidArgument) -> JSONResponse:
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request.", "errors": _jsonable_errors(exc)},
    )


async def _not_found(_: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.kind.capitalize()} not found"},
    )


async def _conflict(_: Request, exc: Conflict) -> JSONResponse:
    return JSONResponse(status_code=HTTP_409_CONFLICT, content={"detail": str(exc)})


async def _store_error(_: Request, exc: StoreError) -> JSONResponse:
    log.error("store.failure", error=str(exc), cause=repr(exc.cause), exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    # Keep only the stable, serializable parts of pydantic's error entries.
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgument, _invalid_argument)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(NotFound, _not_found)
    # Starlette resolves handlers by MRO, so Conflict wins over its StoreError base.
    app.add_exception_handler(Conflict, _conflict)
    app.add_exception_handler(StoreError, _store_error)
