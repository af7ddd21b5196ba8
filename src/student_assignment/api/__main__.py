"""
student_assignment.api.__main__

Entrypoint for running the API via `python -m student_assignment.api`
(or the `student-assignment-api` console script).
"""

from __future__ import annotations

import uvicorn

from student_assignment.api.app import create_app
from student_assignment.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
