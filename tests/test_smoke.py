"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.
"""

from __future__ import annotations

import httpx
import pytest

from student_assignment.api.app import create_app
from student_assignment.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(settings: Settings) -> None:
    app = create_app(settings=settings)

    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"

            r = await client.get("/readyz")
            assert r.status_code == 200
            assert r.json() == {"status": "ready", "students": 0, "projects": 0}
            assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(settings: Settings) -> None:
    app = create_app(settings=settings)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
            assert r.headers["x-request-id"] == "abc-123"
