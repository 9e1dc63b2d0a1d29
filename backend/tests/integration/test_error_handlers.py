"""Tests for the envelope error handlers on a bare FastAPI app."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from myblog.presentation.api.error_handlers import register_error_handlers


def _app_with_failing_route() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("db password is hunter2")

    return app


@pytest.mark.asyncio
async def test_unexpected_error_is_internal_error_envelope():
    transport = ASGITransport(app=_app_with_failing_route(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "code": 10000,
        "message": "An internal error occurred. Please try again later.",
        "data": None,
    }
    assert "hunter2" not in response.text


@pytest.mark.asyncio
async def test_unexpected_error_is_reraised_after_response():
    transport = ASGITransport(app=_app_with_failing_route())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        with pytest.raises(RuntimeError):
            await client.get("/boom")
