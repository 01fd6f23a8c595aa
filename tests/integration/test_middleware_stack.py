"""Integration tests for the assembled middleware stack."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


@pytest.mark.asyncio
async def test_correlation_id_echoed_on_success_and_error_responses(app: FastAPI) -> None:
    """Caller correlation IDs are echoed and missing ones are generated."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        ok_response = await client.get("/api/health", headers={"x-correlation-id": "cid-test"})
        missing = await client.get("/api/missing")

    assert ok_response.status_code == 200
    assert ok_response.headers["x-correlation-id"] == "cid-test"
    assert missing.status_code == 404
    assert missing.headers.get("x-correlation-id")


@pytest.mark.asyncio
async def test_cors_headers_allow_any_origin_by_default(app: FastAPI) -> None:
    """Simple requests from a browser origin receive a permissive CORS header."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        response = await client.get("/api/test", headers={"origin": "https://shop.example"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json()["origin"] == "https://shop.example"


@pytest.mark.asyncio
async def test_cors_preflight_is_answered_without_routing(app: FastAPI) -> None:
    """OPTIONS preflight for the signup endpoint succeeds."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        response = await client.options(
            "/api/auth/register",
            headers={
                "origin": "https://shop.example",
                "access-control-request-method": "POST",
                "access-control-request-headers": "Content-Type",
            },
        )

    assert response.status_code == 200
    assert "POST" in response.headers["access-control-allow-methods"]
    assert response.headers["x-correlation-id"]


@pytest.mark.asyncio
async def test_cors_origins_follow_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configured origins replace the allow-all default."""
    from beatcrest.config import get_settings
    from beatcrest.main import create_app

    monkeypatch.setenv("CORS__ALLOW_ORIGINS", '["https://beatcrest.example"]')
    get_settings.cache_clear()
    try:
        app = create_app()
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://testserver"
        ) as client:
            allowed = await client.get("/", headers={"origin": "https://beatcrest.example"})
            denied = await client.get("/", headers={"origin": "https://other.example"})
    finally:
        get_settings.cache_clear()

    assert allowed.headers["access-control-allow-origin"] == "https://beatcrest.example"
    assert "access-control-allow-origin" not in denied.headers
