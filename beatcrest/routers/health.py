"""Health and connectivity probe endpoints."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from beatcrest.config import Settings, get_settings

router = APIRouter(tags=["health"])


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


@router.get("/")
async def root(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, Any]:
    """Report that the API process is up."""
    return {
        "message": "BeatCrest API is running!",
        "timestamp": _timestamp(),
        "cors": "enabled",
        "server": settings.app.service,
    }


@router.get("/ping")
async def ping(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, Any]:
    """Cheapest possible round trip."""
    return {"message": "pong", "timestamp": _timestamp(), "server": settings.app.service}


@router.get("/api/test")
async def api_test(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, Any]:
    """Connectivity probe used by storefront clients; echoes the caller origin."""
    return {
        "message": "API test successful!",
        "timestamp": _timestamp(),
        "cors": "enabled",
        "origin": request.headers.get("origin"),
        "server": settings.app.service,
    }


@router.get("/api/health")
async def health(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "OK",
        "message": "Server is healthy",
        "timestamp": _timestamp(),
        "server": settings.app.service,
        "environment": settings.app.environment,
    }
