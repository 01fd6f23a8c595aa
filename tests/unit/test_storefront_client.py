"""Unit tests for the storefront BeatCrestClient."""

from __future__ import annotations

import json

import httpx
import pytest

from storefront.client import BeatCrestClient
from storefront.exceptions import BeatCrestResponseError, BeatCrestUnavailableError


def _client(http_client: httpx.AsyncClient) -> BeatCrestClient:
    return BeatCrestClient(base_url="https://api.beatcrest.local", http_client=http_client)


@pytest.mark.asyncio
async def test_register_posts_form_fields_and_returns_account() -> None:
    """register sends the profile and returns the account record."""

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/api/auth/register"
        body = json.loads(request.content)
        assert body == {
            "username": "janedoe",
            "email": "jane@example.com",
            "password": "abc123",
            "full_name": "Jane Doe",
            "phone": "",
        }
        return httpx.Response(
            status_code=201,
            json={
                "message": "User registered successfully",
                "user": {"id": "acct-1", "username": "janedoe", "email": "jane@example.com"},
            },
        )

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        account = await _client(http_client).register(
            username="janedoe",
            email="jane@example.com",
            password="abc123",
            full_name="Jane Doe",
        )

    assert account["id"] == "acct-1"
    assert account["username"] == "janedoe"


@pytest.mark.asyncio
async def test_login_surfaces_server_error_message() -> None:
    """4xx responses carry the server's error message and status code."""

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/auth/login"
        return httpx.Response(status_code=401, json={"error": "Invalid credentials"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestResponseError) as exc_info:
            await _client(http_client).login(email="jane@example.com", password="abc123")

    assert exc_info.value.detail == "Invalid credentials"
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_client_error_without_json_uses_status_message() -> None:
    """Non-JSON error bodies fall back to a status-based message."""

    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=403, text="forbidden")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestResponseError) as exc_info:
            await _client(http_client).test_connection()

    assert exc_info.value.detail == "BeatCrest request failed with status 403."


@pytest.mark.asyncio
async def test_network_error_raises_unavailable() -> None:
    """Network failures map to BeatCrestUnavailableError."""

    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("network down", request=request)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestUnavailableError):
            await _client(http_client).check_health()


@pytest.mark.asyncio
async def test_server_error_raises_unavailable() -> None:
    """5xx responses map to BeatCrestUnavailableError."""

    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=503, json={"error": "Registration failed"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestUnavailableError):
            await _client(http_client).register("jane", "jane@example.com", "abc123")


@pytest.mark.asyncio
async def test_check_health_requires_ok_status() -> None:
    """A health payload without status OK is rejected."""

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/health"
        return httpx.Response(status_code=200, json={"status": "DEGRADED"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestResponseError):
            await _client(http_client).check_health()


@pytest.mark.asyncio
async def test_list_beats_rejects_malformed_payload() -> None:
    """Catalog responses must carry a beats list."""

    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, json={"items": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestResponseError):
            await _client(http_client).list_beats()


@pytest.mark.asyncio
async def test_get_beat_rejects_invalid_json() -> None:
    """Invalid JSON bodies raise BeatCrestResponseError."""

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/beats/3"
        return httpx.Response(status_code=200, text="<html>")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        with pytest.raises(BeatCrestResponseError):
            await _client(http_client).get_beat(3)


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed() -> None:
    """Closing the client leaves a caller-owned transport open."""
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    async with httpx.AsyncClient(
        base_url="https://api.beatcrest.local", transport=transport
    ) as http_client:
        async with _client(http_client):
            pass
        assert http_client.is_closed is False
