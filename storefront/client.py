"""Async HTTP client for the BeatCrest API."""

from __future__ import annotations

from typing import Any

import httpx

from storefront.exceptions import BeatCrestResponseError, BeatCrestUnavailableError
from storefront.types import AccountPayload, BeatPayload

DEFAULT_TIMEOUT = httpx.Timeout(connect=2.0, read=10.0, write=5.0, pool=5.0)


class BeatCrestClient:
    """Async client for BeatCrest account, catalog, and probe endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: httpx.Timeout | float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create client with sane defaults and optional injected transport."""
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout or DEFAULT_TIMEOUT,
        )

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        full_name: str = "",
        phone: str = "",
    ) -> AccountPayload:
        """Create an account and return the account record."""
        response = await self._request(
            "POST",
            "/api/auth/register",
            json={
                "username": username,
                "email": email,
                "password": password,
                "full_name": full_name,
                "phone": phone,
            },
        )
        return self._account(response)

    async def login(self, email: str, password: str) -> AccountPayload:
        """Authenticate with email and password and return the account record."""
        response = await self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        return self._account(response)

    async def list_beats(self) -> list[BeatPayload]:
        """Fetch the beat catalog."""
        response = await self._request("GET", "/api/beats")
        payload = self._json_object(response)
        beats = payload.get("beats")
        if not isinstance(beats, list):
            raise BeatCrestResponseError("Invalid beats response payload.", response.status_code)
        return beats

    async def get_beat(self, beat_id: int) -> BeatPayload:
        """Fetch one catalog beat by id."""
        response = await self._request("GET", f"/api/beats/{beat_id}")
        payload = self._json_object(response)
        beat = payload.get("beat")
        if not isinstance(beat, dict):
            raise BeatCrestResponseError("Invalid beat response payload.", response.status_code)
        return beat  # type: ignore[return-value]

    async def check_health(self) -> dict[str, Any]:
        """Call the health endpoint and require an OK status."""
        response = await self._request("GET", "/api/health")
        payload = self._json_object(response)
        if payload.get("status") != "OK":
            raise BeatCrestResponseError("Health check did not report OK.", response.status_code)
        return payload

    async def test_connection(self) -> dict[str, Any]:
        """Call the API test endpoint used for connectivity probes."""
        response = await self._request("GET", "/api/test")
        return self._json_object(response)

    async def aclose(self) -> None:
        """Close underlying HTTP client if owned by this instance."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> BeatCrestClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        """Exit async context manager and close managed resources."""
        del exc_type, exc, tb
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Execute request and normalize upstream failures."""
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            raise BeatCrestUnavailableError() from exc

        if response.status_code >= 500:
            raise BeatCrestUnavailableError()
        if response.status_code >= 400:
            raise BeatCrestResponseError(
                self._error_message(response)
                or f"BeatCrest request failed with status {response.status_code}.",
                response.status_code,
            )
        return response

    def _account(self, response: httpx.Response) -> AccountPayload:
        """Extract the account record from an auth response."""
        payload = self._json_object(response)
        user = payload.get("user")
        if not isinstance(user, dict):
            raise BeatCrestResponseError("Invalid account response payload.", response.status_code)
        return user  # type: ignore[return-value]

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        """Return the server-provided error message, if any."""
        try:
            payload = response.json()
        except ValueError:
            return None
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return None

    @staticmethod
    def _json_object(response: httpx.Response) -> dict[str, Any]:
        """Return response JSON as object."""
        try:
            payload = response.json()
        except ValueError as exc:
            raise BeatCrestResponseError(
                "BeatCrest API returned invalid JSON.", response.status_code
            ) from exc
        if not isinstance(payload, dict):
            raise BeatCrestResponseError(
                "BeatCrest API returned invalid JSON object.", response.status_code
            )
        return payload
