"""Shared integration-test fixtures for the BeatCrest API."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI


def _clear_dependency_caches() -> None:
    """Clear lru-cached settings and services between tests."""
    from beatcrest.config import get_settings
    from beatcrest.services.account_service import get_account_service

    get_settings.cache_clear()
    get_account_service.cache_clear()


@pytest.fixture
def integration_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[dict[str, str]]:
    """Configure app settings through environment variables."""
    env_values = {
        "APP__ENVIRONMENT": "production",
        "APP__SERVICE": "beatcrest-test",
        "APP__LOG_LEVEL": "WARNING",
        "ACCOUNTS__MIN_PASSWORD_LENGTH": "6",
        "ACCOUNTS__DEFAULT_ACCOUNT_TYPE": "artist",
    }
    for key, value in env_values.items():
        monkeypatch.setenv(key, value)
    _clear_dependency_caches()
    yield env_values
    _clear_dependency_caches()


@pytest.fixture
def app(integration_env: dict[str, str]) -> FastAPI:
    """Build a fresh application using the integration settings."""
    from beatcrest.main import create_app

    return create_app()
