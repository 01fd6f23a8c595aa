"""Account collaborators injected into the signup form controller."""

from __future__ import annotations

import asyncio

import structlog

from storefront.client import BeatCrestClient
from storefront.types import AccountPayload, Authenticator, FormFields, Mode

logger = structlog.get_logger(__name__)


def simulated_authenticator(delay_seconds: float = 1.0) -> Authenticator:
    """Return a placeholder authenticator that waits and always succeeds."""

    async def authenticate(mode: Mode, form: FormFields) -> None:
        logger.debug("simulated_account_call", mode=mode.value, delay_seconds=delay_seconds)
        await asyncio.sleep(delay_seconds)

    return authenticate


def api_authenticator(client: BeatCrestClient) -> Authenticator:
    """Return an authenticator backed by the BeatCrest auth endpoints."""

    async def authenticate(mode: Mode, form: FormFields) -> AccountPayload:
        if mode is Mode.SIGN_UP:
            return await client.register(
                username=form.username,
                email=form.email,
                password=form.password,
                full_name=form.full_name,
                phone=form.phone,
            )
        return await client.login(email=form.email, password=form.password)

    return authenticate
