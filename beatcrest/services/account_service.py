"""Stateless signup and login services."""

from __future__ import annotations

import re
from functools import lru_cache
from uuid import NAMESPACE_URL, uuid5

import structlog

from beatcrest.config import get_settings
from beatcrest.schemas.user import AccountResponse, AccountType, LoginRequest, RegisterRequest

logger = structlog.get_logger(__name__)


class AccountServiceError(Exception):
    """Raised when a signup or login request fails validation."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def account_id_for(email: str) -> str:
    """Derive a stable account id from an email address."""
    return uuid5(NAMESPACE_URL, f"beatcrest:{email.strip().lower()}").hex


def display_name_from_email(email: str) -> str:
    """Turn an email local part into a display name."""
    local_part = email.split("@", 1)[0]
    cleaned = re.sub(r"[^a-zA-Z]+", " ", re.sub(r"[0-9]", "", local_part)).strip()
    return cleaned or "User"


class AccountService:
    """Validate account requests and echo the resulting identity.

    Nothing is stored: registering echoes the submitted profile and logging in
    derives the profile from the email address.
    """

    def __init__(
        self,
        min_password_length: int = 6,
        default_account_type: AccountType = "artist",
    ) -> None:
        self._min_password_length = min_password_length
        self._default_account_type: AccountType = default_account_type

    def register(self, payload: RegisterRequest) -> AccountResponse:
        """Validate a signup request and return the new account record."""
        username = payload.username.strip()
        email = payload.email.strip()
        if not username or not email or not payload.password:
            raise AccountServiceError("All fields are required")
        self._check_password(payload.password)

        account = AccountResponse(
            id=account_id_for(email),
            username=username,
            email=email,
            full_name=payload.full_name.strip() or username,
            phone=payload.phone.strip(),
            account_type=payload.account_type or self._default_account_type,
        )
        logger.info("account_registered", account_id=account.id, account_type=account.account_type)
        return account

    def login(self, payload: LoginRequest) -> AccountResponse:
        """Validate a login request and return the matching account record."""
        email = payload.email.strip()
        if not email or not payload.password:
            raise AccountServiceError("Email and password are required")
        self._check_password(payload.password)

        account = AccountResponse(
            id=account_id_for(email),
            username=email.split("@", 1)[0],
            email=email,
            full_name=display_name_from_email(email),
            account_type=self._default_account_type,
        )
        logger.info("account_logged_in", account_id=account.id)
        return account

    def _check_password(self, password: str) -> None:
        if len(password) < self._min_password_length:
            raise AccountServiceError(
                f"Password must be at least {self._min_password_length} characters"
            )


@lru_cache
def get_account_service() -> AccountService:
    """Build the account service from application settings."""
    settings = get_settings()
    return AccountService(
        min_password_length=settings.accounts.min_password_length,
        default_account_type=settings.accounts.default_account_type,
    )
