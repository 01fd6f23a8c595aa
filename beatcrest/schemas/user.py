"""Signup and login request/response schemas."""

from typing import Literal

from pydantic import BaseModel, Field

AccountType = Literal["artist", "producer", "buyer"]


class RegisterRequest(BaseModel):
    """Account creation request payload."""

    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=256)
    full_name: str = Field(default="", max_length=128)
    phone: str = Field(default="", max_length=32)
    account_type: AccountType | None = None


class LoginRequest(BaseModel):
    """Password login request payload."""

    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=256)


class AccountResponse(BaseModel):
    """Account record echoed back to the storefront."""

    id: str
    username: str
    email: str
    full_name: str
    phone: str = ""
    account_type: AccountType
    is_verified: bool = False


class AuthResponse(BaseModel):
    """Register/login response envelope."""

    message: str
    user: AccountResponse
