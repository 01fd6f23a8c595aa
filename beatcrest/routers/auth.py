"""Signup and login routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from beatcrest.error_handlers import error_response
from beatcrest.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from beatcrest.services.account_service import (
    AccountService,
    AccountServiceError,
    get_account_service,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> AuthResponse | JSONResponse:
    """Create an account for the storefront signup form."""
    try:
        account = account_service.register(payload)
    except AccountServiceError as exc:
        return error_response(exc.status_code, exc.detail)
    return AuthResponse(message="User registered successfully", user=account)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> AuthResponse | JSONResponse:
    """Sign in with email and password."""
    try:
        account = account_service.login(payload)
    except AccountServiceError as exc:
        return error_response(exc.status_code, exc.detail)
    return AuthResponse(message="Login successful", user=account)
